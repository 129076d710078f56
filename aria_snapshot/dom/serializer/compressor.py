"""Line-level compaction of YAML aria snapshots embedded in tool output."""

import logging
import re

logger = logging.getLogger(__name__)

YAML_SECTION_PATTERN = re.compile(r'yaml\n([\s\S]*?)(?:\n\n|\n$|$)')
ELEMENT_TYPE_PATTERN = re.compile(r'^(\w+)')
QUOTED_TEXT_PATTERN = re.compile(r'"([^"]*)"')
REF_PATTERN = re.compile(r'\[ref=([^\]]+)\]')
ATTRIBUTE_PATTERN = re.compile(r'\[([^\]]+)\]')

ELEMENT_TYPE_ABBREVIATIONS = {
	'generic': 'g',
	'button': 'b',
	'link': 'l',
	'img': 'i',
	'navigation': 'nav',
	'list': 'ul',
	'listitem': 'li',
	'combobox': 'cb',
	'searchbox': 'sb',
	'tooltip': 'tltp',
	'heading': 'h',
	'paragraph': 'p',
	'table': 'tbl',
	'row': 'tr',
	'cell': 'cl',
	'rowheader': 'rh',
	'gridcell': 'gcl',
	'columnheader': 'ch',
	'rowgroup': 'rgrp',
	'article': 'art',
	'separator': 'hr',
	'treeitem': 'ti',
	'tablist': 'tlst',
	'tabpanel': 'tpnl',
	'group': 'grp',
	'status': 'stat',
}

ATTRIBUTE_ABBREVIATIONS = {
	'cursor': 'cur',
	'disabled': 'dis',
	'selected': 'sel',
	'level': 'lv',
}


def compress_snapshot_text(text: str) -> str:
	"""Replace the `yaml` section of a tool response with its compressed form.

	Text without a yaml section, or one that fails to compress, is returned as is.
	"""
	match = YAML_SECTION_PATTERN.search(text)
	if not match:
		return text

	try:
		compressed = compress_accessibility_tree(match.group(1))
	except Exception as e:
		logger.warning(f'Failed to compress YAML snapshot section: {type(e).__name__}: {e}')
		return text

	return text.replace(match.group(0), f'accessibility-tree\n{compressed}\n\n', 1)


def compress_accessibility_tree(yaml_content: str) -> str:
	compressed = []
	for line in yaml_content.split('\n'):
		if not line.strip():
			continue
		compressed_line = compress_line(line)
		if compressed_line:
			compressed.append(compressed_line)
	return '\n'.join(compressed)


def compress_line(line: str) -> str | None:
	"""Compress one `- role "name" [attr] [ref=x]:` line, or None for non-list lines"""
	stripped = line.lstrip()
	if not stripped:
		return None
	indent = ' ' * ((len(line) - len(stripped)) // 2)

	content = stripped.rstrip()
	if not content.startswith('-'):
		return None
	content = content[1:].strip()

	element_type = ''
	type_match = ELEMENT_TYPE_PATTERN.match(content)
	if type_match:
		element_type = ELEMENT_TYPE_ABBREVIATIONS.get(type_match.group(1), type_match.group(1))
		content = content[type_match.end() :].strip()

	text = ''
	text_match = QUOTED_TEXT_PATTERN.search(content)
	if text_match:
		text = f' #{text_match.group(1)}'
		content = content.replace(text_match.group(0), '', 1).strip()

	ref = ''
	ref_match = REF_PATTERN.search(content)
	if ref_match:
		ref = f' ref={ref_match.group(1)}'
		content = content.replace(ref_match.group(0), '', 1).strip()

	attributes = []
	for attribute in ATTRIBUTE_PATTERN.findall(content):
		if '=' in attribute:
			name, _, value = attribute.partition('=')
			attributes.append(f'{_compress_attribute(name.strip())}:{value.strip()}')
		elif attribute != 'active':
			attributes.append(_compress_attribute(attribute))

	attribute_text = f' {" ".join(attributes)}' if attributes else ''
	result = f'{indent}{element_type}{text}{ref}{attribute_text}'
	if not result.strip():
		return None
	return result[:-1] if result.endswith(':') else result


def _compress_attribute(name: str) -> str:
	return ATTRIBUTE_ABBREVIATIONS.get(name, name)
