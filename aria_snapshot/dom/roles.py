"""
Structural line parsing for accessibility snapshots.

A role line is a label whose first whitespace-delimited token is a known
accessibility role, optionally followed by a double-quoted accessible name:

	button "Submit" [ref=e12] [cursor=pointer]
	listitem
	link "Models"

Anything else (data fields like `/url`, pseudo keys like `text`, free text) is an
opaque key with no locator semantics.
"""

import re

from aria_snapshot.dom.views import OpaqueKey, RoleLine

ROLE_LINE_PATTERN = re.compile(r'^(\S+)(?:\s+"([^"]+)")?')

# ARIA 1.2 roles plus the extra roles Playwright emits in aria snapshots
ARIA_ROLES = frozenset(
	{
		'alert',
		'alertdialog',
		'application',
		'article',
		'banner',
		'blockquote',
		'button',
		'caption',
		'cell',
		'checkbox',
		'code',
		'columnheader',
		'combobox',
		'complementary',
		'contentinfo',
		'definition',
		'deletion',
		'dialog',
		'directory',
		'document',
		'emphasis',
		'feed',
		'figure',
		'form',
		'generic',
		'grid',
		'gridcell',
		'group',
		'heading',
		'img',
		'insertion',
		'link',
		'list',
		'listbox',
		'listitem',
		'log',
		'main',
		'marquee',
		'math',
		'menu',
		'menubar',
		'menuitem',
		'menuitemcheckbox',
		'menuitemradio',
		'meter',
		'navigation',
		'none',
		'note',
		'option',
		'paragraph',
		'presentation',
		'progressbar',
		'radio',
		'radiogroup',
		'region',
		'row',
		'rowgroup',
		'rowheader',
		'scrollbar',
		'search',
		'searchbox',
		'separator',
		'slider',
		'spinbutton',
		'status',
		'strong',
		'subscript',
		'superscript',
		'switch',
		'tab',
		'table',
		'tablist',
		'tabpanel',
		'term',
		'textbox',
		'time',
		'timer',
		'toolbar',
		'tooltip',
		'tree',
		'treegrid',
		'treeitem',
	}
)


def parse_structural_line(label: str) -> RoleLine | OpaqueKey:
	"""Classify a snapshot label as a role line or an opaque key.

	Role matching is case-insensitive but the returned role keeps the original
	casing. Labels starting with `/` are data fields and never role lines.
	"""
	if label.startswith('/'):
		return OpaqueKey(label)

	match = ROLE_LINE_PATTERN.match(label)
	if not match:
		return OpaqueKey(label)

	role, name = match.group(1), match.group(2)
	if role.lower() not in ARIA_ROLES:
		return OpaqueKey(label)

	return RoleLine(role=role, accessible_name=name)


def parse_role_line(label: str) -> RoleLine | None:
	"""Shorthand for callers that only care about role lines"""
	parsed = parse_structural_line(label)
	return parsed if isinstance(parsed, RoleLine) else None


def is_role_line(label: str) -> bool:
	return isinstance(parse_structural_line(label), RoleLine)
