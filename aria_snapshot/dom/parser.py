"""
Deserialize raw accessibility snapshot text into a TreeValue.

Aria snapshots are YAML lists of role lines:

	- generic [ref=e1]:
	  - link "Models" [ref=e7]:
	    - /url: /models
	  - textbox "Search models"

They are loaded with PyYAML's BaseLoader so that every scalar stays the exact
text the browser produced (no implicit ints, booleans or timestamps) and every
mapping key is a string.
"""

import logging

import yaml

from aria_snapshot.dom.views import TreeValue
from aria_snapshot.exceptions import SnapshotParseError

logger = logging.getLogger(__name__)


def parse_snapshot(text: str) -> TreeValue:
	"""Parse aria snapshot YAML into a TreeValue.

	Empty or whitespace-only input yields an empty list.

	Raises:
		SnapshotParseError: If the text is not valid YAML
	"""
	if not text or not text.strip():
		return []

	try:
		parsed = yaml.load(text, Loader=yaml.BaseLoader)
	except yaml.YAMLError as e:
		raise SnapshotParseError(f'Failed to parse accessibility snapshot: {e}') from e

	if parsed is None:
		return []

	logger.debug(f'Parsed accessibility snapshot ({len(text)} chars) into {type(parsed).__name__}')
	return parsed


def format_page_snapshot(url: str, title: str, body: str) -> str:
	"""Prefix a rendered snapshot with the page header the model sees"""
	lines = [
		'page snapshot:',
		f"url: '{url}'",
		f"title: '{title}'",
		body,
	]
	return '\n'.join(lines)
