# @file purpose: Serializes snapshot trees to text for LLM consumption, injecting element references


import json
import logging
from typing import Literal

import yaml

from aria_snapshot.dom.paths import encode_path
from aria_snapshot.dom.views import Path, TreeValue
from aria_snapshot.exceptions import SnapshotStructureError
from aria_snapshot.utils import time_execution_sync

logger = logging.getLogger(__name__)

OutputFormat = Literal['yaml', 'json']


def ref_suffix(token: str) -> str:
	return f' [ref={token}]'


class AriaSnapshotDumper(yaml.SafeDumper):
	"""Block-style dumper whose output matches the aria snapshot layout.

	PyYAML writes sequences nested in mappings without extra indentation, which
	is exactly how aria snapshots nest child lists under a role line.
	"""

	def ignore_aliases(self, data):
		return True


class SnapshotRenderer:
	"""Re-serializes a snapshot tree, appending ` [ref=<token>]` to referenced role lines.

	References are looked up by encoded path, so two identical role lines at
	different paths are annotated independently. Labels without a reference are
	emitted untouched.
	"""

	def __init__(self, path_refs: dict[str, str] | None = None, output_format: OutputFormat = 'yaml'):
		self.path_refs = path_refs or {}
		self.output_format = output_format

	@time_execution_sync('--render_snapshot')
	def render(self, tree: TreeValue) -> str:
		annotated = self.annotate(tree)
		if self.output_format == 'json':
			return json.dumps(annotated, ensure_ascii=False, separators=(',', ':'))

		if isinstance(annotated, (list, dict)) and not annotated:
			return ''
		return yaml.dump(
			annotated,
			Dumper=AriaSnapshotDumper,
			default_flow_style=False,
			allow_unicode=True,
			sort_keys=False,
			width=float('inf'),
		).rstrip('\n')

	def annotate(self, tree: TreeValue) -> TreeValue:
		"""Return a copy of `tree` with reference suffixes applied"""
		return self._annotate(tree, ())

	def _annotate(self, value: TreeValue, path: Path) -> TreeValue:
		if isinstance(value, dict):
			annotated: dict[str, TreeValue] = {}
			for key, child in value.items():
				if not isinstance(key, str):
					raise SnapshotStructureError(path, f'Object keys must be strings, got {type(key).__name__}')
				child_path = path + (key,)
				annotated[self._label(key, child_path)] = self._annotate(child, child_path)
			return annotated

		if isinstance(value, list):
			items: list[TreeValue] = []
			for index, item in enumerate(value):
				item_path = path + (index,)
				if isinstance(item, str):
					items.append(self._label(item, item_path))
				else:
					items.append(self._annotate(item, item_path))
			return items

		if value is None or isinstance(value, (str, bool, int, float)):
			return value

		raise SnapshotStructureError(path, f'Unsupported value of type {type(value).__name__} in snapshot tree')

	def _label(self, label: str, path: Path) -> str:
		token = self.path_refs.get(encode_path(path))
		return label + ref_suffix(token) if token else label


def render_snapshot(tree: TreeValue, path_refs: dict[str, str] | None = None, output_format: OutputFormat = 'yaml') -> str:
	"""Convenience wrapper around SnapshotRenderer"""
	return SnapshotRenderer(path_refs, output_format).render(tree)
