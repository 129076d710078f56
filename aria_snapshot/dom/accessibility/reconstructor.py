# @file purpose: Rebuilds a pruned snapshot tree around matched elements
"""
Structure-preserving pruning.

Given the matched elements of a snapshot, keep:

- every ancestor of a match, so the model can see where the match lives
- the match itself
- all direct children of a matched container, when nothing deeper matched

Unrelated siblings and descendants are dropped. Overlapping branches collapse
naturally because required paths are tracked as a set.
"""

import json

from aria_snapshot.dom.accessibility.views import FilteringStats, ScoredElement
from aria_snapshot.dom.paths import encode_path, iter_prefixes
from aria_snapshot.dom.views import Path, TreeValue
from aria_snapshot.utils import time_execution_sync

# marks a pruned node; None is a legitimate tree value
_DROPPED = object()


class TreeReconstructor:
	"""Builds the pruned tree for one set of matched elements."""

	def __init__(self, matched: list[ScoredElement]):
		self.required_paths: set[str] = set()
		self.matched_paths: set[str] = set()

		for element in matched:
			for prefix in iter_prefixes(element.path):
				self.required_paths.add(encode_path(prefix))
			self.matched_paths.add(encode_path(element.path))

	def rebuild(self, tree: TreeValue) -> TreeValue | None:
		result = self._build(tree, ())
		return None if result is _DROPPED else result

	def _build(self, value: TreeValue, path: Path):
		path_key = encode_path(path)
		if path_key not in self.required_paths:
			return _DROPPED

		if isinstance(value, list):
			return self._build_array(value, path, path_key)
		if isinstance(value, dict):
			return self._build_object(value, path, path_key)
		return value

	def _build_array(self, value: list, path: Path, path_key: str):
		items = []
		for index, item in enumerate(value):
			filtered = self._build(item, path + (index,))
			if filtered is not _DROPPED:
				items.append(filtered)

		if items:
			return items
		return value if path_key in self.matched_paths else _DROPPED

	def _build_object(self, value: dict, path: Path, path_key: str):
		filtered_object = {}
		for key, child in value.items():
			filtered = self._build(child, path + (key,))
			if filtered is not _DROPPED:
				filtered_object[key] = filtered

		if filtered_object:
			return filtered_object
		return value if path_key in self.matched_paths else _DROPPED


@time_execution_sync('--reconstruct_tree')
def reconstruct_tree(tree: TreeValue, matched: list[ScoredElement]) -> TreeValue:
	"""Prune `tree` down to the matched elements and their context.

	Returns `tree` itself when nothing matched.
	"""
	if not matched:
		return tree

	rebuilt = TreeReconstructor(matched).rebuild(tree)
	# the root is always required, so it can only vanish if it is an empty container
	return tree if rebuilt is None else rebuilt


def count_nodes(value: TreeValue) -> int:
	"""Number of nodes in a tree: every value, plus one per object key"""
	if isinstance(value, dict):
		return 1 + sum(1 + count_nodes(child) for child in value.values())
	if isinstance(value, list):
		return 1 + sum(count_nodes(item) for item in value)
	return 1


def compare_trees(original: TreeValue, filtered: TreeValue) -> FilteringStats:
	return FilteringStats(
		original_nodes=count_nodes(original),
		filtered_nodes=count_nodes(filtered),
		original_chars=len(json.dumps(original, ensure_ascii=False)),
		filtered_chars=len(json.dumps(filtered, ensure_ascii=False)),
	)
