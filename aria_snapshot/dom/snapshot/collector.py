# @file purpose: Walks a parsed accessibility snapshot and derives a locator query for every role line
"""
Locator candidate collection.

Every role line in the tree becomes a LocatorCandidate whose query is scoped to
the nearest enclosing role line (or the page). Unnamed role lines get a sibling
index per role, counted within the current counter scope:

- the root and the value of every role line open a fresh scope
- an array opens a fresh scope unless its parent role line (or the root) just did
- an object shares the scope of whatever contains it

Candidates whose query is identical to one already emitted collapse into it; the
collapsed candidate remembers every path it was found at.
"""

import logging

from aria_snapshot.dom.paths import encode_path
from aria_snapshot.dom.roles import parse_structural_line
from aria_snapshot.dom.views import LocatorCandidate, LocatorQuery, Path, RoleLine, TreeValue
from aria_snapshot.utils import time_execution_sync

logger = logging.getLogger(__name__)


class SnapshotCollector:
	"""Collects locator candidates from a snapshot tree in document order."""

	def __init__(self, tree: TreeValue):
		self.tree = tree
		self._candidates: list[LocatorCandidate] = []
		self._by_signature: dict[tuple, LocatorCandidate] = {}

	@time_execution_sync('--collect_candidates')
	def collect(self) -> list[LocatorCandidate]:
		self._candidates = []
		self._by_signature = {}

		self._walk(self.tree, (), None, None)

		logger.debug(f'Collected {len(self._candidates)} locator candidates')
		return list(self._candidates)

	def _walk(
		self,
		value: TreeValue,
		path: Path,
		parent: LocatorQuery | None,
		counters: dict[str, int] | None,
	) -> None:
		if isinstance(value, list):
			self._walk_array(value, path, parent, counters)
		elif isinstance(value, dict):
			self._walk_object(value, path, parent, counters if counters is not None else {})

	def _walk_array(
		self,
		items: list,
		path: Path,
		parent: LocatorQuery | None,
		counters: dict[str, int] | None,
	) -> None:
		scope = counters if counters is not None else {}

		for index, item in enumerate(items):
			item_path = path + (index,)
			if isinstance(item, str):
				parsed = parse_structural_line(item)
				if isinstance(parsed, RoleLine):
					self._add_candidate(parsed, item_path, parent, scope, text=None)
			elif isinstance(item, dict):
				self._walk_object(item, item_path, parent, scope)
			elif isinstance(item, list):
				self._walk_array(item, item_path, parent, None)

	def _walk_object(
		self,
		obj: dict,
		path: Path,
		parent: LocatorQuery | None,
		counters: dict[str, int],
	) -> None:
		for key, child in obj.items():
			child_path = path + (key,)
			parsed = parse_structural_line(key) if isinstance(key, str) else None

			if not isinstance(parsed, RoleLine):
				# opaque keys keep the current locator scope
				if isinstance(child, dict):
					self._walk_object(child, child_path, parent, counters)
				elif isinstance(child, list):
					self._walk_array(child, child_path, parent, None)
				continue

			text = child if isinstance(child, str) else None
			query = self._add_candidate(parsed, child_path, parent, counters, text=text)
			self._walk(child, child_path, query, {})

	def _add_candidate(
		self,
		role_line: RoleLine,
		path: Path,
		parent: LocatorQuery | None,
		counters: dict[str, int],
		text: str | None,
	) -> LocatorQuery:
		nth: int | None = None
		has_text: str | None = None

		if role_line.accessible_name is None:
			role_key = role_line.role.lower()
			nth = counters.get(role_key, 0)
			counters[role_key] = nth + 1
			# a container without a name can still be told apart by its visible text
			if text:
				has_text = text

		query = LocatorQuery(
			role=role_line.role,
			name=role_line.accessible_name,
			nth=nth,
			has_text=has_text,
			parent=parent,
		)

		signature = query.signature()
		existing = self._by_signature.get(signature)
		if existing is not None:
			existing.paths.append(path)
			logger.debug(f'Skipping duplicate locator {query.describe()} at {list(path)!r}')
			return existing.query

		candidate = LocatorCandidate(path_key=encode_path(path), query=query, paths=[path])
		self._by_signature[signature] = candidate
		self._candidates.append(candidate)
		return query


def collect_candidates(tree: TreeValue) -> list[LocatorCandidate]:
	"""Convenience wrapper around SnapshotCollector"""
	return SnapshotCollector(tree).collect()
