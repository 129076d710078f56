from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union

from pydantic import BaseModel, ConfigDict

from aria_snapshot.exceptions import UnknownReferenceError

# Recursive JSON-like value produced by the snapshot parser. Object key order mirrors DOM order.
TreeValue = Union[str, int, float, bool, None, dict[str, Any], list[Any]]

# Location inside a TreeValue: object keys and array indices, root is ()
Path = tuple[str | int, ...]


@dataclass(frozen=True)
class RoleLine:
	"""A structural label naming an accessibility role, e.g. `button "Submit"`"""

	role: str
	accessible_name: str | None = None


@dataclass(frozen=True)
class OpaqueKey:
	"""Any label that is not a role line (data fields such as `/url`, plain text)"""

	text: str


class LocatorQuery(BaseModel):
	"""Parameters needed to ask the automation backend for a live element handle.

	Queries nest: `parent` is the query of the nearest enclosing role line, or None
	when the element is scoped to the whole page.
	"""

	model_config = ConfigDict(frozen=True, extra='forbid')

	role: str
	name: str | None = None
	nth: int | None = None
	has_text: str | None = None
	parent: LocatorQuery | None = None

	def signature(self) -> tuple:
		parent_signature = self.parent.signature() if self.parent is not None else None
		return (parent_signature, self.role, self.name, self.nth, self.has_text)

	def describe(self) -> str:
		"""Readable one-line chain, outermost scope first"""
		part = f'role={self.role}'
		if self.name is not None:
			part += f' name="{self.name}"'
		if self.nth is not None:
			part += f' nth={self.nth}'
		if self.has_text is not None:
			part += f' has_text="{self.has_text}"'
		if self.parent is None:
			return part
		return f'{self.parent.describe()} >> {part}'


@dataclass
class LocatorCandidate:
	"""A role-line node that can be turned into a locator.

	`paths` lists every location in the tree that collapsed onto this candidate;
	`path_key` is the encoded first one.
	"""

	path_key: str
	query: LocatorQuery
	paths: list[Path] = field(default_factory=list)

	@property
	def role(self) -> str:
		return self.query.role

	@property
	def accessible_name(self) -> str | None:
		return self.query.name

	@property
	def sibling_index(self) -> int | None:
		return self.query.nth

	@property
	def text_filter(self) -> str | None:
		return self.query.has_text

	@property
	def signature(self) -> tuple:
		return self.query.signature()


@dataclass
class SnapshotMapping:
	"""Result of one observe step: the annotated text plus the token -> query lookup.

	A mapping is only valid until the next snapshot is taken; tokens are not
	stable across mappings.
	"""

	rendered_text: str
	refs: dict[str, LocatorQuery] = field(default_factory=dict)
	entries: list[LocatorCandidate] = field(default_factory=list)
	path_refs: dict[str, str] = field(default_factory=dict, repr=False)

	def resolve(self, ref: str) -> LocatorQuery:
		"""Return the locator query for `ref` or raise UnknownReferenceError"""
		try:
			return self.refs[ref]
		except KeyError:
			raise UnknownReferenceError(ref) from None

	def __contains__(self, ref: object) -> bool:
		return ref in self.refs

	def __len__(self) -> int:
		return len(self.refs)
