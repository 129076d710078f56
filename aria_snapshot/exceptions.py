from typing import Sequence


class AriaSnapshotError(Exception):
	"""Base class for all errors raised by aria_snapshot"""


class SnapshotParseError(AriaSnapshotError):
	"""Raised when the raw accessibility snapshot text cannot be deserialized"""


class SnapshotStructureError(AriaSnapshotError):
	"""Raised when a snapshot tree contains a value the engine cannot walk or render"""

	def __init__(self, path: Sequence[str | int], message: str):
		self.path = tuple(path)
		self.message = message
		super().__init__(f'{message} (at path {list(self.path)!r})')


class UnknownReferenceError(AriaSnapshotError, KeyError):
	"""Raised when a reference token is not part of the current snapshot mapping"""

	def __init__(self, ref: str):
		self.ref = ref
		super().__init__(ref)

	def __str__(self) -> str:
		return f"Element reference '{self.ref}' does not exist in the current snapshot"


class ReferencePoolExhaustedError(AriaSnapshotError):
	"""Raised when every possible reference token of the configured length is already issued"""
