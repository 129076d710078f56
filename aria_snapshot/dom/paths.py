"""
Canonical string keys for tree paths.

Paths are encoded as compact JSON arrays, so string segments are always quoted
and integer segments never are: ("items", 0) and ("items", "0") get different
keys.
"""

import json
from collections.abc import Iterator

from aria_snapshot.dom.views import Path


def encode_path(path: Path) -> str:
	return json.dumps(list(path), ensure_ascii=False, separators=(',', ':'))


def decode_path(key: str) -> Path:
	segments = json.loads(key)
	if not isinstance(segments, list) or not all(
		isinstance(segment, str) or (isinstance(segment, int) and not isinstance(segment, bool)) for segment in segments
	):
		raise ValueError(f'Not an encoded tree path: {key!r}')
	return tuple(segments)


def iter_prefixes(path: Path) -> Iterator[Path]:
	"""Yield every ancestor of `path` from the root () down to `path` itself"""
	for length in range(len(path) + 1):
		yield path[:length]


def is_ancestor(ancestor: Path, descendant: Path) -> bool:
	"""True when `ancestor` is a strict prefix of `descendant`"""
	return len(ancestor) < len(descendant) and descendant[: len(ancestor)] == ancestor
