import random
from typing import NamedTuple

from aria_snapshot.config import CONFIG, REF_ALPHABET
from aria_snapshot.dom.paths import encode_path
from aria_snapshot.dom.views import LocatorCandidate, LocatorQuery, Path
from aria_snapshot.exceptions import ReferencePoolExhaustedError


def generate_reference(
	used: set[str],
	length: int | None = None,
	alphabet: str = REF_ALPHABET,
	rng: random.Random | None = None,
) -> str:
	"""Draw a random token that is not in `used`.

	The caller owns `used` for the lifetime of one mapping and is responsible for
	adding the returned token to it.
	"""
	length = length or CONFIG.ref_length
	rng = rng or random
	if len(used) >= len(alphabet) ** length:
		raise ReferencePoolExhaustedError(f'All {len(alphabet) ** length} references of length {length} are in use')

	while True:
		token = ''.join(rng.choice(alphabet) for _ in range(length))
		if token not in used:
			return token


class AllocatedReference(NamedTuple):
	"""One rendered occurrence of a candidate and the token it was given"""

	candidate: LocatorCandidate
	path: Path


def allocate_references(
	candidates: list[LocatorCandidate],
	length: int | None = None,
	rng: random.Random | None = None,
) -> dict[str, AllocatedReference]:
	"""Give every occurrence of every candidate its own token.

	A candidate found at several paths gets one token per path, each bound to the
	same query. Returns token -> occurrence in candidate, then path, order.
	"""
	used: set[str] = set()
	allocated: dict[str, AllocatedReference] = {}
	for candidate in candidates:
		for path in candidate.paths:
			token = generate_reference(used, length=length, rng=rng)
			used.add(token)
			allocated[token] = AllocatedReference(candidate, path)
	return allocated


def reference_queries(allocated: dict[str, AllocatedReference]) -> dict[str, LocatorQuery]:
	return {token: reference.candidate.query for token, reference in allocated.items()}


def path_references(allocated: dict[str, AllocatedReference]) -> dict[str, str]:
	"""Encoded path -> token, as consumed by SnapshotRenderer"""
	return {encode_path(reference.path): token for token, reference in allocated.items()}
