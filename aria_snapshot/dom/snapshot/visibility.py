"""
Visibility gating through the browser automation backend.

The engine never talks to a browser itself. It is handed a LocatorBackend that
can turn a LocatorQuery into a handle and report whether that handle is visible.
"""

import asyncio
import logging
from typing import Any, Protocol

from aria_snapshot.dom.views import LocatorCandidate, LocatorQuery
from aria_snapshot.utils import time_execution_async

logger = logging.getLogger(__name__)


class LocatorBackend(Protocol):
	"""Narrow capability interface over the automation library"""

	def resolve(self, query: LocatorQuery) -> Any: ...

	async def is_visible(self, handle: Any) -> bool: ...


async def _check_visible(backend: LocatorBackend, candidate: LocatorCandidate) -> bool:
	try:
		handle = backend.resolve(candidate.query)
		return bool(await backend.is_visible(handle))
	except Exception as e:
		# one flaky element must not abort the snapshot
		logger.debug(f'Visibility check failed for {candidate.query.describe()}: {type(e).__name__}: {e}')
		return False


@time_execution_async('--filter_visible')
async def filter_visible(backend: LocatorBackend, candidates: list[LocatorCandidate]) -> list[LocatorCandidate]:
	"""Return the candidates the backend reports as visible, in their original order.

	All checks run concurrently; results are joined back by position.
	"""
	if not candidates:
		return []

	results = await asyncio.gather(*(_check_visible(backend, candidate) for candidate in candidates))
	visible = [candidate for candidate, is_visible in zip(candidates, results) if is_visible]

	logger.debug(f'{len(visible)}/{len(candidates)} locator candidates are visible')
	return visible
