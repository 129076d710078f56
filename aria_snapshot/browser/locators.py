"""
Playwright implementation of the LocatorBackend capability.

Playwright is an optional dependency; this module only uses the page object it
is handed and never imports playwright at runtime.
"""

import logging
from typing import TYPE_CHECKING, Any

from aria_snapshot.dom.views import LocatorQuery

if TYPE_CHECKING:
	from playwright.async_api import Locator, Page

logger = logging.getLogger(__name__)


class PlaywrightLocatorBackend:
	"""Resolves locator queries against a Playwright page"""

	def __init__(self, page: 'Page', timeout_ms: float | None = None):
		self.page = page
		self.timeout_ms = timeout_ms

	def resolve(self, query: LocatorQuery) -> 'Locator':
		scope: Any = self.page if query.parent is None else self.resolve(query.parent)

		if query.name is not None:
			locator = scope.get_by_role(query.role, name=query.name, exact=True)
		else:
			locator = scope.get_by_role(query.role)

		if query.nth is not None:
			locator = locator.nth(query.nth)
		if query.has_text is not None:
			locator = locator.filter(has_text=query.has_text)
		return locator

	async def is_visible(self, handle: 'Locator') -> bool:
		if self.timeout_ms is not None:
			return await handle.is_visible(timeout=self.timeout_ms)
		return await handle.is_visible()
