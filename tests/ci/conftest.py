import asyncio
from collections.abc import Callable

import pytest

from aria_snapshot.config import SnapshotConfig
from aria_snapshot.dom.views import LocatorQuery

OLLAMA_SNAPSHOT = '''- generic [active] [ref=e1]:
  - banner [ref=e2]:
    - navigation [ref=e3]:
      - link "Ollama" [ref=e4] [cursor=pointer]:
        - /url: /
        - img "Ollama" [ref=e5]
      - generic [ref=e6]:
        - link "Models" [ref=e7] [cursor=pointer]:
          - /url: /models
        - link "GitHub" [ref=e8] [cursor=pointer]:
          - /url: https://github.com/ollama/ollama
      - generic [ref=e15]:
        - img [ref=e17]
        - textbox "Search models" [ref=e19]
  - main [ref=e23]:
    - generic [ref=e24]:
      - paragraph [ref=e27]:
        - link "Cloud models" [ref=e28] [cursor=pointer]:
          - /url: https://ollama.com/blog/cloud-models
        - text: are now available in Ollama
  - contentinfo [ref=e37]:
    - generic [ref=e40]: © 2025 Ollama
'''


class FakeLocatorBackend:
	"""Stands in for the browser: handles are the queries themselves"""

	def __init__(self, is_visible: Callable[[LocatorQuery], bool] | None = None, delay: Callable[[LocatorQuery], float] | None = None):
		self._is_visible = is_visible or (lambda query: True)
		self._delay = delay
		self.resolved: list[LocatorQuery] = []

	def resolve(self, query: LocatorQuery) -> LocatorQuery:
		self.resolved.append(query)
		return query

	async def is_visible(self, handle: LocatorQuery) -> bool:
		if self._delay is not None:
			await asyncio.sleep(self._delay(handle))
		return self._is_visible(handle)


@pytest.fixture
def ollama_snapshot() -> str:
	return OLLAMA_SNAPSHOT


@pytest.fixture
def config() -> SnapshotConfig:
	return SnapshotConfig()


@pytest.fixture
def backend() -> FakeLocatorBackend:
	return FakeLocatorBackend()
