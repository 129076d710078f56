import logging
import random

from aria_snapshot.config import CONFIG, SnapshotConfig
from aria_snapshot.dom.accessibility.filter import KeywordSource, filter_snapshot, filter_tree
from aria_snapshot.dom.accessibility.views import Step
from aria_snapshot.dom.parser import parse_snapshot
from aria_snapshot.dom.serializer.serializer import SnapshotRenderer
from aria_snapshot.dom.snapshot.collector import SnapshotCollector
from aria_snapshot.dom.snapshot.refs import allocate_references, path_references, reference_queries
from aria_snapshot.dom.snapshot.visibility import LocatorBackend, filter_visible
from aria_snapshot.dom.views import SnapshotMapping, TreeValue
from aria_snapshot.utils import time_execution_async

logger = logging.getLogger(__name__)


class SnapshotService:
	"""
	Turns raw accessibility snapshots into annotated text plus a reference map.

	The service holds no per-snapshot state: every call returns a fresh
	SnapshotMapping owned by the caller, which replaces the previous one.
	"""

	def __init__(
		self,
		backend: LocatorBackend,
		config: SnapshotConfig | None = None,
		keyword_extractor: KeywordSource | None = None,
		rng: random.Random | None = None,
	):
		self.backend = backend
		self.config = config or CONFIG
		self.keyword_extractor = keyword_extractor
		self.rng = rng

	@time_execution_async('--capture_snapshot')
	async def capture(
		self,
		raw_text: str,
		step: Step | None = None,
		keywords: list[str] | None = None,
	) -> SnapshotMapping:
		"""Parse, optionally filter, and reference-map a raw aria snapshot.

		Explicit `keywords` take precedence over `step`.
		"""
		tree = parse_snapshot(raw_text)

		if keywords:
			tree = filter_tree(
				tree,
				[keyword.lower() for keyword in keywords],
				threshold=self.config.relevance_threshold,
				max_matches=self.config.max_matches,
			)
		elif step is not None:
			tree = await filter_snapshot(
				tree,
				step,
				keyword_extractor=self.keyword_extractor,
				threshold=self.config.relevance_threshold,
				max_matches=self.config.max_matches,
			)

		return await self.build_mapping(tree)

	async def build_mapping(self, tree: TreeValue) -> SnapshotMapping:
		"""Collect, visibility-check, reference and render an already parsed tree"""
		candidates = SnapshotCollector(tree).collect()
		visible = await filter_visible(self.backend, candidates)

		allocated = allocate_references(visible, length=self.config.ref_length, rng=self.rng)
		path_refs = path_references(allocated)

		rendered = SnapshotRenderer(path_refs, self.config.output_format).render(tree)

		logger.info(
			f'📸 Snapshot mapped {len(allocated)} references for {len(visible)}/{len(candidates)} visible elements '
			f'({len(rendered)} chars)'
		)
		return SnapshotMapping(
			rendered_text=rendered,
			refs=reference_queries(allocated),
			entries=visible,
			path_refs=path_refs,
		)

	def locate(self, mapping: SnapshotMapping, ref: str):
		"""Resolve a model-supplied reference into a live handle from the backend.

		Raises:
			UnknownReferenceError: If `ref` is not in `mapping`
		"""
		query = mapping.resolve(ref)
		logger.debug(f'Resolving ref={ref} -> {query.describe()}')
		return self.backend.resolve(query)
