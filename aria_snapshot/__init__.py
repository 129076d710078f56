from aria_snapshot.config import CONFIG, SnapshotConfig
from aria_snapshot.logging_config import setup_logging
from aria_snapshot.dom.accessibility.filter import filter_snapshot, filter_tree
from aria_snapshot.dom.accessibility.keywords import KeywordExtractor
from aria_snapshot.dom.accessibility.reconstructor import reconstruct_tree
from aria_snapshot.dom.accessibility.scorer import filter_by_threshold, score_elements, select_top_elements
from aria_snapshot.dom.accessibility.tokenizer import extract_search_terms, tokenize
from aria_snapshot.dom.accessibility.views import ScoredElement, Step
from aria_snapshot.dom.parser import format_page_snapshot, parse_snapshot
from aria_snapshot.dom.roles import parse_role_line, parse_structural_line
from aria_snapshot.dom.serializer.compressor import compress_accessibility_tree, compress_snapshot_text
from aria_snapshot.dom.serializer.serializer import SnapshotRenderer, render_snapshot
from aria_snapshot.dom.service import SnapshotService
from aria_snapshot.dom.snapshot.collector import SnapshotCollector, collect_candidates
from aria_snapshot.dom.snapshot.visibility import LocatorBackend
from aria_snapshot.dom.views import LocatorCandidate, LocatorQuery, OpaqueKey, RoleLine, SnapshotMapping
from aria_snapshot.exceptions import (
	AriaSnapshotError,
	ReferencePoolExhaustedError,
	SnapshotParseError,
	SnapshotStructureError,
	UnknownReferenceError,
)

# the package logger is configured on import unless ARIA_SNAPSHOT_SETUP_LOGGING=false
if CONFIG.setup_logging:
	setup_logging()

__all__ = [
	'CONFIG',
	'SnapshotConfig',
	'setup_logging',
	'filter_snapshot',
	'filter_tree',
	'KeywordExtractor',
	'reconstruct_tree',
	'filter_by_threshold',
	'score_elements',
	'select_top_elements',
	'extract_search_terms',
	'tokenize',
	'ScoredElement',
	'Step',
	'format_page_snapshot',
	'parse_snapshot',
	'parse_role_line',
	'parse_structural_line',
	'compress_accessibility_tree',
	'compress_snapshot_text',
	'SnapshotRenderer',
	'render_snapshot',
	'SnapshotService',
	'SnapshotCollector',
	'collect_candidates',
	'LocatorBackend',
	'LocatorCandidate',
	'LocatorQuery',
	'OpaqueKey',
	'RoleLine',
	'SnapshotMapping',
	'AriaSnapshotError',
	'ReferencePoolExhaustedError',
	'SnapshotParseError',
	'SnapshotStructureError',
	'UnknownReferenceError',
]
