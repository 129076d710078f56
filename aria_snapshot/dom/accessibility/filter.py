# @file purpose: Relevance filtering of accessibility snapshots against a test step
"""
Relevance filtering for snapshot trees.

Turns search terms into a smaller tree: score every key and string leaf against
the terms, keep the best matches above a threshold, then rebuild the tree
around them. Every failure mode that is not a broken tree degrades to returning
the original tree unchanged.
"""

import json
import logging
from collections.abc import Awaitable, Callable

from aria_snapshot.config import CONFIG
from aria_snapshot.dom.accessibility.reconstructor import compare_trees, reconstruct_tree
from aria_snapshot.dom.accessibility.scorer import filter_by_threshold, score_elements, select_top_elements
from aria_snapshot.dom.accessibility.tokenizer import extract_search_terms
from aria_snapshot.dom.accessibility.views import Step
from aria_snapshot.dom.views import TreeValue

logger = logging.getLogger(__name__)

KeywordSource = Callable[[str, str], Awaitable[list[str]]]

# unset max_matches; None means keep every match
_FROM_CONFIG = object()


def filter_tree(
	tree: TreeValue,
	tokens: list[str],
	threshold: float | None = None,
	max_matches: int | None | object = _FROM_CONFIG,
) -> TreeValue:
	"""Prune `tree` to the elements matching `tokens`.

	Args:
		tree: Parsed snapshot tree
		tokens: Lowercase search tokens
		threshold: Minimum similarity score, defaults to CONFIG.relevance_threshold
		max_matches: Keep only this many best matches; None keeps all, defaults to CONFIG.max_matches

	Returns:
		The pruned tree, or `tree` itself when no element clears the threshold
	"""
	threshold = CONFIG.relevance_threshold if threshold is None else threshold
	if max_matches is _FROM_CONFIG:
		max_matches = CONFIG.max_matches

	if not tokens:
		logger.debug('No search terms, returning original snapshot')
		return tree

	scored = score_elements(tree, tokens)
	logger.debug(f'Scored {len(scored)} elements against {len(tokens)} search terms')

	matched = filter_by_threshold(scored, threshold)
	if not matched:
		logger.debug(f'No elements scored at or above {threshold}, returning original snapshot')
		return tree

	if max_matches is not None:
		matched = select_top_elements(matched, max_matches)
	logger.debug(f'Selected {len(matched)} matching elements')

	filtered = reconstruct_tree(tree, matched)

	stats = compare_trees(tree, filtered)
	logger.info(
		f'✂️ Reduced snapshot from {stats.original_chars} to {stats.filtered_chars} chars '
		f'({stats.size_reduction_percent:.0f}% reduction, {stats.removed_nodes} nodes removed)'
	)
	return filtered


async def resolve_search_terms(step: Step, keyword_extractor: KeywordSource | None = None) -> list[str]:
	"""Search terms for a step: explicit elements, then the extractor, then the step text itself"""
	if step.elements:
		logger.debug(f'Using provided elements as search terms: {json.dumps(step.elements)}')
		return [element.lower() for element in step.elements]

	if keyword_extractor is not None:
		keywords = await keyword_extractor(step.action, step.expect)
		logger.debug(f'Extracted keywords: {json.dumps(keywords)}')
		return [keyword.lower() for keyword in keywords]

	return extract_search_terms(step.action, step.expect)


async def filter_snapshot(
	tree: TreeValue,
	step: Step | None = None,
	keyword_extractor: KeywordSource | None = None,
	threshold: float | None = None,
	max_matches: int | None | object = _FROM_CONFIG,
) -> TreeValue:
	"""Filter a snapshot tree down to what is relevant for `step`.

	Without a step, or when no search terms resolve, the tree is returned unchanged.
	"""
	if step is None:
		logger.debug('No step provided, returning original snapshot')
		return tree

	search_terms = await resolve_search_terms(step, keyword_extractor)
	logger.debug(f'Resolved search terms: {json.dumps(search_terms)}')

	return filter_tree(tree, search_terms, threshold=threshold, max_matches=max_matches)
