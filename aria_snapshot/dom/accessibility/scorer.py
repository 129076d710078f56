# @file purpose: Fuzzy relevance scoring of every string leaf and object key in a snapshot tree
import logging

from aria_snapshot.dom.accessibility.similarity import max_similarity
from aria_snapshot.dom.accessibility.views import ScoredElement
from aria_snapshot.dom.views import Path, TreeValue
from aria_snapshot.utils import time_execution_sync

logger = logging.getLogger(__name__)


@time_execution_sync('--score_elements')
def score_elements(tree: TreeValue, tokens: list[str]) -> list[ScoredElement]:
	"""Score string leaves and object keys against `tokens`.

	Only strictly positive scores are returned. An object key is scored at its own
	path (the path of its value); arrays and non-string scalars score nothing
	themselves.
	"""
	if not tokens:
		return []

	results: list[ScoredElement] = []
	_traverse_and_score(tree, tokens, (), results)
	return results


def _traverse_and_score(value: TreeValue, tokens: list[str], path: Path, results: list[ScoredElement]) -> None:
	if isinstance(value, str):
		score = max_similarity(value, tokens)
		if score > 0:
			results.append(ScoredElement(score=score, path=path, value=value, matched_key=value))
		return

	if isinstance(value, list):
		for index, item in enumerate(value):
			_traverse_and_score(item, tokens, path + (index,), results)
		return

	if isinstance(value, dict):
		for key, child in value.items():
			child_path = path + (key,)
			key_score = max_similarity(str(key), tokens)
			if key_score > 0:
				results.append(ScoredElement(score=key_score, path=child_path, value=child, matched_key=str(key)))
			_traverse_and_score(child, tokens, child_path, results)


def filter_by_threshold(scored_elements: list[ScoredElement], threshold: float) -> list[ScoredElement]:
	return [element for element in scored_elements if element.score >= threshold]


def select_top_elements(scored_elements: list[ScoredElement], count: int) -> list[ScoredElement]:
	"""Highest scores first; ties keep document order"""
	return sorted(scored_elements, key=lambda element: element.score, reverse=True)[:count]
