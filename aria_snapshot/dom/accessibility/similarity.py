"""
Dice coefficient over character bigrams.

Whitespace is ignored, identical strings score 1.0 and strings shorter than two
characters (after removing whitespace) score 0.0 unless identical.
"""

import re
from collections import Counter

_WHITESPACE = re.compile(r'\s+')


def _bigrams(text: str) -> Counter[str]:
	return Counter(text[i : i + 2] for i in range(len(text) - 1))


def compare_two_strings(first: str, second: str) -> float:
	first = _WHITESPACE.sub('', first)
	second = _WHITESPACE.sub('', second)

	if first == second:
		return 1.0
	if len(first) < 2 or len(second) < 2:
		return 0.0

	first_bigrams = _bigrams(first)
	intersection = sum((first_bigrams & _bigrams(second)).values())

	return (2.0 * intersection) / (len(first) + len(second) - 2)


def max_similarity(text: str, tokens: list[str]) -> float:
	"""Best score of `text` (lowercased) against any of the lowercase `tokens`"""
	if not tokens:
		return 0.0
	normalized = text.lower()
	return max(compare_two_strings(normalized, token) for token in tokens)
