import re

QUOTED_TOKEN_PATTERN = re.compile(r"""(['"])(.*?)\1""")


def tokenize(text: str) -> list[str]:
	"""Split free task text into lowercase search tokens.

	Quoted phrases ('...' or "...") become single tokens and come first, followed
	by the remaining whitespace-separated words. Duplicates are kept.

	Example::
		tokenize('type Qwen3 in to "Search Models" input')
		# ['search models', 'type', 'qwen3', 'in', 'to', 'input']
	"""
	if not text or not text.strip():
		return []

	quoted_tokens = [match.group(2) for match in QUOTED_TOKEN_PATTERN.finditer(text)]
	word_tokens = QUOTED_TOKEN_PATTERN.sub('', text).split()

	return [token.lower() for token in quoted_tokens + word_tokens]


def extract_search_terms(action: str, expect: str) -> list[str]:
	"""Tokenize action and expectation together, dropping repeated tokens (first occurrence wins)"""
	combined = tokenize(action) + tokenize(expect)
	return list(dict.fromkeys(combined))
