"""
LLM-backed keyword extraction for relevance filtering.

The model call itself is injected as an async `complete(system_prompt, user_prompt) -> str`
callable, so any chat client can back it.
"""

import json
import logging
import re
from collections.abc import Awaitable, Callable

from pydantic import BaseModel, ValidationError

logger = logging.getLogger(__name__)

KEYWORD_EXTRACTION_PROMPT = """You are a keyword extraction assistant for UI test automation. Given a test step's action and expected result, extract the top 5 most relevant keywords or phrases that would help identify UI elements on a webpage.

Focus on:
- Specific UI element labels (button names, input field labels, link text)
- Unique identifiers or model names mentioned
- Key action targets and expected outcomes

Respond with a JSON array of strings.
Example: ["Search models", "qwen3-vl", "Submit button", "model details", "capabilities"]"""

DEFAULT_KEYWORD_COUNT = 5

CODE_BLOCK_PATTERN = re.compile(r'```(?:json)?\s*([\s\S]*?)```')
JSON_ARRAY_PATTERN = re.compile(r'\[[\s\S]*\]')

CompletionFn = Callable[[str, str], Awaitable[str]]


class KeywordExtraction(BaseModel):
	keywords: list[str]


class KeywordExtractor:
	"""Asks a language model for the UI keywords of a test step."""

	def __init__(self, complete: CompletionFn, max_keywords: int = DEFAULT_KEYWORD_COUNT):
		self.complete = complete
		self.max_keywords = max_keywords

	async def __call__(self, action: str, expect: str) -> list[str]:
		return await self.extract(action, expect)

	async def extract(self, action: str, expect: str) -> list[str]:
		"""Return up to `max_keywords` keywords, or [] if the model call or parsing fails"""
		logger.info(f'🔑 Extracting keywords for action="{action[:50]}..."')
		try:
			content = await self.complete(KEYWORD_EXTRACTION_PROMPT, f'Action: {action}\nExpected: {expect}')
		except Exception as e:
			logger.error(f'Failed to extract keywords: {type(e).__name__}: {e}')
			return []

		content = (content or '').strip()
		logger.debug(f'Keyword extraction raw response ({len(content)} chars): {content}')

		keywords = parse_keywords_response(content)[: self.max_keywords]
		logger.info(f'🔑 Extracted {len(keywords)} keywords: {json.dumps(keywords)}')
		return keywords


def parse_keywords_response(content: str) -> list[str]:
	"""Pull a list of keyword strings out of a model response.

	Accepts a bare JSON array, an array wrapped in a Markdown code fence, or a
	`{"keywords": [...]}` object. Non-string items are dropped.
	"""
	clean_content = content
	code_block = CODE_BLOCK_PATTERN.search(content)
	if code_block:
		clean_content = code_block.group(1).strip()

	try:
		return KeywordExtraction.model_validate_json(clean_content).keywords
	except ValidationError:
		pass

	array_match = JSON_ARRAY_PATTERN.search(clean_content)
	if not array_match:
		logger.warning(f'No JSON array found in keyword response: {clean_content}')
		return []

	try:
		parsed = json.loads(array_match.group(0))
	except json.JSONDecodeError as e:
		logger.warning(f'Failed to parse keyword response: {e}')
		return []

	if not isinstance(parsed, list):
		logger.warning('Keyword response is not an array')
		return []

	return [item for item in parsed if isinstance(item, str)]
