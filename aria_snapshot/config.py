"""
Configuration for aria_snapshot.

Values are read once from the environment (after loading a local .env file)
into the module-level CONFIG object.
"""

import os
import string
from typing import Literal

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

load_dotenv()

REF_ALPHABET = string.ascii_lowercase + string.digits


class SnapshotConfig(BaseModel):
	"""Tunables for snapshot encoding and relevance filtering"""

	model_config = ConfigDict(extra='forbid', frozen=True)

	logging_level: str = 'info'
	setup_logging: bool = True
	ref_length: int = Field(default=4, ge=1, le=16)
	relevance_threshold: float = Field(default=0.3, ge=0.0, le=1.0)
	max_matches: int | None = Field(default=10, ge=1)  # None keeps every element above threshold
	output_format: Literal['yaml', 'json'] = 'yaml'

	@classmethod
	def from_env(cls) -> 'SnapshotConfig':
		values: dict[str, object] = {}
		if level := os.getenv('ARIA_SNAPSHOT_LOGGING_LEVEL'):
			values['logging_level'] = level.lower()
		if setup := os.getenv('ARIA_SNAPSHOT_SETUP_LOGGING'):
			values['setup_logging'] = setup
		if ref_length := os.getenv('ARIA_SNAPSHOT_REF_LENGTH'):
			values['ref_length'] = ref_length
		if threshold := os.getenv('ARIA_SNAPSHOT_RELEVANCE_THRESHOLD'):
			values['relevance_threshold'] = threshold
		if max_matches := os.getenv('ARIA_SNAPSHOT_MAX_MATCHES'):
			values['max_matches'] = None if max_matches.strip() == '0' else max_matches
		if output_format := os.getenv('ARIA_SNAPSHOT_OUTPUT_FORMAT'):
			values['output_format'] = output_format.lower()
		return cls.model_validate(values)


CONFIG = SnapshotConfig.from_env()
