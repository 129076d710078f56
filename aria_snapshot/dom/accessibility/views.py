from dataclasses import dataclass

from pydantic import BaseModel, Field

from aria_snapshot.dom.views import Path, TreeValue


class Step(BaseModel):
	"""A single test step the agent is working on"""

	action: str
	expect: str
	elements: list[str] | None = Field(default=None, description='Explicit search terms for locating elements')


@dataclass
class ScoredElement:
	"""A tree node that matched the search tokens with a positive score"""

	score: float
	path: Path
	value: TreeValue
	matched_key: str


@dataclass
class FilteringStats:
	"""Size of a snapshot before and after relevance filtering"""

	original_nodes: int = 0
	filtered_nodes: int = 0
	original_chars: int = 0
	filtered_chars: int = 0

	@property
	def removed_nodes(self) -> int:
		return self.original_nodes - self.filtered_nodes

	@property
	def compression_ratio(self) -> float:
		if self.original_nodes == 0:
			return 0.0
		return 1.0 - (self.filtered_nodes / self.original_nodes)

	@property
	def size_reduction_percent(self) -> float:
		if self.original_chars == 0:
			return 0.0
		return (self.original_chars - self.filtered_chars) / self.original_chars * 100
