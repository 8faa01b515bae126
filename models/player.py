from pydantic import Field
from typing import Dict, List, Optional

from .base import BaseGolfModel
from .hole_score import HoleScore


class Player(BaseGolfModel):
    """A participant in a round, with the course handicap established upstream."""

    id: str = Field(..., min_length=1)
    name: Optional[str] = None
    course_handicap: Optional[int] = None
    scores: List[HoleScore] = Field(default_factory=list)

    @property
    def display_name(self) -> str:
        return self.name or self.id

    def get_score(self, hole_number: int) -> Optional[HoleScore]:
        """Get the score for a hole by number (scores need not be ordered)."""
        for score in self.scores:
            if score.hole_number == hole_number:
                return score
        return None

    def strokes_by_hole(self) -> Dict[int, Optional[int]]:
        return {s.hole_number: s.strokes for s in self.scores}

    def calculate_total_score(self) -> Optional[int]:
        """Total gross strokes over played holes."""
        strokes = [s.strokes for s in self.scores if s.strokes is not None]
        return sum(strokes) if strokes else None
