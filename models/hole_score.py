from pydantic import Field, model_validator
from typing import Optional

from .base import BaseGolfModel


class HoleScore(BaseGolfModel):
    """A player's score on a single hole. strokes=None means not yet played."""

    hole_number: int = Field(..., ge=1, le=18)
    strokes: Optional[int] = Field(None, ge=1, le=20)
    putts: Optional[int] = Field(None, ge=0, le=10)

    @model_validator(mode='after')
    def validate_score_consistency(self):
        # Putts cannot exceed strokes
        if self.putts is not None and self.strokes is not None:
            if self.putts > self.strokes:
                raise ValueError(f"Putts ({self.putts}) cannot exceed strokes ({self.strokes})")
        return self

    @property
    def is_played(self) -> bool:
        return self.strokes is not None

    def to_par(self, par: int) -> Optional[int]:
        """Score relative to par (+2, -1, etc.)."""
        if self.strokes is None:
            return None
        return self.strokes - par
