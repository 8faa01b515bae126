from pydantic import Field

from .base import BaseGolfModel


class Hole(BaseGolfModel):
    """A single hole of the course being played. Immutable once a round starts."""

    number: int = Field(..., ge=1, le=18)
    par: int = Field(..., ge=3, le=5)
    handicap_rank: int = Field(..., ge=1, le=18)  # 1 = hardest

    @property
    def is_front_nine(self) -> bool:
        return self.number <= 9
