from pydantic import Field, model_validator
from typing import List, Literal, Optional

from .base import ClubModel
from .hole import Hole
from .tee import Tee

Gender = Literal["Male", "Female"]


class Course(ClubModel):
    """Golf course with its holes and rated tees.

    Holes are supplied by the caller; the course only checks that they form a
    playable layout (unique numbers 1..N and a stroke-index permutation).
    """
    id: Optional[str] = None
    name: str = Field(..., min_length=1)
    address: Optional[str] = None
    holes: List[Hole] = Field(default_factory=list)
    men_tees: List[Tee] = Field(default_factory=list)
    women_tees: List[Tee] = Field(default_factory=list)

    @model_validator(mode='after')
    def validate_layout(self):
        count = len(self.holes)
        if count == 0:
            return self
        if count not in (9, 18):
            raise ValueError(f"A course needs 9 or 18 holes, got {count}")

        numbers = sorted(h.number for h in self.holes)
        if numbers != list(range(1, count + 1)):
            raise ValueError(f"Hole numbers must be 1-{count} with no gaps or duplicates")

        ranks = sorted(h.handicap for h in self.holes)
        if ranks != list(range(1, count + 1)):
            raise ValueError(f"Hole handicaps must be a permutation of 1-{count}")
        return self

    @property
    def hole_count(self) -> int:
        return len(self.holes)

    @property
    def par(self) -> Optional[int]:
        """Total par for the layout, None until holes are entered."""
        if not self.holes:
            return None
        return sum(h.par for h in self.holes)

    def get_hole(self, number: int) -> Optional[Hole]:
        """Get a hole by its number."""
        for hole in self.holes:
            if hole.number == number:
                return hole
        return None

    def tees_for(self, gender: Gender) -> List[Tee]:
        return self.women_tees if gender == "Female" else self.men_tees

    def get_tee(self, name: str, gender: Gender = "Male") -> Optional[Tee]:
        """Get a tee by name from the men's or women's ratings."""
        for tee in self.tees_for(gender):
            if tee.name.lower() == name.lower():
                return tee
        return None
