"""
Grading data models.

Contains the GradeScale and Branch enums that select how a transcript is
graded, and the GradeResult produced for every graded entry.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from ..config import BRANCHES
from .course import CurriculumShape


class GradeScale(Enum):
    """
    The two grading scales a branch can use.

    STANDARD: fixed breakpoints, one grade-point value per letter
    BANDED: score bands with grade points interpolated inside each band
    """
    STANDARD = "standard"
    BANDED = "banded"


class Branch(Enum):
    """
    Academic program variant.

    A branch decides which curriculum is read from the curriculums file,
    what shape that curriculum has, and which grading scale applies.
    The per-branch settings live in config.BRANCHES.
    """
    GENERAL = "General"
    SOFTWARE_ENGINEERING = "Software Engineering"

    @classmethod
    def parse(cls, value) -> Optional["Branch"]:
        """Return the matching branch, or None for anything unrecognised."""
        if isinstance(value, cls):
            return value
        for branch in cls:
            if value == branch.value:
                return branch
        return None

    @property
    def settings(self) -> dict:
        return BRANCHES[self.value]

    @property
    def curriculum_path(self) -> Tuple[str, ...]:
        return tuple(self.settings["curriculum_path"])

    @property
    def shape(self) -> CurriculumShape:
        return CurriculumShape(self.settings["shape"])

    @property
    def scale(self) -> GradeScale:
        return GradeScale(self.settings["scale"])

    @property
    def strip_codes(self) -> bool:
        return bool(self.settings["strip_codes"])


@dataclass(frozen=True)
class GradeResult:
    """
    Letter grade and grade points for one score.

    Derived per transcript entry and never stored. A letter of "N/A" means
    the score could not be read; such entries never enter the GPA.
    """
    letter: str
    points: float
