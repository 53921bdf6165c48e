"""
Curriculum data models.

Contains the CourseRecord dataclass and CurriculumShape enum that describe
a branch's curriculum.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from ..config import DEFAULT_CREDIT_HOURS, DEFAULT_TRACK


class CurriculumShape(Enum):
    """
    How a branch's curriculum is laid out in the curriculums file.

    FLAT: {code: course} - one object per course code, used as-is
    NESTED: {level: {semester: [course, ...]}} - must be flattened
    """
    FLAT = "flat"
    NESTED = "nested"


@dataclass(frozen=True)
class CourseRecord:
    """
    A single course from a curriculum definition.

    Records are built once when the curriculum is indexed and are never
    mutated afterwards. A record can be reachable under more than one code
    spelling ("CSE221" and "CSE-221"); both keys point at the same object.

    Attributes:
        code: Code as written in the curriculum (e.g., "CSE-221")
        name: Human-readable course title
        credit_hours: Credit hours, 3 when the curriculum omits them
        prerequisites: Course codes that must be taken first (not evaluated)
        level: Curriculum level label (e.g., "Level 2")
        semester_label: Semester label within the level (e.g., "Semester 1")
        track: Course type/track, "General" when absent
    """
    code: str
    name: str = ""
    credit_hours: Union[int, float] = DEFAULT_CREDIT_HOURS
    prerequisites: tuple = ()
    level: Optional[str] = None
    semester_label: Optional[str] = None
    track: str = DEFAULT_TRACK

    @property
    def type(self) -> str:
        """Alias kept for curriculum files that call the track 'type'."""
        return self.track

    @classmethod
    def from_dict(cls, code: str, data: dict) -> "CourseRecord":
        """Build a record from a raw curriculum object, applying defaults."""
        prerequisites = data.get("prerequisites")
        if not isinstance(prerequisites, (list, tuple)):
            prerequisites = ()
        return cls(
            code=code,
            name=data.get("name") or "",
            credit_hours=_coerce_credit_hours(data.get("credit_hours")),
            prerequisites=tuple(prerequisites),
            level=data.get("level"),
            semester_label=data.get("semester"),
            track=data.get("type") or data.get("track") or DEFAULT_TRACK,
        )


def _coerce_credit_hours(value) -> Union[int, float]:
    if isinstance(value, bool) or not value:
        return DEFAULT_CREDIT_HOURS
    try:
        hours = float(value)
    except (TypeError, ValueError):
        return DEFAULT_CREDIT_HOURS
    if not math.isfinite(hours) or hours <= 0:
        return DEFAULT_CREDIT_HOURS
    return int(hours) if hours.is_integer() else hours
