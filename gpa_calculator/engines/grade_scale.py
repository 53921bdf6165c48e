"""
Grade Scale Engine.

Maps a raw score to a letter grade and grade points under one of the two
grading scales. Every function here is total: unreadable input yields the
N/A sentinel instead of raising.
"""

import math
import re
from typing import Optional

from ..config import (
    BANDED_GPA_MAP,
    BANDED_MAX_SCORE,
    FAIL_LETTER,
    NOT_AVAILABLE,
    STANDARD_BREAKPOINTS,
)
from ..models import GradeResult, GradeScale

# Leading decimal number, e.g. "88.5" out of "88.5 (retake)".
_LEADING_NUMBER = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

NOT_AVAILABLE_RESULT = GradeResult(NOT_AVAILABLE, 0.0)
FAIL_RESULT = GradeResult(FAIL_LETTER, 0.0)


def parse_score(raw) -> Optional[float]:
    """
    Read a score the lenient way student systems write them.

    Numbers are used as-is; strings contribute their leading decimal number
    after any leading whitespace ("88.5abc" -> 88.5). Returns None when no
    number can be read.
    """
    if isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        return None if math.isnan(raw) else float(raw)
    if not isinstance(raw, str):
        return None
    match = _LEADING_NUMBER.match(raw.lstrip())
    if match is None:
        return None
    return float(match.group())


def standard_grade(raw) -> GradeResult:
    """Grade a score against the fixed standard breakpoints."""
    score = parse_score(raw)
    if score is None:
        return NOT_AVAILABLE_RESULT
    for minimum, letter, points in STANDARD_BREAKPOINTS:
        if score >= minimum:
            return GradeResult(letter, points)
    return FAIL_RESULT


def banded_grade(raw) -> GradeResult:
    """
    Grade a score against the banded scale.

    Bands are [lower, upper) except the top band, which also accepts exactly
    BANDED_MAX_SCORE. Inside a band the grade points move linearly from
    gpa_min to gpa_max and are rounded half-up to two decimals.
    """
    score = parse_score(raw)
    if score is None:
        return NOT_AVAILABLE_RESULT
    for lower, upper, gpa_min, gpa_max, letter in BANDED_GPA_MAP:
        in_band = lower <= score < upper
        if in_band or (upper == BANDED_MAX_SCORE and score == BANDED_MAX_SCORE):
            if gpa_min == gpa_max:
                return GradeResult(letter, gpa_min)
            gpa = gpa_min + (gpa_max - gpa_min) * (score - lower) / (upper - lower)
            return GradeResult(letter, _round_half_up(gpa))
    return FAIL_RESULT


def grade_for(scale: GradeScale, raw) -> GradeResult:
    """Grade a raw score under the named scale."""
    if scale is GradeScale.BANDED:
        return banded_grade(raw)
    return standard_grade(raw)


def _round_half_up(value: float) -> float:
    return math.floor(value * 100 + 0.5) / 100
