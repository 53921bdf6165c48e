"""
Data models for the GPA calculator.

This package contains all dataclasses and enums used throughout the system.
These serve as "contracts" between different parts of the system.
"""

from .course import CourseRecord, CurriculumShape
from .grade import Branch, GradeResult, GradeScale
from .transcript import (
    AggregateResult,
    CourseRow,
    SemesterSummary,
    TranscriptEntry,
)

__all__ = [
    # Curriculum models
    "CourseRecord",
    "CurriculumShape",
    # Grading models
    "Branch",
    "GradeResult",
    "GradeScale",
    # Transcript and results
    "AggregateResult",
    "CourseRow",
    "SemesterSummary",
    "TranscriptEntry",
]
