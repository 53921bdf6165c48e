"""
Grading engines.

This package contains the pure grading pipeline: score -> grade, curriculum
-> index, transcript -> semester and cumulative totals. Nothing here does
I/O or printing.
"""

from .grade_scale import banded_grade, grade_for, parse_score, standard_grade
from .curriculum_index import CurriculumIndex, code_variants
from .aggregator import TranscriptAggregator, aggregate

__all__ = [
    "CurriculumIndex",
    "TranscriptAggregator",
    "aggregate",
    "banded_grade",
    "code_variants",
    "grade_for",
    "parse_score",
    "standard_grade",
]
