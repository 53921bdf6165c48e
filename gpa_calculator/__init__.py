"""
GPA Calculator Package
======================

Turns a student's per-course transcript records into a grade-point summary
(cumulative GPA, completed credit hours) grouped by semester, using a
branch-specific curriculum and grading scale.

ARCHITECTURE OVERVIEW
---------------------

┌─────────────────────────────────────────────────────────────────────────┐
│                         ALGORITHM LAYER                                  │
│        (Pure logic - returns data structures, NO UI/printing)           │
│                                                                         │
│  ┌─────────────┐  ┌─────────────────┐  ┌─────────────────────────────┐  │
│  │ GradeScale  │  │ CurriculumIndex │  │    TranscriptAggregator     │  │
│  │ (score->    │  │ (code variants, │  │ (matching, pass/fail, GPA,  │  │
│  │  letter)    │  │  shared records)│  │  semester totals)           │  │
│  └─────────────┘  └─────────────────┘  └─────────────────────────────┘  │
│                                                                         │
│  ┌─────────────────────────┐  ┌─────────────────────────────────────┐  │
│  │       DataLoader        │  │         TranscriptParser            │  │
│  │ (curriculums file/URL)  │  │      (student response JSON)        │  │
│  └─────────────────────────┘  └─────────────────────────────────────┘  │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   │ Returns dataclasses
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                      PRESENTATION LAYER                                  │
│                        TerminalDisplay                                   │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                         GPACalculator                                    │
│          (Orchestrator - connects algorithm to presentation)            │
└─────────────────────────────────────────────────────────────────────────┘

USAGE
-----

    from gpa_calculator import GPACalculator

    calculator = GPACalculator()
    result = calculator.calculate(student_response, "Software Engineering")
    print(f"{result.gpa:.2f}", result.completed_hours, result.total_hours)

Running from command line:

    python -m gpa_calculator data/example_transcript.json --branch General

"""

# Version
__version__ = "1.0.0"

# Main exports
from .calculator import GPACalculator

# Model exports (for programmatic use)
from .models import (
    AggregateResult,
    Branch,
    CourseRecord,
    CourseRow,
    CurriculumShape,
    GradeResult,
    GradeScale,
    SemesterSummary,
    TranscriptEntry,
)

# Engine exports (for advanced use)
from .engines import (
    CurriculumIndex,
    TranscriptAggregator,
    aggregate,
    grade_for,
)

# Data exports
from .data import DataLoader, TranscriptParser

# UI exports
from .ui import TerminalDisplay

# Error exports
from .exceptions import (
    GPACalculatorError,
    CurriculumLoadError,
    TranscriptFormatError,
    UnknownBranchError,
)

__all__ = [
    "__version__",
    "GPACalculator",
    # Models
    "AggregateResult",
    "Branch",
    "CourseRecord",
    "CourseRow",
    "CurriculumShape",
    "GradeResult",
    "GradeScale",
    "SemesterSummary",
    "TranscriptEntry",
    # Engines
    "CurriculumIndex",
    "TranscriptAggregator",
    "aggregate",
    "grade_for",
    # Data
    "DataLoader",
    "TranscriptParser",
    # UI
    "TerminalDisplay",
    # Errors
    "GPACalculatorError",
    "CurriculumLoadError",
    "TranscriptFormatError",
    "UnknownBranchError",
]
