"""
Error types for the I/O and orchestration layers.

The grading engines never raise for malformed academic data; they degrade by
omission. These errors belong to the edges: reading files, fetching the
curriculum, and choosing a branch.
"""


class GPACalculatorError(Exception):
    """Base class for user-facing calculator errors."""


class CurriculumLoadError(GPACalculatorError):
    """Raised when the curriculums file cannot be read or lacks a branch."""


class TranscriptFormatError(GPACalculatorError):
    """Raised when the student response is not valid JSON or has the wrong shape."""


class UnknownBranchError(GPACalculatorError):
    """Raised when the requested branch is not one of the configured branches."""
