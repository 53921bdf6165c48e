"""
Configuration constants for the GPA calculator.

This module contains all configuration values and constants used throughout
the grading pipeline. Centralizing these makes it easy to adjust behavior
as grading policies change.
"""

import logging
import os
from pathlib import Path

# =============================================================================
# FILE PATHS
# =============================================================================

# Base data directory (relative to this file's location)
BASE_DIR = Path(__file__).parent.parent
DATA_DIR = BASE_DIR / "data"

# Path or http(s) URL of the curriculums file. Overridable per deployment.
CURRICULUM_SOURCE = os.environ.get("GPA_CURRICULUM_SOURCE", str(DATA_DIR / "Curriculums.json"))
DEFAULT_TRANSCRIPT_PATH = DATA_DIR / "example_transcript.json"


# =============================================================================
# CODE FORMATS
# =============================================================================
# Transcript codes look like "CSE-221|2023A" and semester labels like
# "20231|Fall 2023". Curriculum codes may be written "CSE221" or "CSE-221".

FIELD_SEPARATOR = "|"
CODE_SEPARATOR = "-"

# "CSE221" -> "CSE-221": the separator goes after the 3-letter department.
DASH_INSERT_POSITION = 3


# =============================================================================
# CURRICULUM DEFAULTS
# =============================================================================

DEFAULT_CREDIT_HOURS = 3
DEFAULT_TRACK = "General"


# =============================================================================
# GRADE DEFINITIONS
# =============================================================================

NOT_AVAILABLE = "N/A"
FAIL_LETTER = "F"
PASS_LETTER = "P"

# University requirements (UNI-xxx) are pass/fail only and never enter the GPA.
PASS_FAIL_PREFIX = "UNI-"
PASS_INDICATOR = "P"

UNKNOWN_SEMESTER = "Unknown"

# Standard scale: (minimum score, letter, grade points), checked top-down.
STANDARD_BREAKPOINTS = [
    (96, "A+", 4.0),
    (92, "A", 3.7),
    (88, "A-", 3.4),
    (84, "B+", 3.2),
    (80, "B", 3.0),
    (76, "B-", 2.8),
    (72, "C+", 2.6),
    (68, "C", 2.4),
    (64, "C-", 2.2),
    (60, "D+", 2.0),
    (55, "D", 1.5),
    (50, "D-", 1.0),
]

# Banded scale: (lower, upper, gpa_min, gpa_max, letter). Bands are
# half-open [lower, upper) except the top band, which also includes 100.
BANDED_GPA_MAP = [
    (95, 100, 3.7, 4.0, "A+"),
    (90, 95, 3.4, 3.7, "A"),
    (85, 90, 3.1, 3.4, "A-"),
    (80, 85, 2.8, 3.1, "B+"),
    (75, 80, 2.5, 2.8, "B"),
    (70, 75, 2.2, 2.5, "C+"),
    (65, 70, 1.9, 2.2, "C"),
    (60, 65, 1.6, 1.9, "D+"),
    (50, 60, 1.0, 1.6, "D"),
    (0, 50, 0.0, 0.0, "F"),
]
BANDED_MAX_SCORE = 100


# =============================================================================
# BRANCHES
# =============================================================================
# Each branch selects where its curriculum lives in the curriculums file,
# the shape of that curriculum, the grading scale, and whether transcript
# codes lose their separators before lookup.
#
#   curriculum_path: keys to follow inside Curriculums.json
#   shape:           "flat" or "nested" (see models.CurriculumShape)
#   scale:           "standard" or "banded" (see models.GradeScale)
#   strip_codes:     remove CODE_SEPARATOR from transcript codes

BRANCHES = {
    "General": {
        "curriculum_path": ("General",),
        "shape": "flat",
        "scale": "standard",
        "strip_codes": False,
    },
    "Software Engineering": {
        "curriculum_path": ("SoftwareEngineering", "curriculum"),
        "shape": "nested",
        "scale": "banded",
        "strip_codes": True,
    },
}


# =============================================================================
# NETWORK
# =============================================================================

REQUEST_TIMEOUT = 15
REQUEST_RETRIES = 3
REQUEST_BACKOFF = 1
RETRY_STATUS_CODES = [429, 500, 502, 503, 504]


# =============================================================================
# LOGGING
# =============================================================================

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_LEVEL = os.environ.get("GPA_LOG_LEVEL", "WARNING").upper()


def resolve_log_level(verbose: int = 0) -> int:
    """Map -v flags (or GPA_LOG_LEVEL) to a logging level."""
    if verbose >= 2:
        return logging.DEBUG
    if verbose == 1:
        return logging.INFO
    return getattr(logging, LOG_LEVEL, logging.WARNING)
