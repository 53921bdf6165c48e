"""
GPA Calculator - Main Orchestrator.

This module contains the GPACalculator class that connects the
grading engines to the presentation layer.
"""

import logging

from .data import DataLoader
from .engines import CurriculumIndex, TranscriptAggregator
from .exceptions import UnknownBranchError
from .models import AggregateResult, Branch
from .ui import TerminalDisplay

logger = logging.getLogger(__name__)

ALL_SEMESTERS = ("all", "All Semesters")


class GPACalculator:
    """
    Main interface for the GPA calculator.

    ═══════════════════════════════════════════════════════════════════════════
    ROLE: ORCHESTRATOR
    ═══════════════════════════════════════════════════════════════════════════

    1. Resolves the branch (rejecting unknown ones before any grading)
    2. Builds the branch's curriculum index via the DataLoader
    3. Runs the TranscriptAggregator and returns its AggregateResult
    4. Hands the result to the display, when asked to render

    The calculator keeps no "last result": every call returns a fresh
    AggregateResult and rendering takes that result explicitly.

    TO CHANGE THE UI:
    -----------------
    Pass a different display class: GPACalculator(display=WebDisplay)

    ═══════════════════════════════════════════════════════════════════════════

    USAGE:
        calculator = GPACalculator()
        result = calculator.calculate(student_response, "General")
        print(result.gpa, result.completed_hours, result.total_hours)
    """

    def __init__(self, loader: DataLoader = None, display=None):
        self.loader = loader or DataLoader()
        self.display = display or TerminalDisplay
        self.aggregator = TranscriptAggregator()
        # Indexes are immutable once built, so one per branch is enough.
        self._indexes = {}

    @staticmethod
    def resolve_branch(branch) -> Branch:
        selected = Branch.parse(branch)
        if selected is None:
            names = ", ".join(b.value for b in Branch)
            raise UnknownBranchError(f"Unknown branch {branch!r}; expected one of: {names}")
        return selected

    def build_index(self, branch) -> CurriculumIndex:
        """Curriculum index for a branch, built on first use."""
        selected = self.resolve_branch(branch)
        if selected not in self._indexes:
            definition, shape = self.loader.curriculum_for(selected)
            self._indexes[selected] = CurriculumIndex.build(definition, shape)
            logger.info("Indexed %s curriculum: %r", selected.value, self._indexes[selected])
        return self._indexes[selected]

    def calculate(self, student_response, branch) -> AggregateResult:
        """
        Grade a student response for a branch.

        Args:
            student_response: Raw response ({"studentProgress": [...]}) or a
                list of TranscriptEntry / raw entry dicts
            branch: Branch or its display name

        Raises:
            UnknownBranchError: branch is not recognised
            CurriculumLoadError: curriculum could not be loaded
            TranscriptFormatError: response has the wrong top-level shape
        """
        selected = self.resolve_branch(branch)
        entries = self.loader.parser.parse(student_response)
        index = self.build_index(selected)
        return self.aggregator.aggregate(entries, index, selected)

    def run_report(self, transcript_path, branch, semester: str = "all") -> AggregateResult:
        """Load a transcript file, grade it, and render the report."""
        selected = self.resolve_branch(branch)
        entries = self.loader.load_transcript(transcript_path)
        result = self.aggregator.aggregate(entries, self.build_index(selected), selected)
        self.display.print_results(result, semester)
        return result

    @staticmethod
    def semester_options(result: AggregateResult) -> list:
        """(id, name) choices for filtering, "All Semesters" first."""
        return [ALL_SEMESTERS] + [(key, summary.name) for key, summary in result.semesters]
