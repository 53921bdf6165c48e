"""
Transcript Aggregation Engine.

This module resolves transcript entries against a curriculum index and
rolls them up into per-semester and cumulative grade-point totals.
"""

import logging
from collections.abc import Mapping

from ..config import (
    CODE_SEPARATOR,
    FIELD_SEPARATOR,
    FAIL_LETTER,
    NOT_AVAILABLE,
    PASS_FAIL_PREFIX,
    PASS_INDICATOR,
    PASS_LETTER,
    UNKNOWN_SEMESTER,
)
from ..models import (
    AggregateResult,
    Branch,
    CourseRow,
    GradeResult,
    SemesterSummary,
    TranscriptEntry,
)
from .curriculum_index import CurriculumIndex
from .grade_scale import grade_for

logger = logging.getLogger(__name__)


class TranscriptAggregator:
    """
    Turns a list of transcript entries into an AggregateResult.

    ═══════════════════════════════════════════════════════════════════════════
    INCLUSION RULES
    ═══════════════════════════════════════════════════════════════════════════

    - Entries whose code is not in the curriculum are dropped entirely.
    - UNI- courses are pass/fail: they are listed in their semester with a
      "P" or "F" letter but never touch any point or hour total.
    - Everything else is graded with the branch's scale. It counts toward
      the GPA only when the raw score is a non-blank string that grades to
      a real letter (not "N/A").
    - Any non-UNI entry with points > 0 marks its code as passed. Passed
      codes are never un-passed by a later attempt.

    ═══════════════════════════════════════════════════════════════════════════

    The aggregator holds no state between calls; the index is only read.

    Usage:
        aggregator = TranscriptAggregator()
        result = aggregator.aggregate(entries, index, Branch.GENERAL)
    """

    def aggregate(self, entries, index: CurriculumIndex, branch) -> AggregateResult:
        """
        Grade and total a transcript.

        Args:
            entries: TranscriptEntry objects or raw student-response dicts
            index: Curriculum index for the branch
            branch: Branch (or its name); unrecognised branches match nothing

        Returns:
            AggregateResult with semesters sorted by semester id
        """
        selected = Branch.parse(branch)
        if selected is None:
            logger.warning("Unrecognised branch %r; nothing to aggregate", branch)
            return AggregateResult()

        semesters = {}
        passed_codes = set()
        total_points = 0.0
        total_hours = 0

        for entry in entries or []:
            entry = _as_entry(entry)
            if entry is None:
                continue

            written_code = _course_code(entry.crscode)
            code = written_code
            if selected.strip_codes:
                code = code.replace(CODE_SEPARATOR, "")

            record = index.get(code)
            if record is None:
                logger.debug("No curriculum course for %r; skipping", code)
                continue

            # Checked before separator stripping, unlike the legacy web
            # calculator, so UNI courses stay pass/fail in every branch.
            is_pass_fail = written_code.startswith(PASS_FAIL_PREFIX)
            if is_pass_fail:
                grade = _pass_fail_grade(entry.grade_n)
            else:
                grade = grade_for(selected.scale, entry.degree)

            summary = _semester_for(semesters, entry)
            summary.courses.append(CourseRow(
                name=record.name,
                code=code,
                hours=record.credit_hours,
                raw_score=entry.degree,
                letter=grade.letter,
                points=grade.points,
            ))

            if not is_pass_fail and _counts_toward_gpa(entry.degree, grade):
                weighted = grade.points * record.credit_hours
                summary.total_points += weighted
                summary.total_hours += record.credit_hours
                total_points += weighted
                total_hours += record.credit_hours

            if not is_pass_fail and grade.points > 0:
                passed_codes.add(code)

        return AggregateResult(
            semesters=sorted(semesters.items(), key=lambda item: item[0]),
            gpa=total_points / total_hours if total_hours > 0 else 0.0,
            completed_hours=sum(index.credit_hours(code) for code in sorted(passed_codes)),
            total_hours=index.total_credit_hours(),
        )


def aggregate(entries, index: CurriculumIndex, branch) -> AggregateResult:
    """Module-level shortcut for TranscriptAggregator().aggregate()."""
    return TranscriptAggregator().aggregate(entries, index, branch)


def _as_entry(entry):
    if isinstance(entry, TranscriptEntry):
        return entry
    if isinstance(entry, Mapping):
        return TranscriptEntry.from_dict(entry)
    logger.debug("Skipping non-object transcript entry %r", entry)
    return None


def _course_code(crscode) -> str:
    if not isinstance(crscode, str):
        return ""
    return crscode.split(FIELD_SEPARATOR, 1)[0]


def _pass_fail_grade(indicator) -> GradeResult:
    if isinstance(indicator, str) and indicator.strip().upper() == PASS_INDICATOR:
        return GradeResult(PASS_LETTER, 0.0)
    return GradeResult(FAIL_LETTER, 0.0)


def _semester_for(semesters: dict, entry: TranscriptEntry) -> SemesterSummary:
    semester_id = _semester_key(entry.yearsem)
    if semester_id not in semesters:
        semesters[semester_id] = SemesterSummary(
            id=semester_id,
            name=_semester_name(entry.semester_course),
        )
    return semesters[semester_id]


def _semester_key(yearsem) -> str:
    # Keys must all be strings for the lexical sort.
    if yearsem is None or yearsem == "":
        return UNKNOWN_SEMESTER
    return str(yearsem)


def _semester_name(semester_course) -> str:
    if not isinstance(semester_course, str):
        return UNKNOWN_SEMESTER
    _, separator, name = semester_course.partition(FIELD_SEPARATOR)
    name = name.split(FIELD_SEPARATOR, 1)[0]
    return name if separator and name else UNKNOWN_SEMESTER


def _counts_toward_gpa(raw_score, grade: GradeResult) -> bool:
    return (
        isinstance(raw_score, str)
        and raw_score.strip() != ""
        and grade.letter != NOT_AVAILABLE
    )
