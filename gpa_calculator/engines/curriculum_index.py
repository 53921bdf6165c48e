"""
Curriculum Index Engine.

This module turns a branch's curriculum definition into a flat, read-only
lookup from course code to CourseRecord.
"""

import logging
from collections.abc import Mapping

from ..config import CODE_SEPARATOR, DASH_INSERT_POSITION
from ..models import CourseRecord, CurriculumShape

logger = logging.getLogger(__name__)


class CurriculumIndex(Mapping):
    """
    Code -> CourseRecord lookup for one curriculum.

    CODE VARIANTS:
    --------------
    Transcripts and curriculum files disagree on whether codes carry a
    separator ("CSE221" vs "CSE-221"). Nested curricula are indexed under
    both spellings, and both keys hold the SAME record object. records()
    therefore returns each course once, which is what total credit hours
    must be summed over.

    The index is built once and never changes, so a single instance can be
    shared between any number of aggregations.

    Usage:
        index = CurriculumIndex.build(definition, CurriculumShape.NESTED)
        index["CSE221"] is index["CSE-221"]  # True
        index.total_credit_hours()
    """

    def __init__(self, records_by_code=None):
        self._by_code = dict(records_by_code or {})

    def __getitem__(self, code):
        return self._by_code[code]

    def __iter__(self):
        return iter(self._by_code)

    def __len__(self):
        return len(self._by_code)

    def __repr__(self):
        return f"CurriculumIndex({len(self.records())} courses, {len(self)} codes)"

    @classmethod
    def build(cls, definition, shape: CurriculumShape) -> "CurriculumIndex":
        """
        Build an index from a raw curriculum definition.

        Malformed courses are skipped; this never raises for bad data.

        Args:
            definition: {code: course} for FLAT, {level: {semester: [course]}}
                for NESTED
            shape: Which of the two layouts `definition` uses
        """
        if not isinstance(definition, Mapping):
            logger.debug("Curriculum definition is not an object; index is empty")
            return cls()
        if shape is CurriculumShape.NESTED:
            return cls(_flatten_nested(definition))
        return cls(_index_flat(definition))

    def records(self) -> list:
        """Unique records, in first-indexed order."""
        seen = set()
        unique = []
        for record in self._by_code.values():
            if id(record) not in seen:
                seen.add(id(record))
                unique.append(record)
        return unique

    def credit_hours(self, code: str):
        record = self._by_code.get(code)
        return record.credit_hours if record is not None else 0

    def total_credit_hours(self):
        return sum(record.credit_hours for record in self.records())


def code_variants(code: str) -> list:
    """
    Every spelling a course code is indexed under, native spelling first.

    "CSE221" -> ["CSE221", "CSE-221"]; "CSE-221" -> ["CSE-221", "CSE221"].
    Codes of DASH_INSERT_POSITION characters or fewer have no dashed form.
    """
    if CODE_SEPARATOR in code:
        variant = code.replace(CODE_SEPARATOR, "")
    elif len(code) > DASH_INSERT_POSITION:
        variant = code[:DASH_INSERT_POSITION] + CODE_SEPARATOR + code[DASH_INSERT_POSITION:]
    else:
        variant = code
    return [code] if variant == code else [code, variant]


def _index_flat(definition: Mapping) -> dict:
    by_code = {}
    for code, data in definition.items():
        if not isinstance(data, Mapping):
            logger.debug("Skipping non-object curriculum entry %r", code)
            continue
        by_code[code] = CourseRecord.from_dict(code, data)
    return by_code


def _flatten_nested(definition: Mapping) -> dict:
    by_code = {}
    for level, semesters in definition.items():
        if not isinstance(semesters, Mapping):
            continue
        for semester, courses in semesters.items():
            if not isinstance(courses, list):
                continue
            for course in courses:
                if not isinstance(course, Mapping):
                    logger.debug("Skipping non-object course in %s / %s", level, semester)
                    continue
                code = course.get("code")
                if not isinstance(code, str) or not code:
                    logger.debug("Skipping course without a code in %s / %s", level, semester)
                    continue
                record = CourseRecord.from_dict(code, course)
                for variant in code_variants(code):
                    by_code[variant] = record
    return by_code
