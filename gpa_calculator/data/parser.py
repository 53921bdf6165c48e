"""
Transcript parsing.

This module turns a raw student response into TranscriptEntry objects.
"""

import logging

from ..exceptions import TranscriptFormatError
from ..models import TranscriptEntry

logger = logging.getLogger(__name__)


class TranscriptParser:
    """
    Parses the student response exported by the student information system.

    ACCEPTED SHAPES:
    - {"studentProgress": [entry, ...], ...}  (full response)
    - [entry, ...]                            (bare list of entries)

    A response without "studentProgress" is an empty transcript, not an
    error. Entries that are neither objects nor TranscriptEntry are
    skipped. Field-level problems (blank scores, odd codes) are left for
    the aggregator to grade.
    """

    def parse(self, student_response) -> list:
        """
        Parse a student response.

        Returns:
            List of TranscriptEntry in transcript order

        Raises:
            TranscriptFormatError: if the response is neither object nor list
        """
        if isinstance(student_response, dict):
            raw_entries = student_response.get("studentProgress") or []
        elif isinstance(student_response, list):
            raw_entries = student_response
        else:
            raise TranscriptFormatError("Student response must be a JSON object or list")

        if not isinstance(raw_entries, list):
            raise TranscriptFormatError("studentProgress must be a list of courses")

        entries = []
        for raw in raw_entries:
            if isinstance(raw, TranscriptEntry):
                entries.append(raw)
                continue
            if not isinstance(raw, dict):
                logger.debug("Skipping non-object transcript entry %r", raw)
                continue
            entries.append(TranscriptEntry.from_dict(raw))
        return entries
