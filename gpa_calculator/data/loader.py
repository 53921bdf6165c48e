"""
Data loading and caching.

This module loads the curriculums file (from disk or over HTTP) and student
transcript files. It is the only place the calculator touches the outside
world for input.
"""

import json
import logging
from pathlib import Path

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from ..config import (
    CURRICULUM_SOURCE,
    REQUEST_BACKOFF,
    REQUEST_RETRIES,
    REQUEST_TIMEOUT,
    RETRY_STATUS_CODES,
)
from ..exceptions import CurriculumLoadError, TranscriptFormatError
from ..models import Branch
from .parser import TranscriptParser

logger = logging.getLogger(__name__)


def create_retry_session() -> requests.Session:
    """Session that retries throttled or failing requests with backoff."""
    session = requests.Session()
    retries = Retry(
        total=REQUEST_RETRIES,
        backoff_factor=REQUEST_BACKOFF,
        status_forcelist=RETRY_STATUS_CODES,
        allowed_methods=["GET"],
    )
    adapter = HTTPAdapter(max_retries=retries)
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    session.headers.update({"Accept": "application/json"})
    return session


class DataLoader:
    """
    Loads and caches the curriculums file.

    WHY LAZY LOADING: The curriculums file is only read the first time
    `curriculums` is accessed, then kept for the life of the loader. Every
    branch lives in the same file, so one read serves all of them.

    SOURCES:
    - A filesystem path (default: data/Curriculums.json)
    - An http(s):// URL, fetched with a retrying requests session

    Usage:
        loader = DataLoader()
        definition, shape = loader.curriculum_for(Branch.GENERAL)
        entries = loader.load_transcript("transcript.json")
    """

    def __init__(self, source=None, session: requests.Session = None):
        self.source = str(source) if source is not None else CURRICULUM_SOURCE
        self._session = session
        self._curriculums = None
        self.parser = TranscriptParser()

    @property
    def is_remote(self) -> bool:
        return self.source.startswith(("http://", "https://"))

    @property
    def curriculums(self) -> dict:
        """The whole curriculums file, keyed by branch section."""
        if self._curriculums is None:
            data = self._fetch() if self.is_remote else self._read_file()
            if not isinstance(data, dict):
                raise CurriculumLoadError(f"Curriculums file is not an object: {self.source}")
            self._curriculums = data
            logger.info("Loaded curriculums from %s", self.source)
        return self._curriculums

    def curriculum_for(self, branch: Branch) -> tuple:
        """
        Find a branch's curriculum definition inside the curriculums file.

        Returns:
            (definition, CurriculumShape) ready for CurriculumIndex.build
        """
        node = self.curriculums
        for key in branch.curriculum_path:
            if not isinstance(node, dict) or key not in node:
                logger.error("Curriculum for %s missing at %s", branch.value, "/".join(branch.curriculum_path))
                raise CurriculumLoadError(f"No curriculum found for branch: {branch.value}")
            node = node[key]
        return node, branch.shape

    def load_transcript(self, path) -> list:
        """Read a student response file and return its TranscriptEntry list."""
        filepath = Path(path)
        if not filepath.exists():
            raise TranscriptFormatError(f"Transcript file not found: {filepath}")
        try:
            with open(filepath, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise TranscriptFormatError(f"Invalid JSON data in {filepath}: {e}") from e
        return self.parser.parse(data)

    def _read_file(self) -> dict:
        filepath = Path(self.source)
        if not filepath.exists():
            logger.error("Curriculums file not found: %s", filepath)
            raise CurriculumLoadError(f"Failed to load curriculums: {filepath} not found")
        try:
            with open(filepath, "r", encoding="utf-8") as f:
                return json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.error("Curriculums file is not valid JSON: %s", filepath)
            raise CurriculumLoadError(f"Failed to load curriculums: {e}") from e

    def _fetch(self) -> dict:
        if self._session is None:
            self._session = create_retry_session()
        try:
            resp = self._session.get(self.source, timeout=REQUEST_TIMEOUT)
            resp.raise_for_status()
            return resp.json()
        except requests.RequestException as e:
            logger.error("Fetching curriculums from %s failed: %s", self.source, e)
            raise CurriculumLoadError(f"Failed to load curriculums: {e}") from e
        except ValueError as e:
            logger.error("Curriculums at %s are not valid JSON", self.source)
            raise CurriculumLoadError(f"Failed to load curriculums: {e}") from e
