"""
Data loading and parsing module.

This package handles all file and network I/O and transcript parsing.
"""

from .loader import DataLoader, create_retry_session
from .parser import TranscriptParser

__all__ = ["DataLoader", "TranscriptParser", "create_retry_session"]
