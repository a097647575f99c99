"""
Journal module for diary entries and their generated stories.

This module provides functionality for:
- Entry storage in a single JSON document
- Create/update/read workflow for entries
- LLM-powered third-person story summaries
"""

from src.journal.exceptions import (
    CorruptStateError,
    JournalError,
    NotFoundError,
    PersistenceError,
    StorageError,
    SummarizationError,
    ValidationError,
)
from src.journal.models import Entry, JournalDocument
from src.journal.store import JournalStore
from src.journal.summarizer import StorySummarizer
from src.journal.workflow import EntryWorkflow

__all__ = [
    "CorruptStateError",
    "Entry",
    "EntryWorkflow",
    "JournalDocument",
    "JournalError",
    "JournalStore",
    "NotFoundError",
    "PersistenceError",
    "StorageError",
    "StorySummarizer",
    "SummarizationError",
    "ValidationError",
]
