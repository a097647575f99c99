"""Entry workflow: create, update and read diary entries.

Every mutation runs under a single lock and is applied to a copy of the
document; the copy only replaces the cached document once it is saved, so a
failed write leaves memory and disk unchanged.
"""

from __future__ import annotations

import asyncio
import logging
import uuid
from typing import Callable, List, Optional, Tuple

from .exceptions import NotFoundError, ValidationError
from .models import Entry, JournalDocument
from .store import JournalStore
from .summarizer import StorySummarizer

logger = logging.getLogger(__name__)


def generate_entry_id() -> str:
    """Short opaque id, 9 hex characters."""
    return uuid.uuid4().hex[:9]


class EntryWorkflow:
    """Operations on journal entries backed by a JournalStore."""

    def __init__(
        self,
        store: JournalStore,
        summarizer: Optional[StorySummarizer] = None,
        id_factory: Callable[[], str] = generate_entry_id,
    ):
        self.store = store
        self.summarizer = summarizer
        self.id_factory = id_factory
        self._lock = asyncio.Lock()
        self._summarize_lock = asyncio.Lock()

    @staticmethod
    def _clean_prompt(prompt_text: Optional[str]) -> str:
        if not isinstance(prompt_text, str):
            raise ValidationError("prompt must be a string")
        cleaned = prompt_text.strip()
        if not cleaned:
            raise ValidationError("prompt must not be empty")
        return cleaned

    def _new_id(self, document: JournalDocument) -> str:
        existing = document.ids()
        entry_id = self.id_factory()
        while entry_id in existing:
            entry_id = self.id_factory()
        return entry_id

    async def create(self, prompt_text: str, date_label: str = "") -> str:
        """Append a new entry and persist. Returns the generated id."""
        entry = await self._append(prompt_text, date_label)
        return entry.id

    async def _append(self, prompt_text: str, date_label: str) -> Entry:
        prompt = self._clean_prompt(prompt_text)
        async with self._lock:
            document = (await self.store.load()).copy()
            entry = Entry(id=self._new_id(document), date=date_label or "", prompt=prompt)
            document.prompts.append(entry)
            await self.store.save(document)
        logger.info("Prompt added successfully: %s", entry.id)
        return entry.copy()

    async def update(
        self,
        entry_id: str,
        prompt_text: str,
        date_label: str = "",
        story: Optional[str] = None,
    ) -> Entry:
        """Replace the whole record for ``entry_id``.

        The previous story is not carried over; pass ``story`` to keep it.
        """
        prompt = self._clean_prompt(prompt_text)
        async with self._lock:
            document = (await self.store.load()).copy()
            index = document.index_of(entry_id)
            if index == -1:
                raise NotFoundError(f"Prompt not found: {entry_id}")
            entry = Entry(id=entry_id, date=date_label or "", prompt=prompt, story=story or None)
            document.prompts[index] = entry
            await self.store.save(document)
        logger.info("Prompt updated successfully: %s", entry_id)
        return entry.copy()

    async def save_entry(
        self,
        prompt_text: str,
        date_label: str = "",
        entry_id: Optional[str] = None,
        story: Optional[str] = None,
    ) -> Tuple[Entry, bool]:
        """Create when ``entry_id`` is absent, update otherwise.

        Returns:
            (entry, created)
        """
        if entry_id:
            entry = await self.update(entry_id, prompt_text, date_label, story=story)
            return entry, False
        entry = await self._append(prompt_text, date_label)
        return entry, True

    async def find_by_id(self, entry_id: Optional[str]) -> Optional[Entry]:
        if not entry_id:
            return None
        document = await self.store.load()
        entry = document.find(entry_id)
        return entry.copy() if entry else None

    async def most_recent(self) -> Optional[Entry]:
        document = await self.store.load()
        entry = document.most_recent()
        return entry.copy() if entry else None

    async def count(self) -> int:
        document = await self.store.load()
        return len(document.prompts)

    async def list_entries(self, summarize: bool = True) -> List[Entry]:
        """All entries in insertion order.

        With ``summarize``, entries lacking a story are summarized first and
        the gathered stories are saved. Raises SummarizationError on failure;
        nothing is saved in that case.
        """
        if summarize and self.summarizer is not None:
            # One summarization pass at a time, so an entry is sent to the LLM once
            async with self._summarize_lock:
                document = await self.store.load()
                pending = [entry.copy() for entry in document.prompts if not entry.story]
                if pending:
                    await self.summarizer.summarize(pending)
                    await self._apply_stories(pending)
        document = await self.store.load()
        return [entry.copy() for entry in document.prompts]

    async def _apply_stories(self, summarized: List[Entry]) -> None:
        async with self._lock:
            document = (await self.store.load()).copy()
            applied = 0
            for source in summarized:
                target = document.find(source.id)
                # Skip entries rewritten while the stories were being fetched
                if target is None or target.story or target.prompt != source.prompt:
                    continue
                target.story = source.story
                applied += 1
            if applied:
                await self.store.save(document)
        logger.info("Applied %d stories", applied)
