"""Dependency helpers shared across FastAPI routes."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from src.journal import Entry, EntryWorkflow, JournalStore, StorySummarizer
from src.story_journal.config import Config, load_config
from src.story_journal.ollama_client import OllamaClient

from .pages import PageRenderer
from .schemas import EntryResponse

TEMPLATES_DIR = Path(__file__).parent / "templates"


@lru_cache(maxsize=1)
def get_config() -> Config:
    """Configuration loaded once per process."""
    return load_config()


@lru_cache(maxsize=1)
def get_journal_store() -> JournalStore:
    """Singleton JournalStore (owns the in-memory document)."""
    return JournalStore(get_config().resolved_journal_path)


@lru_cache(maxsize=1)
def get_ollama_client() -> OllamaClient:
    """Lazily create the completion client."""
    config = get_config()
    summarizer = config.summarizer
    return OllamaClient(
        host=config.ollama.host,
        model=config.ollama.model,
        api_key=config.ollama.api_key,
        temperature=summarizer.temperature,
        max_tokens=summarizer.max_tokens,
        top_p=summarizer.top_p,
        frequency_penalty=summarizer.frequency_penalty,
        presence_penalty=summarizer.presence_penalty,
    )


@lru_cache(maxsize=1)
def get_summarizer() -> StorySummarizer:
    """Singleton StorySummarizer."""
    config = get_config()
    return StorySummarizer(
        ollama_client=get_ollama_client(),
        max_concurrency=config.summarizer.max_concurrency,
        timeout_seconds=config.summarizer.timeout_seconds,
    )


@lru_cache(maxsize=1)
def get_workflow() -> EntryWorkflow:
    """Singleton EntryWorkflow; all document writes go through it."""
    return EntryWorkflow(get_journal_store(), get_summarizer())


@lru_cache(maxsize=1)
def get_page_renderer() -> PageRenderer:
    """Singleton PageRenderer."""
    return PageRenderer(TEMPLATES_DIR)


def reset_dependencies() -> None:
    """Drop every cached singleton (used after config or env changes)."""
    for factory in (
        get_config,
        get_journal_store,
        get_ollama_client,
        get_summarizer,
        get_workflow,
        get_page_renderer,
    ):
        factory.cache_clear()


def serialize_entry(entry: Entry) -> EntryResponse:
    """Convert domain Entry to API response."""
    return EntryResponse(id=entry.id, date=entry.date, prompt=entry.prompt, story=entry.story)
