"""HTML page rendering from file templates.

Templates are plain ``.html`` files with ``str.format`` placeholders. Every
value is HTML-escaped except the pre-rendered fragments passed as ``raw``.
"""

from __future__ import annotations

import html
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, Optional
from urllib.parse import quote

from src.journal import Entry

logger = logging.getLogger(__name__)

NO_STORY_TEXT = "No story yet."


class PageRenderer:
    """Load page templates and fill them with journal data."""

    def __init__(self, templates_dir: Path):
        self.templates_dir = templates_dir
        self._cache: Dict[str, str] = {}

    def _template(self, name: str) -> str:
        if name not in self._cache:
            path = self.templates_dir / name
            self._cache[name] = path.read_text(encoding="utf-8")
            logger.debug(f"Loaded template {path}")
        return self._cache[name]

    def render(self, name: str, raw: Optional[Dict[str, str]] = None, **values: Any) -> str:
        context = {key: html.escape(str(value)) for key, value in values.items()}
        context.update(raw or {})
        return self._template(name).format(**context)

    def render_index(self, journal_count: int, last_entry: Optional[Entry]) -> str:
        return self.render(
            "index.html",
            journal_count=journal_count,
            last_entry=last_entry.date if last_entry and last_entry.date else "No entries yet",
        )

    def render_write(self, entry: Optional[Entry]) -> str:
        return self.render(
            "write.html",
            entry_id=entry.id if entry else "",
            date=entry.date if entry else "",
            prompt=entry.prompt if entry else "",
            heading="Edit entry" if entry else "New entry",
        )

    def render_journals(self, entries: Iterable[Entry]) -> str:
        cards = [
            self.render(
                "journal_entry.html",
                raw={"edit_href": html.escape(f"/write/{quote(entry.id, safe='')}")},
                date=entry.date,
                story=entry.story or NO_STORY_TEXT,
                prompt=entry.prompt,
            )
            for entry in entries
        ]
        body = "\n".join(cards) if cards else '<p class="empty">No entries yet.</p>'
        return self.render("journals.html", raw={"entries": body})
