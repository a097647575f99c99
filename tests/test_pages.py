"""PageRendererのテスト"""

from pathlib import Path

import pytest

from src.journal.models import Entry
from src.server.pages import NO_STORY_TEXT, PageRenderer

TEMPLATES_DIR = Path(__file__).resolve().parents[1] / "src" / "server" / "templates"


@pytest.fixture
def renderer():
    return PageRenderer(TEMPLATES_DIR)


def test_values_are_escaped(renderer):
    entry = Entry(id="a1", date="<b>today</b>", prompt="<script>alert(1)</script>")

    page = renderer.render_write(entry)

    assert "<script>alert(1)</script>" not in page
    assert "&lt;script&gt;alert(1)&lt;/script&gt;" in page
    assert "&lt;b&gt;today&lt;/b&gt;" in page
    assert "Edit entry" in page


def test_journals_listing(renderer):
    entries = [
        Entry(id="a1", date="Monday", prompt="Went hiking", story="They went hiking."),
        Entry(id="b/2", date="Tuesday", prompt="Stayed in"),
    ]

    page = renderer.render_journals(entries)

    assert page.index("They went hiking.") < page.index(NO_STORY_TEXT)
    assert 'href="/write/a1"' in page
    assert 'href="/write/b%2F2"' in page


def test_empty_listing(renderer):
    assert "No entries yet." in renderer.render_journals([])


def test_index_without_entries(renderer):
    page = renderer.render_index(0, None)
    assert "<strong>0</strong>" in page
    assert "No entries yet" in page
