"""Route registration helpers."""

from .journal import register_journal_routes
from .pages import register_page_routes

__all__ = [
    "register_journal_routes",
    "register_page_routes",
]
