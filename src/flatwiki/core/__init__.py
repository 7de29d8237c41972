"""Core wiki logic: titles, storage, links, index and templates."""

from flatwiki.core.errors import (
    InvalidTitleError,
    PageNotFoundError,
    PageSaveError,
    WikiError,
)

__all__ = [
    "InvalidTitleError",
    "PageNotFoundError",
    "PageSaveError",
    "WikiError",
]
