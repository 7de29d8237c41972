"""File-backed page storage.

Storage layout:
    data/
    ├── FrontPage.md
    ├── Notes.md
    └── Todo.md

Each file holds the raw page body with no header or metadata.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from flatwiki.core.errors import PageNotFoundError, PageSaveError
from flatwiki.core.titles import TitleMatcher, default_matcher

logger = logging.getLogger(__name__)

PAGE_SUFFIX = ".md"


@dataclass
class Page:
    """A titled unit of stored text."""

    title: str
    body: bytes = b""

    @property
    def text(self) -> str:
        """Body decoded as UTF-8 for display."""
        return self.body.decode("utf-8", errors="replace")


class PageStore:
    """Reads and writes pages as ``<title>.md`` files under a data directory.

    Titles are validated against the title pattern before any filename is
    built, so a valid title is used directly as the filename stem.
    """

    def __init__(self, data_dir: Path, matcher: TitleMatcher | None = None) -> None:
        """Initialize store.

        Args:
            data_dir: Directory containing page files. Never created by the store.
            matcher: Title matcher used to validate titles
        """
        self._data_dir = data_dir
        self._matcher = matcher or default_matcher

    @property
    def data_dir(self) -> Path:
        """Root directory holding page files."""
        return self._data_dir

    def path_for(self, title: str) -> Path:
        """Return the file path for a title.

        Raises:
            InvalidTitleError: If the title does not match the title pattern
        """
        self._matcher.validate(title)
        return self._data_dir / f"{title}{PAGE_SUFFIX}"

    def load(self, title: str) -> Page:
        """Load a page by title.

        Raises:
            PageNotFoundError: If the file is missing or cannot be read
            InvalidTitleError: If the title does not match the title pattern
        """
        path = self.path_for(title)
        try:
            body = path.read_bytes()
        except OSError as e:
            logger.info(f"Missing file {path}")
            raise PageNotFoundError(title) from e
        return Page(title=title, body=body)

    def save(self, page: Page) -> None:
        """Write a page, creating or truncating its file.

        Raises:
            PageSaveError: If the data directory is missing or unwritable
            InvalidTitleError: If the title does not match the title pattern
        """
        path = self.path_for(page.title)
        try:
            fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
            with os.fdopen(fd, "wb") as f:
                f.write(page.body)
        except OSError as e:
            logger.error(f"Saving {path}: {e}")
            raise PageSaveError(page.title, str(e)) from e

    def list_titles(self) -> list[str]:
        """List stored page names, sorted.

        Names are file names with the ``.md`` suffix removed. A missing or
        unreadable data directory lists as empty.
        """
        try:
            entries = list(self._data_dir.glob(f"*{PAGE_SUFFIX}"))
        except OSError as e:
            logger.debug(f"Listing {self._data_dir} failed: {e}")
            return []
        return sorted(entry.name.removesuffix(PAGE_SUFFIX) for entry in entries)
