"""Exceptions raised by the wiki core."""


class WikiError(Exception):
    """Base class for wiki errors."""


class InvalidTitleError(WikiError, ValueError):
    """Title or request path does not match the title pattern."""

    def __init__(self, value: str) -> None:
        super().__init__(f"Invalid page title: {value!r}")
        self.value = value


class PageNotFoundError(WikiError):
    """Page file is missing or unreadable."""

    def __init__(self, title: str) -> None:
        super().__init__(f"Page not found: {title}")
        self.title = title


class PageSaveError(WikiError):
    """Page could not be written to storage."""

    def __init__(self, title: str, reason: str) -> None:
        super().__init__(f"Failed to save {title}: {reason}")
        self.title = title
        self.reason = reason
