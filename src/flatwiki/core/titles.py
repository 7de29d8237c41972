"""Page title validation and request path matching.

Titles are alphanumeric-only identifiers that double as storage keys.
Routed paths have the form ``/<action>/<title>`` with an optional trailing slash.
"""

import re

from flatwiki.core.errors import InvalidTitleError

ACTIONS = ("edit", "save", "view")

TITLE_PATTERN = r"[a-zA-Z0-9]+"


class TitleMatcher:
    """Compiled title and path patterns.

    Patterns are compiled once at construction; instances are never
    mutated afterwards and are shared between requests.
    """

    __slots__ = ("_actions", "_path_re", "_title_re")

    def __init__(self, actions: tuple[str, ...] = ACTIONS) -> None:
        """Initialize matcher.

        Args:
            actions: Action names accepted as the first path segment
        """
        self._actions = actions
        self._title_re = re.compile(TITLE_PATTERN)
        alternatives = "|".join(re.escape(action) for action in actions)
        self._path_re = re.compile(rf"/({alternatives})/({TITLE_PATTERN})/?")

    @property
    def actions(self) -> tuple[str, ...]:
        """Routed action names."""
        return self._actions

    def is_valid(self, title: str) -> bool:
        """Check whether a title matches the title pattern."""
        return self._title_re.fullmatch(title) is not None

    def validate(self, title: str) -> str:
        """Return the title unchanged if valid.

        Raises:
            InvalidTitleError: If the title is empty or contains anything
                other than ASCII letters and digits
        """
        if not self.is_valid(title):
            raise InvalidTitleError(title)
        return title

    def match_path(self, path: str) -> tuple[str, str]:
        """Split a request path into action and title.

        Args:
            path: URL path, e.g. "/view/FrontPage" or "/edit/Notes/"

        Returns:
            Tuple of (action, title)

        Raises:
            InvalidTitleError: If the path does not match any routed action
        """
        match = self._path_re.fullmatch(path)
        if match is None:
            raise InvalidTitleError(path)
        return match.group(1), match.group(2)


default_matcher = TitleMatcher()
