"""Bracket link rewriting.

Turns ``[PageName]`` tokens in a page body into anchors pointing at
``<base_url><PageName>``. Everything else in the body is emitted as-is,
without HTML escaping: pages are trusted author content.
"""

import re

from markupsafe import Markup

from flatwiki.core.titles import TITLE_PATTERN


class LinkRewriter:
    """Rewrites bracket link tokens into anchors."""

    __slots__ = ("_token_re",)

    def __init__(self) -> None:
        self._token_re = re.compile(rf"\[({TITLE_PATTERN})\]")

    def rewrite(self, body: bytes | str, base_url: str) -> Markup:
        """Replace every link token in a page body.

        Matches are non-overlapping and replaced left to right in one pass.

        Args:
            body: Raw page body
            base_url: Prefix for generated hrefs, e.g. "//localhost:8080/view/"

        Returns:
            Body with anchors, marked safe for templates
        """
        if isinstance(body, bytes):
            body = body.decode("utf-8", errors="replace")

        def _anchor(match: re.Match[str]) -> str:
            name = match.group(1)
            return f'<a href="{base_url}{name}">{name}</a>'

        return Markup(self._token_re.sub(_anchor, body))


_default_rewriter = LinkRewriter()


def link_pages(body: bytes | str, base_url: str) -> Markup:
    """Rewrite link tokens using the shared rewriter."""
    return _default_rewriter.rewrite(body, base_url)
