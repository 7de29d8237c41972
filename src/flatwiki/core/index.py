"""Auto-generated page index.

Lists stored pages, minus exclusions, as an HTML link list.
"""

from collections.abc import Iterable
from pathlib import Path

from jinja2 import Environment
from markupsafe import Markup

from flatwiki.core.storage import PageStore

DEFAULT_FRONT_PAGE = "FrontPage"

NO_PAGES = "No pages"

_INDEX_SOURCE = (
    "{% if titles %}<ul>"
    '{% for title in titles %}<li><a href="{{ base_url }}{{ title }}">{{ title }}</a></li>{% endfor %}'
    "</ul>{% else %}" + NO_PAGES + "{% endif %}"
)

_index_template = Environment(autoescape=True).from_string(_INDEX_SOURCE)


class IndexBuilder:
    """Renders the list of known pages.

    Pages come from the store's directory listing, sorted by title. An empty
    listing and a missing data directory both render as "No pages".
    """

    def __init__(self, store: PageStore, exclude: Iterable[str] = ("", DEFAULT_FRONT_PAGE)) -> None:
        """Initialize builder.

        Args:
            store: Page store providing the directory listing
            exclude: Page names left out of the index
        """
        self._store = store
        self._exclude = frozenset(exclude)

    @property
    def exclude(self) -> frozenset[str]:
        """Page names left out of the index."""
        return self._exclude

    def titles(self) -> list[str]:
        """Return indexed page names in display order."""
        return [title for title in self._store.list_titles() if title not in self._exclude]

    def render(self, base_url: str) -> Markup:
        """Render the index as HTML.

        Args:
            base_url: Prefix for generated hrefs

        Returns:
            ``<ul>`` of links, or "No pages"
        """
        return Markup(_index_template.render(titles=self.titles(), base_url=base_url))


def auto_index(data_dir: Path, base_url: str, front_page: str = DEFAULT_FRONT_PAGE) -> Markup:
    """Render the index for a data directory, excluding the front page."""
    builder = IndexBuilder(PageStore(data_dir), exclude=("", front_page))
    return builder.render(base_url)
