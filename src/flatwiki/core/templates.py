"""Page templates.

A templates directory holds layout files (``*.html``) and per-view fragments
(``*.tpl``). Fragments extend a layout and are compiled once when the
template set is built; the set is read-only afterwards.
"""

import logging
from collections.abc import Callable, Mapping
from pathlib import Path
from types import MappingProxyType

from jinja2 import Environment, FileSystemLoader, Template, TemplateNotFound, meta
from markupsafe import Markup

from flatwiki.core.index import IndexBuilder
from flatwiki.core.links import link_pages
from flatwiki.core.storage import Page

logger = logging.getLogger(__name__)

LAYOUT_SUFFIX = ".html"
FRAGMENT_SUFFIX = ".tpl"


class TemplateSet:
    """Compiled view templates with the wiki's template functions registered.

    Templates see ``page`` and ``base_url`` in their context plus two
    globals: ``link_pages(body, base_url)`` and ``auto_index(base_url)``.
    """

    def __init__(
        self,
        templates_dir: Path,
        index: IndexBuilder,
        *,
        link_rewriter: Callable[[bytes | str, str], Markup] = link_pages,
    ) -> None:
        """Load and compile all fragments.

        Args:
            templates_dir: Directory containing layouts and fragments
            index: Index builder backing ``auto_index``
            link_rewriter: Function backing ``link_pages``

        Raises:
            FileNotFoundError: If templates_dir is not a directory
            jinja2.TemplateError: If a template fails to compile
        """
        if not templates_dir.is_dir():
            raise FileNotFoundError(f"Templates directory not found: {templates_dir}")

        self._templates_dir = templates_dir
        # compiled once; never re-read from disk or evicted
        self._env = Environment(
            loader=FileSystemLoader(templates_dir),
            autoescape=True,
            auto_reload=False,
            cache_size=-1,
        )
        self._env.globals["link_pages"] = link_rewriter
        self._env.globals["auto_index"] = index.render

        layouts = sorted(p.name for p in templates_dir.glob(f"*{LAYOUT_SUFFIX}"))
        for layout in layouts:
            self._env.get_template(layout)
            self._load_referenced(templates_dir / layout)

        compiled: dict[str, Template] = {}
        for fragment in sorted(templates_dir.glob(f"*{FRAGMENT_SUFFIX}")):
            name = fragment.name.removesuffix(FRAGMENT_SUFFIX)
            compiled[name] = self._env.get_template(fragment.name)
            self._load_referenced(fragment)
        self._templates: Mapping[str, Template] = MappingProxyType(compiled)

        logger.debug(f"Loaded templates {sorted(compiled)} with layouts {layouts} from {templates_dir}")

    def _load_referenced(self, path: Path) -> None:
        """Load the templates a file extends or includes by literal name.

        Raises:
            TemplateNotFound: If a referenced template does not exist
        """
        source = path.read_text(encoding="utf-8")
        for name in meta.find_referenced_templates(self._env.parse(source)):
            if name is not None:
                self._env.get_template(name)

    @property
    def templates_dir(self) -> Path:
        """Directory the templates were loaded from."""
        return self._templates_dir

    @property
    def names(self) -> list[str]:
        """Names of the available views."""
        return sorted(self._templates)

    def render(self, name: str, page: Page, base_url: str) -> str:
        """Render a view.

        Args:
            name: View name without suffix, e.g. "view" or "edit"
            page: Page to render
            base_url: Link prefix passed to the template

        Returns:
            Rendered HTML

        Raises:
            jinja2.TemplateError: If the view is unknown or rendering fails
        """
        logger.debug(f"Executing template {name} on {page.title} with base_url: {base_url}")
        template = self._templates.get(name)
        if template is None:
            raise TemplateNotFound(f"{name}{FRAGMENT_SUFFIX}")
        return template.render(page=page, base_url=base_url)
