"""aiohttp server for flatwiki.

Application factory and route registration.
"""

import logging

from aiohttp import web

from flatwiki.app_keys import front_page_key, matcher_key, store_key, templates_key
from flatwiki.assets import get_templates_dir
from flatwiki.config import Config
from flatwiki.core.index import IndexBuilder
from flatwiki.core.storage import PageStore
from flatwiki.core.templates import TemplateSet
from flatwiki.core.titles import TitleMatcher
from flatwiki.views import create_wiki_routes

logger = logging.getLogger(__name__)


def create_app(config: Config) -> web.Application:
    """Create aiohttp application.

    Templates are loaded here, once; a broken templates directory fails
    application startup rather than individual requests.

    Args:
        config: Application configuration

    Returns:
        Configured aiohttp application
    """
    app = web.Application()

    wiki = config.wiki
    matcher = TitleMatcher()
    store = PageStore(wiki.data_dir, matcher)
    index = IndexBuilder(store, exclude=("", wiki.front_page))
    templates_dir = wiki.templates_dir or get_templates_dir()
    templates = TemplateSet(templates_dir, index)

    app[matcher_key] = matcher
    app[store_key] = store
    app[templates_key] = templates
    app[front_page_key] = wiki.front_page

    app.router.add_routes(create_wiki_routes())

    logger.debug(f"Serving {wiki.data_dir} with templates from {templates_dir}")
    return app


def run_server(config: Config) -> None:
    """Run the server.

    Args:
        config: Application configuration
    """
    app = create_app(config)
    web.run_app(app, host=config.server.host, port=config.server.port)
