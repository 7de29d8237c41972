"""Application keys for type-safe app configuration access."""

from aiohttp import web

from flatwiki.core.storage import PageStore
from flatwiki.core.templates import TemplateSet
from flatwiki.core.titles import TitleMatcher

store_key = web.AppKey("store", PageStore)
templates_key = web.AppKey("templates", TemplateSet)
matcher_key = web.AppKey("matcher", TitleMatcher)
front_page_key = web.AppKey("front_page", str)
