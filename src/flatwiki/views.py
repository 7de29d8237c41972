"""Wiki request handlers.

Routes:
    GET  /               view the front page
    GET  /view/<title>   render a page, redirect to the editor if missing
    GET  /edit/<title>   edit form for a new or existing page
    POST /save/<title>   store the submitted body, redirect to the page
"""

import logging
from collections.abc import Awaitable, Callable
from functools import wraps

from aiohttp import web
from jinja2 import TemplateError

from flatwiki.app_keys import front_page_key, matcher_key, store_key, templates_key
from flatwiki.core.errors import InvalidTitleError, PageNotFoundError, PageSaveError
from flatwiki.core.storage import Page

logger = logging.getLogger(__name__)

TitledHandler = Callable[[web.Request, str], Awaitable[web.StreamResponse]]


def create_wiki_routes() -> list[web.RouteDef]:
    return [
        # exact root only; other unrouted paths fall through to aiohttp's 404
        web.get("/", front_page),
        web.get("/view/{title:.*}", view_page),
        web.get("/edit/{title:.*}", edit_page),
        web.post("/save/{title:.*}", save_page),
    ]


def _log_request(request: web.Request) -> None:
    version = f"HTTP/{request.version.major}.{request.version.minor}"
    user_agent = request.headers.get("User-Agent", "")
    referer = request.headers.get("Referer", "")
    logger.info(
        f"{request.remote} {version} {request.method} {request.rel_url} {user_agent} {referer}"
    )


def titled(handler: TitledHandler) -> Callable[[web.Request], Awaitable[web.StreamResponse]]:
    """Extract and validate the page title from the request path.

    Paths that do not match ``/<action>/<title>`` get a 404 and the wrapped
    handler is not called.
    """

    @wraps(handler)
    async def wrapper(request: web.Request) -> web.StreamResponse:
        _log_request(request)
        matcher = request.app[matcher_key]
        try:
            _, title = matcher.match_path(request.path)
        except InvalidTitleError:
            logger.error(f"Getting title from URL {request.path}")
            raise web.HTTPNotFound() from None
        return await handler(request, title)

    return wrapper


def _render(request: web.Request, view: str, page: Page, base_url: str) -> web.Response:
    templates = request.app[templates_key]
    try:
        html = templates.render(view, page, base_url)
    except TemplateError as e:
        logger.error(f"Executing template {view} on {page.title}: {e}")
        raise web.HTTPInternalServerError(text=str(e)) from e
    return web.Response(text=html, content_type="text/html")


async def _view(request: web.Request, title: str) -> web.Response:
    store = request.app[store_key]
    try:
        page = store.load(title)
    except PageNotFoundError:
        raise web.HTTPFound(f"/edit/{title}") from None
    return _render(request, "view", page, f"//{request.host}/view/")


async def front_page(request: web.Request) -> web.Response:
    _log_request(request)
    return await _view(request, request.app[front_page_key])


@titled
async def view_page(request: web.Request, title: str) -> web.Response:
    return await _view(request, title)


@titled
async def edit_page(request: web.Request, title: str) -> web.Response:
    store = request.app[store_key]
    try:
        page = store.load(title)
    except PageNotFoundError:
        logger.info(f"Creating {title}")
        page = Page(title=title)
    return _render(request, "edit", page, "")


@titled
async def save_page(request: web.Request, title: str) -> web.Response:
    form = await request.post()
    field = form.get("body", "")
    if isinstance(field, str):
        body = field.encode("utf-8")
    elif isinstance(field, (bytes, bytearray)):
        # multipart part without a text content type
        body = bytes(field)
    else:
        body = field.file.read()

    store = request.app[store_key]
    try:
        store.save(Page(title=title, body=body))
    except PageSaveError as e:
        raise web.HTTPInternalServerError(text=str(e)) from e
    raise web.HTTPFound(f"/view/{title}")
