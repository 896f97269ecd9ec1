"""MarkdownServer: serve a directory, rendering markdown files as HTML pages."""

from __future__ import annotations

import enum
import mimetypes
import posixpath

from flask import Flask, Response, current_app, redirect, request
from jinja2 import TemplateError

from .config import Config
from .errors import MarkdownServerError
from .render import render_markdown, render_page
from .resolver import clean_url_path, open_url_path

CONFIG_KEY = "SERVER_CONFIG"


class ContentKind(enum.Enum):
    MARKDOWN = "markdown"
    HTML = "html"
    CSS = "css"
    OTHER = "other"

    @classmethod
    def from_path(cls, path: str) -> "ContentKind":
        ext = posixpath.splitext(path)[1]
        if ext in ("", ".md"):
            return cls.MARKDOWN
        if ext in (".htm", ".html"):
            return cls.HTML
        if ext == ".css":
            return cls.CSS
        return cls.OTHER


def _error_response(exc: Exception):
    return str(exc), 500, {"Content-Type": "text/plain; charset=utf-8"}


# ── Routes ────────────────────────────────────────────────────────


def serve(url_path: str = "") -> Response:
    """Render or pass through the file mapped from the request path."""
    # url_path only satisfies the route rules; request.path keeps the raw path
    cleaned = clean_url_path(request.path)
    if cleaned != request.path:
        query = request.query_string.decode("latin-1")
        return redirect(cleaned + ("?" + query if query else ""), code=301)

    config: Config = current_app.config[CONFIG_KEY]
    with open_url_path(config, request.path) as fh:
        file_path = fh.name
        url = request.full_path if request.query_string else request.path
        current_app.logger.info("url path map: %r => %r", url, file_path)
        buffer = fh.read()

    kind = ContentKind.from_path(file_path)
    if kind is ContentKind.MARKDOWN:
        page = render_page(config.template_path, file_path, render_markdown(buffer))
        return Response(page, content_type="text/html;charset=utf-8")
    if kind is ContentKind.HTML:
        return Response(buffer, content_type="text/html")
    if kind is ContentKind.CSS:
        return Response(buffer, content_type="text/css")
    mimetype = mimetypes.guess_type(file_path)[0] or "application/octet-stream"
    return Response(buffer, mimetype=mimetype)


def create_app(config: Config) -> Flask:
    # Flask's own /static route would shadow files under the served root
    app = Flask(__name__, static_folder=None)
    app.config[CONFIG_KEY] = config

    app.add_url_rule("/", "serve", serve, defaults={"url_path": ""})
    app.add_url_rule("/<path:url_path>", "serve", serve)

    app.register_error_handler(MarkdownServerError, _error_response)
    app.register_error_handler(OSError, _error_response)
    app.register_error_handler(TemplateError, _error_response)
    # embedded NUL bytes in paths, undecodable template files
    app.register_error_handler(ValueError, _error_response)
    return app


__all__ = ["ContentKind", "create_app"]
