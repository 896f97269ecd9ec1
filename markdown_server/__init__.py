"""Serve a directory over HTTP, rendering markdown files as HTML pages."""

from .app import ContentKind, create_app
from .config import NAME, VERSION, Config

__all__ = ["NAME", "VERSION", "Config", "ContentKind", "create_app"]
