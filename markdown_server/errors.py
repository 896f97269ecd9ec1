from __future__ import annotations


class MarkdownServerError(Exception):
    """Base class for request errors raised by the server itself."""


class IndexNotFoundError(MarkdownServerError):
    pass


class TemplateConfigError(MarkdownServerError):
    pass
