"""Markdown to HTML conversion and page templating."""

from __future__ import annotations

import os

import markdown
from flask import current_app, render_template
from markupsafe import Markup

from .config import DEFAULT_TEMPLATE
from .errors import TemplateConfigError

# Built-in python-markdown extensions standing in for a "common extensions" preset
MD_EXTENSIONS = [
    "tables",
    "fenced_code",
    "def_list",
    "toc",
    "sane_lists",
    "abbr",
    "footnotes",
]


def render_markdown(source: bytes) -> str:
    """Convert raw Markdown bytes to an HTML fragment.

    Carriage returns are dropped before parsing so CRLF and LF files render
    the same. Invalid UTF-8 is replaced rather than rejected.
    """
    text = source.replace(b"\r", b"").decode("utf-8", errors="replace")
    md = markdown.Markdown(extensions=MD_EXTENSIONS)
    return md.convert(text)


def render_page(template_path: str, file_path: str, fragment: str) -> str:
    """Wrap ``fragment`` in the configured page template."""
    context = {
        "file_name": os.path.basename(file_path),
        "content": Markup(fragment),
    }
    if not template_path:
        raise TemplateConfigError("require markdown template path")
    if template_path == DEFAULT_TEMPLATE:
        return render_template("default.html", **context)

    # Read on every request so template edits show up without a restart
    with open(template_path, encoding="utf-8") as fh:
        source = fh.read()
    template = current_app.jinja_env.from_string(source)
    return template.render(**context)
