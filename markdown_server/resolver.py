"""Map request URL paths to files under the served root."""

from __future__ import annotations

import os
import posixpath
from typing import BinaryIO

from .config import Config
from .errors import IndexNotFoundError

DEFAULT_EXT = ".md"


def join_file_path(a: str, b: str) -> str:
    a = a.strip()
    b = b.strip()
    if not a and not b:
        return ""
    if not b:
        return a
    if not a:
        return b
    return a.rstrip("/") + "/" + b.lstrip("/")


def clean_url_path(url_path: str) -> str:
    """Canonical form of a request path: no ``.``/``..`` or repeated slashes."""
    if not url_path:
        return "/"
    if not url_path.startswith("/"):
        url_path = "/" + url_path
    cleaned = posixpath.normpath(url_path)
    # normpath keeps a leading "//" (POSIX allows it to be special)
    cleaned = "/" + cleaned.lstrip("/")
    if url_path.endswith("/") and cleaned != "/":
        cleaned += "/"
    return cleaned


def _find_index(config: Config, dir_path: str) -> str:
    for item in config.index_candidates():
        try:
            os.stat(join_file_path(dir_path, item))
        except (FileNotFoundError, NotADirectoryError):
            continue
        return item
    raise IndexNotFoundError(f"index file not found on dir {dir_path!r}")


def resolve_file_path(config: Config, url_path: str) -> str:
    file_path = join_file_path(config.root_path, url_path)
    if url_path.endswith("/"):
        file_path = join_file_path(file_path, _find_index(config, file_path))
    if not posixpath.splitext(file_path)[1]:
        file_path += DEFAULT_EXT
    return file_path


def open_url_path(config: Config, url_path: str) -> BinaryIO:
    """Resolve ``url_path`` and open the file for reading.

    OS errors (missing file, permission denied) propagate unchanged.
    """
    return open(resolve_file_path(config, url_path), "rb")
