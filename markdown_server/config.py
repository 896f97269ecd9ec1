"""Process-wide server configuration, built once at startup."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Iterator

NAME = "MarkdownServer"
VERSION = "0.1.1"

DEFAULT_ADDR = ":8080"
DEFAULT_ROOT = "./"
DEFAULT_INDEX_PATHS = "index.md,README.md,readme.md"
DEFAULT_TEMPLATE = "default"


@dataclass(frozen=True)
class Config:
    addr: str = DEFAULT_ADDR
    root_path: str = DEFAULT_ROOT
    index_paths: str = DEFAULT_INDEX_PATHS
    template_path: str = DEFAULT_TEMPLATE

    def index_candidates(self) -> Iterator[str]:
        for item in self.index_paths.split(","):
            yield item.strip()

    def normalized(self) -> "Config":
        """Return a copy whose root is absolute and uses forward slashes."""
        root = os.path.abspath(self.root_path).replace("\\", "/")
        return replace(self, root_path=root)


def parse_addr(addr: str) -> tuple[str, int]:
    """Split ``[host]:port`` into a bind host and port.

    An empty host listens on every interface.
    """
    host, sep, port = addr.strip().rpartition(":")
    if not sep or not port.isdigit():
        raise ValueError(f"invalid listen address {addr!r}")
    host = host.strip("[]") or "0.0.0.0"
    return host, int(port)
