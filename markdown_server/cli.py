"""Command-line entry point: parse flags and start the server."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Sequence

from .app import create_app
from .config import (
    DEFAULT_ADDR,
    DEFAULT_INDEX_PATHS,
    DEFAULT_ROOT,
    DEFAULT_TEMPLATE,
    NAME,
    VERSION,
    Config,
    parse_addr,
)

LOG_FORMAT = "%(asctime)s [%(levelname)s]: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="markdown-server", description=__doc__)
    parser.add_argument("-a", dest="addr", default=DEFAULT_ADDR, help="http addr")
    parser.add_argument("-r", dest="root_path", default=DEFAULT_ROOT, help="root path")
    parser.add_argument(
        "-i", dest="index_paths", default=DEFAULT_INDEX_PATHS, help="index paths"
    )
    parser.add_argument(
        "-m", dest="template_path", default=DEFAULT_TEMPLATE, help="markdown template path"
    )
    parser.add_argument("-v", dest="version", action="store_true", help="show version")
    parser.add_argument("root", nargs="?", default="", help="root path, overrides -r")
    return parser


def parse_config(argv: Sequence[str] | None = None) -> tuple[Config, bool]:
    args = build_parser().parse_args(argv)
    config = Config(
        addr=args.addr,
        root_path=args.root or args.root_path,
        index_paths=args.index_paths,
        template_path=args.template_path,
    )
    return config.normalized(), args.version


def main(argv: Sequence[str] | None = None) -> int:
    config, show_version = parse_config(argv)
    if show_version:
        print(f"{NAME} version {VERSION}")
        return 0

    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
    log = logging.getLogger("markdown_server")

    if not os.path.isdir(config.root_path):
        log.error("root path %r is not a directory", config.root_path)
        return 1
    try:
        host, port = parse_addr(config.addr)
    except ValueError as exc:
        log.error("%s", exc)
        return 1

    app = create_app(config)
    log.info("root path = %r", config.root_path)
    log.info("%s listen and serve on %r ...", NAME, config.addr)
    try:
        app.run(host=host, port=port, threaded=True)
    except OSError as exc:
        log.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
