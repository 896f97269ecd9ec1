from pathlib import Path

import pytest

from markdown_server import Config, create_app


@pytest.fixture
def site(tmp_path: Path) -> Path:
    root = tmp_path / "site"
    root.mkdir()
    return root


@pytest.fixture
def config(site: Path) -> Config:
    return Config(root_path=str(site), index_paths="index.md,README.md")


@pytest.fixture
def app(config):
    app = create_app(config)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()
