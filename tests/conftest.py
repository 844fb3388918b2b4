"""Shared test fixtures."""

from pathlib import Path

import pytest

from app import create_app


@pytest.fixture
def pages_dir(tmp_path: Path) -> Path:
    return tmp_path / "pages"


@pytest.fixture
def make_app(tmp_path: Path, pages_dir: Path, monkeypatch):
    """Return a factory building an app isolated in tmp_path.

    The working directory is moved to tmp_path so a stray config.toml in the
    repository never leaks into tests.
    """
    monkeypatch.chdir(tmp_path)

    def factory(**overrides):
        settings = {"PAGES_DIR": str(pages_dir)}
        settings.update(overrides)
        app = create_app(settings)
        app.config["TESTING"] = True
        return app

    return factory


@pytest.fixture
def app(make_app):
    return make_app()


@pytest.fixture
def client(app):
    return app.test_client()
