# -*- coding: utf-8 -*-
"""Location: ./tests/conftest.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

Shared fixtures: hermetic settings rooted in a temporary data directory, an
application built from them and a TestClient talking to it.
"""

# Standard
import os
from pathlib import Path

# Third-Party
from fastapi.testclient import TestClient
import pytest

# Keep the import-time settings of testbackend.main independent of the host .env
os.environ.setdefault("DISABLE_HTTPS_REDIRECT", "true")
os.environ.setdefault("LOG_REQUESTS", "false")

# First-Party
from testbackend.config import Settings  # noqa: E402
from testbackend.main import create_app  # noqa: E402


@pytest.fixture
def data_root(tmp_path: Path) -> Path:
    """Create a small data tree::

    data/
      hello.txt
      docs/
        readme.md
    """
    root = tmp_path / "data"
    (root / "docs").mkdir(parents=True)
    (root / "hello.txt").write_text("hello world", encoding="utf-8")
    (root / "docs" / "readme.md").write_text("# Readme\n", encoding="utf-8")
    return root


@pytest.fixture
def test_settings(data_root: Path) -> Settings:
    """Settings for tests: no HTTPS redirect, no request logging, temp data root."""
    return Settings(
        _env_file=None,
        disable_https_redirect=True,
        log_requests=False,
        data_root=data_root,
    )


@pytest.fixture
def app(test_settings: Settings):
    """Create a FastAPI test application."""
    return create_app(test_settings)


@pytest.fixture
def client(app):
    """TestClient bound to the test application (runs the lifespan)."""
    with TestClient(app) as test_client:
        yield test_client
