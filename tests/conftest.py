"""Shared pytest fixtures for locstat tests."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
import structlog


@pytest.fixture
def make_tree(tmp_path):
    """Create files under tmp_path from a {relative path: content} mapping."""

    def _make(files: dict[str, str | bytes]) -> Path:
        for rel, content in files.items():
            p = tmp_path / rel
            p.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(content, bytes):
                p.write_bytes(content)
            else:
                p.write_text(content)
        return tmp_path

    return _make


@pytest.fixture(autouse=True)
def _reset_logging():
    """Undo setup_logging() done by CLI tests so later tests log nowhere stale."""
    yield
    structlog.reset_defaults()
    logging.getLogger().handlers.clear()
