"""Shared test fixtures."""

from __future__ import annotations

import pytest

from framebridge.registry import TypeRegistry, get_registry


@pytest.fixture(scope="session")
def registry() -> TypeRegistry:
    """The process-wide registry, built once and shared by the whole run."""
    return get_registry()


@pytest.fixture
def schema_file(tmp_path):
    """Factory writing a schema file with the given text and extension."""
    def _write(text: str, suffix: str = ".yaml"):
        path = tmp_path / f"schema{suffix}"
        path.write_text(text)
        return path
    return _write
