"""Shared pytest fixtures for all tests."""

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from tabular_schema.core.config import get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Drop cached settings so env overrides apply per test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def array_schema() -> Callable[..., dict[str, Any]]:
    """Build an array-wrapper schema around positional column schemas."""

    def build(*columns: Any) -> dict[str, Any]:
        return {
            "type": "array",
            "items": {
                "type": "array",
                "items": list(columns),
            },
        }

    return build


@pytest.fixture
def write_schema(tmp_path: Path) -> Callable[..., Path]:
    """Write a schema document to a JSON file under tmp_path."""

    def write(document: Any, name: str = "schema.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(document), encoding="utf-8")
        return path

    return write
