"""Shared pytest fixtures for libdtf tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable, Dict

import pytest

from libdtf.diff_types import Config, WorkingContext, WorkingFile

FILE_NAME_A = "a.json"
FILE_NAME_B = "b.json"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the shared fixtures directory."""

    return Path(__file__).resolve().parent / "fixtures"


@pytest.fixture
def documents_dir(fixtures_dir: Path) -> Path:
    return fixtures_dir / "documents"


@pytest.fixture
def load_json() -> "LoadJSONFn":
    """Helper fixture to load JSON fixtures by filename."""

    def _loader(path: str | Path) -> Dict[str, Any]:
        file_path = Path(path)
        with file_path.open("r", encoding="utf-8") as handle:
            return json.load(handle)

    return _loader


@pytest.fixture
def make_context() -> Callable[[bool], WorkingContext]:
    """Build a run context labelled ``a.json`` / ``b.json``."""

    def _factory(array_same_order: bool = False) -> WorkingContext:
        return WorkingContext(
            WorkingFile(FILE_NAME_A),
            WorkingFile(FILE_NAME_B),
            Config(array_same_order),
        )

    return _factory


@pytest.fixture
def unordered(make_context: Callable[[bool], WorkingContext]) -> WorkingContext:
    return make_context(False)


@pytest.fixture
def ordered(make_context: Callable[[bool], WorkingContext]) -> WorkingContext:
    return make_context(True)


class LoadJSONFn:
    """Protocol-like helper for typing the ``load_json`` fixture."""

    def __call__(
        self, path: str | Path
    ) -> Dict[str, Any]:  # pragma: no cover - documentation only
        ...
