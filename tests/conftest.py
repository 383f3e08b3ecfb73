from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Builders for on-disk case trees.
3. A small mutations provider driven by each case's settings file.
"""

import json
import os
import sys
from pathlib import Path
from typing import Any, Callable, Dict, Optional

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from mutation_harness.core.cases.runner import load_case_options  # noqa: E402
from mutation_harness.core.mutation.providers import (  # noqa: E402
    MutationsProvider,
    MutationsProviderFactory,
)
from mutation_harness.domain.config import TestCaseSettings  # noqa: E402
from mutation_harness.domain.mutation_models import Mutation, MutationsWave  # noqa: E402
from mutation_harness.infra.fs import read_text  # noqa: E402

CASE_FILES = ("original.txt", "expected.txt", "actual.txt", "settings.json")


# -----------------------------------------------------------------------------
# Test Providers
# -----------------------------------------------------------------------------
class AppendProvider(MutationsProvider):
    """Appends the case option 'append' to the actual file in a single wave."""

    def __init__(self, settings: TestCaseSettings) -> None:
        self.settings = settings
        self.done = False

    async def provide(self) -> MutationsWave:
        if self.done:
            return MutationsWave()
        self.done = True

        suffix = load_case_options(self.settings).get("append", "")
        if not suffix:
            return MutationsWave()

        end = len(read_text(self.settings.actual))
        return MutationsWave({self.settings.actual: [Mutation(end, end, suffix)]})


class AppendProviderFactory(MutationsProviderFactory):
    def __init__(self) -> None:
        self.created = []

    def create(self, settings: TestCaseSettings) -> MutationsProvider:
        self.created.append(settings)
        return AppendProvider(settings)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def append_factory() -> AppendProviderFactory:
    return AppendProviderFactory()


@pytest.fixture
def make_case() -> Callable[..., Path]:
    """
    Return a builder creating a complete case directory.

    The builder signature is (root, rel_path, original, expected, options).
    """
    def _make(
            root: Path,
            rel_path: str,
            original: str = "hello",
            expected: Optional[str] = "hello",
            options: Optional[Dict[str, Any]] = None,
    ) -> Path:
        case_dir = root / rel_path
        case_dir.mkdir(parents=True, exist_ok=True)
        (case_dir / "original.txt").write_text(original, encoding="utf-8")
        (case_dir / "expected.txt").write_text(expected or "", encoding="utf-8")
        (case_dir / "actual.txt").write_text("", encoding="utf-8")
        (case_dir / "settings.json").write_text(json.dumps(options or {}), encoding="utf-8")
        return case_dir

    return _make


@pytest.fixture
def example_cases(tmp_path: Path, make_case: Callable[..., Path]) -> Path:
    """
    Build the reference tree:

        cases/group-a/case-1, cases/group-a/case-2, cases/group-b/case-3
        and an empty cases/group-c.
    """
    root = tmp_path / "cases"
    make_case(root, "group-a/case-1")
    make_case(root, "group-a/case-2")
    make_case(root, "group-b/case-3")
    (root / "group-c").mkdir(parents=True)
    return root
