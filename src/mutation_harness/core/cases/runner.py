from __future__ import annotations

"""
Single Test Case Runner.

Copies the original artifact onto the actual file, mutates it through an
AutoMutator, then either compares the result against the expectation or,
in accept mode, records it as the new expectation.
"""

import difflib
import json
import logging
import os
from typing import Any, Dict

from mutation_harness.core.mutation.automutator import AutoMutatorFactory
from mutation_harness.domain.config import TestCaseSettings
from mutation_harness.domain.errors import CaseMismatchError, HarnessConfigError
from mutation_harness.infra.fs import copy_file, read_text, write_text

logger = logging.getLogger(__name__)


# ==============================================================================
# PUBLIC API
# ==============================================================================

async def run_test_case(settings: TestCaseSettings, mutator_factory: AutoMutatorFactory) -> None:
    """
    Run the read-mutate-compare workflow for one case.

    Args:
        settings: Resolved paths of the case.
        mutator_factory: Builds the mutator driving the case's provider.

    Raises:
        CaseMismatchError: If the output differs from the expectation.
        MutationError: If mutations cannot be applied.
    """
    copy_file(settings.original, settings.actual)

    mutator = mutator_factory.create(settings)
    waves = await mutator.run()
    logger.debug(f"{settings.actual}: {waves} mutation wave(s) applied")

    actual = read_text(settings.actual)

    if settings.accept:
        write_text(settings.expected, actual)
        logger.info(f"Accepted new expectation: {settings.expected}")
        return

    if not os.path.isfile(settings.expected):
        raise CaseMismatchError(
            settings.expected,
            settings.actual,
            message=f"Expected file '{settings.expected}' is missing. Run with accept to record it.",
        )

    expected = read_text(settings.expected)
    if actual != expected:
        raise CaseMismatchError(
            settings.expected,
            settings.actual,
            diff=render_diff(expected, actual, settings.expected, settings.actual),
        )


def render_diff(expected: str, actual: str, expected_name: str, actual_name: str) -> str:
    """Return a unified diff from the expectation to the actual output."""
    return "".join(
        difflib.unified_diff(
            expected.splitlines(keepends=True),
            actual.splitlines(keepends=True),
            fromfile=expected_name,
            tofile=actual_name,
        )
    )


def load_case_options(settings: TestCaseSettings) -> Dict[str, Any]:
    """
    Parse the case's JSON settings file.

    Providers call this to read per-case options. An empty file yields an
    empty dict.

    Args:
        settings: Resolved paths of the case.

    Returns:
        Dict[str, Any]: The parsed options.

    Raises:
        HarnessConfigError: If the file is not a JSON object.
    """
    raw = read_text(settings.settings)
    if not raw.strip():
        return {}

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise HarnessConfigError(f"Malformed case settings '{settings.settings}': {e}") from e

    if not isinstance(data, dict):
        raise HarnessConfigError(f"Case settings '{settings.settings}' must be a JSON object.")
    return data
