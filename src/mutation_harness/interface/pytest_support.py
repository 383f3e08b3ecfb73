from __future__ import annotations

"""
Pytest Integration.

Exposes described cases as pytest parameters: one param per leaf case, its
qualified name as the test id, and a skip mark for filtered-out cases.

Usage:
    CASES = mutation_test_params("tests/cases", MyProviderFactory(), settings)

    @pytest.mark.parametrize("case_body", CASES)
    def test_case(case_body):
        run_case_body(case_body)
"""

import asyncio
from typing import Any, List, Optional

import pytest

from mutation_harness.core.mutation.providers import MutationsProviderFactory
from mutation_harness.core.services.factory import describe_mutation_test_cases
from mutation_harness.domain.config import HarnessSettings
from mutation_harness.domain.errors import RegistrationError
from mutation_harness.reporting.registrar import TestBody, TestRegistrar


class PytestRegistrar(TestRegistrar):
    """
    Registrar collecting pytest.param entries.

    Suite scopes have no pytest counterpart at parameter level; they are
    reflected in the ids through the qualified names. A suite without any
    case below it (an empty scaffolding directory) therefore leaves no
    trace in the collected params. Use RecordingRegistrar when the report
    must list every suite.
    """

    def __init__(self) -> None:
        self.params: List[Any] = []
        self._depth = 0

    def open_suite(self, name: str) -> None:
        self._depth += 1

    def close_suite(self) -> None:
        if self._depth == 0:
            raise RegistrationError("close_suite() called without an open suite.")
        self._depth -= 1

    def register_test(self, name: str, qualified_name: str, body: TestBody) -> None:
        self.params.append(pytest.param(body, id=qualified_name))

    def register_skipped(self, name: str, qualified_name: str, reason: str) -> None:
        self.params.append(
            pytest.param(None, id=qualified_name, marks=pytest.mark.skip(reason=reason))
        )


def mutation_test_params(
        cases_path: str,
        mutations_provider_factory: MutationsProviderFactory,
        settings: Optional[HarnessSettings] = None,
) -> List[Any]:
    """
    Describe the cases under a directory as pytest parameters.

    Args:
        cases_path: Root directory of the cases.
        mutations_provider_factory: Creates a mutations provider per case.
        settings: Harness settings; defaults apply when omitted.

    Returns:
        List[Any]: pytest.param entries, one per leaf case.
    """
    registrar = PytestRegistrar()
    describe_mutation_test_cases(
        cases_path,
        mutations_provider_factory,
        settings or HarnessSettings(),
        registrar,
    )
    return registrar.params


def run_case_body(body: TestBody) -> None:
    """Run a registered case body to completion on a fresh event loop."""
    asyncio.run(body())
