from __future__ import annotations

"""
Mutation Test Case Description Service.

Public entry point tying discovery, filtering, registration and the
per-case runner together.
"""

import logging
import os

from mutation_harness.core.cases.runner import run_test_case
from mutation_harness.core.describe.describer import describe_tests
from mutation_harness.core.discovery.crawler import crawl
from mutation_harness.core.discovery.filters import compile_include_patterns, describe_patterns
from mutation_harness.core.mutation.automutator import AutoMutatorFactory
from mutation_harness.core.mutation.providers import MutationsProviderFactory
from mutation_harness.domain.config import HarnessSettings, TestCaseSettings
from mutation_harness.domain.constants import DEFAULT_MAX_WAVES, ROOT_LABEL
from mutation_harness.domain.hierarchy_models import HierarchyNode
from mutation_harness.reporting.registrar import TestRegistrar

logger = logging.getLogger(__name__)


def create_test_case_settings(case_path: str, settings: HarnessSettings) -> TestCaseSettings:
    """
    Resolve the file paths of a case directory.

    Args:
        case_path: Directory of a leaf case.
        settings: Harness settings holding the relative file names.

    Returns:
        TestCaseSettings: Absolute paths and the accept flag.
    """
    return TestCaseSettings(
        original=os.path.join(case_path, settings.original),
        expected=os.path.join(case_path, settings.expected),
        actual=os.path.join(case_path, settings.actual),
        settings=os.path.join(case_path, settings.settings),
        accept=settings.accept,
    )


def describe_mutation_test_cases(
        cases_path: str,
        mutations_provider_factory: MutationsProviderFactory,
        settings: HarnessSettings,
        registrar: TestRegistrar,
        *,
        max_waves: int = DEFAULT_MAX_WAVES,
) -> HierarchyNode:
    """
    Describe tests for every case under a directory.

    Invalid include patterns and a missing cases directory are reported
    before anything is registered.

    Args:
        cases_path: Root directory of the cases.
        mutations_provider_factory: Creates a mutations provider per case.
        settings: File names, accept flag and include patterns.
        registrar: Reporting framework adapter.
        max_waves: Bound on mutation waves per case.

    Returns:
        HierarchyNode: The crawled hierarchy.

    Raises:
        FilterPatternError: If an include pattern is invalid.
        CaseDirectoryNotFoundError: If cases_path does not exist.
    """
    patterns = compile_include_patterns(settings.includes)
    if patterns:
        logger.info(f"Including only tests that match any of:\n{describe_patterns(patterns)}")

    cases_path = os.path.abspath(cases_path)
    hierarchy = crawl(ROOT_LABEL, cases_path, settings.case_file_names)

    mutator_factory = AutoMutatorFactory(mutations_provider_factory, max_waves=max_waves)

    async def run_case(node: HierarchyNode) -> None:
        await run_test_case(create_test_case_settings(node.directory_path, settings), mutator_factory)

    describe_tests(hierarchy, run_case, patterns, registrar)
    return hierarchy
