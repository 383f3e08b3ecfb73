from __future__ import annotations

"""
Snapshot-style mutation test harness.

Discovers test cases in a directory hierarchy, mutates each case's original
artifact through a pluggable provider and compares the result with the
recorded expectation.
"""

from mutation_harness.core.cases.runner import load_case_options, run_test_case
from mutation_harness.core.describe.describer import describe_tests
from mutation_harness.core.discovery.crawler import crawl, is_case_directory
from mutation_harness.core.discovery.filters import compile_include_patterns, is_included
from mutation_harness.core.mutation.automutator import AutoMutator, AutoMutatorFactory
from mutation_harness.core.mutation.providers import MutationsProvider, MutationsProviderFactory
from mutation_harness.core.services.factory import (
    create_test_case_settings,
    describe_mutation_test_cases,
)
from mutation_harness.domain.config import HarnessSettings, TestCaseSettings
from mutation_harness.domain.errors import (
    CaseDirectoryNotFoundError,
    CaseMismatchError,
    FilterPatternError,
    HarnessConfigError,
    HarnessError,
    MutationError,
)
from mutation_harness.domain.hierarchy_models import HierarchyNode, NodeKind
from mutation_harness.domain.mutation_models import Mutation, MutationsWave
from mutation_harness.reporting.executor import execute_registry
from mutation_harness.reporting.registry import RecordingRegistrar

__version__ = "0.1.0"

__all__ = [
    "AutoMutator",
    "AutoMutatorFactory",
    "CaseDirectoryNotFoundError",
    "CaseMismatchError",
    "FilterPatternError",
    "HarnessConfigError",
    "HarnessError",
    "HarnessSettings",
    "HierarchyNode",
    "Mutation",
    "MutationError",
    "MutationsProvider",
    "MutationsProviderFactory",
    "MutationsWave",
    "NodeKind",
    "RecordingRegistrar",
    "TestCaseSettings",
    "compile_include_patterns",
    "crawl",
    "create_test_case_settings",
    "describe_mutation_test_cases",
    "describe_tests",
    "execute_registry",
    "is_case_directory",
    "is_included",
    "load_case_options",
    "run_test_case",
]
