from __future__ import annotations

"""
Test Describer.

Walks a case hierarchy and registers it with a reporting framework: one
suite scope per suite node, one test per case node. Cases whose qualified
name is rejected by the include patterns are registered as skipped so the
report keeps the same shape with and without filtering.
"""

import logging
import re
from typing import Awaitable, Callable, Iterable, Optional, Sequence, Tuple

from mutation_harness.core.discovery.filters import (
    PatternLike,
    compile_include_patterns,
    is_included,
    join_qualified_name,
)
from mutation_harness.domain.constants import SKIP_REASON_FILTERED
from mutation_harness.domain.hierarchy_models import HierarchyNode
from mutation_harness.reporting.registrar import TestBody, TestRegistrar

logger = logging.getLogger(__name__)

CaseRunner = Callable[[HierarchyNode], Awaitable[None]]


# ==============================================================================
# PUBLIC API
# ==============================================================================

def describe_tests(
        hierarchy: HierarchyNode,
        runner: CaseRunner,
        includes: Optional[Iterable[PatternLike]],
        registrar: TestRegistrar,
) -> None:
    """
    Register suites and tests for a hierarchy.

    Registration is synchronous; the registered bodies are awaited later by
    the reporting framework. Each body awaits runner(node) for its case.

    Args:
        hierarchy: Root node produced by the crawler.
        runner: Async callable running one leaf case; raises on failure.
        includes: Include patterns; None or empty runs every case.
        registrar: Reporting framework adapter receiving registrations.

    Raises:
        FilterPatternError: If a pattern is invalid. Nothing is registered.
    """
    patterns = compile_include_patterns(includes)
    _describe_node(hierarchy, (), runner, patterns, registrar)


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _describe_node(
        node: HierarchyNode,
        parent_labels: Tuple[str, ...],
        runner: CaseRunner,
        patterns: Sequence[re.Pattern],
        registrar: TestRegistrar,
) -> None:
    labels = parent_labels + (node.label,)

    if node.is_suite:
        registrar.open_suite(node.label)
        try:
            for child in node.children:
                _describe_node(child, labels, runner, patterns, registrar)
        finally:
            registrar.close_suite()
        return

    qualified_name = join_qualified_name(labels)
    if is_included(qualified_name, patterns):
        registrar.register_test(node.label, qualified_name, _make_body(node, runner))
    else:
        logger.debug(f"Skipping {qualified_name}: no include pattern matched")
        registrar.register_skipped(node.label, qualified_name, SKIP_REASON_FILTERED)


def _make_body(node: HierarchyNode, runner: CaseRunner) -> TestBody:
    """Bind a case node to the runner as a zero-argument async test body."""
    async def body() -> None:
        await runner(node)

    return body
