from __future__ import annotations

"""
Tree Renderer.

Converts case hierarchies and run reports into ASCII trees using the
standard connectors (├──, └──).
"""

from typing import Dict, List, Optional

from mutation_harness.domain.hierarchy_models import HierarchyNode
from mutation_harness.reporting.executor import CaseResult, CaseStatus, RunReport
from mutation_harness.reporting.registry import SuiteRecord

_STATUS_MARKERS: Dict[CaseStatus, str] = {
    CaseStatus.PASSED: "[PASS]",
    CaseStatus.FAILED: "[FAIL]",
    CaseStatus.SKIPPED: "[SKIP]",
}

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_hierarchy(node: HierarchyNode) -> List[str]:
    """
    Render a case hierarchy, suites suffixed with '/'.

    Args:
        node: Root of the hierarchy.

    Returns:
        List[str]: Output lines, starting with the root label.
    """
    lines = [f"{node.label}/"]
    _render_hierarchy_children(node, lines, prefix="")
    return lines


def render_report(report: RunReport) -> List[str]:
    """
    Render a run report as a tree of suites and status-marked cases,
    followed by failure details and a one-line summary.

    Args:
        report: Report produced by the executor.

    Returns:
        List[str]: Output lines.
    """
    results = report.by_name()
    lines: List[str] = []
    _render_suite_children(report.root, results, lines, prefix="")

    failures = [r for r in report.results if r.status is CaseStatus.FAILED]
    if failures:
        lines.append("")
        lines.append("Failures:")
        for failure in failures:
            lines.append(f"  {failure.qualified_name}")
            for detail in failure.error.splitlines():
                lines.append(f"    {detail}")

    lines.append("")
    lines.append(
        f"{report.passed} passed, {report.failed} failed, {report.skipped} skipped"
    )
    return lines


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _render_hierarchy_children(node: HierarchyNode, lines: List[str], prefix: str) -> None:
    total = len(node.children)
    for i, child in enumerate(node.children):
        is_last = (i == total - 1)
        connector = "└── " if is_last else "├── "

        if child.is_suite:
            lines.append(f"{prefix}{connector}{child.label}/")
            _render_hierarchy_children(child, lines, prefix + ("    " if is_last else "│   "))
        else:
            lines.append(f"{prefix}{connector}{child.label}")


def _render_suite_children(
        suite: SuiteRecord,
        results: Dict[str, CaseResult],
        lines: List[str],
        prefix: str,
) -> None:
    total = len(suite.children)
    for i, child in enumerate(suite.children):
        is_last = (i == total - 1)
        connector = "└── " if is_last else "├── "

        if isinstance(child, SuiteRecord):
            lines.append(f"{prefix}{connector}{child.name}/")
            _render_suite_children(child, results, lines, prefix + ("    " if is_last else "│   "))
            continue

        lines.append(f"{prefix}{connector}{_status_marker(results.get(child.qualified_name))} {child.name}")


def _status_marker(result: Optional[CaseResult]) -> str:
    if result is None:
        return "[....]"
    return _STATUS_MARKERS[result.status]
