from __future__ import annotations

"""
Registered Test Executor.

Schedules the bodies recorded by a RecordingRegistrar on an asyncio event
loop. Each runnable body is awaited exactly once; a raising body becomes a
FAILED result and never prevents its siblings from running.
"""

import asyncio
import logging
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from mutation_harness.reporting.registry import SuiteRecord, TestRecord

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# RESULT MODELS
# -----------------------------------------------------------------------------

class CaseStatus(Enum):
    PASSED = "passed"
    FAILED = "failed"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class CaseResult:
    """
    Outcome of one registered test.

    Attributes:
        qualified_name: Root-to-case identifier.
        status: Final status.
        error: Failure message or skip reason.
        exception: The exception raised by a failing body.
        duration: Wall time spent in the body, in seconds.
    """
    qualified_name: str
    status: CaseStatus
    error: str = ""
    exception: Optional[BaseException] = None
    duration: float = 0.0


@dataclass
class RunReport:
    """Results of executing a registry, in registration order."""
    root: SuiteRecord
    results: List[CaseResult] = field(default_factory=list)

    def count(self, status: CaseStatus) -> int:
        return sum(1 for r in self.results if r.status is status)

    @property
    def passed(self) -> int:
        return self.count(CaseStatus.PASSED)

    @property
    def failed(self) -> int:
        return self.count(CaseStatus.FAILED)

    @property
    def skipped(self) -> int:
        return self.count(CaseStatus.SKIPPED)

    @property
    def ok(self) -> bool:
        return self.failed == 0

    def by_name(self) -> Dict[str, CaseResult]:
        return {r.qualified_name: r for r in self.results}

    def summary(self) -> Dict[str, int]:
        return {
            "total": len(self.results),
            "passed": self.passed,
            "failed": self.failed,
            "skipped": self.skipped,
        }


# ==============================================================================
# PUBLIC API
# ==============================================================================

def execute_registry(root: SuiteRecord, *, concurrency: int = 1) -> RunReport:
    """
    Run every registered test below a suite.

    Args:
        root: Top-level suite record (usually RecordingRegistrar.root).
        concurrency: Maximum number of bodies awaited at the same time.

    Returns:
        RunReport: One result per registered test.
    """
    return asyncio.run(run_registry(root, concurrency=concurrency))


async def run_registry(root: SuiteRecord, *, concurrency: int = 1) -> RunReport:
    """Async counterpart of execute_registry, for callers already on a loop."""
    if concurrency < 1:
        raise ValueError(f"Concurrency must be at least 1, received {concurrency}.")

    tests = list(root.iter_tests())
    semaphore = asyncio.Semaphore(concurrency)

    async def _bounded(record: TestRecord) -> CaseResult:
        async with semaphore:
            return await _run_test(record)

    results = await asyncio.gather(*(_bounded(t) for t in tests))

    report = RunReport(root=root, results=list(results))
    logger.info(
        f"Executed {len(report.results)} cases: {report.passed} passed, "
        f"{report.failed} failed, {report.skipped} skipped."
    )
    return report


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

async def _run_test(record: TestRecord) -> CaseResult:
    """Await one test body and convert its outcome into a CaseResult."""
    if record.skipped or record.body is None:
        logger.debug(f"SKIP {record.qualified_name}: {record.skip_reason}")
        return CaseResult(
            qualified_name=record.qualified_name,
            status=CaseStatus.SKIPPED,
            error=record.skip_reason or "",
        )

    start = time.perf_counter()
    try:
        await record.body()
    except Exception as e:
        duration = time.perf_counter() - start
        logger.error(f"FAIL {record.qualified_name}: {e}")
        return CaseResult(
            qualified_name=record.qualified_name,
            status=CaseStatus.FAILED,
            error=str(e) or type(e).__name__,
            exception=e,
            duration=duration,
        )

    duration = time.perf_counter() - start
    logger.debug(f"PASS {record.qualified_name} ({duration:.3f}s)")
    return CaseResult(
        qualified_name=record.qualified_name,
        status=CaseStatus.PASSED,
        duration=duration,
    )
