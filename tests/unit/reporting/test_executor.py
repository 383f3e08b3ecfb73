from __future__ import annotations

"""
Unit tests for the registered test executor.

Verifies failure isolation, skip handling, invocation counts and bounded
concurrency.
"""

import asyncio

import pytest

from mutation_harness.domain.errors import RegistrationError
from mutation_harness.reporting.executor import CaseStatus, execute_registry
from mutation_harness.reporting.registry import RecordingRegistrar


def _build_registry(calls):
    registrar = RecordingRegistrar()

    async def ok():
        calls.append("ok")

    async def broken():
        calls.append("broken")
        raise AssertionError("actual differs from expected")

    async def after():
        calls.append("after")

    registrar.open_suite("cases")
    registrar.open_suite("group-a")
    registrar.register_test("ok", "cases/group-a/ok", ok)
    registrar.register_test("broken", "cases/group-a/broken", broken)
    registrar.close_suite()
    registrar.open_suite("group-b")
    registrar.register_skipped("skipped", "cases/group-b/skipped", "filtered")
    registrar.register_test("after", "cases/group-b/after", after)
    registrar.close_suite()
    registrar.close_suite()
    return registrar


def test_failures_are_isolated():
    calls = []
    report = execute_registry(_build_registry(calls).root)

    assert calls == ["ok", "broken", "after"]
    assert report.summary() == {"total": 4, "passed": 2, "failed": 1, "skipped": 1}
    assert report.ok is False

    results = report.by_name()
    failed = results["cases/group-a/broken"]
    assert failed.status is CaseStatus.FAILED
    assert "actual differs" in failed.error
    assert isinstance(failed.exception, AssertionError)

    skipped = results["cases/group-b/skipped"]
    assert skipped.status is CaseStatus.SKIPPED
    assert skipped.error == "filtered"


def test_results_follow_registration_order():
    report = execute_registry(_build_registry([]).root)
    assert [r.qualified_name for r in report.results] == [
        "cases/group-a/ok",
        "cases/group-a/broken",
        "cases/group-b/skipped",
        "cases/group-b/after",
    ]


def test_concurrency_is_bounded():
    registrar = RecordingRegistrar()
    state = {"active": 0, "peak": 0}

    def make_body():
        async def body():
            state["active"] += 1
            state["peak"] = max(state["peak"], state["active"])
            await asyncio.sleep(0.01)
            state["active"] -= 1
        return body

    for i in range(6):
        registrar.register_test(f"t{i}", f"t{i}", make_body())

    report = execute_registry(registrar.root, concurrency=2)

    assert report.passed == 6
    assert state["peak"] == 2


def test_invalid_concurrency():
    with pytest.raises(ValueError):
        execute_registry(RecordingRegistrar().root, concurrency=0)


def test_empty_registry_is_ok():
    report = execute_registry(RecordingRegistrar().root)
    assert report.ok
    assert report.results == []


def test_unbalanced_close_raises():
    with pytest.raises(RegistrationError):
        RecordingRegistrar().close_suite()
