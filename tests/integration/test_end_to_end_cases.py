from __future__ import annotations

"""
Integration tests for describing and executing mutation test cases.

Runs the full discovery -> filtering -> registration -> execution flow over
real case directories.
"""

import logging
from pathlib import Path

import pytest

from mutation_harness.core.services.factory import (
    create_test_case_settings,
    describe_mutation_test_cases,
)
from mutation_harness.domain.config import HarnessSettings
from mutation_harness.domain.errors import CaseDirectoryNotFoundError, FilterPatternError
from mutation_harness.reporting.executor import CaseStatus, execute_registry
from mutation_harness.reporting.registry import RecordingRegistrar


def test_create_test_case_settings_joins_paths(tmp_path: Path):
    settings = HarnessSettings(original="in.txt", accept=True)
    case = create_test_case_settings(str(tmp_path), settings)

    assert case.original == str(tmp_path / "in.txt")
    assert case.expected == str(tmp_path / "expected.txt")
    assert case.actual == str(tmp_path / "actual.txt")
    assert case.settings == str(tmp_path / "settings.json")
    assert case.accept is True


def test_filtered_run_reports_pass_fail_skip(tmp_path: Path, make_case, append_factory):
    root = tmp_path / "cases"
    make_case(root, "group-a/case-1", original="x", expected="x;", options={"append": ";"})
    make_case(root, "group-a/case-2", original="x", expected="x", options={"append": ";"})
    make_case(root, "group-b/case-3", original="x", expected="never checked")

    registrar = RecordingRegistrar()
    hierarchy = describe_mutation_test_cases(
        str(root),
        append_factory,
        HarnessSettings(includes=("group-a",)),
        registrar,
    )
    report = execute_registry(registrar.root)

    assert hierarchy.label == "cases"
    results = report.by_name()
    assert results["cases/group-a/case-1"].status is CaseStatus.PASSED
    assert results["cases/group-a/case-2"].status is CaseStatus.FAILED
    assert results["cases/group-b/case-3"].status is CaseStatus.SKIPPED

    # Skipped cases never reach the provider
    assert sorted(Path(s.actual).parent.name for s in append_factory.created) == ["case-1", "case-2"]
    assert (root / "group-b" / "case-3" / "actual.txt").read_text(encoding="utf-8") == ""


def test_accept_run_records_expectations(tmp_path: Path, make_case, append_factory):
    root = tmp_path / "cases"
    case_dir = make_case(root, "suite/case", original="a", expected="old", options={"append": "b"})

    registrar = RecordingRegistrar()
    describe_mutation_test_cases(str(root), append_factory, HarnessSettings(accept=True), registrar)
    report = execute_registry(registrar.root)

    assert report.ok
    assert (case_dir / "expected.txt").read_text(encoding="utf-8") == "ab"

    # A second, comparing run now passes
    registrar = RecordingRegistrar()
    describe_mutation_test_cases(str(root), append_factory, HarnessSettings(), registrar)
    assert execute_registry(registrar.root).ok


def test_missing_cases_directory_registers_nothing(tmp_path: Path, append_factory):
    registrar = RecordingRegistrar()

    with pytest.raises(CaseDirectoryNotFoundError):
        describe_mutation_test_cases(str(tmp_path / "missing"), append_factory, HarnessSettings(), registrar)

    assert registrar.root.children == []


def test_invalid_include_fails_before_crawling(tmp_path: Path, append_factory):
    registrar = RecordingRegistrar()

    # Invalid patterns are reported even when the directory is also missing
    with pytest.raises(FilterPatternError):
        describe_mutation_test_cases(
            str(tmp_path / "missing"),
            append_factory,
            HarnessSettings(includes=("*bad",)),
            registrar,
        )

    assert registrar.root.children == []


def test_active_includes_are_logged_once(example_cases: Path, append_factory, caplog):
    caplog.set_level(logging.INFO, logger="mutation_harness")

    describe_mutation_test_cases(
        str(example_cases),
        append_factory,
        HarnessSettings(includes=("group-a", "case-3")),
        RecordingRegistrar(),
    )

    messages = [r.getMessage() for r in caplog.records if "Including only tests" in r.getMessage()]
    assert messages == ["Including only tests that match any of:\n - group-a\n - case-3"]


def test_no_includes_logs_nothing(example_cases: Path, append_factory, caplog):
    caplog.set_level(logging.INFO, logger="mutation_harness")

    describe_mutation_test_cases(str(example_cases), append_factory, HarnessSettings(), RecordingRegistrar())

    assert not any("Including only tests" in r.getMessage() for r in caplog.records)
