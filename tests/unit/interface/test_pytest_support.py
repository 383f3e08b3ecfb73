from __future__ import annotations

"""
Unit tests for the pytest parameter adapter.
"""

from pathlib import Path

import pytest

from mutation_harness.core.services.factory import describe_mutation_test_cases
from mutation_harness.domain.config import HarnessSettings
from mutation_harness.domain.errors import CaseMismatchError, RegistrationError
from mutation_harness.interface.pytest_support import (
    PytestRegistrar,
    mutation_test_params,
    run_case_body,
)
from mutation_harness.reporting.registry import RecordingRegistrar


def test_params_cover_every_case(example_cases: Path, append_factory):
    params = mutation_test_params(
        str(example_cases),
        append_factory,
        HarnessSettings(includes=("group-a",)),
    )

    assert [p.id for p in params] == [
        "cases/group-a/case-1",
        "cases/group-a/case-2",
        "cases/group-b/case-3",
    ]
    assert [bool(p.marks) for p in params] == [False, False, True]
    assert params[2].marks[0].name == "skip"
    assert params[2].values == (None,)


def test_param_bodies_run_cases(tmp_path: Path, make_case, append_factory):
    make_case(tmp_path, "good", original="a", expected="a+", options={"append": "+"})
    make_case(tmp_path, "bad", original="a", expected="a", options={"append": "-"})

    params = {p.id: p.values[0] for p in mutation_test_params(str(tmp_path), append_factory)}

    run_case_body(params["cases/good"])
    with pytest.raises(CaseMismatchError):
        run_case_body(params["cases/bad"])


def test_registrar_rejects_unbalanced_close():
    with pytest.raises(RegistrationError):
        PytestRegistrar().close_suite()


def test_empty_suites_only_survive_in_recording_registrar(example_cases: Path, append_factory):
    params = mutation_test_params(str(example_cases), append_factory)
    recorded = RecordingRegistrar()
    describe_mutation_test_cases(str(example_cases), append_factory, HarnessSettings(), recorded)

    assert not any("group-c" in p.id for p in params)
    group_c = recorded.root.find_suite("cases").find_suite("group-c")
    assert group_c is not None
    assert group_c.children == []
