from __future__ import annotations

"""
Unit tests for the harness configuration domain.

Verifies:
1. Defaults and case file names.
2. Validation and coercion of raw mappings (lenient and strict).
3. Loading from JSON files.
"""

import json
from pathlib import Path

import pytest

from mutation_harness.domain.config import (
    HarnessSettings,
    get_default_settings,
    load_settings,
    settings_from_mapping,
)
from mutation_harness.domain.errors import HarnessConfigError


def test_default_settings_case_file_names():
    settings = get_default_settings()
    assert settings.case_file_names == ("original.txt", "expected.txt", "actual.txt", "settings.json")
    assert settings.accept is False
    assert settings.includes == ()


def test_settings_from_mapping_accepts_known_fields():
    settings, warnings = settings_from_mapping({
        "original": "in.ts",
        "expected": "out.ts",
        "actual": "actual.ts",
        "settings": "tslint.json",
        "accept": True,
        "includes": ["group-a", "case-\\d"],
    })

    assert warnings == []
    assert settings == HarnessSettings(
        original="in.ts",
        expected="out.ts",
        actual="actual.ts",
        settings="tslint.json",
        accept=True,
        includes=("group-a", "case-\\d"),
    )


def test_settings_from_mapping_warns_and_keeps_defaults():
    settings, warnings = settings_from_mapping({
        "original": "",
        "accept": "yes",
        "includes": "group-a",
        "mystery": 1,
    })

    assert settings == get_default_settings()
    assert len(warnings) == 4
    assert any("mystery" in w for w in warnings)


def test_settings_from_mapping_strict_raises():
    with pytest.raises(HarnessConfigError):
        settings_from_mapping({"accept": "yes"}, strict=True)


def test_settings_from_mapping_rejects_non_mapping():
    settings, warnings = settings_from_mapping(["original.txt"])  # type: ignore[arg-type]
    assert settings == get_default_settings()
    assert len(warnings) == 1


def test_load_settings_from_json(tmp_path: Path):
    config = tmp_path / "harness.json"
    config.write_text(json.dumps({"original": "a.txt", "includes": ["x"]}), encoding="utf-8")

    settings, warnings = load_settings(str(config))

    assert warnings == []
    assert settings.original == "a.txt"
    assert settings.includes == ("x",)


def test_load_settings_errors(tmp_path: Path):
    with pytest.raises(HarnessConfigError):
        load_settings(str(tmp_path / "missing.json"))

    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")
    with pytest.raises(HarnessConfigError):
        load_settings(str(broken))
