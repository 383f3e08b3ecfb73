from __future__ import annotations

"""
Harness Configuration Domain.

Defines the explicit configuration record consumed by the harness and the
per-case settings derived from it. Raw dictionaries (JSON files, CLI
overrides) are validated into these records; no field is interpreted by
inspecting its runtime shape after that point.
"""

import json
import logging
import os
from dataclasses import dataclass, fields
from typing import Any, Dict, List, Mapping, Tuple

from mutation_harness.domain.constants import (
    DEFAULT_ACTUAL_FILE,
    DEFAULT_EXPECTED_FILE,
    DEFAULT_ORIGINAL_FILE,
    DEFAULT_SETTINGS_FILE,
)
from mutation_harness.domain.errors import HarnessConfigError

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# CONFIGURATION MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class HarnessSettings:
    """
    Settings to describe test cases: file names and CLI flag equivalents.

    Attributes:
        original: File name of the original artifact within a case directory.
        expected: File name of the recorded expectation.
        actual: File name the mutated output is written to.
        settings: File name of the per-case settings (JSON).
        accept: Overwrite expectations with actual output instead of comparing.
        includes: Regular expressions selecting which cases run.
    """
    original: str = DEFAULT_ORIGINAL_FILE
    expected: str = DEFAULT_EXPECTED_FILE
    actual: str = DEFAULT_ACTUAL_FILE
    settings: str = DEFAULT_SETTINGS_FILE
    accept: bool = False
    includes: Tuple[str, ...] = ()

    @property
    def case_file_names(self) -> Tuple[str, ...]:
        """File names a directory must contain to be a leaf case."""
        return (self.original, self.expected, self.actual, self.settings)


@dataclass(frozen=True)
class TestCaseSettings:
    """
    Resolved paths for a single leaf case.

    Attributes:
        original: Path of the original artifact.
        expected: Path of the recorded expectation.
        actual: Path the mutated output is written to.
        settings: Path of the case settings file.
        accept: Whether to overwrite the expectation with the actual output.
    """
    __test__ = False

    original: str
    expected: str
    actual: str
    settings: str
    accept: bool = False


_FILE_NAME_FIELDS: Tuple[str, ...] = ("original", "expected", "actual", "settings")


def get_default_settings() -> HarnessSettings:
    """Return the default harness settings."""
    return HarnessSettings()


# -----------------------------------------------------------------------------
# VALIDATION
# -----------------------------------------------------------------------------

def settings_from_mapping(
        data: Mapping[str, Any],
        *,
        strict: bool = False,
) -> Tuple[HarnessSettings, List[str]]:
    """
    Validate a raw mapping into HarnessSettings.

    Unknown keys and values of the wrong type are reported as warnings and
    replaced by defaults, unless strict mode is requested.

    Args:
        data: Raw configuration values (e.g. a parsed JSON document).
        strict: If True, raise HarnessConfigError instead of warning.

    Returns:
        Tuple[HarnessSettings, List[str]]: The settings and collected warnings.
    """
    warnings: List[str] = []

    def _reject(msg: str) -> None:
        if strict:
            raise HarnessConfigError(msg)
        warnings.append(msg)
        logger.warning(msg)

    if not isinstance(data, Mapping):
        _reject(f"Invalid config type: expected mapping, received {type(data).__name__}.")
        return get_default_settings(), warnings

    known = {f.name for f in fields(HarnessSettings)}
    for key in data:
        if key not in known:
            _reject(f"Unknown configuration key '{key}' ignored.")

    values: Dict[str, Any] = {}

    for key in _FILE_NAME_FIELDS:
        if key not in data:
            continue
        raw = data[key]
        if isinstance(raw, str) and raw.strip():
            values[key] = raw.strip()
        else:
            _reject(f"'{key}' must be a non-empty file name, received {raw!r}.")

    if "accept" in data:
        raw = data["accept"]
        if isinstance(raw, bool):
            values["accept"] = raw
        else:
            _reject(f"'accept' must be a boolean, received {raw!r}.")

    if "includes" in data:
        raw = data["includes"]
        if raw is None:
            values["includes"] = ()
        elif isinstance(raw, (list, tuple)) and all(isinstance(p, str) for p in raw):
            values["includes"] = tuple(raw)
        else:
            _reject(f"'includes' must be a list of strings, received {raw!r}.")

    return HarnessSettings(**values), warnings


def load_settings(path: str, *, strict: bool = False) -> Tuple[HarnessSettings, List[str]]:
    """
    Load harness settings from a JSON file.

    Args:
        path: Path of the JSON configuration file.
        strict: Forwarded to settings_from_mapping.

    Returns:
        Tuple[HarnessSettings, List[str]]: The settings and collected warnings.

    Raises:
        HarnessConfigError: If the file cannot be read or parsed.
    """
    if not os.path.isfile(path):
        raise HarnessConfigError(f"Configuration file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise HarnessConfigError(f"Failed to load configuration '{path}': {e}") from e

    logger.debug(f"Configuration loaded from {path}")
    return settings_from_mapping(data, strict=strict)
