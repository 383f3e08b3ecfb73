from __future__ import annotations

"""
Harness Error Hierarchy.

Every failure raised by the harness derives from HarnessError. Selected
subclasses also inherit a builtin exception so callers (and pytest) can
handle them with the usual idioms.
"""

from typing import Optional


class HarnessError(Exception):
    """Base class for all harness failures."""


class CaseDirectoryNotFoundError(HarnessError, FileNotFoundError):
    """
    Raised when the root case directory does not exist.

    Attributes:
        path: The missing directory.
    """

    def __init__(self, path: str) -> None:
        super().__init__(f"Test case directory not found: {path}")
        self.path = path


class CaseDiscoveryError(HarnessError, OSError):
    """
    Raised when a directory of the case tree cannot be scanned.

    Attributes:
        path: The directory being scanned.
    """

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Cannot scan test case directory '{path}': {reason}")
        self.path = path


class FilterPatternError(HarnessError, ValueError):
    """
    Raised when an include pattern is not a valid regular expression.

    Attributes:
        pattern: The offending raw pattern.
    """

    def __init__(self, pattern: str, reason: str) -> None:
        super().__init__(f"Invalid include pattern '{pattern}': {reason}")
        self.pattern = pattern


class HarnessConfigError(HarnessError):
    """Raised for malformed harness or case configuration."""


class RegistrationError(HarnessError):
    """Raised when suite scopes are opened and closed out of balance."""


class MutationError(HarnessError):
    """Raised when a mutation cannot be applied or a provider never settles."""


class CaseMismatchError(HarnessError, AssertionError):
    """
    Raised when a case's actual output differs from its expected output.

    Attributes:
        expected_path: Path of the recorded expectation.
        actual_path: Path of the produced output.
        diff: Unified diff between both files, if available.
    """

    def __init__(
            self,
            expected_path: str,
            actual_path: str,
            diff: Optional[str] = None,
            message: Optional[str] = None,
    ) -> None:
        text = message or f"Actual output '{actual_path}' does not match '{expected_path}'."
        if diff:
            text = f"{text}\n{diff}"
        super().__init__(text)
        self.expected_path = expected_path
        self.actual_path = actual_path
        self.diff = diff
