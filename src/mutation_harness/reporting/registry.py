from __future__ import annotations

"""
In-Memory Test Registry.

Records registered suites and tests as a tree that mirrors the case
hierarchy. The built-in executor runs it; tests inspect it directly.
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Union

from mutation_harness.domain.errors import RegistrationError
from mutation_harness.reporting.registrar import TestBody, TestRegistrar


# -----------------------------------------------------------------------------
# RECORDS
# -----------------------------------------------------------------------------

@dataclass
class TestRecord:
    """
    A registered test.

    Attributes:
        name: Display name.
        qualified_name: Root-to-case identifier.
        body: Async test body, None when skipped.
        skip_reason: Reason the test is skipped, None when runnable.
    """
    __test__ = False

    name: str
    qualified_name: str
    body: Optional[TestBody] = None
    skip_reason: Optional[str] = None

    @property
    def skipped(self) -> bool:
        return self.skip_reason is not None


@dataclass
class SuiteRecord:
    """A registered suite and its ordered members."""
    name: str
    children: List[Union[SuiteRecord, TestRecord]] = field(default_factory=list)

    def suites(self) -> List[SuiteRecord]:
        return [c for c in self.children if isinstance(c, SuiteRecord)]

    def tests(self) -> List[TestRecord]:
        return [c for c in self.children if isinstance(c, TestRecord)]

    def iter_tests(self) -> Iterator[TestRecord]:
        """Yield every test below this suite, depth-first in registration order."""
        for child in self.children:
            if isinstance(child, SuiteRecord):
                yield from child.iter_tests()
            else:
                yield child

    def find_suite(self, name: str) -> Optional[SuiteRecord]:
        """Return the first direct child suite with the given name."""
        for suite in self.suites():
            if suite.name == name:
                return suite
        return None


# -----------------------------------------------------------------------------
# REGISTRAR
# -----------------------------------------------------------------------------

class RecordingRegistrar(TestRegistrar):
    """
    Registrar that records registrations into a SuiteRecord tree.

    The implicit top-level suite has an empty name; suites opened by the
    describer nest below it.
    """

    def __init__(self) -> None:
        self.root = SuiteRecord(name="")
        self._stack: List[SuiteRecord] = [self.root]

    @property
    def depth(self) -> int:
        """Number of currently open suite scopes."""
        return len(self._stack) - 1

    def open_suite(self, name: str) -> None:
        suite = SuiteRecord(name=name)
        self._stack[-1].children.append(suite)
        self._stack.append(suite)

    def close_suite(self) -> None:
        if len(self._stack) == 1:
            raise RegistrationError("close_suite() called without an open suite.")
        self._stack.pop()

    def register_test(self, name: str, qualified_name: str, body: TestBody) -> None:
        self._stack[-1].children.append(
            TestRecord(name=name, qualified_name=qualified_name, body=body)
        )

    def register_skipped(self, name: str, qualified_name: str, reason: str) -> None:
        self._stack[-1].children.append(
            TestRecord(name=name, qualified_name=qualified_name, skip_reason=reason)
        )
