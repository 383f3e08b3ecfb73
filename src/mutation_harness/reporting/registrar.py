from __future__ import annotations

"""
Reporting Framework Registration Interface.

The describer only needs to open and close named suite scopes and to
register tests inside them. Concrete registrars adapt these primitives to
a reporting framework (the built-in registry or pytest).
"""

from abc import ABC, abstractmethod
from typing import Awaitable, Callable

TestBody = Callable[[], Awaitable[None]]


class TestRegistrar(ABC):
    """
    Abstract target of suite and test registration.
    """

    __test__ = False

    @abstractmethod
    def open_suite(self, name: str) -> None:
        """Open a named suite scope nested in the current one."""

    @abstractmethod
    def close_suite(self) -> None:
        """Close the innermost open suite scope."""

    @abstractmethod
    def register_test(self, name: str, qualified_name: str, body: TestBody) -> None:
        """
        Register a runnable test in the current suite scope.

        Args:
            name: Display name of the test.
            qualified_name: Root-to-case identifier of the test.
            body: Async callable performing the test; raising marks a failure.
        """

    @abstractmethod
    def register_skipped(self, name: str, qualified_name: str, reason: str) -> None:
        """
        Register a test that is reported as skipped and never executed.

        Args:
            name: Display name of the test.
            qualified_name: Root-to-case identifier of the test.
            reason: Human readable skip reason.
        """
