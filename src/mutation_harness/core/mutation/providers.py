from __future__ import annotations

"""
Mutation Provider Interfaces.

A provider proposes waves of text mutations for a case; a factory builds
one provider per case from its resolved settings.
"""

from abc import ABC, abstractmethod

from mutation_harness.domain.config import TestCaseSettings
from mutation_harness.domain.mutation_models import MutationsWave


class MutationsProvider(ABC):
    """
    Abstract source of mutation waves.
    """

    @abstractmethod
    async def provide(self) -> MutationsWave:
        """
        Produce the next wave of mutations.

        Returns:
            MutationsWave: Mutations keyed by file path. An empty wave ends
                           the mutation run.
        """


class MutationsProviderFactory(ABC):
    """
    Abstract factory creating a provider for one test case.
    """

    @abstractmethod
    def create(self, settings: TestCaseSettings) -> MutationsProvider:
        """
        Create a provider for a case.

        Args:
            settings: Resolved paths of the case. Providers mutate the file
                      at settings.actual.

        Returns:
            MutationsProvider: Provider bound to the case.
        """
