from __future__ import annotations

"""
Automatic Mutation Runner.

Repeatedly asks a provider for mutation waves and applies them to the
files on disk until the provider returns an empty wave.
"""

import logging
from typing import List, Sequence

from mutation_harness.core.mutation.providers import MutationsProvider, MutationsProviderFactory
from mutation_harness.domain.config import TestCaseSettings
from mutation_harness.domain.constants import DEFAULT_MAX_WAVES
from mutation_harness.domain.errors import MutationError
from mutation_harness.domain.mutation_models import Mutation
from mutation_harness.infra.fs import read_text, write_text

logger = logging.getLogger(__name__)


# ==============================================================================
# TEXT MUTATION
# ==============================================================================

def order_mutations(mutations: Sequence[Mutation]) -> List[Mutation]:
    """
    Order mutations last-to-first, dropping any that overlap a later one.

    Args:
        mutations: Mutations targeting the same text.

    Returns:
        List[Mutation]: Mutations safe to apply in the returned order.
    """
    ordered = sorted(mutations, key=lambda m: (m.begin, m.end), reverse=True)
    kept: List[Mutation] = []
    lowest_begin = None

    for mutation in ordered:
        if lowest_begin is not None and mutation.end > lowest_begin:
            logger.debug(f"Dropping overlapping mutation [{mutation.begin}, {mutation.end})")
            continue
        kept.append(mutation)
        lowest_begin = mutation.begin

    return kept


def apply_mutations(text: str, mutations: Sequence[Mutation]) -> str:
    """
    Apply mutations to a text.

    Args:
        text: Original text.
        mutations: Mutations with offsets relative to the original text.

    Returns:
        str: The mutated text.

    Raises:
        MutationError: If a mutation reaches past the end of the text.
    """
    for mutation in mutations:
        if mutation.end > len(text):
            raise MutationError(
                f"Mutation [{mutation.begin}, {mutation.end}) exceeds text length {len(text)}."
            )

    for mutation in order_mutations(mutations):
        text = text[:mutation.begin] + mutation.insertion + text[mutation.end:]
    return text


# ==============================================================================
# RUNNER
# ==============================================================================

class AutoMutator:
    """
    Drives a provider until it settles.

    Args:
        provider: Source of mutation waves.
        max_waves: Maximum number of non-empty waves before giving up.
    """

    def __init__(self, provider: MutationsProvider, max_waves: int = DEFAULT_MAX_WAVES) -> None:
        self.provider = provider
        self.max_waves = max_waves

    async def run(self) -> int:
        """
        Apply waves until an empty one is returned.

        Returns:
            int: Number of non-empty waves applied.

        Raises:
            MutationError: If the provider keeps producing waves past max_waves.
        """
        waves = 0
        while True:
            wave = await self.provider.provide()
            if wave.is_empty:
                return waves

            waves += 1
            if waves > self.max_waves:
                raise MutationError(f"Provider did not settle after {self.max_waves} waves.")

            for file_path, mutations in wave.file_mutations.items():
                if not mutations:
                    continue
                write_text(file_path, apply_mutations(read_text(file_path), mutations))
                logger.debug(f"Wave {waves}: applied {len(mutations)} mutation(s) to {file_path}")


class AutoMutatorFactory:
    """
    Creates one AutoMutator per test case from a provider factory.
    """

    def __init__(
            self,
            mutations_provider_factory: MutationsProviderFactory,
            max_waves: int = DEFAULT_MAX_WAVES,
    ) -> None:
        self.mutations_provider_factory = mutations_provider_factory
        self.max_waves = max_waves

    def create(self, settings: TestCaseSettings) -> AutoMutator:
        return AutoMutator(self.mutations_provider_factory.create(settings), self.max_waves)
