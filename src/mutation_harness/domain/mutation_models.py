from __future__ import annotations

"""
Mutation Domain Models.

Text mutations are expressed as character ranges of a file plus the text
replacing them. Providers hand them over in waves, keyed by file path.
"""

from dataclasses import dataclass, field
from typing import Dict, List


@dataclass(frozen=True)
class Mutation:
    """
    A single text edit over the half-open range [begin, end).

    An empty range with an insertion is an insert, a range without an
    insertion is a delete, anything else is a replace.
    """
    begin: int
    end: int
    insertion: str = ""

    def __post_init__(self) -> None:
        if self.begin < 0 or self.end < self.begin:
            raise ValueError(f"Invalid mutation range [{self.begin}, {self.end}).")

    @property
    def kind(self) -> str:
        if self.begin == self.end:
            return "text-insert"
        if not self.insertion:
            return "text-delete"
        return "text-replace"


@dataclass(frozen=True)
class MutationsWave:
    """
    One round of mutations returned by a provider.

    Attributes:
        file_mutations: Mutations to apply, keyed by file path.
    """
    file_mutations: Dict[str, List[Mutation]] = field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        return not any(self.file_mutations.values())
