from __future__ import annotations

"""
Case Hierarchy Data Models.

Provides the immutable node structure produced by the crawler and consumed
by the describer and the per-case runners.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

class NodeKind(Enum):
    """Classification of a hierarchy node, decided once at crawl time."""
    SUITE = "suite"
    CASE = "case"


@dataclass(frozen=True, eq=False)
class HierarchyNode:
    """
    A directory in the case tree: either a suite or a leaf case.

    Nodes compare by identity; two nodes are never merged.

    Attributes:
        label: Display name (base name of the directory, or the root label).
        directory_path: Filesystem location of the node.
        kind: Suite or case classification.
        children: Ordered child nodes. Always empty for cases.
    """
    label: str
    directory_path: str
    kind: NodeKind
    children: Tuple[HierarchyNode, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if self.kind is NodeKind.CASE and self.children:
            raise ValueError(f"Case node '{self.label}' cannot own children.")

    @property
    def is_case(self) -> bool:
        return self.kind is NodeKind.CASE

    @property
    def is_suite(self) -> bool:
        return self.kind is NodeKind.SUITE
