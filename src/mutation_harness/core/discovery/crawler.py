from __future__ import annotations

"""
Case Hierarchy Crawler.

Walks a directory tree and classifies every directory as a leaf case (it
directly contains all required case files) or a suite (anything else). The
result is an immutable HierarchyNode tree with children in lexicographic
order of their directory names.
"""

import logging
import os
from typing import FrozenSet, List, Sequence

from mutation_harness.domain.errors import CaseDirectoryNotFoundError, CaseDiscoveryError
from mutation_harness.domain.hierarchy_models import HierarchyNode, NodeKind
from mutation_harness.infra.fs import contains_files, list_subdirectories

logger = logging.getLogger(__name__)


# ==============================================================================
# PUBLIC API
# ==============================================================================

def crawl(
        root_label: str,
        root_path: str,
        required_file_names: Sequence[str],
) -> HierarchyNode:
    """
    Build the case hierarchy rooted at a directory.

    Args:
        root_label: Display name of the root node.
        root_path: Directory to crawl. Must exist.
        required_file_names: File names identifying a leaf case.

    Returns:
        HierarchyNode: The root node.

    Raises:
        ValueError: If root_label is empty or no required file names are given.
        CaseDirectoryNotFoundError: If root_path is not an existing directory.
        CaseDiscoveryError: If a directory of the tree cannot be scanned.
    """
    if not root_label:
        raise ValueError("Root label must be a non-empty string.")
    if not required_file_names:
        raise ValueError("At least one required case file name is needed.")
    if not os.path.isdir(root_path):
        raise CaseDirectoryNotFoundError(root_path)

    logger.debug(f"Crawling test cases under: {root_path}")
    return _crawl_directory(root_label, root_path, tuple(required_file_names))


def is_case_directory(directory_path: str, required_file_names: Sequence[str]) -> bool:
    """
    Test the leaf predicate for a directory.

    A directory holding only some of the required files is not a case.

    Args:
        directory_path: Directory to inspect.
        required_file_names: File names that must all be present.

    Returns:
        bool: True if every required file is a direct child.
    """
    return contains_files(directory_path, required_file_names)


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _crawl_directory(
        label: str,
        directory_path: str,
        required_file_names: Sequence[str],
        ancestors: FrozenSet[str] = frozenset(),
) -> HierarchyNode:
    """
    Classify one directory and recurse into it when it is a suite.

    Subdirectories resolving to the directory itself or to one of its
    ancestors (symlink cycles) are skipped with a warning.
    """
    try:
        if is_case_directory(directory_path, required_file_names):
            logger.debug(f"Case: {directory_path}")
            return HierarchyNode(label=label, directory_path=directory_path, kind=NodeKind.CASE)
        child_names = list_subdirectories(directory_path)
    except OSError as e:
        raise CaseDiscoveryError(directory_path, e.strerror or str(e)) from e

    lineage = ancestors | {os.path.realpath(directory_path)}
    children: List[HierarchyNode] = []
    for name in child_names:
        child_path = os.path.join(directory_path, name)
        if os.path.realpath(child_path) in lineage:
            logger.warning(f"Skipping directory cycle: {child_path}")
            continue
        children.append(_crawl_directory(name, child_path, required_file_names, lineage))

    if not children:
        logger.debug(f"Empty suite: {directory_path}")

    return HierarchyNode(
        label=label,
        directory_path=directory_path,
        kind=NodeKind.SUITE,
        children=tuple(children),
    )
