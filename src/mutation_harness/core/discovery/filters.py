from __future__ import annotations

"""
Case Inclusion Filtering.

Regex-based selection of leaf cases by qualified name. Qualified names are
the labels from the root to a node joined with QUALIFIED_NAME_SEPARATOR,
root label included (e.g. "cases/group-a/case-1"). Patterns are searched
anywhere in that name, and a case runs if ANY pattern matches.
"""

import re
from typing import Iterable, Optional, Sequence, Tuple, Union

from mutation_harness.domain.constants import QUALIFIED_NAME_SEPARATOR
from mutation_harness.domain.errors import FilterPatternError

PatternLike = Union[str, re.Pattern]

# -----------------------------------------------------------------------------
# QUALIFIED NAMES
# -----------------------------------------------------------------------------

def join_qualified_name(labels: Iterable[str]) -> str:
    """
    Compose a qualified name from root-to-node labels.

    Args:
        labels: Labels ordered from the root to the node.

    Returns:
        str: The separator-joined qualified name.
    """
    return QUALIFIED_NAME_SEPARATOR.join(labels)


# -----------------------------------------------------------------------------
# PATTERN COMPILATION AND MATCHING
# -----------------------------------------------------------------------------

def compile_include_patterns(
        patterns: Optional[Iterable[PatternLike]],
) -> Tuple[re.Pattern, ...]:
    """
    Compile include patterns into an immutable, ordered sequence.

    Pre-compiled patterns are kept as they are. Unlike lenient filtering,
    an invalid expression is a misconfiguration and fails immediately.

    Args:
        patterns: Raw regex strings and/or compiled patterns. None means none.

    Returns:
        Tuple[re.Pattern, ...]: Compiled patterns in input order.

    Raises:
        FilterPatternError: If a pattern is not a valid regular expression.
    """
    if patterns is None:
        return ()

    compiled = []
    for p in patterns:
        if isinstance(p, re.Pattern):
            compiled.append(p)
            continue
        try:
            compiled.append(re.compile(p))
        except (re.error, TypeError) as e:
            raise FilterPatternError(str(p), str(e)) from e
    return tuple(compiled)


def is_included(qualified_name: str, patterns: Optional[Sequence[re.Pattern]]) -> bool:
    """
    Decide whether a case runs.

    Args:
        qualified_name: Root-to-node name of the case.
        patterns: Compiled include patterns.

    Returns:
        bool: True when no patterns are given or any pattern matches.
    """
    if not patterns:
        return True
    return any(rx.search(qualified_name) for rx in patterns)


def describe_patterns(patterns: Sequence[re.Pattern]) -> str:
    """Format patterns as a bulleted list for operator-facing logs."""
    return "\n".join(f" - {rx.pattern}" for rx in patterns)
