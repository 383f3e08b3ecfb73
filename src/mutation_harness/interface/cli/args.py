from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema and translates the parsed
namespace into configuration overrides.
"""

import argparse
from typing import Any, Dict

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the mutation-harness CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="mutation-harness",
        description="Run snapshot-style mutation test cases from a directory tree.",
    )

    # --- Discovery ---
    p.add_argument(
        "-c", "--cases",
        dest="cases_path",
        default=None,
        help="Root directory of the test cases (default: ./cases).",
    )
    p.add_argument(
        "-p", "--provider",
        dest="provider",
        default=None,
        help="Mutations provider factory as 'module:attribute'.",
    )
    p.add_argument(
        "--config",
        dest="config_file",
        default=None,
        help="JSON file with harness settings.",
    )

    # --- Case file names ---
    p.add_argument("--original", dest="original", default=None, help="Original file name.")
    p.add_argument("--expected", dest="expected", default=None, help="Expected file name.")
    p.add_argument("--actual", dest="actual", default=None, help="Actual file name.")
    p.add_argument("--settings", dest="settings", default=None, help="Settings file name.")

    # --- Selection and acceptance ---
    p.add_argument(
        "-I", "--include",
        dest="includes",
        action="append",
        default=None,
        help="Regular expression selecting cases by qualified name. Repeatable.",
    )
    p.add_argument(
        "--accept",
        action="store_true",
        help="Overwrite expected files with the actual output.",
    )

    # --- Execution and output ---
    p.add_argument(
        "--list",
        dest="list_only",
        action="store_true",
        help="Print the discovered case hierarchy and exit.",
    )
    p.add_argument(
        "-j", "--jobs",
        dest="jobs",
        type=int,
        default=1,
        help="Number of cases executed concurrently.",
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the run report as JSON.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write logs to this file (rotated).",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging.",
    )

    return p


# -----------------------------------------------------------------------------
# NAMESPACE MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Extract configuration overrides from parsed arguments.

    Only options explicitly given on the command line are returned, so they
    can be merged over a configuration file.

    Args:
        args: Parsed namespace.

    Returns:
        Dict[str, Any]: Overrides keyed like HarnessSettings fields.
    """
    overrides: Dict[str, Any] = {}

    for key in ("original", "expected", "actual", "settings"):
        value = getattr(args, key, None)
        if value is not None:
            overrides[key] = value

    if args.includes:
        overrides["includes"] = list(args.includes)

    if args.accept:
        overrides["accept"] = True

    return overrides
