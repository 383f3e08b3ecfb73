from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, merging of the
configuration file with command-line overrides, provider loading, case
description, execution and result rendering.
"""

import importlib
import json
import os
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from mutation_harness.core.discovery.crawler import crawl
from mutation_harness.core.mutation.providers import MutationsProviderFactory
from mutation_harness.core.services.factory import describe_mutation_test_cases
from mutation_harness.domain.config import (
    HarnessSettings,
    get_default_settings,
    load_settings,
    settings_from_mapping,
)
from mutation_harness.domain.constants import ROOT_LABEL
from mutation_harness.domain.errors import HarnessError, HarnessConfigError
from mutation_harness.infra.fs import normalize_path
from mutation_harness.infra.logging import LoggingConfig, configure_logging, get_logger
from mutation_harness.interface.cli import args as cli_args
from mutation_harness.reporting.executor import RunReport, execute_registry
from mutation_harness.reporting.registry import RecordingRegistrar
from mutation_harness.reporting.render import render_hierarchy, render_report

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURES = 1
EXIT_CONFIG_ERROR = 2
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code.
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    configure_logging(LoggingConfig.for_cli(args.debug, args.log_file))

    # 1. Resolve settings (defaults < config file < CLI overrides)
    try:
        settings = _resolve_settings(args.config_file, cli_args.args_to_overrides(args))
    except HarnessConfigError as e:
        logger.error(str(e))
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    cases_path = normalize_path(args.cases_path, os.path.join(os.getcwd(), ROOT_LABEL))
    logger.debug(f"Targeting cases directory: {cases_path}")

    # 2. Listing short-circuit
    if args.list_only:
        try:
            hierarchy = crawl(ROOT_LABEL, cases_path, settings.case_file_names)
        except (HarnessError, OSError) as e:
            logger.error(str(e))
            print(f"ERROR: {e}", file=sys.stderr)
            return EXIT_CONFIG_ERROR
        print("\n".join(render_hierarchy(hierarchy)))
        return EXIT_OK

    if args.jobs < 1:
        print("ERROR: --jobs must be at least 1.", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    # 3. Provider loading and case description
    registrar = RecordingRegistrar()
    try:
        factory = load_provider_factory(args.provider)
        describe_mutation_test_cases(cases_path, factory, settings, registrar)
    except (HarnessError, OSError) as e:
        logger.error(str(e))
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    # 4. Execution
    try:
        report = execute_registry(registrar.root, concurrency=args.jobs)
    except KeyboardInterrupt:
        logger.warning("Execution interrupted by user.")
        return EXIT_INTERRUPTED

    # 5. Output rendering
    if args.json_output:
        print(json.dumps(report_to_dict(report), ensure_ascii=False, indent=2))
    else:
        print("\n".join(render_report(report)))

    return EXIT_OK if report.ok else EXIT_FAILURES


# -----------------------------------------------------------------------------
# CONFIGURATION AND PROVIDER RESOLUTION
# -----------------------------------------------------------------------------

def _resolve_settings(config_file: Optional[str], overrides: Dict[str, Any]) -> HarnessSettings:
    """Merge the configuration file (if any) with CLI overrides."""
    if config_file:
        base, warnings = load_settings(config_file)
    else:
        base, warnings = get_default_settings(), []

    merged = asdict(base)
    merged.update(overrides)
    settings, more_warnings = settings_from_mapping(merged)

    for w in warnings + more_warnings:
        logger.warning(f"Configuration Constraint: {w}")
    return settings


def load_provider_factory(reference: Optional[str]) -> MutationsProviderFactory:
    """
    Import a mutations provider factory from a 'module:attribute' reference.

    The attribute may be a MutationsProviderFactory instance or a subclass
    constructible without arguments.

    Args:
        reference: Import reference.

    Returns:
        MutationsProviderFactory: The factory instance.

    Raises:
        HarnessConfigError: If the reference is missing, malformed or invalid.
    """
    if not reference:
        raise HarnessConfigError("A mutations provider is required (--provider module:attribute).")

    module_name, sep, attr_name = reference.partition(":")
    if not sep or not module_name or not attr_name:
        raise HarnessConfigError(f"Invalid provider reference '{reference}', expected 'module:attribute'.")

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise HarnessConfigError(f"Cannot import provider module '{module_name}': {e}") from e

    target = getattr(module, attr_name, None)
    if isinstance(target, MutationsProviderFactory):
        return target
    if isinstance(target, type) and issubclass(target, MutationsProviderFactory):
        return target()

    raise HarnessConfigError(f"'{reference}' is not a MutationsProviderFactory.")


# -----------------------------------------------------------------------------
# VIEW RENDERING
# -----------------------------------------------------------------------------

def report_to_dict(report: RunReport) -> Dict[str, Any]:
    """Convert a run report into JSON-serializable data."""
    return {
        "ok": report.ok,
        "summary": report.summary(),
        "results": [
            {
                "name": r.qualified_name,
                "status": r.status.value,
                "error": r.error,
                "duration": round(r.duration, 6),
            }
            for r in report.results
        ],
    }


if __name__ == "__main__":
    sys.exit(main())
