from __future__ import annotations

"""
Main Entry Point.

Routes process execution to the CLI controller.
"""

import sys

from mutation_harness.interface.cli.app import main as cli_main


def main() -> int:
    return cli_main(sys.argv[1:])


if __name__ == "__main__":
    sys.exit(main())
