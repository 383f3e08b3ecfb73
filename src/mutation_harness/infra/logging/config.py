from __future__ import annotations

"""
Harness Logging Settings.

The harness only distinguishes a normal run (INFO), a verbose run (DEBUG)
and quiet embeddings that want warnings or errors only. Unknown level
names fall back to INFO.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

_LEVEL_MAP: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}


@dataclass(frozen=True)
class LoggingConfig:
    """
    Settings of the harness log pipeline.

    Console records are short because case failures are already rendered by
    the report. The optional file keeps the logger name so runs can be
    traced back to the crawler, the describer or a case runner.

    Attributes:
        level: One of DEBUG, INFO, WARNING, ERROR.
        console: Write records to stderr.
        log_file: Optional rotating log file.
        max_bytes: Size of a log file before rotation.
        backup_count: Rotated files kept next to log_file.
    """
    level: str = "INFO"
    console: bool = True
    log_file: Optional[str] = None

    max_bytes: int = 1024 * 1024
    backup_count: int = 3

    console_fmt: str = "%(levelname)s | %(message)s"
    file_fmt: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"

    @classmethod
    def for_cli(cls, debug: bool, log_file: Optional[str] = None) -> LoggingConfig:
        """Build the settings used by the mutation-harness command."""
        return cls(level="DEBUG" if debug else "INFO", console=True, log_file=log_file)
