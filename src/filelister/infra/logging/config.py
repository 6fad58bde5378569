from __future__ import annotations

"""
Logging Configuration Models.

The CLI runs quiet (WARNING) by default and verbose (DEBUG) with --debug;
those are the only two levels this package selects.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

QUIET_LEVEL = "WARNING"
VERBOSE_LEVEL = "DEBUG"

_LEVEL_MAP: Dict[str, int] = {
    VERBOSE_LEVEL: logging.DEBUG,
    QUIET_LEVEL: logging.WARNING,
}


@dataclass(frozen=True)
class LoggingConfig:
    """
    Immutable logging setup for one CLI run.

    Attributes:
        level: QUIET_LEVEL or VERBOSE_LEVEL. Anything else reads as quiet.
        console: Send records to stderr.
        log_file: Optional rotating log file, written in addition to stderr.
        max_bytes: Rollover size of the log file.
        backup_count: Rotated log files kept.
        console_fmt: Format of stderr records.
        file_fmt: Format of log file records.
        datefmt: Timestamp format of log file records.
    """
    level: str = QUIET_LEVEL
    console: bool = True
    log_file: Optional[str] = None

    max_bytes: int = 1024 * 1024
    backup_count: int = 3

    console_fmt: str = "%(levelname)s | %(message)s"
    file_fmt: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"

    @classmethod
    def for_cli(cls, debug: bool = False, log_file: Optional[str] = None) -> LoggingConfig:
        """Build the configuration matching the --debug and --log-file flags."""
        return cls(level=VERBOSE_LEVEL if debug else QUIET_LEVEL, log_file=log_file)
