from __future__ import annotations

"""
Listing Configuration.

Holds the immutable run parameters handed from the interface layer to the
tree builder and renderer, together with their validation rules.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from filelister.domain.errors import (
    EXIT_FAILURE,
    EXIT_MISSING_ARGUMENT,
    InvalidArgumentError,
)

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# CONSTANTS
# -----------------------------------------------------------------------------

OUTPUT_FORMATS: Tuple[str, ...] = ("text", "json", "yaml")
DEFAULT_OUTPUT_FORMAT = "text"

# -----------------------------------------------------------------------------
# CONFIGURATION MODEL
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ListingConfig:
    """
    Parameters of a single listing run.

    Attributes:
        path: Root entry to read, kept exactly as given by the user.
        recursive: Expand every real subdirectory instead of one level.
        output: Renderer identifier (text/json/yaml).
    """
    path: str
    recursive: bool = False
    output: str = DEFAULT_OUTPUT_FORMAT

# -----------------------------------------------------------------------------
# VALIDATION
# -----------------------------------------------------------------------------

def validate_config(
        path: Optional[str],
        recursive: bool = False,
        output: Optional[str] = DEFAULT_OUTPUT_FORMAT,
) -> ListingConfig:
    """
    Build a ListingConfig from raw interface values.

    The path is checked before the output format, so a run missing both
    reports the missing path.

    Args:
        path: Raw root path.
        recursive: Recursion flag.
        output: Raw output format identifier.

    Returns:
        ListingConfig: The validated configuration.

    Raises:
        InvalidArgumentError: On a missing path (exit 1) or an unknown
                              output format (exit 2).
    """
    if not path:
        raise InvalidArgumentError("Must specify path.", exit_code=EXIT_MISSING_ARGUMENT)

    fmt = DEFAULT_OUTPUT_FORMAT if output is None else output
    if fmt not in OUTPUT_FORMATS:
        raise InvalidArgumentError(f"Invalid output format: {fmt}", exit_code=EXIT_FAILURE)

    cfg = ListingConfig(path=path, recursive=bool(recursive), output=fmt)
    logger.debug(f"Listing configuration resolved: {cfg}")
    return cfg
