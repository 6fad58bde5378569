from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema and translates the parsed
namespace into a validated ListingConfig. Argparse only checks syntax;
the semantic rules (required path, known output format) live in the
domain validator so that their exit codes stay under our control.
"""

import argparse

from filelister.domain.config import DEFAULT_OUTPUT_FORMAT, OUTPUT_FORMATS, ListingConfig, validate_config

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the filelister CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="filelister",
        description="List a filesystem path as indented text, JSON or YAML.",
    )

    # --- Listing ---
    p.add_argument(
        "--path",
        dest="path",
        default=None,
        help="Path to the file or folder to list (required).",
    )
    p.add_argument(
        "--recursive",
        action="store_true",
        help="List files recursively.",
    )
    p.add_argument(
        "--output",
        dest="output",
        default=DEFAULT_OUTPUT_FORMAT,
        metavar="FORMAT",
        help=f"Output format: <{'|'.join(OUTPUT_FORMATS)}> (default: {DEFAULT_OUTPUT_FORMAT}).",
    )

    # --- Diagnostics ---
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write logs to this file (rotated).",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_config(args: argparse.Namespace) -> ListingConfig:
    """
    Translate the argparse Namespace into a ListingConfig.

    Raises:
        InvalidArgumentError: If the path is missing or the format unknown.
    """
    return validate_config(args.path, recursive=args.recursive, output=args.output)
