from __future__ import annotations

"""
Main Entry Point and Global Supervisor.

Routes execution to the CLI controller and installs a global exception
hook so that unexpected crashes end in a logged, one-line diagnostic
instead of a raw traceback.
"""

import logging
import os
import sys
import traceback
from typing import Any

# -----------------------------------------------------------------------------
# ENVIRONMENT INITIALIZATION
# -----------------------------------------------------------------------------

# Make the package importable when this file is executed as a script
BASE_DIR = os.path.dirname(os.path.abspath(__file__))
SRC_DIR = os.path.dirname(BASE_DIR)
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

# Unexpected failures share the I/O failure status; 1 only means a missing --path
EXIT_CRASH = 2

# -----------------------------------------------------------------------------
# GLOBAL SUPERVISOR (EXCEPTION HANDLING)
# -----------------------------------------------------------------------------

def global_exception_handler(exctype: type[BaseException], value: BaseException, tb: Any) -> None:
    """
    Trap unhandled exceptions, log the full trace and exit.

    The trace goes to the log only; the terminal gets a single line.

    Args:
        exctype: Exception class.
        value: Exception instance.
        tb: Traceback object.
    """
    stack_trace = "".join(traceback.format_exception(exctype, value, tb))

    logger = logging.getLogger("filelister.supervisor")
    logger.critical(f"FATAL EXCEPTION DETECTED: {value}")
    logger.debug(stack_trace)

    print(f"CRITICAL ERROR: {exctype.__name__}: {value}", file=sys.stderr)
    sys.exit(EXIT_CRASH)


sys.excepthook = global_exception_handler

# -----------------------------------------------------------------------------
# EXECUTION ROUTING
# -----------------------------------------------------------------------------

def main() -> int:
    """
    Delegate to the CLI controller.

    Returns:
        int: Process exit code.
    """
    from filelister.interface.cli.app import main as cli_main

    try:
        return cli_main()
    except Exception as e:
        global_exception_handler(type(e), e, e.__traceback__)
        return EXIT_CRASH


if __name__ == "__main__":
    sys.exit(main())
