from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, argument validation,
tree construction and rendering. Stdout only ever receives the rendered
tree; diagnostics go to stderr.
"""

import os
import sys
from typing import List, Optional

from filelister.core.analysis.tree_generator import build_tree
from filelister.core.analysis.tree_renderer import get_renderer
from filelister.domain.errors import EXIT_MISSING_ARGUMENT, EXIT_OK, FileListerError
from filelister.infra.logging import LoggingConfig, configure_logging, get_logger
from filelister.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_INTERRUPTED = 130
EXIT_BROKEN_PIPE = 141  # 128 + SIGPIPE, what a shell reports for a killed writer

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the read -> build -> render workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: 0 on success, 1 for a missing path, 2 for an invalid output
             format or any filesystem failure.
    """
    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap (console on stderr, optional rotating file)
    configure_logging(LoggingConfig.for_cli(debug=args.debug, log_file=args.log_file))

    try:
        # 3. Validation happens before any filesystem access
        config = cli_args.args_to_config(args)
        renderer = get_renderer(config.output)

        # 4. Build and render
        tree = build_tree(config.path, recursive=config.recursive)
        output = renderer.render(tree)
    except FileListerError as e:
        logger.debug(f"Run aborted: {e!r}", exc_info=True)
        print(f"ERROR: {e}", file=sys.stderr)
        if e.exit_code == EXIT_MISSING_ARGUMENT:
            parser.print_usage(sys.stderr)
        return e.exit_code
    except KeyboardInterrupt:
        print("Interrupted.", file=sys.stderr)
        return EXIT_INTERRUPTED

    # 5. Output phase
    try:
        _write_output(output)
    except BrokenPipeError:
        # Reader went away (e.g. piped into head): stop without a diagnostic
        _discard_stdout()
        return EXIT_BROKEN_PIPE
    return EXIT_OK

# -----------------------------------------------------------------------------
# OUTPUT HELPERS
# -----------------------------------------------------------------------------

def _write_output(output: str) -> None:
    """
    Write the rendered tree and a trailing newline to stdout.

    Entry names that are not valid in the filesystem encoding arrive as
    lone surrogates; surrogateescape turns them back into the original bytes.
    """
    stream = sys.stdout
    if hasattr(stream, "reconfigure"):
        stream.reconfigure(errors="surrogateescape")
    stream.write(output + "\n")
    stream.flush()


def _discard_stdout() -> None:
    """Point the stdout descriptor at devnull so the exit-time flush cannot fail again."""
    try:
        fd = sys.stdout.fileno()
    except (OSError, ValueError):
        return
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, fd)
    os.close(devnull)

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
