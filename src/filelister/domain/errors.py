from __future__ import annotations

"""
Error Taxonomy.

Every fatal failure the listing can hit maps to one exception class carrying the
process exit status the CLI should terminate with. Traversal errors are
fatal: the first one aborts the whole run and no partial tree is emitted.
"""

from typing import Optional

# -----------------------------------------------------------------------------
# EXIT STATUS CONSTANTS
# -----------------------------------------------------------------------------

EXIT_OK = 0
EXIT_MISSING_ARGUMENT = 1
EXIT_FAILURE = 2

# -----------------------------------------------------------------------------
# EXCEPTIONS
# -----------------------------------------------------------------------------

class FileListerError(Exception):
    """Base class for all listing errors."""

    exit_code: int = EXIT_FAILURE

    def __init__(self, message: str, path: Optional[str] = None, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.path = path
        self.cause = cause


class PathUnreadableError(FileListerError):
    """Raised when an entry does not exist or cannot be stat'ed."""

    def __init__(self, path: str, cause: Optional[BaseException] = None):
        super().__init__(f"Cannot read file metadata: {path}", path=path, cause=cause)


class LinkUnreadableError(FileListerError):
    """Raised when the target of a symlink cannot be read."""

    def __init__(self, path: str, cause: Optional[BaseException] = None):
        super().__init__(f"Cannot read link target: {path}", path=path, cause=cause)


class DirectoryUnreadableError(FileListerError):
    """Raised when a directory listing cannot be obtained."""

    def __init__(self, path: str, cause: Optional[BaseException] = None):
        super().__init__(f"Cannot read directory: {path}", path=path, cause=cause)


class InvalidArgumentError(FileListerError):
    """Raised for a missing path or an unsupported output format."""

    def __init__(self, message: str, exit_code: int = EXIT_FAILURE):
        super().__init__(message)
        self.exit_code = exit_code
