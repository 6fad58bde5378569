from __future__ import annotations

"""
Logging Core Orchestrator.

Maintains the idempotent lifecycle of the logging subsystem. All records
are routed through a QueueHandler on the root logger and drained by a
QueueListener, which owns the actual console and file handlers.
"""

import atexit
import logging
import queue
from logging.handlers import QueueHandler, QueueListener
from typing import List, Optional

from filelister.infra.logging.config import _LEVEL_MAP, LoggingConfig
from filelister.infra.logging.handlers import (
    _create_console_handler,
    _create_rotating_file_handler,
    _is_our_handler,
    _tag_handler,
)

# Internal state flags for idempotency and lifecycle tracking
_CONFIGURED_FLAG_ATTR: str = "_filelister_configured"
_QUEUE_LISTENER_ATTR: str = "_filelister_queue_listener"


# ==============================================================================
# PUBLIC API
# ==============================================================================

def configure_logging(cfg: LoggingConfig, *, force: bool = False) -> logging.Logger:
    """
    Execute idempotent configuration of the root logger.

    Repeated calls are no-ops unless force is set, in which case our
    previous handlers and listener are torn down first.

    Args:
        cfg: Structural configuration for the logging system.
        force: If True, re-initialize handlers even if already configured.

    Returns:
        logging.Logger: The initialized root logger instance.
    """
    root = logging.getLogger()

    # 1. Idempotency Check
    if getattr(root, _CONFIGURED_FLAG_ATTR, False) and not force:
        return root

    level_int = _parse_level(cfg.level)
    root.setLevel(level_int)

    # Cleanup existing infrastructure to prevent handler leakage
    _remove_our_handlers(root)
    _stop_existing_listener(root)

    # 2. Handler Definition
    handlers_list: List[logging.Handler] = []

    if cfg.console:
        handlers_list.append(
            _create_console_handler(level_int, logging.Formatter(cfg.console_fmt))
        )

    if cfg.log_file:
        fh = _create_rotating_file_handler(
            cfg.log_file,
            level_int,
            logging.Formatter(cfg.file_fmt, datefmt=cfg.datefmt),
            cfg.max_bytes,
            cfg.backup_count,
        )
        if fh:
            handlers_list.append(fh)

    if not handlers_list:
        return root

    # 3. Queue-Based Orchestration
    log_queue: queue.Queue[logging.LogRecord] = queue.Queue(-1)

    queue_handler = QueueHandler(log_queue)
    _tag_handler(queue_handler)

    listener = QueueListener(log_queue, *handlers_list, respect_handler_level=True)
    listener.start()

    root.addHandler(queue_handler)

    setattr(root, _QUEUE_LISTENER_ATTR, listener)
    setattr(root, _CONFIGURED_FLAG_ATTR, True)

    # Flush pending records on interpreter shutdown
    atexit.register(_safe_stop_listener, listener)

    return root


def shutdown_logging() -> None:
    """Drain the queue and detach our handlers from the root logger."""
    root = logging.getLogger()
    _stop_existing_listener(root)
    _remove_our_handlers(root)
    setattr(root, _CONFIGURED_FLAG_ATTR, False)


def get_logger(name: str) -> logging.Logger:
    """
    Acquire a named logger instance compliant with the global configuration.

    Args:
        name: Hierarchical name for the logger (usually __name__).

    Returns:
        logging.Logger: The requested logger instance.
    """
    return logging.getLogger(name)


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _parse_level(level: str) -> int:
    """Convert a string-based logging level to its numeric constant."""
    return _LEVEL_MAP.get(str(level or "").strip().upper(), logging.WARNING)


def _remove_our_handlers(root: logging.Logger) -> None:
    for h in list(root.handlers):
        if _is_our_handler(h):
            root.removeHandler(h)
            h.close()


def _stop_existing_listener(root: logging.Logger) -> None:
    listener = getattr(root, _QUEUE_LISTENER_ATTR, None)
    if listener:
        _safe_stop_listener(listener)
        setattr(root, _QUEUE_LISTENER_ATTR, None)


def _safe_stop_listener(listener: Optional[QueueListener]) -> None:
    """
    Stop a QueueListener, tolerating one that was already stopped.

    QueueListener.stop() fails on a second call because its thread has
    already been joined and cleared.
    """
    if not listener:
        return
    if getattr(listener, "_thread", None) is not None:
        listener.stop()
