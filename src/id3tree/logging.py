"""Loguru setup for id3tree.

id3tree logs through loguru but stays silent until `enable_logging()` is
called. Split decisions are logged at the custom SPLIT level, which sits
between DEBUG (per-candidate entropy scores) and INFO (load and build
summaries), so the default level shows the shape of the tree being grown.

Note:
    Importing this module removes loguru's default stderr handler (ID 0) so
    that `enable_logging()` output is not printed twice. Applications that
    configure loguru themselves should do so after importing id3tree.
"""

from __future__ import annotations

import contextlib
import sys
import threading
import warnings
from typing import TYPE_CHECKING, ClassVar, Final, Literal

from loguru import logger

if TYPE_CHECKING:
    from types import TracebackType

    from loguru import Record

PACKAGE_NAME: Final[str] = __name__.split(".")[0]

SPLIT_LEVEL: Final[str] = "SPLIT"
SPLIT_LEVEL_NUMBER: Final[int] = 15

type LogLevel = Literal["TRACE", "DEBUG", "SPLIT", "INFO", "WARNING", "ERROR", "CRITICAL"]
type LogFormat = Literal["short", "full"]

_TIME_AND_LEVEL: Final[str] = "<green>{time:HH:mm:ss.SSS}</green> | <level>{level: <7}</level> | "  # noqa: RUF027
_FORMATS: Final[dict[str, str]] = {
    "short": _TIME_AND_LEVEL + "<cyan>{function}</cyan> - <level>{message}</level> {extra}",
    "full": _TIME_AND_LEVEL + "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level> {extra}",
}

with contextlib.suppress(ValueError):
    logger.remove(0)


def _register_split_level() -> None:
    """Add the SPLIT level to loguru, or warn if a clashing SPLIT level exists."""
    try:
        existing_level = logger.level(SPLIT_LEVEL)
    except ValueError:
        logger.level(SPLIT_LEVEL, no=SPLIT_LEVEL_NUMBER, icon="🌿")
        return
    if existing_level.no != SPLIT_LEVEL_NUMBER:
        warnings.warn(
            f"SPLIT level already registered with numeric value {existing_level.no}, expected {SPLIT_LEVEL_NUMBER}",
            stacklevel=2,
        )


_register_split_level()


class LoggingHandle:
    """Owns one stderr handler added by `enable_logging()`.

    Handles are independent: disabling one removes only its own handler.
    Once no handle is left, the id3tree logger is disabled again.

    Examples:
        >>> with enable_logging(level="DEBUG"):  # doctest: +SKIP
        ...     build_tree_from_text(text)
    """

    _active_ids: ClassVar[set[int]] = set()
    _lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self, handler_id: int) -> None:
        """Register `handler_id` as active.

        Args:
            handler_id (int): ID returned by `logger.add()`.
        """
        self.handler_id: int | None = handler_id
        with LoggingHandle._lock:
            LoggingHandle._active_ids.add(handler_id)

    def disable(self) -> None:
        """Remove this handle's handler; safe to call more than once."""
        with LoggingHandle._lock:
            if self.handler_id is None:
                return
            LoggingHandle._active_ids.discard(self.handler_id)
            with contextlib.suppress(ValueError):
                logger.remove(self.handler_id)
            self.handler_id = None
            if not LoggingHandle._active_ids:
                logger.disable(PACKAGE_NAME)

    def __enter__(self) -> LoggingHandle:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.disable()

    @classmethod
    def get_active_handle_count(cls) -> int:
        """Return how many handles are still enabled."""
        with cls._lock:
            return len(cls._active_ids)


def enable_logging(
    *,
    level: LogLevel = SPLIT_LEVEL,
    log_format: LogFormat = "short",
) -> LoggingHandle:
    """Print id3tree log records to stderr.

    Args:
        level (LogLevel): Lowest level shown. "SPLIT" (default) shows one
            record per split plus load and build summaries; "DEBUG" adds the
            conditional entropy of every candidate attribute.
        log_format (LogFormat): "short" shows the function name; "full" shows
            module:function:line.

    Returns:
        LoggingHandle: Handle that removes the handler again on `disable()`
            or when used as a context manager.
    """
    logger.enable(PACKAGE_NAME)
    handler_id = logger.add(
        sys.stderr,
        level=level,
        filter=_from_package,
        format=_FORMATS[log_format],
    )
    return LoggingHandle(handler_id)


def _from_package(record: Record) -> bool:
    name = record["name"]
    return name is not None and name.startswith(PACKAGE_NAME)
