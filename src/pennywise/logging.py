"""Logging helpers for applications embedding the PennyWise domain.

The domain only ever calls ``logging.getLogger(__name__)``. Entities log each
rejected validation pass at DEBUG on the ``pennywise.domain`` hierarchy
(entity kind, operation, error count and field names, never the values), and
nothing reaches a handler until the host application calls
`configure_logging`.

Two handlers are available: a Rich console handler on stderr, and a "flight
recorder" that keeps recent records in memory and writes them to a file once
something at WARNING or above happens.
"""

from __future__ import annotations

import logging
import re
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

from pennywise import __version__, config

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "pennywise"
DOMAIN_LOGGER = "pennywise.domain"

ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]

logger = logging.getLogger(__name__)


class ThirdPartyPrefixFilter(logging.Filter):
    """Tag records from outside PennyWise with their top-level package.

    Sets ``record.prefix`` to e.g. ``"[urllib3]"`` for third-party loggers
    and to ``""`` for ``pennywise`` and its children. Never drops a record.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        package = record.name.partition(".")[0]
        record.prefix = "" if package == PROJECT_PREFIX else f"[{package}]"
        return True


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Build the stderr console handler.

    Args:
        level: Minimum level shown (forced to DEBUG in debug mode).
        debug_mode: Show timestamps, logger names and source paths instead of
            the third-party prefix.
        color: Disable to get plain output (e.g. when stderr is captured).

    Returns:
        RichHandler: Ready to attach to the root logger.
    """
    color_system: ColorSystem | None = "auto" if color else None
    console = Console(color_system=color_system, stderr=True)

    handler = RichHandler(
        level=logging.DEBUG if debug_mode else level,
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )
    if debug_mode:
        handler.setFormatter(logging.Formatter("%(asctime)s %(name)s: %(message)s"))
    else:
        handler.setFormatter(logging.Formatter("%(prefix)s %(message)s"))
        handler.addFilter(ThirdPartyPrefixFilter())
    return handler


def config_flight_recorder(
    path: Path,
    capacity: int = 2000,
    flush_level: int = logging.WARNING,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Build a memory-buffered handler that writes to ``path`` on flush.

    Up to ``capacity`` records are held in memory. The buffer is written out
    when a record at ``flush_level`` or above arrives, when it is full, and
    on close if ``flush_on_close`` is set. The file is truncated on creation.

    Returns:
        MemoryHandler: Its ``target`` is the underlying `logging.FileHandler`.
    """
    file_handler = logging.FileHandler(path, mode="w", encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(process)d:%(threadName)s] "
            "%(levelname)s %(name)s:%(lineno)d: %(message)s"
        )
    )
    return MemoryHandler(
        capacity=capacity,
        flushLevel=flush_level,
        target=file_handler,
        flushOnClose=flush_on_close,
    )


def _normalize_items(value: str | list[str] | tuple[str, ...]) -> list[str]:
    """Split comma/space separated ``NAME=LEVEL`` items into a flat list."""
    values = [value] if isinstance(value, str) else list(value)
    items: list[str] = []
    for v in values:
        items.extend(s for s in re.split(r"[,\s]+", v) if s)
    return items


def parse_logger_levels(value: str | list[str] | tuple[str, ...]) -> dict[str, int]:
    """Parse ``NAME=LEVEL`` pairs into a name -> numeric level mapping.

    Args:
        value: A single string (items separated by commas or whitespace) or a
            sequence of such strings.

    Returns:
        Mapping of logger names to numeric logging levels.

    Raises:
        ValueError: If an item is not ``NAME=LEVEL`` or LEVEL is not a level name.
    """
    levels: dict[str, int] = {}
    known = logging.getLevelNamesMapping()
    for item in _normalize_items(value):
        name, sep, level_str = item.partition("=")
        if not sep or not name.strip():
            raise ValueError(f"Expected NAME=LEVEL, got {item!r}")
        if (lvl := known.get(level_str.strip().upper())) is None:
            raise ValueError(f"Invalid log level: {level_str}")
        levels[name.strip()] = lvl
    return levels


def configure_logging(  # pylint: disable=too-many-arguments
    *,
    level: int | None = None,
    debug_mode: bool = False,
    color: bool = True,
    log_path: Path | None = None,
    flight_capacity: int = 2000,
    force_flush_fr: bool = False,
    logger_levels: dict[str, int] | None = None,
    log_rejections: bool = True,
) -> list[logging.Handler]:
    """Replace the root logger's handlers with PennyWise's.

    ``level`` and ``logger_levels`` default to `config.get_log_level` and
    `config.get_logger_levels`. A flight recorder is added when ``log_path``
    is given. With ``log_rejections`` off, ``pennywise.domain`` is raised to
    INFO and rejected validation passes are dropped before any handler sees
    them; an explicit entry for that logger in ``logger_levels`` wins.

    Returns:
        The handlers now attached to the root logger.
    """
    if level is None:
        level = config.get_log_level()
    if logger_levels is None:
        logger_levels = config.get_logger_levels()
    level = max(logging.DEBUG, min(logging.CRITICAL, level))

    handlers: list[logging.Handler] = [
        config_console_handler(level=level, debug_mode=debug_mode, color=color)
    ]
    if log_path is not None:
        handlers.append(
            config_flight_recorder(
                path=log_path, capacity=flight_capacity, flush_on_close=force_flush_fr
            )
        )

    # handlers do the filtering
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)

    levels: dict[str, int] = {} if log_rejections else {DOMAIN_LOGGER: logging.INFO}
    levels.update(logger_levels)
    for name, lvl in levels.items():
        logging.getLogger(name).setLevel(lvl)

    _log_configuration(level, handlers, log_path, levels)
    return handlers


def _log_configuration(
    level: int,
    handlers: list[logging.Handler],
    log_path: Path | None,
    logger_levels: dict[str, int],
) -> None:
    logger.info(
        "PennyWise %s: console=%s, flight-recorder=%s, currency=%s",
        __version__,
        logging.getLevelName(level),
        log_path or "OFF",
        config.get_default_currency(),
    )
    logger.debug("Handlers: %s", [type(h).__name__ for h in handlers])
    logger.debug(
        "Per-logger levels: %s",
        {name: logging.getLevelName(lvl) for name, lvl in logger_levels.items()}
        or "<none>",
    )
