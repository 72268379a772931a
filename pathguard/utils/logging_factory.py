"""Centralized logging factory for consistent logger creation across pathguard.

The library modules only ever call ``get_logger(__name__)``; they never
configure handlers themselves. Applications (including the ``pathguard`` CLI)
opt in to output by calling ``LoggingFactory.initialize``, which installs:
- a Rich console handler on stderr
- optionally a file handler writing ``pathguard.log`` into a log directory

Usage:
    LoggingFactory.initialize(log_dir=Path("logs"), level=logging.DEBUG)

    logger = get_logger(__name__)
    logger.debug("Rejected path %r", raw)
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "pathguard"
LOG_FILE_NAME = "pathguard.log"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


class LoggingFactory:
    """Factory for creating and configuring loggers consistently.

    Configuration happens at most once per process; repeated ``initialize``
    calls are ignored until ``reset`` is called.

    Class Attributes:
        _initialized: Flag to ensure single initialization
        _log_dir: Directory where the log file is written, if any
        _handlers: Handlers installed by ``initialize``
    """

    _initialized = False
    _log_dir: Optional[Path] = None
    _handlers: List[logging.Handler] = []

    @classmethod
    def initialize(
        cls,
        log_dir: Optional[Path] = None,
        level: int = logging.INFO,
        format_string: Optional[str] = None,
        console: bool = True,
    ) -> None:
        """Initialize logging for the ``pathguard`` logger hierarchy.

        Args:
            log_dir: Directory for ``pathguard.log``. No file handler when None.
            level: Level for the package logger (default: logging.INFO)
            format_string: Format for the file handler. If None, uses
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            console: Whether to attach a Rich console handler

        Side Effects:
            - Creates log_dir if it doesn't exist
            - Attaches handlers to the ``pathguard`` logger
        """
        if cls._initialized:
            return

        package_logger = logging.getLogger(PACKAGE_LOGGER)
        handlers: List[logging.Handler] = []

        if console:
            handlers.append(
                RichHandler(
                    console=Console(stderr=True),
                    show_time=True,
                    show_path=False,
                    rich_tracebacks=True,
                )
            )

        if log_dir is not None:
            cls._log_dir = Path(log_dir)
            cls._log_dir.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(cls._log_dir / LOG_FILE_NAME, encoding="utf-8")
            file_handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
            handlers.append(file_handler)

        for handler in handlers:
            package_logger.addHandler(handler)
        package_logger.setLevel(level)

        cls._handlers = handlers
        cls._initialized = True

    @classmethod
    def reset(cls) -> None:
        """Remove installed handlers and allow ``initialize`` to run again."""
        package_logger = logging.getLogger(PACKAGE_LOGGER)
        for handler in cls._handlers:
            package_logger.removeHandler(handler)
            handler.close()
        package_logger.setLevel(logging.NOTSET)
        cls._handlers = []
        cls._log_dir = None
        cls._initialized = False

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        """Get a logger for the given module name.

        Args:
            name: Module name for the logger, typically ``__name__``

        Returns:
            Logger instance
        """
        return logging.getLogger(name)

    @classmethod
    def set_level(cls, name: str, level: int) -> None:
        """Set the logging level for a specific logger."""
        logging.getLogger(name).setLevel(level)

    @classmethod
    def configure_verbose(cls, verbose: bool = False) -> None:
        """Switch the package logger between DEBUG and INFO."""
        level = logging.DEBUG if verbose else logging.INFO
        logging.getLogger(PACKAGE_LOGGER).setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given module name.

    Delegates to LoggingFactory.get_logger().

    Example:
        from pathguard.utils.logging_factory import get_logger
        logger = get_logger(__name__)
    """
    return LoggingFactory.get_logger(name)
