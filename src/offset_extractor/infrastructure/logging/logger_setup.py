#!/usr/bin/env python3

"""Logger setup for the extractor command line."""

import logging
import sys
from datetime import datetime
from pathlib import Path

from .utils import LOGGER_NAMESPACE


class LoggerSetup:
    """Configures console and optional file logging once per process."""

    _initialized = False
    _log_file_path: Path | None = None

    @classmethod
    def initialize(cls, log_dir: Path | None = None, verbose: bool = False) -> None:
        """
        Initialize console logging and, when ``log_dir`` is given, a log file.

        Console output goes to stderr: stdout may be the record destination.

        Args:
            log_dir: Directory for a timestamped debug log, or None for no file
            verbose: If True, show DEBUG messages on the console; otherwise INFO
        """
        if cls._initialized:
            return

        logger = logging.getLogger(LOGGER_NAMESPACE)
        logger.setLevel(logging.DEBUG)
        logger.handlers.clear()
        logger.propagate = False

        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(logging.DEBUG if verbose else logging.INFO)
        console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
        logger.addHandler(console_handler)

        if log_dir is not None:
            log_dir.mkdir(parents=True, exist_ok=True)
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            cls._log_file_path = log_dir / f"offset_extractor_{timestamp}.log"

            file_handler = logging.FileHandler(cls._log_file_path, encoding="utf-8")
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(
                logging.Formatter(
                    "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                    datefmt="%Y-%m-%d %H:%M:%S",
                )
            )
            logger.addHandler(file_handler)

        cls._initialized = True

        if cls._log_file_path is not None:
            logger.debug(f"Logging to {cls._log_file_path}")
        logger.debug(f"Verbose mode: {verbose}")

    @classmethod
    def get_log_file_path(cls) -> Path | None:
        return cls._log_file_path

    @classmethod
    def is_initialized(cls) -> bool:
        return cls._initialized

    @classmethod
    def reset(cls) -> None:
        """Drop the configured handlers so ``initialize`` can run again."""
        logger = logging.getLogger(LOGGER_NAMESPACE)
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)
        logger.propagate = True
        cls._initialized = False
        cls._log_file_path = None
