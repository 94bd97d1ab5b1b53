#!/usr/bin/env python3

"""Write-through text destination for output records."""

import sys
from pathlib import Path
from types import TracebackType
from typing import TextIO

from ..errors import ConfigurationError
from .logging import get_logger

logger = get_logger(__name__)


class OutputSink:
    """Destination file (or stdout), opened once per run.

    Every line is flushed as soon as it is written so records survive a
    fatal abort later in the run.
    """

    def __init__(self, path: Path | None, append: bool = False):
        self.path = path
        self.append = append
        self._stream: TextIO | None = None
        self._owns_stream = False
        self.lines_written = 0

    def open(self) -> None:
        if self.path is None:
            self._stream = sys.stdout
            self._owns_stream = False
            return

        mode = "a" if self.append else "w"
        try:
            self._stream = open(self.path, mode, encoding="utf-8", newline="\n")
        except OSError as e:
            raise ConfigurationError(f"Couldn't open output file {self.path}: {e}") from e
        self._owns_stream = True
        logger.debug(f"Opened {self.path} ({'append' if self.append else 'truncate'})")

    def write_line(self, line: str) -> None:
        if self._stream is None:
            raise RuntimeError("Output sink not opened. Call open() first.")
        self._stream.write(f"{line}\n")
        self._stream.flush()
        self.lines_written += 1

    def close(self) -> None:
        if self._stream is not None and self._owns_stream:
            self._stream.close()
            logger.debug(f"Closed {self.path} after {self.lines_written} lines")
        self._stream = None

    def __enter__(self) -> "OutputSink":
        self.open()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()
