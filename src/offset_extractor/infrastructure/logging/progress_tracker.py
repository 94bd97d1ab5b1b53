#!/usr/bin/env python3

"""Progress tracking for offset extraction runs."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from time import time
from typing import Any


class ProgressTracker:
    """
    Count inputs, compilation units, aggregates and records of one run.

    Failures inside a tracked block are logged with the elapsed time and
    re-raised unchanged.
    """

    def __init__(self, logger: logging.Logger):
        self.logger = logger
        self.start_time = time()
        self.file_count = 0
        self.cu_count = 0
        self.aggregate_count = 0
        self.record_count = 0

    @contextmanager
    def track_file(self, path: Path) -> Iterator[None]:
        """Track one input file."""
        self.file_count += 1
        started = time()
        records_before = self.record_count
        self.logger.debug(f"Reading {path}")

        try:
            yield
        except Exception as e:
            self.logger.error(f"{path} failed after {time() - started:.3f}s: {e}")
            raise

        self.logger.debug(
            f"{path} done in {time() - started:.3f}s "
            f"({self.record_count - records_before} records)"
        )

    @contextmanager
    def track_cu(self, cu: Any) -> Iterator[None]:
        """Track one compilation unit."""
        self.cu_count += 1
        cu_offset = getattr(cu, "cu_offset", 0)
        aggregates_before = self.aggregate_count
        self.logger.debug(f"Processing CU #{self.cu_count} at 0x{cu_offset:x}")

        yield

        self.logger.debug(
            f"CU #{self.cu_count} produced "
            f"{self.aggregate_count - aggregates_before} aggregate definitions"
        )

    def count_aggregate(self) -> None:
        self.aggregate_count += 1

    def count_record(self, count: int = 1) -> None:
        self.record_count += count

    def report_summary(self) -> None:
        """Report final run statistics."""
        total_time = time() - self.start_time
        self.logger.info(
            f"Extracted {self.record_count} offsets from {self.aggregate_count} aggregates "
            f"({self.file_count} files, {self.cu_count} CUs) in {total_time:.2f}s"
        )
