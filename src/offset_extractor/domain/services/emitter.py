#!/usr/bin/env python3

"""Formatting and writing of output records.

Two record shapes are supported:

    plain:  <prefix><path> <offset>
    macro:  #define <PREFIX><SEP><STRUCT><SEP><FIELD> (<offset>)

The offset is written in bytes unless bit output is configured; a field
that does not start on a byte boundary cannot be written in bytes and
aborts the run.
"""

from typing import Protocol

from ...errors import AlignmentError, InvariantViolation
from ..models.layout import OutputRecord


class LineSink(Protocol):
    def write_line(self, line: str) -> None: ...


class Emitter:
    """Formats OutputRecords and writes each one immediately."""

    def __init__(
        self,
        sink: LineSink,
        prefix: str = "",
        separator: str = "::",
        output_bits: bool = False,
        output_format: str = "plain",
    ):
        self.sink = sink
        self.prefix = prefix
        self.separator = separator
        self.output_bits = output_bits
        self.output_format = output_format
        self.records_written = 0

    def offset_value(self, record: OutputRecord) -> int:
        if self.output_bits:
            return record.offset_bits
        if record.offset_bits % 8 != 0:
            raise AlignmentError(record.path, record.offset_bits)
        return record.offset_bits // 8

    def format(self, record: OutputRecord) -> str:
        value = self.offset_value(record)
        if self.output_format == "macro":
            return self._format_macro(record, value)
        return f"{self.prefix}{record.path} {value}"

    def _format_macro(self, record: OutputRecord, value: int) -> str:
        if len(record.segments) != 2:
            raise InvariantViolation(
                f"Macro output needs a STRUCT{self.separator}FIELD name, "
                f"but \"{record.path}\" has {len(record.segments)} segments",
                hint="Use the plain output format for fields of named nested members",
            )
        name = self.separator.join(record.segments)
        if self.prefix:
            name = f"{self.prefix}{self.separator}{name}"
        return f"#define {name} ({value})"

    def emit(self, record: OutputRecord) -> None:
        self.sink.write_line(self.format(record))
        self.records_written += 1
