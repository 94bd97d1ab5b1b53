#!/usr/bin/env python3

"""Fatal error taxonomy for the offset extractor.

Every error here aborts the whole run. Records written before the error
stay in the destination; nothing is retried.
"""


class OffsetExtractorError(Exception):
    """Base class for all fatal extractor conditions."""

    def __init__(self, message: str, hint: str | None = None):
        super().__init__(message)
        self.hint = hint

    def __str__(self) -> str:
        message = super().__str__()
        if self.hint:
            return f"{message}\n{self.hint}"
        return message


class ConfigurationError(OffsetExtractorError):
    """Invalid or unknown option, unreadable input or unwritable destination."""


class NameBufferOverflow(OffsetExtractorError):
    """Qualified path would exceed the configured path capacity."""

    def __init__(self, path: str, max_length: int):
        super().__init__(
            f"The names of your structures are too long (or you have too many nested "
            f"structures). Right now, the path buffer contains: \"{path}\"",
            hint=f"Increase the buffer with the \"max_length\" option, "
            f"for example -O max_length={max_length * 2}",
        )
        self.path = path
        self.max_length = max_length


class AlignmentError(OffsetExtractorError):
    """Byte output requested for a field whose bit offset is not byte aligned."""

    def __init__(self, path: str, offset_bits: int):
        super().__init__(
            f"The offset of the \"{path}\" field is {offset_bits} in bits, but offsets "
            f"are written in bytes ({offset_bits} % 8 != 0)",
            hint="Write offsets in bits instead with the \"output_bits\" option "
            "(--output-bits or -O output_bits)",
        )
        self.path = path
        self.offset_bits = offset_bits


class InvariantViolation(OffsetExtractorError):
    """Unsupported source construct, such as exporting an unnamed field."""
