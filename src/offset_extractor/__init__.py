"""Struct offset extractor - field offsets of marked struct members from DWARF."""

from .application import OffsetExtractor
from .errors import (
    AlignmentError,
    ConfigurationError,
    InvariantViolation,
    NameBufferOverflow,
    OffsetExtractorError,
)
from .infrastructure.config import Config
from .main import main

__all__ = [
    "AlignmentError",
    "Config",
    "ConfigurationError",
    "InvariantViolation",
    "NameBufferOverflow",
    "OffsetExtractor",
    "OffsetExtractorError",
    "main",
]
