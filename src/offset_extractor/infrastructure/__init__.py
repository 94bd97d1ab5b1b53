#!/usr/bin/env python3

"""Infrastructure layer for technical concerns."""

from . import config, logging
from .output_sink import OutputSink

__all__ = [
    "OutputSink",
    "config",
    "logging",
]
