#!/usr/bin/env python3

"""Domain models for the offset extractor."""

from . import dwarf, layout

__all__ = [
    "dwarf",
    "layout",
]
