#!/usr/bin/env python3

"""Application layer."""

from .offset_extractor import OffsetExtractor

__all__ = ["OffsetExtractor"]
