#!/usr/bin/env python3

"""Run configuration."""

from .extractor_config import KNOWN_KEYS, OUTPUT_FORMATS, Config

__all__ = ["Config", "KNOWN_KEYS", "OUTPUT_FORMATS"]
