#!/usr/bin/env python3

"""Domain services layer."""

from . import parsing
from .attribute_matcher import AttributeMatcher
from .emitter import Emitter
from .path_builder import PathBuilder
from .registry import Registry
from .walker import OffsetWalker, TraversalContext

__all__ = [
    "AttributeMatcher",
    "Emitter",
    "OffsetWalker",
    "PathBuilder",
    "Registry",
    "TraversalContext",
    "parsing",
]
