#!/usr/bin/env python3

"""DWARF constants for the frontend."""

from .tag_constants import (
    AGGREGATE_TAGS,
    BTF_DECL_TAG,
    GNU_ANNOTATION_ATTRIBUTES,
    GNU_ANNOTATION_TAGS,
    LAYOUT_TRANSPARENT_TAGS,
    LLVM_ANNOTATION_TAGS,
)

__all__ = [
    "AGGREGATE_TAGS",
    "BTF_DECL_TAG",
    "GNU_ANNOTATION_ATTRIBUTES",
    "GNU_ANNOTATION_TAGS",
    "LAYOUT_TRANSPARENT_TAGS",
    "LLVM_ANNOTATION_TAGS",
]
