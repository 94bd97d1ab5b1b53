#!/usr/bin/env python3

"""DWARF parsing services: aggregate DIEs to layout models."""

from .aggregate_parser import AggregateParser
from .annotations import collect_decl_tags
from .die_type_classifier import DIETypeClassifier
from .member_location import legacy_bit_offset, parse_location_offset

__all__ = [
    "AggregateParser",
    "DIETypeClassifier",
    "collect_decl_tags",
    "legacy_bit_offset",
    "parse_location_offset",
]
