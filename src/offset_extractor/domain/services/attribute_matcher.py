#!/usr/bin/env python3

"""Export marker detection for fields."""

from ..models.layout import FieldInfo


class AttributeMatcher:
    """Read-only predicate telling whether a field carries the export marker.

    The match is an exact, case-sensitive comparison with the configured
    marker name. The field is never modified; the walker's registry keeps
    fields from being exported twice.
    """

    def __init__(self, marker: str):
        self.marker = marker

    def is_marked(self, field: FieldInfo) -> bool:
        if not field.attributes:
            return False
        return self.marker in field.attributes
