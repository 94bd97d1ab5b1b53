#!/usr/bin/env python3

"""Domain layer: layout models and the offset walk."""

from . import models, services

__all__ = [
    "models",
    "services",
]
