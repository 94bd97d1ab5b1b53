"""Core module: ELF/DWARF access."""

from .dwarf_reader import DwarfReader

__all__ = ["DwarfReader"]
