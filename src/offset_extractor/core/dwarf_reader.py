"""DWARF reader delivering aggregate definitions from ELF files."""

from collections.abc import Iterator
from pathlib import Path
from types import TracebackType
from typing import BinaryIO

from elftools.common.exceptions import ELFError
from elftools.dwarf.compileunit import CompileUnit
from elftools.dwarf.die import DIE
from elftools.dwarf.dwarfinfo import DWARFInfo
from elftools.elf.elffile import ELFFile

from ..domain.services.parsing import DIETypeClassifier
from ..errors import ConfigurationError
from ..infrastructure.logging import get_logger

logger = get_logger(__name__)


class DwarfReader:
    """Opens one ELF file and walks its DWARF type definitions.

    Use as a context manager; the file handle is closed on every exit path.
    """

    def __init__(self, elf_path: Path):
        self.elf_path = elf_path
        self.file_handle: BinaryIO | None = None
        self.elf_file: ELFFile | None = None
        self.dwarf_info: DWARFInfo | None = None

    def open(self) -> None:
        """Open the ELF file and load its DWARF information.

        Raises:
            ConfigurationError: Unreadable file, not an ELF file, or no DWARF info
        """
        try:
            self.file_handle = open(self.elf_path, "rb")
        except OSError as e:
            raise ConfigurationError(f"Couldn't open input file {self.elf_path}: {e}") from e

        try:
            self.elf_file = ELFFile(self.file_handle)  # type: ignore[no-untyped-call]
            if not self.elf_file.has_dwarf_info():  # type: ignore[no-untyped-call]
                raise ConfigurationError(
                    f"No DWARF info found in {self.elf_path}",
                    hint="Compile with -g so struct layouts are recorded",
                )
            self.dwarf_info = self.elf_file.get_dwarf_info()  # type: ignore[no-untyped-call]
        except ELFError as e:
            self.close()
            raise ConfigurationError(f"Not a readable ELF file: {self.elf_path}: {e}") from e
        except ConfigurationError:
            self.close()
            raise

        logger.debug(
            f"DWARF info loaded from {self.elf_path} "
            f"({self.elf_file.get_machine_arch()}, "
            f"{'little' if self.little_endian else 'big'}-endian)"
        )

    def close(self) -> None:
        if self.file_handle is not None:
            self.file_handle.close()
            self.file_handle = None
            logger.debug(f"Closed {self.elf_path}")

    @property
    def little_endian(self) -> bool:
        if self.elf_file is None:
            raise RuntimeError("ELF file not opened. Call open() first.")
        return bool(self.elf_file.little_endian)

    def iter_compile_units(self) -> Iterator[CompileUnit]:
        if self.dwarf_info is None:
            raise RuntimeError("DWARF info not loaded. Call open() first.")
        yield from self.dwarf_info.iter_CUs()  # type: ignore[no-untyped-call]

    @staticmethod
    def iter_aggregate_definitions(cu: CompileUnit) -> Iterator[DIE]:
        """Yield complete struct/union/class DIEs of a CU in DIE order."""
        for die in cu.iter_DIEs():  # type: ignore[no-untyped-call]
            if die.is_null():  # type: ignore[no-untyped-call]
                continue
            if DIETypeClassifier.is_aggregate_definition(die):
                yield die

    def __enter__(self) -> "DwarfReader":
        self.open()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()
