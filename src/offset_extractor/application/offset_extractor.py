#!/usr/bin/env python3

"""Offset extraction orchestrator (Application Layer).

Wires the components of one run together:
- DwarfReader: ELF/DWARF access, one input file at a time
- AggregateParser: aggregate DIEs to layout models in a TypeArena
- OffsetWalker: qualified names and accumulated offsets of marked fields
- Emitter / OutputSink: record formatting and write-through output
"""

from collections.abc import Iterable
from pathlib import Path

from ..core import DwarfReader
from ..domain.models.layout import AggregateType, TypeArena
from ..domain.services import (
    AttributeMatcher,
    Emitter,
    OffsetWalker,
    PathBuilder,
    Registry,
    TraversalContext,
)
from ..domain.services.parsing import AggregateParser
from ..infrastructure.config import Config
from ..infrastructure.logging import ProgressTracker, get_logger, log_timing
from ..infrastructure.output_sink import OutputSink

logger = get_logger(__name__)


class OffsetExtractor:
    """Runs one extraction over a set of input files.

    The traversal context is built once per run and shared by every input,
    so an aggregate defined in several inputs is only emitted once.
    """

    def __init__(self, config: Config, sink: OutputSink | None = None):
        self.config = config
        self.sink = sink or OutputSink(config.output, append=config.append)
        self.arena = TypeArena()
        path = PathBuilder(
            separator=config.separator,
            capitalize=config.capitalize,
            max_length=config.max_length,
        )
        self.emitter = Emitter(
            self.sink,
            prefix=config.prefix,
            separator=path.separator,
            output_bits=config.output_bits,
            output_format=config.output_format,
        )
        self.context = TraversalContext(
            arena=self.arena,
            matcher=AttributeMatcher(config.attribute),
            path=path,
            registry=Registry(),
            emitter=self.emitter,
        )
        self.walker = OffsetWalker(self.context)
        self.progress = ProgressTracker(logger)

    def handle_definition(self, aggregate: AggregateType) -> None:
        """Process one "aggregate definition complete" event."""
        self.progress.count_aggregate()
        records_before = self.emitter.records_written
        self.walker.visit_top_level(aggregate)
        self.progress.count_record(self.emitter.records_written - records_before)

    def extract_file(self, elf_path: Path) -> None:
        """Deliver every aggregate definition of one ELF file."""
        with self.progress.track_file(elf_path), DwarfReader(elf_path) as reader:
            parser = AggregateParser(self.arena, little_endian=reader.little_endian)
            for cu in reader.iter_compile_units():
                with self.progress.track_cu(cu):
                    for die in reader.iter_aggregate_definitions(cu):
                        self.handle_definition(parser.parse(die))

    @log_timing
    def run(self, inputs: Iterable[Path] | None = None) -> int:
        """Extract offsets from all inputs into the configured destination.

        Returns:
            Number of records written

        Raises:
            OffsetExtractorError: On any fatal condition; records already
                written stay in the destination
        """
        paths = list(inputs) if inputs is not None else list(self.config.inputs)
        with self.sink:
            for path in paths:
                self.extract_file(path)

        self.progress.report_summary()
        return self.emitter.records_written
