"""Main entry point for the struct offset extractor."""

import argparse
import sys
from pathlib import Path
from typing import NoReturn

from .application import OffsetExtractor
from .errors import OffsetExtractorError
from .infrastructure.config import KNOWN_KEYS, OUTPUT_FORMATS, Config
from .infrastructure.logging import LoggerSetup, get_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="offset-extractor",
        description="Emit the offsets of struct/union fields marked with "
        "__attribute__((btf_decl_tag(\"extract_offset\"))), read from DWARF debug info",
        epilog="""
Examples:
  # Byte offsets of marked fields to stdout
  offset-extractor build/foo.o

  # Upper-case C macros with a prefix, appended to a header
  offset-extractor build/*.o --format macro --separator _ --prefix OFFSET \\
      --capitalize --append -o offsets.h

  # GCC plugin style arguments
  offset-extractor build/foo.o -O output_bits -O separator=.
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("inputs", type=Path, nargs="*", help="ELF files with DWARF info")
    parser.add_argument("--attribute", help="Marker attribute name (default: extract_offset)")
    parser.add_argument("-o", "--output", help="Destination file (default: standard output)")
    parser.add_argument("--separator", help="Path segment separator (default: ::)")
    parser.add_argument("--prefix", help="Prefix prepended to every name (default: none)")
    parser.add_argument(
        "--capitalize", action="store_true", default=None, help="Upper-case every path segment"
    )
    parser.add_argument(
        "--append", action="store_true", default=None,
        help="Append to the destination instead of truncating it",
    )
    parser.add_argument(
        "--output-bits", action="store_true", default=None,
        help="Write offsets in bits instead of bytes",
    )
    parser.add_argument("--max-length", help="Capacity of the qualified path (default: 256)")
    parser.add_argument("--format", choices=OUTPUT_FORMATS, help="Record shape (default: plain)")
    parser.add_argument(
        "-O",
        "--plugin-arg",
        action="append",
        default=[],
        metavar="KEY[=VALUE]",
        help=f"Plugin style option, one of: {', '.join(sorted(KNOWN_KEYS))}",
    )
    parser.add_argument(
        "--lenient", action="store_true",
        help="Warn about unknown plugin style options instead of failing",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logs")
    parser.add_argument("--log-dir", type=Path, help="Also write a debug log file here")
    return parser


def load_config(args: argparse.Namespace) -> Config:
    """Build the run configuration from environment and arguments."""
    config = Config.from_env()
    if args.lenient:
        config.strict = False
    config.apply_plugin_args(args.plugin_arg)

    for key in ("attribute", "output", "separator", "prefix", "max_length", "format"):
        value = getattr(args, key)
        if value is not None:
            config.set_value(key, value)
    for key in ("capitalize", "append", "output_bits"):
        if getattr(args, key):
            setattr(config, key, True)

    if args.inputs:
        config.inputs = list(args.inputs)
    config.verbose = args.verbose
    config.log_dir = args.log_dir
    return config


def main(argv: list[str] | None = None) -> NoReturn:
    """Command line entry point."""
    args = build_parser().parse_args(argv)
    LoggerSetup.initialize(args.log_dir, verbose=args.verbose)
    logger = get_logger(__name__)

    try:
        config = load_config(args)
        config.validate()
        logger.debug(f"Inputs: {', '.join(str(p) for p in config.inputs)}")
        logger.debug(f"Output: {config.output or 'standard output'}")

        OffsetExtractor(config).run()
    except OffsetExtractorError as e:
        logger.error(str(e))
        sys.exit(1)

    sys.exit(0)


if __name__ == "__main__":
    main()
