#!/usr/bin/env python3

"""Configuration for an offset extraction run.

Values are layered: defaults, then ``EXTRACT_OFFSET_*`` environment
variables (a ``.env`` file is honoured), then plugin-style ``key=value``
arguments, then explicit command line flags.
"""

import os
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

from ...errors import ConfigurationError
from ..logging import get_logger

logger = get_logger(__name__)

ENV_PREFIX = "EXTRACT_OFFSET_"

DEFAULT_ATTRIBUTE = "extract_offset"
DEFAULT_SEPARATOR = "::"
DEFAULT_PREFIX = ""
DEFAULT_MAX_LENGTH = 256

OUTPUT_FORMATS = ("plain", "macro")

# Keys understood by plugin-style arguments and the environment
FLAG_KEYS = frozenset({"capitalize", "append", "output_bits"})
VALUE_KEYS = frozenset({"attribute", "output", "separator", "prefix", "max_length", "format"})
KNOWN_KEYS = FLAG_KEYS | VALUE_KEYS

TRUE_STRINGS = ("true", "1", "yes", "on")


@dataclass
class Config:
    """Configuration for the offset extractor."""

    inputs: list[Path] = field(default_factory=list)
    attribute: str = DEFAULT_ATTRIBUTE
    output: Path | None = None  # None writes to standard output
    separator: str = DEFAULT_SEPARATOR
    prefix: str = DEFAULT_PREFIX
    capitalize: bool = False
    append: bool = False
    output_bits: bool = False
    max_length: int | None = DEFAULT_MAX_LENGTH
    output_format: str = "plain"
    strict: bool = True
    verbose: bool = False
    log_dir: Path | None = None

    @classmethod
    def from_env(cls, env_path: Path | None = None) -> "Config":
        """
        Load configuration from ``EXTRACT_OFFSET_*`` environment variables.

        Args:
            env_path: Optional .env file (defaults to .env in the working directory)

        Returns:
            Config object
        """
        if env_path is None:
            env_path = Path.cwd() / ".env"
        if env_path.exists():
            load_dotenv(env_path)

        config = cls()
        strict = os.getenv(f"{ENV_PREFIX}STRICT")
        if strict is not None:
            config.strict = strict.lower() in TRUE_STRINGS

        for key in sorted(KNOWN_KEYS):
            value = os.getenv(f"{ENV_PREFIX}{key.upper()}")
            if value is None:
                continue
            if key in FLAG_KEYS:
                setattr(config, key, value.lower() in TRUE_STRINGS)
            else:
                config.set_value(key, value)
        return config

    def apply_plugin_args(self, arguments: Iterable[str]) -> "Config":
        """
        Apply ``key`` or ``key=value`` arguments in the GCC plugin style.

        Unknown keys are fatal in strict mode and a warning otherwise.

        Raises:
            ConfigurationError: Unknown key (strict), or a value key given without value
        """
        for argument in arguments:
            key, has_value, value = argument.partition("=")
            key = key.strip()

            if key not in KNOWN_KEYS:
                message = f"Unknown argument: {key}"
                if self.strict:
                    raise ConfigurationError(
                        message, hint=f"Known arguments: {', '.join(sorted(KNOWN_KEYS))}"
                    )
                logger.warning(message)
                continue

            if key in FLAG_KEYS:
                setattr(self, key, value.lower() in TRUE_STRINGS if has_value else True)
            elif not has_value:
                raise ConfigurationError(f"Argument {key} requires a value ({key}=...)")
            else:
                self.set_value(key, value)
        return self

    def set_value(self, key: str, value: str) -> None:
        """Set a value key from its string form."""
        if key == "max_length":
            self._set_max_length(value)
        elif key == "output":
            self.output = None if value in ("", "-", "/dev/stdout") else Path(value)
        elif key == "format":
            self.output_format = value
        else:
            setattr(self, key, value)

    def _set_max_length(self, value: str) -> None:
        try:
            size = int(value)
        except ValueError:
            size = 0
        if size > 0:
            self.max_length = size
        else:
            logger.warning(f"Wrong max_length {value!r}, using {self.max_length}")

    def validate(self) -> None:
        """
        Validate the configuration.

        Raises:
            ConfigurationError: If configuration is invalid
        """
        if not self.attribute:
            raise ConfigurationError("The marker attribute name must not be empty")

        if not self.separator:
            raise ConfigurationError("The path separator must not be empty")

        if self.output_format not in OUTPUT_FORMATS:
            raise ConfigurationError(
                f"Unknown output format {self.output_format!r}",
                hint=f"Use one of: {', '.join(OUTPUT_FORMATS)}",
            )

        if self.max_length is not None and self.max_length <= 0:
            raise ConfigurationError(f"max_length must be positive, got {self.max_length}")

        if not self.inputs:
            raise ConfigurationError("No input files given")

        for path in self.inputs:
            if not path.exists():
                raise ConfigurationError(f"Input file not found: {path}")
            if not path.is_file():
                raise ConfigurationError(f"Not a file: {path}")
