"""
Codec constants and the configuration file of the command line tool.
"""

from __future__ import annotations

import pathlib
import tomllib

from typing import NamedTuple

from .types import LogLevel, OutputFormat


VOCABULARY_SIZE = 4096
WORDLIST_RESOURCE = "wordlist.txt"
SEPARATOR = "-"
MAX_VALUE = 0xFFFF_FFFF


class Fragment(NamedTuple):
    shift: int
    bits: int

    @property
    def mask(self) -> int:
        return (1 << self.bits) - 1


# 12 + 12 + 8 bits. The last word is always one of the first 256 words of the vocabulary.
FRAGMENTS = (Fragment(20, 12), Fragment(8, 12), Fragment(0, 8))


CONFIG_DIRECTORY = pathlib.Path("~/.triword").expanduser()
CONFIG_PATH = CONFIG_DIRECTORY / "config.toml"

DEFAULT_OUTPUT_FORMAT: OutputFormat = "plain"
DEFAULT_LOG_LEVEL: LogLevel = "CRITICAL"


class Config(NamedTuple):
    output_format: OutputFormat
    log_level: LogLevel


def load(path: pathlib.Path = CONFIG_PATH) -> Config:
    """Load the configuration from the given configuration file."""
    with open(path, "rb") as f:
        output_format = DEFAULT_OUTPUT_FORMAT
        log_level = DEFAULT_LOG_LEVEL

        for key, value in tomllib.load(f).items():
            if key != "default":
                raise ValueError(f"Invalid configuration key {key!r}.")
            if not isinstance(value, dict):
                raise ValueError(f"Error in configuration file near [{key}].")

            for subkey, value in value.items():
                if subkey == "format":
                    if value not in OutputFormat.__args__:
                        raise ValueError(f"Invalid output format {value!r}.")
                    output_format = value
                elif subkey == "log_level":
                    if value not in LogLevel.__args__:
                        raise ValueError(f"Invalid log level {value!r}.")
                    log_level = value
                else:
                    raise ValueError(f"Invalid configuration key {subkey!r}.")

        return Config(output_format, log_level)


DEFAULT_CONFIG = Config(DEFAULT_OUTPUT_FORMAT, DEFAULT_LOG_LEVEL)
