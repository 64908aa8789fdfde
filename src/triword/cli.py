"""
Command line interface.
"""

import importlib.metadata
import json
import logging
import pathlib
import sys

from . import codec, config
from .codec import DecodeError
from .config import MAX_VALUE
from .types import OutputFormat

import click

logger = logging.getLogger("triword")
logger.setLevel(logging.CRITICAL)
handler = logging.StreamHandler()
handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
logger.addHandler(handler)


def error(text: str) -> None:
    click.secho(f"ERROR: {text}", fg="red", err=True)


def output(results: list[tuple[int, str]], fmt: OutputFormat, key: str) -> None:
    """Prints (value, words) pairs, showing only the `key` column in plain format."""
    match fmt:
        case "plain":
            for value, words in results:
                click.echo(value if key == "value" else words)
        case "json":
            click.echo(json.dumps([{"value": value, "words": words} for value, words in results], indent=2))
        case _:
            raise NotImplementedError


def parse_values(ctx, param, values):
    parsed = []
    for v in values:
        try:
            value = int(v, 0)
        except ValueError:
            raise click.BadParameter(f"{v!r} is not an integer.")
        if not 0 <= value <= MAX_VALUE:
            raise click.BadParameter(f"{v!r} is not a 32 bit unsigned integer [min: 0, max: {MAX_VALUE:#x}].")
        parsed.append(value)
    return parsed


format_option = click.option(
    "--format",
    help="Output format, overrides the configuration file. [plain|json]",
    type=click.Choice(["plain", "json"]),
    required=False,
    metavar="FORMAT",
)


@click.group()
@click.option(
    "--config",
    "config_path",
    help=f"Configuration file to use instead of {config.CONFIG_PATH}.",
    type=click.Path(exists=True, dir_okay=False, path_type=pathlib.Path),
    required=False,
)
@click.option("--verbose", help="Enable debug logging.", is_flag=True)
@click.pass_context
def triword(ctx: click.Context, config_path: pathlib.Path | None, verbose: bool) -> None:
    """triword: Human friendly word triples for 32 bit identifiers.

    Every identifier maps to three words from a fixed vocabulary, e.g. 12 becomes abacus-abacus-abridge.
    """
    try:
        cfg = config.load(config_path or config.CONFIG_PATH)
    except FileNotFoundError:
        cfg = config.DEFAULT_CONFIG
    except Exception as e:
        error(f"Configuration file invalid. {e}")
        sys.exit(1)

    logger.setLevel(logging.DEBUG if verbose else cfg.log_level)
    logger.debug(f"Configuration: {cfg}")
    ctx.obj = cfg


@triword.command()
@click.argument("values", nargs=-1, required=True, callback=parse_values)
@format_option
@click.pass_obj
def encode(cfg: config.Config, values: list[int], format: OutputFormat | None) -> None:
    """Encode identifiers as word triples.

    Values may be given in decimal or with a 0x, 0o or 0b prefix."""
    results = []
    for value in values:
        words = codec.encode(value)
        logger.debug(f"{value:#010x} -> fragments {codec.fragments(value)} -> {words}")
        results.append((value, words))
    output(results, format or cfg.output_format, key="words")


@triword.command()
@click.argument("triples", nargs=-1, required=True)
@format_option
@click.pass_obj
def decode(cfg: config.Config, triples: tuple[str, ...], format: OutputFormat | None) -> None:
    """Decode word triples into identifiers."""
    results = []
    for words in triples:
        try:
            value = codec.decode(words)
        except DecodeError as e:
            error(f"Cannot decode {words!r}. {e}")
            sys.exit(1)
        logger.debug(f"{words} -> {value:#010x}")
        results.append((value, words))
    output(results, format or cfg.output_format, key="value")


@triword.command()
def version() -> None:
    """Display version information of this tool."""
    click.echo(f"triword: {importlib.metadata.version('triword')}")
    click.echo("Libraries: ")
    for lib in ("click",):
        click.echo(f" - {lib}: {importlib.metadata.version(lib)}")


def main():
    triword(prog_name=triword.name)
