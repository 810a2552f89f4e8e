"""Command-line entry point: add or remove scripting define symbols in place."""

import logging
import sys
from pathlib import Path

import typer

from unity_defines.arguments import ArgumentError, parse_arguments
from unity_defines.config import ConfigError, load_settings
from unity_defines.constants import EXIT_FAILURE, EXIT_USAGE, USAGE_TEXT
from unity_defines.domain.defines import apply_defines
from unity_defines.models import SymbolOrder

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="Add or remove scripting define symbols for every platform in a ProjectSettings.asset file",
    add_completion=False,
)

# Module-level defaults for Typer arguments
_ARGS_HELP = "path=<file> plus sets=<csv> and/or unsets=<csv>"
_DRY_RUN_HELP = "Print the resulting symbols without writing the file"
_ORDER_HELP = "Order of the rewritten symbol lists (overrides the settings file)"
_CONFIG_HELP = "Path to an alternative settings file"


def configure_logging(level: str) -> None:
    """Send log records to stderr at the given level."""
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
        force=True,
    )


def _fail(message: str, code: int = EXIT_FAILURE) -> typer.Exit:
    typer.echo(f"Err: {message}")
    return typer.Exit(code=code)


def read_settings_file(path: Path) -> str:
    """Read the file verbatim, keeping its original line endings."""
    return path.read_bytes().decode("utf-8")


def write_settings_file(path: Path, text: str) -> None:
    path.write_bytes(text.encode("utf-8"))


@app.command()
def main(
    args: list[str] | None = typer.Argument(  # noqa: B008
        None,
        help=_ARGS_HELP,
        metavar="KEY=VALUE...",
        show_default=False,
    ),
    dry_run: bool = typer.Option(False, "--dry-run", help=_DRY_RUN_HELP),  # noqa: B008
    order: SymbolOrder | None = typer.Option(None, "--order", help=_ORDER_HELP),  # noqa: B008
    config_path: Path | None = typer.Option(None, "--config", help=_CONFIG_HELP),  # noqa: B008
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),  # noqa: B008
) -> None:
    """Rewrite the scripting define symbols of a Unity project settings asset."""
    try:
        settings = load_settings(config_path)
    except ConfigError as exc:
        raise _fail(str(exc)) from exc

    configure_logging("DEBUG" if verbose else settings.log_level)

    if not args:
        typer.echo(USAGE_TEXT)
        raise typer.Exit(code=EXIT_USAGE)

    try:
        arguments = parse_arguments(args)
    except ArgumentError as exc:
        for message in exc.messages:
            typer.echo(f"Err: {message}")
        typer.echo("Run with --help for usage.")
        raise typer.Exit(code=EXIT_USAGE) from exc

    if not arguments.path.is_file():
        raise _fail(f"Can't find file: {arguments.path}")

    for symbol in arguments.sets:
        typer.echo(f"Adding '{symbol}' define")
    for symbol in arguments.unsets:
        typer.echo(f"Removing '{symbol}' define")

    try:
        text = read_settings_file(arguments.path)
    except UnicodeDecodeError as exc:
        raise _fail(f"{arguments.path} is not valid UTF-8: {exc}") from exc
    except OSError as exc:
        raise _fail(f"Can't read file: {arguments.path} ({exc.strerror or exc})") from exc

    result = apply_defines(text, arguments.sets, arguments.unsets, order or settings.order)
    if not result.ok:
        raise _fail(result.diagnostic or "Unable to update scripting defines")

    if dry_run:
        typer.echo(f"\nDry run, {arguments.path} was not modified:")
        for platform in result.platforms:
            typer.echo(f"  {platform.platform}: {platform.joined()}")
        return

    if not result.changed:
        typer.echo(f"No changes needed for {arguments.path}")
        return

    try:
        write_settings_file(arguments.path, result.text)
    except OSError as exc:
        raise _fail(f"Can't write file: {arguments.path} ({exc.strerror or exc})") from exc
    logger.info("Wrote %d bytes to %s", len(result.text), arguments.path)
    typer.echo(f"Updated {len(result.platforms)} platform(s) in {arguments.path}")
