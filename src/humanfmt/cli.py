"""Typer CLI interface for humanfmt."""

import logging
from datetime import datetime, timezone

import typer

from humanfmt.config.settings import Settings
from humanfmt.core.ordinal import ordinal as ordinal_str
from humanfmt.core.reltime import format_relative
from humanfmt.core.sizes import format_bytes, format_ibytes
from humanfmt.utils.timestamps import (
    TimestampParseError,
    TimestampRangeError,
    align_timezones,
    parse_timestamp,
)

app = typer.Typer(
    name="humanfmt",
    help="Human-readable byte sizes, ordinals and relative times.",
    no_args_is_help=True,
)

logger = logging.getLogger(__name__)

# Let negative numbers through as arguments instead of unknown options
NUMERIC_ARGS = {"ignore_unknown_options": True}


def _get_settings() -> Settings:
    """Load settings, warning on config errors."""
    try:
        return Settings()
    except Exception as e:
        logger.warning("Failed to load config: %s", e)
        logger.warning("Using default settings")
        return Settings.model_construct()


def _settings(ctx: typer.Context) -> Settings:
    if isinstance(ctx.obj, Settings):
        return ctx.obj
    return _get_settings()


def _timestamp(value: str, param_hint: str) -> datetime:
    try:
        return parse_timestamp(value)
    except TimestampParseError as e:
        raise typer.BadParameter(str(e), param_hint=param_hint) from e


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug logging"
    ),
) -> None:
    """Format values for humans."""
    settings = _get_settings()
    level = logging.DEBUG if verbose else settings.log_level
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")
    ctx.obj = settings


@app.command("bytes", context_settings=NUMERIC_ARGS)
def bytes_(
    ctx: typer.Context,
    sizes: list[int] = typer.Argument(..., help="Byte counts to format"),
    iec: bool | None = typer.Option(
        None,
        "--iec/--si",
        help="Binary (KiB, 1024) or decimal (kB, 1000) units",
    ),
) -> None:
    """Format byte counts, e.g. 5000 -> '5 kB'."""
    if iec is None:
        iec = _settings(ctx).units == "iec"
    formatter = format_ibytes if iec else format_bytes

    for size in sizes:
        try:
            typer.echo(formatter(size))
        except ValueError as e:
            raise typer.BadParameter(str(e), param_hint="SIZES") from e


@app.command(context_settings=NUMERIC_ARGS)
def ordinal(
    numbers: list[int] = typer.Argument(..., help="Integers to suffix"),
) -> None:
    """Print ordinals, e.g. 22 -> '22nd'."""
    for n in numbers:
        typer.echo(ordinal_str(n))


@app.command()
def ago(
    ctx: typer.Context,
    when: str = typer.Argument(
        ..., help="ISO 8601 timestamp or Unix epoch seconds"
    ),
    since: str | None = typer.Option(
        None,
        "--since",
        "-s",
        help="Reference instant instead of the current time",
    ),
) -> None:
    """Describe a timestamp relative to now, e.g. '3 hours ago'."""
    settings = _settings(ctx)
    then = _timestamp(when, "WHEN")
    if since is not None:
        reference = _timestamp(since, "--since")
    else:
        reference = datetime.now(timezone.utc)

    try:
        then, reference = align_timezones(then, reference)
    except TimestampRangeError as e:
        raise typer.BadParameter(str(e), param_hint="WHEN") from e
    logger.debug("Formatting %s relative to %s", then, reference)
    typer.echo(
        format_relative(
            then, reference, settings.past_label, settings.future_label
        )
    )
