"""Command-line interface for camera-support.

Fetches the upstream datasets, reconciles them and writes the support
table to stdout or a file.
"""

import importlib.metadata
import sys
from collections.abc import Callable
from contextlib import nullcontext
from pathlib import Path
from typing import Any

import click

from camera_support.audit import AuditLogger, generate_run_id
from camera_support.engine import (
    ConfigError,
    PipelineConfig,
    ReportConfig,
    SourceConfig,
    run_pipeline,
)
from camera_support.engine.config import parse_pair, parse_stats_modes, resolve_fields
from camera_support.extract.ingestion import (
    LIBRAW_URL,
    NOISE_PROFILES_URL,
    RAWSPEED_DNG_URL,
    RAWSPEED_URL,
    WB_PRESETS_URL,
)
from camera_support.report.options import DEFAULT_FIELDS, MAX_SEGMENT_LEVEL
from camera_support.report.stats import format_stats_summary

__all__ = ["cli"]

try:
    __version__ = importlib.metadata.version("camera-support")
except importlib.metadata.PackageNotFoundError:
    __version__ = "1.0.0"  # Fallback for development


def _config_callback(parser: Callable[[str], Any]) -> Callable[..., Any]:
    """Wrap a config parser so ConfigError becomes a click usage error."""

    def callback(ctx: click.Context, param: click.Parameter, value: str | None) -> Any:
        if value is None:
            return None
        try:
            return parser(value)
        except ConfigError as e:
            raise click.BadParameter(str(e)) from e

    return callback


@click.command()
@click.version_option(version=__version__, prog_name="camera-support")
@click.argument("output", default="-", required=False)
@click.option("--rawspeed", default=RAWSPEED_URL, show_default=True, help="'cameras.xml' location.")
@click.option(
    "--rawspeed-dng",
    default=RAWSPEED_DNG_URL,
    show_default=True,
    help="'rawspeed-dng.csv' location.",
)
@click.option(
    "--libraw",
    default=LIBRAW_URL,
    show_default=True,
    help="'imageio_libraw.c' location. If empty, LibRaw cameras will not be included.",
)
@click.option(
    "--wb-presets",
    default=WB_PRESETS_URL,
    show_default=True,
    help="'wb_presets.json' location.",
)
@click.option(
    "--noise-profiles",
    default=NOISE_PROFILES_URL,
    show_default=True,
    help="'noiseprofiles.json' location.",
)
@click.option(
    "--stats",
    "stats_modes",
    default=None,
    callback=_config_callback(parse_stats_modes),
    help="Print statistics. Semicolon delimited: <stdout;table;text>",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["md", "tsv", "none"]),
    default="md",
    show_default=True,
    help="Output format.",
)
@click.option(
    "--th-format",
    default=None,
    callback=_config_callback(lambda v: parse_pair(v, "--th-format")),
    help=(
        "Header templates for fields with statistics, \"no-percent;with-percent\". "
        "Placeholders: {label}, {count}, {percent}."
    ),
)
@click.option(
    "--segments",
    type=click.IntRange(0, MAX_SEGMENT_LEVEL),
    default=0,
    show_default=True,
    help="Segment tables by maker, adding a heading at this level.",
)
@click.option(
    "--fields",
    default=";".join(DEFAULT_FIELDS),
    show_default=True,
    help="Semicolon delimited list of fields to print, or <all|all-debug|no-maker>.",
)
@click.option(
    "--bools",
    default=None,
    callback=_config_callback(lambda v: parse_pair(v, "--bools")),
    help="Text to use for boolean fields, \"true;false\".",
)
@click.option("--escape", is_flag=True, help="Escape Markdown characters in Model and Aliases.")
@click.option(
    "--unknown",
    is_flag=True,
    help="Include cameras with unknown support status. Also affects statistics.",
)
@click.option(
    "--unsupported",
    is_flag=True,
    help="Include unsupported cameras. Also affects statistics.",
)
@click.option(
    "--audit-log",
    type=click.Path(dir_okay=False),
    default=None,
    help="Append JSONL audit events to this file.",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
def cli(
    output: str,
    rawspeed: str,
    rawspeed_dng: str,
    libraw: str,
    wb_presets: str,
    noise_profiles: str,
    stats_modes: set[str] | None,
    output_format: str,
    th_format: tuple[str, str] | None,
    segments: int,
    fields: str,
    bools: tuple[str, str] | None,
    escape: bool,
    unknown: bool,
    unsupported: bool,
    audit_log: str | None,
    verbose: bool,
) -> None:
    """Generate the darktable camera support table.

    OUTPUT is the file to write the table to; defaults to stdout.

    Examples
    --------
        camera-support
        camera-support --format tsv support.tsv
        camera-support --segments 2 --stats "table;text" --escape camera-support.md
        camera-support --libraw "" --format none --stats stdout
    """
    stats_modes = stats_modes or set()

    try:
        report_kwargs = {}
        if th_format is not None:
            report_kwargs["th_format"] = th_format
        if bools is not None:
            report_kwargs["bools"] = bools

        config = PipelineConfig(
            sources=SourceConfig(
                rawspeed=rawspeed,
                rawspeed_dng=rawspeed_dng,
                libraw=libraw,
                wb_presets=wb_presets,
                noise_profiles=noise_profiles,
            ),
            report=ReportConfig(
                output_format=output_format,
                fields=resolve_fields(fields),
                escape=escape,
                segments=segments,
                stats_table="table" in stats_modes,
                stats_text="text" in stats_modes,
                **report_kwargs,
            ),
            include_unknown=unknown,
            include_unsupported=unsupported,
        )
    except ConfigError as e:
        click.secho(f"Error: {e}", fg="red", err=True)
        sys.exit(1)

    if verbose:
        click.echo("Building camera support table...", err=True)
        click.echo(f"  cameras.xml: {rawspeed}", err=True)
        click.echo(f"  imageio_libraw.c: {libraw or '(disabled)'}", err=True)
        click.echo(f"  wb_presets.json: {wb_presets}", err=True)
        click.echo(f"  noiseprofiles.json: {noise_profiles}", err=True)
        click.echo(f"  rawspeed-dng.csv: {rawspeed_dng}", err=True)

    logger_cm = (
        AuditLogger(run_id=generate_run_id(), log_path=Path(audit_log))
        if audit_log
        else nullcontext(None)
    )
    with logger_cm as logger:
        result = run_pipeline(config, logger=logger)

    if not result.success:
        click.secho(f"Error: {result.error_message}", fg="red", err=True)
        sys.exit(1)

    if verbose:
        click.echo(f"Registry holds {len(result.registry)} cameras", err=True)

    to_stdout = output == "-"
    if result.output is not None:
        if to_stdout:
            click.echo(result.output, nl=False)
        else:
            Path(output).write_text(result.output, encoding="utf-8")
            if verbose:
                click.echo(f"Wrote {output}", err=True)

    if "stdout" in stats_modes and result.stats is not None:
        if to_stdout and result.output is not None:
            click.echo("")
        click.echo(
            format_stats_summary(
                result.stats,
                include_unknown=unknown,
                include_unsupported=unsupported,
            ),
            nl=False,
        )


if __name__ == "__main__":
    cli()
