"""CLI for vconvert."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import click

from vconvert import __version__
from vconvert.config import VConvertConfig, get_config
from vconvert.exceptions import ConversionError
from vconvert.executor import Executor, require_tool
from vconvert.executor.transcode import TranscodeExecutor
from vconvert.introspector import FFprobeStreamProber, StreamProber
from vconvert.logging import configure_logging
from vconvert.request import build_request
from vconvert.selection import SelectionProvider
from vconvert.tools import detect_dependencies, format_dependency_report
from vconvert.workflow import plan_conversion

from .exit_codes import ExitCode
from .formatting import format_conversion_summary
from .output import error_exit, warning_output
from .prompts import TerminalSelectionProvider

logger = logging.getLogger(__name__)


class UnknownOption(click.NoSuchOption):
    """An unrecognized flag on the command line."""

    exit_code = ExitCode.GENERAL_ERROR


class ConvertCommand(click.Command):
    """Command that prints help for an empty command line.

    Usage errors exit with status 1 instead of click's default of 2.
    """

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        if not args and not ctx.resilient_parsing:
            click.echo(ctx.get_help(), color=ctx.color)
            ctx.exit(ExitCode.SUCCESS)
        try:
            return super().parse_args(ctx, args)
        except click.NoSuchOption as e:
            raise UnknownOption(
                e.option_name, possibilities=e.possibilities, ctx=ctx
            ) from e
        except click.UsageError as e:
            e.exit_code = ExitCode.GENERAL_ERROR
            raise


def _print_version(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    """Print the version and detected dependencies, then exit."""
    if not value or ctx.resilient_parsing:
        return
    click.echo(f"vconvert {__version__}")
    click.echo("High-quality encoding with ffmpeg and x264/x265")
    click.echo("")
    try:
        ffmpeg_path = get_config().tools.ffmpeg
    except ValueError:
        ffmpeg_path = None
    for line in format_dependency_report(detect_dependencies(ffmpeg_path)):
        click.echo(line)
    ctx.exit(ExitCode.SUCCESS)


def _load_config(
    config_path: Path | None,
    log_level: str | None,
    log_file: Path | None,
    log_json: bool,
) -> VConvertConfig:
    """Load configuration and set up logging from it."""
    try:
        config = get_config(
            config_path=config_path,
            log_level=log_level,
            log_file=log_file,
            log_format="json" if log_json else None,
        )
    except ValueError as e:
        error_exit(f"Invalid configuration: {e}")
    configure_logging(config.logging)
    return config


def _get_prober(config: VConvertConfig) -> StreamProber:
    """Create the stream prober (patched in tests)."""
    return FFprobeStreamProber(require_tool("ffprobe", config.tools.ffprobe))


def _get_selection_provider() -> SelectionProvider:
    """Create the selection provider (patched in tests)."""
    return TerminalSelectionProvider()


def _get_executor() -> Executor:
    """Create the encoder executor (patched in tests)."""
    return TranscodeExecutor()


@click.command(
    cls=ConvertCommand,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.option("--input", "-i", "input_path", default=None, help="Path to input file.")
@click.option(
    "--output", "-o", "output_path", default=None, help="Path to output file."
)
@click.option(
    "--quality",
    default=None,
    help="Quality level: ultra(16), high(18), medium(22), low(28).",
)
@click.option(
    "--crf", type=int, default=None, help="Manual CRF value (overrides quality)."
)
@click.option(
    "--speed",
    "preset",
    default=None,
    help="Encoder preset (e.g. slow, medium, fast).",
)
@click.option(
    "--video-codec",
    type=click.Choice(["h264", "h265"], case_sensitive=False),
    default=None,
    help="Output video codec (asked interactively if omitted).",
)
@click.option(
    "--keep-original-audio",
    "keep_audio",
    is_flag=True,
    help="Do not re-encode audio (copy).",
)
@click.option(
    "--no-subtitles", is_flag=True, help="Do not include any subtitle tracks."
)
@click.option(
    "--normalize-loudness", is_flag=True, help="Normalize audio loudness to -14 LUFS."
)
@click.option(
    "--max-size", default=None, help="Maximum output file size (e.g. 2GB, 500MB)."
)
@click.option(
    "--target-bitrate",
    default=None,
    help="Target video bitrate instead of CRF (e.g. 5M, 2500k).",
)
@click.option("--deinterlace", is_flag=True, help="Apply deinterlacing filter.")
@click.option("--crop", is_flag=True, help="Auto-detect and crop black bars.")
@click.option(
    "--audio-channels",
    type=int,
    default=None,
    help="Force audio channels (1=mono, 2=stereo, 6=5.1).",
)
@click.option("--audio-bitrate", default=None, help="Audio bitrate (default: 384k).")
@click.option(
    "--audio-samplerate",
    type=int,
    default=None,
    help="Audio sample rate (e.g. 48000, 44100).",
)
@click.option("--resize", default=None, help="Resize video (e.g. 1920x1080, 1280x720).")
@click.option("--hdr-to-sdr", is_flag=True, help="Convert HDR to SDR with tonemapping.")
@click.option(
    "--preview", is_flag=True, help="Encode only the first 60 seconds for testing."
)
@click.option(
    "--colorspace",
    default=None,
    help="Force colorspace: bt709 (HD standard), bt2020 (4K/HDR).",
)
@click.option(
    "--audio-delay",
    type=int,
    default=None,
    help="Fix audio sync in ms (e.g. 150=delay, -200=advance).",
)
@click.option("--no-chapters", is_flag=True, help="Do not include chapter markers.")
@click.option(
    "--threads",
    type=int,
    default=None,
    help="Number of encoding threads (default: auto).",
)
@click.option(
    "--priority",
    default=None,
    help="CPU priority: normal, low (default: normal).",
)
@click.option("--overwrite", is_flag=True, help="Overwrite output file without asking.")
@click.option(
    "--dry-run", is_flag=True, help="Show the ffmpeg command without executing."
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Path to config file (default: ~/.vconvert/config.toml).",
)
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"], case_sensitive=False),
    default=None,
    help="Override log level (default: warning).",
)
@click.option(
    "--log-file",
    type=click.Path(path_type=Path),
    default=None,
    help="Override log file path.",
)
@click.option("--log-json", is_flag=True, default=False, help="Use JSON log format.")
@click.option(
    "--version",
    is_flag=True,
    expose_value=False,
    is_eager=True,
    callback=_print_version,
    help="Show version information.",
)
def main(
    input_path: str | None,
    output_path: str | None,
    config_path: Path | None,
    log_level: str | None,
    log_file: Path | None,
    log_json: bool,
    **options: Any,
) -> None:
    """Convert a video with ffmpeg and x264/x265.

    Audio and subtitle tracks are chosen interactively after the input file
    has been scanned.
    """
    config = _load_config(config_path, log_level, log_file, log_json)

    if options.get("video_codec"):
        options["video_codec"] = options["video_codec"].casefold()
    if options.get("audio_bitrate") is None:
        options["audio_bitrate"] = config.encoder.audio_bitrate

    try:
        request = build_request(input_path, output_path, **options)
        plan = plan_conversion(
            request,
            _get_prober(config),
            _get_selection_provider(),
            encoder=config.encoder,
            tools=config.tools,
        )
    except ConversionError as e:
        logger.debug("Conversion rejected: %s", e.message)
        error_exit(e.message)

    for advisory in plan.advisories:
        warning_output(advisory.message)

    click.echo("")
    for line in format_conversion_summary(plan):
        click.echo(line)
    click.echo("")

    if request.dry_run:
        click.echo("Dry run - the following command would be executed:")
        click.echo("")
        click.echo(plan.command.display())
        return

    try:
        result = _get_executor().run(plan.command)
    except ConversionError as e:
        error_exit(e.message)

    if not result.success:
        error_exit(result.message)
    click.echo(f"Conversion completed: {request.output_path}")
