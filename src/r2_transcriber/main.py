"""
R2 Transcriber.

Command-line entry point: transcribes one local file or R2 object per run.
"""

import logging
import sys
from pathlib import Path

import click
from dotenv import load_dotenv

from .config import LOG_LEVELS, AppConfig, load_config
from .dependencies import get_handler
from .domain import LocalSource, RemoteSource, SourceReference
from .logging import setup_logging

logger = logging.getLogger(__name__)


def resolve_source(file_ref: str, local: bool = False) -> SourceReference:
    """Treats ``file_ref`` as local when flagged or present on disk, else as a bucket key."""
    if local or Path(file_ref).exists():
        return LocalSource(path=Path(file_ref))
    return RemoteSource(key=file_ref)


def _apply_overrides(config: AppConfig, output_dir: str | None) -> AppConfig:
    if output_dir is None:
        return config
    pipeline = config.pipeline.model_copy(update={"output_dir": Path(output_dir)})
    return config.model_copy(update={"pipeline": pipeline})


@click.command()
@click.argument("file_ref", metavar="FILE")
@click.option("--local", is_flag=True, help="Treat FILE as a local path even if it does not exist.")
@click.option("--output-dir", default=None, help="Directory for the JSON result (default: current directory).")
@click.option("--show-text", is_flag=True, help="Print the transcribed text after saving.")
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    help="Logging level (default: LOG_LEVEL or INFO).",
)
def main(file_ref, local, output_dir, show_text, log_level):
    """Transcribe FILE, a local audio path or an R2 object key, with OpenAI Whisper.

    \b
    Examples:
      r2-transcribe path/to/file.mp3 --local
      r2-transcribe r2/path/to/file.mp3
    """
    load_dotenv(Path.cwd() / ".env")

    try:
        config = _apply_overrides(load_config(), output_dir)
        setup_logging((log_level or config.log_level).upper())
        source = resolve_source(file_ref, local)
        outcome = get_handler(config).run(source)
    except Exception as e:
        logger.exception("Processing failed", extra={"file_ref": file_ref})
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    processed = outcome.source.path if isinstance(outcome.source, LocalSource) else outcome.source.key
    click.echo(f"Success! Transcription completed for: {processed}")
    click.echo(f"Transcription saved locally at: {outcome.output_path}")

    if show_text:
        click.echo("")
        click.echo(outcome.transcription.text or "")


if __name__ == "__main__":
    main()
