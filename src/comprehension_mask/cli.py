from __future__ import annotations

import json
import logging
from pathlib import Path

import typer
import yaml

from .config import MarkerConfig, load_config
from .marking import compute_marking_stats, mark_untranslated_words

LOGGER = logging.getLogger(__name__)

app = typer.Typer(help="Comprehension Mask CLI.", no_args_is_help=True)


@app.command()
def mark(
    comprehension: float = typer.Option(
        ...,
        "--comprehension",
        "-p",
        help="Probability that the listener understands a word (0.0 - 1.0).",
    ),
    text: str | None = typer.Option(None, "--text", "-t", help="Message to mark."),
    input_path: Path | None = typer.Option(
        None,
        exists=True,
        readable=True,
        dir_okay=False,
        file_okay=True,
        help="Read the message from a UTF-8 text file.",
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
) -> None:
    """Print the message with unintelligible words wrapped in markers."""
    cfg = _load_marker_config(config)
    message = _resolve_message(text, input_path)
    typer.echo(mark_untranslated_words(message, comprehension, cfg))


@app.command()
def stats(
    comprehension: float = typer.Option(
        ...,
        "--comprehension",
        "-p",
        help="Probability that the listener understands a word (0.0 - 1.0).",
    ),
    text: str | None = typer.Option(None, "--text", "-t", help="Message to mark."),
    input_path: Path | None = typer.Option(
        None,
        exists=True,
        readable=True,
        dir_okay=False,
        file_okay=True,
        help="Read the message from a UTF-8 text file.",
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
) -> None:
    """Emit a JSON summary of how many words would be marked."""
    cfg = _load_marker_config(config)
    message = _resolve_message(text, input_path)
    summary = compute_marking_stats(message, comprehension, cfg)
    payload = {"comprehension": comprehension, **summary.to_dict()}
    typer.echo(json.dumps(payload, indent=2))


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = MarkerConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


def main() -> None:
    app()


def _load_marker_config(path: Path | None) -> MarkerConfig:
    """Load the marker config, reporting malformed files as CLI errors."""
    try:
        return load_config(path)
    except (ValueError, yaml.YAMLError) as exc:
        raise typer.BadParameter(str(exc), param_hint="--config") from exc


def _resolve_message(text: str | None, input_path: Path | None) -> str:
    """Return the message from exactly one of --text or --input-path."""
    if (text is None) == (input_path is None):
        raise typer.BadParameter("Provide exactly one of --text or --input-path.")
    if input_path is None:
        return text or ""
    LOGGER.info("Reading message from %s", input_path)
    try:
        return input_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise typer.BadParameter(str(exc), param_hint="--input-path") from exc


if __name__ == "__main__":
    main()
