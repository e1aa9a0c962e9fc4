"""
Command line interface for RSB.

Usage:
    rsb generate resume.yaml > resume.html
    rsb check resume.jsonnet
    rsb --log-level DEBUG --log-dir outs/logs gen resume.json5
"""

from pathlib import Path
from typing import Optional

import typer

from rsb import __version__
from rsb.contexts.schema.exceptions import ResumeError
from rsb.pipeline import load_and_render, load_and_validate
from rsb.utils.logger import setup_logger
from rsb.utils.settings import Settings, SettingsError, load_settings

app = typer.Typer(
    help=(
        "Create resumes from JSON Resume structured data.\n\n"
        "Input type is inferred from file extension "
        "(supports JSON/JSON5/JSONNET/YAML/RON)."
    ),
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"rsb {__version__}")
        raise typer.Exit()


def _fail(message: str) -> None:
    typer.echo(f"ERROR: {message}", err=True)
    raise typer.Exit(1)


@app.callback()
def main(
    ctx: typer.Context,
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Console log level (default from RSB_LOG_LEVEL or INFO)"
    ),
    log_dir: Optional[Path] = typer.Option(
        None, "--log-dir", help="Directory for a detailed DEBUG log file"
    ),
    config: Optional[Path] = typer.Option(None, "--config", help="YAML settings file"),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show version and exit"
    ),
):
    """Configure settings and logging for every command."""
    try:
        settings = load_settings(config)
    except SettingsError as e:
        _fail(str(e))

    if log_level is not None:
        settings.logging.level = log_level
    if log_dir is not None:
        settings.logging.log_dir = str(log_dir)

    try:
        setup_logger(
            context_name=ctx.invoked_subcommand or "rsb",
            level=settings.logging.level,
            log_dir=Path(settings.logging.log_dir) if settings.logging.log_dir else None,
            extra_provenance={"rsb": __version__},
        )
    except ValueError as e:
        _fail(f"Invalid log level '{settings.logging.level}': {e}")

    ctx.obj = settings


@app.command("generate", help="Generate resume from input (alias: gen)")
def generate(
    ctx: typer.Context,
    path: Path = typer.Argument(..., metavar="INPUT_PATH", help="File path for data"),
):
    """Render the input file to HTML on stdout."""
    settings: Settings = ctx.obj
    try:
        html = load_and_render(path, settings.render)
    except ResumeError as e:
        _fail(f"Failed to generate {path}: {e}")

    typer.echo(html)


@app.command("validate", help="Check input for errors (alias: check)")
def validate(
    ctx: typer.Context,
    path: Path = typer.Argument(..., metavar="INPUT_PATH", help="File path for data"),
):
    """Decode the input file and report whether it is valid."""
    try:
        load_and_validate(path)
    except ResumeError as e:
        _fail(f"Failed to validate {path}: {e}")

    typer.secho(f"✓ {path} is valid", fg=typer.colors.GREEN)


app.command("gen", hidden=True)(generate)
app.command("check", hidden=True)(validate)


if __name__ == "__main__":
    app()
