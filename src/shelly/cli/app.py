"""CLI main module for Shelly."""

from pathlib import Path
from typing import Optional

import typer
from loguru import logger

from shelly.config import Settings, get_settings
from shelly.core.catalog import CATALOG
from shelly.core.parser import parse_commands, split_lines
from shelly.core.verify import failing_records
from shelly.errors import ConfigurationError, ShellyError, UnknownFormatError
from shelly.export import FORMATS, get_format, render_export, summarize
from shelly.prompts import get_prompt
from shelly.samples import EXAMPLE_SETS, get_example

from .render import Renderer, create_cli_renderer

app = typer.Typer(
    name="shelly",
    help="Turn shell command lines into regex patterns for allow/deny lists.",
    add_completion=False,
    rich_markup_mode="rich",
    no_args_is_help=True,
)


def _load_settings() -> Settings:
    return get_settings(profile="cli")


def _exit_with_error(renderer: Renderer, exc: Exception) -> None:
    """Report an error and exit with code 1."""
    renderer.error(str(exc))
    raise typer.Exit(1) from exc


def _read_input(commands: Optional[list[str]], file: Optional[Path], example: Optional[str]) -> list[str]:
    """Collect command lines from arguments, a file, an example set or stdin."""
    if commands:
        return split_lines("\n".join(commands))
    if file is not None:
        try:
            return split_lines(file.read_text(encoding="utf-8"))
        except OSError as exc:
            raise ShellyError(f"Cannot read {file}: {exc}") from exc
    if example is not None:
        return list(get_example(example).commands)

    stdin = typer.get_text_stream("stdin")
    if stdin.isatty():
        return []
    return split_lines(stdin.read())


def _resolve_format(settings: Settings, output_format: Optional[str]) -> Optional[str]:
    if output_format is not None:
        return get_format(output_format).name
    if settings.default_format is None:
        return None
    try:
        return get_format(settings.default_format).name
    except UnknownFormatError as exc:
        raise ConfigurationError(f"SHELLY_DEFAULT_FORMAT: {exc}") from exc


def _write_output(renderer: Renderer, content: str, output: Path) -> None:
    try:
        output.write_text(content + "\n", encoding="utf-8")
    except OSError as exc:
        # Falling back to stdout keeps the export usable.
        logger.warning("export.write_failed path={} error={}", output, exc)
        renderer.raw(content)
        return
    logger.info("export.written path={} bytes={}", output, len(content))
    renderer.info(f"[dim]Wrote {output}[/dim]")


@app.command()
def analyze(
    commands: Optional[list[str]] = typer.Argument(None, help="Command lines to analyze"),
    file: Optional[Path] = typer.Option(None, "--file", "-f", help="Read command lines from a file"),  # noqa: B008
    example: Optional[str] = typer.Option(None, "--example", "-e", help="Analyze a built-in example set"),
    whitespace: Optional[bool] = typer.Option(
        None, "--whitespace/--no-whitespace", help="Tolerate variable whitespace in arguments"
    ),
    fixed: Optional[bool] = typer.Option(None, "--fixed/--no-fixed", help="Generate exact full-line patterns"),
    output_format: Optional[str] = typer.Option(None, "--format", "-o", help="Export format instead of a table"),
    output: Optional[Path] = typer.Option(None, "--output", help="Write the export to a file"),  # noqa: B008
    strict: bool = typer.Option(False, "--strict", help="Fail when a pattern does not match its own line"),
) -> None:
    """Analyze command lines and generate regex patterns."""
    renderer = create_cli_renderer()
    try:
        settings = _load_settings()
        lines = _read_input(commands, file, example)
        if not lines:
            raise ShellyError("No command lines given. Pass commands, --file, --example or pipe them on stdin.")

        export_name = _resolve_format(settings, output_format)
        if output is not None and export_name is None:
            export_name = "plain"

        records = parse_commands(
            lines, settings.analysis(allow_whitespace_in_paths=whitespace, use_fixed_paths=fixed)
        )
    except ShellyError as exc:
        _exit_with_error(renderer, exc)
        return

    if export_name is None:
        renderer.records(records)
        renderer.summary(summarize(records))
    else:
        content = render_export(export_name, records)
        if output is None:
            renderer.raw(content)
        else:
            _write_output(renderer, content, output)

    if strict:
        failures = failing_records(records)
        if failures:
            for record in failures:
                renderer.error(f"pattern {record.regex} does not match: {record.original_command}")
            raise typer.Exit(1)


@app.command()
def examples(
    name: Optional[str] = typer.Argument(None, help="Example set to print"),
) -> None:
    """List example command sets, or print one of them."""
    renderer = create_cli_renderer()
    try:
        _load_settings()
        example = get_example(name) if name is not None else None
    except ShellyError as exc:
        _exit_with_error(renderer, exc)
        return
    if example is None:
        renderer.examples(EXAMPLE_SETS)
        return
    renderer.raw("\n".join(example.commands))


@app.command()
def formats() -> None:
    """List export formats."""
    renderer = create_cli_renderer()
    try:
        _load_settings()
    except ShellyError as exc:
        _exit_with_error(renderer, exc)
        return
    renderer.formats(list(FORMATS.values()))


@app.command()
def families() -> None:
    """List recognized command families in match order."""
    renderer = create_cli_renderer()
    try:
        _load_settings()
    except ShellyError as exc:
        _exit_with_error(renderer, exc)
        return
    renderer.raw(CATALOG.render_help())


@app.command()
def prompt(
    name: str = typer.Argument(..., help="extract_chat or format_chat_commands"),
) -> None:
    """Print a helper prompt for preparing command lists with an LLM."""
    renderer = create_cli_renderer()
    try:
        _load_settings()
        text = get_prompt(name)
    except ShellyError as exc:
        _exit_with_error(renderer, exc)
        return
    renderer.raw(text)


if __name__ == "__main__":
    app()
