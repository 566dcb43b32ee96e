"""yall command-line interface."""

from __future__ import annotations

from pathlib import Path

import click

from yall import __version__
from yall.config import config_for
from yall.errors import DiagnosticRenderer, ParseError
from yall.parser import parse_program
from yall.printer import dump_program


def _is_flag(arg: str) -> bool:
    return len(arg) >= 2 and arg.startswith("-")


@click.command(context_settings={"ignore_unknown_options": True})
@click.version_option(
    __version__, "-v", "-V", "--version",
    prog_name="yall", message="%(prog)s %(version)s",
)
@click.option(
    "-p", "-debug-parser", "--debug-parser", "debug_parser",
    is_flag=True, help="Print the parsed syntax tree.",
)
@click.option("--no-color", is_flag=True, help="Disable colored diagnostics.")
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
def main(args: tuple[str, ...], debug_parser: bool, no_color: bool) -> None:
    """Parse a yall source file."""
    input_path: Path | None = None
    for arg in args:
        if _is_flag(arg):
            click.echo(f"unrecognized option: {arg}")
            raise SystemExit(1)
        input_path = Path(arg)

    if input_path is None:
        click.echo("error: no input file provided", err=True)
        raise SystemExit(1)

    try:
        source = input_path.read_text()
    except (OSError, UnicodeDecodeError):
        click.echo(f"error: failed to read input file {input_path}", err=True)
        raise SystemExit(1)

    config = config_for(input_path)
    filename = str(input_path)

    try:
        program = parse_program(source, filename)
    except ParseError as e:
        renderer = DiagnosticRenderer(color=config.diagnostics.color and not no_color)
        renderer.add_source(filename, source)
        click.echo(renderer.render(e.to_diagnostic()), err=True)
        raise SystemExit(1)

    if debug_parser or config.parser.debug:
        click.echo(dump_program(program))
