"""
monkey CLI - Entry point.

Thin driver around the interpreter pipeline: lex, parse, report parser
errors if there are any, otherwise evaluate and print the result.

- repl:   interactive read/eval/print loop with one persistent scope
- run:    evaluate a source file
- parse:  print a file's fully-parenthesized program
- tokens: print a file's token stream
"""

import logging
import platform
from pathlib import Path

import typer
from rich.console import Console

from monkey._version import get_version
from monkey.core.environment import Environment
from monkey.core.errors import ConfigError, ParseError
from monkey.core.evaluator import evaluate
from monkey.core.lexer import Lexer
from monkey.core.manifest import MonkeyConfig, load_config, normalize_level
from monkey.core.object import Error
from monkey.core.parser import Parser, parse

app = typer.Typer(
    help="""monkey - tree-walking interpreter for the Monkey language

Commands:
  • repl    → Interactive session
  • run     → Evaluate a source file
  • parse   → Show the parsed program, fully parenthesized
  • tokens  → Show the token stream
""",
    no_args_is_help=True,
)

console = Console(soft_wrap=True, highlight=False)
err_console = Console(stderr=True, soft_wrap=True, highlight=False)

logger = logging.getLogger(__name__)

SourceFile = typer.Argument(
    ..., exists=True, dir_okay=False, readable=True, help="Monkey source file"
)


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"monkey version {get_version()}")
        typer.echo(
            f"  Python:        {platform.python_implementation()} {platform.python_version()}"
        )
        typer.echo(f"  Platform:      {platform.system()} {platform.release()}")
        raise typer.Exit()


def _configure_logging(config: MonkeyConfig) -> None:
    logging.basicConfig(
        level=config.logging.level_number,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logging.getLogger("monkey").setLevel(config.logging.level_number)


def _print_parser_errors(errors: list[str]) -> None:
    err_console.print("parser errors:", style="bold red", markup=False)
    for msg in errors:
        err_console.print(f"\t{msg}", style="red", markup=False)


def _read_source(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        err_console.print(f"Cannot read {path}: {e}", style="red", markup=False)
        raise typer.Exit(code=1) from e


@app.callback()
def main_callback(
    ctx: typer.Context,
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        help="Logging level (overrides monkey.toml and LOG_LEVEL)",
    ),
) -> None:
    """monkey CLI main callback for global options."""
    try:
        config = load_config()
        if log_level:
            config.logging.level = normalize_level(log_level)
    except ConfigError as e:
        err_console.print(str(e), style="red", markup=False)
        raise typer.Exit(code=2) from e

    _configure_logging(config)
    if config.path is not None:
        logger.debug("Loaded settings from %s", config.path)
    ctx.obj = config


@app.command()
def repl(ctx: typer.Context) -> None:
    """Start an interactive session. Bindings persist between lines."""
    config: MonkeyConfig = ctx.obj or MonkeyConfig()
    env = Environment()

    while True:
        try:
            line = input(config.repl.prompt)
        except (EOFError, KeyboardInterrupt):
            typer.echo("")
            break

        parser = Parser(Lexer(line))
        program = parser.parse_program()
        if parser.errors:
            _print_parser_errors(parser.errors)
            continue

        if config.repl.show_ast:
            console.print(str(program), style="dim", markup=False)

        result = evaluate(program, env)
        style = "red" if isinstance(result, Error) else None
        console.print(result.inspect(), style=style, markup=False)


@app.command()
def run(file: Path = SourceFile) -> None:
    """Evaluate a source file and print the value of its last statement."""
    source = _read_source(file)
    try:
        program = parse(source, source_name=str(file))
    except ParseError as e:
        if e.context is not None:
            err_console.print(e.context.format(), markup=False)
        _print_parser_errors(e.errors)
        raise typer.Exit(code=1) from e

    result = evaluate(program)
    if isinstance(result, Error):
        err_console.print(result.inspect(), style="red", markup=False)
        raise typer.Exit(code=1)
    console.print(result.inspect(), markup=False)


@app.command(name="parse")
def parse_command(file: Path = SourceFile) -> None:
    """Print the parsed program with every operation parenthesized."""
    parser = Parser(Lexer(_read_source(file)))
    program = parser.parse_program()
    if parser.errors:
        _print_parser_errors(parser.errors)
        raise typer.Exit(code=1)
    console.print(str(program), markup=False)


@app.command()
def tokens(file: Path = SourceFile) -> None:
    """Print one token per line: position, kind, literal."""
    for tok in Lexer(_read_source(file)):
        console.print(f"{tok.line}:{tok.column}\t{tok.kind.name}\t{tok.literal!r}", markup=False)


def main(argv: list[str] | None = None) -> None:
    app(args=argv)


if __name__ == "__main__":
    main()
