"""
commacalc command line.

Usage:
    commacalc "1,5 + 2 * 3"          # prints 7.5
    commacalc --ast "(1 + 2) ^ 2"    # prints the parsed tree as JSON
    commacalc --tokens "2,5*4"       # prints one token per line
"""

from __future__ import annotations

import logging

import typer

from commacalc.cli.utils import report_syntax_error, version_callback
from commacalc.config import configure_logging, load_config
from commacalc.core.errors import ExpressionSyntaxError
from commacalc.core.expression_lang import format_result, interpret, parse, tokenize

logger = logging.getLogger(__name__)

NO_INPUT_MESSAGE = "No input specified!"

app = typer.Typer(
    help="""Evaluate an arithmetic expression.

Numbers use a comma as decimal separator (2,5). Supported operators are
+ - * / and ^, with parentheses for grouping. Chains of the same operator
group from the right: 1-2-3 evaluates as 1-(2-3).
""",
    add_completion=False,
    no_args_is_help=False,
)


# A SOURCE starting with "-" is an expression, not an option
@app.command(context_settings={"ignore_unknown_options": True})
def calc(
    source: str | None = typer.Argument(None, help="Expression to evaluate, e.g. '1,1+2*3,5'"),
    ast: bool = typer.Option(False, "--ast", help="Print the parsed tree as JSON"),
    tokens: bool = typer.Option(False, "--tokens", help="Print the token stream"),
    caret: bool | None = typer.Option(
        None,
        "--caret/--no-caret",
        help="Draw a caret under error positions (default: COMMACALC_CARET or on)",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    version: bool = typer.Option(
        False,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """Evaluate SOURCE and print the result."""
    config = load_config()
    if verbose:
        config = config.model_copy(update={"log_level": "DEBUG"})
    if caret is not None:
        config = config.model_copy(update={"caret": caret})
    configure_logging(config)

    if not source:
        typer.echo(NO_INPUT_MESSAGE, err=True)
        raise typer.Exit(code=1)

    try:
        if tokens:
            for token in tokenize(source):
                typer.echo(str(token))
        if ast:
            typer.echo(parse(source).model_dump_json(indent=2))
        if tokens or ast:
            return
        typer.echo(format_result(interpret(source)))
    except ExpressionSyntaxError as e:
        logger.debug("Rejected %r: %s", source, e)
        report_syntax_error(source, e, caret=config.caret)
        raise typer.Exit(code=1)


def main() -> None:
    """Console script entry point."""
    app()
