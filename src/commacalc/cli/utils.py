"""
commacalc CLI utilities.

Shared helpers for version output and error diagnostics.
"""

import platform

import typer

from commacalc._version import get_version
from commacalc.core.errors import ErrorContext, ExpressionSyntaxError


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"commacalc version {get_version()}")
        typer.echo(f"  Python:    {platform.python_implementation()} {platform.python_version()}")
        typer.echo(f"  Platform:  {platform.system()} {platform.release()}")
        raise typer.Exit()


def report_syntax_error(source: str, error: ExpressionSyntaxError, *, caret: bool = True) -> None:
    """Print the source line, a caret under the error position, and the message.

    The source and caret go to stdout; the message goes to stderr. Messages
    without an embedded position print no caret line.
    """
    context = ErrorContext.from_error(source, error) if caret else ErrorContext(source)
    typer.echo(context.format())
    typer.echo(error.message, err=True)
