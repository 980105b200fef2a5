"""
commacalc CLI package.

- calc.py: the ``commacalc`` command
- utils.py: version output and error diagnostics
"""

from commacalc.cli.calc import app, main
from commacalc.cli.utils import report_syntax_error, version_callback

__all__ = [
    "app",
    "main",
    "report_syntax_error",
    "version_callback",
]
