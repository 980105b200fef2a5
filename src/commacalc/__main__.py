"""Allow ``python -m commacalc``."""

from commacalc.cli import main

main()
