"""Entry point for `python -m clickup_cli`."""

from clickup_cli.cli import main

main()
