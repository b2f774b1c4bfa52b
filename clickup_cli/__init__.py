"""Async client library and command-line tool for the ClickUp API."""

__version__ = "1.0.0"

from clickup_cli.client import ClickUpClient  # noqa: E402
from clickup_cli.transport import deadline  # noqa: E402

__all__ = ["ClickUpClient", "deadline", "__version__"]
