"""Command-line interface for sayaka-util."""
from __future__ import annotations

from sayaka_util.cli.main import cli

__all__ = ["cli"]
