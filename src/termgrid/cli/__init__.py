"""Command-line interface for termgrid."""

from termgrid.cli.app import create_app

__all__ = ["create_app"]
