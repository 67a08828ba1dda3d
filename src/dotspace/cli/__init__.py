"""
CLI module for dotspace.

Provides the command-line interface using Click.
"""

from dotspace.cli.main import cli, main

__all__ = ["main", "cli"]
