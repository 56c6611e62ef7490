"""
CLI module for Hookgate.

This module provides the command-line interface for the Hookgate
authentication endpoints.
"""

from hookgate.cli.commands import main

__all__ = ["main"]
