"""CLI command handlers."""

from .run import run_resolver

__all__ = ['run_resolver']
