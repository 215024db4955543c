"""Command line interface for fastcolor."""

from .main import cli

__all__ = ["cli"]
