"""Console output helpers for the pathguard CLI."""

from .console import ConsoleManager

__all__ = ["ConsoleManager"]
