"""Command line interface for DropWatch."""

from .main import main

__all__ = ['main']
