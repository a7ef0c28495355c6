"""Utility functions for DropWatch."""

from .path_utils import (
    join_target_path,
    paths_match,
    is_watchable_directory,
)
from .logging_utils import setup_logger, get_logger

__all__ = [
    # Path utilities
    'join_target_path',
    'paths_match',
    'is_watchable_directory',
    # Logging utilities
    'setup_logger',
    'get_logger',
]
