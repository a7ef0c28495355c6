"""
CLI commands package for DropWatch
"""

from .watch import watch_command, watch_alias
from .read import read_command
from .init_config import init_config_command
from .status import status_command

__all__ = [
    'watch_command', 'watch_alias',
    'read_command',
    'init_config_command',
    'status_command',
]
