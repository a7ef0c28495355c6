"""
DropWatch - Single drop-file ingestion watcher
"""

__version__ = "0.1.0"
__description__ = "Watch a directory for one drop file, ingest and delete it, and stream its contents."

from .core.config import Config, FileInfo, load_config, load_default_config
from .core.stream import PayloadStream
from .core.watcher import FileWatcher, WatchSession, WatchState

__all__ = [
    'FileWatcher',
    'WatchSession',
    'WatchState',
    'PayloadStream',
    'Config',
    'FileInfo',
    'load_config',
    'load_default_config',
]
