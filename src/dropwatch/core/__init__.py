"""Core functionality for DropWatch."""

from .config import Config, FileInfo, load_config, load_default_config
from .directory import DirectoryWatcher, EventKind, FileEvent, watch_directory
from .errors import DropWatchError, ConfigError, SetupError, IngestError, ReadError, DeleteError
from .stream import PayloadStream, Subscription
from .watcher import FileWatcher, WatchSession, WatchState, WatchTarget

__all__ = [
    'Config', 'FileInfo', 'load_config', 'load_default_config',
    'DirectoryWatcher', 'EventKind', 'FileEvent', 'watch_directory',
    'DropWatchError', 'ConfigError', 'SetupError', 'IngestError', 'ReadError', 'DeleteError',
    'PayloadStream', 'Subscription',
    'FileWatcher', 'WatchSession', 'WatchState', 'WatchTarget',
]
