"""
Polling directory watcher emitting add/change events
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable

from watchdog.observers.polling import PollingObserver
from watchdog.events import (
    FileSystemEventHandler,
    FileCreatedEvent,
    FileModifiedEvent,
    FileMovedEvent,
)

from .errors import SetupError
from ..utils import path_utils
from ..utils.logging_utils import get_logger

logger = get_logger(__name__)


class EventKind(Enum):
    ADDED = 'added'
    CHANGED = 'changed'


@dataclass(frozen=True)
class FileEvent:
    """Raw add/change notification for a path in the watched directory"""
    path: str
    kind: EventKind


class FileEventHandler(FileSystemEventHandler):
    """Translate watchdog file events into FileEvents.
    
    Created files and files moved into the directory are reported as
    ADDED, modified files as CHANGED. Directory events and deletions are
    ignored. Bursts are not de-duplicated.
    """
    
    def __init__(self, on_event: Callable[[FileEvent], None]):
        super().__init__()
        self.on_event = on_event
    
    def on_created(self, event):
        if isinstance(event, FileCreatedEvent):
            self.on_event(FileEvent(str(event.src_path), EventKind.ADDED))
    
    def on_modified(self, event):
        if isinstance(event, FileModifiedEvent):
            self.on_event(FileEvent(str(event.src_path), EventKind.CHANGED))
    
    def on_moved(self, event):
        if isinstance(event, FileMovedEvent):
            self.on_event(FileEvent(str(event.dest_path), EventKind.ADDED))


class DirectoryWatcher:
    """Polling subscription to one directory.
    
    Polling is used instead of native notifications so that network shares
    and mounted filesystems are supported. Events are delivered one at a
    time, in order, on the observer's dispatch thread.
    """
    
    def __init__(self, path: str, on_event: Callable[[FileEvent], None],
                 polling_interval: float = 1.0):
        self.path = path
        self.polling_interval = polling_interval
        self.observer = PollingObserver(timeout=polling_interval)
        self.event_handler = FileEventHandler(on_event)
    
    def start(self):
        """Establish the subscription. Raises SetupError if the directory can't be watched."""
        if not path_utils.is_watchable_directory(self.path):
            raise SetupError(f"Cannot watch {self.path}: not an accessible directory")
        
        logger.debug(f"Start watching directory {self.path} (interval={self.polling_interval}s)")
        try:
            self.observer.schedule(self.event_handler, path=self.path, recursive=False)
            self.observer.start()
        except OSError as e:
            raise SetupError(f"Cannot watch {self.path}: {e}") from e
    
    def stop(self):
        """Stop polling and wait for the observer thread to finish"""
        if self.observer.is_alive():
            self.observer.stop()
            self.observer.join()
        logger.debug(f"Stopped watching directory {self.path}")
    
    def is_alive(self) -> bool:
        """Check if the subscription is currently running"""
        return self.observer.is_alive()
    
    def __enter__(self) -> 'DirectoryWatcher':
        return self
    
    def __exit__(self, exc_type, exc, tb):
        self.stop()


def watch_directory(path: str, on_event: Callable[[FileEvent], None],
                    polling_interval: float = 1.0) -> DirectoryWatcher:
    """Subscribe to add/change events in a directory and return the running watcher"""
    watcher = DirectoryWatcher(path, on_event, polling_interval=polling_interval)
    watcher.start()
    return watcher
