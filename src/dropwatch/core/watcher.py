"""
Drop-file watcher: filters directory events down to one file, ingests it
(read, delete, publish) and exposes the captured text on an output stream
"""

import os
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .config import Config
from .directory import DirectoryWatcher, FileEvent
from .errors import SetupError, ReadError, DeleteError, IngestError
from .stream import PayloadStream
from ..utils import path_utils
from ..utils.logging_utils import get_logger

logger = get_logger(__name__)


class WatchState(Enum):
    IDLE = 'idle'
    WATCHING = 'watching'
    FAILED = 'failed'


@dataclass(frozen=True)
class WatchTarget:
    """The single file tracked by a watch session"""
    directory_path: str
    file_name: str

    @property
    def full_path(self) -> str:
        return path_utils.join_target_path(self.directory_path, self.file_name)


class WatchSession:
    """Handle for an active watch session.

    Closing the session stops the directory subscription and returns the
    owning FileWatcher to IDLE.
    """

    def __init__(self, watcher: 'FileWatcher', target: WatchTarget,
                 directory_watcher: DirectoryWatcher):
        self.watcher = watcher
        self.target = target
        self.directory_watcher = directory_watcher
        self.closed = False

    def close(self):
        """Release the directory subscription. Safe to call more than once."""
        if self.closed:
            return
        self.closed = True
        self.directory_watcher.stop()
        self.watcher._session_closed(self)

    def is_alive(self) -> bool:
        return not self.closed and self.directory_watcher.is_alive()

    def __enter__(self) -> 'WatchSession':
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()


class FileWatcher:
    """Watch a directory and ingest one designated drop file.

    Every add/change event whose path equals the target's full path
    (case-insensitively) triggers an ingestion: the file is read with the
    configured encoding, deleted, and its content published on ``stream``.
    """

    def __init__(self, config: Optional[Config] = None, stream: Optional[PayloadStream] = None):
        """Initialize the watcher

        Args:
            config: Configuration supplying encoding and polling interval
            stream: Output stream to publish payloads on (a new one by default)
        """
        self.config = config or Config()
        self.stream = stream or PayloadStream()
        self.state = WatchState.IDLE
        self.target: Optional[WatchTarget] = None
        self.session: Optional[WatchSession] = None

    @property
    def is_watching(self) -> bool:
        return self.state is WatchState.WATCHING and self.target is not None

    def start_watch(self, directory_path: str, file_name: str, read_on_start: bool = False) -> WatchSession:
        """Start a watch session for ``file_name`` inside ``directory_path``.

        With ``read_on_start`` the drop file is ingested once before the
        directory subscription begins. Any failure during setup leaves the
        watcher in FAILED state and is re-raised; a failed initial ingestion
        or an unwatchable directory is reported as SetupError.
        """
        if self.is_watching:
            raise SetupError(f"Already watching {self.target.full_path}; close the session first")

        target = WatchTarget(directory_path, file_name)
        logger.debug(f"Start watching file {target.full_path}")

        try:
            if read_on_start:
                try:
                    self.ingest(target.full_path)
                except IngestError as e:
                    raise SetupError(f"Initial read of {target.full_path} failed: {e}") from e

            # Set before subscribing so the first polled event already sees it
            self.target = target
            directory_watcher = DirectoryWatcher(
                directory_path,
                self.on_file_event,
                polling_interval=self.config.polling_interval
            )
            directory_watcher.start()
        except Exception:
            logger.error(f"Error while starting to watch {target.full_path}. "
                         f"Watching must be restarted!", exc_info=True)
            self.target = None
            self.state = WatchState.FAILED
            raise

        self.session = WatchSession(self, target, directory_watcher)
        self.state = WatchState.WATCHING
        return self.session

    def start_from_config(self) -> WatchSession:
        """Start a watch session for the drop file described in the configuration"""
        info = self.config.file_info
        if not info.file_name:
            raise SetupError("No drop file name configured")
        return self.start_watch(info.directory_path, info.file_name, info.read_on_start)

    def stop(self):
        """Close the active session, if any"""
        if self.session is not None:
            self.session.close()

    def on_file_event(self, event: FileEvent):
        """Dispatch a directory event: ingest on match, drop otherwise.

        Ingestion errors are logged and never stop the session.
        """
        logger.info(f"Watcher observed {event.kind.value} event: {event.path}")
        target = self.target
        if target is None:
            return

        if not path_utils.paths_match(event.path, target.full_path):
            logger.debug(f"Ignoring {event.path}: not the watched file {target.full_path}")
            return

        logger.info(f"Watched file {event.path} was {event.kind.value}")
        try:
            self.ingest(event.path)
        except IngestError:
            logger.error(f"Error while ingesting {target.full_path}", exc_info=True)
        except Exception:
            # Any failure stays with this event; the observer thread must keep running
            logger.exception(f"Unexpected error while ingesting {target.full_path}")

    def ingest(self, path: str) -> Optional[str]:
        """Read, delete and publish the file at ``path``.

        Returns the published payload, or None if the file no longer exists.
        Raises ReadError when the file can't be read (nothing is published and
        the file stays). Raises DeleteError after publishing when the file was
        read but could not be removed.
        """
        logger.debug(f"Trying to read file {path}")
        if not os.path.exists(path):
            logger.debug(f"File {path} does not exist")
            return None

        payload = self.read_file(path)

        delete_error = None
        try:
            self.delete_file(path)
        except DeleteError as e:
            logger.error(str(e))
            delete_error = e

        self.stream.publish(payload)

        if delete_error is not None:
            raise delete_error
        return payload

    def read_file(self, path: str) -> str:
        """Read the whole file with the configured encoding, without newline translation"""
        try:
            with open(path, 'r', encoding=self.config.encoding, newline='') as f:
                data = f.read()
        except (OSError, UnicodeDecodeError, LookupError) as e:
            raise ReadError(path, f"Error while reading file {path}: {e}") from e

        logger.info(f"Read new data from {path}: {data!r}")
        return data

    def delete_file(self, path: str):
        """Remove the file from disk"""
        logger.warning(f"Deleting file {path}")
        try:
            os.remove(path)
        except OSError as e:
            raise DeleteError(path, f"Error while deleting file {path}: {e}") from e

    def _session_closed(self, session: WatchSession):
        if session is self.session:
            self.session = None
            self.target = None
            self.state = WatchState.IDLE
