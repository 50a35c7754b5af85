from collections.abc import Callable
from logging import getLogger
from pathlib import Path
from threading import Lock, Timer
from typing import Any

from watchdog.events import (
    EVENT_TYPE_CREATED,
    EVENT_TYPE_MODIFIED,
    EVENT_TYPE_MOVED,
    FileSystemEvent,
    FileSystemEventHandler,
)
from watchdog.observers import Observer

from .protocols import FileWatcherProtocol

_logger = getLogger(__name__)

_RELEVANT_EVENTS = frozenset([EVENT_TYPE_CREATED, EVENT_TYPE_MODIFIED, EVENT_TYPE_MOVED])


class _FileChangedHandler(FileSystemEventHandler):
    """Call a function once changes to a single file settle down.

    Editors often produce bursts of events for one save (truncate, write, rename), \
    so the call is delayed until no event happened for `minimum_delay` seconds.
    """

    def __init__(
        self, path: Path, minimum_delay: float, function: Callable[[], Any]
    ) -> None:
        self._path = path
        self._minimum_delay = minimum_delay
        self._function = function
        self._timer: Timer | None = None
        self._lock = Lock()

    def dispatch(self, event: FileSystemEvent) -> None:
        if event.event_type not in _RELEVANT_EVENTS or event.is_directory:
            return
        paths = [event.src_path, getattr(event, "dest_path", "")]
        if not any(p and Path(str(p)).resolve() == self._path for p in paths):
            return
        _logger.debug("Detected %s event on %s", event.event_type, self._path)
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._timer = Timer(self._minimum_delay, self._function)
            self._timer.daemon = True
            self._timer.start()

    def cancel(self) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None


class WatchdogFileWatcher(FileWatcherProtocol):
    """Watch a single file through its parent directory."""

    def __init__(self, minimum_delay: float = 0.1) -> None:
        self._minimum_delay = minimum_delay
        self._observer: Any = None
        self._handler: _FileChangedHandler | None = None

    def watch(self, path: Path, on_change: Callable[[], Any]) -> None:
        resolved = Path(path).resolve()
        self._handler = _FileChangedHandler(resolved, self._minimum_delay, on_change)
        self._observer = Observer()
        self._observer.schedule(self._handler, str(resolved.parent), recursive=False)
        self._observer.start()
        _logger.debug("Watching %s", resolved)

    def stop(self) -> None:
        if self._handler is not None:
            self._handler.cancel()
            self._handler = None
        if self._observer is None:
            return
        self._observer.stop()
        self._observer.join()
        self._observer = None
        _logger.debug("Stopped watching")
