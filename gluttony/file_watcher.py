"""Watch a directory tree and report debounced file changes through callbacks."""

from __future__ import annotations

import logging
import os
import queue
import re
import threading
import time
from collections.abc import Callable, Iterator
from enum import IntEnum, IntFlag
from pathlib import Path

from watchdog.events import (
    EVENT_TYPE_CREATED,
    EVENT_TYPE_DELETED,
    EVENT_TYPE_MODIFIED,
    EVENT_TYPE_MOVED,
    FileSystemEvent,
    FileSystemEventHandler,
)
from watchdog.observers import Observer

_log = logging.getLogger(__name__)

PathCallback = Callable[[Path], None]

_TEMP_EXTENSIONS = ("~", ".TMP", ".tmp", ".temp", ".swp", ".bak")
_TEMP_PATTERNS = (
    re.compile(r".*~RF[0-9a-f]{6}\.TMP"),
    re.compile(r".*\.[0-9a-zA-Z]{3}~"),
)

_STOP = object()


class NotifyFilter(IntFlag):
    """Kinds of change a watcher may be asked to report."""

    FILE_NAME = 1
    DIRECTORY_NAME = 2
    ATTRIBUTES = 4
    SIZE = 8
    LAST_WRITE = 16
    LAST_ACCESS = 32
    CREATION_TIME = 64
    SECURITY = 256


class FileAction(IntEnum):
    """What happened to a file."""

    ADDED = 1
    REMOVED = 2
    MODIFIED = 3
    RENAMED_NEW_NAME = 4
    ATTRIBUTES_CHANGED = 5


def should_ignore_file(filename: str) -> bool:
    """Return True for hidden files and common editor or temporary files."""
    if filename.startswith("."):
        return True
    if filename.endswith(_TEMP_EXTENSIONS):
        return True
    return any(pattern.fullmatch(filename) for pattern in _TEMP_PATTERNS)


def _translate(event: FileSystemEvent) -> Iterator[tuple[Path, FileAction]]:
    src = Path(os.fsdecode(event.src_path))
    if event.event_type == EVENT_TYPE_CREATED:
        yield src, FileAction.ADDED
    elif event.event_type == EVENT_TYPE_DELETED:
        yield src, FileAction.REMOVED
    elif event.event_type == EVENT_TYPE_MODIFIED:
        yield src, FileAction.MODIFIED
    elif event.event_type == EVENT_TYPE_MOVED:
        yield src, FileAction.REMOVED
        yield Path(os.fsdecode(event.dest_path)), FileAction.ADDED


class _EventForwarder(FileSystemEventHandler):
    def __init__(self, sink: Callable[[Path, FileAction], None]) -> None:
        super().__init__()
        self._sink = sink

    def on_any_event(self, event: FileSystemEvent) -> None:
        if event.is_directory:
            return
        for path, action in _translate(event):
            if not should_ignore_file(path.name):
                self._sink(path, action)


class FileWatcherSystem:
    """Watches ``path`` on a background thread and calls back on debounced changes.

    Changes to one file are collapsed: only the latest action is kept until it
    has been pending for ``debounce_time`` seconds. After every dispatch that
    reported at least one change, ``compile`` is called. ``compile`` is also
    called once when watching begins.
    """

    def __init__(
        self,
        path: str | Path = "",
        *,
        include_sub_directories: bool = False,
        notify_filters: int = 0,
        filter: str = "",
        on_changed: PathCallback | None = None,
        on_renamed: PathCallback | None = None,
        on_deleted: PathCallback | None = None,
        on_created: PathCallback | None = None,
        compile: Callable[[], None] | None = None,
        debounce_time: float = 0.1,
    ) -> None:
        self.path = Path(path) if path else None
        self.include_sub_directories = include_sub_directories
        self.notify_filters = notify_filters
        self.filter = filter
        self.on_changed = on_changed
        self.on_renamed = on_renamed
        self.on_deleted = on_deleted
        self.on_created = on_created
        self.compile = compile
        self.debounce_time = debounce_time

        self._lock = threading.Lock()
        self._pending: dict[Path, tuple[FileAction, float]] = {}
        self._queue: queue.Queue[object] = queue.Queue()
        self._observer: Observer | None = None
        self._thread: threading.Thread | None = None

    @property
    def running(self) -> bool:
        """True while the watcher thread is active."""
        return self._thread is not None

    def start(self) -> None:
        """Begin watching ``path`` on a background thread."""
        if self.running:
            raise RuntimeError("the file watcher is already running")
        if self.path is None:
            raise ValueError("the file watcher has no path to watch")
        if not self.path.is_dir():
            raise FileNotFoundError(f"cannot watch {self.path}: not a directory")

        _log.debug("starting file watcher system for %s", self.path)
        self._queue = queue.Queue()
        observer = Observer()
        observer.schedule(
            _EventForwarder(lambda p, a: self._queue.put((p, a))),
            str(self.path),
            recursive=self.include_sub_directories,
        )
        observer.start()
        self._observer = observer
        self._thread = threading.Thread(
            target=self._run, name="file_watcher_system", daemon=True
        )
        self._thread.start()

    def stop(self) -> None:
        """Stop watching and wait for the background thread to finish."""
        if not self.running:
            return
        _log.info("stopping thread [file_watcher_system]")
        if self._observer is not None:
            self._observer.stop()
            self._observer.join()
            self._observer = None
        self._queue.put(_STOP)
        if self._thread is not None:
            self._thread.join()
        self._thread = None

    def __enter__(self) -> FileWatcherSystem:
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()

    def process_event(self, file: str | Path, action: FileAction | int) -> None:
        """Record ``action`` as the latest pending change to ``file``."""
        with self._lock:
            self._pending[Path(file)] = (FileAction(action), time.monotonic())

    def dispatch_pending(self, now: float | None = None) -> list[tuple[Path, FileAction]]:
        """Report every change pending for at least ``debounce_time`` seconds.

        ``now`` is a ``time.monotonic()`` reading; the current one by default.
        Returns the changes that were reported.
        """
        if now is None:
            now = time.monotonic()
        with self._lock:
            ready = [
                (file, action)
                for file, (action, stamp) in self._pending.items()
                if now - stamp >= self.debounce_time
            ]
            for file, _ in ready:
                del self._pending[file]

        callbacks = {
            FileAction.ADDED: self.on_created,
            FileAction.REMOVED: self.on_deleted,
            FileAction.MODIFIED: self.on_changed,
            FileAction.RENAMED_NEW_NAME: self.on_renamed,
        }
        for file, action in ready:
            callback = callbacks.get(action)
            if callback is not None:
                callback(file)

        if ready and self.compile is not None:
            self.compile()
        return ready

    def _run(self) -> None:
        _log.debug("compiling project")
        if self.compile is not None:
            self.compile()

        while True:
            item = self._queue.get()
            if item is _STOP:
                return
            batch = [item]
            stopping = False
            while True:
                try:
                    extra = self._queue.get_nowait()
                except queue.Empty:
                    break
                if extra is _STOP:
                    stopping = True
                    break
                batch.append(extra)

            for path, action in batch:
                self.process_event(path, action)
            self.dispatch_pending()
            if stopping:
                return