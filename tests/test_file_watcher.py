import threading
import time
from pathlib import Path

import pytest

from gluttony.file_watcher import (
    FileAction,
    FileWatcherSystem,
    NotifyFilter,
    should_ignore_file,
)


@pytest.mark.parametrize(
    "name",
    [".hidden", "notes~", "file.TMP", "file.tmp", "file.temp", "file.swp",
     "file.bak", "doc~RF1a2b3c.TMP", "main.cpp~"],
)
def test_ignored_files(name):
    assert should_ignore_file(name) is True


@pytest.mark.parametrize("name", ["main.cpp", "shader.frag", "tmp", "a.txt", ""])
def test_regular_files_not_ignored(name):
    assert should_ignore_file(name) is False


def test_enum_values_fixed_by_source():
    assert NotifyFilter(256) is NotifyFilter.SECURITY
    assert FileAction(5) is FileAction.ATTRIBUTES_CHANGED
    assert FileAction(1) is FileAction.ADDED


def _recording_watcher(**kwargs):
    log = []
    watcher = FileWatcherSystem(
        on_created=lambda p: log.append(("created", p)),
        on_deleted=lambda p: log.append(("deleted", p)),
        on_changed=lambda p: log.append(("changed", p)),
        on_renamed=lambda p: log.append(("renamed", p)),
        compile=lambda: log.append(("compile", None)),
        **kwargs,
    )
    return watcher, log


def test_pending_event_waits_for_debounce():
    watcher, log = _recording_watcher(debounce_time=10.0)
    watcher.process_event(Path("a.cpp"), FileAction.ADDED)
    assert watcher.dispatch_pending(time.monotonic()) == []
    assert log == []


def test_dispatch_after_debounce_calls_callback_and_compile():
    watcher, log = _recording_watcher(debounce_time=0.1)
    watcher.process_event(Path("a.cpp"), FileAction.ADDED)
    dispatched = watcher.dispatch_pending(time.monotonic() + 1.0)
    assert dispatched == [(Path("a.cpp"), FileAction.ADDED)]
    assert log == [("created", Path("a.cpp")), ("compile", None)]
    assert watcher.dispatch_pending(time.monotonic() + 2.0) == []


def test_latest_action_for_a_file_wins():
    watcher, log = _recording_watcher()
    watcher.process_event("b.cpp", FileAction.ADDED)
    watcher.process_event("b.cpp", FileAction.MODIFIED)
    watcher.dispatch_pending(time.monotonic() + 1.0)
    assert log == [("changed", Path("b.cpp")), ("compile", None)]


def test_each_action_reaches_its_callback():
    watcher, log = _recording_watcher()
    watcher.process_event("r.cpp", FileAction.REMOVED)
    watcher.process_event("n.cpp", FileAction.RENAMED_NEW_NAME)
    watcher.dispatch_pending(time.monotonic() + 1.0)
    assert ("deleted", Path("r.cpp")) in log
    assert ("renamed", Path("n.cpp")) in log
    assert log.count(("compile", None)) == 1


def test_attribute_change_has_no_callback_but_compiles():
    watcher, log = _recording_watcher()
    watcher.process_event("c.cpp", FileAction.ATTRIBUTES_CHANGED)
    watcher.dispatch_pending(time.monotonic() + 1.0)
    assert log == [("compile", None)]


def test_missing_callbacks_are_skipped():
    watcher = FileWatcherSystem()
    watcher.process_event("d.cpp", FileAction.MODIFIED)
    assert watcher.dispatch_pending(time.monotonic() + 1.0) == [
        (Path("d.cpp"), FileAction.MODIFIED)
    ]


def test_invalid_action_rejected():
    watcher = FileWatcherSystem()
    with pytest.raises(ValueError):
        watcher.process_event("e.cpp", 99)


def test_start_without_path_raises():
    with pytest.raises(ValueError):
        FileWatcherSystem().start()


def test_start_on_missing_directory_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        FileWatcherSystem(tmp_path / "missing").start()


def test_start_compiles_and_stop_joins(tmp_path):
    compiled = threading.Event()
    watcher = FileWatcherSystem(tmp_path, compile=compiled.set)
    watcher.start()
    assert compiled.wait(5.0)
    assert watcher.running is True
    with pytest.raises(RuntimeError):
        watcher.start()
    watcher.stop()
    assert watcher.running is False


def test_created_file_is_reported(tmp_path):
    created = []
    seen = threading.Event()
    compiled = threading.Event()

    def on_created(path):
        created.append(path)
        seen.set()

    with FileWatcherSystem(
        tmp_path, on_created=on_created, compile=compiled.set, debounce_time=0.0
    ):
        assert compiled.wait(5.0)
        time.sleep(0.2)
        (tmp_path / ".ignored").write_text("x")
        (tmp_path / "new.txt").write_text("x")
        assert seen.wait(5.0)

    names = {path.name for path in created}
    assert "new.txt" in names
    assert ".ignored" not in names