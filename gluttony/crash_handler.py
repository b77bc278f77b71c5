"""Flush logs when the process receives a terminating signal."""

from __future__ import annotations

import errno
import logging
import signal
import threading
from collections.abc import Callable
from types import FrameType

_log = logging.getLogger(__name__)

_SIGNAL_NAMES = (
    "SIGHUP", "SIGINT", "SIGQUIT", "SIGILL", "SIGABRT", "SIGFPE", "SIGKILL",
    "SIGSEGV", "SIGPIPE", "SIGALRM", "SIGTERM", "SIGUSR1", "SIGUSR2",
    "SIGBUS", "SIGPOLL", "SIGPROF", "SIGSYS", "SIGTRAP", "SIGVTALRM",
    "SIGXCPU", "SIGXFSZ",
    "SIGIOT", "SIGSTKFLT", "SIGIO", "SIGPWR",
    "SIGBREAK",
)

_lock = threading.Lock()
_old_handlers: list[tuple[int, object]] = []


def handled_signals() -> list[int]:
    """Return the distinct signal numbers this platform knows, in ascending order."""
    numbers = {int(getattr(signal, name)) for name in _SIGNAL_NAMES if hasattr(signal, name)}
    return sorted(numbers)


def _flush_and_report(signum: int) -> None:
    print("signal caught => terminating", flush=True)
    _log.critical("crash handler caught signal [%d]. flushing remaining logs", signum)
    logging.shutdown()


def attach_crash_handler(on_signal: Callable[[int], None] | None = None) -> None:
    """Install a one-shot handler on every signal that still has its default action.

    When a signal arrives its default action is restored and ``on_signal`` is
    called with the signal number; by default that reports the signal and
    flushes all logging handlers. Must be called from the main thread.
    """
    callback = on_signal if on_signal is not None else _flush_and_report

    def _handler(signum: int, frame: FrameType | None) -> None:
        signal.signal(signum, signal.SIG_DFL)
        callback(signum)

    with _lock:
        try:
            for signum in handled_signals():
                old = signal.getsignal(signum)
                if old != signal.SIG_DFL:
                    continue
                try:
                    signal.signal(signum, _handler)
                except OSError as exc:
                    if exc.errno == errno.EINVAL:
                        continue
                    raise
                _old_handlers.append((signum, old))
        except BaseException:
            _restore_all()
            raise


def _restore_all() -> None:
    while _old_handlers:
        signum, old = _old_handlers[-1]
        signal.signal(signum, old)
        _old_handlers.pop()


def detach_crash_handler() -> None:
    """Restore the handlers that were in place before :func:`attach_crash_handler`."""
    with _lock:
        _restore_all()