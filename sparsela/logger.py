"""Library message logger with a pluggable callback."""

from __future__ import annotations

import os
import sys
import threading
from typing import Callable, Optional

from sparsela.status import Status

MessageCallback = Callable[[Status, str, str, str, int], None]


def default_callback(status: Status | int, msg: str, file: str, function: str, line: int) -> None:
    """Write a library message to standard error."""
    status = Status(status)
    sys.stderr.write(f"[{file}:{line}] {function}: {status.name}: {msg}\n")
    sys.stderr.flush()


class Logger:
    """Thread-safe dispatcher of library messages to a user callback."""

    def __init__(self, callback: Optional[MessageCallback] = None) -> None:
        self._callback = callback
        self._lock = threading.Lock()

    def log_msg(self, status: Status | int, msg: str, file: str, function: str, line: int) -> None:
        """Pass a message to the callback, with the file reduced to its base name."""
        with self._lock:
            if self._callback is not None:
                self._callback(Status(status), msg, os.path.basename(file), function, int(line))

    def set_msg_callback(self, callback: Optional[MessageCallback]) -> None:
        """Replace the callback; ``None`` silences the logger."""
        with self._lock:
            self._callback = callback