"""Status codes, accelerator kinds and the library exception."""

from __future__ import annotations

import enum


class Status(enum.IntEnum):
    """Result of a library operation."""

    OK = 0
    ERROR = 1
    NO_ACCELERATION = 2
    PLATFORM_NOT_FOUND = 3
    DEVICE_NOT_FOUND = 4
    INVALID_STATE = 5
    INVALID_ARGUMENT = 6
    NO_VALUE = 7
    NOT_IMPLEMENTED = 1024


class AcceleratorType(enum.IntEnum):
    """Kinds of accelerator the library may compute on."""

    NONE = 0
    OPENCL = 1


class SplaError(Exception):
    """Raised when an operation fails; carries the failing status."""

    def __init__(self, status: Status | int, message: str = "") -> None:
        self.status = Status(status)
        self.message = message
        text = self.status.name if not message else f"{self.status.name}: {message}"
        super().__init__(text)