"""Typed scalar values and the value types the library stores."""

from __future__ import annotations

import enum
import math
import struct
from typing import Union

Number = Union[int, float, bool]


class ValueType(enum.Enum):
    """Element types supported by scalars, vectors and matrices."""

    BYTE = "BYTE"
    INT = "INT"
    UINT = "UINT"
    FLOAT = "FLOAT"

    @property
    def key(self) -> str:
        """Key of the type as used in registry keys."""
        return self.value

    @property
    def is_integral(self) -> bool:
        return self is not ValueType.FLOAT

    @property
    def default(self) -> Number:
        """The zero value of the type."""
        return 0.0 if self is ValueType.FLOAT else 0


_INT_LAYOUT = {
    ValueType.BYTE: (8, True),
    ValueType.INT: (32, True),
    ValueType.UINT: (32, False),
}


def _wrap(value: int, bits: int, signed: bool) -> int:
    mask = (1 << bits) - 1
    value &= mask
    if signed and value >> (bits - 1):
        value -= 1 << bits
    return value


def _to_float32(value: float) -> float:
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def cast_value(value_type: ValueType, value: Number) -> Number:
    """Convert ``value`` to the representation of ``value_type``.

    Integral types wrap around their width; floats are truncated toward
    zero first. Floats are rounded to single precision.
    Raises ValueError for a NaN or infinity converted to an integral type.
    """
    value_type = ValueType(value_type)
    if value_type is ValueType.FLOAT:
        try:
            as_float = float(value)
        except OverflowError:
            as_float = math.copysign(math.inf, value)
        return _to_float32(as_float)

    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            raise ValueError(f"cannot convert {value} to {value_type.key}")
        integer = math.trunc(value)
    else:
        integer = int(value)
    bits, signed = _INT_LAYOUT[value_type]
    return _wrap(integer, bits, signed)


class Scalar:
    """Box for a single typed value; assignments are converted to the box's type."""

    __slots__ = ("_type", "_value", "label")

    def __init__(self, value_type: ValueType, value: Number = 0) -> None:
        self._type = ValueType(value_type)
        self._value = cast_value(self._type, value)
        self.label = ""

    @property
    def value_type(self) -> ValueType:
        return self._type

    @property
    def value(self) -> Number:
        return self._value

    @value.setter
    def value(self, new_value: Number) -> None:
        self._value = cast_value(self._type, new_value)

    def as_type(self, value_type: ValueType) -> Number:
        """The stored value converted to ``value_type``."""
        return cast_value(value_type, self._value)

    def __int__(self) -> int:
        return int(self.as_type(ValueType.INT))

    def __float__(self) -> float:
        return float(self.as_type(ValueType.FLOAT))

    def __bool__(self) -> bool:
        return bool(self._value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Scalar):
            return NotImplemented
        return self._type is other._type and self._value == other._value

    def __hash__(self) -> int:
        return hash((self._type, self._value))

    def __repr__(self) -> str:
        return f"Scalar({self._type.key}, {self._value!r})"


def make_scalar(value_type: ValueType) -> Scalar:
    """A scalar of ``value_type`` holding the type's zero."""
    value_type = ValueType(value_type)
    return Scalar(value_type, value_type.default)


def make_byte(value: Number) -> Scalar:
    return Scalar(ValueType.BYTE, value)


def make_int(value: Number) -> Scalar:
    return Scalar(ValueType.INT, value)


def make_uint(value: Number) -> Scalar:
    return Scalar(ValueType.UINT, value)


def make_float(value: Number) -> Scalar:
    return Scalar(ValueType.FLOAT, value)