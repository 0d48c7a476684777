"""Dense vectors and square matrices with C-like element types."""

from __future__ import annotations

import struct
from array import array
from collections.abc import Iterable, Iterator
from enum import Enum

_INT_MODULUS = 2**32
_INT_OFFSET = 2**31


class ElementType(Enum):
    """Element type of a vector or matrix, with its storage and rounding rules."""

    INT = "int"
    FLOAT = "float"
    DOUBLE = "double"

    @property
    def typecode(self) -> str:
        return {"int": "i", "float": "f", "double": "d"}[self.value]

    def coerce(self, value):
        """Convert a number the way storing it in this element type would."""
        if self is ElementType.INT:
            return (int(value) + _INT_OFFSET) % _INT_MODULUS - _INT_OFFSET
        if self is ElementType.FLOAT:
            return struct.unpack("f", struct.pack("f", float(value)))[0]
        return float(value)

    def format_value(self, value) -> str:
        """Format one element with a five-character field."""
        if self is ElementType.INT:
            return f"{int(value):5d}"
        return f"{float(value):5.1f}"


def _check_size(size: int) -> int:
    if not isinstance(size, int) or isinstance(size, bool):
        raise TypeError(f"size must be an int, not {type(size).__name__}")
    if size < 0:
        raise ValueError(f"size must not be negative: {size}")
    return size


def _dot(dtype: ElementType, xs: Iterable, ys: Iterable):
    acc = dtype.coerce(0)
    for x, y in zip(xs, ys):
        acc = dtype.coerce(acc + dtype.coerce(x * y))
    return acc


def _check_operands(left, right) -> None:
    if left.dtype is not right.dtype:
        raise TypeError(
            f"cannot multiply {left.dtype.value} and {right.dtype.value} operands"
        )
    if left.size != right.size:
        raise ValueError(f"size mismatch: {left.size} and {right.size}")


class Vector:
    """A one-dimensional array of a fixed size and element type."""

    def __init__(self, size: int, dtype: ElementType) -> None:
        self.size = _check_size(size)
        self.dtype = ElementType(dtype)
        self._data = array(self.dtype.typecode, [0] * self.size)

    def __len__(self) -> int:
        return self.size

    def __iter__(self) -> Iterator:
        return iter(self._data)

    def __getitem__(self, index: int):
        return self._data[index]

    def __setitem__(self, index: int, value) -> None:
        self._data[index] = self.dtype.coerce(value)

    def fill(self) -> None:
        """Set element i to i modulo 10."""
        self._data = array(
            self.dtype.typecode, (self.dtype.coerce(i % 10) for i in range(self.size))
        )

    def __matmul__(self, other):
        if not isinstance(other, SquareMatrix):
            return NotImplemented
        _check_operands(self, other)
        result = Vector(self.size, self.dtype)
        for i in range(self.size):
            result._data[i] = _dot(self.dtype, self._data, other.column(i))
        return result

    def format(self) -> str:
        """Render as '[ a b c ]' with five-character fields."""
        cells = "".join(" " + self.dtype.format_value(v) for v in self._data)
        return f"[{cells} ]"

    def __repr__(self) -> str:
        return f"Vector({list(self._data)!r}, {self.dtype})"


class SquareMatrix:
    """A size-by-size matrix stored in row-major order."""

    def __init__(self, size: int, dtype: ElementType) -> None:
        self.size = _check_size(size)
        self.dtype = ElementType(dtype)
        self._data = array(self.dtype.typecode, [0] * (self.size * self.size))

    def _offset(self, index) -> int:
        try:
            row, col = index
        except (TypeError, ValueError):
            raise TypeError("matrix index must be a (row, column) pair") from None
        for name, value in (("row", row), ("column", col)):
            if not -self.size <= value < self.size:
                raise IndexError(f"{name} index {value} out of range")
        return (row % self.size) * self.size + (col % self.size)

    def __getitem__(self, index):
        return self._data[self._offset(index)]

    def __setitem__(self, index, value) -> None:
        self._data[self._offset(index)] = self.dtype.coerce(value)

    def row(self, i: int) -> list:
        start = i * self.size
        return list(self._data[start:start + self.size])

    def column(self, i: int) -> list:
        return list(self._data[i::self.size]) if self.size else []

    def rows(self) -> Iterator[list]:
        """Yield each row as a list."""
        for i in range(self.size):
            yield self.row(i)

    def fill(self) -> None:
        """Set the element at flat row-major position i to i modulo 10."""
        self._data = array(
            self.dtype.typecode,
            (self.dtype.coerce(i % 10) for i in range(self.size * self.size)),
        )

    def __matmul__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        _check_operands(self, other)
        result = Vector(self.size, self.dtype)
        for i, row in enumerate(self.rows()):
            result._data[i] = _dot(self.dtype, row, other)
        return result

    def format(self) -> str:
        """Render as '[[ ... ]]' with one line per row."""
        lines = (
            "".join(" " + self.dtype.format_value(v) for v in row)
            for row in self.rows()
        )
        return "[[" + "\n  ".join(lines) + " ]]"

    def __repr__(self) -> str:
        return f"SquareMatrix({list(self.rows())!r}, {self.dtype})"