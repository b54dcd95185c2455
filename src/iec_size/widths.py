from __future__ import annotations

import re
import struct
from operator import index
from typing import BinaryIO, Iterator, Union

from .bucket import as_magnitude
from .error import width_overflow_error
from .iec import IEC

ReadableBuffer = Union[bytes, bytearray, memoryview]

_INT_CHARS = r"bBhHiIlLqQnN"
width_re = re.compile(rf"^([<>=@!]?)([{_INT_CHARS}])$")


def unpack_iec(__format: str, __buffer: ReadableBuffer) -> IEC:
    return IntWidth(__format).unpack_iec(__buffer)


def unpack_iec_stream(__format: str, __stream: BinaryIO) -> IEC:
    return IntWidth(__format).unpack_iec_stream(__stream)


def iter_unpack_iec_stream(__format: str, __stream: BinaryIO) -> Iterator[IEC]:
    return IntWidth(__format).iter_unpack_iec_stream(__stream)


class IntWidth(struct.Struct):
    """A single fixed-width integer layout, e.g. ``IntWidth("<Q")``.

    Values are checked against the width before being scaled; negatives are
    rejected rather than reinterpreted as unsigned.
    """

    def __init__(self, format: str):
        match = width_re.match(format)
        if match is None:
            raise struct.error(f"`{format}` is not a single integer layout")
        super().__init__(format)
        self.signed = match.group(2).islower()

    def check(self, value: int) -> int:
        try:
            self.pack(value)
        except struct.error as e:
            raise width_overflow_error(self, value) from e
        return value

    def to_iec(self, value: int) -> IEC:
        if isinstance(value, bool):
            raise TypeError(f"expected an integer, got `{value!r}`")
        value = self.check(index(value))
        return IEC.from_integer(as_magnitude(value))

    def unpack_iec(self, __buffer: ReadableBuffer) -> IEC:
        value: int = self.unpack(__buffer)[0]
        return self.to_iec(value)

    def unpack_iec_from(self, buffer: ReadableBuffer, offset: int = 0) -> IEC:
        value: int = self.unpack_from(buffer, offset)[0]
        return self.to_iec(value)

    def unpack_iec_stream(self, __stream: BinaryIO) -> IEC:
        buffer = __stream.read(self.size)
        return self.unpack_iec(buffer)

    def iter_unpack_iec_stream(self, __stream: BinaryIO) -> Iterator[IEC]:
        while True:
            buffer = __stream.read(self.size)
            if len(buffer) == 0:  # End of Stream; job's done
                break
            elif len(buffer) != self.size:  # End of Stream BUT can't unpack, raise an error
                raise struct.error(
                    f"truncated `{self.format}` record; expected `{self.size}` bytes (got `{len(buffer)}`)"
                )
            else:
                yield self.unpack_iec(buffer)


Int8 = IntWidth("b")
Int16 = IntWidth("h")
Int32 = IntWidth("i")
Int64 = IntWidth("q")
ISize = IntWidth("n")
UInt8 = IntWidth("B")
UInt16 = IntWidth("H")
UInt32 = IntWidth("I")
UInt64 = IntWidth("Q")
USize = IntWidth("N")

SIGNED = (Int8, Int16, Int32, Int64, ISize)
UNSIGNED = (UInt8, UInt16, UInt32, UInt64, USize)
