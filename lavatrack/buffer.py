"""
MIT License

Copyright (c) 2019-Current PythonistaGuild, EvieePy

Permission is hereby granted, free of charge, to any person obtaining a copy
of this software and associated documentation files (the "Software"), to deal
in the Software without restriction, including without limitation the rights
to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
copies of the Software, and to permit persons to whom the Software is
furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in all
copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
SOFTWARE.
"""

from __future__ import annotations

import base64
import struct


__all__ = ("DataReader", "DataWriter")


_INT = struct.Struct(">i")
_LONG = struct.Struct(">q")
_BYTE = struct.Struct(">B")
_USHORT = struct.Struct(">H")

MAX_UTF_LENGTH: int = 0xFFFF


def _encode_utf(value: str) -> bytes:
    # Java modified UTF-8: NUL takes two bytes and supplementary characters are written as surrogate pairs.
    units = value.encode("utf-16-be", "surrogatepass")
    out = bytearray()

    for (unit,) in _USHORT.iter_unpack(units):
        if 0 < unit < 0x80:
            out.append(unit)
        elif unit < 0x800:
            out += bytes((0xC0 | (unit >> 6), 0x80 | (unit & 0x3F)))
        else:
            out += bytes((0xE0 | (unit >> 12), 0x80 | ((unit >> 6) & 0x3F), 0x80 | (unit & 0x3F)))

    return bytes(out)


def _decode_utf(data: bytes) -> str:
    units: list[int] = []
    index = 0
    size = len(data)

    while index < size:
        first = data[index]

        if first < 0x80:
            units.append(first)
            index += 1
            continue

        if first & 0xE0 == 0xC0:
            width = 2
        elif first & 0xF0 == 0xE0:
            width = 3
        else:
            raise UnicodeDecodeError("modified-utf-8", data, index, index + 1, "invalid start byte")

        if index + width > size:
            raise UnicodeDecodeError("modified-utf-8", data, index, size, "unexpected end of data")

        trailing = data[index + 1 : index + width]
        if any(b & 0xC0 != 0x80 for b in trailing):
            raise UnicodeDecodeError("modified-utf-8", data, index, index + width, "invalid continuation byte")

        if width == 2:
            units.append(((first & 0x1F) << 6) | (trailing[0] & 0x3F))
        else:
            units.append(((first & 0x0F) << 12) | ((trailing[0] & 0x3F) << 6) | (trailing[1] & 0x3F))

        index += width

    return struct.pack(f">{len(units)}H", *units).decode("utf-16-be", "surrogatepass")


class DataReader:
    """A big-endian reader over an in-memory buffer, compatible with Java's ``DataInput``.

    Parameters
    ----------
    data: bytes | bytearray | memoryview | str
        The buffer to read. A ``str`` is treated as base64 text and decoded first.

    Raises
    ------
    binascii.Error
        The provided ``str`` is not valid base64.
    """

    __slots__ = ("_data", "_offset")

    def __init__(self, data: bytes | bytearray | memoryview | str) -> None:
        if isinstance(data, str):
            data = base64.b64decode(data, validate=True)

        self._data: bytes = bytes(data)
        self._offset: int = 0

    def __repr__(self) -> str:
        return f"DataReader(offset={self._offset}, size={len(self._data)})"

    @property
    def offset(self) -> int:
        """The amount of bytes consumed so far."""
        return self._offset

    @property
    def remaining(self) -> int:
        """The amount of bytes left to read."""
        return len(self._data) - self._offset

    def _take(self, size: int) -> bytes:
        end = self._offset + size
        if end > len(self._data):
            raise EOFError(f"Unable to read {size} byte(s) at offset {self._offset}, only {self.remaining} remaining.")

        chunk = self._data[self._offset : end]
        self._offset = end
        return chunk

    def read_int(self) -> int:
        return _INT.unpack(self._take(4))[0]

    def read_long(self) -> int:
        return _LONG.unpack(self._take(8))[0]

    def read_byte(self) -> int:
        return self._take(1)[0]

    def read_boolean(self) -> bool:
        return self._take(1)[0] != 0

    def read_utf(self) -> str:
        (length,) = _USHORT.unpack(self._take(2))
        return _decode_utf(self._take(length))


class DataWriter:
    """A growable big-endian writer, compatible with Java's ``DataOutput``.

    Bytes already written can be overwritten in place with :meth:`set`, which is how a length prefix is
    filled in once the rest of a record is known.

    .. container:: operations

        .. describe:: len(writer)

            The amount of bytes written so far.

        .. describe:: str(writer)

            The written bytes as base64 text.
    """

    __slots__ = ("_buffer",)

    def __init__(self) -> None:
        self._buffer: bytearray = bytearray()

    def __len__(self) -> int:
        return len(self._buffer)

    def __str__(self) -> str:
        return self.to_base64()

    def __repr__(self) -> str:
        return f"DataWriter(size={len(self._buffer)})"

    def write_int(self, value: int) -> None:
        self._buffer += _INT.pack(value)

    def write_long(self, value: int) -> None:
        self._buffer += _LONG.pack(value)

    def write_byte(self, value: int) -> None:
        self._buffer += _BYTE.pack(value)

    def write_boolean(self, value: bool) -> None:
        self._buffer.append(1 if value else 0)

    def write_utf(self, value: str) -> None:
        """Write a string as an unsigned 16-bit length followed by modified UTF-8.

        Raises
        ------
        ValueError
            The encoded string is longer than 65535 bytes.
        """
        encoded = _encode_utf(value)
        if len(encoded) > MAX_UTF_LENGTH:
            raise ValueError(f"Encoded string is too long: {len(encoded)} > {MAX_UTF_LENGTH} bytes.")

        self._buffer += _USHORT.pack(len(encoded))
        self._buffer += encoded

    def set(self, data: bytes, offset: int = 0) -> None:
        """Overwrite previously written bytes, starting at ``offset``.

        Raises
        ------
        IndexError
            The range to overwrite extends past what has been written.
        """
        end = offset + len(data)
        if offset < 0 or end > len(self._buffer):
            raise IndexError(f"Cannot overwrite bytes {offset}:{end} of a {len(self._buffer)} byte buffer.")

        self._buffer[offset:end] = data

    def to_bytes(self) -> bytes:
        return bytes(self._buffer)

    def to_base64(self) -> str:
        return base64.b64encode(self._buffer).decode("ascii")
