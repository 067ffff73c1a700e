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

from collections.abc import Iterable


__all__ = (
    "LavatrackException",
    "UnsupportedVersion",
)


class LavatrackException(Exception):
    """Base lavatrack Exception class.

    All lavatrack exceptions derive from this exception.
    """


class UnsupportedVersion(LavatrackException):
    """Exception raised when a track info record is decoded or encoded with a version that has no registered
    decoder or encoder.

    Attributes
    ----------
    version: int
        The version that was requested, or found in the encoded record.
    supported: tuple[int, ...]
        The versions that are currently supported for the attempted operation.
    """

    def __init__(self, msg: str | None = None, /, *, version: int, supported: Iterable[int]) -> None:
        self.version: int = version
        self.supported: tuple[int, ...] = tuple(sorted(supported))

        if not msg:
            versions = ", ".join(str(v) for v in self.supported)
            msg = f"This track's version is not supported. Track version: {version}, supported versions: {versions}"

        super().__init__(msg)
