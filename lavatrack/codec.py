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

import logging
from typing import TYPE_CHECKING, NamedTuple

from .buffer import DataReader, DataWriter
from .track import TrackInfo
from .versions import TRACK_INFO_VERSION, get_decoder, get_encoder


if TYPE_CHECKING:
    from .types.track import PartialTrackInfoPayload


__all__ = ("TrackHeader", "read_header", "decode", "encode", "encode_bytes")


logger: logging.Logger = logging.getLogger(__name__)


TRACK_INFO_VERSIONED: int = 1
PAYLOAD_LENGTH_MASK: int = 0x3FFFFFFF
HEADER_SIZE: int = 4


class TrackHeader(NamedTuple):
    """The header of an encoded track.

    Attributes
    ----------
    flags: int
        The top two bits of the header word. Bit ``0`` is set when an explicit version byte follows.
    length: int
        The amount of bytes following the 4 byte header word, including the version byte.
    version: int
        The version of the record. ``1`` when no version byte is present.
    """

    flags: int
    length: int
    version: int


def _read_header(reader: DataReader) -> TrackHeader:
    value: int = reader.read_int()

    # Arithmetic shift, the encoder only ever sets bit 30.
    flags: int = value >> 30
    version: int = reader.read_byte() if flags & TRACK_INFO_VERSIONED else 1

    return TrackHeader(flags=flags, length=value & PAYLOAD_LENGTH_MASK, version=version)


def read_header(data: bytes | bytearray | memoryview | str) -> TrackHeader:
    """Read only the header of an encoded track.

    This can be used to inspect or skip a track without decoding its fields, E.g. when its version is not supported.

    Parameters
    ----------
    data: bytes | bytearray | memoryview | str
        The encoded track, as raw bytes or base64 text.

    Returns
    -------
    :class:`TrackHeader`
        The flags, payload length and version of this track.
    """
    return _read_header(DataReader(data))


def decode(data: bytes | bytearray | memoryview | str) -> TrackInfo:
    """Decode an encoded Lavalink track.

    Parameters
    ----------
    data: bytes | bytearray | memoryview | str
        The encoded track, as raw bytes or base64 text.

    Returns
    -------
    :class:`TrackInfo`
        The decoded track.

    Raises
    ------
    UnsupportedVersion
        The version of this track has no registered decoder.
    EOFError
        The data ended before the track was fully read.


    Examples
    --------

        .. code:: python3

            track: lavatrack.TrackInfo = lavatrack.decode(encoded)
            print(track.title, track.position)
    """
    reader = DataReader(data)
    header = _read_header(reader)

    decoder = get_decoder(header.version)
    # The header word is always the first 4 bytes, the record ends after its payload.
    payload = decoder(reader, header.flags, HEADER_SIZE + header.length)

    logger.debug(
        "Decoded track (version=%s, source=%s, length=%s bytes).", header.version, payload["source"], header.length
    )
    return TrackInfo(payload)


def _encode(track: TrackInfo | PartialTrackInfoPayload, version: int) -> DataWriter:
    encoder = get_encoder(version)
    data: PartialTrackInfoPayload = track.raw_data if isinstance(track, TrackInfo) else track

    out = DataWriter()
    out.write_int(0)  # overwritten by the header below
    out.write_byte(version)

    encoder(data, out)

    prefix = DataWriter()
    prefix.write_int((len(out) - HEADER_SIZE) | (TRACK_INFO_VERSIONED << 30))
    out.set(prefix.to_bytes())

    logger.debug("Encoded track (version=%s, source=%s) into %s bytes.", version, data.get("source"), len(out))
    return out


def encode(track: TrackInfo | PartialTrackInfoPayload, version: int = TRACK_INFO_VERSION) -> str:
    """Encode a track into the base64 text Lavalink uses to identify tracks.

    Any field missing from ``track`` is written as a placeholder, E.g. ``"<no title provided>"`` or ``0``.

    .. warning::

        Only ``http`` and ``local`` tracks have their extra data written. The ISRC and thumbnail of
        ``spotify`` tracks are not encoded.

    Parameters
    ----------
    track: :class:`TrackInfo` | dict
        The track to encode. A ``dict`` may hold any subset of the keys found in :attr:`TrackInfo.raw_data`.
    version: int
        The version to encode with. Defaults to the latest version, ``2``.

    Returns
    -------
    str
        The encoded track as base64 text.

    Raises
    ------
    UnsupportedVersion
        There is no encoder for ``version``.
    """
    return _encode(track, version).to_base64()


def encode_bytes(track: TrackInfo | PartialTrackInfoPayload, version: int = TRACK_INFO_VERSION) -> bytes:
    """The same as :func:`encode`, returning the raw bytes instead of base64 text."""
    return _encode(track, version).to_bytes()
