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
from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any, TypeAlias

from .exceptions import UnsupportedVersion
from .sources import SOURCE_READERS, SOURCE_WRITERS


if TYPE_CHECKING:
    from .buffer import DataReader, DataWriter
    from .types.track import PartialTrackInfoPayload, TrackInfoPayload


__all__ = (
    "DECODERS",
    "ENCODERS",
    "TRACK_INFO_VERSION",
    "get_decoder",
    "get_encoder",
)


logger: logging.Logger = logging.getLogger(__name__)


TRACK_INFO_VERSION: int = 2
POSITION_SIZE: int = 8

NO_TITLE: str = "<no title provided>"
NO_AUTHOR: str = "<no author provided>"
NO_IDENTIFIER: str = "<no identifier provided>"
NO_SOURCE: str = "<no source provided>"


Decoder: TypeAlias = "Callable[[DataReader, int, int], TrackInfoPayload]"
Encoder: TypeAlias = "Callable[[PartialTrackInfoPayload, DataWriter], None]"


def _read_source_extension(reader: DataReader, track: TrackInfoPayload, end: int) -> None:
    source_reader = SOURCE_READERS.get(track["source"])

    if source_reader is None:
        logger.debug('No extension reader registered for source "%s", reading position directly.', track["source"])
        return

    # Records re-encoded without their extension (E.g. spotify) only have the position left before ``end``.
    if end - reader.offset <= POSITION_SIZE:
        logger.debug('Track with source "%s" carries no extension data, reading position directly.', track["source"])
        return

    source_reader(reader, track)


def decode_v1(reader: DataReader, flags: int, end: int) -> TrackInfoPayload:
    title = reader.read_utf()
    author = reader.read_utf()
    length = reader.read_long()
    identifier = reader.read_utf()
    is_stream = reader.read_boolean()
    source = reader.read_utf()

    track: TrackInfoPayload = {
        "flags": flags,
        "version": 1,
        "title": title,
        "author": author,
        "length": length,
        "identifier": identifier,
        "isStream": is_stream,
        "uri": None,
        "source": source,
        "position": 0,
    }

    _read_source_extension(reader, track, end)
    track["position"] = reader.read_long()

    return track


def decode_v2(reader: DataReader, flags: int, end: int) -> TrackInfoPayload:
    title = reader.read_utf()
    author = reader.read_utf()
    length = reader.read_long()
    identifier = reader.read_utf()
    is_stream = reader.read_boolean()
    uri = reader.read_utf() if reader.read_boolean() else None
    source = reader.read_utf()

    track: TrackInfoPayload = {
        "flags": flags,
        "version": 2,
        "title": title,
        "author": author,
        "length": length,
        "identifier": identifier,
        "isStream": is_stream,
        "uri": uri,
        "source": source,
        "position": 0,
    }

    _read_source_extension(reader, track, end)
    track["position"] = reader.read_long()

    return track


def _or(value: Any, default: Any) -> Any:
    return default if value is None else value


def encode_v2(track: PartialTrackInfoPayload, writer: DataWriter) -> None:
    writer.write_utf(_or(track.get("title"), NO_TITLE))
    writer.write_utf(_or(track.get("author"), NO_AUTHOR))
    writer.write_long(_or(track.get("length"), 0))
    writer.write_utf(_or(track.get("identifier"), NO_IDENTIFIER))
    writer.write_boolean(_or(track.get("isStream"), False))

    uri: str | None = track.get("uri")
    writer.write_boolean(uri is not None)
    if uri is not None:
        writer.write_utf(uri)

    source: str = _or(track.get("source"), NO_SOURCE)
    writer.write_utf(source)

    source_writer = SOURCE_WRITERS.get(source)
    if source_writer is not None:
        source_writer(writer, track)
    else:
        logger.debug('No extension writer registered for source "%s", no extra data will be written.', source)

    writer.write_long(_or(track.get("position"), 0))


# version -> decoder
DECODERS: Mapping[int, Decoder] = {
    1: decode_v1,
    2: decode_v2,
}

# version -> encoder
# Only the latest version can be written.
ENCODERS: Mapping[int, Encoder] = {
    TRACK_INFO_VERSION: encode_v2,
}


def get_decoder(version: int) -> Decoder:
    """Return the decoder registered for ``version``.

    Raises
    ------
    UnsupportedVersion
        No decoder is registered for ``version``.
    """
    try:
        return DECODERS[version]
    except KeyError:
        raise UnsupportedVersion(version=version, supported=DECODERS) from None


def get_encoder(version: int) -> Encoder:
    """Return the encoder registered for ``version``.

    Raises
    ------
    UnsupportedVersion
        No encoder is registered for ``version``.
    """
    try:
        return ENCODERS[version]
    except KeyError:
        raise UnsupportedVersion(version=version, supported=ENCODERS) from None
