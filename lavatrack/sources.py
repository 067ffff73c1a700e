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

from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, TypeAlias


if TYPE_CHECKING:
    from .buffer import DataReader, DataWriter
    from .types.track import PartialTrackInfoPayload, ProbeInfoPayload, TrackInfoPayload


__all__ = ("SOURCE_READERS", "SOURCE_WRITERS", "PARAMETERS_SEPARATOR", "NO_PROBE_INFO")


PARAMETERS_SEPARATOR: str = "|"
NO_PROBE_INFO: str = "<no probe info provided>"


SourceReader: TypeAlias = "Callable[[DataReader, TrackInfoPayload], None]"
SourceWriter: TypeAlias = "Callable[[DataWriter, PartialTrackInfoPayload], None]"


def read_probe_info(reader: DataReader, track: TrackInfoPayload) -> None:
    raw: str = reader.read_utf()
    name, separator, parameters = raw.partition(PARAMETERS_SEPARATOR)

    probe: ProbeInfoPayload = {"raw": raw, "name": name, "parameters": parameters if separator else None}
    track["probeInfo"] = probe


def read_spotify_info(reader: DataReader, track: TrackInfoPayload) -> None:
    # Each value is a presence flag followed by the text, only when set.
    isrc: str | None = reader.read_utf() if reader.read_boolean() else None
    thumbnail: str | None = reader.read_utf() if reader.read_boolean() else None

    track["spotifyInfo"] = {"isrc": isrc, "thumbnail": thumbnail}


def write_probe_info(writer: DataWriter, track: PartialTrackInfoPayload) -> None:
    probe = track.get("probeInfo") or {}
    raw: str | None = probe.get("raw")

    writer.write_utf(raw if raw is not None else NO_PROBE_INFO)


# source name -> reader
# A reader must consume exactly its own fields so the trailing position can always be read.
SOURCE_READERS: Mapping[str, SourceReader] = {
    "http": read_probe_info,
    "local": read_probe_info,
    "spotify": read_spotify_info,
}

# source name -> writer
# There is no spotify writer, its extra data is not written back.
SOURCE_WRITERS: Mapping[str, SourceWriter] = {
    "http": write_probe_info,
    "local": write_probe_info,
}
