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

import copy
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from .types.track import ProbeInfoPayload, SpotifyInfoPayload, TrackInfoPayload


__all__ = ("TrackInfo", "ProbeInfo", "SpotifyInfo")


class ProbeInfo:
    """Container class representing the probe info stored with ``http`` and ``local`` tracks.

    Attributes
    ----------
    raw: str
        The probe info exactly as it was stored. This is the only value written back when encoding.
    name: str
        The container or format name, E.g. ``"ogg"``.
    parameters: str | None
        Everything after the first ``|`` in :attr:`raw`. Could be ``None`` if there was no separator.
    """

    __slots__ = ("_raw", "_name", "_parameters")

    def __init__(self, *, data: ProbeInfoPayload) -> None:
        self._raw: str = data["raw"]
        self._name: str = data["name"]
        self._parameters: str | None = data["parameters"]

    def __repr__(self) -> str:
        return f"ProbeInfo(name={self._name!r}, parameters={self._parameters!r})"

    @property
    def raw(self) -> str:
        return self._raw

    @property
    def name(self) -> str:
        return self._name

    @property
    def parameters(self) -> str | None:
        return self._parameters


class SpotifyInfo:
    """Container class representing the extra data stored with ``spotify`` tracks.

    Attributes
    ----------
    isrc: str | None
        The ISRC (International Standard Recording Code) of this track. Could be ``None``.
    thumbnail: str | None
        The URL of the thumbnail of this track. Could be ``None``.
    """

    __slots__ = ("_isrc", "_thumbnail")

    def __init__(self, *, data: SpotifyInfoPayload) -> None:
        self._isrc: str | None = data["isrc"]
        self._thumbnail: str | None = data["thumbnail"]

    def __repr__(self) -> str:
        return f"SpotifyInfo(isrc={self._isrc!r}, thumbnail={self._thumbnail!r})"

    @property
    def isrc(self) -> str | None:
        return self._isrc

    @property
    def thumbnail(self) -> str | None:
        return self._thumbnail


class TrackInfo:
    """The decoded contents of an encoded Lavalink track.

    .. note::

        You would usually receive this class from :func:`lavatrack.decode` rather than construct it yourself.

    .. container:: operations

        .. describe:: str(track)

            The title of this track.

        .. describe:: repr(track)

            The official string representation of this track.

        .. describe:: track == other

            Whether this track holds the same decoded data as another.
    """

    def __init__(self, data: TrackInfoPayload) -> None:
        self._flags: int = data["flags"]
        self._version: int = data["version"]
        self._title: str = data["title"]
        self._author: str = data["author"]
        self._length: int = data["length"]
        self._identifier: str = data["identifier"]
        self._is_stream: bool = data["isStream"]
        self._uri: str | None = data["uri"]
        self._source: str = data["source"]
        self._position: int = data["position"]

        probe: ProbeInfoPayload | None = data.get("probeInfo")
        self._probe_info: ProbeInfo | None = ProbeInfo(data=probe) if probe is not None else None

        spotify: SpotifyInfoPayload | None = data.get("spotifyInfo")
        self._spotify_info: SpotifyInfo | None = SpotifyInfo(data=spotify) if spotify is not None else None

        self._raw_data: TrackInfoPayload = copy.deepcopy(data)

    def __str__(self) -> str:
        return self.title

    def __repr__(self) -> str:
        return f"TrackInfo(version={self.version}, source={self.source}, title={self.title})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TrackInfo):
            return NotImplemented

        return self._raw_data == other._raw_data

    def __hash__(self) -> int:
        return hash((self._version, self._source, self._identifier, self._position))

    @property
    def flags(self) -> int:
        """Property returning the flags stored in the top two bits of the header. Bit ``0`` marks a versioned record."""
        return self._flags

    @property
    def version(self) -> int:
        """Property returning the version this track was decoded with."""
        return self._version

    @property
    def title(self) -> str:
        """Property returning the title/name of this track."""
        return self._title

    @property
    def author(self) -> str:
        """Property returning the name of the author of this track."""
        return self._author

    @property
    def length(self) -> int:
        """Property returning the tracks duration in milliseconds as an int."""
        return self._length

    @property
    def identifier(self) -> str:
        """Property returning the identifier of this track from its source.

        E.g. YouTube ID or Spotify ID.
        """
        return self._identifier

    @property
    def is_stream(self) -> bool:
        """Property returning a bool indicating whether this track is a stream."""
        return self._is_stream

    @property
    def uri(self) -> str | None:
        """Property returning the URL to this track. Always ``None`` for version ``1`` tracks."""
        return self._uri

    @property
    def source(self) -> str:
        """Property returning the source of this track as a ``str``.

        E.g. "http", "local" or "spotify".
        """
        return self._source

    @property
    def position(self) -> int:
        """Property returning starting position of this track in milliseconds as an int."""
        return self._position

    @property
    def probe_info(self) -> ProbeInfo | None:
        """Property returning the :class:`ProbeInfo` of ``http`` and ``local`` tracks. ``None`` for other sources."""
        return self._probe_info

    @property
    def spotify_info(self) -> SpotifyInfo | None:
        """Property returning the :class:`SpotifyInfo` of ``spotify`` tracks. ``None`` for other sources."""
        return self._spotify_info

    @property
    def raw_data(self) -> TrackInfoPayload:
        """A copy of the decoded data for this ``TrackInfo``.

        You can use this data to reconstruct this ``TrackInfo``, or change it and pass it to
        :func:`lavatrack.encode`.


        Examples
        --------

            .. code:: python3

                data = track.raw_data
                data["position"] = 30_000

                encoded: str = lavatrack.encode(data)
        """
        return copy.deepcopy(self._raw_data)
