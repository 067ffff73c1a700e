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

from typing import TypedDict

from typing_extensions import NotRequired


class ProbeInfoPayload(TypedDict):
    raw: str
    name: str
    parameters: str | None


class SpotifyInfoPayload(TypedDict):
    isrc: str | None
    thumbnail: str | None


class TrackInfoPayload(TypedDict):
    flags: int
    version: int
    title: str
    author: str
    length: int
    identifier: str
    isStream: bool
    uri: str | None
    source: str
    position: int
    probeInfo: NotRequired[ProbeInfoPayload]
    spotifyInfo: NotRequired[SpotifyInfoPayload]


class PartialProbeInfoPayload(TypedDict, total=False):
    raw: str | None
    name: str | None
    parameters: str | None


class PartialSpotifyInfoPayload(TypedDict, total=False):
    isrc: str | None
    thumbnail: str | None


class PartialTrackInfoPayload(TypedDict, total=False):
    flags: int
    version: int
    title: str | None
    author: str | None
    length: int | None
    identifier: str | None
    isStream: bool | None
    uri: str | None
    source: str | None
    position: int | None
    probeInfo: PartialProbeInfoPayload | None
    spotifyInfo: PartialSpotifyInfoPayload | None
