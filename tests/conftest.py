"""Shared pytest fixtures for lavatrack tests."""

import struct
from types import SimpleNamespace

import pytest


def utf(value: str) -> bytes:
    """Length-prefixed string, only valid for ASCII text."""
    encoded = value.encode("ascii")
    return struct.pack(">H", len(encoded)) + encoded


def long(value: int) -> bytes:
    return struct.pack(">q", value)


def boolean(value: bool) -> bytes:
    return b"\x01" if value else b"\x00"


def record(body: bytes, version: int | None = None) -> bytes:
    """Prefix ``body`` with a header, adding a version byte when ``version`` is given."""
    if version is None:
        return struct.pack(">i", len(body)) + body

    payload = bytes((version,)) + body
    return struct.pack(">i", len(payload) | (1 << 30)) + payload


@pytest.fixture
def wire():
    """Helpers for writing records by hand, independently of the library writer."""
    return SimpleNamespace(utf=utf, long=long, boolean=boolean, record=record)


@pytest.fixture
def v1_body():
    """A version 1 body for a youtube track, which has no source extension."""
    return (
        utf("Ocean Drive")
        + utf("Duke Dumont")
        + long(206_000)
        + utf("KDxJlW6cxRk")
        + boolean(False)
        + utf("youtube")
        + long(12_345)
    )


@pytest.fixture
def v2_spotify_body():
    return (
        utf("Blinding Lights")
        + utf("The Weeknd")
        + long(200_040)
        + utf("0VjIjW4GlUZAMYd2vXMi3b")
        + boolean(False)
        + boolean(True)
        + utf("https://open.spotify.com/track/0VjIjW4GlUZAMYd2vXMi3b")
        + utf("spotify")
        + boolean(True)
        + utf("USUG11904206")
        + boolean(False)
        + long(1_000)
    )


@pytest.fixture
def http_track():
    """A complete http track payload."""
    return {
        "title": "Radio Stream",
        "author": "Some Station",
        "length": 9_223_372_036_854_775_807,
        "identifier": "https://radio.example.com/live.ogg",
        "isStream": True,
        "uri": "https://radio.example.com/live.ogg",
        "source": "http",
        "position": 45_000,
        "probeInfo": {"raw": "ogg|bitrate=128", "name": "ogg", "parameters": "bitrate=128"},
    }


@pytest.fixture
def local_track():
    """A complete local track payload."""
    return {
        "title": "Track 01",
        "author": "Unknown Artist",
        "length": 180_000,
        "identifier": "/music/track01.mp3",
        "isStream": False,
        "uri": "/music/track01.mp3",
        "source": "local",
        "position": 0,
        "probeInfo": {"raw": "mp3", "name": "mp3", "parameters": None},
    }


@pytest.fixture
def spotify_track():
    return {
        "title": "Blinding Lights",
        "author": "The Weeknd",
        "length": 200_040,
        "identifier": "0VjIjW4GlUZAMYd2vXMi3b",
        "isStream": False,
        "uri": "https://open.spotify.com/track/0VjIjW4GlUZAMYd2vXMi3b",
        "source": "spotify",
        "position": 5_000,
        "spotifyInfo": {"isrc": "USUG11904206", "thumbnail": "https://i.scdn.co/image/ab67616d0000b273"},
    }
