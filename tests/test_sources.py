"""Unit tests for source specific extra data."""

import pytest

from lavatrack.buffer import DataReader, DataWriter
from lavatrack.sources import SOURCE_READERS, SOURCE_WRITERS, read_probe_info, read_spotify_info, write_probe_info


def _reader_for(*values: str) -> DataReader:
    writer = DataWriter()
    for value in values:
        writer.write_utf(value)

    return DataReader(writer.to_bytes())


class TestProbeInfo:
    """Test probe info reading and writing."""

    @pytest.mark.parametrize(
        ("raw", "name", "parameters"),
        [
            ("ogg|bitrate=128", "ogg", "bitrate=128"),
            ("ogg", "ogg", None),
            ("mp3|", "mp3", ""),
            ("|x=1", "", "x=1"),
            ("a|b|c", "a", "b|c"),
            ("", "", None),
        ],
    )
    def test_split(self, raw, name, parameters):
        """Test name and parameters are split at the first separator."""
        track = {}
        read_probe_info(_reader_for(raw), track)

        assert track["probeInfo"] == {"raw": raw, "name": name, "parameters": parameters}

    def test_consumes_only_its_string(self):
        """Test the reader stops right after the probe info."""
        reader = _reader_for("ogg", "next")
        read_probe_info(reader, {})

        assert reader.read_utf() == "next"

    def test_write_raw(self):
        """Test the raw probe info is written."""
        writer = DataWriter()
        write_probe_info(writer, {"probeInfo": {"raw": "flac|x=1"}})

        assert DataReader(writer.to_bytes()).read_utf() == "flac|x=1"

    @pytest.mark.parametrize("track", [{}, {"probeInfo": None}, {"probeInfo": {"name": "ogg"}}])
    def test_write_placeholder(self, track):
        """Test a missing raw probe info writes the placeholder."""
        writer = DataWriter()
        write_probe_info(writer, track)

        assert DataReader(writer.to_bytes()).read_utf() == "<no probe info provided>"


class TestSpotifyInfo:
    """Test spotify info reading."""

    def test_both_present(self):
        """Test ISRC and thumbnail are read."""
        writer = DataWriter()
        writer.write_boolean(True)
        writer.write_utf("USUG11904206")
        writer.write_boolean(True)
        writer.write_utf("https://i.scdn.co/image/abc")
        writer.write_long(7)

        reader = DataReader(writer.to_bytes())
        track = {}
        read_spotify_info(reader, track)

        assert track["spotifyInfo"] == {"isrc": "USUG11904206", "thumbnail": "https://i.scdn.co/image/abc"}
        assert reader.read_long() == 7

    def test_both_absent(self):
        """Test absent values are None."""
        reader = DataReader(b"\x00\x00")
        track = {}
        read_spotify_info(reader, track)

        assert track["spotifyInfo"] == {"isrc": None, "thumbnail": None}
        assert reader.remaining == 0

    def test_only_thumbnail(self):
        """Test a thumbnail without an ISRC."""
        writer = DataWriter()
        writer.write_boolean(False)
        writer.write_boolean(True)
        writer.write_utf("https://i.scdn.co/image/abc")

        track = {}
        read_spotify_info(DataReader(writer.to_bytes()), track)

        assert track["spotifyInfo"] == {"isrc": None, "thumbnail": "https://i.scdn.co/image/abc"}


class TestRegistry:
    """Test which sources have readers and writers."""

    def test_readers(self):
        assert SOURCE_READERS["http"] is read_probe_info
        assert SOURCE_READERS["local"] is read_probe_info
        assert SOURCE_READERS["spotify"] is read_spotify_info
        assert "youtube" not in SOURCE_READERS

    def test_writers(self):
        assert SOURCE_WRITERS["http"] is write_probe_info
        assert SOURCE_WRITERS["local"] is write_probe_info
        assert "spotify" not in SOURCE_WRITERS
