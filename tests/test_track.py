"""Unit tests for the decoded track containers."""

import pytest

import lavatrack
from lavatrack import TrackInfo


@pytest.fixture
def decoded(http_track):
    return lavatrack.decode(lavatrack.encode(http_track))


class TestTrackInfo:
    """Test TrackInfo."""

    def test_str_is_title(self, decoded):
        assert str(decoded) == "Radio Stream"

    def test_repr(self, decoded):
        assert repr(decoded) == "TrackInfo(version=2, source=http, title=Radio Stream)"

    def test_properties_are_read_only(self, decoded):
        """Test a decoded track cannot be changed."""
        with pytest.raises(AttributeError):
            decoded.title = "Other"

        with pytest.raises(AttributeError):
            decoded.probe_info.raw = "mp3"

    def test_raw_data_is_a_copy(self, decoded):
        """Test changing raw_data leaves the track untouched."""
        data = decoded.raw_data
        data["title"] = "Other"
        data["probeInfo"]["raw"] = "mp3"

        assert decoded.title == "Radio Stream"
        assert decoded.raw_data["probeInfo"]["raw"] == "ogg|bitrate=128"

    def test_rebuild_from_raw_data(self, decoded):
        """Test raw_data can rebuild an equal track."""
        rebuilt = TrackInfo(decoded.raw_data)

        assert rebuilt == decoded
        assert hash(rebuilt) == hash(decoded)

    def test_changed_raw_data_encodes(self, decoded):
        """Test raw_data can be changed and encoded."""
        data = decoded.raw_data
        data["position"] = 30_000

        assert lavatrack.decode(lavatrack.encode(data)).position == 30_000

    def test_not_equal(self, decoded, local_track):
        other = lavatrack.decode(lavatrack.encode(local_track))

        assert decoded != other
        assert decoded != "Radio Stream"

    def test_probe_info_repr(self, decoded):
        assert repr(decoded.probe_info) == "ProbeInfo(name='ogg', parameters='bitrate=128')"

    def test_spotify_info(self, wire, v2_spotify_body):
        track = lavatrack.decode(wire.record(v2_spotify_body, version=2))

        assert repr(track.spotify_info) == "SpotifyInfo(isrc='USUG11904206', thumbnail=None)"
        assert track.raw_data["spotifyInfo"] == {"isrc": "USUG11904206", "thumbnail": None}
        assert "probeInfo" not in track.raw_data
