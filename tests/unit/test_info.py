"""Tests for metadata record parsing."""

import json
from datetime import datetime, timezone

import pytest

from seasonize.models.info import (
    PlaylistInfo,
    VideoInfo,
    load_info,
    parse_info,
    parse_upload_date,
)


def _video_data(**overrides):
    data = {
        "_type": "video",
        "id": "dQw4w9WgXcQ",
        "title": "Title",
        "fulltitle": "Full Title",
        "channel": "Channel",
        "upload_date": "20200101",
    }
    data.update(overrides)
    return data


class TestParseInfo:
    """Tests for parse_info function."""

    def test_parses_video_record(self):
        """Video records keep every consumed field."""
        info = parse_info(_video_data(timestamp=1577836800, playlist_webpage_url="https://x/videos"))

        assert isinstance(info, VideoInfo)
        assert info.id == "dQw4w9WgXcQ"
        assert info.title == "Title"
        assert info.fulltitle == "Full Title"
        assert info.channel == "Channel"
        assert info.upload_date == "20200101"
        assert info.timestamp == 1577836800
        assert info.playlist_webpage_url == "https://x/videos"

    def test_parses_playlist_record(self):
        """Playlist records carry nothing."""
        assert isinstance(parse_info({"_type": "playlist", "entries": []}), PlaylistInfo)

    def test_ignores_unknown_fields(self):
        """Extra fields written by the downloader are ignored."""
        info = parse_info(_video_data(duration=42, tags=["a"]))
        assert info.id == "dQw4w9WgXcQ"

    def test_null_optional_fields_are_absent(self):
        """null timestamp and playlist URL mean absent."""
        info = parse_info(_video_data(timestamp=None, playlist_webpage_url=None))
        assert info.timestamp is None
        assert info.playlist_webpage_url is None

    def test_unknown_type_raises(self):
        """Unknown discriminator is rejected."""
        with pytest.raises(ValueError):
            parse_info(_video_data(_type="channel"))

    def test_missing_type_raises(self):
        """Missing discriminator is rejected."""
        data = _video_data()
        del data["_type"]
        with pytest.raises(ValueError):
            parse_info(data)

    def test_missing_required_field_raises(self):
        """Missing required field is rejected."""
        data = _video_data()
        del data["channel"]
        with pytest.raises(ValueError, match="channel"):
            parse_info(data)

    def test_wrong_field_type_raises(self):
        """Non-string text field is rejected."""
        with pytest.raises(ValueError, match="upload_date"):
            parse_info(_video_data(upload_date=20200101))

    def test_boolean_timestamp_raises(self):
        """Booleans are not timestamps."""
        with pytest.raises(ValueError, match="timestamp"):
            parse_info(_video_data(timestamp=True))

    def test_non_object_raises(self):
        """Top-level arrays are rejected."""
        with pytest.raises(ValueError):
            parse_info([_video_data()])


class TestIsShort:
    """Tests for VideoInfo.is_short."""

    def test_shorts_listing(self):
        """URL ending with /shorts marks a short."""
        info = parse_info(_video_data(playlist_webpage_url="https://www.youtube.com/@chan/shorts"))
        assert info.is_short is True

    def test_videos_listing(self):
        """Other listings are not shorts."""
        info = parse_info(_video_data(playlist_webpage_url="https://www.youtube.com/@chan/videos"))
        assert info.is_short is False

    def test_no_listing(self):
        """Videos without a listing are not shorts."""
        assert parse_info(_video_data()).is_short is False

    def test_suffix_must_be_exact(self):
        """A trailing slash after shorts does not match."""
        info = parse_info(_video_data(playlist_webpage_url="https://www.youtube.com/@chan/shorts/"))
        assert info.is_short is False


class TestResolveDate:
    """Tests for VideoInfo.resolve_date."""

    def test_zero_timestamp_is_epoch(self):
        """timestamp 0 resolves to the Unix epoch."""
        info = parse_info(_video_data(timestamp=0))
        assert info.resolve_date() == datetime(1970, 1, 1, tzinfo=timezone.utc)

    def test_upload_date_is_midnight_utc(self):
        """Without timestamp, upload_date is midnight UTC."""
        info = parse_info(_video_data(upload_date="20200101"))
        assert info.resolve_date() == datetime(2020, 1, 1, tzinfo=timezone.utc)

    def test_consistent_fields_agree(self):
        """Consistent timestamp and upload_date give the same date."""
        info = parse_info(_video_data(timestamp=1577836800, upload_date="20200101"))
        assert info.resolve_date() == parse_upload_date("20200101")

    def test_timestamp_takes_precedence(self):
        """Timestamp wins when both are present and disagree."""
        info = parse_info(_video_data(timestamp=1577923200 + 3600, upload_date="19991231"))
        assert info.resolve_date() == datetime(2020, 1, 2, 1, tzinfo=timezone.utc)

    def test_out_of_range_timestamp_falls_back(self):
        """Unrepresentable timestamp falls back to upload_date."""
        info = parse_info(_video_data(timestamp=10 ** 20, upload_date="20210315"))
        assert info.resolve_date() == datetime(2021, 3, 15, tzinfo=timezone.utc)

    def test_unresolvable_date_raises(self):
        """No timestamp and bad upload_date raises."""
        info = parse_info(_video_data(upload_date="NA"))
        with pytest.raises(ValueError):
            info.resolve_date()

    def test_date_is_timezone_aware(self):
        """Resolved dates are UTC-aware."""
        assert parse_info(_video_data(timestamp=12345)).resolve_date().tzinfo == timezone.utc


class TestParseUploadDate:
    """Tests for parse_upload_date function."""

    @pytest.mark.parametrize("value", ["2020011", "2020-01-01", "20201301", "abcdefgh", ""])
    def test_rejects_invalid(self, value):
        """Rejects anything but a valid 8-digit date."""
        with pytest.raises(ValueError):
            parse_upload_date(value)

    def test_leap_day(self):
        """Accepts leap days."""
        assert parse_upload_date("20240229").day == 29


class TestLoadInfo:
    """Tests for load_info function."""

    def test_loads_file(self, tmp_path):
        """Reads and parses a metadata file."""
        path = tmp_path / "a.info.json"
        path.write_text(json.dumps(_video_data()), encoding="utf-8")

        assert load_info(path).channel == "Channel"

    def test_invalid_json_raises_value_error(self, tmp_path):
        """Undecodable content raises ValueError."""
        path = tmp_path / "a.info.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(ValueError):
            load_info(path)

    def test_missing_file_raises_os_error(self, tmp_path):
        """Unreadable file raises OSError."""
        with pytest.raises(OSError):
            load_info(tmp_path / "missing.info.json")
