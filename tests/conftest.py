"""Pytest configuration and fixtures."""

import json
import os
from datetime import datetime, timezone
from pathlib import Path

import pytest

from seasonize.models.video import VideoRecord


@pytest.fixture
def write_info():
    """Factory writing an .info.json record and its sidecar files."""

    def _write(
        directory: Path,
        stem: str,
        channel: str = "Some Channel",
        title: str = "Some Title",
        fulltitle=None,
        upload_date: str = "20200101",
        timestamp=None,
        playlist_webpage_url=None,
        sidecars=(".mp4",),
        kind: str = "video",
    ) -> Path:
        directory.mkdir(parents=True, exist_ok=True)
        data = {"_type": kind}
        if kind == "video":
            data.update({
                "id": stem,
                "title": title,
                "fulltitle": title if fulltitle is None else fulltitle,
                "channel": channel,
                "upload_date": upload_date,
                "timestamp": timestamp,
                "playlist_webpage_url": playlist_webpage_url,
                "duration": 615,
                "uploader": channel,
            })
        info = directory / f"{stem}.info.json"
        info.write_text(json.dumps(data), encoding="utf-8")
        for ext in sidecars:
            (directory / f"{stem}{ext}").write_bytes(b"fake video content")
        return info

    return _write


@pytest.fixture
def make_record(tmp_path):
    """Factory building in-memory VideoRecords."""

    def _make(
        video_id: str = "vid",
        title: str = "Title",
        full_title=None,
        channel: str = "Some Channel",
        date: datetime = datetime(2020, 1, 1, tzinfo=timezone.utc),
        sidecars=None,
    ) -> VideoRecord:
        if sidecars is None:
            sidecars = (tmp_path / f"{video_id}.info.json", tmp_path / f"{video_id}.mp4")
        return VideoRecord(
            id=video_id,
            title=title,
            full_title=title if full_title is None else full_title,
            channel=channel,
            effective_date=date,
            is_short_form=False,
            sidecar_paths=tuple(sidecars),
        )

    return _make


@pytest.fixture
def utc():
    """Shortcut building UTC datetimes."""

    def _utc(year: int, month: int = 1, day: int = 1, hour: int = 0) -> datetime:
        return datetime(year, month, day, hour, tzinfo=timezone.utc)

    return _utc


@pytest.fixture
def snapshot_tree():
    """Return a function listing a tree comparably, with link targets."""

    def _snapshot(root: Path):
        if not root.exists():
            return []
        return sorted(
            (str(p.relative_to(root)), os.readlink(p) if p.is_symlink() else None)
            for p in root.rglob("*")
        )

    return _snapshot
