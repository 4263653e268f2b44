#!/usr/bin/env python3
"""Test directory listing and merged output naming."""

import sys
from pathlib import Path

import pytest

# Add the project root to the path
sys.path.insert(0, str(Path(__file__).parent))

from core.exceptions import DirectoryReadError, OutputPathError, SubmuxError
from utils.file_operations import FileHandler


def test_list_directory_returns_direct_entries(tmp_path):
    (tmp_path / "a.srt").write_text("1")
    (tmp_path / "b.srt").write_text("2")
    nested = tmp_path / "nested"
    nested.mkdir()
    (nested / "deep.srt").write_text("3")

    listing = FileHandler.list_directory(tmp_path)

    by_name = {entry.name: entry for entry in listing}
    assert sorted(by_name) == ["a.srt", "b.srt", "nested"]
    assert by_name["nested"].is_dir
    assert not by_name["a.srt"].is_dir
    assert by_name["a.srt"].path == tmp_path / "a.srt"


def test_list_empty_directory(tmp_path):
    assert FileHandler.list_directory(tmp_path) == []


def test_list_missing_directory_raises(tmp_path):
    missing = tmp_path / "missing"

    with pytest.raises(DirectoryReadError) as excinfo:
        FileHandler.list_directory(missing)

    assert excinfo.value.directory == missing
    assert isinstance(excinfo.value, OSError)
    assert isinstance(excinfo.value, SubmuxError)


def test_list_file_instead_of_directory_raises(tmp_path):
    not_a_dir = tmp_path / "video.mkv"
    not_a_dir.write_text("")

    with pytest.raises(DirectoryReadError, match="not a directory"):
        FileHandler.list_directory(not_a_dir)


def test_derive_output_path_inserts_suffix_before_extension():
    assert FileHandler.derive_output_path(Path("/media/show/ep01.mkv")) == Path("/media/show/ep01_merged.mkv")
    assert FileHandler.derive_output_path(Path("clip.mp4")) == Path("clip_merged.mp4")


def test_derive_output_path_keeps_inner_dots():
    output = FileHandler.derive_output_path(Path("/media/Show.S01E01.1080p.mkv"))

    assert output == Path("/media/Show.S01E01.1080p_merged.mkv")


def test_derive_output_path_keeps_spaces():
    output = FileHandler.derive_output_path(Path("/media/My Show - 01.mkv"))

    assert output == Path("/media/My Show - 01_merged.mkv")


@pytest.mark.parametrize("video", ["/media/noextension", "/media/.hidden", "/"])
def test_derive_output_path_rejects_malformed_names(video):
    with pytest.raises(OutputPathError):
        FileHandler.derive_output_path(Path(video))


def test_derive_output_path_is_injective():
    videos = [Path("/media") / name for name in ("a.mkv", "b.mkv", "a.b.mkv", "a_.mkv", "b_merged.mp4")]

    outputs = {FileHandler.derive_output_path(video) for video in videos}

    assert len(outputs) == len(videos)
