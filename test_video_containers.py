#!/usr/bin/env python3
"""Test ffmpeg command construction and execution."""

import logging
import subprocess
import sys
from pathlib import Path
from unittest.mock import patch, MagicMock

import pytest

# Add the project root to the path
sys.path.insert(0, str(Path(__file__).parent))

from core.exceptions import SpawnError
from core.models import FilePair, MuxCommand, RunConfig
from core.video_containers import VideoContainerHandler
from utils.constants import FFMPEG_STDERR_TAIL

PAIR = FilePair(subtitle_path=Path("subs/a.srt"), video_path=Path("videos/a.mkv"))
OUTPUT = Path("videos/a_merged.mkv")


def build(**overrides):
    config = RunConfig(source_dir=Path("subs"), target_dir=Path("videos"), **overrides)
    return VideoContainerHandler.build_mux_command(PAIR, config, OUTPUT)


def test_minimal_command():
    command = build()

    assert command.argv == [
        "ffmpeg",
        "-i", str(Path("videos/a.mkv")),
        "-i", str(Path("subs/a.srt")),
        "-map", "0", "-map", "1",
        "-c", "copy",
        str(OUTPUT),
    ]
    assert command.output_path == OUTPUT


def test_full_command_order():
    command = build(overwrite=True, offset=-3, language="eng")

    assert command.argv == [
        "ffmpeg",
        "-y",
        "-itsoffset", "-3",
        "-i", str(Path("videos/a.mkv")),
        "-i", str(Path("subs/a.srt")),
        "-map", "0", "-map", "1",
        "-c", "copy",
        "-metadata:s:s:1", "language=eng",
        str(OUTPUT),
    ]


@pytest.mark.parametrize("offset, token", [(-3, "-3"), (5, "5"), (0, "0"), (-120, "-120")])
def test_offset_is_rendered_as_plain_integer(offset, token):
    args = list(build(offset=offset).args)

    index = args.index("-itsoffset")
    assert args[index + 1] == token
    assert index < args.index("-i")


def test_no_offset_flag_without_offset():
    assert "-itsoffset" not in build().args


def test_overwrite_flag_comes_first():
    assert build(overwrite=True, offset=2).args[0] == "-y"
    assert "-y" not in build(overwrite=False).args


@pytest.mark.parametrize("language, expected", [
    ("eng", "language=eng"),
    ("  ger \t", "language=ger"),
    (" pt br ", "language=pt br"),
])
def test_language_metadata_is_trimmed(language, expected):
    args = list(build(language=language).args)

    assert args[-3:] == ["-metadata:s:s:1", expected, str(OUTPUT)]


@pytest.mark.parametrize("language", ["", "   ", "\t\n"])
def test_blank_language_omits_metadata(language):
    args = build(language=language).args

    assert "-metadata:s:s:1" not in args
    assert not any(arg.startswith("language=") for arg in args)


def test_paths_with_metacharacters_stay_single_arguments():
    pair = FilePair(Path("subs/it's; rm -rf $HOME.srt"), Path("videos/a b & c.mkv"))
    config = RunConfig(source_dir=Path("subs"), target_dir=Path("videos"))

    command = VideoContainerHandler.build_mux_command(pair, config, Path("videos/a b & c_merged.mkv"))

    assert str(pair.subtitle_path) in command.args
    assert str(pair.video_path) in command.args


def test_run_command_quiet_captures_output():
    command = MuxCommand(args=("-i", "a.mkv", "out.mkv"), output_path=Path("out.mkv"))

    with patch("core.video_containers.subprocess.run") as mock_run:
        mock_run.return_value = MagicMock(returncode=0, stderr="")
        returncode = VideoContainerHandler.run_command(command, verbose=False)

    assert returncode == 0
    args, kwargs = mock_run.call_args
    assert args[0] == ["ffmpeg", "-i", "a.mkv", "out.mkv"]
    assert kwargs["stdout"] == subprocess.PIPE
    assert kwargs["stderr"] == subprocess.PIPE
    assert kwargs["stdin"] == subprocess.DEVNULL
    assert "shell" not in kwargs


def test_run_command_verbose_inherits_output():
    command = MuxCommand(args=("out.mkv",), output_path=Path("out.mkv"))

    with patch("core.video_containers.subprocess.run") as mock_run:
        mock_run.return_value = MagicMock(returncode=0)
        VideoContainerHandler.run_command(command, verbose=True)

    args, kwargs = mock_run.call_args
    assert args[0] == ["ffmpeg", "out.mkv"]
    assert "stdout" not in kwargs
    assert "stderr" not in kwargs


def test_run_command_returns_nonzero_status():
    command = MuxCommand(args=("out.mkv",), output_path=Path("out.mkv"))

    with patch("core.video_containers.subprocess.run") as mock_run:
        mock_run.return_value = MagicMock(returncode=1, stderr="Invalid data found")
        assert VideoContainerHandler.run_command(command) == 1


@pytest.mark.parametrize("verbose", [True, False])
def test_run_command_missing_program_raises_spawn_error(verbose):
    command = MuxCommand(args=("out.mkv",), output_path=Path("out.mkv"), program="ffmpeg-missing")

    with patch("core.video_containers.subprocess.run",
               side_effect=FileNotFoundError(2, "No such file or directory", "ffmpeg-missing")):
        with pytest.raises(SpawnError) as excinfo:
            VideoContainerHandler.run_command(command, verbose=verbose)

    assert excinfo.value.program == "ffmpeg-missing"
    assert "No such file or directory" in str(excinfo.value)


def test_run_command_quiet_logs_stderr_tail_on_failure(app_caplog):
    command = MuxCommand(args=("out.mkv",), output_path=Path("out.mkv"))
    stderr = "x" * 100 + "y" * FFMPEG_STDERR_TAIL

    with patch("core.video_containers.subprocess.run") as mock_run:
        mock_run.return_value = MagicMock(returncode=1, stderr=stderr)
        VideoContainerHandler.run_command(command, verbose=False)

    messages = [r.getMessage() for r in app_caplog.records if r.levelno == logging.ERROR]
    assert messages == [f"ffmpeg stderr: ...{'y' * FFMPEG_STDERR_TAIL}"]


def test_run_command_verbose_does_not_log_stderr(app_caplog):
    command = MuxCommand(args=("out.mkv",), output_path=Path("out.mkv"))

    with patch("core.video_containers.subprocess.run") as mock_run:
        mock_run.return_value = MagicMock(returncode=1, stderr="Invalid data found")
        assert VideoContainerHandler.run_command(command, verbose=True) == 1

    assert not any("stderr" in r.getMessage() for r in app_caplog.records)


def test_run_command_success_logs_no_error(app_caplog):
    command = MuxCommand(args=("out.mkv",), output_path=Path("out.mkv"))

    with patch("core.video_containers.subprocess.run") as mock_run:
        mock_run.return_value = MagicMock(returncode=0, stderr="frame=  100 fps=0.0")
        VideoContainerHandler.run_command(command, verbose=False)

    assert not any(r.levelno >= logging.ERROR for r in app_caplog.records)


def test_run_command_passes_no_timeout():
    command = MuxCommand(args=("out.mkv",), output_path=Path("out.mkv"))

    for verbose in (True, False):
        with patch("core.video_containers.subprocess.run") as mock_run:
            mock_run.return_value = MagicMock(returncode=0, stderr="")
            VideoContainerHandler.run_command(command, verbose=verbose)
        assert "timeout" not in mock_run.call_args.kwargs
