"""
FFmpeg integration for muxing subtitles into video containers.

This module provides:
- Construction of the ffmpeg argument vector for one subtitle/video pair
- FFmpeg command execution with proper error handling

Commands are always passed to subprocess as an argument list, never through
a shell, so file names with spaces or shell metacharacters are safe.
"""

import subprocess
from pathlib import Path
from typing import List
from utils.constants import (
    FFMPEG_BINARY,
    FFMPEG_STREAM_MAP,
    FFMPEG_STREAM_COPY,
    FFMPEG_SUBTITLE_LANGUAGE_FLAG,
    FFMPEG_STDERR_TAIL,
)
from utils.logging_config import get_logger
from core.exceptions import SpawnError
from core.models import FilePair, MuxCommand, RunConfig

logger = get_logger(__name__)


class VideoContainerHandler:
    """Builds and runs ffmpeg remux commands."""

    @staticmethod
    def build_mux_command(pair: FilePair, config: RunConfig,
                          output_path: Path,
                          program: str = FFMPEG_BINARY) -> MuxCommand:
        """
        Build the ffmpeg command that muxes a subtitle file into a video.

        Argument order is fixed: overwrite flag, offset, both inputs (video
        first), stream mapping, stream copy, language metadata, output path.

        ``-itsoffset`` applies to the input that follows it, which is the
        video. A positive offset therefore delays the video and makes the
        subtitles appear earlier; a negative offset makes them appear later.

        Args:
            pair: Subtitle and video paths
            config: Run configuration
            output_path: Path of the merged output file
            program: FFmpeg executable name or path

        Returns:
            MuxCommand instance

        Example:
            >>> cmd = VideoContainerHandler.build_mux_command(
            ...     FilePair(Path("a.srt"), Path("a.mkv")), config, Path("a_merged.mkv")
            ... )
            >>> print(cmd)
            ffmpeg -i a.mkv -i a.srt -map 0 -map 1 -c copy a_merged.mkv
        """
        args: List[str] = []

        if config.overwrite:
            args.append("-y")

        if config.offset is not None:
            args.extend(["-itsoffset", str(config.offset)])

        args.extend(["-i", str(pair.video_path), "-i", str(pair.subtitle_path)])
        args.extend(FFMPEG_STREAM_MAP)
        args.extend(FFMPEG_STREAM_COPY)

        language = config.language_tag
        if language:
            args.extend([FFMPEG_SUBTITLE_LANGUAGE_FLAG, f"language={language}"])

        args.append(str(output_path))

        return MuxCommand(args=tuple(args), output_path=output_path, program=program)

    @staticmethod
    def run_command(command: MuxCommand, verbose: bool = False) -> int:
        """
        Run an ffmpeg command and wait for it to finish.

        In verbose mode ffmpeg writes straight to this process's stdout and
        stderr. Otherwise its output is captured and only logged when it
        exits with a non-zero status. There is no timeout: a hung ffmpeg
        process blocks the run.

        Args:
            command: Command to execute
            verbose: Whether to stream ffmpeg output live

        Returns:
            FFmpeg exit status

        Raises:
            SpawnError: If the executable cannot be found or launched
        """
        argv = command.argv
        logger.debug(f"Running command: {command}")

        try:
            if verbose:
                result = subprocess.run(argv)
            else:
                result = subprocess.run(
                    argv,
                    stdin=subprocess.DEVNULL,
                    stdout=subprocess.PIPE,
                    stderr=subprocess.PIPE,
                    text=True,
                    encoding='utf-8',
                    errors='replace'
                )
        except OSError as e:
            raise SpawnError(command.program, e.strerror or str(e)) from e

        if result.returncode != 0:
            logger.debug(f"Command failed with return code {result.returncode}")
            if not verbose and result.stderr:
                logger.error(f"{command.program} stderr: ...{result.stderr[-FFMPEG_STDERR_TAIL:]}")

        return result.returncode
