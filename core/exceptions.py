"""
Exceptions raised while pairing and muxing subtitle files.

Every failure is fatal for the run: the CLI reports the first one and exits.
"""

from pathlib import Path
from typing import Optional


class SubmuxError(Exception):
    """Base error for the subtitle muxer."""


class DirectoryReadError(SubmuxError, OSError):
    """Raised when an input directory cannot be opened or listed."""

    def __init__(self, directory: Path, reason: str):
        self.directory = directory
        self.reason = reason
        super().__init__(f"Cannot read directory {directory}: {reason}")


class OutputPathError(SubmuxError, ValueError):
    """Raised when a video path has no stem or no extension to derive an output name from."""

    def __init__(self, video_path: Path, reason: str):
        self.video_path = video_path
        super().__init__(f"Cannot derive output path from {video_path}: {reason}")


class SpawnError(SubmuxError, OSError):
    """Raised when the external muxing tool cannot be launched."""

    def __init__(self, program: str, reason: str):
        self.program = program
        super().__init__(f"Failed to launch {program}: {reason}")


class MuxExitError(SubmuxError):
    """Raised when the external muxing tool exits with a non-zero status."""

    def __init__(self, program: str, returncode: int, output_path: Optional[Path] = None):
        self.program = program
        self.returncode = returncode
        self.output_path = output_path
        target = f" while writing {output_path}" if output_path else ""
        super().__init__(f"{program} exited with status {returncode}{target}")
