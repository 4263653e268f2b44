"""
File operations for the subtitle muxer.

This module provides:
- Non-recursive directory listing with cached directory flags
- Derivation of the merged output path beside a video file
"""

import os
from pathlib import Path
from typing import List
from core.exceptions import DirectoryReadError, OutputPathError
from core.models import DirectoryEntry
from .constants import MERGED_SUFFIX
from .logging_config import get_logger

logger = get_logger(__name__)


class FileHandler:
    """Handles file operations with proper error handling and logging."""

    @staticmethod
    def list_directory(directory: Path) -> List[DirectoryEntry]:
        """
        List the direct entries of a directory.

        Entries are returned in the order the filesystem yields them; sorting
        is left to the pairer.

        Args:
            directory: Directory to list

        Returns:
            List of DirectoryEntry objects

        Raises:
            DirectoryReadError: If the directory is missing, not a directory
                or cannot be read

        Example:
            >>> entries = FileHandler.list_directory(Path("/media/subs"))
            >>> print(f"Found {len(entries)} entries")
        """
        directory = Path(directory)
        try:
            entries = []
            with os.scandir(directory) as it:
                for entry in it:
                    entries.append(DirectoryEntry(
                        path=directory / entry.name,
                        is_dir=entry.is_dir()
                    ))
        except FileNotFoundError:
            raise DirectoryReadError(directory, "no such directory")
        except NotADirectoryError:
            raise DirectoryReadError(directory, "not a directory")
        except OSError as e:
            raise DirectoryReadError(directory, e.strerror or str(e)) from e

        logger.debug(f"Found {len(entries)} entries in {directory}")
        return entries

    @staticmethod
    def derive_output_path(video_path: Path) -> Path:
        """
        Derive the merged output path for a video file.

        ``/media/show/ep01.mkv`` becomes ``/media/show/ep01_merged.mkv``.

        Args:
            video_path: Path of the source video

        Returns:
            Path of the merged output, in the same directory

        Raises:
            OutputPathError: If the path has no stem or no extension
        """
        video_path = Path(video_path)
        if not video_path.name:
            raise OutputPathError(video_path, "no file name")
        if not video_path.suffix:
            raise OutputPathError(video_path, "no file extension")

        return video_path.parent / f"{video_path.stem}{MERGED_SUFFIX}{video_path.suffix}"
