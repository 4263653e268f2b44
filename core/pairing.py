"""
Positional pairing of subtitle files with video files.

Pairing is purely structural: both listings are sorted by their full path
string and the i-th subtitle is muxed into the i-th video. File names are
never compared, so a single extra or missing file in either directory
shifts every pair after it.
"""

from typing import Iterable, List, Optional, Tuple
from utils.constants import MERGED_SUFFIX
from utils.logging_config import get_logger
from core.models import DirectoryEntry, FilePair

logger = get_logger(__name__)


class FilePairer:
    """Filters, sorts and zips directory listings into subtitle/video pairs."""

    @staticmethod
    def is_merged_output(entry: DirectoryEntry) -> bool:
        """Check whether an entry is the result of a previous merge."""
        return entry.path.stem.endswith(MERGED_SUFFIX)

    @staticmethod
    def filter_targets(entries: Iterable[DirectoryEntry]) -> List[DirectoryEntry]:
        """
        Drop directories and previous merge results from a video listing.

        Only the target side is filtered; running twice on the same video
        directory must not pair an old ``*_merged`` file as a fresh video.

        Args:
            entries: Raw target directory listing

        Returns:
            Entries that are files and not merged outputs, in input order
        """
        filtered = []
        for entry in entries:
            if entry.is_dir:
                logger.debug(f"Skipping directory: {entry.path}")
                continue
            if FilePairer.is_merged_output(entry):
                logger.debug(f"Skipping merged output: {entry.path}")
                continue
            filtered.append(entry)
        return filtered

    @staticmethod
    def sort_entries(entries: Iterable[DirectoryEntry]) -> List[DirectoryEntry]:
        """Sort entries by their full path string, ascending."""
        return sorted(entries, key=lambda entry: str(entry.path))

    @staticmethod
    def pair(source_entries: Iterable[DirectoryEntry],
             target_entries: Iterable[DirectoryEntry],
             limit: Optional[int] = None) -> List[FilePair]:
        """
        Zip sorted subtitle and video listings into pairs.

        Args:
            source_entries: Subtitle directory listing, used unfiltered
            target_entries: Filtered video directory listing
            limit: Stop after this many pairs; None or 0 disables the limit

        Returns:
            List of FilePair objects, at most as long as the shorter listing

        Example:
            >>> pairs = FilePairer.pair(subtitles, FilePairer.filter_targets(videos))
            >>> print(pairs[0].subtitle_path, pairs[0].video_path)
        """
        sources = FilePairer.sort_entries(source_entries)
        targets = FilePairer.sort_entries(target_entries)

        pairs = []
        for idx, (source, target) in enumerate(zip(sources, targets)):
            if limit and idx == limit:
                break
            pairs.append(FilePair(subtitle_path=source.path, video_path=target.path))
        return pairs

    @staticmethod
    def unpaired(source_entries: Iterable[DirectoryEntry],
                 target_entries: Iterable[DirectoryEntry]) -> Tuple[List[DirectoryEntry], List[DirectoryEntry]]:
        """
        Find the entries left over once the shorter listing runs out.

        Returns:
            Tuple of (leftover subtitle entries, leftover video entries);
            at most one of them is non-empty
        """
        sources = FilePairer.sort_entries(source_entries)
        targets = FilePairer.sort_entries(target_entries)
        count = min(len(sources), len(targets))
        return sources[count:], targets[count:]
