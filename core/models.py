"""
Data structures shared by the muxing pipeline.

This module provides:
- Directory entries as produced by the directory lister
- Subtitle/video pairs produced by positional pairing
- The resolved, read-only run configuration
- FFmpeg command lines and batch results
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple
from utils.constants import FFMPEG_BINARY


@dataclass(frozen=True)
class DirectoryEntry:
    """A direct child of a listed directory."""
    path: Path
    is_dir: bool = False

    @property
    def name(self) -> str:
        return self.path.name

    def __str__(self) -> str:
        return str(self.path)


@dataclass(frozen=True)
class FilePair:
    """A subtitle file and the video file it will be muxed into."""
    subtitle_path: Path
    video_path: Path

    def __iter__(self):
        return iter((self.subtitle_path, self.video_path))


@dataclass(frozen=True)
class RunConfig:
    """
    Configuration resolved once from the command line.

    The offset is handed to ffmpeg's ``-itsoffset`` which shifts the *video*
    input, so a positive value makes the subtitles appear earlier and a
    negative value makes them appear later.
    """
    source_dir: Path
    target_dir: Path
    language: str = ""
    offset: Optional[int] = None
    stop_after: Optional[int] = None
    overwrite: bool = False
    verbose: bool = False
    dry_run: bool = False

    @classmethod
    def from_args(cls, args) -> 'RunConfig':
        """
        Build a configuration from parsed command-line arguments.

        Args:
            args: Namespace returned by the CLI parser

        Returns:
            RunConfig instance
        """
        return cls(
            source_dir=Path(args.source_dir),
            target_dir=Path(args.target_dir),
            language=args.language,
            offset=args.offset,
            stop_after=args.exit,
            overwrite=args.yes,
            verbose=args.verbose,
            dry_run=getattr(args, 'dry_run', False),
        )

    @property
    def language_tag(self) -> str:
        """Language tag with surrounding whitespace removed."""
        return self.language.strip()

    @property
    def limit(self) -> Optional[int]:
        """Pair limit, or None when stopping early is disabled."""
        if self.stop_after and self.stop_after > 0:
            return self.stop_after
        return None


@dataclass(frozen=True)
class MuxCommand:
    """An ffmpeg invocation for a single pair."""
    args: Tuple[str, ...]
    output_path: Path
    program: str = FFMPEG_BINARY

    @property
    def argv(self) -> List[str]:
        """Full argument vector, program first."""
        return [self.program, *self.args]

    def __str__(self) -> str:
        return ' '.join(self.argv)


@dataclass(frozen=True)
class BatchResult:
    """Outcome of a completed batch run."""
    processed: int
    unpaired_subtitles: Tuple[Path, ...] = field(default_factory=tuple)
    unpaired_videos: Tuple[Path, ...] = field(default_factory=tuple)
    dry_run: bool = False
