"""
Batch muxing of a subtitle directory into a video directory.

This module drives the whole run: both directories are listed once up front,
the video listing is filtered, the listings are paired by sorted position and
ffmpeg is invoked for one pair at a time. The first failure aborts the run.
"""

from typing import Callable, Optional
from core.exceptions import MuxExitError
from core.models import BatchResult, FilePair, MuxCommand, RunConfig
from core.pairing import FilePairer
from core.video_containers import VideoContainerHandler
from utils.file_operations import FileHandler
from utils.logging_config import get_logger

logger = get_logger(__name__)

# run(command, verbose) -> exit status
CommandRunner = Callable[[MuxCommand, bool], int]


class BatchMuxProcessor:
    """Muxes every subtitle/video pair of a run, sequentially."""

    def __init__(self, runner: Optional[CommandRunner] = None):
        """
        Initialize the batch processor.

        Args:
            runner: Callable executing a MuxCommand and returning its exit
                status; defaults to running ffmpeg through subprocess
        """
        self.runner = runner or VideoContainerHandler.run_command

    def process(self, config: RunConfig) -> BatchResult:
        """
        Mux all pairs described by a run configuration.

        Args:
            config: Resolved run configuration

        Returns:
            BatchResult with the number of processed pairs and leftovers

        Raises:
            DirectoryReadError: If either directory cannot be listed
            OutputPathError: If an output name cannot be derived for a video
            SpawnError: If ffmpeg cannot be launched
            MuxExitError: If ffmpeg exits with a non-zero status

        Example:
            >>> processor = BatchMuxProcessor()
            >>> result = processor.process(RunConfig(Path("subs"), Path("videos"), "eng"))
            >>> print(f"Muxed {result.processed} files")
        """
        source_entries = FileHandler.list_directory(config.source_dir)
        target_entries = FilePairer.filter_targets(
            FileHandler.list_directory(config.target_dir)
        )

        logger.debug(f"{len(source_entries)} subtitle entries in {config.source_dir}, "
                     f"{len(target_entries)} video files in {config.target_dir}")

        leftover_subtitles, leftover_videos = FilePairer.unpaired(source_entries, target_entries)
        if leftover_subtitles:
            logger.warning(f"{len(leftover_subtitles)} subtitle file(s) have no video to pair with: "
                           f"{', '.join(entry.name for entry in leftover_subtitles)}")
        if leftover_videos:
            logger.warning(f"{len(leftover_videos)} video file(s) have no subtitle to pair with: "
                           f"{', '.join(entry.name for entry in leftover_videos)}")

        pairs = FilePairer.pair(source_entries, target_entries, limit=config.limit)
        if config.limit and min(len(source_entries), len(target_entries)) > config.limit:
            logger.info(f"Stopping after {config.limit} pair(s)")

        for i, pair in enumerate(pairs, 1):
            logger.debug(f"Processing pair {i}/{len(pairs)}")
            self.process_pair(pair, config)

        return BatchResult(
            processed=len(pairs),
            unpaired_subtitles=tuple(entry.path for entry in leftover_subtitles),
            unpaired_videos=tuple(entry.path for entry in leftover_videos),
            dry_run=config.dry_run,
        )

    def process_pair(self, pair: FilePair, config: RunConfig) -> MuxCommand:
        """
        Build and run the ffmpeg command for a single pair.

        Args:
            pair: Subtitle and video paths
            config: Resolved run configuration

        Returns:
            The command that was run (or would have been, in dry-run mode)
        """
        logger.info(f"Subtitle path: {pair.subtitle_path}")
        logger.info(f"Video path: {pair.video_path}")

        output_path = FileHandler.derive_output_path(pair.video_path)
        logger.info(f"Output path: {output_path}")

        command = VideoContainerHandler.build_mux_command(pair, config, output_path)

        if config.dry_run:
            logger.info(f"Dry run, not executing: {command}")
            return command

        returncode = self.runner(command, config.verbose)
        if returncode != 0:
            logger.error(f"✗ Failed to mux: {pair.video_path.name}")
            raise MuxExitError(command.program, returncode, output_path)

        logger.info(f"✓ Successfully muxed: {output_path.name}")
        return command
