"""
Command-line interface for the Subtitle Muxer.

This module parses the command line into a RunConfig, sets up logging and
runs the batch processor, turning fatal errors into process exit codes.
"""

import argparse
import logging
from pathlib import Path
from typing import Optional
from core.exceptions import SubmuxError
from core.models import RunConfig
from processors.batch_processor import BatchMuxProcessor, CommandRunner
from utils.constants import APP_NAME, APP_VERSION, APP_DESCRIPTION
from utils.logging_config import setup_logging, get_logger

logger = get_logger(__name__)


def setup_cli_logging(debug: bool = False, log_file: Optional[Path] = None,
                      use_colors: bool = True) -> logging.Logger:
    """Set up logging for CLI operations."""
    level = logging.DEBUG if debug else logging.INFO
    return setup_logging(level=level, log_file=log_file, use_colors=use_colors)


def non_negative_int(value: str) -> int:
    """argparse type for counts where 0 means "no limit"."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}")
    if number < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {value}")
    return number


class CLIHandler:
    """Handles command-line interface operations."""

    def __init__(self, runner: Optional[CommandRunner] = None):
        """
        Initialize the CLI handler.

        Args:
            runner: Optional ffmpeg runner passed to the batch processor
        """
        self.processor = BatchMuxProcessor(runner=runner)

    def create_parser(self) -> argparse.ArgumentParser:
        """
        Create the argument parser.

        Returns:
            Configured ArgumentParser instance
        """
        parser = argparse.ArgumentParser(
            prog='submux',
            description=APP_DESCRIPTION,
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  # Add English subtitles to every episode
  submux -s subs/ -t episodes/ -l eng

  # Shift the subtitles 2 seconds later and overwrite earlier results
  submux -s subs/ -t episodes/ -l eng -o -2 -y

  # Try the first pair only, with full ffmpeg output
  submux -s subs/ -t episodes/ -l "" -e 1 -v
            """
        )

        parser.add_argument('--version', action='version', version=f'{APP_NAME} {APP_VERSION}')
        parser.add_argument('-e', '--exit', type=non_negative_int, metavar='N',
                            help='Exit after the Nth pair was processed (0 = process all)')
        parser.add_argument('-l', '--language', required=True,
                            help='Language of the subtitles, usually a 3 letter ISO 639 code '
                                 '(e.g. eng); pass an empty string to leave it unset')
        parser.add_argument('-o', '--offset', type=int, metavar='SECONDS',
                            help='Subtitle offset in seconds, passed to ffmpeg -itsoffset. '
                                 'The sign is inverted: a positive number shows the subtitles '
                                 'earlier, a negative number shows them later')
        parser.add_argument('-s', '--source-dir', type=Path, required=True,
                            help='Directory containing the subtitle files')
        parser.add_argument('-t', '--target-dir', type=Path, required=True,
                            help='Directory containing the video files; merged files are written here')
        parser.add_argument('-v', '--verbose', action='store_true',
                            help='Show the full ffmpeg output')
        parser.add_argument('-y', '--yes', action='store_true',
                            help='Overwrite existing output files (adds -y to ffmpeg)')
        parser.add_argument('-n', '--dry-run', action='store_true',
                            help='Print the pairs and ffmpeg commands without running them')
        parser.add_argument('-d', '--debug', action='store_true', help='Enable debug output')
        parser.add_argument('--log-file', type=Path, help='Also write the log to this file')
        parser.add_argument('--no-colors', action='store_true', help='Disable colored output')

        return parser

    def handle_command(self, args) -> int:
        """
        Handle the parsed command-line arguments.

        Args:
            args: Parsed arguments from argparse

        Returns:
            Exit code (0 for success, non-zero for failure)
        """
        setup_cli_logging(args.debug, args.log_file, use_colors=not args.no_colors)

        config = RunConfig.from_args(args)
        logger.debug(f"Run configuration: {config}")

        try:
            result = self.processor.process(config)
        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            return 130
        except SubmuxError as e:
            logger.error(str(e))
            if args.debug:
                logger.exception("Traceback:")
            return 1

        if result.dry_run:
            logger.info(f"Dry run complete: {result.processed} pair(s) would be muxed")
        else:
            logger.info(f"Done: {result.processed} pair(s) muxed")
        return 0

    def run(self, argv=None) -> int:
        """Parse ``argv`` (defaults to sys.argv) and handle the command."""
        args = self.create_parser().parse_args(argv)
        return self.handle_command(args)
