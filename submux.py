#!/usr/bin/env python3
"""
Subtitle Muxer - Main Application Entry Point
=============================================

Adds subtitle files to video files in bulk using ffmpeg. The subtitle
directory and the video directory are both sorted by name and paired entry
by entry; every pair is remuxed (stream copy, no re-encoding) into
``<video stem>_merged.<video extension>`` beside the original video.
Previously merged files in the video directory are ignored, so a run can be
repeated on the same directories.

Usage:
    python submux.py -s subs/ -t episodes/ -l eng
    python submux.py -s subs/ -t episodes/ -l eng --offset=-2 --yes
    python submux.py --help

Version: 1.0.0
"""

import sys
from pathlib import Path

# Add the current directory to Python path for imports
sys.path.insert(0, str(Path(__file__).parent))

from ui.cli import CLIHandler


def main():
    """
    Main application entry point.

    Parses the command line, runs the batch and exits with its status.
    """
    cli_handler = CLIHandler()
    sys.exit(cli_handler.run())


if __name__ == '__main__':
    main()
