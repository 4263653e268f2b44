"""
Shared constants for the subtitle muxer.

This module contains the constants used across the application:
- FFmpeg program name and the arguments that never vary between pairs
- The reserved suffix marking already-merged outputs
- Logging formats and application metadata
"""

from typing import List

# ============================================================================
# FFMPEG CONSTANTS
# ============================================================================

# External muxing tool, resolved through PATH
FFMPEG_BINARY: str = "ffmpeg"

# Stream mapping: every stream of input 0 (video) and input 1 (subtitle)
FFMPEG_STREAM_MAP: List[str] = ["-map", "0", "-map", "1"]

# Container-level remux only, never a transcode
FFMPEG_STREAM_COPY: List[str] = ["-c", "copy"]

# Metadata specifier for the language of the added subtitle stream
FFMPEG_SUBTITLE_LANGUAGE_FLAG: str = "-metadata:s:s:1"

# Number of stderr characters logged when ffmpeg exits non-zero in quiet mode
FFMPEG_STDERR_TAIL: int = 500

# ============================================================================
# OUTPUT NAMING
# ============================================================================

# Stem suffix of merged outputs; target entries carrying it are never paired
MERGED_SUFFIX: str = "_merged"

# ============================================================================
# DEFAULT CONFIGURATION VALUES
# ============================================================================

# Default log format
DEFAULT_LOG_FORMAT: str = '%(asctime)s - %(levelname)s - %(message)s'
DEFAULT_LOG_DATE_FORMAT: str = '%Y-%m-%d %H:%M:%S'

# Root logger of the application, module loggers hang below it
APP_LOGGER_NAME: str = "submux"

# Application metadata
APP_NAME: str = "Subtitle Muxer"
APP_VERSION: str = "1.0.0"
APP_DESCRIPTION: str = """
Add subtitles to video files in bulk with ffmpeg.

Put the subtitle files in one directory and the video files in another.
Both directories are sorted by name and paired entry by entry, so make sure
they contain only the matching files and nothing else.
"""
