"""
Core muxing modules.

This package contains the fundamental components of the subtitle muxer:
- Data structures for entries, pairs, configuration and commands
- Positional pairing of subtitle and video listings
- FFmpeg command construction and execution
- The exception hierarchy
"""

from .exceptions import SubmuxError, DirectoryReadError, OutputPathError, SpawnError, MuxExitError
from .models import DirectoryEntry, FilePair, RunConfig, MuxCommand, BatchResult
from .pairing import FilePairer
from .video_containers import VideoContainerHandler

__all__ = [
    'SubmuxError',
    'DirectoryReadError',
    'OutputPathError',
    'SpawnError',
    'MuxExitError',
    'DirectoryEntry',
    'FilePair',
    'RunConfig',
    'MuxCommand',
    'BatchResult',
    'FilePairer',
    'VideoContainerHandler',
]
