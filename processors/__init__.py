"""
Subtitle processing modules.

This package contains the processors that drive a muxing run:
- Batch muxing of a subtitle directory into a video directory
"""

from .batch_processor import BatchMuxProcessor, CommandRunner

__all__ = [
    'BatchMuxProcessor',
    'CommandRunner',
]
