"""
User interface modules.

This package contains the user interfaces of the application:
- Command-line interface
"""

from .cli import CLIHandler

__all__ = ['CLIHandler']
