"""
Command implementations for reminder2json.
"""

from .export import ExportCommand

__all__ = [
    'ExportCommand',
]
