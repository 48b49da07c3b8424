"""
reminder2json - Apple Reminders to JSON exporter.
"""

__version__ = "0.2.0"
