"""
Test suite for reminder2json.

This package contains:
- Unit tests for the date formatter, mappers, filter, aggregator and exporter
- Conversion tests against EventKit-like fake objects
- CLI and command tests run against an in-memory reminder source
"""
