"""
Core module for reminder2json - contains domain models, configuration, and exceptions.
"""

from .models import (
    Reminder,
    Alarm,
    AlarmProximity,
    StructuredLocation,
    RecurrenceRule,
    OutputFormat,
    ExportConfig
)

from .exceptions import (
    ExportError,
    ConfigurationError,
    RemindersError,
    SourceUnavailableError,
    AuthorizationError,
    EventKitImportError,
    MissingRequiredFieldError,
    SchemaViolationError
)

__all__ = [
    # Models
    'Reminder',
    'Alarm',
    'AlarmProximity',
    'StructuredLocation',
    'RecurrenceRule',
    'OutputFormat',
    'ExportConfig',
    # Exceptions
    'ExportError',
    'ConfigurationError',
    'RemindersError',
    'SourceUnavailableError',
    'AuthorizationError',
    'EventKitImportError',
    'MissingRequiredFieldError',
    'SchemaViolationError'
]
