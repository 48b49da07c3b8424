"""
Exception classes for reminder2json.
"""


class ExportError(Exception):
    """Base exception for all reminder2json errors."""
    pass


class ConfigurationError(ExportError):
    """Raised when configuration is invalid (bad list pattern, unknown format)."""
    pass


class RemindersError(ExportError):
    """Base exception for Reminders store errors."""
    pass


class SourceUnavailableError(RemindersError):
    """Raised when the Reminders store returns no usable result."""
    pass


class AuthorizationError(RemindersError):
    """Raised when EventKit authorization fails."""
    pass


class EventKitImportError(RemindersError):
    """Raised when EventKit/PyObjC dependencies are not available."""
    pass


class MissingRequiredFieldError(ExportError):
    """Raised when a reminder lacks a field the export cannot do without."""

    def __init__(self, field_name: str, identifier: str, title=None):
        self.field_name = field_name
        self.identifier = identifier
        self.title = title
        label = f"'{title}' ({identifier})" if title else identifier
        super().__init__(f"Reminder {label} has no {field_name}")


class SchemaViolationError(ExportError):
    """Raised when a reminder cannot be represented in the selected schema."""

    def __init__(self, message: str, identifier=None):
        self.identifier = identifier
        super().__init__(message)
