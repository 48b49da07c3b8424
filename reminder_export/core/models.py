"""
Domain models for reminder2json.

Reminders, alarms and recurrence rules are read-only snapshots taken from
the host store once per run. ExportConfig carries the user-facing settings
and knows how to load itself from, and save itself to, a JSON file.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional
import json
import logging
import os

from .exceptions import ConfigurationError


RRULE_MARKER = "RRULE "

logger = logging.getLogger(__name__)


def _normalize_path(path: str) -> str:
    """Expand user and convert to absolute path."""
    return os.path.abspath(os.path.expanduser(path))


def _coerce(name: str, value: Any, kind: type) -> Any:
    """Convert a config value to ``kind`` or raise ConfigurationError."""
    if isinstance(value, bool):
        raise ConfigurationError(f"{name} must be a number (got {value!r})")
    try:
        return kind(value)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"{name} must be a number (got {value!r})") from exc


class AlarmProximity(Enum):
    """Location alarm trigger, using EventKit's integer values."""

    NONE = 0
    ENTER = 1
    LEAVE = 2


class OutputFormat(Enum):
    """Export schema selection."""

    FULL = "full"
    SIMPLE = "simple"

    @classmethod
    def parse(cls, value: Any) -> OutputFormat:
        if isinstance(value, cls):
            return value
        normalized = str(value or "").strip()
        aliases = {
            "full": cls.FULL,
            "fulljson": cls.FULL,
            "simple": cls.SIMPLE,
            "remindmd": cls.SIMPLE,
        }
        try:
            return aliases[normalized.lower()]
        except KeyError:
            raise ConfigurationError(
                f"Unknown output format '{value}' "
                "(expected one of: full, simple, fullJson, remindmd)"
            ) from None


@dataclass(frozen=True)
class StructuredLocation:
    """Geofence attached to a location-based alarm."""

    title: Optional[str] = None


@dataclass(frozen=True)
class Alarm:
    """Represents a reminder alarm."""

    absolute_date: Optional[datetime] = None
    relative_offset: float = 0.0
    structured_location: Optional[StructuredLocation] = None
    proximity: AlarmProximity = AlarmProximity.NONE
    email_address: Optional[str] = None


@dataclass(frozen=True)
class RecurrenceRule:
    """Represents a recurrence rule by its canonical description."""

    description: str

    @property
    def rule_text(self) -> str:
        # Everything after the last marker; the whole text when there is none.
        return self.description.split(RRULE_MARKER)[-1]


@dataclass(frozen=True)
class Reminder:
    """Represents a reminder read from the host store."""

    calendar_item_identifier: str
    list_name: str
    account_name: str
    calendar_item_external_identifier: Optional[str] = None
    title: Optional[str] = None
    location: Optional[str] = None
    creation_date: Optional[datetime] = None
    last_modified_date: Optional[datetime] = None
    completion_date: Optional[datetime] = None
    time_zone: Optional[str] = None
    url: Optional[str] = None
    notes: Optional[str] = None
    alarms: Optional[List[Alarm]] = None
    recurrence_rules: Optional[List[RecurrenceRule]] = None
    priority: int = 0
    start_date: Optional[datetime] = None
    due_date: Optional[datetime] = None
    is_completed: bool = False


@dataclass
class ExportConfig:
    """Configuration for an export run."""

    include_lists: str = ".*"
    exclude_lists: str = ""
    include_completed: bool = False
    output_format: OutputFormat = OutputFormat.FULL
    output_path: Optional[str] = None
    indent: int = 2
    fetch_timeout: float = 30.0

    def __post_init__(self) -> None:
        self.output_format = OutputFormat.parse(self.output_format)
        if self.include_lists is None:
            self.include_lists = ""
        if self.exclude_lists is None:
            self.exclude_lists = ""
        if self.output_path:
            self.output_path = _normalize_path(self.output_path)
        if not isinstance(self.include_completed, bool):
            raise ConfigurationError(
                f"include_completed must be true or false (got {self.include_completed!r})"
            )
        self.indent = _coerce("indent", self.indent, int)
        self.fetch_timeout = _coerce("fetch_timeout", self.fetch_timeout, float)
        if self.indent < 0:
            raise ConfigurationError(f"indent must not be negative (got {self.indent})")
        if self.fetch_timeout <= 0:
            raise ConfigurationError(
                f"fetch_timeout must be positive (got {self.fetch_timeout})"
            )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "export": {
                "include_lists": self.include_lists,
                "exclude_lists": self.exclude_lists,
                "include_completed": self.include_completed,
                "output_format": self.output_format.value,
                "output_path": self.output_path,
                "indent": self.indent,
                "fetch_timeout": self.fetch_timeout,
            }
        }

    # ------------------------------------------------------------------
    # Persistence helpers
    # ------------------------------------------------------------------
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> ExportConfig:
        settings = data.get("export", {})
        defaults = cls()

        def pick(key: str, default: Any) -> Any:
            return settings.get(key, data.get(key, default))

        return cls(
            include_lists=pick("include_lists", defaults.include_lists),
            exclude_lists=pick("exclude_lists", defaults.exclude_lists),
            include_completed=pick("include_completed", defaults.include_completed),
            output_format=pick("output_format", defaults.output_format),
            output_path=pick("output_path", defaults.output_path),
            indent=pick("indent", defaults.indent),
            fetch_timeout=pick("fetch_timeout", defaults.fetch_timeout),
        )

    @classmethod
    def load_from_file(cls, config_path: str) -> ExportConfig:
        config_path = _normalize_path(config_path)
        if not os.path.exists(config_path):
            return cls()

        try:
            with open(config_path, "r", encoding="utf-8") as handle:
                data = json.load(handle)
        except (json.JSONDecodeError, OSError) as exc:
            logger.warning("Ignoring unreadable config %s: %s", config_path, exc)
            return cls()

        if not isinstance(data, dict):
            logger.warning("Ignoring config %s: top level is not an object", config_path)
            return cls()

        return cls.from_dict(data)

    def save_to_file(self, config_path: str) -> None:
        config_path = _normalize_path(config_path)
        os.makedirs(os.path.dirname(config_path), exist_ok=True)

        with open(config_path, "w", encoding="utf-8") as handle:
            json.dump(self.to_dict(), handle, indent=2, sort_keys=True)
            handle.write("\n")
