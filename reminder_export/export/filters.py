"""List/completion filter deciding which reminders are exported."""

import logging
import re
from typing import Optional, Pattern

from ..core.exceptions import ConfigurationError
from ..core.models import ExportConfig, Reminder


def _compile(option: str, pattern: str) -> Optional[Pattern]:
    if not pattern:
        return None
    try:
        return re.compile(pattern)
    except re.error as exc:
        raise ConfigurationError(f"Invalid {option} pattern '{pattern}': {exc}") from exc


class ListFilter:
    """Include/exclude reminders by list name pattern and completion state.

    Patterns are searched anywhere in the list name. An empty include
    pattern includes every list; an empty exclude pattern excludes none.
    Both patterns are compiled up front so a bad pattern fails before any
    reminder is looked at.
    """

    def __init__(self, include_pattern: str = ".*", exclude_pattern: str = "",
                 include_completed: bool = False,
                 logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)
        self.include_pattern = include_pattern or ""
        self.exclude_pattern = exclude_pattern or ""
        self.include_completed = include_completed
        self._include_re = _compile("include-lists", self.include_pattern)
        self._exclude_re = _compile("exclude-lists", self.exclude_pattern)

    @classmethod
    def from_config(cls, config: ExportConfig,
                    logger: Optional[logging.Logger] = None) -> "ListFilter":
        return cls(
            include_pattern=config.include_lists,
            exclude_pattern=config.exclude_lists,
            include_completed=config.include_completed,
            logger=logger,
        )

    def should_include(self, reminder: Reminder) -> bool:
        if not self.include_completed and reminder.is_completed:
            return False
        list_name = reminder.list_name or ""
        if self._exclude_re is not None and self._exclude_re.search(list_name):
            return False
        return self._include_re is None or self._include_re.search(list_name) is not None


def should_include(reminder: Reminder, include_pattern: str = ".*",
                   exclude_pattern: str = "", include_completed: bool = False) -> bool:
    """One-shot form of ``ListFilter.should_include``."""
    return ListFilter(include_pattern, exclude_pattern, include_completed).should_include(reminder)
