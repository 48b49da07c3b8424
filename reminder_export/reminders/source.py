"""Interface every reminder source implements."""

from typing import List, Protocol

from ..core.models import Reminder


class ReminderSource(Protocol):
    """Permission gate plus batch fetch over a reminder store."""

    def request_access(self) -> bool:
        ...

    def fetch_reminders(self) -> List[Reminder]:
        ...
