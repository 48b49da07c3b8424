"""Apple Reminders gateway using EventKit."""

import threading
import time
from datetime import datetime, timezone
from typing import List, Optional
import logging

from reminder_export.core.exceptions import (
    RemindersError,
    SourceUnavailableError,
    EventKitImportError
)
from reminder_export.core.models import (
    Alarm,
    AlarmProximity,
    RecurrenceRule,
    Reminder,
    StructuredLocation
)
from reminder_export.utils.date import from_epoch


def _text(value) -> Optional[str]:
    if value is None:
        return None
    return str(value)


def _description(value) -> Optional[str]:
    """Textual description of an NSObject (NSTimeZone, NSURL, ...)."""
    if value is None:
        return None
    if hasattr(value, 'description'):
        return str(value.description())
    return str(value)


def nsdate_to_datetime(nsdate) -> Optional[datetime]:
    """Convert NSDate to an aware UTC datetime."""
    if nsdate is None:
        return None
    return from_epoch(nsdate.timeIntervalSince1970())


def components_to_datetime(components, calendar=None) -> Optional[datetime]:
    """
    Resolve NSDateComponents to a concrete timestamp.

    Uses ``calendar.dateFromComponents_`` when a calendar is given, otherwise
    composes the date from its year/month/day/hour/minute/second fields in
    UTC. Returns None when the components do not name a full date.
    """
    if components is None:
        return None
    if calendar is not None:
        return nsdate_to_datetime(calendar.dateFromComponents_(components))

    # NSDateComponentUndefined is NSIntegerMax
    def field(name):
        value = getattr(components, name)()
        if value is None or value >= 2 ** 62:
            return None
        return int(value)

    year, month, day = field('year'), field('month'), field('day')
    if not (year and month and day):
        return None
    return datetime(
        year, month, day,
        field('hour') or 0, field('minute') or 0, field('second') or 0,
        tzinfo=timezone.utc
    )


def alarm_from_eventkit(alarm) -> Alarm:
    """Snapshot an EKAlarm."""
    location = None
    ek_location = alarm.structuredLocation()
    if ek_location is not None:
        location = StructuredLocation(title=_text(ek_location.title()))

    try:
        proximity = AlarmProximity(int(alarm.proximity()))
    except ValueError:
        proximity = AlarmProximity.NONE

    return Alarm(
        absolute_date=nsdate_to_datetime(alarm.absoluteDate()),
        relative_offset=float(alarm.relativeOffset() or 0),
        structured_location=location,
        proximity=proximity,
        email_address=_text(alarm.emailAddress()),
    )


def rule_from_eventkit(rule) -> RecurrenceRule:
    """Snapshot an EKRecurrenceRule by its description."""
    return RecurrenceRule(description=_description(rule) or "")


def reminder_from_eventkit(rem, calendar=None) -> Reminder:
    """
    Snapshot an EKReminder.

    Args:
        rem: EKReminder (or an object exposing the same accessor methods)
        calendar: NSCalendar used to resolve start/due date components
    """
    ek_calendar = rem.calendar()
    list_name = ""
    account_name = ""
    if ek_calendar is not None:
        list_name = str(ek_calendar.title() or "")
        source = ek_calendar.source()
        if source is not None:
            account_name = str(source.title() or "")

    alarms = rem.alarms()
    rules = rem.recurrenceRules()

    return Reminder(
        calendar_item_identifier=str(rem.calendarItemIdentifier()),
        calendar_item_external_identifier=_text(rem.calendarItemExternalIdentifier()),
        list_name=list_name,
        account_name=account_name,
        title=_text(rem.title()),
        location=_text(rem.location()),
        creation_date=nsdate_to_datetime(rem.creationDate()),
        last_modified_date=nsdate_to_datetime(rem.lastModifiedDate()),
        completion_date=nsdate_to_datetime(rem.completionDate()),
        time_zone=_description(rem.timeZone()),
        url=_description(rem.URL()),
        notes=_text(rem.notes()),
        alarms=[alarm_from_eventkit(a) for a in alarms] if alarms is not None else None,
        recurrence_rules=[rule_from_eventkit(r) for r in rules] if rules is not None else None,
        priority=int(rem.priority() or 0),
        start_date=components_to_datetime(rem.startDateComponents(), calendar),
        due_date=components_to_datetime(rem.dueDateComponents(), calendar),
        is_completed=bool(rem.isCompleted()),
    )


class RemindersGateway:
    """Read-only gateway for Apple Reminders via EventKit."""

    def __init__(self, logger: Optional[logging.Logger] = None, timeout: float = 30.0):
        self.logger = logger or logging.getLogger(__name__)
        self.timeout = timeout
        self._store = None
        self._authorized = False

    def _ensure_eventkit(self):
        """Import EventKit with specific error handling."""
        try:
            from EventKit import EKEventStore, EKEntityTypeReminder
            from Foundation import NSCalendar, NSDate, NSRunLoop

            self._EKEventStore = EKEventStore
            self._EKEntityTypeReminder = EKEntityTypeReminder
            self._NSCalendar = NSCalendar
            self._NSRunLoop = NSRunLoop
            self._NSDate = NSDate

        except ImportError as e:
            self.logger.error(f"EventKit import failed: {e}")
            raise EventKitImportError(
                "EventKit not available. Please install PyObjC framework:\n"
                "  pip install 'reminder2json[macos]'\n"
                f"Import error details: {e}"
            ) from e

    def _get_store(self):
        """Get or create the EventKit store."""
        if self._store is not None:
            return self._store

        self._ensure_eventkit()
        try:
            self._store = self._EKEventStore.alloc().init()
            self.logger.debug("EventKit store created successfully")
        except Exception as e:
            self.logger.error(f"Failed to create EventKit store: {e}")
            raise RemindersError(f"Failed to initialize EventKit store: {e}") from e
        return self._store

    def _wait(self, done: threading.Event, what: str) -> bool:
        """Pump the run loop until ``done`` is set; False on timeout."""
        start_time = time.time()
        while not done.is_set():
            if time.time() - start_time > self.timeout:
                self.logger.warning(f"{what} timed out after {self.timeout} seconds")
                return False
            self._NSRunLoop.currentRunLoop().runUntilDate_(
                self._NSDate.dateWithTimeIntervalSinceNow_(0.1)
            )
        return True

    def request_access(self) -> bool:
        """Ask for access to reminders. Returns whether access was granted."""
        store = self._get_store()

        done = threading.Event()
        result = {'granted': False, 'error': None}

        def completion(granted, error):
            result['granted'] = bool(granted)
            result['error'] = error
            done.set()

        self.logger.info("Requesting EventKit access to reminders...")
        if hasattr(store, 'requestFullAccessToRemindersWithCompletion_'):
            store.requestFullAccessToRemindersWithCompletion_(completion)
        else:
            store.requestAccessToEntityType_completion_(
                self._EKEntityTypeReminder, completion
            )

        if not self._wait(done, "Authorization request"):
            return False

        if not result['granted']:
            self.logger.warning(f"Access to reminders was not granted: {result['error']}")
        self._authorized = result['granted']
        return self._authorized

    def fetch_reminders(self) -> List[Reminder]:
        """Fetch every reminder in every list."""
        store = self._get_store()
        predicate = store.predicateForRemindersInCalendars_(None)

        done = threading.Event()
        fetched = {'reminders': None}

        def completion(reminders):
            fetched['reminders'] = reminders
            done.set()

        store.fetchRemindersMatchingPredicate_completion_(predicate, completion)

        if not self._wait(done, "Reminder fetch"):
            raise SourceUnavailableError(
                f"Reminder fetch timed out after {self.timeout} seconds"
            )
        if fetched['reminders'] is None:
            raise SourceUnavailableError("The Reminders store returned no data")

        calendar = self._NSCalendar.currentCalendar()
        result = [reminder_from_eventkit(rem, calendar) for rem in fetched['reminders']]
        self.logger.debug(f"Fetched {len(result)} reminders")
        return result
