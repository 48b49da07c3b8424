"""Record mappers for reminders, alarms and recurrence rules.

Every optional source field is presence-checked and omitted from the record
when absent, so a mapped record never carries a null value.
"""

from typing import Any, Callable, Dict, List, Union

from ..core.exceptions import SchemaViolationError
from ..core.models import Alarm, AlarmProximity, OutputFormat, RecurrenceRule, Reminder
from ..utils.date import format_full, format_simple

Record = Dict[str, Any]
Mapper = Callable[[Reminder], Record]


def _seconds(value: float) -> Union[int, float]:
    value = float(value)
    return int(value) if value.is_integer() else value


def map_alarm(alarm: Alarm) -> Record:
    """Convert one alarm into a flat record. Type and sound are not exported."""
    record: Record = {}
    if alarm.absolute_date is not None:
        record["absoluteDate"] = format_full(alarm.absolute_date)
    if alarm.relative_offset and alarm.relative_offset > 0:
        record["relativeOffset"] = _seconds(alarm.relative_offset)

    if alarm.structured_location is not None:
        if alarm.structured_location.title is not None:
            record["structuredLocation"] = alarm.structured_location.title
        if alarm.proximity == AlarmProximity.ENTER:
            record["proximity"] = "enter"
        elif alarm.proximity == AlarmProximity.LEAVE:
            record["proximity"] = "leave"

    if alarm.email_address is not None:
        record["emailAddress"] = alarm.email_address
    return record


def map_recurrence_rule(rule: RecurrenceRule) -> Record:
    return {"rrule": rule.rule_text}


def map_full(reminder: Reminder) -> Record:
    """Map a reminder to the full schema.

    List and account names are left out; they only serve as grouping keys.
    """
    record: Record = {}
    _put(record, "calendarItemIdentifier", reminder.calendar_item_identifier)
    _put(record, "calendarItemExternalIdentifier", reminder.calendar_item_external_identifier)
    _put(record, "title", reminder.title)
    _put(record, "location", reminder.location)
    _put_date(record, "creationDate", reminder.creation_date, format_full)
    _put_date(record, "lastModifiedDate", reminder.last_modified_date, format_full)
    _put(record, "timeZone", reminder.time_zone)
    _put(record, "url", reminder.url)
    _put(record, "notes", reminder.notes)

    alarms = [map_alarm(alarm) for alarm in reminder.alarms or []]
    if alarms:
        record["alarms"] = alarms

    rules = [map_recurrence_rule(rule) for rule in reminder.recurrence_rules or []]
    if rules:
        record["recurrenceRules"] = rules

    record["priority"] = int(reminder.priority or 0)
    _put_date(record, "startDate", reminder.start_date, format_full)
    _put_date(record, "dueDate", reminder.due_date, format_full)
    record["completed"] = bool(reminder.is_completed)
    _put_date(record, "completionDate", reminder.completion_date, format_full)
    return record


def map_simple(reminder: Reminder) -> Record:
    """Map a reminder to the compact schema used for markdown-style output.

    Raises:
        SchemaViolationError: if the reminder has more than one recurrence rule
    """
    record: Record = {}
    _put(record, "title", reminder.title)
    _put_date(record, "creationDate", reminder.creation_date, format_simple)
    _put(record, "timeZone", reminder.time_zone)
    _put(record, "notes", reminder.notes)

    rules: List[RecurrenceRule] = list(reminder.recurrence_rules or [])
    if len(rules) > 1:
        raise SchemaViolationError(
            f"Unexpected multiple recurrence rules ({len(rules)}) on reminder "
            f"{reminder.calendar_item_identifier}; the simple format allows one",
            identifier=reminder.calendar_item_identifier,
        )
    if rules:
        record["recurrence"] = rules[0].rule_text

    record["priority"] = int(reminder.priority or 0)
    _put_date(record, "startDate", reminder.start_date, format_simple)
    _put_date(record, "dueDate", reminder.due_date, format_simple)
    record["completed"] = bool(reminder.is_completed)
    _put_date(record, "completionDate", reminder.completion_date, format_simple)
    return record


def get_mapper(output_format: OutputFormat) -> Mapper:
    if OutputFormat.parse(output_format) == OutputFormat.SIMPLE:
        return map_simple
    return map_full


def _put(record: Record, key: str, value: Any) -> None:
    if value is not None:
        record[key] = value


def _put_date(record: Record, key: str, value, formatter) -> None:
    if value is not None:
        record[key] = formatter(value)
