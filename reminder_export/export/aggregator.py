"""Grouping of mapped reminder records by account and list."""

import logging
from collections import defaultdict
from typing import Callable, Dict, Iterable, List, Optional

from ..core.exceptions import MissingRequiredFieldError
from ..core.models import Reminder
from ..utils.date import to_utc
from .mapper import Mapper, Record

GroupedRecords = Dict[str, Dict[str, List[Record]]]

logger = logging.getLogger(__name__)


def sort_by_creation(reminders: Iterable[Reminder]) -> List[Reminder]:
    """Sort ascending by creation date; ties keep their input order.

    Naive creation dates are compared as UTC.

    Raises:
        MissingRequiredFieldError: if any reminder has no creation date
    """
    batch = list(reminders)
    for reminder in batch:
        if reminder.creation_date is None:
            raise MissingRequiredFieldError(
                "creation date", reminder.calendar_item_identifier, reminder.title
            )
    return sorted(batch, key=lambda r: to_utc(r.creation_date))


def aggregate(reminders: Iterable[Reminder], map_fn: Mapper,
              include: Optional[Callable[[Reminder], bool]] = None) -> GroupedRecords:
    """
    Map reminders into ``{account: {list: [record, ...]}}``.

    Args:
        reminders: The whole fetched batch, unfiltered
        map_fn: ``map_full`` or ``map_simple``
        include: Predicate deciding which reminders are kept (all when None)

    Returns:
        Records grouped by account then list, each group in creation order.
        Any mapper error propagates and no partial result is returned.
    """
    ordered = sort_by_creation(reminders)

    grouped: Dict[str, Dict[str, List[Record]]] = defaultdict(lambda: defaultdict(list))
    skipped = 0
    for reminder in ordered:
        if include is not None and not include(reminder):
            skipped += 1
            continue
        grouped[reminder.account_name][reminder.list_name].append(map_fn(reminder))

    logger.debug(
        "Aggregated %d reminders (%d skipped) into %d accounts",
        len(ordered) - skipped, skipped, len(grouped)
    )
    return {account: dict(lists) for account, lists in grouped.items()}
