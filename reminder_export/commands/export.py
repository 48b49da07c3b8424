"""Export command - dump reminders as grouped JSON."""

import logging
import sys
from typing import Optional, TextIO

from ..core.models import ExportConfig
from ..export.aggregator import GroupedRecords, aggregate
from ..export.exporter import export_json
from ..export.filters import ListFilter
from ..export.mapper import get_mapper
from ..reminders.gateway import RemindersGateway
from ..reminders.source import ReminderSource
from ..utils.io import write_output

ACCESS_ADVISORY = "reminder2json needs access to reminders to function"


class ExportCommand:
    """Command for exporting reminders to JSON."""

    def __init__(self, config: ExportConfig, source: Optional[ReminderSource] = None,
                 verbose: bool = False, stderr: Optional[TextIO] = None):
        self.config = config
        self.verbose = verbose
        self.logger = logging.getLogger(__name__)
        if verbose:
            self.logger.setLevel(logging.DEBUG)
        self.source = source or RemindersGateway(
            logger=self.logger, timeout=config.fetch_timeout
        )
        self.stderr = stderr or sys.stderr

    def build(self) -> GroupedRecords:
        """
        Fetch, filter, map and group reminders.

        Raises:
            ConfigurationError: if a list pattern does not compile
            RemindersError: if the store cannot be queried
            MissingRequiredFieldError: if a reminder has no creation date
            SchemaViolationError: if a reminder does not fit the simple format
        """
        # Validate patterns before touching the store
        list_filter = ListFilter.from_config(self.config, logger=self.logger)
        map_fn = get_mapper(self.config.output_format)

        if not self.source.request_access():
            print(ACCESS_ADVISORY, file=self.stderr)

        reminders = self.source.fetch_reminders()
        self.logger.debug(f"Exporting from {len(reminders)} fetched reminders "
                          f"as {self.config.output_format.value}")
        return aggregate(reminders, map_fn, include=list_filter.should_include)

    def run(self) -> bool:
        """Run the export and hand the JSON to the output sink."""
        grouped = self.build()
        payload = export_json(grouped, indent=self.config.indent)
        write_output(payload, self.config.output_path)
        if self.config.output_path:
            self.logger.info(f"Wrote export to {self.config.output_path}")
        return True
