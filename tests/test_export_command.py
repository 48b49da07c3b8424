"""
Tests for ExportCommand (reminder_export/commands/export.py) against an
in-memory reminder source.
"""

import io
import json
from datetime import timedelta
from unittest.mock import patch

import pytest

from reminder_export.commands.export import ACCESS_ADVISORY, ExportCommand
from reminder_export.core.exceptions import (
    ConfigurationError,
    MissingRequiredFieldError,
    SchemaViolationError,
    SourceUnavailableError,
)
from reminder_export.core.models import ExportConfig, OutputFormat, RecurrenceRule
from tests.fakes import FakeReminderSource


def _command(reminders, granted=True, **config):
    source = FakeReminderSource(reminders, granted=granted)
    stderr = io.StringIO()
    return ExportCommand(ExportConfig(**config), source=source, stderr=stderr), source, stderr


class TestBuild:

    def test_groups_filtered_records(self, make_reminder, base_time):
        reminders = [
            make_reminder(title="Buy milk", creation_date=base_time),
            make_reminder(title="Pay rent", is_completed=True,
                          creation_date=base_time + timedelta(minutes=5)),
            make_reminder(title="Standup", list_name="Work", account_name="Exchange"),
        ]
        cmd, _, _ = _command(reminders)
        grouped = cmd.build()
        assert [r["title"] for r in grouped["iCloud"]["Personal"]] == ["Buy milk"]
        assert [r["title"] for r in grouped["Exchange"]["Work"]] == ["Standup"]

    def test_include_completed(self, make_reminder):
        cmd, _, _ = _command([make_reminder(is_completed=True)], include_completed=True)
        assert cmd.build()["iCloud"]["Personal"][0]["completed"] is True

    def test_simple_format(self, make_reminder):
        cmd, _, _ = _command([make_reminder(title="x")], output_format=OutputFormat.SIMPLE)
        record = cmd.build()["iCloud"]["Personal"][0]
        assert "calendarItemIdentifier" not in record

    def test_invalid_pattern_fails_before_source_is_queried(self, make_reminder):
        cmd, source, _ = _command([make_reminder()], include_lists="(")
        with pytest.raises(ConfigurationError):
            cmd.build()
        assert source.access_requests == 0
        assert source.fetches == 0

    def test_access_denied_prints_advisory_and_continues(self, make_reminder):
        cmd, source, stderr = _command([make_reminder()], granted=False)
        grouped = cmd.build()
        assert ACCESS_ADVISORY in stderr.getvalue()
        assert source.fetches == 1
        assert grouped

    def test_source_unavailable(self):
        cmd, _, _ = _command(None)
        with pytest.raises(SourceUnavailableError):
            cmd.build()

    def test_missing_creation_date(self, make_reminder):
        cmd, _, _ = _command([make_reminder(creation_date=None)])
        with pytest.raises(MissingRequiredFieldError):
            cmd.build()


class TestRun:

    def test_writes_json_to_sink(self, make_reminder):
        cmd, _, _ = _command([make_reminder(title="Buy milk")])
        with patch("reminder_export.commands.export.write_output") as mock_write:
            assert cmd.run() is True
        payload, path = mock_write.call_args[0]
        assert path is None
        assert json.loads(payload)["reminders"]["iCloud"]["Personal"][0]["title"] == "Buy milk"

    def test_writes_file(self, make_reminder, tmp_path):
        target = tmp_path / "export.json"
        cmd, _, _ = _command([make_reminder(title="Buy milk")], output_path=str(target))
        assert cmd.run() is True
        assert json.loads(target.read_bytes())["reminders"]["iCloud"]["Personal"]

    def test_schema_violation_writes_nothing(self, make_reminder, tmp_path):
        target = tmp_path / "export.json"
        rules = [RecurrenceRule("RRULE FREQ=DAILY"), RecurrenceRule("RRULE FREQ=WEEKLY")]
        cmd, _, _ = _command(
            [make_reminder(), make_reminder(recurrence_rules=rules)],
            output_format=OutputFormat.SIMPLE, output_path=str(target),
        )
        with pytest.raises(SchemaViolationError):
            cmd.run()
        assert not target.exists()
