"""Reminders module for Apple Reminders integration."""

from .gateway import RemindersGateway, reminder_from_eventkit
from .source import ReminderSource

__all__ = ['RemindersGateway', 'ReminderSource', 'reminder_from_eventkit']
