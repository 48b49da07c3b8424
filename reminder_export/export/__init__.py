"""Reminder transformation pipeline: filter, map, group, serialize."""

from .mapper import map_alarm, map_recurrence_rule, map_full, map_simple, get_mapper
from .filters import ListFilter, should_include
from .aggregator import aggregate, sort_by_creation
from .exporter import export_json, build_document

__all__ = [
    'map_alarm',
    'map_recurrence_rule',
    'map_full',
    'map_simple',
    'get_mapper',
    'ListFilter',
    'should_include',
    'aggregate',
    'sort_by_creation',
    'export_json',
    'build_document',
]
