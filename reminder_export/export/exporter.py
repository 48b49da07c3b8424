"""JSON serialization of grouped reminder records."""

import json
from typing import Any, Dict

from .aggregator import GroupedRecords

ROOT_KEY = "reminders"


def build_document(grouped: GroupedRecords) -> Dict[str, Any]:
    """Wrap grouped records under the top-level "reminders" key."""
    return {ROOT_KEY: grouped}


def export_json(grouped: GroupedRecords, indent: int = 2) -> bytes:
    """
    Serialize grouped records as pretty-printed UTF-8 JSON.

    Keys are sorted at every level; list order is left untouched.
    """
    text = json.dumps(build_document(grouped), indent=indent,
                      sort_keys=True, ensure_ascii=False)
    return text.encode("utf-8")
