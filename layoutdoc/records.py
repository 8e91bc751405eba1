"""
Field access for layout block records.

Block records arrive as plain mappings decoded from the layout parser's JSON.
Every field is optional: the helpers here return a default instead of raising
when a field is missing, null or of the wrong shape, so a single sloppy record
never aborts a whole document.

Field names follow the layout parser's output. A few spellings used by other
producers are accepted as aliases.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

# Canonical tag value -> accepted spellings
TAG_ALIASES: dict[str, tuple[str, ...]] = {
    "header": ("header", "section", "heading"),
    "para": ("para", "paragraph"),
    "list_item": ("list_item", "list-item", "listitem"),
    "table": ("table",),
}

_TAG_LOOKUP = {alias: canonical for canonical, names in TAG_ALIASES.items() for alias in names}

# Table row kinds
ROW_HEADER = "header"
ROW_FULL = "full"
ROW_DATA = "data"

_ROW_KIND_LOOKUP = {
    "table_header": ROW_HEADER,
    "header-row": ROW_HEADER,
    "header_row": ROW_HEADER,
    "full_row": ROW_FULL,
    "full-row": ROW_FULL,
}

# Field names and their aliases
FIELD_ALIASES: dict[str, tuple[str, ...]] = {
    "tag": ("tag",),
    "level": ("level",),
    "page_idx": ("page_idx", "pageIndex"),
    "block_idx": ("block_idx", "blockIndex"),
    "top": ("top",),
    "left": ("left",),
    "bbox": ("bbox",),
    "sentences": ("sentences",),
    "name": ("name",),
    "table_rows": ("table_rows", "rows"),
    "row_type": ("type", "tag"),
    "cells": ("cells",),
    "col_span": ("col_span", "colSpan"),
    "cell_value": ("cell_value", "value"),
}


def get_field(record: Mapping[str, Any], field_name: str, default: Any = None) -> Any:
    """Return the first non-null value stored under a field or one of its aliases."""
    for key in FIELD_ALIASES.get(field_name, (field_name,)):
        value = record.get(key)
        if value is not None:
            return value
    return default


def get_int(record: Mapping[str, Any], field_name: str, default: int = -1) -> int:
    """Integer field, or `default` when absent or not numeric."""
    value = get_field(record, field_name)
    if value is None or isinstance(value, bool):
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def get_float(record: Mapping[str, Any], field_name: str, default: float = -1.0) -> float:
    """Float field, or `default` when absent or not numeric."""
    value = get_field(record, field_name)
    if value is None or isinstance(value, bool):
        return default
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


def get_float_list(record: Mapping[str, Any], field_name: str) -> list[float]:
    """List of floats (e.g. a bounding box). Non-numeric entries make it empty."""
    value = get_field(record, field_name)
    if not isinstance(value, (list, tuple)):
        return []
    try:
        return [float(v) for v in value]
    except (TypeError, ValueError):
        return []


def get_str(record: Mapping[str, Any], field_name: str, default: str = "") -> str:
    """String field, or `default` when absent."""
    value = get_field(record, field_name)
    if value is None:
        return default
    return str(value)


def get_sentences(record: Mapping[str, Any]) -> tuple[str, ...]:
    """Own text lines of a record.

    A bare string is treated as a single sentence; null entries are dropped.
    """
    value = get_field(record, "sentences")
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    if not isinstance(value, (list, tuple)):
        return ()
    return tuple(str(s) for s in value if s is not None)


def get_records(record: Mapping[str, Any], field_name: str) -> list[Mapping[str, Any]]:
    """Nested record list (table rows, row cells); non-mapping entries are skipped."""
    value = get_field(record, field_name)
    if not isinstance(value, (list, tuple)):
        return []
    return [item for item in value if isinstance(item, Mapping)]


def normalize_tag(raw_tag: Any) -> str | None:
    """Map a raw tag string to its canonical value, or None if unrecognised."""
    if not isinstance(raw_tag, str):
        return None
    return _TAG_LOOKUP.get(raw_tag.strip().lower())


def row_kind(row: Mapping[str, Any]) -> str:
    """Classify a table row record as header, full-width or data row."""
    raw = get_field(row, "row_type")
    if isinstance(raw, str):
        return _ROW_KIND_LOOKUP.get(raw.strip().lower(), ROW_DATA)
    return ROW_DATA
