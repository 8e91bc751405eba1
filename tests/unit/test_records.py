"""
Unit tests for block record field access.

Records come from an external parser, so every helper must tolerate
missing, null and mistyped fields.
"""

import pytest

from layoutdoc.records import (
    ROW_DATA,
    ROW_FULL,
    ROW_HEADER,
    get_float,
    get_float_list,
    get_int,
    get_records,
    get_sentences,
    get_str,
    normalize_tag,
    row_kind,
)


class TestNumericFields:
    """Test integer and float coercion."""

    def test_int_present(self):
        """Integer fields are read as-is."""
        assert get_int({"level": 2}, "level") == 2

    def test_int_from_string(self):
        """Numeric strings are coerced."""
        assert get_int({"level": "3"}, "level") == 3

    def test_int_missing_defaults(self):
        """Missing integers default to -1."""
        assert get_int({}, "level") == -1
        assert get_int({"level": None}, "level") == -1

    def test_int_garbage_defaults(self):
        """Non-numeric values fall back to the default."""
        assert get_int({"level": "deep"}, "level") == -1
        assert get_int({"level": [1]}, "level") == -1
        assert get_int({"level": True}, "level") == -1

    def test_int_custom_default(self):
        """Custom defaults are honoured."""
        assert get_int({}, "col_span", default=1) == 1

    def test_int_alias(self):
        """Alternate spellings are accepted."""
        assert get_int({"pageIndex": 5}, "page_idx") == 5
        assert get_int({"colSpan": 2}, "col_span", default=1) == 2

    def test_float(self):
        """Float fields default to -1.0."""
        assert get_float({"top": 12.5}, "top") == 12.5
        assert get_float({"top": "7"}, "top") == 7.0
        assert get_float({}, "left") == -1.0

    def test_float_list(self):
        """Bounding boxes are lists of floats or empty."""
        assert get_float_list({"bbox": [1, 2, 3, 4]}, "bbox") == [1.0, 2.0, 3.0, 4.0]
        assert get_float_list({}, "bbox") == []
        assert get_float_list({"bbox": "1,2"}, "bbox") == []
        assert get_float_list({"bbox": [1, "x"]}, "bbox") == []


class TestTextFields:
    """Test sentence and string access."""

    def test_sentences_list(self):
        """Sentence lists become tuples."""
        assert get_sentences({"sentences": ["a", "b"]}) == ("a", "b")

    def test_sentences_missing(self):
        """Missing sentences give an empty tuple."""
        assert get_sentences({}) == ()

    def test_sentences_bare_string(self):
        """A bare string is a single sentence."""
        assert get_sentences({"sentences": "only one"}) == ("only one",)

    def test_sentences_drops_nulls(self):
        """Null entries are dropped."""
        assert get_sentences({"sentences": ["a", None, "b"]}) == ("a", "b")

    def test_sentences_wrong_type(self):
        """Non-sequence sentences give an empty tuple."""
        assert get_sentences({"sentences": 42}) == ()

    def test_get_str(self):
        """String fields default to empty."""
        assert get_str({"name": "Table 1"}, "name") == "Table 1"
        assert get_str({}, "name") == ""

    def test_get_records_skips_non_mappings(self):
        """Nested record lists keep only mappings."""
        rows = get_records({"table_rows": [{"cells": []}, "junk", None]}, "table_rows")
        assert rows == [{"cells": []}]

    def test_get_records_alias(self):
        """Table rows may be given as 'rows'."""
        assert len(get_records({"rows": [{}, {}]}, "table_rows")) == 2


class TestTags:
    """Test tag normalisation."""

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("header", "header"),
            ("section", "header"),
            ("para", "para"),
            ("paragraph", "para"),
            ("list_item", "list_item"),
            ("list-item", "list_item"),
            ("table", "table"),
            (" Para ", "para"),
        ],
    )
    def test_known_tags(self, raw, expected):
        """Known spellings map to canonical tags."""
        assert normalize_tag(raw) == expected

    def test_unknown_tag(self):
        """Unknown or missing tags map to None."""
        assert normalize_tag("footer") is None
        assert normalize_tag(None) is None
        assert normalize_tag(3) is None


class TestRowKind:
    """Test table row classification."""

    def test_header_row(self):
        """Header rows are recognised under both spellings."""
        assert row_kind({"type": "table_header"}) == ROW_HEADER
        assert row_kind({"tag": "header-row"}) == ROW_HEADER

    def test_full_row(self):
        """Full-width rows are recognised."""
        assert row_kind({"type": "full_row"}) == ROW_FULL
        assert row_kind({"tag": "full-row"}) == ROW_FULL

    def test_data_row(self):
        """Anything else is a data row."""
        assert row_kind({"type": "table_data_row"}) == ROW_DATA
        assert row_kind({}) == ROW_DATA
