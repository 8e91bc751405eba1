"""
Basic tests for LayoutDoc package structure.

These tests verify the public API is importable and
basic configuration works correctly.
"""

import pytest


class TestImports:
    """Test that the public API is importable."""

    def test_import_package(self):
        """Can import the main package."""
        import layoutdoc

        assert layoutdoc.__version__ == "0.1.0"

    def test_import_convert_function(self):
        """Can import the main convert functions."""
        from layoutdoc import convert, convert_batch, convert_records

        assert callable(convert)
        assert callable(convert_batch)
        assert callable(convert_records)

    def test_import_config(self):
        """Can import configuration class."""
        from layoutdoc import ReaderConfig

        config = ReaderConfig()
        assert config.top_section_rule == "ancestor"

    def test_import_block_types(self):
        """Can import block variants."""
        from layoutdoc import (
            BlockTag,
            ListItem,
            Paragraph,
            Section,
            Table,
        )

        assert Section.tag is BlockTag.SECTION
        assert Paragraph.tag is BlockTag.PARAGRAPH
        assert ListItem.tag is BlockTag.LIST_ITEM
        assert Table.tag is BlockTag.TABLE

    def test_import_exceptions(self):
        """Can import exception classes."""
        from layoutdoc import (
            BlockFileError,
            ConversionError,
            LayoutDocError,
            MalformedRecordError,
            TreeFrozenError,
            TreeNotFrozenError,
            TreeStateError,
            TreeStructureError,
            UnsupportedFormatError,
        )

        # All should inherit from LayoutDocError
        assert issubclass(MalformedRecordError, LayoutDocError)
        assert issubclass(TreeStateError, LayoutDocError)
        assert issubclass(UnsupportedFormatError, LayoutDocError)
        assert issubclass(BlockFileError, LayoutDocError)
        assert issubclass(ConversionError, LayoutDocError)

        # Contract violations share a base
        assert issubclass(TreeFrozenError, TreeStateError)
        assert issubclass(TreeNotFrozenError, TreeStateError)
        assert issubclass(TreeStructureError, TreeStateError)


class TestConfig:
    """Test configuration validation."""

    def test_default_config(self):
        """Default config has expected values."""
        from layoutdoc import ReaderConfig

        config = ReaderConfig()
        assert config.top_section_rule == "ancestor"
        assert config.include_unsectioned is True
        assert config.warn_on_unknown_tags is True
        assert config.on_error == "raise"

    def test_direct_rule_accepted(self):
        """The direct-child top-section rule is a valid choice."""
        from layoutdoc import ReaderConfig

        config = ReaderConfig(top_section_rule="direct")
        assert config.top_section_rule == "direct"

    def test_invalid_top_section_rule(self):
        """Invalid top_section_rule raises ValueError."""
        from layoutdoc import ReaderConfig

        with pytest.raises(ValueError, match="top_section_rule"):
            ReaderConfig(top_section_rule="nearest")

    def test_invalid_on_error(self):
        """Invalid on_error raises ValueError."""
        from layoutdoc import ReaderConfig

        with pytest.raises(ValueError, match="on_error"):
            ReaderConfig(on_error="skip")


class TestMalformedRecordError:
    """Test the malformed record error message."""

    def test_names_index_and_type(self):
        """Error carries the offending index and record."""
        from layoutdoc import MalformedRecordError

        err = MalformedRecordError(4, "oops")
        assert err.index == 4
        assert err.record == "oops"
        assert "#4" in str(err)
        assert "str" in str(err)
