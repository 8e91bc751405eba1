"""
Exception classes for LayoutDoc.

All LayoutDoc exceptions inherit from LayoutDocError,
making it easy to catch all library errors.

Example:
    >>> try:
    ...     result = layoutdoc.convert("blocks.xyz")
    ... except layoutdoc.UnsupportedFormatError as e:
    ...     print(f"Format not supported: {e}")
    ... except layoutdoc.LayoutDocError as e:
    ...     print(f"LayoutDoc error: {e}")
"""


class LayoutDocError(Exception):
    """
    Base exception for all LayoutDoc errors.

    Catch this to handle any LayoutDoc-specific error.
    """

    pass


class MalformedRecordError(LayoutDocError):
    """
    Raised when a block record is not a mapping.

    Records with missing or unknown fields are tolerated; only records
    that are not dict-like at all are rejected.
    """

    def __init__(self, index: int, record: object) -> None:
        self.index = index
        self.record = record
        super().__init__(
            f"Block record #{index} must be a mapping, got {type(record).__name__}"
        )


class TreeStateError(LayoutDocError):
    """
    Raised when a block tree is used against its lifecycle contract.

    These are caller errors: the tree is built once, frozen, then only read.
    """

    pass


class TreeFrozenError(TreeStateError):
    """
    Raised when mutating a block after its tree has been frozen.

    Example:
        >>> root = LayoutReader().read(records)
        >>> root.add_child(Paragraph({"tag": "para"}))
        TreeFrozenError: Cannot add a child to a frozen block
    """

    pass


class TreeNotFrozenError(TreeStateError):
    """Raised when rendering a block tree that is still under construction."""

    pass


class TreeStructureError(TreeStateError):
    """Raised when attaching a block that already belongs to a parent."""

    pass


class UnsupportedFormatError(LayoutDocError):
    """
    Raised when a block file format is not supported.

    Example:
        >>> layoutdoc.load_records("blocks.csv")
        UnsupportedFormatError: Format '.csv' is not supported. Supported: json, yaml
    """

    pass


class BlockFileError(LayoutDocError):
    """Raised when a block file parses but holds no block list."""

    pass


class ConversionError(LayoutDocError):
    """
    Raised when conversion fails.

    This is only raised when config.on_error == "raise".
    Otherwise, conversion errors are logged as warnings.
    """

    pass
