"""
LayoutDoc: Rebuild hierarchical documents from layout-parser block streams.

A layout parser emits a flat, ordered list of classified blocks (headers,
paragraphs, list items, tables), each with a nesting level but no parent.
LayoutDoc infers the document tree from that stream and renders it as plain
text or HTML, per block or for the whole document.

Example:
    >>> import layoutdoc
    >>> result = layoutdoc.convert("paper.blocks.json")
    >>> print(result.text_content)

    >>> # Work with the tree directly
    >>> root = layoutdoc.LayoutReader().read(blocks)
    >>> doc = layoutdoc.Document(root, blocks)
    >>> for section in doc.top_sections():
    ...     print(section.title)
"""

from layoutdoc.config import ReaderConfig
from layoutdoc.convert import (
    ConversionResult,
    convert,
    convert_batch,
    convert_records,
    detect_format,
    supported_formats,
)
from layoutdoc.document import Document
from layoutdoc.exceptions import (
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
from layoutdoc.models import (
    Block,
    BlockTag,
    ListItem,
    Paragraph,
    RootBlock,
    Section,
)
from layoutdoc.readers import LayoutReader, load_records, read_layout
from layoutdoc.tables import Table, TableCell, TableHeader, TableRow

__version__ = "0.1.0"
__all__ = [
    # Main API
    "convert",
    "convert_batch",
    "convert_records",
    "detect_format",
    "supported_formats",
    # Configuration
    "ReaderConfig",
    # Reading
    "LayoutReader",
    "read_layout",
    "load_records",
    # Document
    "Document",
    "ConversionResult",
    # Blocks
    "BlockTag",
    "Block",
    "RootBlock",
    "Section",
    "Paragraph",
    "ListItem",
    "Table",
    "TableHeader",
    "TableRow",
    "TableCell",
    # Exceptions
    "LayoutDocError",
    "MalformedRecordError",
    "TreeStateError",
    "TreeFrozenError",
    "TreeNotFrozenError",
    "TreeStructureError",
    "UnsupportedFormatError",
    "BlockFileError",
    "ConversionError",
]
