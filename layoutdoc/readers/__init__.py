"""Block stream reading module.

LayoutReader infers the document tree from a flat block stream; block_file
loads saved streams from JSON or YAML.
"""

from layoutdoc.readers.block_file import (
    BLOCK_FILE_FORMATS,
    detect_block_format,
    extract_blocks,
    load_records,
)
from layoutdoc.readers.layout_reader import (
    BLOCK_TYPES,
    LayoutReader,
    create_block,
    read_layout,
)

__all__ = [
    # Classes
    "LayoutReader",
    # Tree building
    "BLOCK_TYPES",
    "create_block",
    "read_layout",
    # Block files
    "BLOCK_FILE_FORMATS",
    "detect_block_format",
    "extract_blocks",
    "load_records",
]
