"""
Conversion entry points.

This module provides `convert()` and `convert_records()`, which turn a layout
block stream into a ConversionResult by wiring together:
- load_records (block file loading)
- LayoutReader (tree inference)
- Document (whole-document rendering)

convert_batch() runs convert() over several files.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from layoutdoc.config import ReaderConfig
from layoutdoc.document import Document
from layoutdoc.exceptions import ConversionError, LayoutDocError
from layoutdoc.models import RootBlock
from layoutdoc.readers.block_file import BLOCK_FILE_FORMATS, detect_block_format, load_records
from layoutdoc.readers.layout_reader import LayoutReader

logger = logging.getLogger(__name__)


@dataclass
class ConversionResult:
    """
    The main output type for users.

    Holds the rendered text and title along with the document it was
    rendered from.

    Example:
        >>> result = layoutdoc.convert("report.blocks.json")
        >>> print(result.title)
        >>> result.save("report.md")
    """

    title: str | None
    text_content: str
    document: Document
    source_path: str | None = None

    # Diagnostics
    warnings: list[str] = field(default_factory=list)

    def to_html(self, include_duplicates: bool = False) -> str:
        """Render the underlying document as HTML."""
        return self.document.to_html(include_duplicates=include_duplicates)

    def save(self, path: str | Path) -> None:
        """
        Save text content to file.

        Args:
            path: Output file path
        """
        Path(path).write_text(self.text_content, encoding="utf-8")

    def to_dict(self) -> dict[str, Any]:
        """
        Convert to dictionary for JSON serialization.

        Returns:
            Dictionary representation of the result
        """
        return {
            "title": self.title,
            "text_content": self.text_content,
            "source_path": self.source_path,
            "section_count": len(self.document.sections()),
            "warnings": self.warnings,
        }


def convert_records(
    records: Sequence[Mapping[str, Any]],
    source_name: str | Path | None = None,
    config: ReaderConfig | None = None,
) -> ConversionResult:
    """
    Build a document from block records and render it.

    The title is the first section's title, falling back to the stem of
    `source_name`.

    Args:
        records: Block records in document order
        source_name: Name or path of the source, for the fallback title
        config: Reader configuration (uses defaults if None)

    Returns:
        ConversionResult with title, text and the built Document
    """
    config = config or ReaderConfig()
    records = list(records)

    root = LayoutReader(config).read(records)
    document = Document(root, records, config)

    title = document.title
    if not title and source_name is not None:
        title = _stem(source_name)

    return ConversionResult(
        title=title,
        text_content=document.to_text(include_duplicates=False).strip(),
        document=document,
        source_path=str(source_name) if source_name is not None else None,
    )


def convert(
    source: str | Path,
    config: ReaderConfig | None = None,
) -> ConversionResult:
    """
    Convert a saved block stream to a ConversionResult.

    Args:
        source: Path to a JSON or YAML block file
        config: Reader configuration (uses defaults if None)

    Returns:
        ConversionResult with title, text and document

    Raises:
        FileNotFoundError: If source doesn't exist
        ConversionError: If conversion fails (when on_error="raise")

    Example:
        >>> result = convert("paper.blocks.json")
        >>> print(result.text_content[:100])
    """
    source = Path(source)
    config = config or ReaderConfig()

    if not source.exists():
        raise FileNotFoundError(f"Source file not found: {source}")

    try:
        records = load_records(source)
        return convert_records(records, source_name=source, config=config)

    except LayoutDocError as e:
        if config.on_error == "warn":
            logger.warning("Conversion error for %s: %s", source, e)
            root = RootBlock()
            root.freeze()
            return ConversionResult(
                title=_stem(source),
                text_content="",
                document=Document(root, config=config),
                source_path=str(source),
                warnings=[f"Conversion failed: {e}"],
            )
        raise ConversionError(f"Failed to convert {source}: {e}") from e


def convert_batch(
    sources: list[str | Path],
    config: ReaderConfig | None = None,
) -> Iterator[tuple[Path, ConversionResult | Exception]]:
    """
    Convert several block files, yielding results in input order.

    Failures are yielded rather than raised so one bad file does not stop
    the batch.

    Yields:
        (path, result) tuples where result is ConversionResult or Exception
    """
    config = config or ReaderConfig()

    for source in sources:
        source = Path(source)
        try:
            yield (source, convert(source, config))
        except (LayoutDocError, OSError) as e:
            yield (source, e)


def detect_format(path: str | Path) -> str:
    """
    Detect block file format from file extension.

    Returns:
        Format string: "json" or "yaml"

    Raises:
        UnsupportedFormatError: If the format isn't supported
    """
    return detect_block_format(path)


def supported_formats() -> list[str]:
    """Return list of supported block file formats."""
    return sorted(set(BLOCK_FILE_FORMATS.values()))


def _stem(source_name: str | Path) -> str:
    return Path(source_name).stem
