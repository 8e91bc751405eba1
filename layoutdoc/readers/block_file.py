"""
Loading saved block streams.

The layout parser's output is often saved to disk for reprocessing. This
module reads such dumps back as a list of block records. JSON and YAML are
supported; YAML goes through PyYAML's safe loader.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from layoutdoc.exceptions import BlockFileError, UnsupportedFormatError

BLOCK_FILE_FORMATS = {
    ".json": "json",
    ".yaml": "yaml",
    ".yml": "yaml",
}


def detect_block_format(path: str | Path) -> str:
    """
    Detect block file format from its extension.

    Raises:
        UnsupportedFormatError: If the extension is not a supported format
    """
    ext = Path(path).suffix.lower()
    if ext not in BLOCK_FILE_FORMATS:
        supported = ", ".join(sorted(set(BLOCK_FILE_FORMATS.values())))
        raise UnsupportedFormatError(
            f"Format '{ext or path}' is not supported. Supported: {supported}"
        )
    return BLOCK_FILE_FORMATS[ext]


def extract_blocks(data: Any) -> list[Any]:
    """
    Pull the block list out of a decoded block dump.

    Accepts a bare list, a mapping with a top-level "blocks" list, or the
    layout service envelope {"return_dict": {"result": {"blocks": [...]}}}.

    Raises:
        BlockFileError: If no block list is found
    """
    if isinstance(data, list):
        return data

    if isinstance(data, Mapping):
        candidates = [data.get("blocks")]
        return_dict = data.get("return_dict")
        if isinstance(return_dict, Mapping):
            result = return_dict.get("result")
            if isinstance(result, Mapping):
                candidates.append(result.get("blocks"))
        for blocks in candidates:
            if isinstance(blocks, list):
                return blocks

    raise BlockFileError("No 'blocks' list found in block data")


def load_records(path: str | Path) -> list[Any]:
    """
    Read block records from a JSON or YAML file.

    Args:
        path: Path to the block dump

    Returns:
        Block records in document order

    Raises:
        FileNotFoundError: If the file doesn't exist
        UnsupportedFormatError: If the extension isn't supported
        BlockFileError: If the file cannot be parsed or holds no block list
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Block file not found: {path}")

    fmt = detect_block_format(path)

    try:
        text = path.read_text(encoding="utf-8")
        if fmt == "json":
            data = json.loads(text)
        else:
            data = yaml.safe_load(text)
    except (UnicodeDecodeError, json.JSONDecodeError, yaml.YAMLError) as e:
        raise BlockFileError(f"Cannot parse block file {path}: {e}") from e

    try:
        return extract_blocks(data)
    except BlockFileError as e:
        raise BlockFileError(f"{e}: {path}") from e
