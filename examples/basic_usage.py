#!/usr/bin/env python3
"""
Basic LayoutDoc Usage Example

This example demonstrates the core workflow:
1. Convert a saved block dump to text
2. Build the tree from in-memory records
3. Query the document structure
4. Render blocks with their surrounding context
5. Export to HTML
"""

from layoutdoc import Document, LayoutReader, ReaderConfig, convert

BLOCKS = [
    {"tag": "header", "level": 0, "sentences": ["Installation Guide"]},
    {"tag": "header", "level": 1, "sentences": ["Requirements"]},
    {"tag": "para", "level": 1, "sentences": ["You will need:"]},
    {"tag": "list_item", "level": 1, "sentences": ["A supported operating system"]},
    {"tag": "list_item", "level": 2, "sentences": ["Linux or macOS"]},
    {"tag": "list_item", "level": 1, "sentences": ["Network access"]},
    {"tag": "header", "level": 1, "sentences": ["Ports"]},
    {
        "tag": "table",
        "level": 1,
        "table_rows": [
            {
                "type": "table_header",
                "cells": [{"cell_value": "Service"}, {"cell_value": "Port"}],
            },
            {"cells": [{"cell_value": "API"}, {"cell_value": "8080"}]},
        ],
    },
]


def main():
    # ─────────────────────────────────────────────────────────────────────────
    # 1. Basic Conversion
    # ─────────────────────────────────────────────────────────────────────────

    # Convert a block dump saved from the layout parser (JSON or YAML)
    result = convert("path/to/document.blocks.json")

    print(f"Converted: {result.title}")
    print(f"  Sections: {len(result.document.sections())}")
    print(f"  Text length: {len(result.text_content):,} characters")

    # ─────────────────────────────────────────────────────────────────────────
    # 2. Build From Records
    # ─────────────────────────────────────────────────────────────────────────

    config = ReaderConfig(
        top_section_rule="ancestor",  # Nested sections never count as top-level
        include_unsectioned=True,  # Keep text that precedes the first heading
    )
    root = LayoutReader(config).read(BLOCKS)
    doc = Document(root, BLOCKS, config)

    # ─────────────────────────────────────────────────────────────────────────
    # 3. Query Document Structure
    # ─────────────────────────────────────────────────────────────────────────

    for section in doc.sections():
        indent = "  " * max(section.level, 0)
        print(f"{indent}{section.title} ({len(section.children)} children)")

    print("Top sections:", [s.title for s in doc.top_sections()])

    # ─────────────────────────────────────────────────────────────────────────
    # 4. Context For A Fragment
    # ─────────────────────────────────────────────────────────────────────────

    for block in doc.blocks():
        if block.own_text == "Linux or macOS":
            print(block.to_context_text())
            # Installation Guide > Requirements
            # You will need:
            # A supported operating system
            # Linux or macOS

    # ─────────────────────────────────────────────────────────────────────────
    # 5. Export
    # ─────────────────────────────────────────────────────────────────────────

    print(doc.to_text())  # Each block once
    print(doc.to_text(include_duplicates=True))  # Every section on its own
    print(doc.to_html())


if __name__ == "__main__":
    main()
