"""
Layout tree builder.

Turns the layout parser's flat, ordered block stream into one rooted block
tree. Records carry a tag and a level but no parent pointer, so nesting is
inferred from record order:

- Headers nest under the nearest preceding header of strictly lesser level.
- Paragraphs, tables and untagged blocks attach to the innermost open header.
- List items nest by indent level. A paragraph directly followed by list items
  at its level or deeper becomes the container of that list.

Tie-breaks (fixed, callers rely on them for reproducible output):

- A list item that follows anything other than a list item or an introducing
  paragraph starts a fresh list under the innermost open header.
- A list item shallower than or level with the open list closes every open
  list item at its level or deeper; an introducing paragraph stays open unless
  it is deeper than the item.
- A list item level with the previous list item becomes its sibling.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable, Mapping
from typing import Any

from layoutdoc.config import ReaderConfig
from layoutdoc.exceptions import MalformedRecordError
from layoutdoc.models import Block, ListItem, Paragraph, RootBlock, Section
from layoutdoc.records import get_field, normalize_tag
from layoutdoc.tables import Table

logger = logging.getLogger(__name__)

# Canonical tag -> block class
BLOCK_TYPES: dict[str, type[Block]] = {
    "header": Section,
    "para": Paragraph,
    "list_item": ListItem,
    "table": Table,
}


def create_block(record: Mapping[str, Any]) -> Block:
    """Construct the block variant matching a record's tag.

    Records with a missing or unrecognised tag become generic blocks.
    """
    block_type = BLOCK_TYPES.get(normalize_tag(get_field(record, "tag")), Block)
    return block_type(record)


class LayoutReader:
    """
    Builds a block tree from a flat sequence of block records.

    The reader holds no per-document state: stacks live inside read(), so one
    instance can be reused and shared.

    Example:
        >>> root = LayoutReader().read(blocks)
        >>> [child.title for child in root.children if child.tag is BlockTag.SECTION]
    """

    def __init__(self, config: ReaderConfig | None = None) -> None:
        self.config = config or ReaderConfig()

    def read(self, records: Iterable[Mapping[str, Any]]) -> RootBlock:
        """
        Build and freeze the block tree.

        Args:
            records: Block records in document order

        Returns:
            The frozen synthetic root

        Raises:
            MalformedRecordError: If a record is not a mapping
        """
        root = RootBlock()
        section_stack: list[Block] = [root]
        list_stack: list[Block] = []
        previous: Block = root

        counts: Counter[str] = Counter()
        unknown_tags: set[str] = set()

        for index, record in enumerate(records):
            if not isinstance(record, Mapping):
                raise MalformedRecordError(index, record)

            node = create_block(record)
            counts[node.tag.value] += 1

            if isinstance(node, Section):
                self._attach_section(node, section_stack)
            elif isinstance(node, ListItem):
                self._attach_list_item(node, section_stack, list_stack, previous)
            else:
                if type(node) is Block:
                    self._note_unknown_tag(node, unknown_tags)
                section_stack[-1].add_child(node)

            previous = node

        root.freeze()
        logger.debug(
            "Built layout tree from %d records: %d sections, %d paragraphs, "
            "%d list items, %d tables, %d generic",
            sum(counts.values()),
            counts["header"],
            counts["para"],
            counts["list_item"],
            counts["table"],
            counts["generic"],
        )
        return root

    @staticmethod
    def _attach_section(node: Section, section_stack: list[Block]) -> None:
        """Nest a header under the nearest open header of lesser level."""
        while len(section_stack) > 1 and section_stack[-1].level >= node.level:
            section_stack.pop()
        section_stack[-1].add_child(node)
        section_stack.append(node)

    @staticmethod
    def _attach_list_item(
        node: ListItem,
        section_stack: list[Block],
        list_stack: list[Block],
        previous: Block,
    ) -> None:
        """Nest a list item by indent level relative to the open list."""
        if isinstance(previous, Paragraph) and node.level >= previous.level:
            # Paragraph introduces the list
            list_stack[:] = [previous]
        elif isinstance(previous, ListItem):
            if node.level > previous.level:
                list_stack.append(previous)
            elif node.level < previous.level:
                while list_stack and _closes(list_stack[-1], node.level):
                    list_stack.pop()
        else:
            list_stack.clear()

        if list_stack:
            list_stack[-1].add_child(node)
        else:
            section_stack[-1].add_child(node)

    def _note_unknown_tag(self, node: Block, seen: set[str]) -> None:
        if not self.config.warn_on_unknown_tags or node.raw_tag is None:
            return
        if node.raw_tag not in seen:
            seen.add(node.raw_tag)
            logger.warning(
                "Unrecognised block tag %r (block_idx=%d); treating as generic",
                node.raw_tag,
                node.block_idx,
            )


def _closes(container: Block, level: int) -> bool:
    """Whether an open list container ends when an item at `level` arrives."""
    if isinstance(container, ListItem):
        return container.level >= level
    return container.level > level


def read_layout(
    records: Iterable[Mapping[str, Any]],
    config: ReaderConfig | None = None,
) -> RootBlock:
    """Convenience wrapper for LayoutReader(config).read(records)."""
    return LayoutReader(config).read(records)
