"""
Block model for LayoutDoc.

A layout document is a tree of blocks. Each block carries a tag, a level and
its own text lines; structure lives in `children`. Each child also keeps a
back-reference to its parent for context lookups.

Trees are built once (see LayoutReader), frozen, and only read afterwards.
Rendering a block whose tree is still under construction raises
TreeNotFrozenError; mutating a frozen block raises TreeFrozenError.
"""

from __future__ import annotations

import html
from collections.abc import Iterator, Mapping
from enum import Enum
from typing import Any, ClassVar

from layoutdoc.exceptions import TreeFrozenError, TreeNotFrozenError, TreeStructureError
from layoutdoc.records import (
    get_field,
    get_float,
    get_float_list,
    get_int,
    get_sentences,
)


class BlockTag(Enum):
    """Discriminator naming a block's variant."""

    ROOT = "root"
    SECTION = "header"
    PARAGRAPH = "para"
    LIST_ITEM = "list_item"
    TABLE = "table"
    TABLE_ROW = "table_row"
    TABLE_HEADER = "table_header"
    TABLE_CELL = "table_cell"
    GENERIC = "generic"


# Blocks treated as self-contained text units when gathering context
CONTEXT_UNIT_TAGS = frozenset({BlockTag.PARAGRAPH, BlockTag.LIST_ITEM, BlockTag.TABLE})


def join_lines(parts: list[str]) -> str:
    """Join rendered parts with newlines, skipping empty ones."""
    return "\n".join(part for part in parts if part)


class Block:
    """
    A node in the layout document tree.

    Also serves as the generic variant for records whose tag is missing or
    unrecognised. Absent numeric fields default to -1 and absent text to an
    empty tuple; construction never fails on missing optional fields.
    """

    tag: ClassVar[BlockTag] = BlockTag.GENERIC

    def __init__(self, record: Mapping[str, Any] | None = None) -> None:
        record = record if record is not None else {}
        self.record = record
        raw_tag = get_field(record, "tag")
        self.raw_tag: str | None = str(raw_tag) if raw_tag is not None else None
        self._level = get_int(record, "level")
        self.page_idx = get_int(record, "page_idx")
        self.block_idx = get_int(record, "block_idx")
        self.top = get_float(record, "top")
        self.left = get_float(record, "left")
        self.bbox = get_float_list(record, "bbox")
        self.sentences = get_sentences(record)

        self._children: list[Block] = []
        self._parent: Block | None = None
        self._frozen = False

    # =========================================================================
    # Structure
    # =========================================================================

    @property
    def level(self) -> int:
        """Heading depth for sections, indent depth for list items, else -1."""
        return self._level

    @property
    def children(self) -> tuple[Block, ...]:
        """Child blocks in document order (read-only view)."""
        return tuple(self._children)

    @property
    def parent(self) -> Block | None:
        """Parent block, or None for the root."""
        return self._parent

    @property
    def is_frozen(self) -> bool:
        """True once the tree holding this block has been frozen."""
        return self._frozen

    def add_child(self, child: Block) -> None:
        """Append a child and point it back at this block."""
        if self._frozen:
            raise TreeFrozenError(f"Cannot add a child to a frozen block: {self!r}")
        if child._parent is not None:
            raise TreeStructureError(f"Block already has a parent: {child!r}")
        self._children.append(child)
        child._parent = self

    def _parts(self) -> Iterator[Block]:
        """Blocks owned by this one: children plus any structural components."""
        yield from self._children

    def freeze(self) -> None:
        """Mark this block and everything it owns as read-only."""
        stack: list[Block] = [self]
        while stack:
            node = stack.pop()
            node._frozen = True
            stack.extend(node._parts())

    def _require_frozen(self) -> None:
        if not self._frozen:
            raise TreeNotFrozenError(
                f"Cannot render {self!r} before its tree is fully built and frozen"
            )

    # =========================================================================
    # Rendering
    # =========================================================================

    @property
    def own_text(self) -> str:
        """Own sentences joined by newlines (no descendants)."""
        return "\n".join(self.sentences)

    def _children_text(self, include_children: bool, recurse: bool) -> list[str]:
        if not include_children:
            return []
        return [
            child.to_text(include_children=recurse, recurse=recurse)
            for child in self._children
        ]

    def _children_html(self, include_children: bool, recurse: bool) -> str:
        if not include_children:
            return ""
        return "".join(
            child.to_html(include_children=recurse, recurse=recurse)
            for child in self._children
        )

    def to_text(self, include_children: bool = False, recurse: bool = False) -> str:
        """
        Render as plain text.

        Args:
            include_children: Append each child's rendering after own text
            recurse: Propagate include_children to every descendant level;
                when False only the immediate children's own text is added
        """
        self._require_frozen()
        return join_lines([self.own_text, *self._children_text(include_children, recurse)])

    def to_html(self, include_children: bool = False, recurse: bool = False) -> str:
        """Render as an HTML fragment. Arguments as for to_text()."""
        self._require_frozen()
        own = f"<div>{html.escape(self.own_text)}</div>" if self.sentences else ""
        return own + self._children_html(include_children, recurse)

    # =========================================================================
    # Context
    # =========================================================================

    def parent_chain(self) -> list[Block]:
        """Ancestors ordered root first, nearest parent last."""
        chain = []
        current = self.parent
        while current is not None:
            chain.append(current)
            current = current.parent
        chain.reverse()
        return chain

    def parent_text(self) -> str:
        """
        Breadcrumb of ancestor section titles, then ancestor paragraph and
        list item text, one per line.

        Example: "Chapter 2 > 2.1 Safety\\nThe following rules apply:"
        """
        header_texts = []
        para_texts = []
        for ancestor in self.parent_chain():
            if ancestor.tag is BlockTag.SECTION:
                header_texts.append(ancestor.own_text)
            elif ancestor.tag in (BlockTag.PARAGRAPH, BlockTag.LIST_ITEM):
                para_texts.append(ancestor.own_text)

        text = " > ".join(header_texts)
        if para_texts:
            text += "\n" + "\n".join(para_texts)
        return text

    def to_context_text(self, include_section_info: bool = True) -> str:
        """Own text prefixed with the surrounding section and list context."""
        self._require_frozen()
        parts = []
        if include_section_info:
            parts.append(self.parent_text())
        if self.tag in CONTEXT_UNIT_TAGS:
            parts.append(self.to_text(include_children=True, recurse=True))
        else:
            parts.append(self.to_text())
        return join_lines(parts)

    def iter_blocks(self) -> Iterator[Block]:
        """Pre-order walk of descendants that treats paragraphs, list items
        and tables as leaves."""
        for child in self._children:
            yield child
            if child.tag not in CONTEXT_UNIT_TAGS:
                yield from child.iter_blocks()

    def __repr__(self) -> str:
        """String representation for debugging."""
        preview = self.own_text[:40].replace("\n", " ")
        return (
            f"<{type(self).__name__} tag={self.tag.value} level={self.level} "
            f"'{preview}' children={len(self._children)}>"
        )


class RootBlock(Block):
    """Synthetic root owning the top-level blocks of a document."""

    tag = BlockTag.ROOT

    def to_html(self, include_children: bool = False, recurse: bool = False) -> str:
        self._require_frozen()
        return self._children_html(include_children, recurse)


class Section(Block):
    """A heading and, through its children, everything nested under it."""

    tag = BlockTag.SECTION

    @property
    def title(self) -> str:
        return self.own_text

    @property
    def heading_level(self) -> int:
        """HTML heading number: level + 1, clamped to h1..h6."""
        return min(max(self.level + 1, 1), 6)

    def to_text(self, include_children: bool = False, recurse: bool = False) -> str:
        self._require_frozen()
        return join_lines([self.title, *self._children_text(include_children, recurse)])

    def to_html(self, include_children: bool = False, recurse: bool = False) -> str:
        self._require_frozen()
        n = self.heading_level
        heading = f"<h{n}>{html.escape(self.title)}</h{n}>"
        return heading + self._children_html(include_children, recurse)


class Paragraph(Block):
    """A plain text block. May hold list items introduced by its text."""

    tag = BlockTag.PARAGRAPH

    def to_html(self, include_children: bool = False, recurse: bool = False) -> str:
        self._require_frozen()
        out = f"<p>{html.escape(self.own_text)}</p>"
        nested = self._children_html(include_children, recurse)
        if nested:
            out += f"<ul>{nested}</ul>"
        return out


class ListItem(Block):
    """A bulleted or numbered item. Level is the indent depth."""

    tag = BlockTag.LIST_ITEM

    def to_html(self, include_children: bool = False, recurse: bool = False) -> str:
        self._require_frozen()
        nested = self._children_html(include_children, recurse)
        if nested:
            nested = f"<ul>{nested}</ul>"
        return f"<li>{html.escape(self.own_text)}{nested}</li>"
