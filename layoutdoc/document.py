"""
Document facade over a built layout tree.

Provides section enumeration, top-level section selection and whole-document
rendering. Whole-document text is assembled from top sections so nested
sections are not emitted twice; include_duplicates renders every section on
its own instead.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any

from layoutdoc.config import ReaderConfig
from layoutdoc.exceptions import TreeNotFrozenError
from layoutdoc.models import Block, BlockTag, Section, join_lines


class Document:
    """
    A layout document: the frozen block tree plus the records it came from.

    Example:
        >>> doc = Document(LayoutReader().read(blocks), blocks)
        >>> for section in doc.top_sections():
        ...     print(section.title)
        >>> print(doc.to_text())
    """

    def __init__(
        self,
        root: Block,
        records: list[Mapping[str, Any]] | None = None,
        config: ReaderConfig | None = None,
    ) -> None:
        if not root.is_frozen:
            raise TreeNotFrozenError("Document requires a fully built, frozen block tree")
        self.root = root
        self.records = records if records is not None else []
        self.config = config or ReaderConfig()
        self._sections: list[Section] | None = None
        self._top_sections: list[Section] | None = None

    # =========================================================================
    # Traversal
    # =========================================================================

    def blocks(self) -> Iterator[Block]:
        """Every block below the root, pre-order."""
        stack = list(reversed(self.root.children))
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def sections(self) -> list[Section]:
        """Every section in document order (pre-order depth-first)."""
        if self._sections is None:
            self._sections = [b for b in self.blocks() if isinstance(b, Section)]
        return list(self._sections)

    def top_sections(self) -> list[Section]:
        """
        Sections not contained in another section.

        With top_section_rule="ancestor" a section is top-level when none of
        its ancestors is a section. With "direct" it is top-level when no
        other section lists it as a direct child.
        """
        if self._top_sections is None:
            sections = self.sections()
            if self.config.top_section_rule == "direct":
                child_ids = {
                    id(child) for section in sections for child in section.children
                }
                self._top_sections = [s for s in sections if id(s) not in child_ids]
            else:
                self._top_sections = [
                    s
                    for s in sections
                    if not any(a.tag is BlockTag.SECTION for a in s.parent_chain())
                ]
        return list(self._top_sections)

    @property
    def title(self) -> str | None:
        """Title of the first section, if any."""
        sections = self.sections()
        return sections[0].title if sections else None

    def parent_chain(self, node: Block) -> list[Block]:
        """Ancestors of `node`, root first, nearest parent last."""
        return node.parent_chain()

    def parent_text(self, node: Block) -> str:
        """Section breadcrumb plus ancestor paragraph/list text for `node`."""
        return node.parent_text()

    # =========================================================================
    # Rendering
    # =========================================================================

    def _render_units(self, include_duplicates: bool) -> list[Block]:
        """Blocks rendered (recursively) for the whole-document views, in
        document order."""
        sections: list[Block] = list(
            self.sections() if include_duplicates else self.top_sections()
        )
        if not self.config.include_unsectioned:
            return sections

        # Loose root-level blocks keep their place between sections
        selected = {id(s) for s in sections}
        return [
            block
            for block in self.blocks()
            if id(block) in selected
            or (block.parent is self.root and block.tag is not BlockTag.SECTION)
        ]

    def to_text(self, include_duplicates: bool = False) -> str:
        """
        Render the whole document as plain text.

        Args:
            include_duplicates: Render every section independently, so text
                under nested sections appears once per containing section
        """
        return join_lines(
            [
                unit.to_text(include_children=True, recurse=True)
                for unit in self._render_units(include_duplicates)
            ]
        )

    def to_html(self, include_duplicates: bool = False) -> str:
        """Render the whole document as HTML wrapped in <html>."""
        body = "".join(
            unit.to_html(include_children=True, recurse=True)
            for unit in self._render_units(include_duplicates)
        )
        return f"<html>{body}</html>"

    def __repr__(self) -> str:
        """String representation for debugging."""
        return (
            f"<Document sections={len(self.sections())} "
            f"top_sections={len(self.top_sections())} records={len(self.records)}>"
        )
