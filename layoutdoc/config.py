"""
Configuration for LayoutDoc tree reading and rendering.

All options have defaults that reproduce the layout reader's usual output.
"""

from dataclasses import dataclass
from typing import Literal


@dataclass
class ReaderConfig:
    """
    Configuration for building and rendering layout documents.

    Example:
        >>> config = ReaderConfig(top_section_rule="direct", include_unsectioned=False)
        >>> result = layoutdoc.convert("blocks.json", config)
    """

    # Top-section selection
    # "ancestor": a section is top-level when no ancestor is a section
    # "direct": a section is top-level when no other section lists it as a child
    top_section_rule: Literal["ancestor", "direct"] = "ancestor"

    # Render root-level blocks that sit outside every section (preamble text)
    include_unsectioned: bool = True

    # Log a warning the first time each unrecognised tag is seen in a pass
    warn_on_unknown_tags: bool = True

    # Error handling for convert()
    on_error: Literal["raise", "warn"] = "raise"

    def __post_init__(self):
        """Validate configuration."""
        valid_rules = ("ancestor", "direct")
        if self.top_section_rule not in valid_rules:
            raise ValueError(
                f"top_section_rule must be one of {valid_rules}, "
                f"got {self.top_section_rule!r}"
            )

        valid_error_modes = ("raise", "warn")
        if self.on_error not in valid_error_modes:
            raise ValueError(
                f"on_error must be one of {valid_error_modes}, got {self.on_error!r}"
            )
