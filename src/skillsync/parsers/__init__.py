"""README parsers."""

from .structure_block import find_structure_block, parse_description_line, parse_descriptions

__all__ = ["find_structure_block", "parse_description_line", "parse_descriptions"]
