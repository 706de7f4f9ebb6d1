"""Parsers package."""

from feedmap.parsers.base import ElementReadable, ElementWritable
from feedmap.parsers.text import element_text, find_attribute, skip_element

__all__ = [
    "ElementReadable",
    "ElementWritable",
    "element_text",
    "find_attribute",
    "skip_element",
]
