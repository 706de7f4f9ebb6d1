"""Element mapping between RSS feed elements and their XML form."""

from feedmap.document import read_element, write_element
from feedmap.exceptions import (
    FeedmapError,
    MismatchedEndTagError,
    ParseError,
    UnexpectedEofError,
    XmlParseError,
)
from feedmap.models import Category, Cloud, Enclosure, Guid, Source
from feedmap.xml import XmlReader, XmlWriter

__version__ = "0.1.0"

__all__ = [
    "Source",
    "Category",
    "Enclosure",
    "Guid",
    "Cloud",
    "XmlReader",
    "XmlWriter",
    "read_element",
    "write_element",
    "FeedmapError",
    "ParseError",
    "XmlParseError",
    "UnexpectedEofError",
    "MismatchedEndTagError",
]
