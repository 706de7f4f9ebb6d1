"""Streaming XML reader and writer."""

from feedmap.xml.events import (
    Attribute,
    Attributes,
    CDataEvent,
    CommentEvent,
    DeclEvent,
    DocTypeEvent,
    EmptyEvent,
    EndEvent,
    EofEvent,
    Event,
    PIEvent,
    StartEvent,
    TextEvent,
)
from feedmap.xml.reader import XmlReader
from feedmap.xml.writer import XmlWriter

__all__ = [
    "Attribute",
    "Attributes",
    "CDataEvent",
    "CommentEvent",
    "DeclEvent",
    "DocTypeEvent",
    "EmptyEvent",
    "EndEvent",
    "EofEvent",
    "Event",
    "PIEvent",
    "StartEvent",
    "TextEvent",
    "XmlReader",
    "XmlWriter",
]
