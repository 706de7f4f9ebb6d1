"""Guid element: the unique identifier of an item."""

from typing import ClassVar

from pydantic import BaseModel, Field

from feedmap.parsers.text import element_text, find_attribute
from feedmap.xml.events import Attributes, EndEvent, StartEvent, TextEvent
from feedmap.xml.reader import XmlReader
from feedmap.xml.writer import XmlWriter


class Guid(BaseModel):
    """Unique identifier of an item.

    ``isPermaLink`` defaults to true; it is only written when false.
    """

    ELEMENT_NAME: ClassVar[str] = "guid"

    value: str = Field(default="", description="Identifier text")
    is_permalink: bool = Field(default=True, description="Whether the value is a permanent URL")

    @classmethod
    def from_xml(cls, reader: XmlReader, attributes: Attributes) -> "Guid":
        guid = cls()

        is_permalink = find_attribute(attributes, "isPermaLink")
        if is_permalink is not None:
            guid.is_permalink = is_permalink == "true"

        guid.value = element_text(reader) or ""
        return guid

    def to_xml(self, writer: XmlWriter) -> None:
        pairs = [] if self.is_permalink else [("isPermaLink", "false")]
        writer.write_event(StartEvent(self.ELEMENT_NAME, Attributes.from_pairs(pairs)))
        if self.value:
            writer.write_event(TextEvent.from_text(self.value))
        writer.write_event(EndEvent(self.ELEMENT_NAME))
