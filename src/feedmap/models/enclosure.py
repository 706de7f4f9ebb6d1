"""Enclosure element: a media object attached to an item."""

from typing import ClassVar

from pydantic import BaseModel, Field

from feedmap.parsers.text import find_attribute, skip_element
from feedmap.xml.events import Attributes, EmptyEvent
from feedmap.xml.reader import XmlReader
from feedmap.xml.writer import XmlWriter


class Enclosure(BaseModel):
    """Media object attached to an item.

    All data lives in attributes; any element body is ignored on read and the
    element is written self-closing.
    """

    ELEMENT_NAME: ClassVar[str] = "enclosure"

    url: str = Field(default="", description="URL of the media object")
    length: str = Field(default="", description="Size in bytes")
    mime_type: str = Field(default="", description="MIME type, from the 'type' attribute")

    @classmethod
    def from_xml(cls, reader: XmlReader, attributes: Attributes) -> "Enclosure":
        enclosure = cls()

        for field_name, key in (("url", "url"), ("length", "length"), ("mime_type", "type")):
            value = find_attribute(attributes, key)
            if value is not None:
                setattr(enclosure, field_name, value)

        skip_element(reader, cls.ELEMENT_NAME)
        return enclosure

    def to_xml(self, writer: XmlWriter) -> None:
        attributes = Attributes.from_pairs(
            [("url", self.url), ("length", self.length), ("type", self.mime_type)]
        )
        writer.write_event(EmptyEvent(self.ELEMENT_NAME, attributes))
