"""Cloud element: the rssCloud endpoint of a channel."""

from typing import ClassVar

from pydantic import BaseModel, Field

from feedmap.parsers.text import find_attribute, skip_element
from feedmap.xml.events import Attributes, EmptyEvent
from feedmap.xml.reader import XmlReader
from feedmap.xml.writer import XmlWriter

# Field name -> attribute name, in the order attributes are written.
_ATTRIBUTES = (
    ("domain", "domain"),
    ("port", "port"),
    ("path", "path"),
    ("register_procedure", "registerProcedure"),
    ("protocol", "protocol"),
)


class Cloud(BaseModel):
    """Web service endpoint supporting the rssCloud interface."""

    ELEMENT_NAME: ClassVar[str] = "cloud"

    domain: str = ""
    port: str = ""
    path: str = ""
    register_procedure: str = ""
    protocol: str = ""

    @classmethod
    def from_xml(cls, reader: XmlReader, attributes: Attributes) -> "Cloud":
        cloud = cls()

        for field_name, key in _ATTRIBUTES:
            value = find_attribute(attributes, key)
            if value is not None:
                setattr(cloud, field_name, value)

        skip_element(reader, cls.ELEMENT_NAME)
        return cloud

    def to_xml(self, writer: XmlWriter) -> None:
        attributes = Attributes.from_pairs(
            (key, getattr(self, field_name)) for field_name, key in _ATTRIBUTES
        )
        writer.write_event(EmptyEvent(self.ELEMENT_NAME, attributes))
