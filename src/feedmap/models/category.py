"""Category element of a channel or item."""

from typing import ClassVar

from pydantic import BaseModel, Field

from feedmap.parsers.text import element_text, find_attribute
from feedmap.xml.events import Attributes, EndEvent, StartEvent, TextEvent
from feedmap.xml.reader import XmlReader
from feedmap.xml.writer import XmlWriter


class Category(BaseModel):
    """A category, e.g. ``<category domain="http://example.com/tax">Tech</category>``."""

    ELEMENT_NAME: ClassVar[str] = "category"

    name: str = Field(default="", description="Category name")
    domain: str | None = Field(default=None, description="Taxonomy the category belongs to")

    @classmethod
    def from_xml(cls, reader: XmlReader, attributes: Attributes) -> "Category":
        category = cls()
        category.domain = find_attribute(attributes, "domain")
        category.name = element_text(reader) or ""
        return category

    def to_xml(self, writer: XmlWriter) -> None:
        pairs = [("domain", self.domain)] if self.domain is not None else []
        writer.write_event(StartEvent(self.ELEMENT_NAME, Attributes.from_pairs(pairs)))
        if self.name:
            writer.write_event(TextEvent.from_text(self.name))
        writer.write_event(EndEvent(self.ELEMENT_NAME))
