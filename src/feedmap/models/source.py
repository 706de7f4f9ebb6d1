"""Source element: the channel an item was republished from."""

from typing import ClassVar

from pydantic import BaseModel, Field

from feedmap.parsers.text import element_text, find_attribute
from feedmap.xml.events import Attributes, CDataEvent, EndEvent, StartEvent, TextEvent
from feedmap.xml.reader import XmlReader
from feedmap.xml.writer import XmlWriter


class Source(BaseModel):
    """Source of an RSS item.

    Serialized as ``<source url="...">title</source>``. The title is optional
    and an absent title is distinct from an empty one.
    """

    ELEMENT_NAME: ClassVar[str] = "source"

    url: str = Field(default="", description="URL of the source")
    title: str | None = Field(default=None, description="Title of the source")

    @classmethod
    def from_xml(cls, reader: XmlReader, attributes: Attributes) -> "Source":
        """Read a source element whose start tag has just been consumed.

        Args:
            reader: Cursor positioned after the ``<source>`` start tag.
            attributes: Attributes of that start tag.

        Returns:
            Source with ``url`` from the first ``url`` attribute (empty when
            missing) and ``title`` from the element text.

        Raises:
            XmlParseError: When the element is not well-formed.
        """
        source = cls()

        url = find_attribute(attributes, "url")
        if url is not None:
            source.url = url

        source.title = element_text(reader)
        return source

    def to_xml(self, writer: XmlWriter) -> None:
        """Write this source as a ``<source>`` element with explicit end tag."""
        attributes = Attributes.from_pairs([("url", self.url)])
        writer.write_event(StartEvent(self.ELEMENT_NAME, attributes))

        if self.title:
            writer.write_event(TextEvent.from_text(self.title))
        elif self.title is not None:
            # An empty text node would read back as no title.
            writer.write_event(CDataEvent(""))

        writer.write_event(EndEvent(self.ELEMENT_NAME))
