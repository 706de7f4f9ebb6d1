"""Element reader and writer interfaces using Protocol."""

from typing import ClassVar, Protocol, Self

from feedmap.xml.events import Attributes
from feedmap.xml.reader import XmlReader
from feedmap.xml.writer import XmlWriter


class ElementReadable(Protocol):
    """Element type that can be built from its streamed XML form."""

    ELEMENT_NAME: ClassVar[str]

    @classmethod
    def from_xml(cls, reader: XmlReader, attributes: Attributes) -> Self:
        """Build the element from a start tag already consumed by the caller.

        Args:
            reader: Cursor positioned just after the start tag.
            attributes: Attributes captured on that start tag.

        Returns:
            Fully populated element. The whole element, end tag included,
            has been consumed from ``reader``.

        Raises:
            XmlParseError: When the element body is not well-formed.
        """
        ...


class ElementWritable(Protocol):
    """Element type that can serialize itself as XML."""

    def to_xml(self, writer: XmlWriter) -> None:
        """Write the element, start tag through end tag.

        Args:
            writer: Destination sink.
        """
        ...
