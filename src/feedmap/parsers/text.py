"""Attribute lookup and text extraction shared by all element readers."""

from feedmap.exceptions import UnexpectedEofError
from feedmap.xml.events import Attributes, CDataEvent, EndEvent, EofEvent, StartEvent, TextEvent
from feedmap.xml.reader import XmlReader


def find_attribute(attributes: Attributes, name: str) -> str | None:
    """Return the decoded value of the first attribute called ``name``.

    Later attributes with the same name are ignored, as are malformed
    attributes encountered before the match.

    Args:
        attributes: Attributes captured on the start tag.
        name: Attribute name to look up.

    Returns:
        Decoded value, or None when the attribute is absent.

    Raises:
        XmlParseError: When the matching value holds an invalid reference.
    """
    for attribute in attributes:
        if attribute.key == name:
            return attribute.unescape_value()
    return None


def element_text(reader: XmlReader) -> str | None:
    """Collect the text of the current element and consume its end tag.

    Direct text and CDATA content are concatenated in document order. Child
    elements are consumed but contribute nothing.

    Args:
        reader: Cursor positioned just after the element's start tag.

    Returns:
        Decoded text, or None when the element has no text content at all.

    Raises:
        XmlParseError: When the element is not closed or not well-formed.
    """
    content: list[str] | None = None

    while True:
        event = reader.read_event()
        if isinstance(event, StartEvent):
            reader.read_to_end(event.name)
        elif isinstance(event, TextEvent):
            if content is None:
                content = []
            content.append(event.unescape())
        elif isinstance(event, CDataEvent):
            if content is None:
                content = []
            content.append(event.text)
        elif isinstance(event, EndEvent):
            break
        elif isinstance(event, EofEvent):
            raise UnexpectedEofError(event.position)

    return None if content is None else "".join(content)


def skip_element(reader: XmlReader, name: str) -> None:
    """Consume the rest of the current element, discarding its content."""
    reader.read_to_end(name)
