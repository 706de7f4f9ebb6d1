"""Boundary helpers that hand a single element to its reader or writer.

These stand in for the outer document walker and assembler: they find the
element's start tag, delegate to the element type, and leave everything
else in the stream untouched.
"""

import io
from typing import IO, TypeVar

import structlog

from feedmap.exceptions import ParseError, XmlParseError
from feedmap.parsers.base import ElementReadable, ElementWritable
from feedmap.xml.events import EofEvent, StartEvent
from feedmap.xml.reader import XmlReader
from feedmap.xml.writer import XmlWriter

logger = structlog.get_logger()

T = TypeVar("T", bound=ElementReadable)


def read_element(element_type: type[T], source: str | bytes | IO[str] | IO[bytes] | XmlReader) -> T:
    """Read the first element of the given type from a document.

    Args:
        element_type: Element class, e.g. ``Source``.
        source: Document text, bytes, stream, or an existing reader whose
            cursor is advanced past the element. An existing reader must
            expand empty elements.

    Returns:
        The parsed element.

    Raises:
        ParseError: When no such element is present.
        XmlParseError: When the document is not well-formed.
    """
    if isinstance(source, XmlReader):
        reader = source
    else:
        reader = XmlReader(source, expand_empty_elements=True)
    name = element_type.ELEMENT_NAME

    try:
        for event in reader:
            if isinstance(event, StartEvent) and event.name == name:
                element = element_type.from_xml(reader, event.attributes)
                logger.debug("element_read", element=name, position=reader.position)
                return element
            if isinstance(event, EofEvent):
                break
    except XmlParseError as e:
        logger.warning("element_read_failed", element=name, error=str(e), position=e.position)
        raise

    raise ParseError(name, "element not found")


def write_element(element: ElementWritable, stream: IO[str] | None = None) -> str | None:
    """Write a single element.

    Args:
        element: Element to serialize.
        stream: Destination; when omitted the XML is returned as a string.

    Returns:
        The serialized element when no stream was given, otherwise None.
    """
    target = stream if stream is not None else io.StringIO()
    element.to_xml(XmlWriter(target))
    logger.debug("element_written", element=type(element).__name__)

    if stream is None:
        return target.getvalue()
    return None
