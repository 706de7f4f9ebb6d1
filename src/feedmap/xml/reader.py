"""Streaming XML pull reader.

Turns a text or byte stream into a sequence of events, one call at a time.
Each reader is an explicit cursor: nothing is shared between instances.
"""

import codecs
import io
from collections.abc import Iterator
from typing import IO

import structlog

from feedmap.config.settings import settings
from feedmap.exceptions import MismatchedEndTagError, UnexpectedEofError, XmlParseError
from feedmap.xml.events import (
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

logger = structlog.get_logger()

_WHITESPACE = " \t\r\n"


class XmlReader:
    """Pull cursor over an XML document.

    Example:
        reader = XmlReader('<source url="http://example.com">Example</source>')
        event = reader.read_event()  # StartEvent(name="source", ...)
    """

    def __init__(
        self,
        source: str | bytes | IO[str] | IO[bytes],
        *,
        encoding: str | None = None,
        chunk_size: int | None = None,
        expand_empty_elements: bool | None = None,
        check_end_names: bool | None = None,
    ):
        """Initialize the reader.

        Args:
            source: Document text or bytes, or a stream with ``read(n)``.
                The stream is never closed by the reader.
            encoding: Encoding for byte input. Defaults to settings.
            chunk_size: Amount read from the stream per refill. Defaults to settings.
            expand_empty_elements: Report ``<x/>`` as start and end events.
            check_end_names: Reject end tags that do not match the open element.
        """
        if isinstance(source, str):
            source = io.StringIO(source)
        elif isinstance(source, (bytes, bytearray)):
            source = io.BytesIO(source)

        self._stream = source
        self._encoding = encoding or settings.xml_encoding
        self._chunk_size = chunk_size or settings.read_chunk_size
        self._expand_empty = (
            settings.expand_empty_elements if expand_empty_elements is None else expand_empty_elements
        )
        self._check_end_names = settings.check_end_names if check_end_names is None else check_end_names

        self._decoder: codecs.IncrementalDecoder | None = None
        self._buffer = ""
        self._pos = 0
        self._base = 0
        self._exhausted = False

        self._open: list[str] = []
        self._pending_end: EndEvent | None = None

    @property
    def position(self) -> int:
        """Character offset of the cursor in the decoded input."""
        return self._base + self._pos

    @property
    def depth(self) -> int:
        """Number of currently open elements."""
        return len(self._open) + (1 if self._pending_end is not None else 0)

    def __iter__(self) -> Iterator[Event]:
        """Yield events up to and including the end of input."""
        while True:
            event = self.read_event()
            yield event
            if isinstance(event, EofEvent):
                return

    def read_event(self) -> Event:
        """Read the next event from the input.

        Returns:
            The next event; ``EofEvent`` once the input is exhausted.

        Raises:
            XmlParseError: When the input is not well-formed.
        """
        if self._pending_end is not None:
            event, self._pending_end = self._pending_end, None
            return event

        self._compact()
        if not self._ensure(1):
            if self._open:
                raise UnexpectedEofError(self.position, self._open[-1])
            return EofEvent(self.position)

        if self._buffer[self._pos] != "<":
            return self._read_text()

        self._ensure(9)
        rest = self._buffer[self._pos : self._pos + 9]
        if rest.startswith("<!--"):
            return self._read_comment()
        if rest.startswith("<![CDATA["):
            return self._read_cdata()
        if rest.startswith("<!DOCTYPE"):
            return self._read_doctype()
        if rest.startswith("<!"):
            raise XmlParseError("unsupported markup declaration", self.position)
        if rest.startswith("<?"):
            return self._read_processing_instruction()
        if rest.startswith("</"):
            return self._read_end()
        return self._read_start()

    def read_to_end(self, name: str) -> None:
        """Consume events up to and including the end tag closing ``name``.

        The cursor must be positioned just after the start tag of ``name``.

        Raises:
            XmlParseError: When the input ends or is malformed before the end tag.
        """
        depth = 1
        while True:
            event = self.read_event()
            if isinstance(event, StartEvent):
                depth += 1
            elif isinstance(event, EndEvent):
                depth -= 1
                if depth == 0:
                    return
            elif isinstance(event, EofEvent):
                raise UnexpectedEofError(event.position, name)

    # Buffer management

    def _compact(self) -> None:
        if self._pos:
            self._base += self._pos
            self._buffer = self._buffer[self._pos :]
            self._pos = 0

    def _fill(self, size: int | None = None) -> bool:
        """Append the next chunk of decoded input; return False at end of input."""
        if self._exhausted:
            return False

        chunk = self._stream.read(size or self._chunk_size)
        if isinstance(chunk, (bytes, bytearray)):
            if self._decoder is None:
                self._decoder = codecs.getincrementaldecoder(self._encoding)(errors="strict")
            try:
                text = self._decoder.decode(chunk, final=not chunk)
            except UnicodeDecodeError as e:
                raise XmlParseError(f"invalid byte sequence: {e.reason}", self._base + len(self._buffer)) from e
        else:
            text = chunk

        if not chunk:
            self._exhausted = True
        self._buffer += text
        return bool(text) or not self._exhausted

    def _ensure(self, count: int) -> bool:
        """Make at least ``count`` characters available after the cursor, if the input has them."""
        while len(self._buffer) - self._pos < count:
            if not self._fill():
                break
        return len(self._buffer) - self._pos >= count

    def _find(self, token: str, start: int) -> int:
        """Find ``token`` at or after buffer index ``start``, reading more input as needed."""
        # Read size doubles on every miss.
        size = self._chunk_size
        while True:
            index = self._buffer.find(token, start)
            if index >= 0:
                return index
            start = max(start, len(self._buffer) - len(token) + 1)
            if not self._fill(size):
                return -1
            size *= 2

    def _find_markup_end(self, start: int, brackets: bool = False) -> int:
        """Find the closing ``>`` of a tag, skipping quoted values (and ``[...]`` when asked)."""
        quote = None
        nesting = 0
        index = start
        size = self._chunk_size
        while True:
            if index >= len(self._buffer):
                if not self._fill(size):
                    return -1
                size *= 2
            while index < len(self._buffer):
                char = self._buffer[index]
                if quote is not None:
                    if char == quote:
                        quote = None
                elif char in ('"', "'"):
                    quote = char
                elif brackets and char == "[":
                    nesting += 1
                elif brackets and char == "]":
                    nesting -= 1
                elif char == ">" and nesting <= 0:
                    return index
                index += 1

    def _unterminated(self, what: str) -> XmlParseError:
        if self._open:
            return UnexpectedEofError(self.position, self._open[-1])
        return XmlParseError(f"unterminated {what}", self.position)

    # Event readers

    def _read_text(self) -> TextEvent:
        start = self.position
        end = self._find("<", self._pos)
        if end < 0:
            end = len(self._buffer)
        raw = self._buffer[self._pos : end]
        self._pos = end
        return TextEvent(raw, start)

    def _read_comment(self) -> CommentEvent:
        start = self.position
        end = self._find("-->", self._pos + 4)
        if end < 0:
            raise self._unterminated("comment")
        text = self._buffer[self._pos + 4 : end]
        self._pos = end + 3
        return CommentEvent(text, start)

    def _read_cdata(self) -> CDataEvent:
        start = self.position
        end = self._find("]]>", self._pos + 9)
        if end < 0:
            raise self._unterminated("CDATA section")
        text = self._buffer[self._pos + 9 : end]
        self._pos = end + 3
        return CDataEvent(text, start)

    def _read_doctype(self) -> DocTypeEvent:
        start = self.position
        end = self._find_markup_end(self._pos + 9, brackets=True)
        if end < 0:
            raise self._unterminated("doctype")
        content = self._buffer[self._pos + 9 : end].strip()
        self._pos = end + 1
        return DocTypeEvent(content, start)

    def _read_processing_instruction(self) -> DeclEvent | PIEvent:
        start = self.position
        end = self._find("?>", self._pos + 2)
        if end < 0:
            raise self._unterminated("processing instruction")
        content = self._buffer[self._pos + 2 : end]
        self._pos = end + 2
        if content.startswith("xml") and (len(content) == 3 or content[3] in _WHITESPACE):
            return DeclEvent(content, start)
        return PIEvent(content, start)

    def _read_end(self) -> EndEvent:
        start = self.position
        end = self._find(">", self._pos + 2)
        if end < 0:
            raise self._unterminated("end tag")
        name = self._buffer[self._pos + 2 : end].strip()
        self._pos = end + 1
        if not name:
            raise XmlParseError("end tag without a name", start)

        if not self._open:
            raise MismatchedEndTagError(None, name, start)
        expected = self._open.pop()
        if self._check_end_names and expected != name:
            raise MismatchedEndTagError(expected, name, start)
        return EndEvent(name, start)

    def _read_start(self) -> StartEvent | EmptyEvent:
        start = self.position
        end = self._find_markup_end(self._pos + 1)
        if end < 0:
            raise self._unterminated("start tag")
        content = self._buffer[self._pos + 1 : end]
        self._pos = end + 1

        self_closing = content.endswith("/")
        if self_closing:
            content = content[:-1]

        name_end = 0
        while name_end < len(content) and content[name_end] not in _WHITESPACE:
            name_end += 1
        name = content[:name_end]
        if not name:
            raise XmlParseError("start tag without a name", start)

        attributes = Attributes(content[name_end:], start + 1 + name_end)
        if not self_closing:
            self._open.append(name)
            return StartEvent(name, attributes, start)
        if self._expand_empty:
            self._pending_end = EndEvent(name, start)
            return StartEvent(name, attributes, start)
        return EmptyEvent(name, attributes, start)
