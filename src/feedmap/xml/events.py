"""Event records exchanged with the XML reader and writer."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

import structlog

from feedmap.xml.escape import escape_attribute, escape_text, unescape

logger = structlog.get_logger()

_WHITESPACE = " \t\r\n"


@dataclass(frozen=True)
class Attribute:
    """A single well-formed attribute with its value still escaped."""

    key: str
    raw_value: str
    position: int | None = None

    def unescape_value(self) -> str:
        """Return the value with entity and character references resolved.

        Raises:
            XmlParseError: When the value contains an invalid reference.
        """
        return unescape(self.raw_value, self.position)


class Attributes:
    """Attribute list of a start tag, kept as raw text and parsed on iteration.

    Iteration yields attributes in document order. Duplicate keys are all
    yielded; attributes that are not ``key="value"`` or ``key='value'`` are
    skipped.
    """

    __slots__ = ("_raw", "_position")

    def __init__(self, raw: str = "", position: int | None = None):
        self._raw = raw
        self._position = position

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, str]]) -> "Attributes":
        """Build an attribute list from unescaped key/value pairs."""
        raw = "".join(f' {key}="{escape_attribute(value)}"' for key, value in pairs)
        return cls(raw)

    @property
    def raw(self) -> str:
        """Attribute text exactly as written in the start tag."""
        return self._raw

    def __iter__(self) -> Iterator[Attribute]:
        for attribute, error in self._scan():
            if attribute is not None:
                yield attribute
            else:
                logger.debug("xml_attribute_skipped", reason=error, attributes=self._raw)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Attributes):
            return NotImplemented
        return self._raw == other._raw

    def __hash__(self) -> int:
        return hash(self._raw)

    def __repr__(self) -> str:
        return f"Attributes({self._raw!r})"

    def _offset(self, index: int) -> int | None:
        return None if self._position is None else self._position + index

    def _scan(self) -> Iterator[tuple[Attribute | None, str | None]]:
        raw = self._raw
        size = len(raw)
        i = 0

        while True:
            while i < size and raw[i] in _WHITESPACE:
                i += 1
            if i >= size:
                return

            start = i
            while i < size and raw[i] not in _WHITESPACE and raw[i] != "=":
                i += 1
            key = raw[start:i]

            while i < size and raw[i] in _WHITESPACE:
                i += 1
            if i >= size or raw[i] != "=":
                yield None, f"attribute {key!r} has no value"
                continue

            i += 1
            while i < size and raw[i] in _WHITESPACE:
                i += 1
            if i >= size:
                yield None, f"attribute {key!r} has no value"
                return

            quote = raw[i]
            if quote not in ('"', "'"):
                while i < size and raw[i] not in _WHITESPACE:
                    i += 1
                yield None, f"attribute {key!r} value is not quoted"
                continue

            end = raw.find(quote, i + 1)
            if end < 0:
                yield None, f"attribute {key!r} value is not terminated"
                return

            value_start = i + 1
            i = end + 1
            if not key:
                yield None, "attribute value without a name"
                continue

            yield Attribute(key, raw[value_start:end], self._offset(value_start)), None


@dataclass(frozen=True)
class StartEvent:
    """Opening tag ``<name ...>``."""

    name: str
    attributes: Attributes = field(default_factory=Attributes)
    position: int | None = None


@dataclass(frozen=True)
class EmptyEvent:
    """Self-closing tag ``<name .../>``."""

    name: str
    attributes: Attributes = field(default_factory=Attributes)
    position: int | None = None


@dataclass(frozen=True)
class EndEvent:
    """Closing tag ``</name>``."""

    name: str
    position: int | None = None


@dataclass(frozen=True)
class TextEvent:
    """Character data between tags, still escaped."""

    raw: str
    position: int | None = None

    @classmethod
    def from_text(cls, text: str) -> "TextEvent":
        """Build a text event from unescaped content."""
        return cls(escape_text(text))

    def unescape(self) -> str:
        return unescape(self.raw, self.position)


@dataclass(frozen=True)
class CDataEvent:
    """``<![CDATA[...]]>`` section; content is literal."""

    text: str
    position: int | None = None


@dataclass(frozen=True)
class CommentEvent:
    text: str
    position: int | None = None


@dataclass(frozen=True)
class DeclEvent:
    """XML declaration ``<?xml ...?>``."""

    content: str
    position: int | None = None


@dataclass(frozen=True)
class PIEvent:
    """Processing instruction other than the XML declaration."""

    content: str
    position: int | None = None


@dataclass(frozen=True)
class DocTypeEvent:
    content: str
    position: int | None = None


@dataclass(frozen=True)
class EofEvent:
    position: int | None = None


Event = (
    StartEvent
    | EmptyEvent
    | EndEvent
    | TextEvent
    | CDataEvent
    | CommentEvent
    | DeclEvent
    | PIEvent
    | DocTypeEvent
    | EofEvent
)
