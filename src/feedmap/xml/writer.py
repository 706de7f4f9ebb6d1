"""Streaming XML writer."""

from typing import IO

from feedmap.xml.events import (
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


class XmlWriter:
    """Push sink that serializes events into a text stream.

    The writer never flushes or closes the stream; write failures from the
    stream propagate to the caller unchanged.
    """

    def __init__(self, stream: IO[str]):
        self._stream = stream

    @property
    def stream(self) -> IO[str]:
        return self._stream

    def write_event(self, event: Event) -> None:
        """Serialize a single event.

        Args:
            event: Event to write. Text and attribute content must already be
                escaped, which is what ``TextEvent.from_text`` and
                ``Attributes.from_pairs`` produce.

        Raises:
            TypeError: For an event type that cannot be written.
        """
        if isinstance(event, StartEvent):
            self._stream.write(f"<{event.name}{event.attributes.raw}>")
        elif isinstance(event, EmptyEvent):
            self._stream.write(f"<{event.name}{event.attributes.raw}/>")
        elif isinstance(event, EndEvent):
            self._stream.write(f"</{event.name}>")
        elif isinstance(event, TextEvent):
            self._stream.write(event.raw)
        elif isinstance(event, CDataEvent):
            self._stream.write(f"<![CDATA[{event.text}]]>")
        elif isinstance(event, CommentEvent):
            self._stream.write(f"<!--{event.text}-->")
        elif isinstance(event, (DeclEvent, PIEvent)):
            self._stream.write(f"<?{event.content}?>")
        elif isinstance(event, DocTypeEvent):
            self._stream.write(f"<!DOCTYPE {event.content}>")
        elif not isinstance(event, EofEvent):
            raise TypeError(f"Cannot write event of type {type(event).__name__}")
