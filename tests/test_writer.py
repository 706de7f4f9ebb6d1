"""Tests for the XML writer."""

import io

import pytest

from feedmap.xml.events import Attributes, EndEvent, StartEvent, TextEvent
from feedmap.xml.reader import XmlReader
from feedmap.xml.writer import XmlWriter

DOCUMENT = (
    '<?xml version="1.0" encoding="UTF-8"?>'
    "<!DOCTYPE rss>"
    '<rss version="2.0"><!-- comment --><?render fast?><a x="1"/>'
    "text &amp; more<![CDATA[<raw>]]></rss>"
)


def test_events_written_back_reproduce_document():
    stream = io.StringIO()
    writer = XmlWriter(stream)

    for event in XmlReader(DOCUMENT, expand_empty_elements=False):
        writer.write_event(event)

    assert stream.getvalue() == DOCUMENT


def test_stream_property_is_destination():
    stream = io.StringIO()

    assert XmlWriter(stream).stream is stream


def test_built_events():
    stream = io.StringIO()
    writer = XmlWriter(stream)

    writer.write_event(StartEvent("title", Attributes.from_pairs([("lang", "en")])))
    writer.write_event(TextEvent.from_text("A < B"))
    writer.write_event(EndEvent("title"))

    assert stream.getvalue() == '<title lang="en">A &lt; B</title>'


def test_unknown_event_type():
    writer = XmlWriter(io.StringIO())

    with pytest.raises(TypeError):
        writer.write_event("<a/>")
