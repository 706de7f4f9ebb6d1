"""Test configuration and fixtures."""

import pytest
import structlog

from feedmap.xml.events import StartEvent
from feedmap.xml.reader import XmlReader


@pytest.fixture
def open_element():
    """Return a helper that positions a reader just after the first start tag."""

    def _open(xml, **kwargs):
        reader = XmlReader(xml, **kwargs)
        event = reader.read_event()
        while not isinstance(event, StartEvent):
            event = reader.read_event()
        return reader, event

    return _open


@pytest.fixture
def sample_item_xml():
    """RSS item with a source between sibling elements."""
    return """<item>
    <title>Test Item</title>
    <source url="http://example.com/feed.xml">Example Feed</source>
    <guid isPermaLink="false">item-1</guid>
</item>"""


@pytest.fixture
def reset_logging():
    """Restore structlog defaults after a test that configures logging."""
    yield
    structlog.reset_defaults()
