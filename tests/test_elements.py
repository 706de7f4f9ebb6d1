"""Tests for the category, enclosure, guid and cloud elements."""

import pytest

from feedmap.document import read_element, write_element
from feedmap.models import Category, Cloud, Enclosure, Guid, Source
from feedmap.xml.reader import XmlReader


class TestCategory:
    def test_read(self):
        category = read_element(Category, '<category domain="http://example.com/tax">Tech</category>')

        assert category == Category(name="Tech", domain="http://example.com/tax")

    def test_read_without_domain_or_text(self):
        assert read_element(Category, "<category/>") == Category()

    def test_write(self):
        assert write_element(Category(name="A & B")) == "<category>A &amp; B</category>"
        assert (
            write_element(Category(name="Tech", domain="d"))
            == '<category domain="d">Tech</category>'
        )


class TestEnclosure:
    def test_read(self):
        enclosure = read_element(
            Enclosure, '<enclosure url="http://example.com/a.mp3" length="1024" type="audio/mpeg"/>'
        )

        assert enclosure == Enclosure(
            url="http://example.com/a.mp3", length="1024", mime_type="audio/mpeg"
        )

    def test_read_ignores_body_and_missing_attributes(self):
        enclosure = read_element(Enclosure, '<enclosure url="u"><x>y</x>text</enclosure>')

        assert enclosure == Enclosure(url="u")

    def test_write_self_closing(self):
        enclosure = Enclosure(url="u", length="10", mime_type="audio/mpeg")

        assert write_element(enclosure) == '<enclosure url="u" length="10" type="audio/mpeg"/>'


class TestGuid:
    def test_read_permalink_default(self):
        assert read_element(Guid, "<guid>http://example.com/1</guid>") == Guid(
            value="http://example.com/1", is_permalink=True
        )

    def test_read_not_permalink(self):
        assert read_element(Guid, '<guid isPermaLink="false">item-1</guid>') == Guid(
            value="item-1", is_permalink=False
        )

    def test_any_value_other_than_true_is_false(self):
        assert read_element(Guid, '<guid isPermaLink="yes">x</guid>').is_permalink is False

    def test_write(self):
        assert write_element(Guid(value="v")) == "<guid>v</guid>"
        assert (
            write_element(Guid(value="v", is_permalink=False))
            == '<guid isPermaLink="false">v</guid>'
        )


class TestCloud:
    def test_write(self):
        cloud = Cloud(
            domain="rpc.sys.com",
            port="80",
            path="/RPC2",
            register_procedure="pingMe",
            protocol="soap",
        )

        assert write_element(cloud) == (
            '<cloud domain="rpc.sys.com" port="80" path="/RPC2" '
            'registerProcedure="pingMe" protocol="soap"/>'
        )

    def test_read_first_attribute_wins(self):
        cloud = read_element(Cloud, '<cloud port="80" port="81" domain="d"></cloud>')

        assert cloud == Cloud(domain="d", port="80")


def test_sibling_elements_share_one_reader(sample_item_xml):
    reader = XmlReader(sample_item_xml)

    source = read_element(Source, reader)
    guid = read_element(Guid, reader)

    assert source.title == "Example Feed"
    assert guid == Guid(value="item-1", is_permalink=False)


@pytest.mark.parametrize(
    "element",
    [
        Category(name="Tech", domain="http://example.com/tax"),
        Category(name="<&>"),
        Enclosure(url="http://example.com/a.mp3?x=1&y=2", length="0", mime_type="audio/mpeg"),
        Guid(value="item-1", is_permalink=False),
        Guid(value="http://example.com/1"),
        Cloud(domain="d", port="80", path="/p", register_procedure="r", protocol="xml-rpc"),
    ],
)
def test_round_trip(element):
    assert read_element(type(element), write_element(element)) == element
