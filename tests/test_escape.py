"""Tests for XML escaping and entity resolution."""

import pytest

from feedmap.exceptions import XmlParseError
from feedmap.xml.escape import escape_attribute, escape_text, unescape


def test_escape_text_reserved_characters():
    assert escape_text('<a> & "b"\r') == '&lt;a&gt; &amp; "b"&#13;'


def test_escape_attribute_quotes_and_whitespace():
    assert escape_attribute('say "hi"\t\n') == "say &quot;hi&quot;&#9;&#10;"


def test_unescape_predefined_and_character_references():
    assert unescape("&lt;&gt;&amp;&quot;&apos;&#65;&#x41;&#x1F600;&#0066;") == "<>&\"'A\U0001f600B"


def test_unescape_without_references_is_identity():
    assert unescape("plain text") == "plain text"


@pytest.mark.parametrize("raw", ["&bogus;", "a & b", "&#xZZ;", "&#;", "&;"])
def test_unescape_rejects_invalid_references(raw):
    with pytest.raises(XmlParseError):
        unescape(raw)


def test_unescape_error_reports_absolute_position():
    with pytest.raises(XmlParseError) as exc_info:
        unescape("ab&bogus;", position=10)

    assert exc_info.value.position == 12


@pytest.mark.parametrize(
    "raw",
    ["&#6_5;", "&# 65;", "&#+67;", "&#-1;", "&#X41;", "&#x 42;", "&#x;", "&#65a;", "&#99999999;"],
)
def test_unescape_rejects_malformed_character_references(raw):
    with pytest.raises(XmlParseError):
        unescape(raw)


@pytest.mark.parametrize(
    "raw",
    ["&#0;", "&#x1;", "&#8;", "&#x1F;", "&#xD800;", "&#xDFFF;", "&#xFFFE;", "&#xFFFF;", "&#x110000;"],
)
def test_unescape_rejects_non_xml_characters(raw):
    with pytest.raises(XmlParseError):
        unescape(raw)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("&#9;&#10;&#13;", "\t\n\r"), ("&#x20;", " "), ("&#xE000;", "\ue000"), ("&#x10FFFF;", "\U0010ffff")],
)
def test_unescape_accepts_xml_character_boundaries(raw, expected):
    assert unescape(raw) == expected
