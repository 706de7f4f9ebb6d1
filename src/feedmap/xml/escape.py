"""XML character escaping and entity resolution."""

import re

from feedmap.exceptions import XmlParseError

PREDEFINED_ENTITIES = {
    "lt": "<",
    "gt": ">",
    "amp": "&",
    "quot": '"',
    "apos": "'",
}

_TEXT_ESCAPES = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    "\r": "&#13;",
}

# Whitespace is written as character references so attribute-value
# normalization in other parsers leaves it intact.
_ATTRIBUTE_ESCAPES = {
    **_TEXT_ESCAPES,
    '"': "&quot;",
    "\t": "&#9;",
    "\n": "&#10;",
}

_TEXT_PATTERN = re.compile("[&<>\r]")
_ATTRIBUTE_PATTERN = re.compile('[&<>"\t\n\r]')
# Leading zeros are allowed; anything longer is above U+10FFFF.
_CHAR_REFERENCE = re.compile(r"#(?:x0*(?P<hex>[0-9a-fA-F]{1,6})|0*(?P<dec>[0-9]{1,7}))", re.ASCII)


def escape_text(text: str) -> str:
    """Escape reserved characters in element text content."""
    return _TEXT_PATTERN.sub(lambda m: _TEXT_ESCAPES[m.group()], text)


def escape_attribute(value: str) -> str:
    """Escape an attribute value for use inside double quotes."""
    return _ATTRIBUTE_PATTERN.sub(lambda m: _ATTRIBUTE_ESCAPES[m.group()], value)


def _is_xml_char(codepoint: int) -> bool:
    return (
        codepoint in (0x9, 0xA, 0xD)
        or 0x20 <= codepoint <= 0xD7FF
        or 0xE000 <= codepoint <= 0xFFFD
        or 0x10000 <= codepoint <= 0x10FFFF
    )


def _resolve(name: str, position: int | None) -> str:
    if name.startswith("#"):
        match = _CHAR_REFERENCE.fullmatch(name)
        if match is None:
            raise XmlParseError(f"invalid character reference &{name};", position)
        if match.group("hex") is not None:
            codepoint = int(match.group("hex"), 16)
        else:
            codepoint = int(match.group("dec"), 10)
        if not _is_xml_char(codepoint):
            raise XmlParseError(f"character reference &{name}; is not an XML character", position)
        return chr(codepoint)

    try:
        return PREDEFINED_ENTITIES[name]
    except KeyError:
        raise XmlParseError(f"unknown entity reference &{name};", position) from None


def unescape(raw: str, position: int | None = None) -> str:
    """Resolve entity and character references in raw XML text.

    Args:
        raw: Text exactly as it appears in the document.
        position: Offset of ``raw`` in the input, used for error reporting.

    Returns:
        Decoded text.

    Raises:
        XmlParseError: On an unknown or unterminated reference.
    """
    if "&" not in raw:
        return raw

    parts: list[str] = []
    index = 0
    while True:
        amp = raw.find("&", index)
        if amp < 0:
            parts.append(raw[index:])
            break
        parts.append(raw[index:amp])
        semi = raw.find(";", amp + 1)
        where = None if position is None else position + amp
        if semi < 0:
            raise XmlParseError("unterminated entity reference", where)
        parts.append(_resolve(raw[amp + 1 : semi], where))
        index = semi + 1

    return "".join(parts)
