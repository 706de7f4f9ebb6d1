"""Custom exceptions for feedmap.

Provides a structured exception hierarchy for element mapping failures.
"""


class FeedmapError(Exception):
    """Base exception class for all feedmap errors."""

    pass


class ParseError(FeedmapError):
    """Raised when an element cannot be read from its XML form.

    Attributes:
        element: Name of the element being read, if known.
    """

    def __init__(self, element: str | None, message: str):
        self.element = element
        target = f"<{element}>" if element else "document"
        super().__init__(f"Failed to parse {target}: {message}")


class XmlParseError(ParseError):
    """Raised when the underlying document is not well-formed.

    Attributes:
        position: Character offset in the input where the error was detected.
    """

    def __init__(self, message: str, position: int | None = None, element: str | None = None):
        self.position = position
        if position is not None:
            message = f"{message} (at offset {position})"
        super().__init__(element, message)


class UnexpectedEofError(XmlParseError):
    """Raised when the input ends inside an unclosed element."""

    def __init__(self, position: int | None = None, element: str | None = None):
        super().__init__("unexpected end of input", position, element)


class MismatchedEndTagError(XmlParseError):
    """Raised when an end tag does not match the innermost open element.

    Attributes:
        expected: Name of the open element.
        found: Name carried by the end tag.
    """

    def __init__(self, expected: str | None, found: str, position: int | None = None):
        self.expected = expected
        self.found = found
        if expected is None:
            message = f"end tag </{found}> without matching start tag"
        else:
            message = f"expected </{expected}>, found </{found}>"
        super().__init__(message, position, expected)
