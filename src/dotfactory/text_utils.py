"""
Text Utilities

Small string helpers shared by the schema and the XML codec.
"""

import re
from typing import Any

from lxml import etree

# Characters XML 1.0 cannot carry, tab/newline/carriage return excepted
_XML_INVALID_CHARS = re.compile(r'[\x00-\x08\x0b\x0c\x0e-\x1f]')


def repeat(text: str, count: int) -> str:
    """Repeat a string the given number of times.

    Args:
        text: String to repeat
        count: Number of repetitions; zero or negative gives an empty string

    Returns:
        The repeated string
    """
    return text * max(count, 0)


def clean_text(text: str) -> str:
    """Remove control characters that break XML.

    Args:
        text: Input text string

    Returns:
        Text safe to place in an XML text node
    """
    if not text:
        return ""
    return _XML_INVALID_CHARS.sub('', text)


def to_xml_text(value: Any) -> str:
    """Convert a plain field value to the text stored in an XML element."""
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if value is None:
        return ''
    return clean_text(str(value))


def sub_element(parent: etree._Element, tag: str, value: Any) -> etree._Element:
    """Append a child element holding a scalar value."""
    child = etree.SubElement(parent, tag)
    child.text = to_xml_text(value)
    return child


def element_text(element: etree._Element) -> str:
    """Get the text of an element, empty string for empty elements."""
    return element.text if element.text is not None else ""
