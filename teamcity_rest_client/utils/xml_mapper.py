"""Helpers for pulling typed records out of TeamCity XML documents."""

from xml.etree import ElementTree

from teamcity_rest_client.utils.errors import MissingAttributeError, ResponseParseError


def parse(xml_text):
    """Parse an XML document and return its root element.

    Raises:
        ResponseParseError: If the text is not well-formed XML
    """
    try:
        return ElementTree.fromstring(xml_text)
    except ElementTree.ParseError as e:
        raise ResponseParseError(f"Could not parse TeamCity response: {e}") from e


def elements(xml_text, tag):
    """Yield every element named ``tag`` in the document, in document order."""
    yield from parse(xml_text).iter(tag)


def attribute(element, name):
    """Return a required attribute of an element.

    Raises:
        MissingAttributeError: If the attribute is absent
    """
    value = element.attrib.get(name)
    if value is None:
        raise MissingAttributeError(element.tag, name)
    return value


def attribute_or(element, name, default):
    """Return an attribute of an element, or ``default`` when it is absent."""
    return element.attrib.get(name, default)
