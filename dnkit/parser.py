"""
Turn distinguished name text into an ordered sequence of attributes.

Two input shapes are accepted:

* ``type=value`` tokens separated by commas, leaf-most first. A comma or
  equals sign inside a value is written with a preceding backslash.

* A bare string without any unescaped ``=``, which is shorthand for a
  common name: ``example.com`` reads as ``CN=example.com``.

Blank input is the empty name.
"""

from dnkit._encoder import to_unicode
from dnkit.attribute import Attribute
from dnkit.escaping import containsNotEscaped, splitOnNotEscaped, unescape


def parseAttribute(token):
    """Parse one ``type=value`` token into an L{Attribute}."""
    return Attribute.fromText(token)


def parseAttributes(text):
    """
    Split text on unescaped commas and parse every token.

    @raise dnkit.errors.FormatError: a token is not a type=value pair.
    """
    return tuple(
        parseAttribute(unescape(token, ","))
        for token in splitOnNotEscaped(text, ",")
    )


def isBareName(text):
    return not containsNotEscaped(text, "=")


def parse(text):
    """
    Parse distinguished name text.

    @return: a C{(attributes, canonicalText)} tuple. The canonical text of
        parsed input is the input itself; a bare common name gets a
        C{CN=} prefix.
    """
    text = to_unicode(text)
    if text is None or not text.strip():
        return (), ""
    if isBareName(text):
        return (Attribute("CN", text),), "CN=" + text
    return parseAttributes(text), text
