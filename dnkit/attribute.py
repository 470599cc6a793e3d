"""
A single type=value component of a distinguished name.
"""

from dnkit._encoder import TextStrAlias, is_text, to_unicode
from dnkit.errors import FormatError
from dnkit.escaping import splitOnNotEscaped, unescape

_HASH_MASK = 0xFFFFFFFF


class Attribute(TextStrAlias):
    """
    An immutable (type, value) pair.

    The type is a short descriptor such as ``CN``, ``OU``, ``O`` or
    ``DC``; it is stored upper-cased. Both type and value compare without
    regard to case.
    """

    __slots__ = ("_attributeType", "_value")

    def __init__(self, attributeType, value):
        attributeType = to_unicode(attributeType)
        value = to_unicode(value)
        assert attributeType is not None
        assert value is not None
        object.__setattr__(self, "_attributeType", attributeType.strip().upper())
        object.__setattr__(self, "_value", value)

    @classmethod
    def fromText(cls, token):
        """
        Parse a ``type=value`` token.

        The token must contain exactly one ``=`` not preceded by a
        backslash. Whitespace around the type and the value is dropped and
        ``\\=`` in the value becomes ``=``.

        @raise FormatError: the token is not a type=value pair.
        """
        token = to_unicode(token)
        parts = splitOnNotEscaped(token, "=")
        if len(parts) != 2:
            raise FormatError(
                token,
                "expected one unescaped '=', found %d" % (len(parts) - 1,),
            )
        attributeType, value = parts
        attributeType = attributeType.strip()
        if not attributeType:
            raise FormatError(token, "attribute type is empty")
        return cls(attributeType, unescape(value, "=").strip())

    @property
    def attributeType(self):
        return self._attributeType

    @property
    def value(self):
        return self._value

    def __setattr__(self, name, value):
        raise AttributeError("%s is immutable" % (self.__class__.__name__,))

    def isType(self, attributeType):
        """Whether this attribute has the given type, ignoring case."""
        return self._attributeType.lower() == attributeType.strip().lower()

    def getText(self):
        return "=".join((self._attributeType, self._value))

    def attributeHash(self):
        """
        Case-insensitive hash of type and value, truncated to 32 bits.
        """
        return (
            2 * hash(self._attributeType.lower()) + hash(self._value.lower())
        ) & _HASH_MASK

    def __repr__(self):
        return (
            self.__class__.__name__
            + "(attributeType="
            + repr(self._attributeType)
            + ", value="
            + repr(self._value)
            + ")"
        )

    def __hash__(self):
        return self.attributeHash()

    def __eq__(self, other):
        if is_text(other):
            try:
                other = self.fromText(other)
            except FormatError:
                return False
        if not isinstance(other, Attribute):
            return NotImplemented
        return (
            self._attributeType.lower() == other._attributeType.lower()
            and self._value.lower() == other._value.lower()
        )

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __reduce__(self):
        return (self.__class__, (self._attributeType, self._value))
