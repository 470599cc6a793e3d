"""
Distinguished names as immutable values.

A L{DistinguishedName} keeps its attributes in source order, leaf-most
first, so in C{CN=host,OU=Sales,DC=example,DC=com} the C{CN} attribute
comes first and the last C{DC} attribute last.

Two equality notions exist and they are not interchangeable:

* L{DistinguishedName.sequenceEquals} compares the attribute sequences
  position by position. L{DistinguishedName.sequenceHash} agrees with it.

* L{DistinguishedName.valueEquals} compares the per-type lookups of
  L{DistinguishedName.lookup}, so attribute order does not matter. This
  is what C{==} uses, and C{hash()} agrees with it.

C{DistinguishedName('A=1,B=2')} and C{DistinguishedName('B=2,A=1')} are
equal by value but not by sequence; pick the one the call site needs.
"""

from dnkit import rebase as _rebase
from dnkit._encoder import TextStrAlias, is_text, to_unicode
from dnkit.attribute import Attribute
from dnkit.errors import FormatError
from dnkit.parser import parse

DOMAIN_COMPONENT = "DC"
COMMON_NAME = "CN"

_HASH_MASK = 0xFFFFFFFF


class DistinguishedName(TextStrAlias):
    """LDAP/X.509 Distinguished Name."""

    __slots__ = ("_attributes", "_text")

    def __init__(self, magic=None, stringValue=None, attributes=None):
        if magic is not None:
            assert stringValue is None
            assert attributes is None
            if isinstance(magic, DistinguishedName):
                attributes = magic.split()
                stringValue = magic.getText()
            elif is_text(magic):
                stringValue = magic
            else:
                attributes = magic

        if attributes is None:
            attributes, text = parse(stringValue)
        else:
            attributes = tuple(attributes)
            for x in attributes:
                assert isinstance(x, Attribute), x
            if stringValue is None:
                text = ",".join([x.getText() for x in attributes])
            else:
                text = to_unicode(stringValue)

        object.__setattr__(self, "_attributes", attributes)
        object.__setattr__(self, "_text", text)

    @classmethod
    def fromText(cls, text):
        """
        Parse distinguished name text.

        @raise FormatError: a token is not a type=value pair.
        """
        return cls(stringValue=text)

    @classmethod
    def fromAttributes(cls, attributes):
        """Build a name whose canonical text joins the attributes."""
        return cls(attributes=attributes)

    def __setattr__(self, name, value):
        raise AttributeError("%s is immutable" % (self.__class__.__name__,))

    def __reduce__(self):
        return (self.__class__, (None, self._text, self._attributes))

    @property
    def attributes(self):
        return self._attributes

    def split(self):
        return self._attributes

    def getText(self):
        return self._text

    def __repr__(self):
        return (
            self.__class__.__name__
            + "(attributes="
            + repr(self._attributes)
            + ")"
        )

    def __len__(self):
        return len(self._attributes)

    def __iter__(self):
        return iter(self._attributes)

    @property
    def attributesCount(self):
        return len(self._attributes)

    @property
    def isEmpty(self):
        return not self._attributes

    @property
    def cn(self):
        """Value of the first CN attribute, or None."""
        return self.lookup(COMMON_NAME)

    def lookup(self, attributeType):
        """
        Value of an attribute type.

        For C{DC} all domain components are joined with dots, giving a
        DNS-style domain name; a name without any C{DC} attribute gives
        the empty string. For other types the value of the first
        attribute of that type is returned, or None if there is none.

        An empty name or a blank type always gives None.
        """
        attributeType = to_unicode(attributeType)
        if not self._attributes or not attributeType or not attributeType.strip():
            return None
        if attributeType.strip().upper() == DOMAIN_COMPONENT:
            return ".".join([x.value for x in self._domainAttributes()])
        for x in self._attributes:
            if x.isType(attributeType):
                return x.value
        return None

    __getitem__ = lookup

    def _domainAttributes(self):
        return tuple(x for x in self._attributes if x.isType(DOMAIN_COMPONENT))

    def _pathAttributes(self):
        return tuple(x for x in self._attributes if not x.isType(DOMAIN_COMPONENT))

    def domain(self):
        """The DC attributes, in their original order."""
        return self.fromAttributes(self._domainAttributes())

    def path(self):
        """All attributes except DC, in their original order."""
        return self.fromAttributes(self._pathAttributes())

    def parent(self):
        """The name without its leaf-most attribute."""
        return self.fromAttributes(self._attributes[1:])

    def _types(self):
        seen = []
        for x in self._attributes:
            if x.attributeType not in seen:
                seen.append(x.attributeType)
        return seen

    def sequenceEquals(self, other):
        """
        Whether both names have equal attributes at every position.
        """
        if not isinstance(other, DistinguishedName):
            return False
        if len(self._attributes) != len(other._attributes):
            return False
        for mine, its in zip(self._attributes, other._attributes):
            if mine != its:
                return False
        return True

    def sequenceHash(self):
        """
        Order-sensitive hash, consistent with L{sequenceEquals}.
        """
        h = len(self._attributes)
        for x in self._attributes:
            h = (h * 17 + x.attributeHash()) & _HASH_MASK
        return h

    def valueEquals(self, other):
        """
        Whether every attribute type present in either name looks up to
        the same value in both.

        Text is parsed first; text that does not parse is never equal.
        """
        if other is None:
            return False
        if is_text(other):
            try:
                other = self.fromText(other)
            except FormatError:
                return False
        if not isinstance(other, DistinguishedName):
            return False
        types = self._types()
        for t in other._types():
            if t not in types:
                types.append(t)
        for t in types:
            if self.lookup(t) != other.lookup(t):
                return False
        return True

    def valueHash(self):
        """
        Order-independent hash, consistent with L{valueEquals}.
        """
        looked = []
        for t in self._types():
            value = self.lookup(t)
            if value:
                looked.append((t, value))
        return hash(frozenset(looked))

    def __eq__(self, other):
        if is_text(other) or isinstance(other, DistinguishedName):
            return self.valueEquals(other)
        return NotImplemented

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        return self.valueHash()

    def endsWith(self, other):
        """
        Structural suffix test for a L{DistinguishedName}, textual suffix
        test for a string. See L{endsWithName} and L{endsWithText}.
        """
        if other is None:
            return False
        if isinstance(other, DistinguishedName):
            return self.endsWithName(other)
        if is_text(other):
            return self.endsWithText(other)
        raise TypeError(
            "Cannot match %s against %r" % (self.__class__.__name__, other)
        )

    def endsWithName(self, other):
        """
        Whether this name lives in the tree of other, or is other.

        The domains must be equal by value. A base with no attributes
        besides DC matches everything in that domain; otherwise the
        root-ward end of this name's path must be other's path.
        """
        if other is None:
            return False
        if is_text(other):
            try:
                other = self.fromText(other)
            except FormatError:
                return False
        if not self.domain().valueEquals(other.domain()):
            return False
        its = other._pathAttributes()
        if not its:
            return True
        mine = self._pathAttributes()
        if len(mine) < len(its):
            return False
        tail = self.fromAttributes(mine[len(mine) - len(its):])
        return tail.sequenceEquals(self.fromAttributes(its))

    def endsWithText(self, text):
        """Case-insensitive suffix test on the canonical text."""
        text = to_unicode(text)
        if text is None:
            return False
        return self._text.lower().endswith(text.lower())

    def contains(self, other):
        """Does the tree rooted at this name contain or equal other."""
        if other is None:
            return False
        if is_text(other):
            try:
                other = self.fromText(other)
            except FormatError:
                return False
        return other.endsWithName(self)

    def replacementBase(self, search, replacement):
        """
        The part of replacement corresponding to the part of this name
        matched by search. See L{dnkit.rebase.replacementBase}.
        """
        return _rebase.replacementBase(self, search, replacement)

    def rebase(self, search, replacement):
        """
        This name moved from under search to under replacement. See
        L{dnkit.rebase.rebase}.
        """
        return _rebase.rebase(self, search, replacement)
