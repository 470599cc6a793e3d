"""
Test cases for dnkit.attribute module.
"""

from twisted.trial import unittest

from dnkit.attribute import Attribute
from dnkit.errors import FormatError


class Attribute_FromText(unittest.TestCase):
    knownValues = (
        ("CN=foo", ("CN", "foo")),
        ("cn=foo", ("CN", "foo")),
        ("  ou  =  Sales  ", ("OU", "Sales")),
        (r"owner=uid\=foo", ("OWNER", "uid=foo")),
        ("dc=", ("DC", "")),
        (b"SN=Lu\xc4\x8di\xc4\x87", ("SN", "Lučić")),
    )

    def testKnownValues(self):
        for text, (attributeType, value) in self.knownValues:
            a = Attribute.fromText(text)
            self.assertEqual(a.attributeType, attributeType)
            self.assertEqual(a.value, value)

    def testNoEquals(self):
        """A token without an unescaped = is not an attribute."""
        self.assertRaises(FormatError, Attribute.fromText, "foo")
        self.assertRaises(FormatError, Attribute.fromText, r"foo\=bar")

    def testTwoEquals(self):
        """A second unescaped = makes the token ambiguous."""
        e = self.assertRaises(FormatError, Attribute.fromText, "cn=a=b")
        self.assertEqual(e.text, "cn=a=b")
        self.assertIn("cn=a=b", str(e))

    def testEmptyType(self):
        self.assertRaises(FormatError, Attribute.fromText, "=foo")

    def testBlank(self):
        self.assertRaises(FormatError, Attribute.fromText, "")
        self.assertRaises(FormatError, Attribute.fromText, "   ")


class Attribute_Comparison(unittest.TestCase):
    def testCaseInsensitive(self):
        """Type and value are both compared without regard to case."""
        self.assertEqual(Attribute("cn", "Foo"), Attribute("CN", "fOO"))
        self.assertEqual(
            hash(Attribute("cn", "Foo")), hash(Attribute("CN", "fOO"))
        )

    def testDifferentValue(self):
        self.assertNotEqual(Attribute("CN", "foo"), Attribute("CN", "bar"))

    def testDifferentType(self):
        self.assertNotEqual(Attribute("CN", "foo"), Attribute("OU", "foo"))

    def testEqualToText(self):
        """Text is parsed as a type=value token before comparing."""
        self.assertEqual(Attribute("CN", "foo"), "cn = FOO")
        self.assertNotEqual(Attribute("CN", "foo"), "cn=bar")

    def testNotEqualToMalformedText(self):
        self.assertNotEqual(Attribute("CN", "foo"), "foo")

    def testNotEqualToOtherTypes(self):
        self.assertNotEqual(Attribute("CN", "1"), 1)
        self.assertNotEqual(Attribute("CN", "foo"), None)


class Attribute_Text(unittest.TestCase):
    def testGetText(self):
        self.assertEqual(Attribute("cn", "foo").getText(), "CN=foo")

    def testStr(self):
        self.assertEqual(str(Attribute("o", "Widget Inc.")), "O=Widget Inc.")

    def testNoReescaping(self):
        """Separators in values are not escaped again."""
        self.assertEqual(Attribute("O", "a,b=c").getText(), "O=a,b=c")

    def testRepr(self):
        self.assertEqual(
            repr(Attribute("CN", "foo")),
            "Attribute(attributeType='CN', value='foo')",
        )


class Attribute_Immutable(unittest.TestCase):
    def testSetAttribute(self):
        a = Attribute("CN", "foo")

        def set():
            a.value = "bar"

        self.assertRaises(AttributeError, set)
        self.assertEqual(a.value, "foo")

    def testIsType(self):
        a = Attribute("dc", "example")
        self.assertTrue(a.isType("DC"))
        self.assertTrue(a.isType("dc"))
        self.assertFalse(a.isType("CN"))
