"""
Test cases for dnkit.parser and dnkit.escaping modules.
"""

from twisted.trial import unittest

from dnkit import escaping, parser
from dnkit.attribute import Attribute
from dnkit.errors import FormatError


class Escaping(unittest.TestCase):
    def testSplitOnNotEscaped(self):
        self.assertEqual(
            escaping.splitOnNotEscaped(r"CN=a\,b,O=c", ","),
            [r"CN=a\,b", "O=c"],
        )

    def testSplitWithoutSeparator(self):
        self.assertEqual(escaping.splitOnNotEscaped("foo", ","), ["foo"])

    def testContainsNotEscaped(self):
        self.assertTrue(escaping.containsNotEscaped("a=b", "="))
        self.assertTrue(escaping.containsNotEscaped(r"a\=b=c", "="))
        self.assertFalse(escaping.containsNotEscaped(r"a\=b", "="))
        self.assertFalse(escaping.containsNotEscaped("ab", "="))

    def testUnescape(self):
        self.assertEqual(escaping.unescape(r"a\,b\,c", ","), "a,b,c")
        self.assertEqual(escaping.unescape(r"a\=b\,c", "="), r"a=b\,c")


class Parse(unittest.TestCase):
    knownValues = (
        ("CN=foo", [("CN", "foo")]),
        (r"CN=a\,b,O=c", [("CN", "a,b"), ("O", "c")]),
        (
            r"CN=test,O=CodeDog\, Ltd.,OU=dev",
            [("CN", "test"), ("O", "CodeDog, Ltd."), ("OU", "dev")],
        ),
        (
            "cn=bar, dc=example,  dc=com",
            [("CN", "bar"), ("DC", "example"), ("DC", "com")],
        ),
        (
            r"cn=test,owner=uid\=foo\,ou\=people",
            [("CN", "test"), ("OWNER", "uid=foo,ou=people")],
        ),
    )

    def testKnownValues(self):
        for text, expected in self.knownValues:
            attributes, canonical = parser.parse(text)
            self.assertEqual(
                [(x.attributeType, x.value) for x in attributes], expected
            )
            self.assertEqual(canonical, text)

    def testEmpty(self):
        """Blank input is the empty name, not an error."""
        for text in (None, "", "   ", b""):
            self.assertEqual(parser.parse(text), ((), ""))

    def testBareName(self):
        """Text without an unescaped = is a common name."""
        attributes, canonical = parser.parse("test.site")
        self.assertEqual(attributes, (Attribute("CN", "test.site"),))
        self.assertEqual(canonical, "CN=test.site")

    def testBareNameWithEscapedEquals(self):
        attributes, canonical = parser.parse(r"a\=b")
        self.assertEqual(canonical, r"CN=a\=b")
        self.assertEqual(attributes[0].value, r"a\=b")

    def testBareNameWithComma(self):
        """A comma alone does not make text a list of attributes."""
        attributes, canonical = parser.parse("Doe, John")
        self.assertEqual(len(attributes), 1)
        self.assertEqual(attributes[0].value, "Doe, John")
        self.assertEqual(canonical, "CN=Doe, John")


class Parse_Malformed(unittest.TestCase):
    def testMalformed(self):
        for text in ("foo,dc=com", "ou=something,foo", "cn=a=b,dc=com", "cn=x,,dc=com"):
            self.assertRaises(FormatError, parser.parse, text)

    def testParseAttributes(self):
        self.assertRaises(FormatError, parser.parseAttributes, "cn=x,o")
