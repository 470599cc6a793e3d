"""
Backslash escaping as used in the comma-delimited distinguished name form.

Only the separators themselves are escaped: ``\\,`` inside a value and
``\\=`` inside a value. A separator is escaped when it directly follows a
backslash.
"""

import re

_separatorPatterns = {}


def _notEscaped(separator):
    pattern = _separatorPatterns.get(separator)
    if pattern is None:
        pattern = re.compile(r"(?<!\\)" + re.escape(separator))
        _separatorPatterns[separator] = pattern
    return pattern


def splitOnNotEscaped(text, separator):
    """
    Split text on every occurrence of separator not preceded by a backslash.

    The escape sequences are left in place.

    >>> splitOnNotEscaped(r'CN=a\\,b,O=c', ',')
    ['CN=a\\\\,b', 'O=c']
    """
    return _notEscaped(separator).split(text)


def containsNotEscaped(text, separator):
    """Whether separator occurs in text without a preceding backslash."""
    return _notEscaped(separator).search(text) is not None


def unescape(text, separator):
    """Replace the escaped form of separator with the separator itself."""
    return text.replace("\\" + separator, separator)
