"""
Exceptions raised by dnkit.
"""


class FormatError(Exception):
    """
    A distinguished name token is not a valid type=value pair.

    It is raised when a token, after splitting on unescaped commas, does
    not split into exactly two parts on an unescaped equals sign.
    """

    def __init__(self, text, reason=None):
        Exception.__init__(self)
        self.text = text
        self.reason = reason

    def __str__(self):
        if self.reason:
            return "Invalid distinguished name attribute %r: %s." % (
                self.text,
                self.reason,
            )
        return "Invalid distinguished name attribute %r." % (self.text,)


class MissingMappingError(Exception):
    """No configured rebase mapping covers the distinguished name"""

    def __init__(self, dn=None):
        Exception.__init__(self)
        self.dn = dn

    def __str__(self):
        if self.dn is None:
            return self.__doc__
        return "{} {!r}".format(self.__doc__, self.dn.getText())
