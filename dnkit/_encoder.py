"""
    Encoding / decoding utilities
"""


def to_unicode(value):
    """
    Converts string to unicode:

    * Returns None for None
    * Decodes value from utf-8 if it is a byte string
    * Otherwise just returns the same value
    """
    if value is None:
        return None
    if isinstance(value, bytes):
        return value.decode("utf-8")
    return value


def is_text(value):
    """
    Whether value is a byte or unicode string.
    """
    return isinstance(value, (str, bytes))


class TextStrAlias:
    """
    A helper base or mixin class which adds __str__ method
    as an alias of getText method.
    """

    def __str__(self):
        return self.getText()

    def getText(self):
        raise NotImplementedError("getText method is not implemented")
