"""
Plain-text forms of a distinguished name handed to certificate tooling.

A certificate store is searched by common name, signing tools such as
C{openssl req -subj} take a slash-separated subject, and generated key
and certificate files are named after the common name.
"""

from dnkit.errors import FormatError


def toSlashSubject(dn):
    """
    The name as C{/TYPE=value} components in stored order, so
    C{CN=x,O=y} gives C{/CN=x/O=y}. Commas inside values are kept as they
    are.
    """
    return "".join(["/" + x.getText() for x in dn.split()])


def certificateLookupKey(dn):
    """The common name certificates for dn are looked up by, or None."""
    return dn.cn


def baseFilename(dn, extension=None):
    """
    The common name of dn as a file name, with an optional extension.

    @raise FormatError: dn has no common name.
    """
    name = dn.cn
    if name is None:
        raise FormatError(dn.getText(), "no CN attribute to name a file after")
    if extension:
        return name + "." + extension.lstrip(".")
    return name
