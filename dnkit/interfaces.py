from zope.interface import Interface


class IRebaseConfig(Interface):
    """
    Configuration of the organizational bases names are moved between.
    """

    def getMappings():
        """
        Get the configured rebase mappings.

        @return: A list of (search base, replacement base) tuples of
            DistinguishedName instances, one per configured mapping.
        """

    def findMapping(dn):
        """
        Find the most specific mapping whose search base dn lives under.

        @param dn: The name to be moved.
        @type dn: DistinguishedName

        @return: A (search, replacement) tuple, or None.
        """

    def rebase(dn, strict=None):
        """
        Move dn according to the mapping found for it.

        @param strict: Raise MissingMappingError instead of returning dn
            unchanged when no mapping applies. None means use the
            configured default.

        @return: The moved name.
        @rtype: DistinguishedName
        """

    def copy(**kw):
        """
        Return a copy of this configuration, with the given keyword
        arguments replacing the constructor arguments.
        """
