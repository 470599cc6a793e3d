"""
Moving distinguished names from one organizational base to another.

The three names involved (the name being moved, the base it is searched
under and the base replacing it) are each turned into a walk sequence
running from the root towards the leaf: a L{BOUNDARY} step standing for
the whole domain, when the name has one, followed by the non-DC
attributes root-most first. The sequences are walked in lockstep; every
step where the moved name and the search base agree contributes the
corresponding step of the replacement base.

For example, walking::

    CN=leaf,OU=Sales,DC=old,DC=com      BOUNDARY, OU=Sales, CN=leaf
    OU=Sales,DC=old,DC=com              BOUNDARY, OU=Sales
    OU=Vente,DC=new,DC=org              BOUNDARY, OU=Vente

yields C{OU=Vente,DC=new,DC=org}, and the moved name becomes
C{CN=leaf,OU=Vente,DC=new,DC=org}.
"""

from twisted.python import log


class _Boundary:
    """The domain part of a walk sequence."""

    def __repr__(self):
        return "BOUNDARY"

    def __reduce__(self):
        return "BOUNDARY"


BOUNDARY = _Boundary()


def walkSequence(dn):
    """
    Root-to-leaf steps of dn: L{BOUNDARY} if dn has any DC attribute,
    then the path attributes, root-most first.
    """
    steps = []
    if not dn.domain().isEmpty:
        steps.append(BOUNDARY)
    steps.extend(reversed(dn.path().split()))
    return tuple(steps)


def _walk(dn, search, replacement):
    """
    Walk the three names in lockstep.

    @return: C{(domain, path, consumed)} where domain holds the
        replacement domain attributes if the boundary matched, path the
        matched replacement path attributes root-most first and consumed
        the number of path attributes of dn that were matched.
    """
    domain = ()
    path = []
    consumed = 0
    for mine, searched, replacing in zip(
        walkSequence(dn), walkSequence(search), walkSequence(replacement)
    ):
        boundaries = [x is BOUNDARY for x in (mine, searched, replacing)]
        if all(boundaries):
            domain = replacement.domain().split()
            continue
        if any(boundaries):
            break
        if mine != searched:
            break
        path.append(replacing)
        consumed += 1
    return domain, path, consumed


def replacementBase(dn, search, replacement):
    """
    The part of replacement that corresponds to the part of dn matched
    by search, counting from the root.

    No check is made that dn actually lives under search; names that do
    not line up simply give a shorter, possibly empty, result. The walk
    also ends when replacement runs out of steps.

    @type dn: L{dnkit.distinguishedname.DistinguishedName}
    @rtype: L{dnkit.distinguishedname.DistinguishedName}
    """
    domain, path, consumed = _walk(dn, search, replacement)
    path.reverse()
    return dn.fromAttributes(tuple(path) + tuple(domain))


def rebase(dn, search, replacement):
    """
    Move dn from under search to under replacement.

    The attributes of dn not consumed by the walk, leaf-most first, are
    put in front of L{replacementBase}. A name that is not in the tree of
    search, or that nothing of replacement corresponds to, is returned
    unchanged.
    """
    if not dn.endsWithName(search):
        log.msg(
            "Not rebasing %r: not under %r" % (dn.getText(), search.getText()),
            debug=True,
        )
        return dn
    domain, path, consumed = _walk(dn, search, replacement)
    if not domain and not path:
        log.msg(
            "Not rebasing %r: nothing of %r corresponds to %r"
            % (dn.getText(), replacement.getText(), search.getText()),
            debug=True,
        )
        return dn
    path.reverse()
    mine = dn.path().split()
    leaf = mine[: len(mine) - consumed]
    r = dn.fromAttributes(tuple(leaf) + tuple(path) + tuple(domain))
    log.msg(
        "Rebased %r to %r" % (dn.getText(), r.getText()),
        debug=True,
    )
    return r
