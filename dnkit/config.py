import configparser
import os.path

from twisted.python import log
from zope.interface import implementer

from dnkit import interfaces
from dnkit.distinguishedname import DistinguishedName
from dnkit.errors import MissingMappingError

REBASE_SECTION_PREFIX = "rebase "


@implementer(interfaces.IRebaseConfig)
class RebaseConfig:
    mappings = None
    strict = None

    def __init__(self, mappings=None, strict=None):
        self.mappings = []
        if mappings is not None:
            if hasattr(mappings, "items"):
                mappings = mappings.items()
            for k, v in mappings:
                self.mappings.append((DistinguishedName(k), DistinguishedName(v)))
        if strict is not None:
            self.strict = strict

    def getMappings(self):
        # Search bases are matched by sequence, not by value.
        r = [
            (search, replacement)
            for search, replacement in self._loadMappings()
            if not any(search.sequenceEquals(mine) for mine, _ in self.mappings)
        ]
        r.extend(self.mappings)
        return r

    def _loadMappings(self):
        mappings = []
        cfg = loadConfig()
        for section in cfg.sections():
            if not section.lower().startswith(REBASE_SECTION_PREFIX):
                continue
            base = section[len(REBASE_SECTION_PREFIX) :].strip()
            replacement = cfg.get(section, "replacement", fallback=None)
            if not replacement:
                log.msg("Ignoring [%s]: no replacement given" % (section,))
                continue
            mappings.append(
                (
                    DistinguishedName(stringValue=base),
                    DistinguishedName(stringValue=replacement),
                )
            )
        return mappings

    def findMapping(self, dn):
        if not isinstance(dn, DistinguishedName):
            dn = DistinguishedName(dn)
        found = None
        for search, replacement in self.getMappings():
            if not dn.endsWithName(search):
                continue
            if found is None or search.attributesCount > found[0].attributesCount:
                found = (search, replacement)
        return found

    def isStrict(self):
        if self.strict is not None:
            return self.strict
        return useStrictRebase()

    def rebase(self, dn, strict=None):
        if not isinstance(dn, DistinguishedName):
            dn = DistinguishedName(dn)
        if strict is None:
            strict = self.isStrict()
        found = self.findMapping(dn)
        if found is None:
            if strict:
                raise MissingMappingError(dn)
            log.msg("No rebase mapping for %r" % (dn.getText(),), debug=True)
            return dn
        search, replacement = found
        log.msg(
            "Rebasing %r from %r to %r"
            % (dn.getText(), search.getText(), replacement.getText()),
            debug=True,
        )
        return dn.rebase(search, replacement)

    def copy(self, **kw):
        if "mappings" not in kw:
            kw["mappings"] = self.mappings
        if "strict" not in kw:
            kw["strict"] = self.strict
        r = self.__class__(**kw)
        return r


DEFAULTS = {
    "dnkit": {
        "strict-rebase": "no",
    },
}

CONFIG_FILES = [
    "/etc/dnkit/global.cfg",
    os.path.expanduser("~/.dnkit/global.cfg"),
]

__config = None


def loadConfig(configFiles=None, reload=False):
    """
    Load configuration file.
    """
    global __config
    if __config is None or reload:
        x = configparser.ConfigParser(interpolation=None)

        for section, options in DEFAULTS.items():
            x.add_section(section)
            for option, value in options.items():
                x.set(section, option, value)

        if configFiles is None:
            configFiles = CONFIG_FILES
        x.read(configFiles)
        __config = x
    return __config


def useStrictRebase():
    """
    Read configuration file if necessary and return whether names
    without a rebase mapping are an error.
    """
    cfg = loadConfig()
    return cfg.getboolean("dnkit", "strict-rebase")
