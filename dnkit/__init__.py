"""Parsing, comparison and rebasing of LDAP/X.509 distinguished names"""
__version__ = "1.0.0"

__title__ = "dnkit"
__description__ = "Parsing, comparison and rebasing of LDAP/X.509 distinguished names"
__uri__ = "https://github.com/dnkit/dnkit"

__license__ = "MIT"
__author__ = "The dnkit developers"
__copyright__ = "Copyright (c) 2020-2026 {}".format(__author__)
