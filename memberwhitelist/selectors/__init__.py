"""Member selector parsing.

Turns whitelist entry strings into structured selectors.
"""

from .grammar import FORBIDDEN_SUBSTRINGS, PRIMITIVE_TYPE_NAMES
from .parser import ArgumentSpec, SelectorSyntax, check_syntax, parse, parse_all

__all__ = [
    "parse",
    "parse_all",
    "check_syntax",
    "ArgumentSpec",
    "SelectorSyntax",
    "FORBIDDEN_SUBSTRINGS",
    "PRIMITIVE_TYPE_NAMES",
]
