"""Lexical rules for member selector strings.

Entry format:
    fully.qualified.UpperBoundType.memberName[(argType1, argType2, ...)]
"""

import re

# Substrings that are never valid; generics and varargs must not be written out
FORBIDDEN_SUBSTRINGS = ("<", ">", "...", ";")

# Whitespace around these punctuation characters is insignificant
PUNCTUATION_WHITESPACE = re.compile(r"\s*([.,()\[\]])\s*")

ARRAY_SUFFIX = "[]"

# Primitive type keywords accepted as parameter types without resolution
PRIMITIVE_TYPE_NAMES = frozenset({
    "boolean", "byte", "char", "short",
    "int", "long", "float", "double",
})

_IDENTIFIER = r"[^\W\d][\w$]*|\$[\w$]*"
IDENTIFIER_PATTERN = re.compile(rf"(?:{_IDENTIFIER})\Z")
QUALIFIED_NAME_PATTERN = re.compile(rf"(?:{_IDENTIFIER})(?:\.(?:{_IDENTIFIER}))*\Z")


def normalize(text: str) -> str:
    """Trim and collapse whitespace around punctuation."""
    return PUNCTUATION_WHITESPACE.sub(r"\1", text.strip())


def is_identifier(s: str) -> bool:
    return IDENTIFIER_PATTERN.match(s) is not None


def is_qualified_name(s: str) -> bool:
    return QUALIFIED_NAME_PATTERN.match(s) is not None
