"""Member selector parser.

Two-phase parse:
1. Syntax check (forbidden substrings, separators, identifiers). Any
   problem raises SelectorSyntaxError.
2. Resolution of the upper bound type, parameter types and the member
   itself. Any miss becomes a ResolutionFailure instead of an exception.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

from ..errors import ResolutionError, SelectorSyntaxError
from ..models.selector import (
    ConstructorSelector,
    FieldSelector,
    MemberSelector,
    MethodSelector,
    ResolutionFailure,
)
from ..resolver.base import TypeResolver
from .grammar import (
    ARRAY_SUFFIX,
    FORBIDDEN_SUBSTRINGS,
    PRIMITIVE_TYPE_NAMES,
    is_identifier,
    is_qualified_name,
    normalize,
)


@dataclass(frozen=True)
class ArgumentSpec:
    """A parameter type as written: base name plus array dimensions."""

    base_name: str
    dimensions: int = 0

    @property
    def is_primitive(self) -> bool:
        return self.base_name in PRIMITIVE_TYPE_NAMES


@dataclass(frozen=True)
class SelectorSyntax:
    """Result of the syntax phase; args is None when no parameter list was given."""

    type_name: str
    member_name: str
    args: tuple[ArgumentSpec, ...] | None


def check_syntax(raw_text: str) -> SelectorSyntax:
    """Split a selector string into its parts without resolving anything.

    Raises:
        SelectorSyntaxError: if the text is malformed
    """
    if any(s in raw_text for s in FORBIDDEN_SUBSTRINGS):
        raise SelectorSyntaxError(
            'shouldn\'t contain "<", ">", "...", or ";"', raw_text
        )
    text = normalize(raw_text)

    open_paren = text.find("(")
    has_args = open_paren != -1
    post_member = open_paren if has_args else len(text)

    dot = text.rfind(".", 0, post_member)
    if dot == -1:
        raise SelectorSyntaxError("missing dot", raw_text)

    type_name = text[:dot]
    if not is_qualified_name(type_name):
        raise SelectorSyntaxError("malformed upper bound type name", raw_text)

    member_name = text[dot + 1:post_member]
    if not is_identifier(member_name):
        raise SelectorSyntaxError("malformed member name", raw_text)

    args = None
    if has_args:
        if not text.endswith(")"):
            raise SelectorSyntaxError("missing closing ')'", raw_text)
        args = _split_args(text[open_paren + 1:-1], raw_text)

    return SelectorSyntax(type_name, member_name, args)


def _split_args(args_text: str, raw_text: str) -> tuple[ArgumentSpec, ...]:
    specs = []
    # Empty slots between commas are skipped: "(int,,int)" is "(int,int)", "(,)" is "()"
    for arg in filter(None, args_text.split(",")):
        dimensions = 0
        while arg.endswith(ARRAY_SUFFIX):
            dimensions += 1
            arg = arg[:-len(ARRAY_SUFFIX)]
        if not arg:
            raise SelectorSyntaxError("empty argument type", raw_text)
        if arg not in PRIMITIVE_TYPE_NAMES and not is_qualified_name(arg):
            raise SelectorSyntaxError("malformed argument type name", raw_text)
        specs.append(ArgumentSpec(arg, dimensions))
    return tuple(specs)


def _lookup(fn: Callable[..., Any], *args: Any) -> tuple[Any, ResolutionError | None]:
    """Call a resolver method, turning ResolutionError into a (None, cause) pair."""
    try:
        return fn(*args), None
    except ResolutionError as e:
        return None, e


def parse(raw_text: str, resolver: TypeResolver) -> MemberSelector:
    """
    Parse one whitelist entry.

    Args:
        raw_text: Selector such as ``com.example.MyClass.myMethod(int, java.lang.String[])``
        resolver: Resolves type and member names

    Returns:
        A method, constructor or field selector, or a ResolutionFailure when
        a referenced type or member does not exist.

    Raises:
        SelectorSyntaxError: if the text is malformed
    """
    syntax = check_syntax(raw_text)

    upper_bound, cause = _lookup(resolver.resolve_type, syntax.type_name)
    if upper_bound is None:
        return ResolutionFailure(
            None, f"Type not found: {syntax.type_name}", raw_text, cause
        )

    if syntax.args is None:
        member, cause = _lookup(resolver.resolve_field, upper_bound, syntax.member_name)
        if member is None:
            return ResolutionFailure(
                upper_bound,
                f"Field not found: {upper_bound.name}.{syntax.member_name}",
                raw_text,
                cause,
            )
        return FieldSelector(upper_bound, syntax.member_name)

    param_types: list[str] = []
    for arg in syntax.args:
        if arg.is_primitive:
            base = arg.base_name
        else:
            arg_type, cause = _lookup(resolver.resolve_type, arg.base_name)
            if arg_type is None:
                return ResolutionFailure(
                    upper_bound, f"Parameter type not found: {arg.base_name}", raw_text, cause
                )
            base = arg_type.name
        param_types.append(base + ARRAY_SUFFIX * arg.dimensions)
    params = tuple(param_types)
    shown = f"({', '.join(params)})"

    # A parenthesized member named after its own type is always a constructor
    if syntax.member_name == upper_bound.simple_name:
        member, cause = _lookup(resolver.resolve_constructor, upper_bound, params)
        if member is None:
            return ResolutionFailure(
                upper_bound, f"Constructor not found: {upper_bound.name}{shown}", raw_text, cause
            )
        return ConstructorSelector(upper_bound, params)

    member, cause = _lookup(resolver.resolve_method, upper_bound, syntax.member_name, params)
    if member is None:
        return ResolutionFailure(
            upper_bound,
            f"Method not found: {upper_bound.name}.{syntax.member_name}{shown}",
            raw_text,
            cause,
        )
    return MethodSelector(upper_bound, syntax.member_name, params)


def parse_all(raw_texts: Iterable[str], resolver: TypeResolver) -> list[MemberSelector]:
    """Parse entries in order; the first syntax error aborts the whole batch."""
    return [parse(text, resolver) for text in raw_texts]
