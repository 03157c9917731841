"""Parsed member selector variants."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from ..errors import PolicyInvariantError
from .members import MemberDescriptor, MemberKind, TypeDescriptor


def _check_selector(
    selector: MemberSelector, name: str | None = None, check_name: bool = False
) -> None:
    """Reject selectors without an upper bound type or with a blank member name."""
    upper_bound = selector.upper_bound_type
    if not isinstance(upper_bound, TypeDescriptor):
        raise PolicyInvariantError(
            f"{type(selector).__name__} needs an upper bound type, got {upper_bound!r}"
        )
    if check_name and (not isinstance(name, str) or not name):
        raise PolicyInvariantError(
            f"{type(selector).__name__} on {upper_bound.name} needs a member name, got {name!r}"
        )
    params = getattr(selector, "param_types", ())
    if not isinstance(params, tuple):
        raise PolicyInvariantError(
            f"{type(selector).__name__} param_types must be a tuple, got {params!r}"
        )


@dataclass(frozen=True)
class MethodSelector:
    """Matches methods by name and parameter types in subtypes of the upper bound."""

    upper_bound_type: TypeDescriptor
    name: str
    param_types: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        _check_selector(self, self.name, check_name=True)

    @property
    def member(self) -> MemberDescriptor:
        return MemberDescriptor(MemberKind.METHOD, self.name, self.param_types)


@dataclass(frozen=True)
class ConstructorSelector:
    """Matches constructors by parameter types in subtypes of the upper bound."""

    upper_bound_type: TypeDescriptor
    param_types: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        _check_selector(self)

    @property
    def member(self) -> MemberDescriptor:
        return MemberDescriptor(
            MemberKind.CONSTRUCTOR, self.upper_bound_type.simple_name, self.param_types
        )


@dataclass(frozen=True)
class FieldSelector:
    """Matches fields by name in subtypes of the upper bound."""

    upper_bound_type: TypeDescriptor
    name: str

    def __post_init__(self) -> None:
        _check_selector(self, self.name, check_name=True)

    @property
    def member(self) -> MemberDescriptor:
        return MemberDescriptor(MemberKind.FIELD, self.name)


@dataclass(frozen=True)
class ResolutionFailure:
    """A well-formed selector whose type or member could not be resolved.

    upper_bound_type is None when the upper bound type itself was missing.
    """

    upper_bound_type: TypeDescriptor | None
    reason: str
    raw_text: str
    cause: Exception | None = None


MemberSelector = Union[MethodSelector, ConstructorSelector, FieldSelector, ResolutionFailure]
