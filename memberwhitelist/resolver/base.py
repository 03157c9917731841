"""Collaborator interfaces used while parsing selectors and answering queries."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..models.members import MemberDescriptor, TypeDescriptor


@runtime_checkable
class TypeResolver(Protocol):
    """Looks up types and public members by name.

    Every method returns None for "not found". Implementations may raise
    ResolutionError instead when the lookup itself failed and the cause is
    worth reporting; the parser treats both the same way.
    """

    def resolve_type(self, qualified_name: str) -> TypeDescriptor | None: ...

    def resolve_field(self, owner: TypeDescriptor, name: str) -> MemberDescriptor | None: ...

    def resolve_method(
        self, owner: TypeDescriptor, name: str, param_types: tuple[str, ...]
    ) -> MemberDescriptor | None: ...

    def resolve_constructor(
        self, owner: TypeDescriptor, param_types: tuple[str, ...]
    ) -> MemberDescriptor | None: ...


@runtime_checkable
class OverrideCheck(Protocol):
    """Decides whether a member is exposed regardless of the whitelist."""

    def has_override_marker(
        self, concrete_type: TypeDescriptor, member: MemberDescriptor
    ) -> bool: ...


class _NoOverrides:
    """Override check that never exposes anything."""

    def has_override_marker(
        self, concrete_type: TypeDescriptor, member: MemberDescriptor
    ) -> bool:
        return False

    def __repr__(self) -> str:
        return "NO_OVERRIDES"


NO_OVERRIDES: OverrideCheck = _NoOverrides()
