"""Neutral type and member descriptors used by the policy core."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum


class MemberKind(str, Enum):
    """Kind of a type member."""

    METHOD = "method"
    CONSTRUCTOR = "constructor"
    FIELD = "field"


@dataclass(frozen=True)
class MemberDescriptor:
    """A member identified by kind, name and parameter types.

    Parameter types are canonical type names, one ``[]`` suffix per array
    dimension. Return types and field types are not part of a descriptor.
    """

    kind: MemberKind
    name: str
    param_types: tuple[str, ...] = ()

    @classmethod
    def method(cls, name: str, *param_types: str) -> MemberDescriptor:
        return cls(MemberKind.METHOD, name, tuple(param_types))

    @classmethod
    def constructor(cls, type_name: str, *param_types: str) -> MemberDescriptor:
        return cls(MemberKind.CONSTRUCTOR, simple_name_of(type_name), tuple(param_types))

    @classmethod
    def field(cls, name: str) -> MemberDescriptor:
        return cls(MemberKind.FIELD, name)

    @property
    def signature(self) -> str | tuple:
        """Matching key: name for fields, params for constructors, both for methods."""
        if self.kind is MemberKind.FIELD:
            return self.name
        if self.kind is MemberKind.CONSTRUCTOR:
            return self.param_types
        return (self.name, self.param_types)

    def __str__(self) -> str:
        if self.kind is MemberKind.FIELD:
            return self.name
        return f"{self.name}({', '.join(self.param_types)})"


def simple_name_of(qualified_name: str) -> str:
    """Return the unqualified name, treating ``$`` as a nesting separator."""
    return qualified_name.rsplit(".", 1)[-1].rsplit("$", 1)[-1]


@dataclass(frozen=True, eq=False)
class TypeDescriptor:
    """A host type with its direct supertypes and public members.

    Supertypes must be built before their subtypes, so the ancestor set is
    computed once at construction and never changes afterwards.
    """

    name: str
    superclass: TypeDescriptor | None = None
    interfaces: tuple[TypeDescriptor, ...] = ()
    is_interface: bool = False
    fields: frozenset[str] = frozenset()
    methods: frozenset[MemberDescriptor] = frozenset()
    constructors: frozenset[tuple[str, ...]] = frozenset()
    marked: frozenset[MemberDescriptor] = frozenset()
    _ancestor_names: frozenset[str] = field(default=frozenset(), init=False, repr=False)

    def __post_init__(self) -> None:
        names = frozenset(t.name for t in self.ancestors())
        object.__setattr__(self, "_ancestor_names", names)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TypeDescriptor):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    @property
    def simple_name(self) -> str:
        return simple_name_of(self.name)

    def ancestors(self) -> Iterator[TypeDescriptor]:
        """Yield self, then the superclass chain, then interfaces breadth-first."""
        chain: list[TypeDescriptor] = []
        current: TypeDescriptor | None = self
        while current is not None:
            chain.append(current)
            current = current.superclass

        seen: set[str] = set()
        for t in chain:
            seen.add(t.name)
            yield t

        queue = deque(itf for t in chain for itf in t.interfaces)
        while queue:
            itf = queue.popleft()
            if itf.name in seen:
                continue
            seen.add(itf.name)
            yield itf
            queue.extend(itf.interfaces)

    def is_subtype_of(self, other: TypeDescriptor) -> bool:
        """True if this type is ``other`` or inherits from it."""
        return other.name in self._ancestor_names

    def declares(self, member: MemberDescriptor) -> bool:
        """True if this type itself (not an ancestor) declares ``member``."""
        if member.kind is MemberKind.FIELD:
            return member.name in self.fields
        if member.kind is MemberKind.CONSTRUCTOR:
            return member.param_types in self.constructors
        return member in self.methods

    def __repr__(self) -> str:
        return f"TypeDescriptor({self.name!r})"
