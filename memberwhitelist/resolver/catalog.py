"""In-memory type resolver backed by a JSON type catalog."""

from __future__ import annotations

import json
from collections.abc import Iterable
from pathlib import Path

from pydantic import ValidationError

from ..errors import WhitelistConfigError
from ..models.catalog import CatalogData, MarkerSpec, TypeSpec
from ..models.members import MemberDescriptor, MemberKind, TypeDescriptor


def _canonical(type_name: str) -> str:
    """Drop whitespace so ``String [ ]`` and ``String[]`` compare equal."""
    return "".join(type_name.split())


class CatalogResolver:
    """Resolves types and members from a fixed set of type descriptors.

    Member lookup follows public-member rules of the host runtime:
    methods and fields are found on the type or any of its ancestors,
    constructors only on the type itself.
    """

    def __init__(self, types: Iterable[TypeDescriptor]) -> None:
        self._types: dict[str, TypeDescriptor] = {t.name: t for t in types}

    @classmethod
    def from_data(cls, data: CatalogData) -> CatalogResolver:
        """Build descriptors from catalog specs, supertypes first."""
        specs: dict[str, TypeSpec] = {}
        for spec in data.types:
            if spec.name in specs:
                raise WhitelistConfigError(f"Duplicate type in catalog: {spec.name}")
            specs[spec.name] = spec

        built: dict[str, TypeDescriptor] = {}
        in_progress: set[str] = set()

        def build(name: str, referrer: str) -> TypeDescriptor:
            if name in built:
                return built[name]
            if name not in specs:
                raise WhitelistConfigError(
                    f"Unknown supertype {name!r} referenced by {referrer!r}"
                )
            if name in in_progress:
                raise WhitelistConfigError(f"Cyclic type hierarchy at {name!r}")
            in_progress.add(name)
            spec = specs[name]
            superclass = build(spec.superclass, name) if spec.superclass else None
            interfaces = tuple(build(i, name) for i in spec.interfaces)
            descriptor = TypeDescriptor(
                name=spec.name,
                superclass=superclass,
                interfaces=interfaces,
                is_interface=spec.is_interface,
                fields=frozenset(spec.fields),
                methods=frozenset(
                    MemberDescriptor.method(m.name, *map(_canonical, m.params))
                    for m in spec.methods
                ),
                constructors=frozenset(
                    tuple(map(_canonical, params)) for params in spec.constructors
                ),
                marked=frozenset(_marker(spec.name, m) for m in spec.marked),
            )
            in_progress.discard(name)
            built[name] = descriptor
            return descriptor

        for name in specs:
            build(name, name)
        return cls(built.values())

    @classmethod
    def load(cls, catalog_path: Path) -> CatalogResolver:
        """Load a catalog JSON file."""
        try:
            with open(catalog_path) as f:
                raw = json.load(f)
            data = CatalogData.model_validate(raw)
        except FileNotFoundError as e:
            raise WhitelistConfigError(f"Type catalog not found: {catalog_path}") from e
        except json.JSONDecodeError as e:
            raise WhitelistConfigError(f"Type catalog JSON decode error: {e}") from e
        except ValidationError as e:
            raise WhitelistConfigError(f"Invalid type catalog {catalog_path}: {e}") from e
        return cls.from_data(data)

    def __contains__(self, qualified_name: str) -> bool:
        return qualified_name in self._types

    def resolve_type(self, qualified_name: str) -> TypeDescriptor | None:
        return self._types.get(qualified_name)

    def resolve_field(self, owner: TypeDescriptor, name: str) -> MemberDescriptor | None:
        for t in owner.ancestors():
            if name in t.fields:
                return MemberDescriptor.field(name)
        return None

    def resolve_method(
        self, owner: TypeDescriptor, name: str, param_types: tuple[str, ...]
    ) -> MemberDescriptor | None:
        candidate = MemberDescriptor.method(name, *param_types)
        for t in owner.ancestors():
            if candidate in t.methods:
                return candidate
        return None

    def resolve_constructor(
        self, owner: TypeDescriptor, param_types: tuple[str, ...]
    ) -> MemberDescriptor | None:
        if param_types in owner.constructors:
            return MemberDescriptor.constructor(owner.name, *param_types)
        return None


def _marker(type_name: str, spec: MarkerSpec) -> MemberDescriptor:
    params = tuple(map(_canonical, spec.params))
    kind = MemberKind(spec.kind)
    if kind is MemberKind.CONSTRUCTOR:
        return MemberDescriptor.constructor(type_name, *params)
    if not spec.name:
        raise WhitelistConfigError(f"Marked {kind.value} on {type_name} has no name")
    if kind is MemberKind.FIELD:
        return MemberDescriptor.field(spec.name)
    return MemberDescriptor.method(spec.name, *params)


class MarkerOverrideCheck:
    """Exposes members that carry the override marker on the type or an ancestor.

    Search order: the type itself, its superclass chain, then implemented
    interfaces breadth-first. A marker applies when the marked member has
    the same kind and signature as the queried member.
    """

    def has_override_marker(
        self, concrete_type: TypeDescriptor, member: MemberDescriptor
    ) -> bool:
        for t in concrete_type.ancestors():
            for marked in t.marked:
                if marked.kind is member.kind and marked.signature == member.signature:
                    return True
        return False
