"""Subtype-aware registry of whitelisted member signatures."""

from __future__ import annotations

from collections.abc import Hashable

from ..errors import PolicyStateError
from ..models.members import MemberKind, TypeDescriptor


class MemberRegistry:
    """Upper bound types per member signature, for one member kind.

    An entry (U, S) matches signature S on a concrete type C only if C is U
    or a subtype of U. Where the member is declared plays no part, so an
    entry never leaks to supertypes of U that happen to declare the same
    member.
    """

    def __init__(self, kind: MemberKind) -> None:
        self.kind = kind
        self._buckets: dict[Hashable, list[TypeDescriptor] | tuple[TypeDescriptor, ...]] = {}
        self._frozen = False

    def add(self, upper_bound_type: TypeDescriptor, signature: Hashable) -> None:
        """Record an entry; adding an existing entry again changes nothing."""
        if self._frozen:
            raise PolicyStateError(f"{self.kind.value} registry is frozen")
        bucket = self._buckets.setdefault(signature, [])
        if upper_bound_type not in bucket:
            bucket.append(upper_bound_type)

    def freeze(self) -> None:
        """Make the registry read-only; safe to share between threads afterwards."""
        if not self._frozen:
            self._buckets = {sig: tuple(bucket) for sig, bucket in self._buckets.items()}
            self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def matches(self, concrete_type: TypeDescriptor, signature: Hashable) -> bool:
        """True if some entry with this signature has an upper bound C inherits from."""
        for upper_bound in self._buckets.get(signature, ()):
            if concrete_type.is_subtype_of(upper_bound):
                return True
        return False

    def upper_bounds(self, signature: Hashable) -> tuple[TypeDescriptor, ...]:
        return tuple(self._buckets.get(signature, ()))

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets.values())

    def __repr__(self) -> str:
        return f"MemberRegistry({self.kind.value}, entries={len(self)})"
