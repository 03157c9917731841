"""Whitelist-based member access policy.

Only members that were explicitly whitelisted, or that carry an override
marker, are exposed. A member whitelisted in an upper bound type is
whitelisted in all subtypes of it, even for fields and constructors, but
never in the types it was inherited from.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..errors import PolicyInvariantError
from ..models.members import MemberDescriptor, MemberKind, TypeDescriptor
from ..models.selector import (
    ConstructorSelector,
    FieldSelector,
    MemberSelector,
    MethodSelector,
    ResolutionFailure,
)
from ..resolver.base import NO_OVERRIDES, OverrideCheck, TypeResolver
from ..selectors.parser import parse_all
from .registry import MemberRegistry

logger = logging.getLogger(__name__)


class WhitelistPolicy:
    """Immutable member access policy built from parsed selectors."""

    def __init__(
        self,
        selectors: Iterable[MemberSelector],
        override_check: OverrideCheck = NO_OVERRIDES,
    ) -> None:
        self.override_check = override_check
        self.methods = MemberRegistry(MemberKind.METHOD)
        self.constructors = MemberRegistry(MemberKind.CONSTRUCTOR)
        self.fields = MemberRegistry(MemberKind.FIELD)

        ignored: list[ResolutionFailure] = []
        active = 0
        for selector in selectors:
            if isinstance(selector, ResolutionFailure):
                logger.debug(
                    "Member selector ignored due to error: %s (%s)",
                    selector.raw_text,
                    selector.reason,
                    exc_info=selector.cause,
                )
                ignored.append(selector)
                continue

            if isinstance(selector, ConstructorSelector):
                registry = self.constructors
            elif isinstance(selector, MethodSelector):
                registry = self.methods
            elif isinstance(selector, FieldSelector):
                registry = self.fields
            else:
                raise PolicyInvariantError(f"Unrecognized member selector: {selector!r}")
            registry.add(selector.upper_bound_type, selector.member.signature)
            active += 1

        for registry in (self.methods, self.constructors, self.fields):
            registry.freeze()

        self.ignored: tuple[ResolutionFailure, ...] = tuple(ignored)
        self.active_count = active
        logger.info(
            "Built member whitelist: %d active, %d ignored", active, len(self.ignored)
        )

    @classmethod
    def build(
        cls,
        selectors: Iterable[MemberSelector],
        override_check: OverrideCheck = NO_OVERRIDES,
    ) -> WhitelistPolicy:
        return cls(selectors, override_check)

    @classmethod
    def from_entries(
        cls,
        entries: Iterable[str],
        resolver: TypeResolver,
        override_check: OverrideCheck = NO_OVERRIDES,
    ) -> WhitelistPolicy:
        """Parse whitelist strings and build a policy.

        Raises:
            SelectorSyntaxError: if any entry is malformed; nothing is built
        """
        return cls(parse_all(entries, resolver), override_check)

    def for_type(self, concrete_type: TypeDescriptor) -> ExposureChecker:
        """Return the exposure checker for members accessed on ``concrete_type``."""
        return ExposureChecker(self, concrete_type)

    def is_exposed(self, concrete_type: TypeDescriptor, member: MemberDescriptor) -> bool:
        """Dispatch on the member kind; see ExposureChecker."""
        checker = self.for_type(concrete_type)
        if member.kind is MemberKind.METHOD:
            return checker.is_method_exposed(member)
        if member.kind is MemberKind.CONSTRUCTOR:
            return checker.is_constructor_exposed(member)
        return checker.is_field_exposed(member)


class ExposureChecker:
    """Per-type view over a WhitelistPolicy. Holds no state of its own."""

    __slots__ = ("_policy", "concrete_type")

    def __init__(self, policy: WhitelistPolicy, concrete_type: TypeDescriptor) -> None:
        self._policy = policy
        self.concrete_type = concrete_type

    def is_method_exposed(self, method: MemberDescriptor) -> bool:
        return self._policy.methods.matches(
            self.concrete_type, method.signature
        ) or self._policy.override_check.has_override_marker(self.concrete_type, method)

    def is_constructor_exposed(self, constructor: MemberDescriptor) -> bool:
        return self._policy.constructors.matches(
            self.concrete_type, constructor.signature
        ) or self._policy.override_check.has_override_marker(self.concrete_type, constructor)

    def is_field_exposed(self, field: MemberDescriptor) -> bool:
        return self._policy.fields.matches(
            self.concrete_type, field.signature
        ) or self._policy.override_check.has_override_marker(self.concrete_type, field)
