"""Whitelist-based member access policy for sandboxed template evaluation.

Decides which methods, constructors and fields of host types untrusted
template authors may use.
"""

from .errors import (
    MemberWhitelistError,
    PolicyInvariantError,
    PolicyStateError,
    ResolutionError,
    SelectorSyntaxError,
    WhitelistConfigError,
)
from .loader import WhitelistLoader
from .models.members import MemberDescriptor, MemberKind, TypeDescriptor
from .models.selector import (
    ConstructorSelector,
    FieldSelector,
    MemberSelector,
    MethodSelector,
    ResolutionFailure,
)
from .policy import ExposureChecker, MemberRegistry, WhitelistPolicy
from .resolver import (
    NO_OVERRIDES,
    CatalogResolver,
    MarkerOverrideCheck,
    OverrideCheck,
    TypeResolver,
)
from .selectors import parse, parse_all

__all__ = [
    "WhitelistPolicy",
    "ExposureChecker",
    "MemberRegistry",
    "WhitelistLoader",
    "parse",
    "parse_all",
    "MemberDescriptor",
    "MemberKind",
    "TypeDescriptor",
    "MemberSelector",
    "MethodSelector",
    "ConstructorSelector",
    "FieldSelector",
    "ResolutionFailure",
    "TypeResolver",
    "OverrideCheck",
    "NO_OVERRIDES",
    "CatalogResolver",
    "MarkerOverrideCheck",
    "MemberWhitelistError",
    "SelectorSyntaxError",
    "ResolutionError",
    "PolicyInvariantError",
    "PolicyStateError",
    "WhitelistConfigError",
]
