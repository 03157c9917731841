"""Type resolution and override-marker collaborators."""

from .base import NO_OVERRIDES, OverrideCheck, TypeResolver
from .catalog import CatalogResolver, MarkerOverrideCheck

__all__ = [
    "TypeResolver",
    "OverrideCheck",
    "NO_OVERRIDES",
    "CatalogResolver",
    "MarkerOverrideCheck",
]
