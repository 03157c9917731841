"""Member access policy: registries and the policy facade."""

from .facade import ExposureChecker, WhitelistPolicy
from .registry import MemberRegistry

__all__ = ["WhitelistPolicy", "ExposureChecker", "MemberRegistry"]
