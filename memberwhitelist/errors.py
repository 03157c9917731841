"""Exception hierarchy for member whitelist policies.

Two tiers matter to callers:
- SelectorSyntaxError: malformed whitelist text, fatal for the whole batch
- ResolutionError: a well-formed entry whose type or member is missing,
  recorded per entry and skipped
"""


class MemberWhitelistError(Exception):
    """Base error for member whitelist policies."""


class SelectorSyntaxError(MemberWhitelistError, ValueError):
    """Raised when a member selector string is malformed."""

    def __init__(self, problem: str, raw_text: str) -> None:
        super().__init__(f"Malformed whitelist entry ({problem}): {raw_text}")
        self.problem = problem
        self.raw_text = raw_text


class ResolutionError(MemberWhitelistError, LookupError):
    """A type or member named by a selector could not be resolved."""


class PolicyInvariantError(MemberWhitelistError, AssertionError):
    """Raised when a selector is incomplete or carries no recognized payload."""


class PolicyStateError(MemberWhitelistError, RuntimeError):
    """Raised when a frozen registry is modified."""


class WhitelistConfigError(MemberWhitelistError, ValueError):
    """Raised when a whitelist or type catalog file is invalid."""
