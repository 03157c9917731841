"""Load whitelist files and build member access policies from them."""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path

from pydantic import ValidationError

from .audit import AuditLogger
from .errors import SelectorSyntaxError, WhitelistConfigError
from .models.whitelist import WhitelistDocument
from .policy.facade import WhitelistPolicy
from .resolver.base import NO_OVERRIDES, OverrideCheck, TypeResolver
from .validators.whitelist import validate_whitelist_document

logger = logging.getLogger(__name__)

# "#" opens a comment at line start or after whitespace; "a.B.c#d" is kept whole
COMMENT_PATTERN = re.compile(r"(?:^|\s)#.*$")


def read_text_entries(text: str) -> list[str]:
    """Split a plain-text whitelist into entries, one per line.

    Blank lines and ``#`` comments (whole-line, or trailing after whitespace)
    are skipped.
    """
    entries = []
    for line in text.splitlines():
        entry = COMMENT_PATTERN.sub("", line).strip()
        if entry:
            entries.append(entry)
    return entries


def read_entries(path: Path) -> list[str]:
    """Read the entries of one whitelist file (``.json`` or plain text)."""
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise WhitelistConfigError(f"Missing whitelist file: {path}") from e

    if path.suffix.lower() != ".json":
        return read_text_entries(text)

    try:
        raw = json.loads(text)
    except json.JSONDecodeError as e:
        raise WhitelistConfigError(f"Whitelist JSON decode error in {path}: {e}") from e

    ok, errors = validate_whitelist_document(raw)
    if not ok:
        raise WhitelistConfigError(
            f"Whitelist validation failed for {path}: " + "; ".join(errors)
        )
    try:
        document = WhitelistDocument.model_validate(raw)
    except ValidationError as e:
        raise WhitelistConfigError(f"Invalid whitelist {path}: {e}") from e
    return [entry.strip() for entry in document.entries]


class WhitelistLoader:
    """Build policies from whitelist files, cached per set of files.

    Files compose additively: entries from all files are parsed as one
    batch, so a syntax error in any of them fails the whole load.
    """

    def __init__(
        self,
        resolver: TypeResolver,
        override_check: OverrideCheck = NO_OVERRIDES,
        *,
        audit_log_path: Path | None = None,
    ) -> None:
        self.resolver = resolver
        self.override_check = override_check
        self.audit = AuditLogger(audit_log_path) if audit_log_path else None
        self._cache: dict[tuple[Path, ...], WhitelistPolicy] = {}

    def load(self, *paths: Path) -> WhitelistPolicy:
        """Load and build a policy from one or more whitelist files.

        Raises:
            WhitelistConfigError: if a file is missing or invalid
            SelectorSyntaxError: if any entry is malformed
        """
        if not paths:
            raise WhitelistConfigError("At least one whitelist file is required")
        cache_key = tuple(Path(p).resolve() for p in paths)
        if cache_key in self._cache:
            return self._cache[cache_key]

        entries: list[str] = []
        for path in cache_key:
            file_entries = read_entries(path)
            logger.debug("Read %d whitelist entries from %s", len(file_entries), path)
            entries.extend(file_entries)

        source = ",".join(p.name for p in cache_key)
        try:
            policy = WhitelistPolicy.from_entries(entries, self.resolver, self.override_check)
        except SelectorSyntaxError as e:
            if self.audit:
                self.audit.log("SYNTAX_ERROR", source=source, entry=e.raw_text.strip())
            raise

        if self.audit:
            self.audit.log_build(policy, source)
        self._cache[cache_key] = policy
        return policy

    def clear_cache(self) -> None:
        self._cache.clear()
