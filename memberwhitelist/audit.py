"""Audit trail for whitelist policy builds.

Each event is one line: ``TIMESTAMP [OPERATION] key=value ...``, for example
``2026-02-01T10:00:00Z [POLICY_BUILD] source=app.whitelist active=41 ignored=2``.
Operations written here are POLICY_BUILD, SELECTOR_IGNORED and SYNTAX_ERROR.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .policy.facade import WhitelistPolicy

AuditValue = str | int | float | bool | None

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def _render_value(value: AuditValue) -> str:
    text = str(value)
    if not text or any(c.isspace() or c == '"' for c in text):
        return json.dumps(text, ensure_ascii=False)
    return text


def format_audit_line(
    when: datetime, operation: str, fields: Mapping[str, AuditValue]
) -> str:
    """Render one audit line without the trailing newline; None fields are omitted."""
    parts = [when.strftime(TIMESTAMP_FORMAT), f"[{operation}]"]
    parts += [f"{key}={_render_value(v)}" for key, v in fields.items() if v is not None]
    return " ".join(parts)


class AuditLogger:
    """Append-only audit file for policy builds."""

    def __init__(self, log_path: Path) -> None:
        self.log_path = log_path

    def log(self, operation: str, **fields: AuditValue) -> None:
        line = format_audit_line(datetime.now(timezone.utc), operation, fields)
        self.log_path.parent.mkdir(parents=True, exist_ok=True)
        with self.log_path.open("a", encoding="utf-8") as f:
            f.write(line + "\n")

    def log_build(self, policy: WhitelistPolicy, source: str) -> None:
        """Record one SELECTOR_IGNORED line per failure, then POLICY_BUILD."""
        for failure in policy.ignored:
            self.log("SELECTOR_IGNORED", entry=failure.raw_text.strip(), reason=failure.reason)
        self.log(
            "POLICY_BUILD",
            source=source,
            active=policy.active_count,
            ignored=len(policy.ignored),
        )
