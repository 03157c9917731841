"""Tests for the policy build audit trail."""

import re
from datetime import datetime, timezone
from pathlib import Path

import pytest

from memberwhitelist.audit import AuditLogger, format_audit_line
from memberwhitelist.policy.facade import WhitelistPolicy
from memberwhitelist.resolver.catalog import CatalogResolver


class TestAuditLogger:
    """Test cases for AuditLogger.log."""

    def test_creates_parent_directories(self, tmp_path: Path) -> None:
        """Audit logger creates the log file and its parent directories."""
        log_path = tmp_path / "nested" / "dir" / "audit.log"
        AuditLogger(log_path).log("TEST", key="value")
        assert log_path.exists()

    def test_appends_without_overwriting(self, tmp_path: Path) -> None:
        log_path = tmp_path / "audit.log"
        logger = AuditLogger(log_path)

        logger.log("FIRST", key="value1")
        logger.log("SECOND", key="value2")

        lines = log_path.read_text().strip().split("\n")
        assert len(lines) == 2
        assert "[FIRST]" in lines[0]
        assert "[SECOND]" in lines[1]

    def test_correct_format_with_timestamp(self, tmp_path: Path) -> None:
        """Log format matches: ISO8601_TIMESTAMP [OPERATION] key=value."""
        log_path = tmp_path / "audit.log"
        AuditLogger(log_path).log("POLICY_BUILD", source="app.whitelist", active=3)

        content = log_path.read_text().strip()
        pattern = r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}Z \[POLICY_BUILD\] source=app\.whitelist active=3$"
        assert re.match(pattern, content), f"Log line doesn't match expected format: {content}"

    def test_values_with_spaces_quoted(self, tmp_path: Path) -> None:
        log_path = tmp_path / "audit.log"
        AuditLogger(log_path).log("SELECTOR_IGNORED", reason="Type not found: a.B")
        assert 'reason="Type not found: a.B"' in log_path.read_text()

    def test_none_values_excluded(self, tmp_path: Path) -> None:
        log_path = tmp_path / "audit.log"
        AuditLogger(log_path).log("TEST", present="yes", absent=None)

        content = log_path.read_text().strip()
        assert "present=yes" in content
        assert "absent" not in content

    def test_empty_kwargs(self, tmp_path: Path) -> None:
        log_path = tmp_path / "audit.log"
        AuditLogger(log_path).log("TEST")

        content = log_path.read_text().strip()
        pattern = r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}Z \[TEST\]$"
        assert re.match(pattern, content), f"Log line doesn't match expected format: {content}"


class TestFormatAuditLine:
    """Test cases for format_audit_line."""

    WHEN = datetime(2026, 2, 1, 10, 0, 0, tzinfo=timezone.utc)

    def test_fields_in_order(self) -> None:
        line = format_audit_line(self.WHEN, "POLICY_BUILD", {"source": "a.txt", "active": 2})
        assert line == "2026-02-01T10:00:00Z [POLICY_BUILD] source=a.txt active=2"

    @pytest.mark.parametrize(
        "value, rendered",
        [
            ("tab\tseparated", '"tab\\tseparated"'),
            ('say "hi"', '"say \\"hi\\""'),
            ("", '""'),
            (False, "False"),
        ],
    )
    def test_values_quoted_when_ambiguous(self, value, rendered: str) -> None:
        """Whitespace, quotes and empty values are written as JSON strings."""
        line = format_audit_line(self.WHEN, "TEST", {"v": value})
        assert line == f"2026-02-01T10:00:00Z [TEST] v={rendered}"


class TestLogBuild:
    """Test cases for AuditLogger.log_build."""

    def test_one_line_per_failure_then_summary(
        self, tmp_path: Path, resolver: CatalogResolver
    ) -> None:
        policy = WhitelistPolicy.from_entries(
            [
                "com.example.Missing.a()",
                "com.example.Animal.fly()",
                "com.example.Dog.breed",
            ],
            resolver,
        )
        log_path = tmp_path / "audit.log"
        AuditLogger(log_path).log_build(policy, "test.whitelist")

        lines = log_path.read_text().strip().split("\n")
        assert len(lines) == 3
        assert all("[SELECTOR_IGNORED]" in line for line in lines[:2])
        assert "entry=com.example.Animal.fly()" in lines[1]
        assert lines[2].endswith("[POLICY_BUILD] source=test.whitelist active=1 ignored=2")

    def test_clean_build(self, tmp_path: Path, resolver: CatalogResolver) -> None:
        policy = WhitelistPolicy.from_entries(["com.example.Dog.breed"], resolver)
        log_path = tmp_path / "audit.log"
        AuditLogger(log_path).log_build(policy, "clean")

        lines = log_path.read_text().strip().split("\n")
        assert len(lines) == 1
        assert "ignored=0" in lines[0]
