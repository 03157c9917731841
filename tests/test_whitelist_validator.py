"""Tests for the whitelist document validator."""

import pytest

from memberwhitelist.validators.whitelist import validate_whitelist_document


@pytest.fixture
def valid_document():
    """Return a valid whitelist document."""
    return {
        "description": "Members exposed to invoice templates",
        "entries": [
            "com.example.Invoice.getTotal()",
            "com.example.Invoice.number",
        ],
    }


class TestValidDocument:
    """Tests for valid whitelist documents."""

    def test_valid_document_passes(self, valid_document):
        """Valid document passes validation."""
        is_valid, errors = validate_whitelist_document(valid_document)
        assert is_valid is True
        assert errors == []

    def test_description_optional(self, valid_document):
        del valid_document["description"]
        is_valid, _ = validate_whitelist_document(valid_document)
        assert is_valid is True

    def test_empty_entries_allowed(self):
        is_valid, errors = validate_whitelist_document({"entries": []})
        assert is_valid is True
        assert errors == []

    def test_malformed_selector_not_checked_here(self, valid_document):
        """Selector syntax belongs to the parser, not the schema."""
        valid_document["entries"].append("no.dots.or(parens")
        is_valid, _ = validate_whitelist_document(valid_document)
        assert is_valid is True


class TestInvalidDocument:
    """Tests for schema violations."""

    def test_missing_entries(self, valid_document):
        del valid_document["entries"]
        is_valid, errors = validate_whitelist_document(valid_document)
        assert is_valid is False
        assert any("entries" in e for e in errors)

    def test_unknown_property(self, valid_document):
        valid_document["owner"] = "ops"
        is_valid, errors = validate_whitelist_document(valid_document)
        assert is_valid is False
        assert any("Schema validation error" in e for e in errors)

    def test_entries_not_a_list(self, valid_document):
        valid_document["entries"] = "com.example.Invoice.number"
        is_valid, _ = validate_whitelist_document(valid_document)
        assert is_valid is False

    def test_non_string_entry(self, valid_document):
        valid_document["entries"].append(42)
        is_valid, _ = validate_whitelist_document(valid_document)
        assert is_valid is False

    def test_description_too_long(self, valid_document):
        valid_document["description"] = "x" * 501
        is_valid, _ = validate_whitelist_document(valid_document)
        assert is_valid is False

    def test_blank_entry(self, valid_document):
        valid_document["entries"].append("     ")
        is_valid, errors = validate_whitelist_document(valid_document)
        assert is_valid is False
        assert len(errors) == 1
        assert errors[0].startswith("Schema validation error at entries/2:")

    def test_every_violation_reported_in_document_order(self, valid_document):
        """All violations come back at once, not just the first."""
        valid_document["entries"] += [42, "   "]
        valid_document["description"] = "x" * 501
        is_valid, errors = validate_whitelist_document(valid_document)
        assert is_valid is False
        assert [e.split(":", 1)[0] for e in errors] == [
            "Schema validation error at description",
            "Schema validation error at entries/2",
            "Schema validation error at entries/3",
        ]

    def test_root_violation_location(self):
        _, errors = validate_whitelist_document({})
        assert errors == ["Schema validation error at <document>: 'entries' is a required property"]

    def test_not_an_object(self):
        is_valid, errors = validate_whitelist_document(["com.example.A.b"])
        assert is_valid is False
        assert errors
