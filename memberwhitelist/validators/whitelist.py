"""Whitelist document validation against JSON Schema.

Only the document shape is checked here: an object with an ``entries``
list of non-blank strings and an optional ``description``. Selector
syntax belongs to the parser.
"""

import json
from functools import lru_cache
from pathlib import Path

from jsonschema import Draft7Validator
from jsonschema.exceptions import ValidationError

SCHEMA_PATH = Path(__file__).parent.parent / "contracts" / "whitelist_schema.json"


@lru_cache(maxsize=1)
def whitelist_validator() -> Draft7Validator:
    """Compile the packaged whitelist schema once per process."""
    schema = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
    Draft7Validator.check_schema(schema)
    return Draft7Validator(schema)


def _describe(error: ValidationError) -> str:
    location = "/".join(str(part) for part in error.absolute_path) or "<document>"
    return f"Schema validation error at {location}: {error.message}"


def validate_whitelist_document(document: object) -> tuple[bool, list[str]]:
    """
    Validate a decoded whitelist document.

    Every violation is reported, ordered by its location in the document.

    Returns:
        A tuple of (is_valid, list_of_errors).
    """
    violations = sorted(
        whitelist_validator().iter_errors(document),
        key=lambda e: [str(part) for part in e.absolute_path],
    )
    errors = [_describe(e) for e in violations]
    return (not errors, errors)
