"""Pytest fixtures for memberwhitelist tests."""

import copy
import json
from pathlib import Path

import pytest

from memberwhitelist.models.catalog import CatalogData
from memberwhitelist.resolver.catalog import CatalogResolver, MarkerOverrideCheck

# Hierarchy used throughout the tests:
#
#   java.lang.Object
#   ├── java.lang.String        (implements java.lang.CharSequence)
#   ├── com.example.Animal
#   │   ├── com.example.Dog     (implements com.example.Pet)
#   │   │   └── com.example.Puppy
#   │   └── com.example.Cat     (implements com.example.Pet)
#   ├── com.example.Trusted     (marks secret())
#   │   └── com.example.TrustedChild
#   ├── com.example.Widget      (has a method named Widget(int))
#   └── com.example.Overloaded
SAMPLE_CATALOG = {
    "types": [
        {
            "name": "java.lang.Object",
            "methods": [
                {"name": "toString", "returns": "java.lang.String"},
                {"name": "hashCode", "returns": "int"},
                {"name": "equals", "params": ["java.lang.Object"], "returns": "boolean"},
            ],
            "constructors": [[]],
        },
        {
            "name": "java.lang.CharSequence",
            "is_interface": True,
            "methods": [
                {"name": "length", "returns": "int"},
                {"name": "charAt", "params": ["int"], "returns": "char"},
            ],
        },
        {
            "name": "java.lang.String",
            "superclass": "java.lang.Object",
            "interfaces": ["java.lang.CharSequence"],
            "methods": [
                {"name": "length", "returns": "int"},
                {"name": "charAt", "params": ["int"], "returns": "char"},
                {"name": "substring", "params": ["int", "int"], "returns": "java.lang.String"},
            ],
            "constructors": [[], ["java.lang.String"], ["char[]"]],
        },
        {
            "name": "com.example.Pet",
            "is_interface": True,
            "fields": ["KIND"],
            "methods": [{"name": "owner", "returns": "java.lang.String"}],
        },
        {
            "name": "com.example.Animal",
            "superclass": "java.lang.Object",
            "fields": ["name", "legs"],
            "methods": [
                {"name": "speak", "returns": "java.lang.String"},
                {"name": "feed", "params": ["int", "int"]},
                {"name": "rename", "params": ["java.lang.String"]},
            ],
            "constructors": [[], ["java.lang.String"]],
        },
        {
            "name": "com.example.Dog",
            "superclass": "com.example.Animal",
            "interfaces": ["com.example.Pet"],
            "fields": ["breed"],
            "methods": [
                {"name": "speak", "returns": "java.lang.String"},
                {"name": "fetch", "params": ["java.lang.String[]"]},
                {"name": "owner", "returns": "java.lang.String"},
            ],
            "constructors": [[], ["java.lang.String"]],
        },
        {
            "name": "com.example.Puppy",
            "superclass": "com.example.Dog",
            "constructors": [[]],
        },
        {
            "name": "com.example.Cat",
            "superclass": "com.example.Animal",
            "interfaces": ["com.example.Pet"],
            "methods": [{"name": "owner", "returns": "java.lang.String"}],
            "constructors": [["java.lang.String"]],
        },
        {
            "name": "com.example.Trusted",
            "superclass": "java.lang.Object",
            "fields": ["token"],
            "methods": [{"name": "secret", "returns": "java.lang.String"}],
            "constructors": [[]],
            "marked": [
                {"kind": "method", "name": "secret"},
                {"kind": "field", "name": "token"},
            ],
        },
        {
            "name": "com.example.TrustedChild",
            "superclass": "com.example.Trusted",
            "constructors": [[]],
        },
        {
            "name": "com.example.Widget",
            "superclass": "java.lang.Object",
            "methods": [{"name": "Widget", "params": ["int"]}],
            "constructors": [[]],
        },
        {
            "name": "com.example.Overloaded",
            "superclass": "java.lang.Object",
            "methods": [
                {"name": "value", "returns": "int"},
                {"name": "value", "returns": "long"},
            ],
        },
    ]
}


@pytest.fixture
def catalog_data() -> dict:
    """Return a fresh copy of the sample catalog dictionary."""
    return copy.deepcopy(SAMPLE_CATALOG)


@pytest.fixture
def resolver(catalog_data: dict) -> CatalogResolver:
    """Create a CatalogResolver over the sample hierarchy."""
    return CatalogResolver.from_data(CatalogData.model_validate(catalog_data))


@pytest.fixture
def override_check() -> MarkerOverrideCheck:
    return MarkerOverrideCheck()


@pytest.fixture
def catalog_file(tmp_path: Path, catalog_data: dict) -> Path:
    """Write the sample catalog to a temp JSON file."""
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps(catalog_data, indent=2))
    return path


@pytest.fixture
def whitelist_file(tmp_path: Path) -> Path:
    """Write a plain-text whitelist with one missing type."""
    path = tmp_path / "app.whitelist"
    path.write_text(
        "# Members exposed to templates\n"
        "com.example.Animal.speak()\n"
        "\n"
        "com.example.Dog.breed   # dog only\n"
        "com.example.Missing.foo()\n"
    )
    return path
