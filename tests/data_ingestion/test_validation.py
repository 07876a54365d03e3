"""Tests for package data validation."""

import pytest

from symsearch.data_ingestion.validation import CorpusValidator, ValidationError


@pytest.fixture
def validator():
    return CorpusValidator()


def test_valid_package(validator):
    assert validator.validate_package("fmt", {"path": "/core/fmt", "entities": []}) == []


def test_package_without_path(validator):
    errors = validator.validate_package("fmt", {"entities": []})

    assert len(errors) == 1
    assert errors[0].field == "path"
    assert errors[0].severity == "error"


def test_package_not_a_mapping(validator):
    errors = validator.validate_package("fmt", ["println"])

    assert [e.field for e in errors] == ["package"]


def test_package_entities_not_a_list(validator):
    errors = validator.validate_package("fmt", {"path": "/core/fmt", "entities": "println"})

    assert [e.field for e in errors] == ["entities"]


def test_empty_qualifier(validator):
    errors = validator.validate_package("", {"path": "/x", "entities": []})

    assert [e.field for e in errors] == ["qualifier"]


def test_valid_entry(validator):
    assert validator.validate_entry("fmt", {"name": "println", "kind": "p"}) == []
    assert validator.validate_entry("builtin", {"name": "len", "kind": "b", "builtin": True}) == []


@pytest.mark.parametrize("entry,field", [
    ({"kind": "p"}, "name"),
    ({"name": "   ", "kind": "p"}, "name"),
    ({"name": "println"}, "kind"),
    ({"name": "println", "kind": "procedure"}, "kind"),
    ({"name": "len", "kind": "b", "builtin": "yes"}, "builtin"),
    ("println", "entity"),
])
def test_invalid_entry(validator, entry, field):
    errors = validator.validate_entry("fmt", entry, 2)

    assert [e.field for e in errors] == [field]
    assert errors[0].location == "fmt[2]"


def test_validation_error_str():
    error = ValidationError(field="name", reason="is required", severity="error", location="fmt[0]")

    assert str(error) == "fmt[0]: name is required"
