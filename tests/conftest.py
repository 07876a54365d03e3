"""Shared fixtures: a small package data document in the documented shape."""

import copy
import json

import pytest

from symsearch.data_ingestion import build_corpus

PACKAGE_DATA = {
    "packages": {
        "builtin": {
            "path": "/builtin",
            "entities": [
                {"name": "len", "kind": "b", "builtin": True},
            ],
        },
        "fmt": {
            "path": "/core/fmt",
            "entities": [
                {"name": "println", "kind": "p"},
                {"name": "printf", "kind": "p"},
                {"name": "Info", "kind": "t"},
            ],
        },
        "runtime": {
            "path": "/base/runtime",
            "entities": [
                {"name": "Allocator", "kind": "t"},
                {"name": "copy", "kind": "p", "builtin": True},
            ],
        },
        "intrinsics": {
            "path": "/base/intrinsics",
            "entities": [
                {"name": "type_of", "kind": "b", "builtin": True},
            ],
        },
    }
}


@pytest.fixture
def package_data():
    """Fresh copy of the sample package data."""
    return copy.deepcopy(PACKAGE_DATA)


@pytest.fixture
def corpus(package_data):
    """Global-mode corpus over all sample packages."""
    return build_corpus(package_data)


@pytest.fixture
def corpus_file(tmp_path, package_data):
    """Sample package data written to a JSON file."""
    path = tmp_path / "pkg-data.json"
    path.write_text(json.dumps(package_data))
    return path
