"""Tests for corpus construction."""

import pytest

from symsearch.data_ingestion import CorpusError, CorpusValidationError, build_corpus
from symsearch.models import EntityKind


def test_global_corpus_order(corpus):
    """Test entities follow package data order, built-ins indexed twice."""
    assert [e.full for e in corpus] == [
        "len", "builtin.len",
        "fmt.println", "fmt.printf", "fmt.Info",
        "runtime.Allocator", "copy", "runtime.copy",
        "type_of", "intrinsics.type_of",
    ]
    assert len(corpus) == 10
    assert corpus.scope is None


def test_links_use_package_path(corpus):
    """Test the link is the package path plus the entity anchor."""
    by_full = {e.full: e for e in corpus}

    assert by_full["fmt.printf"].link == "/core/fmt/#printf"
    assert by_full["runtime.copy"].link == "/base/runtime/#copy"


def test_unqualified_builtins_link_to_builtin_package(corpus):
    """Test built-ins reachable without a prefix point at the builtin page."""
    by_full = {e.full: e for e in corpus}

    assert by_full["copy"].package == "builtin"
    assert by_full["copy"].link == "/builtin/#copy"
    assert by_full["copy"].kind_tag() == "(built-in) procedure"


def test_unqualified_builtins_without_builtin_package(package_data):
    """Test built-ins fall back to their own package when there is no builtin page."""
    del package_data["packages"]["builtin"]

    corpus = build_corpus(package_data)
    copy = next(e for e in corpus if e.full == "copy")

    assert copy.package == "runtime"
    assert copy.link == "/base/runtime/#copy"


def test_kinds_are_parsed(corpus):
    kinds = {e.full: e.kind for e in corpus}

    assert kinds["fmt.Info"] is EntityKind.TYPE
    assert kinds["intrinsics.type_of"] is EntityKind.BUILTIN
    assert next(e for e in corpus if e.full == "intrinsics.type_of").kind_tag() == "intrinsics"


def test_package_scope(package_data):
    """Test package-page mode indexes only that package."""
    corpus = build_corpus(package_data, scope="fmt")

    assert [e.full for e in corpus] == ["fmt.println", "fmt.printf", "fmt.Info"]
    assert corpus.scope == "fmt"
    assert corpus.names("fmt") == ["println", "printf", "Info"]


def test_builtin_scope_includes_runtime_builtins(package_data):
    """Test the builtin page also lists runtime's built-in entities."""
    corpus = build_corpus(package_data, scope="builtin")

    assert [e.full for e in corpus] == ["builtin.len", "runtime.copy"]


def test_unknown_scope(package_data):
    with pytest.raises(CorpusError, match="Unknown package"):
        build_corpus(package_data, scope="nope")


def test_bare_package_mapping(package_data):
    """Test the packages wrapper is optional."""
    corpus = build_corpus(package_data["packages"])

    assert len(corpus) == 10


def test_invalid_entry_raises(package_data):
    """Test a malformed entity fails the whole build with every error listed."""
    package_data["packages"]["fmt"]["entities"].append({"name": "", "kind": "x"})

    with pytest.raises(CorpusValidationError) as exc_info:
        build_corpus(package_data)

    fields = {e.field for e in exc_info.value.errors}
    assert fields == {"name", "kind"}
    assert "fmt[3]" in str(exc_info.value)


def test_invalid_package_raises(package_data):
    package_data["packages"]["broken"] = {"entities": []}

    with pytest.raises(CorpusValidationError, match="path"):
        build_corpus(package_data)


def test_non_mapping_package_data():
    with pytest.raises(CorpusError):
        build_corpus(["not", "a", "mapping"])


def test_empty_package_data():
    corpus = build_corpus({"packages": {}})

    assert len(corpus) == 0
    assert corpus.package_paths == {}


def test_unqualified_builtin_from_ordinary_package_is_tagged(package_data):
    """Test unqualified copies keep the built-in prefix whatever their package."""
    del package_data["packages"]["builtin"]
    package_data["packages"]["fmt"]["entities"].append({"name": "assert", "kind": "p", "builtin": True})

    corpus = build_corpus(package_data)
    by_full = {e.full: e for e in corpus}

    assert by_full["assert"].package == "fmt"
    assert by_full["assert"].kind_tag() == "(built-in) procedure"
    assert by_full["fmt.assert"].kind_tag() == "procedure"
