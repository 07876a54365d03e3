"""Corpus construction from package data.

The package data maps each package (qualifier) to its documentation path and
entity list. Entities are validated and built once; the resulting corpus is
read only for the rest of the session.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple

from symsearch.data_ingestion.exceptions import CorpusError, CorpusValidationError
from symsearch.data_ingestion.validation import CorpusValidator, ValidationError
from symsearch.models import Entity, EntityKind

logger = logging.getLogger(__name__)

BUILTIN_PACKAGE = "builtin"
RUNTIME_PACKAGE = "runtime"


@dataclass(frozen=True)
class Corpus:
    """Immutable list of searchable entities plus package paths."""

    entities: Tuple[Entity, ...]
    package_paths: Dict[str, str] = field(default_factory=dict)
    scope: Optional[str] = None  # package name in package-page mode

    def __len__(self) -> int:
        return len(self.entities)

    def __iter__(self):
        return iter(self.entities)

    def names(self, qualifier: Optional[str] = None) -> List[str]:
        """Entity names, optionally restricted to one qualifier."""
        return [
            e.name for e in self.entities
            if qualifier is None or e.qualifier == qualifier
        ]


def _packages_of(data: Mapping[str, Any]) -> Mapping[str, Any]:
    # Accept both {"packages": {...}} and the bare package mapping
    if "packages" in data and isinstance(data["packages"], Mapping):
        return data["packages"]
    return data


def link_for(path: str, name: str) -> str:
    """Canonical navigation target for an entity."""
    return f"{path}/#{name}"


class CorpusBuilder:
    """Validates package data and accumulates entities in corpus order."""

    def __init__(self, packages: Mapping[str, Any]):
        self.packages = _packages_of(packages)
        self.validator = CorpusValidator()
        self.errors: List[ValidationError] = []
        self.entities: List[Entity] = []
        self.package_paths: Dict[str, str] = {}

        for qualifier, package in self.packages.items():
            errors = self.validator.validate_package(qualifier, package)
            self.errors.extend(errors)
            if not errors:
                self.package_paths[qualifier] = package["path"]

    def _entries(self, qualifier: str) -> List[dict]:
        if qualifier not in self.package_paths:
            return []
        valid = []
        for i, entry in enumerate(self.packages[qualifier].get("entities", [])):
            errors = self.validator.validate_entry(qualifier, entry, i)
            if errors:
                self.errors.extend(errors)
            else:
                valid.append(entry)
        return valid

    def add(self, qualifier: str, entry: dict, package: str) -> None:
        """Index an entry under qualifier; package owns the link target."""
        path = self.package_paths.get(package) or self.package_paths.get(qualifier, "")
        self.entities.append(Entity(
            name=entry["name"],
            qualifier=qualifier,
            kind=EntityKind(entry["kind"]),
            package=package,
            link=link_for(path, entry["name"]),
            builtin=bool(entry.get("builtin", False)),
        ))

    def add_all(self) -> None:
        """Index every package, with built-ins also reachable unqualified."""
        builtin_home = BUILTIN_PACKAGE if BUILTIN_PACKAGE in self.package_paths else None
        for qualifier in self.packages:
            for entry in self._entries(qualifier):
                if entry.get("builtin", False):
                    self.add("", entry, package=builtin_home or qualifier)
                self.add(qualifier, entry, package=qualifier)

    def add_scope(self, scope: str) -> None:
        """Index a single package's page."""
        if scope not in self.packages:
            raise CorpusError(f"Unknown package: {scope!r}")
        for entry in self._entries(scope):
            self.add(scope, entry, package=scope)
        if scope == BUILTIN_PACKAGE:
            for entry in self._entries(RUNTIME_PACKAGE):
                if entry.get("builtin", False):
                    self.add(RUNTIME_PACKAGE, entry, package=RUNTIME_PACKAGE)

    def build(self, scope: Optional[str] = None) -> Corpus:
        if scope is None:
            self.add_all()
        else:
            self.add_scope(scope)

        if self.errors:
            raise CorpusValidationError(self.errors)

        return Corpus(
            entities=tuple(self.entities),
            package_paths=dict(self.package_paths),
            scope=scope,
        )


def build_corpus(packages: Mapping[str, Any], scope: Optional[str] = None) -> Corpus:
    """Build a corpus from package data.

    Args:
        packages: {"packages": {name: {"path": ..., "entities": [...]}}} or
            the bare {name: {...}} mapping
        scope: Package name for package-page mode, None for all packages

    Returns:
        Corpus with entities in package data order

    Raises:
        CorpusValidationError: If any entry is malformed
        CorpusError: If scope names an unknown package
    """
    if not isinstance(packages, Mapping):
        raise CorpusError("Package data must be a mapping of package name to package")

    corpus = CorpusBuilder(packages).build(scope)
    logger.info(
        f"Built corpus: {len(corpus)} entities from {len(corpus.package_paths)} packages"
        + (f" (scope: {scope})" if scope else "")
    )
    return corpus
