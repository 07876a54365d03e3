"""Data models for symsearch."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple

QUALIFIER_SEPARATOR = "."


class EntityKind(Enum):
    """Kind tags used by the package data (one letter each)."""

    CONSTANT = "c"
    VARIABLE = "v"
    TYPE = "t"
    PROCEDURE = "p"
    PROCEDURE_GROUP = "g"
    BUILTIN = "b"

    def label(self, package: str = "") -> str:
        """Human-readable label for this kind."""
        if self is EntityKind.BUILTIN and package == "intrinsics":
            return "intrinsics"
        return _KIND_LABELS[self]


_KIND_LABELS = {
    EntityKind.CONSTANT: "constant",
    EntityKind.VARIABLE: "variable",
    EntityKind.TYPE: "type",
    EntityKind.PROCEDURE: "procedure",
    EntityKind.PROCEDURE_GROUP: "procedure group",
    EntityKind.BUILTIN: "builtin",
}


@dataclass(frozen=True)
class Entity:
    """A searchable symbol, immutable once the corpus is built.

    ``qualifier`` is the name the entity is indexed under and may be empty
    (built-ins reachable without a prefix). ``package`` is the package that
    owns the documentation page the entity links to.
    """

    name: str
    qualifier: str
    kind: EntityKind
    package: str = ""
    link: str = ""
    builtin: bool = False
    full: str = field(init=False)

    def __post_init__(self):
        if self.qualifier:
            full = f"{self.qualifier}{QUALIFIER_SEPARATOR}{self.name}"
        else:
            full = self.name
        object.__setattr__(self, "full", full)

    @property
    def is_qualified(self) -> bool:
        return bool(self.qualifier)

    def kind_tag(self) -> str:
        """Kind label as shown next to a result."""
        label = self.kind.label(self.package)
        if self.builtin and not self.qualifier:
            return f"(built-in) {label}"
        return label

    def __str__(self) -> str:
        return f"{self.full} ({self.kind.label(self.package)})"


@dataclass(frozen=True)
class MatchResult:
    """Outcome of matching one query against one candidate string."""

    matched: bool
    score: int = 0
    matched_positions: Tuple[int, ...] = ()
    # Set when the contiguous-substring shortcut produced the match
    substring: bool = False


NO_MATCH = MatchResult(matched=False)


@dataclass(frozen=True)
class RankedEntity:
    """An entity that matched a query, with its combined score."""

    entity: Entity
    score: int
    matched_positions: Tuple[int, ...]
    highlighted: str
    substring: bool = False

    @property
    def name(self) -> str:
        return self.entity.name

    def __str__(self) -> str:
        return f"{self.entity.full} [score: {self.score}]"
