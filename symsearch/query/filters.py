from abc import ABC, abstractmethod
from typing import List

from symsearch.models import Entity, EntityKind
from symsearch.query.exceptions import FilterError


class EntityFilter(ABC):
    """Abstract base class for entity filters applied before matching."""

    @abstractmethod
    def matches(self, entity: Entity) -> bool:
        """Check if entity passes this filter."""
        pass


class KindFilter(EntityFilter):
    """Filter by entity kind (OR logic)."""

    def __init__(self, kinds: List[str]):
        """Initialize with kind tags ("p") or kind names ("procedure")."""
        self.kinds = {self._parse(k) for k in kinds}

    @staticmethod
    def _parse(kind: str) -> EntityKind:
        try:
            return EntityKind(kind)
        except ValueError:
            pass
        try:
            return EntityKind[kind.upper().replace(" ", "_").replace("-", "_")]
        except KeyError:
            raise FilterError(f"Unknown entity kind: {kind!r}")

    def matches(self, entity: Entity) -> bool:
        """Check if entity kind is in allowed set."""
        return entity.kind in self.kinds


class QualifierFilter(EntityFilter):
    """Filter by qualifier (OR logic). An empty string selects unqualified entities."""

    def __init__(self, qualifiers: List[str]):
        """Initialize with list of allowed qualifiers."""
        self.qualifiers = set(qualifiers)

    def matches(self, entity: Entity) -> bool:
        """Check if entity qualifier is in allowed set."""
        return entity.qualifier in self.qualifiers
