from dataclasses import dataclass
from typing import Any, List

from symsearch.models import EntityKind


@dataclass
class ValidationError:
    """Single validation error for a package data entry."""
    field: str
    reason: str
    severity: str  # "error" or "warning"
    location: str = ""

    def __str__(self) -> str:
        where = f"{self.location}: " if self.location else ""
        return f"{where}{self.field} {self.reason}"


class CorpusValidator:
    """Validation of raw package data before entities are built."""

    def validate_package(self, qualifier: str, package: Any) -> List[ValidationError]:
        """Validate a package record (everything except its entities).

        Args:
            qualifier: Package name the record is keyed under
            package: Raw package record

        Returns:
            List of ValidationError objects (empty if valid)
        """
        errors = []

        if not qualifier or not isinstance(qualifier, str):
            errors.append(ValidationError(
                field="qualifier",
                reason="must be a non-empty string",
                severity="error",
                location=repr(qualifier),
            ))

        if not isinstance(package, dict):
            errors.append(ValidationError(
                field="package",
                reason="must be a mapping with 'path' and 'entities'",
                severity="error",
                location=str(qualifier),
            ))
            return errors

        path = package.get("path")
        if not isinstance(path, str) or not path:
            errors.append(ValidationError(
                field="path",
                reason="is required and cannot be empty",
                severity="error",
                location=str(qualifier),
            ))

        if not isinstance(package.get("entities", []), list):
            errors.append(ValidationError(
                field="entities",
                reason="must be a list",
                severity="error",
                location=str(qualifier),
            ))

        return errors

    def validate_entry(self, qualifier: str, entry: Any, index: int = 0) -> List[ValidationError]:
        """Validate one raw entity entry of a package.

        Args:
            qualifier: Owning package name
            entry: Raw entry, expected to look like {"name": ..., "kind": ...}
            index: Position of the entry in the package, for error messages

        Returns:
            List of ValidationError objects (empty if valid)
        """
        location = f"{qualifier}[{index}]"

        if not isinstance(entry, dict):
            return [ValidationError(
                field="entity",
                reason="must be a mapping",
                severity="error",
                location=location,
            )]

        errors = []

        name = entry.get("name")
        if not isinstance(name, str) or not name.strip():
            errors.append(ValidationError(
                field="name",
                reason="is required and cannot be empty",
                severity="error",
                location=location,
            ))

        try:
            EntityKind(entry.get("kind"))
        except ValueError:
            errors.append(ValidationError(
                field="kind",
                reason=f"{entry.get('kind')!r} is not a valid entity kind",
                severity="error",
                location=location,
            ))

        builtin = entry.get("builtin", False)
        if not isinstance(builtin, bool):
            errors.append(ValidationError(
                field="builtin",
                reason="must be a boolean",
                severity="error",
                location=location,
            ))

        return errors
