"""Resolution results and build reports.

Usage:
    result = resolver.resolve(directive, origin, FieldTarget.scalar(Camera))
    if result.ok:
        camera = result.value

    report = resolver.resolve_graph(binding_table)
    print(report.to_dict())
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any

from sceneref.core.errors import ResolutionError


class ResolutionStatus(Enum):
    """Outcome of resolving one field."""

    RESOLVED = auto()  # Strategy ran, value is ready to be written
    SKIPPED = auto()  # Field already populated under SKIP_IF_PRESENT
    FAILED = auto()  # Lookup failed, field keeps its value unless clears_field is set


@dataclass(frozen=True, slots=True)
class ResolutionResult:
    """Fresh result of a single field resolution. Never cached.

    Attributes:
        status: Outcome.
        matches: Every match the strategy produced, in order.
        value: What gets written: the first match (scalar), a list of all
            matches (collection), or None.
        error: Failure cause when status is FAILED.
        field_name: Field the result belongs to, empty for bare resolve calls.
        clears_field: A scalar lookup came back empty; None is still written
            even though the result counts as FAILED.
    """

    status: ResolutionStatus
    matches: tuple[Any, ...] = ()
    value: Any = None
    error: ResolutionError | None = None
    field_name: str = ""
    clears_field: bool = False

    @property
    def ok(self) -> bool:
        return self.status is ResolutionStatus.RESOLVED

    @property
    def writes(self) -> bool:
        """True if the value must be written to the field."""
        return self.ok or self.clears_field


@dataclass
class BuildReport:
    """Accumulated counts from a build pass."""

    behaviors: int = 0
    resolved: int = 0
    skipped: int = 0
    failed: int = 0
    failures: list[ResolutionResult] = field(default_factory=list)

    def record(self, result: ResolutionResult) -> None:
        """Count one field result.

        Args:
            result: Result returned by the resolver for one binding.
        """
        if result.status is ResolutionStatus.RESOLVED:
            self.resolved += 1
        elif result.status is ResolutionStatus.SKIPPED:
            self.skipped += 1
        else:
            self.failed += 1
            self.failures.append(result)

    def merge(self, other: BuildReport) -> None:
        """Merge other report into this one, mutating self in place."""
        self.behaviors += other.behaviors
        self.resolved += other.resolved
        self.skipped += other.skipped
        self.failed += other.failed
        self.failures.extend(other.failures)

    def is_clean(self) -> bool:
        """True if no field failed."""
        return self.failed == 0

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        return {
            "behaviors": self.behaviors,
            "resolved": self.resolved,
            "skipped": self.skipped,
            "failed": self.failed,
            "failures": [
                {"field_name": r.field_name, "error": str(r.error) if r.error else None}
                for r in self.failures
            ],
        }
