"""Data models for resolution diagnostics.

Records are plain data so a sink can log them, collect them for an editor
panel, or ship them elsewhere as JSON.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """One failed field resolution.

    Attributes:
        field_name: Field that could not be set (empty for bare resolve calls).
        behavior_type: Qualified name of the behavior type, if known.
        strategy: Repr of the strategy that ran.
        message: Human readable explanation.
        error_type: Name of the ResolutionError subclass behind the failure.

    Example:
        Diagnostic(
            field_name="spawn_points",
            behavior_type="game.SpawnManager",
            strategy="ByTag(tag='Spawn', include_disabled=True, max_depth=10000)",
            message="No nodes tagged 'Spawn'",
            error_type="NotFoundError",
        )
    """

    field_name: str
    behavior_type: str | None
    strategy: str
    message: str
    error_type: str

    def format(self) -> str:
        """Single line summary for console output."""
        owner = f"{self.behavior_type}." if self.behavior_type else ""
        return f"Failed to set {owner}{self.field_name} via {self.strategy}: {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        return {
            "field_name": self.field_name,
            "behavior_type": self.behavior_type,
            "strategy": self.strategy,
            "message": self.message,
            "error_type": self.error_type,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Diagnostic:
        """Create from dictionary (for deserialization)."""
        return cls(
            field_name=data["field_name"],
            behavior_type=data.get("behavior_type"),
            strategy=data["strategy"],
            message=data["message"],
            error_type=data.get("error_type", "ResolutionError"),
        )
