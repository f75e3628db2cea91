"""Directive models: what to resolve, where to write it, and under which policy.

Usage:
    spawn_points = FieldBinding(
        "spawn_points",
        Directive(ByTag("Spawn"), suppress_errors=True),
        FieldTarget.collection(NodeId),
    )
    rigidbody = FieldBinding(
        "body",
        Directive.of("same_node", dont_override=True),
        FieldTarget.scalar(Rigidbody),
    )
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from sceneref.core.strategy import Strategy, StrategyRegistry


class OverwritePolicy(Enum):
    """What to do when the target field already holds a value."""

    ALWAYS_SET = auto()  # Resolve and overwrite every time
    SKIP_IF_PRESENT = auto()  # Keep a populated field untouched (manual override)


class FieldShape(Enum):
    """How many matches a field receives."""

    SCALAR = auto()  # First match or None
    COLLECTION = auto()  # Every match, in strategy order


@dataclass(frozen=True, slots=True)
class Directive:
    """Immutable resolution request for one field.

    Conceptually static metadata of the declaring behavior type: build it once
    and share it across every instance.

    Attributes:
        strategy: Lookup to run.
        overwrite: Overwrite policy for already-populated fields.
        suppress_errors: Do not report failures to the diagnostic channel.
    """

    strategy: Strategy
    overwrite: OverwritePolicy = OverwritePolicy.ALWAYS_SET
    suppress_errors: bool = False

    @classmethod
    def of(
        cls,
        kind: str,
        *,
        dont_override: bool = False,
        suppress_errors: bool = False,
        registry: StrategyRegistry | None = None,
        **params: Any,
    ) -> Directive:
        """Build a directive from a registered strategy kind name.

        Args:
            kind: Strategy kind, e.g. ``"by_tag"``.
            dont_override: Use SKIP_IF_PRESENT instead of ALWAYS_SET.
            suppress_errors: Silence failure diagnostics.
            registry: Registry to look the kind up in, global by default.
            **params: Strategy parameters.

        Returns:
            New Directive.

        Raises:
            KeyError: If kind is not registered.
        """
        # Late import to avoid circular dependency
        from sceneref.core.strategy import get_registry

        reg = registry if registry is not None else get_registry()
        return cls(
            strategy=reg.create(kind, **params),
            overwrite=(
                OverwritePolicy.SKIP_IF_PRESENT if dont_override else OverwritePolicy.ALWAYS_SET
            ),
            suppress_errors=suppress_errors,
        )

    @property
    def skips_if_present(self) -> bool:
        return self.overwrite is OverwritePolicy.SKIP_IF_PRESENT


@dataclass(frozen=True, slots=True)
class FieldTarget:
    """Declared element type and shape of the field a result is written to."""

    declared_type: type
    shape: FieldShape = FieldShape.SCALAR

    @classmethod
    def scalar(cls, declared_type: type) -> FieldTarget:
        return cls(declared_type, FieldShape.SCALAR)

    @classmethod
    def collection(cls, declared_type: type) -> FieldTarget:
        return cls(declared_type, FieldShape.COLLECTION)

    @property
    def is_collection(self) -> bool:
        return self.shape is FieldShape.COLLECTION


@dataclass(frozen=True, slots=True)
class FieldBinding:
    """One resolvable field of a behavior type.

    Built once per behavior type by whatever discovers the fields, then reused
    for every instance. Without explicit accessors the field is read and written
    as a plain attribute named ``field_name``.
    """

    field_name: str
    directive: Directive
    target: FieldTarget
    getter: Callable[[Any], Any] | None = None
    setter: Callable[[Any, Any], None] | None = None

    def read(self, behavior: Any) -> Any:
        """Current field value, None when the attribute is missing."""
        if self.getter is not None:
            return self.getter(behavior)
        return getattr(behavior, self.field_name, None)

    def write(self, behavior: Any, value: Any) -> None:
        """Store a resolved value on the behavior."""
        if self.setter is not None:
            self.setter(behavior, value)
        else:
            setattr(behavior, self.field_name, value)
