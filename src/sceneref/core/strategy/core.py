"""Strategy registry and decorator.

Usage:
    @strategy("nearest_camera")
    @dataclass(frozen=True, slots=True)
    class NearestCamera:
        def resolve(self, graph, origin, requested):
            ...

    Directive.of("nearest_camera")
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from sceneref.core.strategy.models import Strategy


class StrategyRegistry:
    """Process-local registry mapping kind names to strategy classes.

    Kind names let directives be declared from plain data (config files,
    generated binding tables) instead of importing each strategy class.
    """

    def __init__(self) -> None:
        """Initialize empty strategy registry."""
        self._by_kind: dict[str, type] = {}
        self._by_type: dict[type, str] = {}

    def register(self, kind: str, cls: type) -> type:
        """Register a strategy class under a kind name.

        Args:
            kind: Unique kind name, e.g. ``"by_tag"``.
            cls: Class whose instances satisfy the Strategy protocol.

        Returns:
            The registered class.

        Raises:
            TypeError: If cls does not define ``resolve``.
            RuntimeError: If kind is already taken by another class.
        """
        if not callable(getattr(cls, "resolve", None)):
            raise TypeError(
                f"Strategy {cls.__name__} must define resolve(graph, origin, requested)"
            )

        existing = self._by_kind.get(kind)
        if existing is not None and existing is not cls:
            raise RuntimeError(f"Strategy kind '{kind}' already registered to {existing.__name__}")

        self._by_kind[kind] = cls
        self._by_type[cls] = kind
        return cls

    def create(self, kind: str, **params: Any) -> Strategy:
        """Instantiate the strategy registered under kind.

        Args:
            kind: Registered kind name.
            **params: Strategy parameters (name, tag, include_disabled, ...).

        Returns:
            New strategy instance.

        Raises:
            KeyError: If kind is unknown.
        """
        try:
            cls = self._by_kind[kind]
        except KeyError:
            known = ", ".join(sorted(self._by_kind))
            raise KeyError(f"Unknown strategy kind '{kind}' (known: {known})") from None
        instance: Strategy = cls(**params)
        return instance

    def kind_of(self, strategy: Any) -> str | None:
        """Get the kind name a strategy instance or class was registered under."""
        cls = strategy if isinstance(strategy, type) else type(strategy)
        return self._by_type.get(cls)

    def kinds(self) -> tuple[str, ...]:
        """All registered kind names in registration order."""
        return tuple(self._by_kind)

    def __contains__(self, kind: str) -> bool:
        return kind in self._by_kind


# Module-level registry instance
_registry = StrategyRegistry()


def get_registry() -> StrategyRegistry:
    """Access the global strategy registry.

    Returns:
        The process-local StrategyRegistry instance.
    """
    return _registry


def strategy(kind: str, *, registry: StrategyRegistry | None = None) -> Callable[[type], type]:
    """Register a class as a strategy kind.

    Args:
        kind: Kind name directives use to refer to the strategy.
        registry: Registry to use, the global one by default.

    Returns:
        Class decorator returning the class unchanged.
    """
    target = registry if registry is not None else _registry

    def decorator(cls: type) -> type:
        return target.register(kind, cls)

    return decorator
