"""Strategy contract.

A strategy is any object with a ``resolve`` method of the right shape. New lookup
kinds plug in by satisfying the protocol; there is no base class to inherit.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from sceneref.core.identity import NodeId
    from sceneref.graph.protocol import SceneGraph


@runtime_checkable
class Strategy(Protocol):
    """Lookup algorithm selected by a directive."""

    def resolve(self, graph: SceneGraph, origin: NodeId, requested: type) -> tuple[Any, ...]:
        """Produce the ordered matches for one field.

        Args:
            graph: Graph to search. Must not be mutated.
            origin: Node owning the behavior being resolved.
            requested: Declared element type of the field.

        Returns:
            Matches in deterministic order, possibly empty.

        Raises:
            ResolutionError: When the lookup itself fails.
        """
        ...
