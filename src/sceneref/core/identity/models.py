"""Node identity models.

Usage:
    node = NodeId(index=42, generation=1)
    graph.name_of(node)
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class NodeId:
    """Lightweight node handle with generation for safe handle reuse.

    NodeId doubles as the node-handle type of the resolution engine: asking a
    name or tag strategy for ``NodeId`` yields nodes instead of components.
    """

    index: int = 0
    generation: int = 0

    def __str__(self) -> str:
        return f"Node({self.index}:{self.generation})"
