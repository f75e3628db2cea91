"""Scene graph protocol consumed by the resolution engine.

The resolver never owns the graph. Any host hierarchy (a game engine scene, a
document tree, a test fixture) can be resolved against by satisfying this
read-only interface.

Usage:
    graph = LocalSceneGraph()
    resolver = Resolver(graph)
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Any, Protocol, TypeVar, runtime_checkable

from sceneref.core.identity import NodeId

T = TypeVar("T")


@runtime_checkable
class SceneGraph(Protocol):
    """Read-only scene graph interface. Implementations own nodes and components."""

    def node_exists(self, node: NodeId) -> bool:
        """Check if node is alive."""
        ...

    def roots(self) -> Sequence[NodeId]:
        """Top-level nodes in declared order."""
        ...

    def parent_of(self, node: NodeId) -> NodeId | None:
        """Immediate parent, or None for a root."""
        ...

    def children_of(self, node: NodeId) -> Sequence[NodeId]:
        """Direct children in declared order."""
        ...

    def subtree_of(self, node: NodeId) -> Iterator[NodeId]:
        """Depth-first pre-order walk of the subtree rooted at node, node included."""
        ...

    def name_of(self, node: NodeId) -> str:
        """Node name. Names are not unique."""
        ...

    def components_on(self, node: NodeId, component_type: type[T]) -> list[T]:
        """Components on node assignable to component_type, in attach order."""
        ...

    def owner_of(self, component: Any) -> NodeId | None:
        """Node a component instance is attached to."""
        ...

    def all_components_of_type(
        self, component_type: type[T], include_inactive: bool = True
    ) -> list[T]:
        """Every runtime component of a type, root by root, depth-first."""
        ...

    def find_by_name(self, name: str) -> NodeId | None:
        """First active runtime node with the given name, depth-first from the roots."""
        ...

    def find_in_subtree_by_name(self, node: NodeId, name: str) -> NodeId | None:
        """First descendant of node with the given name (or path of child names)."""
        ...

    def all_nodes_with_tag(self, tag: str) -> Sequence[NodeId]:
        """Raw tag index, including inactive and structural-only nodes. Unordered."""
        ...

    def is_active_in_hierarchy(self, node: NodeId) -> bool:
        """True only if node and every ancestor are active."""
        ...

    def is_structural_only(self, node: NodeId) -> bool:
        """True if the node itself is flagged authoring-only."""
        ...
