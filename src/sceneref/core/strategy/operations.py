"""Pure graph walks shared by the strategies.

All walks are iterative and never mutate the graph. Parent walks are bounded so a
malformed host graph with a parent cycle fails loudly instead of spinning.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING, Any, TypeVar

from sceneref.core.errors import CycleError, TypeMismatchError
from sceneref.core.identity import NodeId

if TYPE_CHECKING:
    from sceneref.graph.protocol import SceneGraph

T = TypeVar("T")

DEFAULT_MAX_DEPTH = 10_000


def walk_ancestors(
    graph: SceneGraph,
    node: NodeId,
    include_self: bool = True,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> Iterator[NodeId]:
    """Yield node (optionally) and then each ancestor up to the root.

    Args:
        graph: Graph to walk.
        node: Starting node.
        include_self: Whether node itself is yielded first.
        max_depth: Maximum number of parent links followed.

    Yields:
        Nodes from node towards the root.

    Raises:
        CycleError: If a node repeats or the chain is longer than max_depth.
    """
    visited: set[NodeId] = {node}
    if include_self:
        yield node
    current = graph.parent_of(node)
    steps = 0
    while current is not None:
        steps += 1
        if current in visited or steps > max_depth:
            raise CycleError(f"Parent chain of {node} does not reach a root")
        visited.add(current)
        yield current
        current = graph.parent_of(current)


def has_structural_ancestry(
    graph: SceneGraph, node: NodeId, max_depth: int = DEFAULT_MAX_DEPTH
) -> bool:
    """Check whether node or any of its ancestors is flagged structural-only.

    Args:
        graph: Graph to query.
        node: Node to check.
        max_depth: Parent walk limit.

    Returns:
        True if the node must be excluded from runtime queries.
    """
    return any(graph.is_structural_only(n) for n in walk_ancestors(graph, node, True, max_depth))


def unique_by_identity(items: Iterable[T]) -> list[T]:
    """Drop repeated objects (by identity), keeping first occurrences in order."""
    seen: set[int] = set()
    result: list[T] = []
    for item in items:
        if id(item) not in seen:
            seen.add(id(item))
            result.append(item)
    return result


def require_component_type(strategy: Any, requested: Any) -> None:
    """Reject requests a component-only strategy cannot answer.

    Raises:
        TypeMismatchError: If requested is the node-handle type or not a type.
    """
    if not isinstance(requested, type):
        raise TypeMismatchError(f"{strategy} needs a type to search for, got {requested!r}")
    if requested is NodeId:
        raise TypeMismatchError(f"{strategy} returns components; node handles are unsupported")


def components_or_node(graph: SceneGraph, node: NodeId, requested: type) -> tuple[Any, ...]:
    """Answer a node-returning lookup for either the node-handle type or a component type."""
    if requested is NodeId:
        return (node,)
    require_component_type("node lookup", requested)
    return tuple(graph.components_on(node, requested))
