"""Built-in lookup strategies.

Each strategy is a frozen value object holding its parameters. Plural forms
(``GetComponents`` vs ``GetComponent``) are not separate strategies: whether a
field receives one object or all of them is decided by its FieldTarget shape.

Usage:
    Directive(SameNode())
    Directive(ByTag("Spawn", include_disabled=False), suppress_errors=True)
    Directive.of("by_name", name="Main Camera")
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from sceneref.core.errors import NotFoundError, SubtreeLookupError
from sceneref.core.identity import NodeId
from sceneref.core.strategy.core import strategy
from sceneref.core.strategy.operations import (
    DEFAULT_MAX_DEPTH,
    components_or_node,
    has_structural_ancestry,
    require_component_type,
    unique_by_identity,
    walk_ancestors,
)

if TYPE_CHECKING:
    from sceneref.graph.protocol import SceneGraph


@strategy("same_node")
@dataclass(frozen=True, slots=True)
class SameNode:
    """Components on the origin node itself."""

    def resolve(self, graph: SceneGraph, origin: NodeId, requested: type) -> tuple[Any, ...]:
        require_component_type(self, requested)
        return tuple(graph.components_on(origin, requested))


@strategy("descendants")
@dataclass(frozen=True, slots=True)
class Descendants:
    """Components in the subtree rooted at origin, origin first.

    Depth-first pre-order with children in declared order. Inactive nodes are
    searched too: component presence decides, not activity.
    """

    def resolve(self, graph: SceneGraph, origin: NodeId, requested: type) -> tuple[Any, ...]:
        require_component_type(self, requested)
        found: list[Any] = []
        for node in graph.subtree_of(origin):
            found.extend(graph.components_on(node, requested))
        return tuple(unique_by_identity(found))


@strategy("ancestors")
@dataclass(frozen=True, slots=True)
class Ancestors:
    """Components on origin and then on each ancestor up to the root."""

    max_depth: int = DEFAULT_MAX_DEPTH

    def resolve(self, graph: SceneGraph, origin: NodeId, requested: type) -> tuple[Any, ...]:
        require_component_type(self, requested)
        found: list[Any] = []
        for node in walk_ancestors(graph, origin, include_self=True, max_depth=self.max_depth):
            found.extend(graph.components_on(node, requested))
        return tuple(found)


@strategy("direct_parent")
@dataclass(frozen=True, slots=True)
class DirectParent:
    """Components on the immediate parent only. A root yields nothing."""

    def resolve(self, graph: SceneGraph, origin: NodeId, requested: type) -> tuple[Any, ...]:
        require_component_type(self, requested)
        parent = graph.parent_of(origin)
        if parent is None:
            return ()
        return tuple(graph.components_on(parent, requested))


@strategy("global_by_type")
@dataclass(frozen=True, slots=True)
class GlobalByType:
    """Every runtime component of the requested type anywhere in the graph.

    Attributes:
        include_disabled: Also return components below inactive nodes.
    """

    include_disabled: bool = True

    def resolve(self, graph: SceneGraph, origin: NodeId, requested: type) -> tuple[Any, ...]:
        require_component_type(self, requested)
        found = graph.all_components_of_type(requested, include_inactive=self.include_disabled)
        return tuple(found)


@strategy("by_name")
@dataclass(frozen=True, slots=True)
class ByName:
    """First node in the graph with the given name.

    Requesting ``NodeId`` returns the node, any other type returns that node's
    matching components. A miss is an empty result, not an error.
    """

    name: str

    def resolve(self, graph: SceneGraph, origin: NodeId, requested: type) -> tuple[Any, ...]:
        node = graph.find_by_name(self.name)
        if node is None:
            return ()
        return components_or_node(graph, node, requested)


@strategy("by_name_in_subtree")
@dataclass(frozen=True, slots=True)
class ByNameInSubtree:
    """First descendant of origin with the given name, or a ``/`` path of child names.

    A miss raises SubtreeLookupError and is never downgraded to an empty result
    by directive policy.
    """

    name: str

    def resolve(self, graph: SceneGraph, origin: NodeId, requested: type) -> tuple[Any, ...]:
        node = graph.find_in_subtree_by_name(origin, self.name)
        if node is None:
            raise SubtreeLookupError(origin, self.name)
        return components_or_node(graph, node, requested)


@strategy("by_tag")
@dataclass(frozen=True, slots=True)
class ByTag:
    """All runtime nodes carrying a tag, ordered by name.

    The tag index has no defined order, so nodes are sorted by name to keep the
    output stable. Nodes at or below a structural-only node are dropped.
    Components on a node are always included regardless of their own state.

    Attributes:
        tag: Tag to look up.
        include_disabled: Keep nodes that are not active in hierarchy.
        max_depth: Parent walk limit for the structural-only check.
    """

    tag: str
    include_disabled: bool = True
    max_depth: int = DEFAULT_MAX_DEPTH

    def resolve(self, graph: SceneGraph, origin: NodeId, requested: type) -> tuple[Any, ...]:
        if requested is not NodeId:
            require_component_type(self, requested)
        tagged = graph.all_nodes_with_tag(self.tag)
        if not tagged:
            raise NotFoundError(f"No nodes tagged '{self.tag}'")

        nodes = [n for n in tagged if not has_structural_ancestry(graph, n, self.max_depth)]
        nodes.sort(key=graph.name_of)

        if not self.include_disabled:
            nodes = [n for n in nodes if graph.is_active_in_hierarchy(n)]

        if requested is NodeId:
            return tuple(nodes)

        found: list[Any] = []
        for node in nodes:
            found.extend(graph.components_on(node, requested))
        return tuple(found)
