"""Local in-memory scene graph implementation.

Simple dict-based graph suitable for single-process use, tests and tooling that
builds a hierarchy in Python before resolving references against it.

Usage:
    graph = LocalSceneGraph()
    root = graph.create_node("Level")
    door = graph.create_node("Door", parent=root, tag="Interactable")
    graph.add_component(door, Hinge())
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from typing import Any, TypeVar

from sceneref.core.identity import NodeId
from sceneref.graph.allocator import NodeAllocator

T = TypeVar("T")


@dataclass(slots=True)
class _NodeRecord:
    name: str
    tag: str | None = None
    active: bool = True
    structural_only: bool = False
    parent: NodeId | None = None
    children: list[NodeId] = field(default_factory=list)
    components: list[Any] = field(default_factory=list)


class LocalSceneGraph:
    """In-memory scene graph using a node table plus tag and owner indices.

    Structure:
        _nodes[node] = _NodeRecord(name, tag, flags, parent, children, components)
        _by_tag[tag] = [node, ...]            (insertion order)
        _owners[id(component)] = node

    The graph guarantees acyclicity: ``set_parent`` rejects moves that would put
    a node below itself.
    """

    def __init__(self) -> None:
        self._allocator = NodeAllocator()
        self._nodes: dict[NodeId, _NodeRecord] = {}
        self._roots: list[NodeId] = []
        self._by_tag: dict[str, list[NodeId]] = {}
        self._owners: dict[int, NodeId] = {}

    def _record(self, node: NodeId) -> _NodeRecord:
        record = self._nodes.get(node)
        if record is None or not self._allocator.is_alive(node):
            raise ValueError(f"{node} does not exist")
        return record

    def _walk(
        self,
        start: Iterable[NodeId],
        prune: Callable[[_NodeRecord], bool] | None = None,
    ) -> Iterator[NodeId]:
        """Depth-first pre-order over several subtrees, skipping pruned branches."""
        stack = list(reversed(list(start)))
        while stack:
            node = stack.pop()
            record = self._nodes[node]
            if prune is not None and prune(record):
                continue
            yield node
            stack.extend(reversed(record.children))

    # Mutation

    def create_node(
        self,
        name: str,
        parent: NodeId | None = None,
        *,
        tag: str | None = None,
        active: bool = True,
        structural_only: bool = False,
    ) -> NodeId:
        """Create a node, appended last among its siblings.

        Args:
            name: Node name (not required to be unique).
            parent: Parent node, or None to create a root.
            tag: Primary tag, None for untagged.
            active: Self activity flag.
            structural_only: Mark as authoring-only, excluded from runtime queries.

        Returns:
            Newly allocated NodeId.

        Raises:
            ValueError: If parent does not exist.
        """
        if parent is not None:
            self._record(parent)
        node = self._allocator.allocate()
        self._nodes[node] = _NodeRecord(
            name=name, active=active, structural_only=structural_only, parent=parent
        )
        if parent is None:
            self._roots.append(node)
        else:
            self._nodes[parent].children.append(node)
        if tag is not None:
            self.set_tag(node, tag)
        return node

    def destroy_node(self, node: NodeId) -> None:
        """Destroy a node together with its whole subtree and components.

        Args:
            node: Node to destroy.
        """
        record = self._record(node)
        siblings = self._roots if record.parent is None else self._nodes[record.parent].children
        siblings.remove(node)

        for doomed in list(self._walk([node])):
            doomed_record = self._nodes.pop(doomed)
            for comp in doomed_record.components:
                self._owners.pop(id(comp), None)
            if doomed_record.tag is not None:
                self._by_tag[doomed_record.tag].remove(doomed)
            self._allocator.deallocate(doomed)

    def set_parent(self, node: NodeId, parent: NodeId | None) -> None:
        """Move node (with its subtree) below parent, or to the root level.

        Args:
            node: Node to move.
            parent: New parent, or None to make node a root.

        Raises:
            ValueError: If either node is unknown or the move would form a cycle.
        """
        record = self._record(node)
        if parent is not None:
            self._record(parent)
            if parent in set(self._walk([node])):
                raise ValueError(f"Cannot parent {node} under its own descendant {parent}")

        old_siblings = self._roots if record.parent is None else self._nodes[record.parent].children
        old_siblings.remove(node)
        record.parent = parent
        if parent is None:
            self._roots.append(node)
        else:
            self._nodes[parent].children.append(node)

    def set_name(self, node: NodeId, name: str) -> None:
        """Rename a node."""
        self._record(node).name = name

    def set_tag(self, node: NodeId, tag: str | None) -> None:
        """Replace the node's primary tag. None removes it."""
        record = self._record(node)
        if record.tag is not None:
            self._by_tag[record.tag].remove(node)
        record.tag = tag
        if tag is not None:
            self._by_tag.setdefault(tag, []).append(node)

    def set_active(self, node: NodeId, active: bool) -> None:
        """Set the node's own activity flag."""
        self._record(node).active = active

    def set_structural_only(self, node: NodeId, structural_only: bool) -> None:
        """Flag or unflag the node as authoring-only."""
        self._record(node).structural_only = structural_only

    def add_component(self, node: NodeId, component: T) -> T:
        """Attach a component instance to a node, after any existing ones.

        Args:
            node: Node to attach to.
            component: Component instance. One instance belongs to one node.

        Returns:
            The attached component, for chaining.

        Raises:
            ValueError: If node is unknown or component is already attached.
        """
        record = self._record(node)
        owner = self._owners.get(id(component))
        if owner is not None:
            raise ValueError(f"{type(component).__name__} is already attached to {owner}")
        record.components.append(component)
        self._owners[id(component)] = node
        return component

    def remove_component(self, node: NodeId, component: Any) -> bool:
        """Detach a component instance. Returns True if it was attached to node."""
        record = self._record(node)
        for i, existing in enumerate(record.components):
            if existing is component:
                del record.components[i]
                del self._owners[id(component)]
                return True
        return False

    # Queries

    def node_exists(self, node: NodeId) -> bool:
        return node in self._nodes and self._allocator.is_alive(node)

    def all_nodes(self) -> Iterator[NodeId]:
        """Every alive node, root by root, depth-first."""
        return self._walk(self._roots)

    def roots(self) -> Sequence[NodeId]:
        return tuple(self._roots)

    def parent_of(self, node: NodeId) -> NodeId | None:
        return self._record(node).parent

    def children_of(self, node: NodeId) -> Sequence[NodeId]:
        return tuple(self._record(node).children)

    def subtree_of(self, node: NodeId) -> Iterator[NodeId]:
        self._record(node)
        return self._walk([node])

    def name_of(self, node: NodeId) -> str:
        return self._record(node).name

    def tag_of(self, node: NodeId) -> str | None:
        return self._record(node).tag

    def is_active_self(self, node: NodeId) -> bool:
        return self._record(node).active

    def is_structural_only(self, node: NodeId) -> bool:
        return self._record(node).structural_only

    def is_active_in_hierarchy(self, node: NodeId) -> bool:
        current: NodeId | None = node
        while current is not None:
            record = self._record(current)
            if not record.active:
                return False
            current = record.parent
        return True

    def components_on(self, node: NodeId, component_type: type[T]) -> list[T]:
        return [c for c in self._record(node).components if isinstance(c, component_type)]

    def all_components_on(self, node: NodeId) -> list[Any]:
        """Every component on node in attach order."""
        return list(self._record(node).components)

    def owner_of(self, component: Any) -> NodeId | None:
        return self._owners.get(id(component))

    def all_components_of_type(
        self, component_type: type[T], include_inactive: bool = True
    ) -> list[T]:
        """Root-by-root subtree scan. Structural-only subtrees are never visited."""

        def prune(record: _NodeRecord) -> bool:
            return record.structural_only or (not include_inactive and not record.active)

        found: list[T] = []
        for node in self._walk(self._roots, prune):
            found.extend(c for c in self._nodes[node].components if isinstance(c, component_type))
        return found

    def find_by_name(self, name: str) -> NodeId | None:
        def prune(record: _NodeRecord) -> bool:
            return record.structural_only or not record.active

        for node in self._walk(self._roots, prune):
            if self._nodes[node].name == name:
                return node
        return None

    def find_in_subtree_by_name(self, node: NodeId, name: str) -> NodeId | None:
        """Find a descendant by name, or by a ``/``-separated path of child names.

        A plain name matches any descendant (origin excluded), depth-first.
        A path such as ``"Arm/Hand"`` walks direct children one segment at a time.
        """
        record = self._record(node)
        if "/" in name:
            current = node
            for segment in name.split("/"):
                match = next(
                    (c for c in self._nodes[current].children if self._nodes[c].name == segment),
                    None,
                )
                if match is None:
                    return None
                current = match
            return current

        for descendant in self._walk(record.children):
            if self._nodes[descendant].name == name:
                return descendant
        return None

    def all_nodes_with_tag(self, tag: str) -> Sequence[NodeId]:
        return tuple(self._by_tag.get(tag, ()))
