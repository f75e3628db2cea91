"""Node allocation service.

NodeAllocator is a stateful service that manages node ID lifecycle.
"""

from __future__ import annotations

from sceneref.core.identity import NodeId


class NodeAllocator:
    """Allocates node IDs with generation tracking for recycling.

    Maintains a free list of released node indices with incremented generations
    so a stale handle to a destroyed node never aliases a new one.
    """

    def __init__(self) -> None:
        self._next_index = 0
        self._free_list: list[tuple[int, int]] = []  # (index, generation)
        self._generations: dict[int, int] = {}

    def allocate(self) -> NodeId:
        """Allocate new node ID, reusing recycled slots when available.

        Returns:
            Newly allocated NodeId.
        """
        if self._free_list:
            index, gen = self._free_list.pop()
            return NodeId(index=index, generation=gen)

        index = self._next_index
        self._next_index += 1
        self._generations[index] = 0
        return NodeId(index=index, generation=0)

    def deallocate(self, node: NodeId) -> None:
        """Return node ID for reuse with incremented generation.

        Args:
            node: Node ID to release.

        Raises:
            ValueError: If the node is not alive.
        """
        if not self.is_alive(node):
            raise ValueError(f"Cannot deallocate {node}: not alive")

        new_gen = node.generation + 1
        self._generations[node.index] = new_gen
        self._free_list.append((node.index, new_gen))

    def is_alive(self, node: NodeId) -> bool:
        """Check if node ID is still valid (not recycled).

        Args:
            node: Node ID to check.

        Returns:
            True if node is alive, False if recycled or never allocated.
        """
        return self._generations.get(node.index, -1) == node.generation
