"""Scene graph backends."""

from sceneref.graph.allocator import NodeAllocator
from sceneref.graph.local import LocalSceneGraph
from sceneref.graph.protocol import SceneGraph

__all__ = [
    "SceneGraph",
    "LocalSceneGraph",
    "NodeAllocator",
]
