"""Node identity."""

from sceneref.core.identity.models import NodeId

__all__ = ["NodeId"]
