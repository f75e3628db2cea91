"""Field resolution: resolver, results and build reports."""

from sceneref.resolution.resolver import Resolver, is_populated
from sceneref.resolution.result import BuildReport, ResolutionResult, ResolutionStatus

__all__ = [
    "Resolver",
    "ResolutionResult",
    "ResolutionStatus",
    "BuildReport",
    "is_populated",
]
