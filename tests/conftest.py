"""Shared test fixtures."""

from dataclasses import dataclass

import pytest

from sceneref import CollectingDiagnostics, LocalSceneGraph, NodeId, Resolver
from sceneref.config import ResolverSettings


@dataclass(eq=False)
class FixtureCollider:
    label: str


@dataclass(eq=False)
class FixtureLight:
    label: str


@dataclass
class SpawnScene:
    """Nodes of the ``spawn_scene`` fixture.

    Level
      Spawns
        SpawnB   tag=Spawn, inactive
        SpawnA   tag=Spawn
      Editor     structural-only
        SpawnC   tag=Spawn
    """

    graph: LocalSceneGraph
    level: NodeId
    spawns: NodeId
    spawn_a: NodeId
    spawn_b: NodeId
    editor: NodeId
    spawn_c: NodeId


@pytest.fixture
def graph():
    """Fresh LocalSceneGraph instance."""
    return LocalSceneGraph()


@pytest.fixture
def diagnostics():
    return CollectingDiagnostics()


@pytest.fixture
def settings():
    """Settings pinned to defaults so SCENEREF_* variables cannot leak in."""
    return ResolverSettings(
        emit_warnings=False, report_empty_scalars=True, subtree_miss_is_fatal=True
    )


@pytest.fixture
def resolver(graph, diagnostics, settings):
    return Resolver(graph, diagnostics=diagnostics, settings=settings)


@pytest.fixture
def spawn_scene(graph):
    level = graph.create_node("Level")
    spawns = graph.create_node("Spawns", level)
    spawn_b = graph.create_node("SpawnB", spawns, tag="Spawn", active=False)
    spawn_a = graph.create_node("SpawnA", spawns, tag="Spawn")
    editor = graph.create_node("Editor", level, structural_only=True)
    spawn_c = graph.create_node("SpawnC", editor, tag="Spawn")
    return SpawnScene(graph, level, spawns, spawn_a, spawn_b, editor, spawn_c)


@pytest.fixture
def collider_cls():
    return FixtureCollider


@pytest.fixture
def light_cls():
    return FixtureLight
