from dataclasses import dataclass, field

from sceneref import (
    CollectingDiagnostics,
    Directive,
    FieldBinding,
    FieldTarget,
    LocalSceneGraph,
    NodeId,
    Resolver,
)


@dataclass(eq=False)
class Rigidbody:
    mass: float = 1.0


@dataclass(eq=False)
class Health:
    points: int = 100


@dataclass
class EnemySpawner:
    """Spawns enemies at every active spawn point, tracking its own body."""

    body: Rigidbody | None = None
    health: Health | None = None
    spawn_points: list[NodeId] = field(default_factory=list)


SPAWNER_BINDINGS = [
    FieldBinding("body", Directive.of("same_node"), FieldTarget.scalar(Rigidbody)),
    # Designers may assign health by hand; keep their choice
    FieldBinding(
        "health",
        Directive.of("ancestors", dont_override=True),
        FieldTarget.scalar(Health),
    ),
    FieldBinding(
        "spawn_points",
        Directive.of("by_tag", tag="Spawn", include_disabled=False),
        FieldTarget.collection(NodeId),
    ),
]


def main() -> None:
    graph = LocalSceneGraph()
    level = graph.create_node("Level")
    graph.add_component(level, Health(500))

    spawner_node = graph.create_node("Spawner", level)
    graph.add_component(spawner_node, Rigidbody(mass=40.0))
    spawner = graph.add_component(spawner_node, EnemySpawner())

    spawns = graph.create_node("Spawns", level)
    graph.create_node("North", spawns, tag="Spawn")
    graph.create_node("East", spawns, tag="Spawn")
    graph.create_node("West", spawns, tag="Spawn", active=False)
    editor = graph.create_node("EditorOnly", level, structural_only=True)
    graph.create_node("Preview", editor, tag="Spawn")

    diagnostics = CollectingDiagnostics()
    resolver = Resolver(graph, diagnostics=diagnostics)
    report = resolver.resolve_graph({EnemySpawner: SPAWNER_BINDINGS})

    print(f"Body mass: {spawner.body.mass if spawner.body else None}")
    print(f"Health: {spawner.health.points if spawner.health else None}")
    print("Spawn points:", [graph.name_of(n) for n in spawner.spawn_points])
    print("Report:", report.to_dict())
    for diagnostic in diagnostics:
        print(diagnostic.format())


if __name__ == "__main__":
    main()
