"""Unit tests for the in-memory scene graph."""

from dataclasses import dataclass

import pytest

from sceneref import LocalSceneGraph, SceneGraph


@dataclass(eq=False)
class Hinge:
    label: str


@dataclass(eq=False)
class Motor:
    label: str


def test_local_graph_satisfies_protocol(graph):
    assert isinstance(graph, SceneGraph)


def test_create_nodes_keeps_declared_child_order(graph):
    root = graph.create_node("Root")
    a = graph.create_node("A", root)
    b = graph.create_node("B", root)
    c = graph.create_node("C", root)

    assert graph.children_of(root) == (a, b, c)
    assert graph.parent_of(b) == root
    assert graph.parent_of(root) is None
    assert graph.roots() == (root,)


def test_subtree_is_depth_first_pre_order(graph):
    root = graph.create_node("Root")
    a = graph.create_node("A", root)
    a1 = graph.create_node("A1", a)
    b = graph.create_node("B", root)
    a2 = graph.create_node("A2", a)

    assert list(graph.subtree_of(root)) == [root, a, a1, a2, b]
    assert list(graph.subtree_of(a)) == [a, a1, a2]


def test_unknown_node_raises(graph):
    node = graph.create_node("Gone")
    graph.destroy_node(node)

    assert not graph.node_exists(node)
    with pytest.raises(ValueError, match="does not exist"):
        graph.name_of(node)
    with pytest.raises(ValueError):
        graph.create_node("Orphan", node)


def test_destroy_removes_subtree_components_and_tags(graph):
    root = graph.create_node("Root")
    child = graph.create_node("Child", root, tag="T")
    grandchild = graph.create_node("Grandchild", child, tag="T")
    hinge = graph.add_component(grandchild, Hinge("h"))

    graph.destroy_node(child)

    assert graph.children_of(root) == ()
    assert not graph.node_exists(grandchild)
    assert graph.owner_of(hinge) is None
    assert graph.all_nodes_with_tag("T") == ()


def test_components_in_attach_order_and_by_assignable_type(graph):
    node = graph.create_node("N")
    first = graph.add_component(node, Hinge("first"))
    motor = graph.add_component(node, Motor("m"))
    second = graph.add_component(node, Hinge("second"))

    assert graph.components_on(node, Hinge) == [first, second]
    assert graph.components_on(node, object) == [first, motor, second]
    assert graph.all_components_on(node) == [first, motor, second]
    assert graph.owner_of(motor) == node


def test_component_belongs_to_one_node(graph):
    a = graph.create_node("A")
    b = graph.create_node("B")
    hinge = graph.add_component(a, Hinge("h"))

    with pytest.raises(ValueError, match="already attached"):
        graph.add_component(b, hinge)


def test_remove_component(graph):
    node = graph.create_node("N")
    hinge = graph.add_component(node, Hinge("h"))

    assert graph.remove_component(node, hinge) is True
    assert graph.remove_component(node, hinge) is False
    assert graph.components_on(node, Hinge) == []
    assert graph.owner_of(hinge) is None


def test_active_in_hierarchy_requires_every_ancestor(graph):
    root = graph.create_node("Root")
    mid = graph.create_node("Mid", root)
    leaf = graph.create_node("Leaf", mid)

    assert graph.is_active_in_hierarchy(leaf)

    graph.set_active(mid, False)
    assert graph.is_active_self(leaf)
    assert not graph.is_active_in_hierarchy(leaf)
    assert graph.is_active_in_hierarchy(root)


def test_set_parent_moves_subtree(graph):
    a = graph.create_node("A")
    b = graph.create_node("B")
    child = graph.create_node("Child", a)

    graph.set_parent(child, b)
    assert graph.children_of(a) == ()
    assert graph.children_of(b) == (child,)

    graph.set_parent(child, None)
    assert graph.parent_of(child) is None
    assert graph.roots() == (a, b, child)


def test_set_parent_rejects_cycles(graph):
    root = graph.create_node("Root")
    child = graph.create_node("Child", root)
    grandchild = graph.create_node("Grandchild", child)

    with pytest.raises(ValueError, match="own descendant"):
        graph.set_parent(root, grandchild)
    with pytest.raises(ValueError):
        graph.set_parent(root, root)


def test_tag_index_follows_retagging(graph):
    a = graph.create_node("A", tag="Enemy")
    b = graph.create_node("B", tag="Enemy")

    graph.set_tag(a, "Friend")
    assert graph.all_nodes_with_tag("Enemy") == (b,)
    assert graph.all_nodes_with_tag("Friend") == (a,)
    assert graph.tag_of(a) == "Friend"

    graph.set_tag(b, None)
    assert graph.all_nodes_with_tag("Enemy") == ()


def test_tag_index_includes_inactive_and_structural(graph):
    editor = graph.create_node("Editor", structural_only=True)
    hidden = graph.create_node("Hidden", editor, tag="T", active=False)

    assert graph.all_nodes_with_tag("T") == (hidden,)


def test_all_components_of_type_scans_roots_in_order(graph):
    r1 = graph.create_node("R1")
    r2 = graph.create_node("R2")
    off = graph.create_node("Off", r1, active=False)
    editor = graph.create_node("Editor", r2, structural_only=True)

    h_r1 = graph.add_component(r1, Hinge("r1"))
    h_off = graph.add_component(off, Hinge("off"))
    h_r2 = graph.add_component(r2, Hinge("r2"))
    graph.add_component(editor, Hinge("editor"))

    assert graph.all_components_of_type(Hinge) == [h_r1, h_off, h_r2]
    assert graph.all_components_of_type(Hinge, include_inactive=False) == [h_r1, h_r2]


def test_find_by_name_skips_inactive_and_structural(graph):
    off = graph.create_node("Off", active=False)
    graph.create_node("Target", off)
    editor = graph.create_node("Editor", structural_only=True)
    graph.create_node("Target", editor)
    live = graph.create_node("Target")

    assert graph.find_by_name("Target") == live
    assert graph.find_by_name("Nope") is None


def test_find_in_subtree_by_name_and_path(graph):
    root = graph.create_node("Root")
    arm = graph.create_node("Arm", root)
    hand = graph.create_node("Hand", arm, active=False)
    graph.create_node("Hand", root)

    assert graph.find_in_subtree_by_name(root, "Arm/Hand") == hand
    assert graph.find_in_subtree_by_name(arm, "Hand") == hand
    assert graph.find_in_subtree_by_name(root, "Root") is None
    assert graph.find_in_subtree_by_name(root, "Arm/Finger") is None


def test_find_in_subtree_plain_name_is_depth_first(graph):
    root = graph.create_node("Root")
    arm = graph.create_node("Arm", root)
    deep = graph.create_node("Hand", arm)
    graph.create_node("Hand", root)

    assert graph.find_in_subtree_by_name(root, "Hand") == deep


def test_structural_flag_round_trip():
    graph = LocalSceneGraph()
    node = graph.create_node("N")

    graph.set_structural_only(node, True)
    assert graph.is_structural_only(node)
    graph.set_structural_only(node, False)
    assert not graph.is_structural_only(node)
