from __future__ import annotations

import dataclasses

import pytest

from fibtree.error_msg import DomainViolation
from fibtree.tree import (
    Leaf,
    Pair,
    build,
    fork_count,
    iter_leaves,
    tree_depth,
    tree_size,
)


@pytest.mark.unit
@pytest.mark.parametrize("budget", [1, 0, -4])
def test_degenerate_budgets_collapse_to_single_leaf(budget):
    tree = build(10, budget)
    assert tree == Leaf(10)
    assert tree_size(tree) == 1
    assert tree_depth(tree) == 0


@pytest.mark.unit
def test_split_puts_n_minus_one_left_and_n_minus_two_right():
    assert build(10, 2) == Pair(Leaf(9), Leaf(8))
    assert build(10, 4) == Pair(Pair(Leaf(8), Leaf(7)), Pair(Leaf(7), Leaf(6)))


@pytest.mark.unit
def test_both_children_receive_the_same_halved_budget():
    # 3 // 2 == 1, so both children are leaves
    assert build(10, 3) == Pair(Leaf(9), Leaf(8))
    # 6 // 2 == 3, 3 // 2 == 1
    assert tree_size(build(20, 6)) == 4
    assert tree_depth(build(20, 6)) == 2


@pytest.mark.unit
def test_tree_size_is_non_decreasing_in_budget():
    sizes = [tree_size(build(40, budget)) for budget in range(1, 65)]
    assert sizes == sorted(sizes)
    assert sizes[0] == 1
    assert sizes[-1] == 64


@pytest.mark.unit
def test_build_is_deterministic():
    first = build(30, 16)
    second = build(30, 16)
    assert first == second
    assert list(iter_leaves(first)) == list(iter_leaves(second))


@pytest.mark.unit
def test_tree_nodes_are_immutable():
    leaf = Leaf(3)
    with pytest.raises(dataclasses.FrozenInstanceError):
        leaf.index = 4  # type: ignore[misc]


@pytest.mark.unit
def test_smallest_valid_split():
    assert build(2, 2) == Pair(Leaf(1), Leaf(0))


@pytest.mark.unit
@pytest.mark.parametrize("index", [0, 1])
def test_underflow_is_reported_not_wrapped(index):
    with pytest.raises(DomainViolation) as excinfo:
        build(index, 4)
    assert excinfo.value.index < 0


@pytest.mark.unit
def test_underflow_reports_the_offending_path():
    with pytest.raises(DomainViolation) as excinfo:
        build(1, 4)
    assert excinfo.value.index == -1
    assert excinfo.value.stack_trace[0] == ("fib(-1)", "root.right")
    assert "fib(-1) at root.right" in str(excinfo.value)

    with pytest.raises(DomainViolation) as excinfo:
        build(2, 4)
    assert excinfo.value.stack_trace[0] == ("fib(-1)", "root.left.right")


@pytest.mark.unit
def test_negative_root_index_is_rejected():
    with pytest.raises(DomainViolation):
        build(-1, 1)
    with pytest.raises(DomainViolation):
        Leaf(-3)


@pytest.mark.unit
@pytest.mark.parametrize("index, budget", [(10.0, 2), (10, 2.0), ("10", 2), (True, 2)])
def test_build_rejects_non_integer_arguments(index, budget):
    with pytest.raises(TypeError):
        build(index, budget)


@pytest.mark.unit
def test_iter_leaves_lists_paths_left_to_right():
    assert list(iter_leaves(build(10, 4))) == [
        ("root.left.left", 8),
        ("root.left.right", 7),
        ("root.right.left", 7),
        ("root.right.right", 6),
    ]
    assert list(iter_leaves(Leaf(5))) == [("root", 5)]


@pytest.mark.unit
def test_fork_count_is_two_per_pair():
    assert fork_count(Leaf(5)) == 0
    assert fork_count(build(10, 2)) == 2
    assert fork_count(build(10, 4)) == 6
    assert fork_count(build(40, 32)) == 2 * (32 - 1)
