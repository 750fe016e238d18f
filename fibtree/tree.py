"""Decomposition tree types and construction."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Literal, Union

from fibtree.error_msg import DomainViolation

NodePath = str
Side = Literal["left", "right"]

ROOT_PATH: NodePath = "root"


@dataclass(frozen=True)
class Leaf:
    """Compute fib(index) directly."""

    index: int

    def __post_init__(self) -> None:
        if self.index < 0:
            raise DomainViolation(self.index, [(f"fib({self.index})", "leaf")])


@dataclass(frozen=True)
class Pair:
    """Evaluate both subtrees independently, then add the results."""

    left: "DecompositionTree"
    right: "DecompositionTree"


DecompositionTree = Union[Leaf, Pair]


def child_path(path: NodePath, side: Side) -> NodePath:
    return f"{path}.{side}"


def _require_int(name: str, value) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    return value


def _checked_predecessor(index: int, step: int, path: NodePath, side: Side) -> int:
    predecessor = index - step
    if predecessor < 0:
        raise DomainViolation(
            predecessor,
            [
                (f"fib({predecessor})", child_path(path, side)),
                (f"fib({index})", path),
            ],
        )
    return predecessor


def build(index: int, budget: int) -> DecompositionTree:
    """
    Build the decomposition tree for fib(index).

    A budget of one or less yields a single leaf. Otherwise the node splits
    into fib(index - 1) on the left and fib(index - 2) on the right, and both
    children recurse with ``budget // 2``. The budget is a hint for the leaf
    count, not an exact target.

    Raises:
        DomainViolation: If the split would need a negative index
        TypeError: If index or budget is not an integer
    """
    _require_int("index", index)
    _require_int("budget", budget)
    if index < 0:
        raise DomainViolation(index, [(f"fib({index})", ROOT_PATH)])
    return _build(index, budget, ROOT_PATH)


def _build(index: int, budget: int, path: NodePath) -> DecompositionTree:
    if budget <= 1:
        return Leaf(index)

    half = budget // 2
    left_index = _checked_predecessor(index, 1, path, "left")
    right_index = _checked_predecessor(index, 2, path, "right")
    return Pair(
        _build(left_index, half, child_path(path, "left")),
        _build(right_index, half, child_path(path, "right")),
    )


def tree_size(tree: DecompositionTree) -> int:
    """Number of leaves in the tree."""
    if isinstance(tree, Leaf):
        return 1
    return tree_size(tree.left) + tree_size(tree.right)


def tree_depth(tree: DecompositionTree) -> int:
    if isinstance(tree, Leaf):
        return 0
    return 1 + max(tree_depth(tree.left), tree_depth(tree.right))


def fork_count(tree: DecompositionTree) -> int:
    """Concurrent units launched when every pair forks both children."""
    return 2 * (tree_size(tree) - 1)


def iter_leaves(
    tree: DecompositionTree, path: NodePath = ROOT_PATH
) -> Iterator[tuple[NodePath, int]]:
    """Yield ``(path, index)`` for every leaf, left to right."""
    if isinstance(tree, Leaf):
        yield path, tree.index
        return
    yield from iter_leaves(tree.left, child_path(path, "left"))
    yield from iter_leaves(tree.right, child_path(path, "right"))
