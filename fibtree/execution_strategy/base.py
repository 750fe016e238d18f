"""Execution strategy interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable
import logging
import time

from fibtree.calculator import compute, digit_count
from fibtree.error_msg import ConfigurationError, EvaluationFailure
from fibtree.execution_strategy.results import ExecutionResult
from fibtree.tree import (
    DecompositionTree,
    Leaf,
    NodePath,
    ROOT_PATH,
    child_path,
    fork_count,
    tree_depth,
    tree_size,
)

logger = logging.getLogger("fibtree.execution")

LeafCalculator = Callable[[int], int]


class ExecutionStrategy(ABC):
    """Strategy contract for evaluating a decomposition tree."""

    name: str = "abstract"

    def __init__(
        self,
        sequential_threshold: int = 1,
        calculator: LeafCalculator = compute,
    ):
        if isinstance(sequential_threshold, bool) or not isinstance(sequential_threshold, int):
            raise ConfigurationError("sequential_threshold must be an integer")
        if sequential_threshold < 1:
            raise ConfigurationError(
                f"sequential_threshold must be >= 1, got {sequential_threshold}"
            )
        self.sequential_threshold = sequential_threshold
        self.calculator = calculator

    @abstractmethod
    def evaluate(self, tree: DecompositionTree) -> int:
        """Evaluate the tree and return fib of its root index."""

    def run(self, tree: DecompositionTree) -> ExecutionResult:
        """Evaluate the tree and collect timing and shape diagnostics."""
        size = tree_size(tree)
        logger.debug("Evaluating tree of size %d with %s strategy", size, self.name)

        start = time.perf_counter()
        value = self.evaluate(tree)
        duration = time.perf_counter() - start

        return ExecutionResult(
            value=value,
            digits=digit_count(value),
            tree_size=size,
            tree_depth=tree_depth(tree),
            forked_units=self.forked_units(tree),
            strategy_name=self.name,
            execution_time=duration,
        )

    def forked_units(self, tree: DecompositionTree) -> int:
        """Concurrent units this strategy launches for the tree."""
        if self.sequential_threshold == 1:
            return fork_count(tree)
        if self._should_fold(tree):
            return 0
        return 2 + self.forked_units(tree.left) + self.forked_units(tree.right)

    def _should_fold(self, tree: DecompositionTree) -> bool:
        if isinstance(tree, Leaf):
            return True
        return self.sequential_threshold > 1 and tree_size(tree) <= self.sequential_threshold

    def _evaluate_index(self, index: int, path: NodePath) -> int:
        try:
            return self.calculator(index)
        except Exception as exc:  # noqa: BLE001
            raise EvaluationFailure(
                f"Evaluation of fib({index}) failed: {exc}",
                path,
                [(f"fib({index})", path)],
            ) from exc

    def _evaluate_sequential(self, tree: DecompositionTree, path: NodePath = ROOT_PATH) -> int:
        """Evaluate a subtree in the current thread, without forking."""
        if isinstance(tree, Leaf):
            return self._evaluate_index(tree.index, path)
        return self._evaluate_sequential(
            tree.left, child_path(path, "left")
        ) + self._evaluate_sequential(tree.right, child_path(path, "right"))
