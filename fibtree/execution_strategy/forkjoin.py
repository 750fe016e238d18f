"""Scoped thread fork-join over a decomposition tree."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

from fibtree.execution_strategy.base import ExecutionStrategy, logger
from fibtree.logs import VERBOSE_LEVEL
from fibtree.tree import DecompositionTree, Leaf, NodePath, ROOT_PATH, child_path


class ForkJoinExecutionStrategy(ExecutionStrategy):
    """Fork both children of every pair onto fresh threads and join them.

    Each pair owns a two-worker executor for exactly the lifetime of its
    ``with`` block, so a parent never returns (or raises) before both of its
    children have finished.
    """

    name = "threads"

    def evaluate(self, tree: DecompositionTree) -> int:
        return self._evaluate_node(tree, ROOT_PATH)

    def _evaluate_node(self, tree: DecompositionTree, path: NodePath) -> int:
        if isinstance(tree, Leaf):
            return self._evaluate_index(tree.index, path)

        if self._should_fold(tree):
            logger.log(VERBOSE_LEVEL, "%s folded to sequential evaluation", path)
            return self._evaluate_sequential(tree, path)

        logger.log(VERBOSE_LEVEL, "%s forking", path)
        with ThreadPoolExecutor(max_workers=2, thread_name_prefix=f"fibtree-{path}") as pool:
            left = pool.submit(self._evaluate_node, tree.left, child_path(path, "left"))
            right = pool.submit(self._evaluate_node, tree.right, child_path(path, "right"))
            # A failure here leaves the with block, which still joins the sibling
            left_value = left.result()
            right_value = right.result()

        logger.log(VERBOSE_LEVEL, "%s joined", path)
        return left_value + right_value
