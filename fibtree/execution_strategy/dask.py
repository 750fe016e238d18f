"""Dask execution strategy over the same decomposition tree."""

from __future__ import annotations

from functools import partial
from operator import add
from typing import Any

import dask
from dask.delayed import Delayed, delayed

from fibtree.execution_strategy.base import ExecutionStrategy, logger
from fibtree.tree import DecompositionTree, Leaf, NodePath, ROOT_PATH, child_path


class DaskExecutionStrategy(ExecutionStrategy):
    """Compile the tree to a ``dask.delayed`` graph and run it on threads.

    Keys are derived from node paths and every task is impure, so two leaves
    with the same index stay two separate computations.
    """

    name = "dask"

    def __init__(self, *args: Any, num_workers: int | None = None, **kwargs: Any):
        super().__init__(*args, **kwargs)
        self.num_workers = num_workers

    def compile(self, tree: DecompositionTree, path: NodePath = ROOT_PATH) -> Delayed:
        if isinstance(tree, Leaf):
            return delayed(self._evaluate_index, pure=False)(
                tree.index, path, dask_key_name=f"fib-{path}"
            )

        if self._should_fold(tree):
            return delayed(partial(self._evaluate_sequential, tree), pure=False)(
                path, dask_key_name=f"fold-{path}"
            )

        return delayed(add, pure=False)(
            self.compile(tree.left, child_path(path, "left")),
            self.compile(tree.right, child_path(path, "right")),
            dask_key_name=f"add-{path}",
        )

    def evaluate(self, tree: DecompositionTree) -> int:
        graph = self.compile(tree)
        logger.debug("Compiled dask graph with %d tasks", len(graph.__dask_graph__()))

        options: dict[str, Any] = {"scheduler": "threads"}
        if self.num_workers is not None:
            options["num_workers"] = self.num_workers
        (value,) = dask.compute(graph, **options)
        return value
