"""
JSON converter for decomposition trees
"""

from typing import Any, Dict

from fibtree.tree import (
    DecompositionTree,
    Leaf,
    NodePath,
    ROOT_PATH,
    child_path,
    tree_depth,
    tree_size,
)


def _node_to_dict(tree: DecompositionTree, path: NodePath) -> Dict[str, Any]:
    if isinstance(tree, Leaf):
        return {"type": "leaf", "path": path, "index": tree.index}
    return {
        "type": "pair",
        "path": path,
        "left": _node_to_dict(tree.left, child_path(path, "left")),
        "right": _node_to_dict(tree.right, child_path(path, "right")),
    }


def to_json(tree: DecompositionTree) -> dict:
    """Convert a decomposition tree to JSON format

    Args:
        tree: The tree to convert

    Returns:
        Dictionary representation suitable for JSON serialization
    """
    return {
        "size": tree_size(tree),
        "depth": tree_depth(tree),
        "root": _node_to_dict(tree, ROOT_PATH),
    }
