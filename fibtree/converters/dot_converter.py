"""
DOT (Graphviz) converter for decomposition trees
"""

from fibtree.tree import DecompositionTree, Leaf, NodePath, ROOT_PATH, child_path


def to_dot(tree: DecompositionTree) -> str:
    """Convert a decomposition tree to DOT (Graphviz) format

    Leaves are labelled ``fib(n)`` and pairs ``+``; edges point from a pair
    to the two subtrees it adds.
    """
    dot_str = "digraph {\n"
    stack: list[tuple[DecompositionTree, NodePath]] = [(tree, ROOT_PATH)]
    while stack:
        node, path = stack.pop()
        if isinstance(node, Leaf):
            dot_str += f'  "{path}" [label="fib({node.index})"]\n'
            continue
        dot_str += f'  "{path}" [label="+"]\n'
        left_path = child_path(path, "left")
        right_path = child_path(path, "right")
        dot_str += f'  "{path}" -> "{left_path}";\n'
        dot_str += f'  "{path}" -> "{right_path}";\n'
        stack.append((node.right, right_path))
        stack.append((node.left, left_path))
    dot_str += "}\n"
    return dot_str
