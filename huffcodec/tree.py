"""
tree.py

Huffman tree construction.
"""


from typing import List, Optional

from .errors import EmptyInputError
from .heap import MinHeap
from .logger import Logger, TreeConstructionLog, TreeMergeProgressStep
from .models import InternalNode, LeafNode, SymbolFrequency, TreeNode


def build_tree(frequencies: List[SymbolFrequency], logger: Optional[Logger] = None) -> TreeNode:
    """
    Build a Huffman tree from symbol frequencies.

    The two lightest nodes are popped (first becomes the left child, second the right)
    and their parent is pushed back, until a single node is left.

    Args:
        frequencies (List[SymbolFrequency]): One entry per distinct symbol.
        logger (Optional[Logger]): Logger for merge progress and the final tree shape.

    Returns:
        TreeNode: The root. With a single symbol this is its leaf.

    Raises:
        EmptyInputError: If there are no frequencies.
    """
    if not frequencies:
        raise EmptyInputError(stage="tree")

    heap = MinHeap(LeafNode.from_frequency(frequency) for frequency in frequencies)
    merges = len(heap) - 1
    while len(heap) > 1:
        left = heap.pop_min()
        right = heap.pop_min()
        heap.push(InternalNode(left, right))
        if logger is not None:
            logger.log(TreeMergeProgressStep("Merging nodes", merges))

    root = heap.pop_min()
    if logger is not None:
        logger.log(TreeConstructionLog(len(frequencies), tree_depth(root)))
    return root


def tree_depth(root: TreeNode) -> int:
    """Number of edges on the longest root to leaf path."""
    depth = 0
    stack = [(root, 0)]
    while stack:
        node, level = stack.pop()
        if node.is_leaf:
            depth = max(depth, level)
        else:
            stack.append((node.left, level + 1))
            stack.append((node.right, level + 1))
    return depth


def count_leaves(root: TreeNode) -> int:
    if root.is_leaf:
        return 1
    return count_leaves(root.left) + count_leaves(root.right)
