"""
Recursive traversals written as producers. Each subtree is handed over as a
nested sequence, so a walk costs O(1) per value and no native stack depth,
however deep the tree.
"""

import sympy as sy

from recseq.sequence import recursive


class Node:
    def __init__(self, value, left=None, right=None):
        self.value = value
        self.left = left
        self.right = right

    def __repr__(self):
        return 'Node({!r}, {!r}, {!r})'.format(self.value, self.left, self.right)


@recursive
def postorder(node):
    """values of a binary tree, children before their parent, left before right"""
    if node is None:
        return
    yield postorder(node.left)
    yield postorder(node.right)
    yield node.value


@recursive
def preorder(node):
    if node is None:
        return
    yield node.value
    yield preorder(node.left)
    yield preorder(node.right)


@recursive
def inorder(node):
    if node is None:
        return
    yield inorder(node.left)
    yield node.value
    yield inorder(node.right)


@recursive
def flatten(items):
    """leaves of arbitrarily nested lists and tuples, depth-first"""
    for item in items:
        if isinstance(item, (list, tuple)):
            yield flatten(item)
        else:
            yield item


@recursive
def expression_postorder(expr):
    """subexpressions of a sympy expression, in the order of sy.postorder_traversal"""
    if isinstance(expr, sy.Basic):
        for arg in expr.args:
            yield expression_postorder(arg)
    elif isinstance(expr, (list, tuple, set)):
        for item in expr:
            yield expression_postorder(item)
    yield expr


def build_tree(values):
    """balanced binary search tree holding the sorted values"""
    values = sorted(values)
    if not values:
        return None
    middle = len(values) // 2
    return Node(values[middle],
                build_tree(values[:middle]),
                build_tree(values[middle + 1:]))
