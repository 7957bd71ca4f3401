
# https://github.com/aksh0001/algorithms-journal/blob/master/data_structures/trees/AVLTree.py
import logging
from enum import Enum

logger = logging.getLogger(__name__)


class Outcome(Enum):
    INSERTED = "inserted"
    ALREADY_PRESENT = "already_present"
    REMOVED = "removed"
    NOT_FOUND = "not_found"


class TreeNode:
    def __init__(self, key, value=None):
        self.key = key
        self.value = value
        self.height = 1
        self.balance = 0
        self.left = None
        self.right = None

    @property
    def left_height(self) -> int:
        if self.left:
            return self.left.height
        else:
            return 0

    @property
    def right_height(self) -> int:
        if self.right:
            return self.right.height
        else:
            return 0

    def after(self) -> 'TreeNode':
        """Leftmost node of the right subtree, the in-order successor."""
        node = self.right
        if node:
            while node.left:
                node = node.left
        return node

    def update(self):
        left, right = self.left_height, self.right_height
        self.height = 1 + max(left, right)
        self.balance = left - right


class AVLTree():
    """Ordered set of keys kept height balanced.

    Keys must be totally ordered, either directly or through
    ``comparison_key``. Inserting a key that is already present leaves
    the tree and its stored value untouched.
    """

    def __init__(self, comparison_key=None):
        self.root = None
        self.size = 0
        self.comparison_key = comparison_key

    def __len__(self):
        return self.size

    def __contains__(self, key):
        return self.search(key)

    def __iter__(self):
        return self.traverse()

    def height(self) -> int:
        if self.root:
            return self.root.height
        else:
            return 0

    def is_empty(self) -> bool:
        return self.root is None

    def clear(self):
        self.root = None
        self.size = 0

    def _compare(self, one, other) -> int:
        if self.comparison_key:
            one, other = self.comparison_key(one), self.comparison_key(other)
        if one < other:
            return -1
        if other < one:
            return 1
        return 0

    def insert(self, key, value=None) -> Outcome:
        self.root, outcome = self._insert(self.root, key, value)
        if outcome is Outcome.INSERTED:
            self.size += 1
        return outcome

    def _insert(self, node: TreeNode, key, value):
        if not node:
            return TreeNode(key, value), Outcome.INSERTED

        cmp = self._compare(key, node.key)
        if cmp < 0:
            node.left, outcome = self._insert(node.left, key, value)
        elif cmp > 0:
            node.right, outcome = self._insert(node.right, key, value)
        else:
            self.on_duplicate(node, value)
            return node, Outcome.ALREADY_PRESENT

        if outcome is Outcome.ALREADY_PRESENT:
            return node, outcome

        node.update()
        return self.rebalance(node), outcome

    def on_duplicate(self, node: TreeNode, value):
        pass

    def delete(self, key) -> Outcome:
        self.root, outcome = self._delete(self.root, key)
        if outcome is Outcome.REMOVED:
            self.size -= 1
        return outcome

    def _delete(self, node: TreeNode, key):
        if not node:
            return None, Outcome.NOT_FOUND

        cmp = self._compare(key, node.key)
        if cmp < 0:
            node.left, outcome = self._delete(node.left, key)
        elif cmp > 0:
            node.right, outcome = self._delete(node.right, key)
        elif not node.left or not node.right:
            return node.left or node.right, Outcome.REMOVED
        else:
            # the successor has no left child, so deleting it from the
            # right subtree ends in the splice case above
            successor = node.after()
            node.key, node.value = successor.key, successor.value
            node.right, outcome = self._delete(node.right, successor.key)

        if outcome is Outcome.NOT_FOUND:
            return node, outcome

        node.update()
        return self.rebalance(node), outcome

    def search(self, key) -> bool:
        return self._find(key) is not None

    def get(self, key, default=None):
        node = self._find(key)
        if node is None:
            return default
        return node.value

    def _find(self, key) -> TreeNode:
        node = self.root
        while node:
            cmp = self._compare(key, node.key)
            if cmp < 0:
                node = node.left
            elif cmp > 0:
                node = node.right
            else:
                return node
        return None

    def minimum(self):
        if not self.root:
            raise KeyError("minimum of empty tree")
        node = self.root
        while node.left:
            node = node.left
        return node.key

    def maximum(self):
        if not self.root:
            raise KeyError("maximum of empty tree")
        node = self.root
        while node.right:
            node = node.right
        return node.key

    def traverse(self):
        for node in self._walk(self.root):
            yield node.key

    def items(self):
        for node in self._walk(self.root):
            yield node.key, node.value

    def _walk(self, node: TreeNode):
        if node:
            yield from self._walk(node.left)
            yield node
            yield from self._walk(node.right)

    def rebalance(self, node: TreeNode) -> TreeNode:
        if node.balance > 1:
            if node.left.balance < 0:
                return self.rotate_left_right(node)
            else:
                return self.rotate_right(node)
        elif node.balance < -1:
            if node.right.balance > 0:
                return self.rotate_right_left(node)
            else:
                return self.rotate_left(node)
        else:
            return node

    def rotate_left(self, node: TreeNode) -> TreeNode:
        logger.debug("rotate left at %r", node.key)
        pivot = node.right
        tmp = pivot.left

        pivot.left = node
        node.right = tmp

        node.update()
        pivot.update()
        return pivot

    def rotate_right(self, node: TreeNode) -> TreeNode:
        logger.debug("rotate right at %r", node.key)
        pivot = node.left
        tmp = pivot.right

        pivot.right = node
        node.left = tmp

        node.update()
        pivot.update()
        return pivot

    def rotate_left_right(self, node: TreeNode) -> TreeNode:
        node.left = self.rotate_left(node.left)
        return self.rotate_right(node)

    def rotate_right_left(self, node: TreeNode) -> TreeNode:
        node.right = self.rotate_right(node.right)
        return self.rotate_left(node)


class AVLMap(AVLTree):
    """AVLTree whose insert overwrites the value of an existing key in place."""

    def on_duplicate(self, node: TreeNode, value):
        node.value = value

    def __getitem__(self, key):
        node = self._find(key)
        if node is None:
            raise KeyError(key)
        return node.value

    def __setitem__(self, key, value):
        self.insert(key, value)

    def __delitem__(self, key):
        if self.delete(key) is Outcome.NOT_FOUND:
            raise KeyError(key)
