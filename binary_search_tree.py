import sys
from collections import deque
from functools import total_ordering
from itertools import groupby

# Default for subtree arguments; an explicit None is an empty subtree
_ROOT = object()


@total_ordering
class Node(object):
    def __init__(self, value):
        self.value = value
        self.left = None
        self.right = None

    def __eq__(self, other):
        if not isinstance(other, Node):
            return NotImplemented
        return self.value == other.value

    def __lt__(self, other):
        if not isinstance(other, Node):
            return NotImplemented
        return self.value < other.value

    # Nodes compare by value, and delete rewrites a node's value in place
    __hash__ = None

    def __repr__(self):
        return f"Node({self.value!r})"

    def is_leaf(self):
        return self.left is None and self.right is None


class Tree(object):
    """Binary search tree over distinct, orderable values.

    The tree is height-balanced right after construction and after
    ``rebalance``. Inserts and deletes keep the search ordering but do
    not rotate, so the height can drift until the next ``rebalance``."""

    def __init__(self, values=()):
        self.root = None
        self.build(values)

    def __len__(self):
        size = 0

        def count(node):
            nonlocal size
            size += 1

        self.inorder(visit=count)
        return size

    def __iter__(self):
        return iter(self.inorder())

    def __contains__(self, value):
        return self.find(value) is not None

    def build(self, values):
        """Replace the contents of the tree with ``values``, sorted and
        without duplicates, and return the new root."""
        ordered = [value for value, _ in groupby(sorted(values))]
        self.root = self._construct_balanced_tree(ordered, 0, len(ordered) - 1)
        return self.root

    def pretty_print(self, node=_ROOT, prefix='', is_left=True, file=None):
        """Print the tree rotated sideways: right subtree above, left below."""
        if node is _ROOT:
            node = self.root
        if node is None:
            return
        if file is None:
            file = sys.stdout

        if node.right is not None:
            self.pretty_print(node.right, prefix + ('│   ' if is_left else '    '), False, file)
        print(prefix + ('└── ' if is_left else '┌── ') + str(node.value), file=file)
        if node.left is not None:
            self.pretty_print(node.left, prefix + ('    ' if is_left else '│   '), True, file)

    def insert(self, value):
        self.insert_node(Node(value))

    def insert_node(self, node):
        self.root = self._insert(self.root, node)

    def _insert(self, root, node):
        if root is None:
            return node

        # Equal values fall through both branches and leave the tree as is
        if node < root:
            root.left = self._insert(root.left, node)
        elif node > root:
            root.right = self._insert(root.right, node)

        return root

    def delete(self, value):
        self.delete_node(Node(value))

    def delete_node(self, node):
        self.root = self._delete(self.root, node)

    def _delete(self, root, node):
        if root is None:
            return root

        if node < root:
            root.left = self._delete(root.left, node)
            return root
        if node > root:
            root.right = self._delete(root.right, node)
            return root

        if root.left is None:
            return root.right
        if root.right is None:
            return root.left

        # Two children: pull the in-order successor's value up into root
        parent = root
        succ = root.right
        while succ.left is not None:
            parent = succ
            succ = succ.left

        if parent is not root:
            parent.left = succ.right
        else:
            parent.right = succ.right

        root.value = succ.value
        return root

    def find(self, value):
        return self.find_node(Node(value))

    def find_node(self, node):
        return self._find(self.root, node)

    def _find(self, root, node):
        if root is None or node == root:
            return root
        if node < root:
            return self._find(root.left, node)
        return self._find(root.right, node)

    def level_order(self, visit=None):
        """Breadth-first walk from the root.

        Returns the visited values, or calls ``visit`` with each node
        and returns ``None`` when a visitor is given."""
        values = []
        collect = visit is None
        if collect:
            visit = lambda node: values.append(node.value)

        if self.root is not None:
            queue = deque([self.root])
            while queue:
                node = queue.popleft()
                visit(node)

                if node.left:
                    queue.append(node.left)
                if node.right:
                    queue.append(node.right)

        return values if collect else None

    def inorder(self, node=_ROOT, visit=None):
        return self._traverse(self._walk_inorder, node, visit)

    def preorder(self, node=_ROOT, visit=None):
        """Visit ``node`` first, then the left and right subtrees, each of
        which is listed in ascending (in-order) order."""
        return self._traverse(self._walk_preorder, node, visit)

    def posorder(self, node=_ROOT, visit=None):
        """Visit the left and right subtrees, each listed in ascending
        (in-order) order, then ``node`` last."""
        return self._traverse(self._walk_posorder, node, visit)

    def _traverse(self, walk, node, visit):
        if node is _ROOT:
            node = self.root
        if visit is not None:
            walk(node, visit)
            return None

        values = []
        walk(node, lambda n: values.append(n.value))
        return values

    def _walk_inorder(self, node, visit):
        if node is None:
            return
        self._walk_inorder(node.left, visit)
        visit(node)
        self._walk_inorder(node.right, visit)

    def _walk_preorder(self, node, visit):
        if node is None:
            return
        visit(node)
        self._walk_inorder(node.left, visit)
        self._walk_inorder(node.right, visit)

    def _walk_posorder(self, node, visit):
        if node is None:
            return
        self._walk_inorder(node.left, visit)
        self._walk_inorder(node.right, visit)
        visit(node)

    def height(self, node=_ROOT):
        if node is _ROOT:
            node = self.root
        return self._height(node)

    def _height(self, node):
        if node is None:
            return -1
        return 1 + max(self._height(node.left), self._height(node.right))

    def depth(self, value):
        """Number of edges from the root to ``value``.

        Raises ``IndexError`` if ``value`` is not in the tree."""
        return self._depth(self.root, Node(value))

    def _depth(self, root, node):
        if root is None:
            raise IndexError(f"{node.value!r} is not in the tree")
        if node == root:
            return 0
        if node < root:
            return 1 + self._depth(root.left, node)
        return 1 + self._depth(root.right, node)

    def is_balanced(self, node=_ROOT):
        if node is _ROOT:
            node = self.root
        return self._is_balanced(node)

    def _is_balanced(self, node):
        if node is None:
            return True

        left = self._height(node.left)
        right = self._height(node.right)
        return abs(left - right) <= 1 and self._is_balanced(node.left) and self._is_balanced(node.right)

    def rebalance(self):
        return self.build(self.inorder())

    def _construct_balanced_tree(self, values, start, last):
        if start > last:
            return None

        mid = (start + last) // 2
        root = Node(values[mid])
        root.left = self._construct_balanced_tree(values, start, mid - 1)
        root.right = self._construct_balanced_tree(values, mid + 1, last)
        return root
