# avl_tree.py
# Self-balancing binary search tree (AVL) over string keys.
# Stores the word list and answers the two queries the autocompleter needs:
#  - prefix completion (every word starting with the typed prefix)
#  - spelling suggestions (every word within a small edit distance)
# Both queries walk the whole tree: neither a prefix match nor an edit
# distance follows the lexicographic order the tree is sorted by.

from __future__ import annotations
import logging
from typing import Dict, Iterable, Iterator, List, Optional

from .edit_distance import levenshtein

logger = logging.getLogger(__name__)


class AVLNode:
    """
    A single node in the AVL tree.
    key: the stored word
    height: height of the subtree rooted here (leaf = 1)
    left/right: child subtrees, None when empty
    """

    __slots__ = ("key", "height", "left", "right")

    def __init__(self, key: str) -> None:
        self.key = key
        self.height = 1
        self.left: Optional[AVLNode] = None
        self.right: Optional[AVLNode] = None

    def __repr__(self) -> str:
        return f"AVLNode({self.key!r}, h={self.height})"


def height(node: Optional[AVLNode]) -> int:
    """Stored height of a subtree, 0 for an empty one."""
    if node is None:
        return 0
    return node.height


def balance_factor(node: Optional[AVLNode]) -> int:
    """Left height minus right height, 0 for an empty subtree."""
    if node is None:
        return 0
    return height(node.left) - height(node.right)


def _update_height(node: AVLNode) -> None:
    node.height = 1 + max(height(node.left), height(node.right))


class AVLTree:
    """
    AVL tree keyed by string, duplicates rejected.
    Used by the AutoCompleter for:
     - bulk loading a word list
     - prefix-based suggestions
     - edit-distance spelling suggestions
     - exact lookups
    Queries only ever return keys, never nodes.
    """

    def __init__(self, keys: Optional[Iterable[str]] = None) -> None:
        self.root: Optional[AVLNode] = None
        self._size = 0
        self.rotations: Dict[str, int] = {"left": 0, "right": 0}
        if keys is not None:
            self.insert_many(keys)

    # rotations -----------------------------------------------------
    #
    #  right rotation at y:        left rotation at x:
    #
    #        y          x            x              y
    #       / \        / \          / \            / \
    #      x   C  ->  A   y        A   y    ->    x   C
    #     / \            / \          / \        / \
    #    A   T2        T2   C        T2  C      A   T2
    #
    def _rotate_right(self, y: AVLNode) -> AVLNode:
        x = y.left
        t2 = x.right

        x.right = y
        y.left = t2

        # child first, it is now below x
        _update_height(y)
        _update_height(x)
        self.rotations["right"] += 1
        return x

    def _rotate_left(self, x: AVLNode) -> AVLNode:
        y = x.right
        t2 = y.left

        y.left = x
        x.right = t2

        _update_height(x)
        _update_height(y)
        self.rotations["left"] += 1
        return y

    # insertion -----------------------------------------------------
    def insert(self, key: str) -> None:
        """
        Insert a word, rebalancing on the way back up.
        Inserting a word that is already stored does nothing.
        """
        if not isinstance(key, str):
            raise TypeError(f"AVLTree keys must be str, got {type(key).__name__}")
        self.root = self._insert(self.root, key)

    def insert_many(self, keys: Iterable[str]) -> int:
        """Insert every key in order. Returns how many were new."""
        before = self._size
        for key in keys:
            self.insert(key)
        added = self._size - before
        logger.debug("insert_many: %d new keys, size now %d", added, self._size)
        return added

    def _insert(self, node: Optional[AVLNode], key: str) -> AVLNode:
        # 1. plain BST insertion
        if node is None:
            self._size += 1
            return AVLNode(key)

        if key < node.key:
            node.left = self._insert(node.left, key)
        elif key > node.key:
            node.right = self._insert(node.right, key)
        else:
            return node

        # 2. fix the height, 3. check the balance
        _update_height(node)
        bf = balance_factor(node)

        # 4. four imbalance cases, decided by where the new key went
        if bf > 1:
            if key < node.left.key:
                # left-left
                return self._rotate_right(node)
            # left-right
            node.left = self._rotate_left(node.left)
            return self._rotate_right(node)

        if bf < -1:
            if key > node.right.key:
                # right-right
                return self._rotate_left(node)
            # right-left
            node.right = self._rotate_right(node.right)
            return self._rotate_left(node)

        return node

    # traversal -----------------------------------------------------
    def traverse_in_order(self) -> Iterator[str]:
        """Lazily yield every key in ascending order. Each call starts over."""
        return self._in_order(self.root)

    def _in_order(self, node: Optional[AVLNode]) -> Iterator[str]:
        if node is None:
            return
        yield from self._in_order(node.left)
        yield node.key
        yield from self._in_order(node.right)

    def __iter__(self) -> Iterator[str]:
        return self.traverse_in_order()

    # search --------------------------------------------------------
    def search_prefix(self, prefix: str, limit: Optional[int] = None) -> List[str]:
        """
        Return every stored word that starts with `prefix`, ascending.
        The whole tree is scanned. An empty prefix matches every word.
        `limit` (if positive) stops the scan after that many matches.
        """
        out: List[str] = []
        cap = limit if limit and limit > 0 else None
        for key in self._in_order(self.root):
            if key.startswith(prefix):
                out.append(key)
                if cap is not None and len(out) >= cap:
                    break
        return out

    def search_edit_distance(
        self,
        query: str,
        min_distance: int = 1,
        max_distance: int = 1,
        limit: Optional[int] = None,
    ) -> List[str]:
        """
        Return every stored word whose Levenshtein distance to `query` lies
        in [min_distance, max_distance], ascending.
        With the defaults that is distance exactly 1: near misses only, the
        exact word itself (distance 0) is left out.
        """
        if min_distance < 0 or max_distance < min_distance:
            raise ValueError(
                f"bad distance bounds: min={min_distance}, max={max_distance}"
            )

        out: List[str] = []
        cap = limit if limit and limit > 0 else None
        for key in self._in_order(self.root):
            d = levenshtein(key, query, max_distance)
            if min_distance <= d <= max_distance:
                out.append(key)
                if cap is not None and len(out) >= cap:
                    break
        return out

    def find(self, key: str) -> Optional[str]:
        """Exact-match lookup by BST descent. Returns the stored key or None."""
        node = self.root
        while node is not None:
            if key < node.key:
                node = node.left
            elif key > node.key:
                node = node.right
            else:
                return node.key
        return None

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        return self.find(key) is not None

    # convenience/debugging -----------------------------------------
    def __len__(self) -> int:
        return self._size

    @property
    def height(self) -> int:
        return height(self.root)

    @property
    def root_key(self) -> Optional[str]:
        return None if self.root is None else self.root.key

    def clear(self) -> None:
        """Drop every node."""
        self.root = None
        self._size = 0
        self.rotations = {"left": 0, "right": 0}

    def check_invariants(self) -> None:
        """
        Walk the tree and raise AssertionError on the first node that breaks
        BST order, stored height or AVL balance.
        (O(N), for tests and profiling, not for the query path.)
        """
        count = self._check(self.root, None, None)
        if count != self._size:
            raise AssertionError(f"size counter {self._size} != {count} nodes")

    def _check(
        self, node: Optional[AVLNode], low: Optional[str], high: Optional[str]
    ) -> int:
        if node is None:
            return 0
        if low is not None and not node.key > low:
            raise AssertionError(f"{node!r} not greater than {low!r}")
        if high is not None and not node.key < high:
            raise AssertionError(f"{node!r} not less than {high!r}")
        n = self._check(node.left, low, node.key) + self._check(node.right, node.key, high)
        expected = 1 + max(height(node.left), height(node.right))
        if node.height != expected:
            raise AssertionError(f"{node!r} should have height {expected}")
        if abs(balance_factor(node)) > 1:
            raise AssertionError(f"{node!r} is out of balance")
        return n + 1
