"""
avl_autocompleter.core

The data structure behind the autocompleter.
Contains:
 - the AVL tree over words (AVLTree, AVLNode)
 - the Levenshtein distance used for spelling suggestions
"""

from .avl_tree import AVLNode, AVLTree, balance_factor, height
from .edit_distance import levenshtein

__all__ = [
    "AVLNode",
    "AVLTree",
    "balance_factor",
    "height",
    "levenshtein",
]
