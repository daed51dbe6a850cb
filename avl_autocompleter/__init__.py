"""
avl_autocompleter

Word-list autocompletion and spelling suggestions backed by an AVL tree.
"""

from .core import AVLTree, levenshtein
from .autocompleter import AutoCompleter

__all__ = ["AVLTree", "AutoCompleter", "levenshtein"]

__version__ = "0.1.0"
