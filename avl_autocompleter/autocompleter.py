# autocompleter.py
"""
AutoCompleter - application facade.

Purpose:
 - Own the AVLTree holding the word list
 - Load word lists from disk (errors from the loader propagate untouched)
 - Simple public API for CLI/TUI/tests:
     load(path), add_words(words), suggest(prefix), spelling(word),
     lookup(word), words(), stats()
 - Apply the query settings from Config (lowercasing, result cap, distance bounds)
"""

from __future__ import annotations
import logging
import time
from typing import Any, Dict, Iterable, List, Optional

from avl_autocompleter.core.avl_tree import AVLTree
from avl_autocompleter.utils.config_manager import DEFAULTS, Config
from avl_autocompleter.utils.wordlist_loader import PathLike, iter_words

logger = logging.getLogger(__name__)


class AutoCompleter:
    """Application facade exposing a small API over one AVLTree."""

    def __init__(self, config: Optional[Config] = None, tree: Optional[AVLTree] = None,
                 limit: Optional[int] = None):
        self.config = config
        # overrides max_suggestions for this instance only
        self.limit = limit
        self.tree = tree if tree is not None else AVLTree()
        self._queries = 0
        self._started_at = time.time()

    def _setting(self, key: str) -> Any:
        if key == "max_suggestions" and self.limit is not None:
            return self.limit
        if self.config is None:
            return DEFAULTS[key]
        return self.config.get(key, DEFAULTS[key])

    # Loading ------------------------------------------------------------
    def load(self, path: PathLike) -> int:
        """
        Insert every word from the list at `path`. Returns how many were new.
        If reading fails part way, the words read so far stay in the tree.
        """
        before = len(self.tree)
        try:
            for word in iter_words(path):
                self.tree.insert(word)
        finally:
            added = len(self.tree) - before
            logger.info("loaded %d new words from %s (total %d)", added, path, len(self.tree))
        return added

    def add_words(self, words: Iterable[str]) -> int:
        return self.tree.insert_many(words)

    # Queries ------------------------------------------------------------
    def _normalize(self, text: str) -> str:
        text = text.strip()
        if self._setting("lowercase_queries"):
            text = text.lower()
        return text

    def suggest(self, prefix: str) -> List[str]:
        """Words starting with `prefix`, ascending."""
        self._queries += 1
        q = self._normalize(prefix)
        return self.tree.search_prefix(q, limit=self._setting("max_suggestions"))

    def spelling(self, word: str) -> List[str]:
        """Near-miss words for a (possibly misspelled) `word`, ascending."""
        self._queries += 1
        q = self._normalize(word)
        return self.tree.search_edit_distance(
            q,
            min_distance=self._setting("min_distance"),
            max_distance=self._setting("max_distance"),
            limit=self._setting("max_suggestions"),
        )

    def lookup(self, word: str) -> bool:
        return self._normalize(word) in self.tree

    def words(self) -> List[str]:
        return list(self.tree.traverse_in_order())

    # Stats --------------------------------------------------------------
    def stats(self) -> Dict[str, Any]:
        return {
            "words": len(self.tree),
            "height": self.tree.height,
            "rotations_left": self.tree.rotations["left"],
            "rotations_right": self.tree.rotations["right"],
            "queries": self._queries,
            "uptime_s": round(time.time() - self._started_at, 1),
        }
