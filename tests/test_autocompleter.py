# tests/test_autocompleter.py
# AutoCompleter facade: loading, query normalisation, limits, stats

import pytest

from avl_autocompleter.autocompleter import AutoCompleter
from avl_autocompleter.core.avl_tree import AVLTree
from avl_autocompleter.utils.config_manager import Config
from avl_autocompleter.utils.wordlist_loader import WordListNotFoundError, WordListReadError


@pytest.fixture
def wordfile(tmp_path):
    p = tmp_path / "words.txt"
    p.write_text("apple\napplication\napply\nbanana\nhello\nhelp\nkitten\n", encoding="utf-8")
    return p


@pytest.fixture
def cfg(tmp_path):
    return Config(str(tmp_path / "config.json"))


def test_load_and_query(wordfile):
    ac = AutoCompleter()
    assert ac.load(wordfile) == 7
    assert ac.suggest("app") == ["apple", "application", "apply"]
    assert ac.spelling("helo") == ["hello", "help"]
    assert ac.lookup("banana")
    assert not ac.lookup("ban")


def test_reload_adds_nothing(wordfile):
    ac = AutoCompleter()
    ac.load(wordfile)
    assert ac.load(wordfile) == 0
    assert len(ac.words()) == 7


def test_queries_are_lowercased(wordfile):
    ac = AutoCompleter()
    ac.load(wordfile)
    assert ac.suggest("  APP ") == ["apple", "application", "apply"]
    assert ac.spelling("Kiten") == ["kitten"]


def test_lowercasing_can_be_turned_off(wordfile, cfg):
    cfg.set("lowercase_queries", "false")
    ac = AutoCompleter(cfg)
    ac.load(wordfile)
    assert ac.suggest("APP") == []


def test_max_suggestions(wordfile, cfg):
    cfg.set("max_suggestions", "2")
    ac = AutoCompleter(cfg)
    ac.load(wordfile)
    assert ac.suggest("app") == ["apple", "application"]


def test_distance_bounds_from_config(wordfile, cfg):
    cfg.set("max_distance", "2")
    ac = AutoCompleter(cfg)
    ac.load(wordfile)
    # apple (1), apply (2)
    assert ac.spelling("aple") == ["apple", "apply"]
    cfg.set("min_distance", "0")
    assert "apple" in ac.spelling("apple")


def test_missing_list_propagates_and_keeps_tree(wordfile, tmp_path):
    ac = AutoCompleter()
    ac.load(wordfile)
    with pytest.raises(WordListNotFoundError):
        ac.load(tmp_path / "missing.txt")
    assert len(ac.words()) == 7


def test_read_fault_keeps_words_read_so_far(tmp_path):
    # big enough that decoding runs in more than one chunk
    good = "".join(f"w{i:05d}\n" for i in range(20000))
    p = tmp_path / "partial.txt"
    p.write_bytes(good.encode("utf-8") + b"\xff\xfe\n")
    ac = AutoCompleter()
    with pytest.raises(WordListReadError):
        ac.load(p)
    words = ac.words()
    assert words
    assert words == sorted(words)
    ac.tree.check_invariants()


def test_shared_tree_and_stats():
    tree = AVLTree(["30", "20", "10"])
    ac = AutoCompleter(tree=tree)
    ac.suggest("1")
    ac.spelling("11")
    s = ac.stats()
    assert s["words"] == 3
    assert s["height"] == 2
    assert s["rotations_right"] == 1
    assert s["rotations_left"] == 0
    assert s["queries"] == 2


def test_add_words():
    ac = AutoCompleter()
    assert ac.add_words(["b", "a", "b"]) == 2
    assert ac.words() == ["a", "b"]


def test_limit_overrides_config(tmp_path):
    cfg = Config(str(tmp_path / "cfg.json"))
    ac = AutoCompleter(cfg, limit=1)
    ac.add_words(["apple", "application", "apply"])
    assert ac.suggest("app") == ["apple"]
    assert cfg["max_suggestions"] == 0
    assert AutoCompleter(cfg, tree=ac.tree).suggest("app") == ["apple", "application", "apply"]
