# tools/profile_search.py
"""
Small profiling harness for the AVL tree searches.
Usage:
  python tools/profile_search.py --words data/words.txt --iters 500 --query helo

Without --words a synthetic word list is generated.
Prints mean/median/stdev/min/max latency (ms) for prefix and spelling search.
"""
import argparse
import random
import statistics
import string
import sys
import time
from typing import Dict, List

from avl_autocompleter.core.avl_tree import AVLTree
from avl_autocompleter.utils.wordlist_loader import WordListError, load_words


def synthetic_words(n: int, seed: int = 7) -> List[str]:
    """n random lowercase words of 3-10 letters (duplicates possible)."""
    rng = random.Random(seed)
    return [
        "".join(rng.choice(string.ascii_lowercase) for _ in range(rng.randint(3, 10)))
        for _ in range(n)
    ]


def summarize(times: List[float]) -> Dict[str, float]:
    return {
        "count": len(times),
        "mean_ms": statistics.mean(times),
        "median_ms": statistics.median(times),
        "stdev_ms": statistics.pstdev(times),
        "min_ms": min(times),
        "max_ms": max(times),
    }


def profile_queries(tree: AVLTree, query: str, iters: int = 100) -> Dict[str, Dict[str, float]]:
    """Time both searches `iters` times each. Returns {search name: summary}."""
    if iters < 1:
        raise ValueError("iters must be >= 1")
    out = {}
    for name, fn in (("prefix", tree.search_prefix), ("spelling", tree.search_edit_distance)):
        times = []
        for _ in range(iters):
            t0 = time.perf_counter()
            fn(query)
            times.append((time.perf_counter() - t0) * 1000.0)
        out[name] = summarize(times)
    return out


def main(argv=None) -> int:
    parser = argparse.ArgumentParser()
    parser.add_argument("--words", type=str, default=None, help="word list file (default: synthetic)")
    parser.add_argument("--size", type=int, default=20000, help="synthetic word count")
    parser.add_argument("--iters", type=int, default=200, help="measured iterations per search")
    parser.add_argument("--query", type=str, default="helo", help="query string")
    args = parser.parse_args(argv)

    if args.words:
        try:
            words = load_words(args.words)
        except WordListError as e:
            print("err:", e, file=sys.stderr)
            return 1
    else:
        words = synthetic_words(args.size)

    t0 = time.perf_counter()
    tree = AVLTree(words)
    build_ms = (time.perf_counter() - t0) * 1000.0
    tree.check_invariants()
    print(f"built tree: {len(tree)} words, height {tree.height}, "
          f"rotations L={tree.rotations['left']} R={tree.rotations['right']}, {build_ms:.1f} ms")

    for name, s in profile_queries(tree, args.query, args.iters).items():
        print("%-8s mean=%.3f median=%.3f stdev=%.3f min=%.3f max=%.3f" % (
            name, s["mean_ms"], s["median_ms"], s["stdev_ms"], s["min_ms"], s["max_ms"],
        ))

    print("sample prefix:", tree.search_prefix(args.query, limit=5))
    print("sample spelling:", tree.search_edit_distance(args.query, limit=5))
    return 0


if __name__ == "__main__":
    sys.exit(main())
