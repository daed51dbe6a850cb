# edit_distance.py
# Levenshtein distance for spelling suggestions.
#
#   dist(i, 0) = i
#   dist(0, j) = j
#   dist(i, j) = dist(i-1, j-1)                       if s1[i-1] == s2[j-1]
#              = 1 + min(dist(i-1, j),                 delete
#                        dist(i, j-1),                 insert
#                        dist(i-1, j-1))               substitute
#
# Filled bottom-up one row of i at a time, so O(len(s1) * len(s2)) time
# instead of the exponential plain recursion, and no recursion depth limit.

from __future__ import annotations
from typing import List, Optional


def levenshtein(s1: str, s2: str, max_dist: Optional[int] = None) -> int:
    """
    Minimum number of single-character insertions, deletions or
    substitutions that turn `s1` into `s2`.

    With `max_dist` set, any distance above it is reported as `max_dist + 1`,
    and the table stops filling as soon as that is certain.
    """
    n, m = len(s1), len(s2)
    too_far = None if max_dist is None else max_dist + 1

    # every alignment needs at least |n - m| insertions or deletions
    if too_far is not None and abs(n - m) >= too_far:
        return too_far

    # dist(0, j) for every j
    above: List[int] = list(range(m + 1))

    for i in range(1, n + 1):
        row = [i]  # dist(i, 0)
        for j in range(1, m + 1):
            if s1[i - 1] == s2[j - 1]:
                row.append(above[j - 1])
            else:
                row.append(1 + min(above[j], row[j - 1], above[j - 1]))

        # every alignment crosses this row and its cost only grows after,
        # so a row entirely past the cutoff settles the answer
        if too_far is not None and min(row) >= too_far:
            return too_far
        above = row

    d = above[m]
    if too_far is not None and d >= too_far:
        return too_far
    return d
