# wordlist_loader.py - line-oriented word list reader
# One word per line, UTF-8. Surrounding whitespace is stripped and blank lines skipped.

from __future__ import annotations
import logging
from pathlib import Path
from typing import Iterator, List, Union

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class WordListError(Exception):
    """Base class for word list problems. Carries the offending path."""

    def __init__(self, path: PathLike, msg: str) -> None:
        super().__init__(msg)
        self.path = Path(path)


class WordListNotFoundError(WordListError):
    """The word list does not exist (or is not a regular file)."""


class WordListReadError(WordListError):
    """The word list exists but reading it failed part way."""


def iter_words(path: PathLike) -> Iterator[str]:
    """
    Yield the words in `path` one at a time.
    Errors surface on first iteration, not on call.
    """
    p = Path(path)
    try:
        f = open(p, "r", encoding="utf-8")
    except (FileNotFoundError, IsADirectoryError, NotADirectoryError) as e:
        raise WordListNotFoundError(p, f"word list not found: {p}") from e
    except OSError as e:
        raise WordListReadError(p, f"cannot open word list {p}: {e}") from e

    n = 0
    with f:
        try:
            for line in f:
                word = line.strip()
                if word:
                    n += 1
                    yield word
        except (OSError, UnicodeDecodeError) as e:
            raise WordListReadError(p, f"error reading {p} after {n} words: {e}") from e
    logger.debug("read %d words from %s", n, p)


def load_words(path: PathLike) -> List[str]:
    """Read the whole list into memory."""
    return list(iter_words(path))
