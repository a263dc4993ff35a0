"""Word corpus used by the memorable password generator.

The default corpus is the EFF long word list distributed with ``xkcdpass``.
It is read on first use only, filtered to words of at least
:data:`~passforge.utils.constants.MIN_WORD_LENGTH` characters and frozen into
a :class:`WordCorpus`.  The resulting object is shared read-only by every
generation call for the rest of the process, so only the loading step is
guarded by a lock.

Word list files may hold one word per line or diceware style lines such as
``11111<TAB>abacus``; the last whitespace separated token of each non-blank
line is taken.  File order is preserved and duplicate words keep their first
position.
"""

from __future__ import annotations

import os
import threading
from collections.abc import Iterable, Iterator, Sequence
from pathlib import Path
from typing import overload

from xkcdpass import xkcd_password

from passforge.utils.constants import MIN_WORD_LENGTH
from passforge.utils.errors import CorpusLoadError
from passforge.utils.logging import get_logger

log = get_logger(__name__)

DEFAULT_WORDFILE = "eff-long"


class WordCorpus(Sequence[str]):
    """Immutable ordered collection of distinct candidate words."""

    __slots__ = ("_words", "source")

    def __init__(self, words: Iterable[str], *, source: str = "<memory>") -> None:
        kept = (w for w in words if len(w) >= MIN_WORD_LENGTH)
        self._words: tuple[str, ...] = tuple(dict.fromkeys(kept))
        self.source = source

    @overload
    def __getitem__(self, index: int) -> str: ...

    @overload
    def __getitem__(self, index: slice) -> Sequence[str]: ...

    def __getitem__(self, index: int | slice) -> str | Sequence[str]:
        return self._words[index]

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __repr__(self) -> str:
        return f"WordCorpus({len(self._words)} words from {self.source})"


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------


def default_wordfile() -> Path:
    """Return the path of the EFF long word list bundled with ``xkcdpass``."""

    return Path(xkcd_password.locate_wordfile(DEFAULT_WORDFILE))


def _read_words(path: Path) -> Iterator[str]:
    with path.open("r", encoding="utf-8") as fh:
        for line in fh:
            tokens = line.split()
            if tokens:
                yield tokens[-1]


def load_corpus(path: str | os.PathLike[str] | None = None) -> WordCorpus:
    """Read a word list from ``path`` (default: EFF long list) into a corpus.

    Unlike :func:`get_corpus` this always reads the file.
    """

    wordfile = Path(path) if path is not None else default_wordfile()
    try:
        corpus = WordCorpus(_read_words(wordfile), source=str(wordfile))
    except UnicodeDecodeError as exc:
        raise CorpusLoadError(f"word list {wordfile} is not valid UTF-8: {exc.reason}") from exc
    log.debug("loaded %d words from %s", len(corpus), wordfile)
    return corpus


_LOCK = threading.Lock()
_CORPORA: dict[str | None, WordCorpus] = {}


def get_corpus(path: str | os.PathLike[str] | None = None) -> WordCorpus:
    """Return the process wide corpus for ``path``, loading it on first use."""

    key = os.fspath(path) if path is not None else None
    corpus = _CORPORA.get(key)
    if corpus is not None:
        return corpus
    with _LOCK:
        corpus = _CORPORA.get(key)
        if corpus is None:
            corpus = load_corpus(path)
            _CORPORA[key] = corpus
    return corpus


__all__ = [
    "DEFAULT_WORDFILE",
    "WordCorpus",
    "default_wordfile",
    "get_corpus",
    "load_corpus",
]
