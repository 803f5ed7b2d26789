from __future__ import annotations

import re
from functools import lru_cache
from pathlib import Path
from typing import Optional, Sequence, Tuple

import yaml

WORD_LIST_LENGTH = 180
"""Enough words for two minutes of typing at a generous speed."""

_SWAP_STEP = 73
_SEED_STEP = 97
_WORD_RE = re.compile(r"^[a-z]+$")
_CORPUS_PATH = Path(__file__).resolve().parent.parent / "data" / "words.yaml"


def load_corpus(path: Optional[Path] = None) -> Tuple[str, ...]:
    corpus_path = Path(path) if path is not None else _CORPUS_PATH
    if not corpus_path.exists():
        raise FileNotFoundError(f"Word corpus not found: {corpus_path}")

    raw = yaml.safe_load(corpus_path.read_text(encoding="utf-8"))
    if not raw or not isinstance(raw, dict):
        raise ValueError(f"{corpus_path.name}: expected YAML with a 'words' list")
    words = raw.get("words")
    if not isinstance(words, list):
        raise ValueError(f"{corpus_path.name}: missing or invalid 'words'")
    if not words:
        raise ValueError(f"{corpus_path.name}: 'words' is empty")
    for word in words:
        if not isinstance(word, str) or not _WORD_RE.match(word):
            raise ValueError(f"{corpus_path.name}: {word!r} is not a lowercase word")
    return tuple(words)


@lru_cache(maxsize=1)
def base_words() -> Tuple[str, ...]:
    """The packaged corpus, loaded once."""
    return load_corpus()


def generate(
    seed: int,
    corpus: Optional[Sequence[str]] = None,
    length: int = WORD_LIST_LENGTH,
) -> Tuple[str, ...]:
    """Build the word list for ``seed``.

    Each position i of the corpus is swapped with ``(i * 73 + seed * 97) % N``.
    This is a cheap cosmetic shuffle so that every restart looks different; it
    is not a uniform permutation and must not be used where fairness matters.
    The result is cut to ``length`` words, cycling through the permuted corpus
    when it is shorter than that.
    """
    words = list(base_words() if corpus is None else corpus)
    n = len(words)
    if n == 0 or length <= 0:
        return ()
    for i in range(n):
        j = (i * _SWAP_STEP + seed * _SEED_STEP) % n
        words[i], words[j] = words[j], words[i]
    return tuple(words[k % n] for k in range(length))
