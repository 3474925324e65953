"""Trie-based lexicon for prefix pruning and word lookup."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from wordhunt.constants import DEFAULT_DICTIONARY_PATH


class DictionaryUnavailable(FileNotFoundError):
    """The word list could not be read, so no search is possible."""


class LexiconNode:
    __slots__ = ("children", "is_word")

    def __init__(self) -> None:
        self.children: dict[str, LexiconNode] = {}
        self.is_word: bool = False


def _normalize(line: str) -> str | None:
    """Upper-case a word-list line, or return None if it isn't a plain A-Z word."""
    word = line.strip().upper()
    if not word or not word.isascii() or not word.isalpha():
        return None
    return word


class Lexicon:
    """Prefix tree over the dictionary.

    Built once, then only read: the search engine walks ``root`` directly and
    the same instance can be shared between concurrent searches.
    """

    def __init__(self) -> None:
        self.root = LexiconNode()
        self._word_count = 0

    @classmethod
    def build(cls, words: Iterable[str]) -> Lexicon:
        """Insert every usable word. Empty and non-alphabetic entries are skipped."""
        lexicon = cls()
        for line in words:
            word = _normalize(line)
            if word is not None:
                lexicon._insert(word)
        return lexicon

    def _insert(self, word: str) -> None:
        node = self.root
        for ch in word:
            if ch not in node.children:
                node.children[ch] = LexiconNode()
            node = node.children[ch]
        if not node.is_word:
            node.is_word = True
            self._word_count += 1

    def node_for(self, prefix: str) -> LexiconNode | None:
        """Return the node reached by spelling *prefix*, or None."""
        node = self.root
        for ch in prefix.upper():
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def has_prefix(self, prefix: str) -> bool:
        return self.node_for(prefix) is not None

    def is_word(self, word: str) -> bool:
        node = self.node_for(word)
        return node is not None and node.is_word

    @property
    def word_count(self) -> int:
        return self._word_count

    def __len__(self) -> int:
        return self._word_count

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.is_word(word)


def load_lexicon(path: str | Path) -> Lexicon:
    """Load a newline-delimited word list.

    Raises DictionaryUnavailable if the file is missing or can't be read.
    """
    path = Path(path)
    try:
        with path.open(encoding="utf-8", errors="replace") as f:
            return Lexicon.build(f)
    except OSError as e:
        raise DictionaryUnavailable(f"Dictionary not available at {path}: {e.strerror or e}") from e


def load_default_lexicon() -> Lexicon:
    """Load the word list from the data/ directory."""
    if not DEFAULT_DICTIONARY_PATH.is_file():
        raise DictionaryUnavailable(
            f"Dictionary not found at {DEFAULT_DICTIONARY_PATH}. "
            "Place a word list (one word per line) at data/dictionary.txt "
            "or pass --dict"
        )
    return load_lexicon(DEFAULT_DICTIONARY_PATH)
