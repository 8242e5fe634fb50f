from pathlib import Path
from string import ascii_lowercase

import yaml

from .errors import MalformedWord

WORD_LENGTH = 5
ALPHABET = frozenset(ascii_lowercase)

DATA_DIR = Path(__file__).resolve().parent / "data"
DEFAULT_WORDLIST = DATA_DIR / "wordlist.yaml"


def is_word(word):
    return (isinstance(word, str) and len(word) == WORD_LENGTH
            and all(c in ALPHABET for c in word))


def check_word(word):
    """Return `word` unchanged, or raise MalformedWord."""
    if not is_word(word):
        raise MalformedWord(word)
    return word


class Dictionary:
    """
        Ordered, duplicate-free collection of five-letter words.

        The order is part of the contract: guess selection breaks ties by it,
        so the same list always produces the same games. Membership and
        index lookups go through a dict and are O(1).
    """
    def __init__(self, words):
        self._words = tuple(check_word(w) for w in words)
        self._index = {}
        for i, word in enumerate(self._words):
            if word in self._index:
                raise ValueError(f"duplicate word in dictionary: {word!r}")
            self._index[word] = i

    def __len__(self):
        return len(self._words)

    def __iter__(self):
        return iter(self._words)

    def __getitem__(self, i):
        return self._words[i]

    def __contains__(self, word):
        return word in self._index

    def __eq__(self, other):
        if not isinstance(other, Dictionary):
            return NotImplemented
        return self._words == other._words

    def __hash__(self):
        return hash(self._words)

    def __repr__(self):
        return f"Dictionary({len(self._words)} words)"

    @property
    def words(self):
        return self._words

    def index(self, word):
        """Position of `word`; KeyError if it is not in the dictionary."""
        return self._index[word]

    def indices(self, words):
        return [self._index[w] for w in words]


def _read_entries(path):
    path = Path(path)
    if path.suffix in ('.yaml', '.yml'):
        with open(path) as f:
            entries = yaml.safe_load(f) or []
        if not isinstance(entries, list):
            raise ValueError(f"{path}: expected a YAML list of words")
        return entries
    with open(path) as f:
        return f.read().splitlines()


def load_words(path=DEFAULT_WORDLIST):
    """
        Load a word list from a YAML list or a text file with one word per line.

        Entries are stripped and lowercased; anything that is not five letters
        is dropped and repeated words keep their first position.
    """
    seen = set()
    words = []
    for entry in _read_entries(path):
        word = str(entry).strip().lower()
        if not is_word(word) or word in seen:
            continue
        seen.add(word)
        words.append(word)
    return Dictionary(words)


def default_dictionary():
    return load_words(DEFAULT_WORDLIST)
