"""
patterns.py

Precomputed feedback codes for every (guess, answer) pair of a dictionary.

table[i, j] is feedback(words[i], words[j]). The table is built once,
never written to afterwards, and can be shared by any number of guessers.
Storing it next to its word list lets a later run reuse it as long as the
dictionary has not changed.
"""
from pathlib import Path

import numpy as np
from tqdm import tqdm

from .feedback import encode
from .words import Dictionary


class PatternTable:
    def __init__(self, dictionary, matrix):
        n = len(dictionary)
        if matrix.shape != (n, n):
            raise ValueError(f"pattern matrix shape {matrix.shape} does not match {n} words")
        self.dictionary = dictionary
        self.matrix = matrix
        self.matrix.setflags(write=False)

    @classmethod
    def build(cls, dictionary, progress=True):
        """Score every word against every word. Quadratic in the dictionary size."""
        words = dictionary.words
        matrix = np.zeros((len(words), len(words)), dtype=np.uint8)
        for i, guess in enumerate(tqdm(words, desc="Pattern table", disable=not progress)):
            # Dictionary already checked every word
            matrix[i] = [encode(guess, answer) for answer in words]
        return cls(dictionary, matrix)

    def save(self, path):
        with open(path, 'wb') as f:
            np.savez(f, words=np.array(self.dictionary.words), matrix=self.matrix)

    @classmethod
    def load(cls, path):
        with np.load(path) as data:
            words = [str(w) for w in data['words']]
            matrix = data['matrix']
        return cls(Dictionary(words), matrix)

    @classmethod
    def load_or_build(cls, dictionary, path, progress=True):
        """
            Reuse the table cached at `path` if it was built for exactly this
            dictionary (same words, same order); otherwise rebuild and overwrite it.
        """
        path = Path(path)
        if path.exists():
            table = cls.load(path)
            if table.dictionary == dictionary:
                return table
        table = cls.build(dictionary, progress=progress)
        path.parent.mkdir(parents=True, exist_ok=True)
        table.save(path)
        return table

    def __len__(self):
        return len(self.dictionary)

    def code(self, guess, answer):
        return int(self.matrix[self.dictionary.index(guess), self.dictionary.index(answer)])

    def rows(self, guesses, answers):
        """Sub-matrix of codes, one row per guess, one column per answer."""
        return self.matrix[np.ix_(self.dictionary.indices(guesses), self.dictionary.indices(answers))]
