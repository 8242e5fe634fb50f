"""
Entropy-based guess selection.

Every guess splits the remaining candidates into buckets by the feedback it
would get from each of them. The Shannon entropy of that split is the number
of bits the feedback is expected to reveal; the selector plays the guess with
the most bits. This is a one-step greedy policy, not a game-tree search.
"""
import math
from collections import Counter

import numpy as np

from .errors import EmptyCandidateSet
from .feedback import N_PATTERNS, feedback

SCAN_POLICIES = ("candidates", "dictionary")
TIE_BREAKS = ("first", "prefer_candidate")


def entropy_bits(counts):
    """Shannon entropy, in bits, of a histogram of bucket sizes."""
    total = sum(counts)
    if total == 0:
        return 0.0
    entropy = 0.0
    # summing in a fixed order makes equal histograms score exactly equal
    for count in sorted(counts):
        if count:
            p = count / total
            entropy -= p * math.log2(p)
    return entropy


class GuessSelector:
    """
        Chooses the next guess for a candidate set.

        scan_policy: "candidates" only considers words that can still be the
            answer (fast); "dictionary" considers every word in the dictionary
            (stronger, O(N x M) per round).
        tie_break: "first" keeps the first maximum in scan order;
            "prefer_candidate" prefers, among equal maxima, a guess that could
            still be the answer.

        A PatternTable, when given, replaces codec calls with lookups. It never
        changes which word is selected.
    """
    def __init__(self, dictionary, table=None, scan_policy="candidates", tie_break="first"):
        if scan_policy not in SCAN_POLICIES:
            raise ValueError(f"scan_policy must be one of {SCAN_POLICIES}, got {scan_policy!r}")
        if tie_break not in TIE_BREAKS:
            raise ValueError(f"tie_break must be one of {TIE_BREAKS}, got {tie_break!r}")
        if table is not None and table.dictionary != dictionary:
            raise ValueError("pattern table was built for a different dictionary")
        self.dictionary = dictionary
        self.table = table
        self.scan_policy = scan_policy
        self.tie_break = tie_break

    def pattern_distribution(self, guess, candidates):
        """FeedbackCode -> number of candidates that would produce it."""
        if self.table is not None:
            codes = self.table.rows([guess], candidates)[0]
            counts = np.bincount(codes, minlength=N_PATTERNS)
            return {int(code): int(counts[code]) for code in np.flatnonzero(counts)}
        return dict(Counter(feedback(guess, answer) for answer in candidates))

    def score(self, guess, candidates):
        return entropy_bits(self.pattern_distribution(guess, candidates).values())

    def scores(self, guesses, candidates):
        """Entropy of every guess in `guesses`, in the same order."""
        guesses = list(guesses)
        candidates = list(candidates)
        if not guesses or not candidates:
            return [0.0] * len(guesses)
        if self.table is None:
            return [self.score(g, candidates) for g in guesses]
        # one bincount for all guesses: row i uses codes [i*243, (i+1)*243)
        rows = self.table.rows(guesses, candidates).astype(np.int64)
        rows += np.arange(len(guesses), dtype=np.int64)[:, None] * N_PATTERNS
        counts = np.bincount(rows.ravel(), minlength=len(guesses) * N_PATTERNS)
        counts = counts.reshape(len(guesses), N_PATTERNS)
        return [entropy_bits(row[row > 0].tolist()) for row in counts]

    def pool(self, candidates):
        if self.scan_policy == "dictionary":
            return list(self.dictionary)
        return list(candidates)

    def rank(self, candidates, top=10):
        """The `top` best (word, bits) pairs, best first, ties in scan order."""
        pool = self.pool(candidates)
        scored = list(zip(pool, self.scores(pool, candidates)))
        scored.sort(key=lambda item: item[1], reverse=True)
        return scored[:top]

    def select(self, candidates):
        candidates = list(candidates)
        if not candidates:
            raise EmptyCandidateSet("no candidates left to choose from")
        # with two words left any candidate finishes the game in two more rounds
        if len(candidates) <= 2:
            return candidates[0]
        pool = self.pool(candidates)
        scores = self.scores(pool, candidates)
        best = max(scores)
        if self.tie_break == "prefer_candidate":
            remaining = set(candidates)
            for guess, bits in zip(pool, scores):
                if bits == best and guess in remaining:
                    return guess
        return pool[scores.index(best)]
