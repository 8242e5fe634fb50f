"""
Feedback codec and consistency filter.

A FeedbackCode packs the five letter statuses of a guess into one integer
in base 3, position 0 being the most significant digit:

    UNUSED = 0, MISPLACED = 1, CORRECT = 2

so "all correct" is 242 and there are 243 possible codes.
"""
from collections import Counter
from enum import IntEnum
from functools import lru_cache

from .words import WORD_LENGTH, check_word

N_PATTERNS = 3 ** WORD_LENGTH
ALL_CORRECT = N_PATTERNS - 1


class LetterStatus(IntEnum):
    UNUSED = 0
    MISPLACED = 1
    CORRECT = 2


def _statuses(guess, answer):
    counts = Counter(answer)
    statuses = [LetterStatus.UNUSED] * WORD_LENGTH
    # greens first, each one consumes its letter from the answer
    for i, letter in enumerate(guess):
        if letter == answer[i]:
            statuses[i] = LetterStatus.CORRECT
            counts[letter] -= 1
    for i, letter in enumerate(guess):
        if statuses[i] != LetterStatus.CORRECT and counts[letter] > 0:
            statuses[i] = LetterStatus.MISPLACED
            counts[letter] -= 1
    return statuses


def letter_statuses(guess, answer):
    """Per-position statuses of `guess` scored against `answer`."""
    return _statuses(check_word(guess), check_word(answer))


def encode(guess, answer):
    """FeedbackCode for two words that are already known to be valid."""
    return statuses_to_code(_statuses(guess, answer))


_cached_encode = lru_cache(maxsize=1000000)(encode)


def feedback(guess, answer):
    """FeedbackCode for `guess` scored against `answer`."""
    return _cached_encode(check_word(guess), check_word(answer))


def statuses_to_code(statuses):
    statuses = list(statuses)
    if len(statuses) != WORD_LENGTH:
        raise ValueError(f"expected {WORD_LENGTH} statuses, got {len(statuses)}")
    code = 0
    for status in statuses:
        code = code * 3 + LetterStatus(status)
    return code


def code_to_statuses(code):
    if not 0 <= code < N_PATTERNS:
        raise ValueError(f"feedback code out of range: {code}")
    digits = []
    for _ in range(WORD_LENGTH):
        code, digit = divmod(code, 3)
        digits.append(LetterStatus(digit))
    return digits[::-1]


def feedback_string(guess, statuses):
    """
        Render feedback the way the game prints it: the letter itself where it
        is correct, '-' where it is misplaced and '+' where it is not used.
    """
    out = []
    for letter, status in zip(guess, statuses):
        if status == LetterStatus.CORRECT:
            out.append(letter)
        elif status == LetterStatus.MISPLACED:
            out.append('-')
        else:
            out.append('+')
    return ''.join(out)


def parse_feedback_string(guess, result):
    if len(result) != WORD_LENGTH or len(guess) != WORD_LENGTH:
        raise ValueError(f"cannot read feedback {result!r} for guess {guess!r}")
    statuses = []
    for letter, mark in zip(guess, result):
        if mark == '-':
            statuses.append(LetterStatus.MISPLACED)
        elif mark == '+':
            statuses.append(LetterStatus.UNUSED)
        elif mark == letter:
            statuses.append(LetterStatus.CORRECT)
        else:
            raise ValueError(f"unexpected mark {mark!r} for letter {letter!r}")
    return statuses


def is_consistent(candidate, guess, statuses):
    """
        True if `candidate` could be the answer, given that `guess` produced
        `statuses`. Scoring the guess against the candidate and comparing codes
        keeps the duplicate-letter rules in one place.
    """
    return feedback(guess, candidate) == statuses_to_code(statuses)


def filter_candidates(candidates, guess, statuses):
    """Candidates still possible after `guess` produced `statuses`, order kept."""
    code = statuses_to_code(statuses)
    check_word(guess)
    return [c for c in candidates if feedback(guess, c) == code]
