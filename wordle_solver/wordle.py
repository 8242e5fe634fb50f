import random
from dataclasses import dataclass, field

from .feedback import LetterStatus, feedback_string, letter_statuses
from .words import WORD_LENGTH

MAX_GUESSES = 6


@dataclass
class GuessResult:
    """Outcome of one guess, plus the running state of the game."""
    word: str = ""
    statuses: list = field(default_factory=lambda: [LetterStatus.UNUSED] * WORD_LENGTH)
    is_valid: bool = True
    is_correct: bool = False
    guess_number: int = 0
    guesses_remaining: int = MAX_GUESSES
    guesses: list = field(default_factory=list)

    @classmethod
    def default(cls, max_guesses=MAX_GUESSES):
        """The result before any guess has been made."""
        return cls(guesses_remaining=max_guesses)

    def __str__(self):
        if not self.word:
            return "" if self.is_valid else "<invalid>"
        return feedback_string(self.word, self.statuses)


class Wordle:
    """
        The game engine: keeps the secret answer, rejects words that are not in
        the dictionary and scores valid guesses.

        Invalid guesses do not use up a turn.
    """
    def __init__(self, dictionary, max_guesses=MAX_GUESSES, seed=None):
        if max_guesses < 1:
            raise ValueError("max_guesses must be at least 1")
        self.word_list = dictionary
        self.max_guesses = max_guesses
        self.rng = random.Random(seed)
        self._answer = None
        self._history = []
        self._last = GuessResult.default(max_guesses)

    @property
    def answer(self):
        return self._answer

    @property
    def guesses_remaining(self):
        return self.max_guesses - len(self._history)

    @property
    def history(self):
        return list(self._history)

    def play(self, answer=None):
        """Start a new game with `answer`, or a random dictionary word."""
        if answer is None:
            answer = self.rng.choice(self.word_list.words)
        elif answer not in self.word_list:
            raise ValueError(f"answer {answer!r} is not in the dictionary")
        self._answer = answer
        self._history = []
        self._last = GuessResult.default(self.max_guesses)
        return self._last

    def guess(self, word):
        if self._answer is None:
            raise RuntimeError("play() must be called before guessing")
        if self.guesses_remaining == 0:
            return self._last
        word = word.lower()
        if word not in self.word_list:
            return GuessResult(is_valid=False, guess_number=len(self._history),
                               guesses_remaining=self.guesses_remaining,
                               guesses=list(self._history))
        result = GuessResult(
            word=word,
            statuses=letter_statuses(word, self._answer),
            is_correct=word == self._answer,
            guess_number=len(self._history) + 1,
            guesses_remaining=self.guesses_remaining - 1,
        )
        self._history.append(result)
        result.guesses = list(self._history)
        self._last = result
        return result
