class WordleError(Exception):
    """Base class for every error raised by the solver."""


class MalformedWord(WordleError, ValueError):
    """A word that is not exactly five lowercase letters a-z."""

    def __init__(self, word):
        self.word = word
        super().__init__(f"expected five lowercase letters a-z, got {word!r}")


class NotReady(WordleError, RuntimeError):
    """pick_next_guess was called before reset."""


class EmptyCandidateSet(WordleError, RuntimeError):
    """No dictionary word is consistent with the feedback received so far.

    Either the feedback does not come from the same rules as the codec,
    or the secret answer is not in the configured dictionary.
    """


class RejectedGuess(WordleError, RuntimeError):
    """The engine reported that the previous guess was not a valid word."""
