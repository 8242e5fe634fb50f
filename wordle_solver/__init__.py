"""
Wordle solver
=============

Narrows a five-letter dictionary down to the words consistent with the
feedback seen so far, then guesses the word whose feedback is expected
to carry the most information (Shannon entropy of the feedback split).
"""

__version__ = "1.0.0"

from .errors import EmptyCandidateSet, MalformedWord, NotReady, RejectedGuess, WordleError
from .feedback import LetterStatus, feedback, filter_candidates, is_consistent
from .guesser import Guesser
from .patterns import PatternTable
from .selector import GuessSelector, entropy_bits
from .wordle import GuessResult, Wordle
from .words import Dictionary, default_dictionary, load_words
