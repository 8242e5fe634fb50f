from rich.console import Console

from .errors import EmptyCandidateSet, NotReady, RejectedGuess
from .feedback import filter_candidates
from .patterns import PatternTable
from .selector import GuessSelector
from .words import check_word, default_dictionary

# Toggles
SCAN_POLICY = "candidates"    # "candidates" or "dictionary": which words may be guessed
TIE_BREAK = "first"           # "first" or "prefer_candidate": how equal entropies are settled
USE_PATTERN_TABLE = True      # precompute every (guess, answer) code once per guesser
OPENER = None                 # fixed first guess; None computes the best one
VERBOSE = False               # print every guess to the console


class Guesser:
    """
        Plays one game at a time against an external engine.

        The dictionary, the pattern table and the selector are built once and
        only read afterwards; they can be shared with other guessers. The
        candidate list belongs to this guesser alone and is rebuilt by reset(),
        so a guesser must not be driven by two games at the same time.

        Usage per game: reset(), then pick_next_guess(previous_result) until the
        engine reports a correct guess. The first call takes None (or a result
        with no word), every later call takes the result of the last guess.
    """
    def __init__(self, dictionary=None, table=None, scan_policy=SCAN_POLICY, tie_break=TIE_BREAK,
                 use_pattern_table=USE_PATTERN_TABLE, opener=OPENER, verbose=VERBOSE,
                 console=None, progress=True):
        self.word_list = dictionary if dictionary is not None else default_dictionary()
        if table is None and use_pattern_table:
            table = PatternTable.build(self.word_list, progress=progress)
        self.table = table
        self.selector = GuessSelector(self.word_list, table=table,
                                      scan_policy=scan_policy, tie_break=tie_break)
        if opener is not None:
            check_word(opener)
            if opener not in self.word_list:
                raise ValueError(f"opener {opener!r} is not in the dictionary")
        self._opener = opener
        self.console = console if console is not None else Console(quiet=not verbose)
        self._ready = False
        self._tried = []
        self._candidates = []
        self.last_guess = None

    @property
    def candidates(self):
        return tuple(self._candidates)

    @property
    def tried(self):
        return tuple(self._tried)

    @property
    def ready(self):
        return self._ready

    def reset(self):
        """Start a new game: every dictionary word is a candidate again."""
        self._tried = []
        self._candidates = list(self.word_list)
        self.last_guess = None
        self._ready = True

    def best_first_guess(self):
        """The opening guess; the same every game, so it is computed only once."""
        if self._opener is None:
            self._opener = self.selector.select(self.word_list)
        return self._opener

    def pick_next_guess(self, previous=None):
        if not self._ready:
            raise NotReady("reset() must be called before the first guess of a game")
        if previous is not None and not previous.is_valid:
            raise RejectedGuess(f"the engine rejected {self.last_guess!r}")
        if previous is not None and previous.word:
            self._candidates = filter_candidates(self._candidates, previous.word, previous.statuses)
        if not self._candidates:
            raise EmptyCandidateSet("no dictionary word matches the feedback received")

        if not self._tried and len(self._candidates) == len(self.word_list):
            guess = self.best_first_guess()
        else:
            guess = self.selector.select(self._candidates)
        # a guess that was not the answer can never be the answer later
        if guess in self._candidates:
            self._candidates.remove(guess)
        self._tried.append(guess)
        self.console.print(guess)
        self.last_guess = guess
        return guess
