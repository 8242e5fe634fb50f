import pytest

from wordle_solver.errors import EmptyCandidateSet, NotReady, RejectedGuess
from wordle_solver.feedback import LetterStatus
from wordle_solver.guesser import Guesser
from wordle_solver.selector import GuessSelector
from wordle_solver.wordle import GuessResult, Wordle


def make_guesser(dictionary, console, **options):
    options.setdefault("progress", False)
    return Guesser(dictionary, console=console, **options)


def test_pick_before_reset_is_an_error(small_dictionary, quiet_console):
    guesser = make_guesser(small_dictionary, quiet_console)
    assert not guesser.ready
    with pytest.raises(NotReady):
        guesser.pick_next_guess(None)


def test_first_guess_is_the_best_opener(medium_dictionary, medium_table, quiet_console):
    guesser = make_guesser(medium_dictionary, quiet_console, table=medium_table)
    guesser.reset()
    expected = GuessSelector(medium_dictionary).select(medium_dictionary)
    assert guesser.pick_next_guess(GuessResult.default()) == expected
    assert guesser.best_first_guess() == expected
    assert expected not in guesser.candidates
    assert len(guesser.candidates) == len(medium_dictionary) - 1


def test_configured_opener(small_dictionary, quiet_console):
    guesser = make_guesser(small_dictionary, quiet_console, opener="stone")
    guesser.reset()
    assert guesser.pick_next_guess() == "stone"
    with pytest.raises(ValueError):
        make_guesser(small_dictionary, quiet_console, opener="robin")


def test_works_without_pattern_table(medium_dictionary, quiet_console):
    guesser = make_guesser(medium_dictionary, quiet_console, use_pattern_table=False)
    assert guesser.table is None
    guesser.reset()
    assert guesser.pick_next_guess() in medium_dictionary


def test_concrete_scenario(small_dictionary, quiet_console):
    engine = Wordle(small_dictionary, max_guesses=len(small_dictionary))
    guesser = make_guesser(small_dictionary, quiet_console, opener="abide")
    result = engine.play("crane")
    guesser.reset()

    guess = guesser.pick_next_guess(result)
    assert guess == "abide"
    result = engine.guess(guess)
    assert not result.is_correct

    guess = guesser.pick_next_guess(result)
    # only crane agrees with the feedback to abide, and it is now being played
    assert guess == "crane"
    assert guesser.candidates == ()
    assert engine.guess(guess).is_correct
    assert guesser.tried == ("abide", "crane")


@pytest.mark.parametrize("scan_policy", ["candidates", "dictionary"])
def test_every_answer_is_found(medium_dictionary, medium_table, quiet_console, scan_policy):
    guesser = make_guesser(medium_dictionary, quiet_console, table=medium_table,
                           scan_policy=scan_policy, tie_break="prefer_candidate")
    engine = Wordle(medium_dictionary, max_guesses=len(medium_dictionary))
    for answer in medium_dictionary:
        result = engine.play(answer)
        guesser.reset()
        sizes = [len(guesser.candidates)]
        while not result.is_correct:
            guess = guesser.pick_next_guess(result)
            assert guess in medium_dictionary
            result = engine.guess(guess)
            assert result.is_valid
            assert result.guesses_remaining > 0 or result.is_correct
            sizes.append(len(guesser.candidates))
            if not result.is_correct:
                assert answer in guesser.candidates
        assert sizes == sorted(sizes, reverse=True)
        assert result.guess_number <= len(medium_dictionary)
        assert len(set(guesser.tried)) == len(guesser.tried)


def test_reset_forgets_the_previous_game(medium_dictionary, medium_table, quiet_console):
    guesser = make_guesser(medium_dictionary, quiet_console, table=medium_table, opener="crane")
    engine = Wordle(medium_dictionary, max_guesses=len(medium_dictionary))
    result = engine.play("geese")
    guesser.reset()
    result = engine.guess(guesser.pick_next_guess(result))
    guesser.pick_next_guess(result)
    assert len(guesser.candidates) < len(medium_dictionary)

    guesser.reset()
    assert guesser.candidates == tuple(medium_dictionary)
    assert guesser.tried == ()
    assert guesser.last_guess is None


def test_rejected_guess(small_dictionary, quiet_console):
    guesser = make_guesser(small_dictionary, quiet_console)
    guesser.reset()
    guesser.pick_next_guess()
    with pytest.raises(RejectedGuess):
        guesser.pick_next_guess(GuessResult(is_valid=False))


def test_impossible_feedback_empties_candidates(small_dictionary, quiet_console):
    guesser = make_guesser(small_dictionary, quiet_console)
    guesser.reset()
    guess = guesser.pick_next_guess()
    won = GuessResult(word=guess, statuses=[LetterStatus.CORRECT] * 5, guess_number=1)
    with pytest.raises(EmptyCandidateSet):
        guesser.pick_next_guess(won)


def test_guesses_are_printed(small_dictionary):
    from rich.console import Console

    console = Console(record=True, width=40)
    guesser = Guesser(small_dictionary, console=console, opener="speed", progress=False)
    guesser.reset()
    guesser.pick_next_guess()
    assert "speed" in console.export_text()


def test_quiet_unless_verbose(small_dictionary):
    assert Guesser(small_dictionary, progress=False).console.quiet
    assert not Guesser(small_dictionary, progress=False, verbose=True).console.quiet
