"""
Plays many games with one Guesser and reports how it did.

    wordle-solver --r 500 --seed 7
    wordle-solver --config settings.yaml
    wordle-solver --words wordle.txt --table-cache cache/patterns.npz

A settings file is a YAML mapping; command line flags win over it:

    words: data/wordlist.yaml
    games: 500
    seed: 7
    max_guesses: 6
    table_cache: cache/patterns.npz
    guesser:
      scan_policy: dictionary
      tie_break: prefer_candidate
      opener: crane
"""
import argparse
import time
from collections import Counter

import yaml
from rich.console import Console
from rich.table import Table

from .guesser import Guesser
from .patterns import PatternTable
from .wordle import MAX_GUESSES, Wordle
from .words import DEFAULT_WORDLIST, load_words

SETTINGS_KEYS = {"words", "games", "seed", "max_guesses", "table_cache", "guesser"}
GUESSER_KEYS = {"scan_policy", "tie_break", "use_pattern_table", "opener", "verbose"}


def load_settings(path):
    with open(path) as f:
        settings = yaml.safe_load(f) or {}
    if not isinstance(settings, dict):
        raise ValueError(f"{path}: settings must be a mapping")
    unknown = set(settings) - SETTINGS_KEYS
    if unknown:
        raise ValueError(f"{path}: unknown settings {sorted(unknown)}")
    guesser = settings.get("guesser") or {}
    unknown = set(guesser) - GUESSER_KEYS
    if unknown:
        raise ValueError(f"{path}: unknown guesser settings {sorted(unknown)}")
    settings["guesser"] = guesser
    return settings


def play_game(engine, guesser, answer=None, console=None):
    """One game; returns the winning guess number, or None if the guesses ran out."""
    result = engine.play(answer)
    guesser.reset()
    while result.guesses_remaining > 0:
        guess = guesser.pick_next_guess(result)
        result = engine.guess(guess)
        if not result.is_valid:
            if console is not None:
                console.print(f"Invalid guess rejected: '{guess}'")
            continue
        if result.is_correct:
            return result.guess_number
    return None


def run_games(engine, guesser, n_games, answers=None, console=None):
    """
        Play `n_games` games (or one per word of `answers`) and return a summary:
        wins, accuracy in percent, average guesses per win, histogram of guess
        counts and elapsed seconds.
    """
    if answers is None:
        answers = [None] * n_games
    distribution = Counter()
    wins = 0
    total_guesses = 0
    start_time = time.time()
    for answer in answers:
        n_guesses = play_game(engine, guesser, answer, console=console)
        if n_guesses is None:
            distribution['X'] += 1
            continue
        wins += 1
        total_guesses += n_guesses
        distribution[n_guesses] += 1
    games = len(answers)
    return {
        'games': games,
        'wins': wins,
        'accuracy': 100 * wins / games if games else 0.0,
        'avg_guesses': total_guesses / wins if wins else None,
        'distribution': dict(distribution),
        'time': time.time() - start_time,
    }


def print_results(stats, console):
    table = Table(title=f"Completed {stats['games']} game(s)")
    table.add_column("Wins")
    table.add_column("Accuracy")
    table.add_column("Avg guesses per win")
    table.add_column("Time (s)")
    avg = f"{stats['avg_guesses']:.4f}" if stats['avg_guesses'] is not None else "N/A"
    table.add_row(f"{stats['wins']}/{stats['games']}", f"{stats['accuracy']:.2f}%",
                  avg, f"{stats['time']:.2f}")
    console.print(table)
    numbered = sorted(k for k in stats['distribution'] if k != 'X')
    for k in numbered:
        console.print(f"{k}: {stats['distribution'][k]}")
    if 'X' in stats['distribution']:
        console.print(f"lost: {stats['distribution']['X']}")


def build_parser():
    parser = argparse.ArgumentParser(description="Play Wordle games with the entropy guesser.")
    parser.add_argument("--r", dest="games", type=int, help="number of games to play")
    parser.add_argument("--seed", type=int, help="seed for choosing secret answers")
    parser.add_argument("--config", help="YAML settings file")
    parser.add_argument("--words", help="word list (.yaml list or one word per line)")
    parser.add_argument("--max-guesses", type=int, help="guesses allowed per game")
    parser.add_argument("--table-cache", help="pattern table cache (.npz), built on first use")
    parser.add_argument("--scan-policy", choices=["candidates", "dictionary"])
    parser.add_argument("--tie-break", choices=["first", "prefer_candidate"])
    parser.add_argument("--opener", help="fixed first guess")
    parser.add_argument("--verbose", action="store_true", help="print every guess")
    return parser


def _pick(value, settings, key, default=None):
    return value if value is not None else settings.get(key, default)


def run(argv=None):
    args = build_parser().parse_args(argv)
    settings = load_settings(args.config) if args.config else {"guesser": {}}
    guesser_options = dict(settings["guesser"])
    for key in ("scan_policy", "tie_break", "opener"):
        if getattr(args, key) is not None:
            guesser_options[key] = getattr(args, key)
    if args.verbose:
        guesser_options["verbose"] = True

    console = Console()
    dictionary = load_words(_pick(args.words, settings, "words", DEFAULT_WORDLIST))
    engine = Wordle(dictionary,
                    max_guesses=_pick(args.max_guesses, settings, "max_guesses", MAX_GUESSES),
                    seed=_pick(args.seed, settings, "seed"))
    table_cache = _pick(args.table_cache, settings, "table_cache")
    if table_cache is not None and guesser_options.get("use_pattern_table", True):
        guesser_options["table"] = PatternTable.load_or_build(dictionary, table_cache)
    guesser = Guesser(dictionary, **guesser_options)
    stats = run_games(engine, guesser, _pick(args.games, settings, "games", 1), console=console)
    print_results(stats, console)
    return stats


def main(argv=None):
    run(argv)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
