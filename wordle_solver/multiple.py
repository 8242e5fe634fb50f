"""
Repeats the game driver on random sub-dictionaries and averages the results.

    python -m wordle_solver.multiple N_INIT N_WORDS [N_GAMES]
"""
import sys

import numpy as np
from rich.console import Console

from .game import run_games
from .guesser import Guesser
from .wordle import Wordle
from .words import Dictionary, default_dictionary

N_GAMES = 500


def run_many(n_init, n_words, n_games=N_GAMES, dictionary=None, seed=None, console=None,
             **guesser_options):
    """
        `n_init` runs, each on `n_words` words drawn from `dictionary` without
        replacement. Returns the per-run [accuracy, avg length, time] rows and
        their summary.
    """
    dictionary = dictionary if dictionary is not None else default_dictionary()
    rng = np.random.default_rng(seed)
    guesser_options.setdefault("progress", False)
    stats = np.zeros(shape=(n_init, 3))

    for i in range(n_init):
        word_list = rng.choice(dictionary.words, size=n_words, replace=False).tolist()
        sub_dictionary = Dictionary(word_list)
        engine = Wordle(sub_dictionary, seed=int(rng.integers(2**32)))
        guesser = Guesser(sub_dictionary, **guesser_options)
        result = run_games(engine, guesser, n_games)
        avg_length = result['avg_guesses'] if result['avg_guesses'] is not None else np.nan
        stats[i, :] = [result['accuracy'], avg_length, result['time']]
        if console is not None:
            console.print(f"Run {i+1}: {stats[i, 0]:.2f}%,{stats[i, 1]:.4f},{stats[i, 2]:.2f}")

    return {
        'runs': stats,
        'accuracy': float(np.mean(stats[:, 0])),
        'avg_length': float(np.nanmean(stats[:, 1])),
        'std_length': float(np.nanstd(stats[:, 1])),
        'min_length': float(np.nanmin(stats[:, 1])),
        'max_length': float(np.nanmax(stats[:, 1])),
        'time': float(np.mean(stats[:, 2])),
    }


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    console = Console()
    if len(argv) >= 2:
        n_init, n_words = argv[0], argv[1]
    else:
        n_init = console.input('N_INIT: ')
        n_words = console.input('N_WORDS: ')
    n_games = int(argv[2]) if len(argv) > 2 else N_GAMES

    summary = run_many(int(n_init), int(n_words), n_games, console=console)

    console.print(f"\nCompleted {n_init} runs.\n\nAverage metrics: ")
    console.print(f"Accuracy = {summary['accuracy']:.2f}%")
    console.print(f"Length = {summary['avg_length']:.4f} (std: {summary['std_length']:.4f}, "
                  f"interval: [{summary['min_length']:.4f}, {summary['max_length']:.4f}])")
    console.print(f"Time = {summary['time']:.4f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
