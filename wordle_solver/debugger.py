import argparse
from collections import Counter
from random import Random
import time

from rich.console import Console
from tqdm import tqdm

from .feedback import ALL_CORRECT, code_to_statuses, feedback_string
from .guesser import Guesser
from .patterns import PatternTable
from .selector import GuessSelector
from .wordle import Wordle
from .words import DEFAULT_WORDLIST, load_words


class WordleDebugger:
    """Offline analysis of openers and second guesses over a whole dictionary."""

    def __init__(self, dictionary=None, table=None, progress=True):
        self.word_list = dictionary if dictionary is not None else load_words(DEFAULT_WORDLIST)
        self.total_words = len(self.word_list)
        self.progress = progress
        self.table = table if table is not None else PatternTable.build(self.word_list, progress=progress)
        self.selector = GuessSelector(self.word_list, table=self.table, scan_policy="dictionary")

    def find_best_starters(self, num_words=20, sample_size=None, seed=None):
        """Best opening words by entropy over the dictionary (or a random sample of it)."""
        if sample_size is None:
            answers = list(self.word_list)
        else:
            answers = Random(seed).sample(list(self.word_list), min(sample_size, self.total_words))
        words = list(self.word_list)
        scores = self.selector.scores(words, answers)
        word_entropies = list(zip(words, scores))
        word_entropies.sort(key=lambda x: x[1], reverse=True)
        return word_entropies[:num_words]

    def analyze_second_guesses(self, first_guess, num_patterns=10, num_second_guesses=5):
        """
            For the `num_patterns` most frequent feedbacks to `first_guess`, list the
            best second guesses and how many candidates each feedback leaves.
        """
        answers = list(self.word_list)
        distribution = self.selector.pattern_distribution(first_guess, answers)
        top_patterns = sorted(distribution.items(), key=lambda x: x[1], reverse=True)[:num_patterns]

        results = {}
        for code, count in tqdm(top_patterns, desc="Second guesses", disable=not self.progress):
            remaining = [w for w in answers if self.table.code(first_guess, w) == code]
            ranked = self.selector.rank(remaining, top=num_second_guesses + 1)
            best = [(w, e) for w, e in ranked if w != first_guess][:num_second_guesses]
            pattern = feedback_string(first_guess, code_to_statuses(code))
            results[pattern] = {
                'count': count,
                'percentage': (count / self.total_words) * 100,
                'best_second_guesses': best,
                'remaining_candidates': len(remaining),
                'solved': code == ALL_CORRECT,
            }
        return results

    def simulate_games(self, first_word=None, num_games=100, seed=None, **guesser_options):
        """Play `num_games` random answers with a Guesser opening on `first_word`."""
        if num_games < 1:
            raise ValueError(f"num_games must be at least 1, got {num_games}")
        guesser = Guesser(self.word_list, table=self.table, opener=first_word, **guesser_options)
        engine = Wordle(self.word_list, max_guesses=self.total_words)
        rng = Random(seed)
        sample_answers = rng.sample(list(self.word_list), min(num_games, self.total_words))

        guess_distribution = Counter()
        start_time = time.time()
        for answer in tqdm(sample_answers, desc="Simulating", disable=not self.progress):
            result = engine.play(answer)
            guesser.reset()
            while not result.is_correct and result.guesses_remaining > 0:
                result = engine.guess(guesser.pick_next_guess(result))
            guess_distribution[result.guess_number] += 1

        total_guesses = sum(n * count for n, count in guess_distribution.items())
        avg_guesses = total_guesses / len(sample_answers)
        return {
            'first_word': guesser.best_first_guess(),
            'num_games': len(sample_answers),
            'avg_guesses': avg_guesses,
            'max_guesses': max(guess_distribution),
            'guess_distribution': dict(guess_distribution),
            'score': 100 * (7 - avg_guesses),
            'execution_time': time.time() - start_time,
        }


def main(argv=None):
    parser = argparse.ArgumentParser(description="Rank openers and second guesses by entropy.")
    parser.add_argument("--words", default=DEFAULT_WORDLIST, help="word list (.yaml list or one word per line)")
    parser.add_argument("--table-cache", help="pattern table cache (.npz), built on first use")
    args = parser.parse_args(argv)

    console = Console()
    dictionary = load_words(args.words)
    table = PatternTable.load_or_build(dictionary, args.table_cache) if args.table_cache else None
    debugger = WordleDebugger(dictionary, table=table)

    console.print("\n=== TOP STARTING WORDS ===")
    best_starters = debugger.find_best_starters(num_words=20)
    for i, (word, entropy) in enumerate(best_starters, 1):
        console.print(f"{i}. {word}: {entropy:.4f}")

    top_word = best_starters[0][0]
    console.print(f"\n=== SECOND GUESSES ANALYSIS ===\nFor first guess '{top_word}':")
    for pattern, data in debugger.analyze_second_guesses(top_word).items():
        console.print(f"\nPattern: {pattern} (occurs {data['percentage']:.2f}% of the time)")
        console.print(f"Remaining candidates: {data['remaining_candidates']}")
        console.print("Best second guesses:")
        for word, entropy in data['best_second_guesses']:
            console.print(f"  {word}: {entropy:.4f}")

    console.print("\n=== GAME SIMULATION ===")
    for first_word, _ in best_starters[:3]:
        result = debugger.simulate_games(first_word, num_games=100)
        console.print(f"\nFirst word: {first_word}")
        console.print(f"Average guesses: {result['avg_guesses']:.4f}")
        console.print(f"Score: {result['score']:.2f}")
        console.print(f"Guess distribution: {result['guess_distribution']}")


if __name__ == "__main__":
    main()
