import numpy as np
import pytest

from wordle_solver.feedback import feedback
from wordle_solver.patterns import PatternTable
from wordle_solver.words import Dictionary


def test_table_matches_codec(medium_dictionary, medium_table):
    assert len(medium_table) == len(medium_dictionary)
    for i, guess in enumerate(medium_dictionary):
        for j, answer in enumerate(medium_dictionary):
            assert medium_table.matrix[i, j] == feedback(guess, answer)
            assert medium_table.code(guess, answer) == feedback(guess, answer)


def test_table_is_read_only(medium_table):
    assert medium_table.matrix.dtype == np.uint8
    with pytest.raises(ValueError):
        medium_table.matrix[0, 0] = 0


def test_rows_selects_guesses_and_answers(medium_table):
    rows = medium_table.rows(["crane", "speed"], ["abide", "crane", "geese"])
    assert rows.shape == (2, 3)
    assert rows[0, 1] == 242
    assert rows[1, 0] == feedback("speed", "abide")
    assert rows[1, 2] == feedback("speed", "geese")


def test_shape_must_match(small_dictionary):
    with pytest.raises(ValueError):
        PatternTable(small_dictionary, np.zeros((4, 4), dtype=np.uint8))


def test_save_and_load(tmp_path, medium_table):
    path = tmp_path / "patterns.npz"
    medium_table.save(path)
    loaded = PatternTable.load(path)
    assert loaded.dictionary == medium_table.dictionary
    assert np.array_equal(loaded.matrix, medium_table.matrix)


def test_load_or_build_reuses_matching_cache(tmp_path, medium_dictionary):
    path = tmp_path / "cache" / "patterns.npz"
    built = PatternTable.load_or_build(medium_dictionary, path, progress=False)
    assert path.exists()
    mtime = path.stat().st_mtime_ns
    again = PatternTable.load_or_build(medium_dictionary, path, progress=False)
    assert path.stat().st_mtime_ns == mtime
    assert np.array_equal(again.matrix, built.matrix)


def test_load_or_build_rebuilds_for_other_dictionary(tmp_path, medium_dictionary, small_dictionary):
    path = tmp_path / "patterns.npz"
    PatternTable.load_or_build(medium_dictionary, path, progress=False)
    table = PatternTable.load_or_build(small_dictionary, path, progress=False)
    assert table.dictionary == small_dictionary
    assert table.matrix.shape == (5, 5)
    assert PatternTable.load(path).dictionary == small_dictionary


def test_reordered_dictionary_is_a_different_dictionary(tmp_path, small_dictionary):
    path = tmp_path / "patterns.npz"
    PatternTable.load_or_build(small_dictionary, path, progress=False)
    reordered = Dictionary(reversed(list(small_dictionary)))
    table = PatternTable.load_or_build(reordered, path, progress=False)
    assert table.code("stone", "crane") == feedback("stone", "crane")
    assert table.matrix[0, 1] == feedback("stone", "adieu")
