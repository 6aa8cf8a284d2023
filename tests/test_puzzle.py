import random

import pytest

from puzzle import PuzzleIdentity, seed_from_key, seeded_shuffle, select_puzzle
from wordguess import ConfigurationError, PuzzlesExhaustedError

WORDS = [f"w{i:04d}" for i in range(50)]


def test_keys():
    identity = PuzzleIdentity("daily", "alice", 5, 6)
    assert identity.shared
    assert identity.save_key == "daily-alice-5-6"
    assert identity.shuffle_key == "daily-5-6"
    assert not PuzzleIdentity(None, None, 5, 6).shared


def test_seed_is_stable():
    assert seed_from_key("daily-5-6") == seed_from_key("daily-5-6")
    assert seed_from_key("daily-5-6") != seed_from_key("daily-5-7")


def test_seeded_shuffle_is_reproducible():
    first = seeded_shuffle(WORDS, 42)
    second = seeded_shuffle(list(WORDS), 42)
    assert first == second
    assert sorted(first) == sorted(WORDS)
    assert first != WORDS
    assert seeded_shuffle(WORDS, 43) != first


def test_seeded_shuffle_leaves_input_alone():
    words = list(WORDS)
    seeded_shuffle(words, 1)
    assert words == WORDS


def test_seeded_shuffle_small_inputs():
    assert seeded_shuffle([], 1) == []
    assert seeded_shuffle(["only"], 1) == ["only"]


def test_shared_puzzles_follow_the_shuffle():
    order = seeded_shuffle(WORDS, seed_from_key("daily-5-6"))
    alice = PuzzleIdentity("daily", "alice", 5, 6)
    for played in range(len(WORDS)):
        puzzle = select_puzzle(WORDS, alice, played)
        assert puzzle.word == order[played]
        assert puzzle.index == played
        assert puzzle.ordinal == played + 1
        assert puzzle.total == len(WORDS)


def test_shared_order_does_not_depend_on_user():
    alice = PuzzleIdentity("daily", "alice", 5, 6)
    bob = PuzzleIdentity("daily", "bob", 5, 6)
    assert select_puzzle(WORDS, alice, 3) == select_puzzle(WORDS, bob, 3)


def test_shared_puzzles_never_repeat():
    alice = PuzzleIdentity("daily", "alice", 5, 6)
    words = [select_puzzle(WORDS, alice, n).word for n in range(len(WORDS))]
    assert len(set(words)) == len(WORDS)


def test_exhausted_puzzles():
    alice = PuzzleIdentity("daily", "alice", 5, 6)
    with pytest.raises(PuzzlesExhaustedError):
        select_puzzle(WORDS, alice, len(WORDS))


def test_no_candidates():
    with pytest.raises(ConfigurationError):
        select_puzzle([], PuzzleIdentity(None, None, 5, 6))
    with pytest.raises(ConfigurationError):
        select_puzzle([], PuzzleIdentity("daily", "alice", 5, 6))


def test_solo_uses_unshuffled_list():
    class FixedRandom:
        def randrange(self, n):
            assert n == len(WORDS)
            return 7

    puzzle = select_puzzle(WORDS, PuzzleIdentity(None, None, 5, 6), rng=FixedRandom())
    assert puzzle.word == WORDS[7]


def test_solo_stays_in_range():
    rng = random.Random(0)
    solo = PuzzleIdentity(None, None, 5, 6)
    for _ in range(100):
        assert select_puzzle(WORDS, solo, rng=rng).word in WORDS
