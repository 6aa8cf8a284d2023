"""
WordGuess Puzzle Selection
Author: Brandon Rozek

Shared games deal every player the same
sequence of words. The sequence is a
seeded shuffle of the candidate list, and
a player's position in it is the number of
puzzles they have already played.
"""
from dataclasses import dataclass
from typing import List, Optional, Sequence
import hashlib
import random

from wordguess import ConfigurationError, PuzzlesExhaustedError


@dataclass(frozen=True)
class PuzzleIdentity:
    game: Optional[str]
    user: Optional[str]
    word_length: int
    max_guesses: int

    @property
    def shared(self) -> bool:
        return self.game is not None

    @property
    def save_key(self) -> str:
        return f"{self.game}-{self.user}-{self.word_length}-{self.max_guesses}"

    @property
    def shuffle_key(self) -> str:
        # Leaves out the user so that
        # everyone gets the same order
        return f"{self.game}-{self.word_length}-{self.max_guesses}"


@dataclass(frozen=True)
class Puzzle:
    word: str
    index: int
    total: int

    @property
    def ordinal(self) -> int:
        return self.index + 1


def seed_from_key(key: str) -> int:
    digest = hashlib.sha256(key.encode("utf-8")).digest()
    return int.from_bytes(digest[:8], "big")


def seeded_shuffle(words: Sequence[str], seed: int) -> List[str]:
    """
    Fisher-Yates shuffle driven by its own
    generator, so the same seed always gives
    the same order. Returns a new list.
    """
    rng = random.Random(seed)
    result = list(words)
    for i in range(len(result) - 1, 0, -1):
        j = rng.randrange(i + 1)
        result[i], result[j] = result[j], result[i]
    return result


def select_puzzle(candidates: Sequence[str], identity: PuzzleIdentity, played: int = 0, rng=random) -> Puzzle:
    total = len(candidates)
    if total == 0:
        raise ConfigurationError(
            f"No candidate words of length {identity.word_length}"
        )

    if not identity.shared:
        index = rng.randrange(total)
        return Puzzle(candidates[index], index, total)

    if played >= total:
        raise PuzzlesExhaustedError(
            f"No more puzzles: all {total} words have been played"
        )
    order = seeded_shuffle(candidates, seed_from_key(identity.shuffle_key))
    return Puzzle(order[played], played, total)
