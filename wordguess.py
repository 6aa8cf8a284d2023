"""
WordGuess Library
Author: Brandon Rozek

Contains common data structures
shared between the game, the progress
store and the leaderboard.
"""
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional

DEFAULT_WORD_LENGTH = 5

SAVE_LOCATION = Path.home() / ".wordle"

# Every word usable as a guess
ACCEPTANCE_URL = "https://www.gutenberg.org/files/3201/files/CROSSWD.TXT"
# Common words that secrets are drawn from
CANDIDATE_URL = (
    "https://raw.githubusercontent.com/first20hours/"
    "google-10000-english/master/google-10000-english-usa.txt"
)

KEYBOARD_ROWS = ["qwertyuiop", "asdfghjkl", "zxcvbnm"]


class WordGuessError(Exception):
    pass

class ConfigurationError(WordGuessError):
    """
    Raised before the first prompt when
    the game cannot be set up.
    """
    pass

class PuzzlesExhaustedError(ConfigurationError):
    pass


class LetterState(Enum):
    ABSENT = 0
    PRESENT = 1
    CORRECT = 2

    @property
    def rank(self) -> int:
        return self.value


@dataclass
class SessionRecord:
    word: str
    guesses: List[str] = field(default_factory=list)
    elapsed_ms: Optional[int] = None

    @property
    def won(self) -> bool:
        return self.elapsed_ms is not None

    def to_json(self) -> list:
        result = [self.word, self.guesses]
        if self.elapsed_ms is not None:
            result.append(self.elapsed_ms)
        return result

    @staticmethod
    def from_json(entry):
        """
        Ex: ["crane", ["stare", "crane"], 5230]
        """
        if not isinstance(entry, list) or len(entry) not in (2, 3):
            raise ValueError(f"Malformed record: {entry!r}")
        word, guesses = entry[0], entry[1]
        if not isinstance(word, str) or not isinstance(guesses, list):
            raise ValueError(f"Malformed record: {entry!r}")
        elapsed = entry[2] if len(entry) == 3 else None
        if elapsed is not None and not isinstance(elapsed, (int, float)):
            raise ValueError(f"Malformed record: {entry!r}")
        return SessionRecord(word, [str(g) for g in guesses], elapsed)
