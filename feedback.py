"""
WordGuess Feedback
Author: Brandon Rozek

Hints for a guess against the secret word,
along with the keyboard summary of every
letter guessed so far.
"""
from collections import Counter
from typing import Dict, Iterable, List, Optional

from wordguess import LetterState


def evaluate(expected: str, guess: str) -> List[LetterState]:
    """
    Provide a hint for each letter of the guess.
    Ex: evaluate("crane", "stare") ->
        [ABSENT, ABSENT, CORRECT, PRESENT, CORRECT]
    """
    if len(expected) != len(guess):
        raise ValueError(f"Guess '{guess}' must be {len(expected)} letters long")

    output = [LetterState.ABSENT] * len(expected)

    # Check for letters in correct positions,
    # counting the secret letters left over
    remaining = Counter()
    for i, (e_char, g_char) in enumerate(zip(expected, guess)):
        if e_char == g_char:
            output[i] = LetterState.CORRECT
        else:
            remaining[e_char] += 1

    # Leftmost occurrences claim the leftover letters first
    for i, g_char in enumerate(guess):
        if output[i] is LetterState.CORRECT:
            continue
        if remaining[g_char] >= 1:
            output[i] = LetterState.PRESENT
            remaining[g_char] -= 1

    return output


class KeyboardState:
    """
    Best state seen for each letter across
    all guesses. A letter never goes from
    CORRECT back to PRESENT or ABSENT.
    """
    def __init__(self):
        self.letters: Dict[str, LetterState] = {}

    def update(self, guess: str, states: Iterable[LetterState]):
        for char, state in zip(guess, states):
            current = self.letters.get(char)
            if current is None or state.rank > current.rank:
                self.letters[char] = state

    def get(self, char: str) -> Optional[LetterState]:
        return self.letters.get(char)
