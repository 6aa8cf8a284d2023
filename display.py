"""
WordGuess Display
Author: Brandon Rozek

Draws the board of guesses and the
keyboard in the terminal.
"""
from typing import Optional

from rich.console import Console
from rich.text import Text

from wordguess import KEYBOARD_ROWS, LetterState

STYLES = {
    LetterState.CORRECT: "black on green",
    LetterState.PRESENT: "black on yellow",
    LetterState.ABSENT: "black on white",
}


def styled(char: str, state: Optional[LetterState]) -> Text:
    if state is None:
        return Text(char)
    return Text(char, style=STYLES[state])


class Display:
    def __init__(self, console: Optional[Console] = None):
        # Player names and words are printed as is
        if console is None:
            console = Console(highlight=False, markup=False)
        self.console = console

    def board(self, session) -> Text:
        """
        Played rows colored letter by letter,
        blank rows for the guesses left, then the keyboard.
        """
        result = Text("==========\n")
        for i in range(session.max_guesses):
            if i < len(session.guesses):
                for char, state in zip(session.guesses[i], session.results[i]):
                    result.append_text(styled(char, state))
            else:
                result.append("_" * session.word_length)
            result.append("\n")

        result.append("----------\n")
        for row in KEYBOARD_ROWS:
            for char in row:
                result.append_text(styled(char, session.keyboard.get(char)))
            result.append("\n")
        result.append("----------")
        return result

    def show_board(self, session):
        self.console.print(self.board(session))

    def title(self, puzzle, identity):
        if identity.shared:
            self.console.print(
                f"WORDLE - Puzzle #{puzzle.ordinal}/{puzzle.total} for {identity.user}"
            )
        else:
            self.console.print("WORDLE")

    def ask(self, prompt: str, read_line=input) -> str:
        self.console.print(prompt, end="")
        return read_line()

    def banner(self, session):
        self.console.print(f"Answer: {session.puzzle.word}")
        if session.won:
            seconds = session.elapsed_ms / 1000
            self.console.print(
                f"Guessed in {len(session.guesses)}/{session.max_guesses} guesses ({seconds:.1f}sec)"
            )

    def interrupted(self):
        self.console.print()
