"""
WordGuess Game
Author: Brandon Rozek

Guess the secret word one word at a time.
Set the GAME environment variable to play
a shared sequence of puzzles and keep
track of your progress.

Usage: python game.py [word_length] [max_guesses]
"""
from enum import Enum
from typing import List, Optional
import argparse
import getpass
import logging
import os
import signal
import sys
import time

from corpus import get_maybe_cached, load_corpus
from display import Display
from feedback import KeyboardState, evaluate
from progress import ProgressStore
from puzzle import PuzzleIdentity, select_puzzle
from wordguess import (
    DEFAULT_WORD_LENGTH,
    SAVE_LOCATION,
    ConfigurationError,
    LetterState,
    WordGuessError
)

logger = logging.getLogger(__name__)

PROMPT = lambda i, gs, wl: f"Enter guess {i}/{gs} ({wl} letters):\n> "


class SessionState(Enum):
    AWAITING_GUESS = "awaiting guess"
    WON = "won"
    LOST = "lost"
    INTERRUPTED = "interrupted"


class Session:
    def __init__(self, puzzle, corpus, identity, store, clock=time.monotonic):
        self.puzzle = puzzle
        self.corpus = corpus
        self.identity = identity
        self.store = store
        self.clock = clock

        self.word_length = identity.word_length
        self.max_guesses = identity.max_guesses
        # 0-based index of the guess being waited on
        self.attempt = 0
        self.guesses: List[str] = []
        self.results: List[List[LetterState]] = []
        self.keyboard = KeyboardState()
        self.state = SessionState.AWAITING_GUESS
        self.started_at = clock()
        self.elapsed_ms: Optional[int] = None

    @property
    def won(self) -> bool:
        return self.state is SessionState.WON

    def start(self):
        self.started_at = self.clock()

    def submit(self, raw: str) -> Optional[List[LetterState]]:
        """
        Play a guess. Invalid guesses return None
        and don't count against the player.
        """
        if self.state is not SessionState.AWAITING_GUESS:
            raise WordGuessError(f"The game is over ({self.state.value})")

        guess = raw.strip().lower()
        if not self.corpus.is_valid_guess(guess):
            logger.debug("Rejected guess %r", guess)
            return None

        self.guesses.append(guess)
        if len(self.guesses) == 1:
            # From here on the puzzle counts as played
            self.store.record_assignment(self.identity.save_key, self.puzzle.word, self.guesses)

        states = evaluate(self.puzzle.word, guess)
        self.results.append(states)
        self.keyboard.update(guess, states)

        if guess == self.puzzle.word:
            self.state = SessionState.WON
            self.elapsed_ms = int((self.clock() - self.started_at) * 1000)
            self.store.finalize(self.identity.save_key, self.elapsed_ms)
        elif self.attempt == self.max_guesses - 1:
            self.state = SessionState.LOST
        else:
            self.attempt += 1
        return states

    def interrupt(self):
        if self.state is SessionState.AWAITING_GUESS:
            self.state = SessionState.INTERRUPTED

    def play(self, display, read_line=input) -> SessionState:
        self.start()
        while self.state is SessionState.AWAITING_GUESS:
            display.show_board(self)
            prompt = PROMPT(self.attempt + 1, self.max_guesses, self.word_length)
            try:
                raw = display.ask(prompt, read_line)
            except (KeyboardInterrupt, EOFError):
                self.interrupt()
                break
            self.submit(raw)
        return self.state


def as_count(value, default: int, name: str) -> int:
    """
    Non-numeric, missing or zero values
    fall back to the default.
    """
    try:
        number = int(value)
    except (TypeError, ValueError):
        return default
    if number == 0:
        return default
    if number < 0:
        raise ConfigurationError(f"{name} must be positive, got {number}")
    return number


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Terminal word guessing game")
    parser.add_argument("word_length", nargs="?", help=f"Letters per word (default {DEFAULT_WORD_LENGTH})")
    parser.add_argument("max_guesses", nargs="?", help="Guesses allowed (default word length + 1)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug logging")
    args = parser.parse_args(argv)

    args.word_length = as_count(args.word_length, DEFAULT_WORD_LENGTH, "Word length")
    args.max_guesses = as_count(args.max_guesses, args.word_length + 1, "Guess count")
    return args


def run(word_length, max_guesses, game=None, user=None, save_location=SAVE_LOCATION,
        fetch=get_maybe_cached, display=None, read_line=input) -> SessionState:
    identity = PuzzleIdentity(game, user, word_length, max_guesses)
    display = display if display is not None else Display()

    corpus = load_corpus(word_length, fetch)

    # Solo games are never saved
    store = ProgressStore(save_location if identity.shared else None)
    store.load()
    puzzle = select_puzzle(corpus.candidates, identity, len(store.get(identity.save_key)))

    with store.session():
        display.title(puzzle, identity)
        session = Session(puzzle, corpus, identity, store)
        try:
            state = session.play(display, read_line)
        except KeyboardInterrupt:
            session.interrupt()
            state = session.state

        if state is SessionState.INTERRUPTED:
            display.interrupted()
            return state

        display.show_board(session)
        display.banner(session)
    return state


def main(argv=None) -> int:
    try:
        args = parse_args(argv)
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s"
    )
    # Treat termination like CTRL-C so progress is still saved
    signal.signal(signal.SIGTERM, signal.default_int_handler)

    game = os.environ.get("GAME")
    user = getpass.getuser() if game is not None else None
    try:
        run(args.word_length, args.max_guesses, game, user)
    except WordGuessError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print()
    return 0

if __name__ == "__main__":
    sys.exit(main())
