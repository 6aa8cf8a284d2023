"""
WordGuess Progress Store
Author: Brandon Rozek

Keeps every puzzle a player has been dealt,
keyed by game, user, word length and guess
count. The document is read once when the
game starts and written once when it ends.
"""
from contextlib import contextmanager
from pathlib import Path
from typing import Dict, List, Optional
import json
import logging
import os

from wordguess import SessionRecord

logger = logging.getLogger(__name__)


class ProgressStore:
    def __init__(self, path: Optional[Path] = None):
        """
        Without a path nothing is read
        from or written to disk.
        """
        self.path = Path(path) if path is not None else None
        self.save: Dict[str, List[SessionRecord]] = {}
        self.flushed = False

    def load(self) -> Dict[str, List[SessionRecord]]:
        self.save = {}
        if self.path is None:
            return self.save

        try:
            with open(self.path, "r", encoding="utf-8") as file:
                document = json.load(file)
            if not isinstance(document, dict):
                raise ValueError("Save document is not a mapping")
            self.save = {
                str(key): [SessionRecord.from_json(entry) for entry in entries]
                for key, entries in document.items()
            }
        except FileNotFoundError:
            logger.debug("No save file at %s", self.path)
        except (OSError, ValueError, TypeError) as e:
            # History is lost but the game goes on
            logger.debug("Discarding unreadable save file %s: %s", self.path, e)
            self.save = {}
        return self.save

    def get(self, save_key: str) -> List[SessionRecord]:
        return self.save.get(save_key, [])

    def record_assignment(self, save_key: str, word: str, guesses: List[str]) -> SessionRecord:
        """
        Remember that a puzzle was dealt, so it still counts
        if the game is interrupted. The record keeps a reference
        to the guess list and picks up later guesses.
        """
        record = SessionRecord(word, guesses)
        self.save.setdefault(save_key, []).append(record)
        return record

    def finalize(self, save_key: str, elapsed_ms: int):
        records = self.save.get(save_key)
        if not records:
            return
        records[-1].elapsed_ms = elapsed_ms

    def flush(self):
        """
        Write the whole document. Only the first
        call per store does anything.
        """
        if self.flushed or self.path is None:
            return
        self.flushed = True

        document = {
            key: [record.to_json() for record in records]
            for key, records in self.save.items()
        }
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            with open(tmp_path, "w", encoding="utf-8") as file:
                json.dump(document, file)
            os.replace(tmp_path, self.path)
        except OSError as e:
            # A failed save is logged, never raised
            logger.warning("Could not save progress to %s: %s", self.path, e)
            if tmp_path.exists():
                tmp_path.unlink()
            return
        logger.debug("Saved progress to %s", self.path)

    @contextmanager
    def session(self):
        """
        Save on the way out, however
        the game ends.
        """
        try:
            yield self
        finally:
            self.flush()
