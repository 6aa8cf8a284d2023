"""
WordGuess Corpus
Author: Brandon Rozek

Downloads (or reads from the cache) the two
word lists and keeps the words of a given length.
"""
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Set
from urllib.parse import urlparse
import logging
import tempfile

import requests

from wordguess import ACCEPTANCE_URL, CANDIDATE_URL

logger = logging.getLogger(__name__)

DOWNLOAD_TIMEOUT = 30 # seconds


def get_maybe_cached(url: str, cache_folder=None) -> str:
    """
    Return the text behind a URL, keeping a copy
    in the cache folder (the temp directory by default)
    named after the last segment of the URL path.
    """
    if cache_folder is None:
        cache_folder = tempfile.gettempdir()
    file_path = Path(cache_folder) / urlparse(url).path.split("/")[-1]

    try:
        text = file_path.read_text(encoding="utf-8")
        logger.debug("Read %s from cache %s", url, file_path)
        return text
    except (OSError, UnicodeDecodeError):
        logger.debug("Cache miss for %s, downloading", url)

    response = requests.get(url, timeout=DOWNLOAD_TIMEOUT)
    response.raise_for_status()
    text = response.text
    file_path.write_text(text, encoding="utf-8")
    return text


def words_of_length(text: str, word_length: int) -> List[str]:
    words = (line.strip().lower() for line in text.splitlines())
    return [w for w in words if len(w) == word_length]


@dataclass
class Corpus:
    word_length: int
    # Words accepted as guesses
    acceptance: List[str]
    # Words secrets are chosen from
    candidates: List[str]
    _accepted: Set[str] = field(init=False, repr=False)

    def __post_init__(self):
        self._accepted = set(self.acceptance)

    def is_valid_guess(self, guess: str) -> bool:
        """
        Determine if a guess is valid,
        as invalid guesses don't
        get hints or impact guess counts.
        """
        if len(guess) != self.word_length:
            return False

        # Guess needs to be part of our
        # dictionary
        return guess in self._accepted


def load_corpus(word_length: int, fetch=get_maybe_cached) -> Corpus:
    # The two lists don't depend on each other
    with ThreadPoolExecutor(max_workers=2) as pool:
        acceptance_text = pool.submit(fetch, ACCEPTANCE_URL)
        candidate_text = pool.submit(fetch, CANDIDATE_URL)
        acceptance = words_of_length(acceptance_text.result(), word_length)
        candidate_words = words_of_length(candidate_text.result(), word_length)

    accepted = set(acceptance)
    candidates = [w for w in candidate_words if w in accepted]
    logger.debug(
        "Loaded %d acceptable words and %d candidates of length %d",
        len(acceptance), len(candidates), word_length
    )
    return Corpus(word_length, acceptance, candidates)
