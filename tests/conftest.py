import pytest

from corpus import Corpus

ACCEPTANCE = [
    "crane", "stare", "eerie", "eager", "plane", "speed",
    "erase", "hello", "lolly", "slate", "adieu", "audio",
]
CANDIDATES = ["crane", "plane", "slate", "adieu", "audio"]


class FakeClock:
    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now


@pytest.fixture
def corpus():
    return Corpus(5, list(ACCEPTANCE), list(CANDIDATES))


@pytest.fixture
def clock():
    return FakeClock()
