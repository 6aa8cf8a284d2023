"""
WordGuess Leaderboard Viewer
Author: Brandon Rozek
"""
from dataclasses import dataclass
from typing import List, Optional
import argparse

from progress import ProgressStore
from wordguess import SAVE_LOCATION, SessionRecord


@dataclass
class Summary:
    save_key: str
    played: int
    won: int
    average_guesses: Optional[float]
    best_ms: Optional[int]


def summarize(save_key: str, records: List[SessionRecord]) -> Summary:
    wins = [r for r in records if r.won]
    average = None
    best = None
    if wins:
        average = sum(len(r.guesses) for r in wins) / len(wins)
        best = min(r.elapsed_ms for r in wins)
    return Summary(save_key, len(records), len(wins), average, best)


def leaderboard(store: ProgressStore, game: Optional[str] = None) -> List[Summary]:
    summaries = [
        summarize(key, records)
        for key, records in store.save.items()
        if game is None or key.startswith(f"{game}-")
    ]
    # Most wins first, fewest guesses breaks ties
    summaries.sort(key=lambda s: (
        -s.won,
        s.average_guesses if s.average_guesses is not None else float("inf")
    ))
    return summaries

def main(argv=None):
    parser = argparse.ArgumentParser(description="Leaderboard for WordGuess Game")
    parser.add_argument("--game", type=str, help="Only show players of this game.")
    parser.add_argument("--file", type=str, default=str(SAVE_LOCATION), help="Progress file to read.")
    args = vars(parser.parse_args(argv))

    store = ProgressStore(args["file"])
    store.load()

    print("Player / Played / Won / Avg guesses / Best time")
    for s in leaderboard(store, args.get("game")):
        average = f"{s.average_guesses:.2f}" if s.average_guesses is not None else "-"
        best = f"{s.best_ms / 1000:.1f}sec" if s.best_ms is not None else "-"
        print(s.save_key, s.played, s.won, average, best)

if __name__ == "__main__":
    main()
