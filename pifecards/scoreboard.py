"""Persistent win counts for the two players."""

from __future__ import annotations

import os
import re

_INT = re.compile(r"\s*([+-]?\d+)")


class Scoreboard:
    """Win counts stored as two integers in a text file."""

    def __init__(self, path: str | os.PathLike[str] = "placar.txt") -> None:
        self.path = path

    def read(self) -> tuple[int, int]:
        """Return the wins of players 1 and 2; a missing file counts as zero."""
        try:
            with open(self.path, encoding="utf-8") as handle:
                text = handle.read()
        except OSError:
            return 0, 0
        scores = [0, 0]
        position = 0
        for index in range(2):
            match = _INT.match(text, position)
            if match is None:
                break
            scores[index] = int(match.group(1))
            position = match.end()
        return scores[0], scores[1]

    def record_win(self, winner: int) -> tuple[int, int]:
        """Add a win for player 1 or 2, save, and return the new counts."""
        first, second = self.read()
        if winner == 1:
            first += 1
        if winner == 2:
            second += 1
        with open(self.path, "w", encoding="utf-8") as handle:
            handle.write(f"{first} {second}")
        return first, second