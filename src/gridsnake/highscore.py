# src/gridsnake/highscore.py
from __future__ import annotations
import json
import os
from typing import Protocol


class HighScoreStore(Protocol):
    def read(self) -> int: ...
    def write(self, score: int) -> None: ...


class MemoryHighScore:
    """Keeps the best score for the lifetime of the process."""

    def __init__(self, initial: int = 0):
        self.value = initial
        self.writes = 0

    def read(self) -> int:
        return self.value

    def write(self, score: int) -> None:
        self.value = int(score)
        self.writes += 1


class JsonFileHighScore:
    """
    Best score kept in a small JSON file: {"high_score": <int>}.
    A missing or unreadable file reads as 0.
    """

    def __init__(self, path: str):
        self.path = path

    def read(self) -> int:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
            return max(0, int(data.get("high_score", 0)))
        except (OSError, ValueError, TypeError, AttributeError):
            return 0

    def write(self, score: int) -> None:
        folder = os.path.dirname(self.path)
        if folder:
            os.makedirs(folder, exist_ok=True)
        tmp = self.path + ".tmp"
        try:
            with open(tmp, "w", encoding="utf-8") as f:
                json.dump({"high_score": int(score)}, f)
            os.replace(tmp, self.path)
        except BaseException:
            if os.path.exists(tmp):
                os.remove(tmp)
            raise
