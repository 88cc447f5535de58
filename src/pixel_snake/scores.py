# scores.py
from __future__ import annotations
import json
import logging
import os
import tempfile
from typing import Dict, List, Optional, Protocol

from .config import LEADERBOARD_SIZE

logger = logging.getLogger(__name__)


class ScoreStore(Protocol):
    def get(self, mode: str) -> List[int]: ...

    def save(self, mode: str, score: int) -> None: ...


def score_key(mode: str) -> str:
    return f"pixelSnakeTop5_{mode}"


def parse_scores(raw: Optional[str]) -> List[int]:
    """Decode a stored JSON array; anything unreadable counts as no scores."""
    if not raw:
        return []
    try:
        parsed = json.loads(raw)
    except ValueError:
        logger.warning("discarding malformed leaderboard data")
        return []
    if not isinstance(parsed, list):
        logger.warning("discarding non-array leaderboard data")
        return []
    scores = [v for v in parsed if isinstance(v, int) and not isinstance(v, bool)]
    return scores[:LEADERBOARD_SIZE]


def rank(scores: List[int], score: int) -> List[int]:
    """Insert a score and keep the best entries, highest first."""
    ranked = sorted([*scores, score], reverse=True)
    return ranked[:LEADERBOARD_SIZE]


class MemoryScoreStore:
    """Key/value store kept in a dict; holds the same JSON text a file would."""

    def __init__(self, data: Optional[Dict[str, str]] = None) -> None:
        self.data: Dict[str, str] = dict(data or {})

    def get(self, mode: str) -> List[int]:
        return parse_scores(self.data.get(score_key(mode)))

    def save(self, mode: str, score: int) -> None:
        self.data[score_key(mode)] = json.dumps(rank(self.get(mode), score))


class JsonFileScoreStore:
    """
    One ``<key>.json`` file per mode under ``directory``.

    Reads never fail: a missing, unreadable or corrupt file yields an empty
    list. Writes are best effort; errors are logged and dropped so a full
    disk can't take the game down.
    """

    def __init__(self, directory: str) -> None:
        self.directory = directory

    def path(self, mode: str) -> str:
        return os.path.join(self.directory, score_key(mode) + ".json")

    def get(self, mode: str) -> List[int]:
        try:
            with open(self.path(mode), "r", encoding="utf-8") as f:
                raw = f.read()
        except FileNotFoundError:
            return []
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("could not read leaderboard %s: %s", self.path(mode), e)
            return []
        return parse_scores(raw)

    def save(self, mode: str, score: int) -> None:
        scores = rank(self.get(mode), score)
        try:
            os.makedirs(self.directory, exist_ok=True)
            self._write(self.path(mode), scores)
        except OSError as e:
            logger.warning("could not save leaderboard %s: %s", self.path(mode), e)
            return
        logger.info("saved %d to %s leaderboard", score, mode)

    def _write(self, path: str, scores: List[int]) -> None:
        # temp file + rename, so a crash mid-write leaves the old list intact
        fd, tmp = tempfile.mkstemp(dir=self.directory, prefix=".top5-", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(scores, f)
            os.replace(tmp, path)
        except OSError:
            if os.path.exists(tmp):
                os.remove(tmp)
            raise
