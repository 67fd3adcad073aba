"""High-score storage."""

from __future__ import annotations

from dataclasses import dataclass
from os import PathLike

SCORES_FILE = "scores.txt"
MAX_SCORES = 100
MAX_NAME_LENGTH = 49


@dataclass(frozen=True)
class ScoreEntry:
    """One player's recorded score."""

    name: str
    score: int


def _parse_scores(text: str) -> list[ScoreEntry]:
    entries: list[ScoreEntry] = []
    tokens = iter(text.split())
    for name in tokens:
        if len(entries) >= MAX_SCORES:
            break
        value = next(tokens, None)
        if value is None:
            break
        try:
            entries.append(ScoreEntry(name, int(value)))
        except ValueError:
            break
    return entries


def _read_text(path: str | PathLike[str]) -> str | None:
    try:
        with open(path, encoding="utf-8") as handle:
            return handle.read()
    except OSError:
        return None


def read_scores(path: str | PathLike[str] = SCORES_FILE) -> list[ScoreEntry]:
    """Read stored scores; a missing file gives an empty list."""
    text = _read_text(path)
    return [] if text is None else _parse_scores(text)


def save_score(
    name: str, score: int, path: str | PathLike[str] = SCORES_FILE
) -> list[ScoreEntry]:
    """Add a score, keep the table sorted highest first, and write it back."""
    entries = read_scores(path)
    if len(entries) < MAX_SCORES:
        entries.append(ScoreEntry(name[:MAX_NAME_LENGTH], score))
    entries.sort(key=lambda entry: entry.score, reverse=True)
    with open(path, "w", encoding="utf-8") as handle:
        handle.writelines(f"{entry.name} {entry.score}\n" for entry in entries)
    return entries


def format_scores(path: str | PathLike[str] = SCORES_FILE) -> str:
    """Return the score table as text ready to print."""
    text = _read_text(path)
    if text is None:
        return "No scores available.\n"
    lines = [f"{entry.name} {entry.score}\n" for entry in _parse_scores(text)]
    return "Top Scores:\n" + "".join(lines)