from __future__ import annotations

import json
from pathlib import Path
from typing import List, Set

from wordgen.core.errors import WordListError
from wordgen.core.wordsearch import Word, normalize


def load_words(path: str | Path) -> List[Word]:
    """
    Read a JSON array of {"text"|"word": ..., "clue": ...} objects.

    Blank entries and non-objects are skipped; repeated words (after
    normalization) keep their first occurrence.
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        raise WordListError(f"Could not read word file '{path}': {exc}") from exc

    if not isinstance(data, list):
        raise WordListError(f"Word file '{path}' must contain a JSON list")

    words: List[Word] = []
    seen: Set[str] = set()
    for item in data:
        if not isinstance(item, dict):
            continue
        word = Word.from_dict(item)
        key = normalize(word.text)
        if not key or key in seen:
            continue
        seen.add(key)
        words.append(word)
    return words
