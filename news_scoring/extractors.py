"""
Default date and word extractors, and the lexicon loader
"""

import re
from typing import Dict, List

import pandas as pd

WORD_PATTERN = re.compile(r"[a-z]+(?:'[a-z]+)?")


def to_timestamp(date: str) -> int:
    """Parse a release date into nanoseconds since the epoch"""
    timestamp = pd.Timestamp(date)
    if timestamp is pd.NaT:
        raise ValueError(f"Missing release date: {date!r}")
    return timestamp.value


def to_words(text: str) -> List[str]:
    """Lower-cased word tokens of a text, in order of appearance"""
    return WORD_PATTERN.findall(text.lower())


def load_lexicon(path: str) -> Dict[str, str]:
    """
    Load a lexicon file mapping words to their root form.

    One entry per line, either 'word,root' or a bare 'word' mapped to
    itself. Blank lines and lines starting with '#' are skipped.

    Args:
        path: UTF-8 text file

    Returns:
        Dictionary {word: root}
    """
    lexicon: Dict[str, str] = {}
    with open(path, 'r', encoding='utf-8') as f:
        for line_no, raw in enumerate(f, 1):
            line = raw.strip()
            if not line or line.startswith('#'):
                continue
            parts = [part.strip() for part in line.split(',')]
            if len(parts) == 1:
                parts.append(parts[0])
            if len(parts) != 2 or not all(parts):
                raise ValueError(f"{path}:{line_no}: expected 'word,root', got {line!r}")
            lexicon[parts[0].lower()] = parts[1].lower()
    return lexicon
