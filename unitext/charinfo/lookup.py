# charinfo/lookup.py

import re
import sys
import unicodedata
from itertools import islice
from dataclasses import dataclass
from typing import Iterator, Optional

from ..errors import InvalidPattern, UnknownCharacterName
from .classifier import CharacterClassifier

@dataclass(frozen=True)
class CharacterRecord:
    """Everything unitext reports about one character."""
    code_point: int
    char: str
    name: str
    category: str
    block: str
    script: str

    @property
    def label(self) -> str:
        return f"U+{self.code_point:04X}"

    @classmethod
    def from_char(cls, char: str, classifier: Optional[CharacterClassifier] = None) -> "CharacterRecord":
        info = (classifier or CharacterClassifier()).classify(char)
        return cls(
            code_point=ord(char),
            char=char,
            name=unicodedata.name(char, ''),
            category=info.category if info else 'Cn',
            block=info.block if info else 'No_Block',
            script=info.script if info else 'Unknown',
        )

def iter_code_points(start: int = 0, end: int = sys.maxunicode) -> Iterator[str]:
    """Yield every assigned character in [start, end]."""
    for cp in range(start, end + 1):
        char = chr(cp)
        if unicodedata.category(char) != 'Cn':
            yield char

def find_by_name(pattern: str, limit: Optional[int] = None,
                 classifier: Optional[CharacterClassifier] = None) -> Iterator[CharacterRecord]:
    """
    Search character names with a case-insensitive regular expression.

    Results come in ascending code point order. Characters without a
    name (controls, unassigned) never match.
    """
    try:
        regex = re.compile(pattern, re.IGNORECASE)
    except re.error as e:
        raise InvalidPattern(pattern, str(e)) from e

    classifier = classifier or CharacterClassifier()
    matches = (
        CharacterRecord.from_char(char, classifier)
        for char in iter_code_points()
        if regex.search(unicodedata.name(char, ''))
    )
    return islice(matches, limit)

def lookup_name(name: str) -> str:
    """Exact lookup by character name or alias."""
    try:
        return unicodedata.lookup(name)
    except KeyError:
        raise UnknownCharacterName(name) from None
