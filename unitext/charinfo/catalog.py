# charinfo/catalog.py

import re
import sys
import unicodedata
from typing import Iterator, List, Optional, Tuple

from fontTools.unicodedata import Blocks, Scripts

from ..errors import UnknownBlock, UnknownCategory
from .classifier import CharacterClassifier
from .lookup import CharacterRecord, iter_code_points

CATEGORIES = {
    'Lu': 'Uppercase Letter',
    'Ll': 'Lowercase Letter',
    'Lt': 'Titlecase Letter',
    'Lm': 'Modifier Letter',
    'Lo': 'Other Letter',
    'Mn': 'Nonspacing Mark',
    'Mc': 'Spacing Mark',
    'Me': 'Enclosing Mark',
    'Nd': 'Decimal Number',
    'Nl': 'Letter Number',
    'No': 'Other Number',
    'Pc': 'Connector Punctuation',
    'Pd': 'Dash Punctuation',
    'Ps': 'Open Punctuation',
    'Pe': 'Close Punctuation',
    'Pi': 'Initial Punctuation',
    'Pf': 'Final Punctuation',
    'Po': 'Other Punctuation',
    'Sm': 'Math Symbol',
    'Sc': 'Currency Symbol',
    'Sk': 'Modifier Symbol',
    'So': 'Other Symbol',
    'Zs': 'Space Separator',
    'Zl': 'Line Separator',
    'Zp': 'Paragraph Separator',
    'Cc': 'Control',
    'Cf': 'Format',
    'Cs': 'Surrogate',
    'Co': 'Private Use',
    'Cn': 'Unassigned',
}

MAJOR_CLASSES = {
    'L': 'Letter',
    'M': 'Mark',
    'N': 'Number',
    'P': 'Punctuation',
    'S': 'Symbol',
    'Z': 'Separator',
    'C': 'Other',
}

NO_BLOCK = 'No_Block'

def list_categories() -> List[Tuple[str, str]]:
    """General Category values with their long names."""
    return list(CATEGORIES.items())

def list_blocks() -> List[Tuple[int, int, str]]:
    """(first, last, name) for every named block, in code point order."""
    ends = list(Blocks.RANGES[1:]) + [sys.maxunicode + 1]
    return [
        (start, end - 1, name)
        for start, end, name in zip(Blocks.RANGES, ends, Blocks.VALUES)
        if name != NO_BLOCK
    ]

def list_scripts() -> List[Tuple[str, str]]:
    """(code, name) for every known script, sorted by name."""
    names = ((code, name.replace('_', ' ')) for code, name in Scripts.NAMES.items())
    return sorted(names, key=lambda item: item[1])

def _loose(name: str) -> str:
    # UAX #44 loose matching: case, spaces, hyphens and underscores are ignored
    return re.sub(r'[\s_-]+', '', name).lower()

def find_block(name: str) -> Tuple[int, int, str]:
    """Find a block by loosely matched name."""
    wanted = _loose(name)
    for block in list_blocks():
        if _loose(block[2]) == wanted:
            return block
    raise UnknownBlock(name)

def block_characters(name: str, classifier: Optional[CharacterClassifier] = None) -> Iterator[CharacterRecord]:
    """Records for the assigned characters of a block."""
    start, end, _ = find_block(name)
    classifier = classifier or CharacterClassifier()
    return (CharacterRecord.from_char(char, classifier) for char in iter_code_points(start, end))

def category_characters(category: str, classifier: Optional[CharacterClassifier] = None) -> Iterator[CharacterRecord]:
    """Records for every assigned character in a General Category or major class."""
    normalized = category[:1].upper() + category[1:].lower()
    # Unassigned code points are never listed
    if normalized == 'Cn' or (normalized not in CATEGORIES and normalized not in MAJOR_CLASSES):
        raise UnknownCategory(category)

    classifier = classifier or CharacterClassifier()
    return (
        CharacterRecord.from_char(char, classifier)
        for char in iter_code_points()
        if unicodedata.category(char).startswith(normalized)
    )
