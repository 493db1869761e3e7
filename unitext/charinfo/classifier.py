# charinfo/classifier.py

import unicodedata
from dataclasses import dataclass
from typing import Optional

from fontTools import unicodedata as ftunicodedata

BASIC_LATIN = 'Basic Latin'

@dataclass(frozen=True)
class Classification:
    """Unicode metadata for one code point."""
    category: str
    script: str
    block: str

    @property
    def is_letter(self) -> bool:
        return self.category.startswith('L')

    @property
    def is_basic_latin(self) -> bool:
        return self.block == BASIC_LATIN

class CharacterClassifier:
    """
    Looks up category, script and block for a single character.

    Category comes from the interpreter's unicodedata; block and script
    from fontTools' copy of the UCD. Unassigned code points have no
    metadata and classify as None.
    """

    def classify(self, char: str) -> Optional[Classification]:
        category = unicodedata.category(char)
        if category == 'Cn':
            return None
        code = ftunicodedata.script(char)
        return Classification(
            category=category,
            script=ftunicodedata.script_name(code, default=code),
            block=ftunicodedata.block(char),
        )

    def __call__(self, char: str) -> Optional[Classification]:
        return self.classify(char)
