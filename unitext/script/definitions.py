# script/definitions.py

from enum import Enum
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterable, Mapping, Optional

class StyleAxis(Enum):
    """One independent stylistic dimension. Values are the canonical names."""
    BOLD = 'bold'
    ITALIC = 'italic'
    FRAKTUR = 'fraktur'
    SCRIPT = 'script'
    DOUBLE_STRUCK = 'double-struck'
    SANS_SERIF = 'sans-serif'
    MONOSPACE = 'monospace'
    REGIONAL_INDICATOR = 'regional-indicator'

def combination_key(axes: Iterable[StyleAxis]) -> str:
    """Order-independent registry key: sorted, deduplicated axis names joined by '+'."""
    return '+'.join(sorted({axis.value for axis in axes}))

@dataclass(frozen=True)
class TransformSpec:
    """
    Numeric recipe for one registered style combination.

    letter_base is the code point of styled 'A'; digit_base the code point
    of styled '0' (None when the style has no digits). Exceptions map a
    source character to its literal styled form and win over the arithmetic.
    """
    axes: FrozenSet[StyleAxis]
    letter_base: int
    digit_base: Optional[int] = None
    lowercase_offset: int = 26
    exceptions: Mapping[str, str] = field(default_factory=dict)
    uppercase_only: bool = False

    @property
    def key(self) -> str:
        return combination_key(self.axes)

    @property
    def is_identity(self) -> bool:
        return not self.axes

IDENTITY = TransformSpec(axes=frozenset(), letter_base=ord('A'), lowercase_offset=32)

# Letters the Mathematical Alphanumeric Symbols block leaves out because
# Letterlike Symbols already had them.
SCRIPT_EXCEPTIONS = {
    'B': 'ℬ', 'E': 'ℰ', 'F': 'ℱ', 'H': 'ℋ', 'I': 'ℐ',
    'L': 'ℒ', 'M': 'ℳ', 'R': 'ℛ',
    'e': 'ℯ', 'g': 'ℊ', 'o': 'ℴ',
}
FRAKTUR_EXCEPTIONS = {
    'C': 'ℭ', 'H': 'ℌ', 'I': 'ℑ', 'R': 'ℜ', 'Z': 'ℨ',
}
DOUBLE_STRUCK_EXCEPTIONS = {
    'C': 'ℂ', 'H': 'ℍ', 'N': 'ℕ', 'P': 'ℙ',
    'Q': 'ℚ', 'R': 'ℝ', 'Z': 'ℤ',
}
ITALIC_EXCEPTIONS = {'h': 'ℎ'}

B, I, F, S = StyleAxis.BOLD, StyleAxis.ITALIC, StyleAxis.FRAKTUR, StyleAxis.SCRIPT
D, SS, M, RI = (StyleAxis.DOUBLE_STRUCK, StyleAxis.SANS_SERIF,
                StyleAxis.MONOSPACE, StyleAxis.REGIONAL_INDICATOR)

# (axes, letter_base, digit_base, extra settings)
BASE_COMBINATIONS = (
    ((B,),         0x1D400, 0x1D7CE, {}),
    ((I,),         0x1D434, None,    {'exceptions': ITALIC_EXCEPTIONS}),
    ((B, I),       0x1D468, None,    {}),
    ((S,),         0x1D49C, None,    {'exceptions': SCRIPT_EXCEPTIONS}),
    ((B, S),       0x1D4D0, None,    {}),
    ((F,),         0x1D504, None,    {'exceptions': FRAKTUR_EXCEPTIONS}),
    ((D,),         0x1D538, 0x1D7D8, {'exceptions': DOUBLE_STRUCK_EXCEPTIONS}),
    ((B, F),       0x1D56C, None,    {}),
    ((SS,),        0x1D5A0, 0x1D7E2, {}),
    ((B, SS),      0x1D5D4, 0x1D7EC, {}),
    ((I, SS),      0x1D608, None,    {}),
    ((B, I, SS),   0x1D63C, None,    {}),
    ((M,),         0x1D670, 0x1D7F6, {}),
    ((RI,),        0x1F1E6, None,    {'uppercase_only': True}),
)

class ScriptDefinitions:
    """
    Registry of legal style combinations keyed by combination_key().

    Built once from BASE_COMBINATIONS (or a caller-supplied table) and
    never mutated afterwards.
    """

    def __init__(self, table: Optional[Iterable] = None):
        self.specs: Dict[str, TransformSpec] = self._create_specs(
            BASE_COMBINATIONS if table is None else table
        )

    @staticmethod
    def _create_specs(table: Iterable) -> Dict[str, TransformSpec]:
        specs = {}
        used_bases = set()

        for axes, letter_base, digit_base, extra in table:
            spec = TransformSpec(frozenset(axes), letter_base, digit_base, **extra)
            if not spec.axes:
                raise ValueError("The empty combination is reserved for the identity transform")
            if spec.key in specs:
                raise ValueError(f"Duplicate style combination '{spec.key}'")

            # Overlapping bases would make two styles share output characters
            bases = {letter_base} | ({digit_base} if digit_base is not None else set())
            if bases & used_bases:
                raise ValueError(f"Base code point of '{spec.key}' is already registered")
            for source, target in spec.exceptions.items():
                if len(source) != 1 or len(target) != 1:
                    raise ValueError(f"Exception {source!r} -> {target!r} in '{spec.key}' "
                                     "must map one character to one character")

            used_bases |= bases
            specs[spec.key] = spec

        return specs

    def get_spec(self, key: str) -> Optional[TransformSpec]:
        """Get a registered spec by combination key."""
        return self.specs.get(key)

    def __contains__(self, key: str) -> bool:
        return key in self.specs

    def __iter__(self):
        return iter(self.specs.values())

    def __len__(self) -> int:
        return len(self.specs)
