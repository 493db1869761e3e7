# script/transformer.py

from .definitions import TransformSpec

UPPERCASE = frozenset('ABCDEFGHIJKLMNOPQRSTUVWXYZ')
LOWERCASE = frozenset('abcdefghijklmnopqrstuvwxyz')
DIGITS = frozenset('0123456789')

class Transformer:
    """
    Converts single characters to the styled form described by a TransformSpec.

    Stateless after construction. Characters the TransformSpec does not accept are
    returned unchanged.
    """

    def __init__(self, spec: TransformSpec):
        self.spec = spec
        self._accepted = UPPERCASE if spec.uppercase_only else UPPERCASE | LOWERCASE
        if spec.digit_base is not None:
            self._accepted = self._accepted | DIGITS

    def accepts(self, char: str) -> bool:
        """True if this combination has a styled form for char."""
        return char in self._accepted

    def transform(self, char: str) -> str:
        """Return the styled form of char, or char itself if not accepted."""
        if not self.accepts(char):
            return char

        literal = self.spec.exceptions.get(char)
        if literal is not None:
            return literal

        if char in DIGITS:
            return chr(self.spec.digit_base + ord(char) - ord('0'))
        if char in LOWERCASE:
            return chr(self.spec.letter_base + self.spec.lowercase_offset + ord(char) - ord('a'))
        return chr(self.spec.letter_base + ord(char) - ord('A'))

    def __call__(self, char: str) -> str:
        return self.transform(char)

    def __repr__(self) -> str:
        return f"Transformer({self.spec.key or 'identity'!r})"
