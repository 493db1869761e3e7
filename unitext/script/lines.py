# script/lines.py

import logging
from typing import Callable, Iterable, Iterator, Optional, Union

from ..errors import StrictViolation
from ..charinfo.classifier import CharacterClassifier, Classification
from .definitions import TransformSpec
from .transformer import Transformer

logger = logging.getLogger(__name__)

Classify = Callable[[str], Optional[Classification]]

class LineTransformer:
    """
    Applies a Transformer to every character of a line.

    Non-letters pass through unless the transformer accepts them (digits
    for styles with digit forms). Letters outside Basic Latin pass through,
    or raise StrictViolation when strict is set.
    """

    def __init__(self, transformer: Union[Transformer, TransformSpec],
                 classifier: Optional[Classify] = None, strict: bool = False):
        if isinstance(transformer, TransformSpec):
            transformer = Transformer(transformer)
        self.transformer = transformer
        self.classify = classifier or CharacterClassifier()
        self.strict = strict

    def _convert(self, char: str, line_number: int) -> str:
        info = self.classify(char)

        if info is None or not info.is_letter:
            # Only digits can be accepted among non-letters
            return self.transformer.transform(char) if self.transformer.accepts(char) else char

        if not info.is_basic_latin:
            if self.strict:
                logger.debug("Strict violation on line %d: %r in %s", line_number, char, info.block)
                raise StrictViolation(char, line_number, info.block)
            return char

        return self.transformer.transform(char)

    def transform_line(self, line: str, line_number: int = 1) -> str:
        """Transform one line; line_number is 1-based and only used for errors."""
        return ''.join(self._convert(char, line_number) for char in line)

    def transform_lines(self, lines: Iterable[str], start: int = 1) -> Iterator[str]:
        """Lazily transform a stream of lines, numbering them from start."""
        for number, line in enumerate(lines, start):
            yield self.transform_line(line, number)

    def check_line(self, line: str) -> Optional[str]:
        """Return the first letter strict mode would reject, or None."""
        for char in line:
            info = self.classify(char)
            if info is not None and info.is_letter and not info.is_basic_latin:
                return char
        return None

def transform_line(line: str, spec: TransformSpec, strict: bool = False,
                   line_number: int = 1, classifier: Optional[Classify] = None) -> str:
    """Transform a single line with spec; raises StrictViolation under strict mode."""
    return LineTransformer(spec, classifier, strict).transform_line(line, line_number)
