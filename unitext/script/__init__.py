# script/__init__.py

from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Iterator, Optional

from .definitions import IDENTITY, ScriptDefinitions, StyleAxis, TransformSpec, combination_key
from .resolver import StyleResolver, parse_axis, resolve
from .transformer import Transformer
from .lines import LineTransformer, transform_line

@dataclass
class ScriptOptions:
    """Per-run conversion options."""
    axes: FrozenSet[StyleAxis] = field(default_factory=frozenset)
    strict: bool = False

class ScriptStyle:
    """
    Coordinates one conversion run.

    Component Hierarchy:
    ScriptDefinitions → StyleResolver → Transformer → LineTransformer
    """
    def __init__(self, options: Optional[ScriptOptions] = None,
                 definitions: Optional[ScriptDefinitions] = None,
                 classifier=None, names: Iterable[str] = ()):
        """
        Resolve the requested axes once; raises NoSuchCombination up front.

        Args:
            options: axes and strict flag for this run
            definitions: registry to resolve against (default table if None)
            classifier: callable returning a Classification for a character
            names: extra axis names for the string entry point, merged with options.axes
        """
        self.options = options or ScriptOptions()
        self.definitions = definitions or ScriptDefinitions()
        self.resolver = StyleResolver(self.definitions)
        names = list(names) + [axis.value for axis in self.options.axes]
        self.spec = self.resolver.resolve_names(names)
        self.transformer = Transformer(self.spec)
        self.lines = LineTransformer(self.transformer, classifier, self.options.strict)

    def transform_line(self, line: str, line_number: int = 1) -> str:
        return self.lines.transform_line(line, line_number)

    def transform_lines(self, lines: Iterable[str]) -> Iterator[str]:
        return self.lines.transform_lines(lines)

__all__ = [
    'IDENTITY', 'ScriptDefinitions', 'StyleAxis', 'TransformSpec', 'combination_key',
    'StyleResolver', 'parse_axis', 'resolve', 'Transformer', 'LineTransformer',
    'transform_line', 'ScriptOptions', 'ScriptStyle',
]
