# script/resolver.py

import re
import logging
from typing import Iterable, Optional

from ..errors import NoSuchCombination, UnknownAxis
from .definitions import IDENTITY, ScriptDefinitions, StyleAxis, TransformSpec, combination_key

logger = logging.getLogger(__name__)

# Alternate spellings accepted by the string entry point
AXIS_ALIASES = {
    'b': StyleAxis.BOLD,
    'i': StyleAxis.ITALIC,
    'gothic': StyleAxis.FRAKTUR,
    'blackletter': StyleAxis.FRAKTUR,
    'cursive': StyleAxis.SCRIPT,
    'doublestruck': StyleAxis.DOUBLE_STRUCK,
    'double': StyleAxis.DOUBLE_STRUCK,
    'blackboard': StyleAxis.DOUBLE_STRUCK,
    'sans': StyleAxis.SANS_SERIF,
    'sansserif': StyleAxis.SANS_SERIF,
    'mono': StyleAxis.MONOSPACE,
    'monospaced': StyleAxis.MONOSPACE,
    'regional': StyleAxis.REGIONAL_INDICATOR,
    'regionalindicator': StyleAxis.REGIONAL_INDICATOR,
    'flag': StyleAxis.REGIONAL_INDICATOR,
}

COMPOUND_SEPARATOR = re.compile(r'[+,\s]+')

def parse_axis(name: str) -> StyleAxis:
    """Map one axis name (canonical value, enum name or alias) to a StyleAxis."""
    normalized = name.strip().lower().replace('_', '-')
    for axis in StyleAxis:
        if normalized == axis.value:
            return axis
    axis = AXIS_ALIASES.get(normalized.replace('-', ''))
    if axis is None:
        raise UnknownAxis(name)
    return axis

class StyleResolver:
    """Finds the single registered combination matching a set of axes."""

    def __init__(self, definitions: Optional[ScriptDefinitions] = None):
        self.definitions = definitions or ScriptDefinitions()

    def resolve(self, axes: Iterable[StyleAxis]) -> TransformSpec:
        """
        Return the TransformSpec registered for exactly these axes.

        The empty set resolves to the identity transform. Anything not in
        the registry raises NoSuchCombination; there is no partial match.
        """
        axes = frozenset(axes)
        if not axes:
            return IDENTITY

        key = combination_key(axes)
        spec = self.definitions.get_spec(key)
        if spec is None:
            logger.debug("No registered combination for %s", key)
            raise NoSuchCombination(axes)
        logger.debug("Resolved %s", key)
        return spec

    def resolve_names(self, names: Iterable[str]) -> TransformSpec:
        """
        String entry point: each name may itself be compound
        ('bold+italic', 'bold,italic'); parts are split, parsed and
        re-sorted before lookup.
        """
        axes = set()
        for name in names:
            for part in COMPOUND_SEPARATOR.split(name):
                if part:
                    axes.add(parse_axis(part))
        return self.resolve(axes)

_default_resolver = StyleResolver()

def resolve(axes: Iterable[StyleAxis]) -> TransformSpec:
    """Resolve against the default registry."""
    return _default_resolver.resolve(axes)
