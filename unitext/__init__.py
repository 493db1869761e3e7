# __init__.py

from .logger import Logger
from .interface import Interface
from .script import ScriptOptions, ScriptStyle, StyleAxis, resolve, transform_line
from .errors import NoSuchCombination, StrictViolation, UnitextError

__all__ = [
    "Interface", "Logger", "ScriptOptions", "ScriptStyle", "StyleAxis",
    "resolve", "transform_line", "NoSuchCombination", "StrictViolation", "UnitextError",
]
