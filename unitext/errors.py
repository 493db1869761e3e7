# errors.py

from typing import FrozenSet, Iterable, Optional


class UnitextError(Exception):
    """Base class for every error raised by unitext."""


class NoSuchCombination(UnitextError):
    """No registered transformer exists for the requested style axes."""

    def __init__(self, axes: Iterable, message: Optional[str] = None):
        self.axes: FrozenSet = frozenset(axes)
        names = sorted(getattr(a, "value", str(a)) for a in self.axes)
        super().__init__(message or f"no such style combination: {'+'.join(names)}")


class UnknownAxis(NoSuchCombination):
    """A style name that does not name any axis."""

    def __init__(self, name: str):
        self.name = name
        super().__init__([name], f"unknown style: {name!r}")


class StrictViolation(UnitextError):
    """
    A letter outside Basic Latin was met while strict mode is active.

    Carries the offending character, the 1-based line number and the
    block the character belongs to.
    """

    def __init__(self, char: str, line_number: int, block: str):
        self.char = char
        self.line_number = line_number
        self.block = block
        super().__init__(
            f"line {line_number}: {char!r} (U+{ord(char):04X}) "
            f"is a letter from block {block!r}, not Basic Latin"
        )


class UnknownCharacterName(UnitextError, ValueError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"no character named {name!r}")


class UnknownBlock(UnitextError, ValueError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"no such block: {name!r}")


class UnknownCategory(UnitextError, ValueError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"no such category: {name!r}")


class InvalidPattern(UnitextError, ValueError):
    def __init__(self, pattern: str, reason: str):
        self.pattern = pattern
        super().__init__(f"invalid pattern {pattern!r}: {reason}")


class InputDecodeError(UnitextError, ValueError):
    """Input that is not valid UTF-8."""

    def __init__(self, source: str, error: UnicodeDecodeError):
        self.source = source
        self.byte = error.object[error.start]
        super().__init__(f"{source}: not valid UTF-8 (byte 0x{self.byte:02x}: {error.reason})")
