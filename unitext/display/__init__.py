# display/__init__.py

from .output import DisplayOutput
from .prompt import DisplayPrompt, StrictLineValidator

class Display:
    """
    Coordinates terminal display components.

    Component Hierarchy:
    DisplayOutput (results, errors) + DisplayPrompt (interactive input)
    """
    def __init__(self, output: DisplayOutput = None, prompt: DisplayPrompt = None):
        self.output = output or DisplayOutput()
        self._prompt = prompt

    @property
    def prompt(self) -> DisplayPrompt:
        """Created on first use so non-interactive runs never touch the terminal."""
        if self._prompt is None:
            self._prompt = DisplayPrompt()
        return self._prompt

__all__ = ['Display', 'DisplayOutput', 'DisplayPrompt', 'StrictLineValidator']
