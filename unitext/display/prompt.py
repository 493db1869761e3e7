# display/prompt.py

from typing import Callable, Iterator, Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.validation import Validator, ValidationError
from prompt_toolkit.formatted_text import FormattedText

class StrictLineValidator(Validator):
    """Rejects a line before it is accepted if it holds a non-Basic-Latin letter."""

    def __init__(self, check: Callable[[str], Optional[str]]):
        self.check = check

    def validate(self, document):
        bad = self.check(document.text)
        if bad is not None:
            raise ValidationError(
                message=f"{bad!r} (U+{ord(bad):04X}) is not a Basic Latin letter",
                cursor_position=document.text.index(bad),
            )

class DisplayPrompt:
    """Interactive line source for conversion."""

    def __init__(self, session: Optional[PromptSession] = None, prefix: str = "> "):
        self.session = session or PromptSession(complete_while_typing=False)
        self._prefix = prefix

    def lines(self, validator: Optional[Validator] = None) -> Iterator[str]:
        """Yield lines (newline-terminated) until EOF or Ctrl-C."""
        while True:
            try:
                text = self.session.prompt(
                    FormattedText([("class:prompt", self._prefix)]),
                    validator=validator,
                    validate_while_typing=False,
                )
            except (EOFError, KeyboardInterrupt):
                return
            yield text + "\n"
