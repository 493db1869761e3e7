# display/output.py

import sys
from typing import Iterable, Optional, Sequence, TextIO

from rich.console import Console
from rich.text import Text

class DisplayOutput:
    """Writes converted text and query results through a Rich console."""

    def __init__(self, file: Optional[TextIO] = None, err_file: Optional[TextIO] = None):
        """
        Initialize consoles for regular output and error reporting.

        Args:
            file: Stream for results (stdout if None)
            err_file: Stream for error messages (stderr if None)
        """
        # Plain output: no markup, highlighting or wrapping
        self.console = Console(
            file=file or sys.stdout,
            highlight=False,
            markup=False,
            emoji=False,
            soft_wrap=True,
        )
        self.err_console = Console(
            file=err_file or sys.stderr,
            highlight=False,
            soft_wrap=True,
        )

    def write(self, text: str) -> None:
        """Write text exactly as given; the caller supplies newlines."""
        # Bypasses rendering so tabs and control characters survive
        self.console.file.write(text)
        self.console.file.flush()

    def write_rows(self, rows: Iterable[Sequence]) -> int:
        """Write rows as tab-joined lines; returns the number written."""
        count = 0
        for row in rows:
            self.console.print(Text('\t'.join(str(col) for col in row)))
            count += 1
        return count

    def error(self, message: str) -> None:
        """Report an error on the error console."""
        self.err_console.print(Text(f"error: {message}", style="bold red"))
