# interface.py

import sys
from typing import Iterable, Iterator, Optional, Sequence, TextIO

from .logger import Logger
from .errors import InputDecodeError
from .display import Display, StrictLineValidator
from .script import ScriptOptions, ScriptStyle
from .charinfo import (
    CharacterClassifier, CharacterRecord, find_by_name, lookup_name,
    list_categories, list_blocks, list_scripts, block_characters, category_characters,
)

def record_row(record: CharacterRecord) -> tuple:
    return (record.label, record.char, record.name, record.category, record.block, record.script)

class Interface:
    """
    Main entry point that assembles the classifier, script engine and display.
    """

    def __init__(self, logging_enabled: bool = False,
                 log_file: Optional[str] = None,
                 display: Optional[Display] = None):
        """
        Initialize components with optional logging.

        Args:
            logging_enabled: Enable detailed logging.
            log_file: Path to log file. Use "-" for stdout.
            display: Display to write to (a terminal display if None).
        """
        self.logger = Logger(__name__, logging_enabled, log_file)
        self.display = display or Display()
        self.classifier = CharacterClassifier()

    def convert(self, options: ScriptOptions, names: Iterable[str] = (),
                texts: Sequence[str] = (), files: Sequence[str] = (),
                interactive: bool = False, stdin: Optional[TextIO] = None) -> int:
        """
        Convert lines from the first available source and write them out.

        Sources in priority order: literal texts, files, the interactive
        prompt, stdin. Returns the number of lines written. Raises
        NoSuchCombination before reading any input, and StrictViolation
        at the first rejected letter.
        """
        style = ScriptStyle(options, classifier=self.classifier, names=names)
        self.logger.debug(f"Converting with {style.transformer!r}, strict={options.strict}")

        if texts:
            lines = [' '.join(texts) + "\n"]
        elif files:
            lines = self._read_files(files)
        elif interactive:
            validator = StrictLineValidator(style.lines.check_line) if options.strict else None
            lines = self.display.prompt.lines(validator)
        else:
            lines = self._decoded(stdin if stdin is not None else sys.stdin, "<stdin>")

        count = 0
        for converted in style.transform_lines(lines):
            self.display.output.write(converted)
            count += 1
        self.logger.debug(f"Converted {count} lines")
        return count

    def _read_files(self, files: Sequence[str]) -> Iterator[str]:
        for path in files:
            self.logger.debug(f"Reading {path}")
            with open(path, encoding='utf-8') as f:
                yield from self._decoded(f, path)

    def _decoded(self, lines: Iterable[str], source: str) -> Iterator[str]:
        try:
            yield from lines
        except UnicodeDecodeError as e:
            raise InputDecodeError(source, e) from e

    def search(self, pattern: str, limit: Optional[int] = None) -> int:
        """Write every character whose name matches pattern."""
        return self.display.output.write_rows(
            record_row(r) for r in find_by_name(pattern, limit, self.classifier)
        )

    def describe(self, name: str) -> int:
        """Write the character with exactly this name."""
        record = CharacterRecord.from_char(lookup_name(name), self.classifier)
        return self.display.output.write_rows([record_row(record)])

    def categories(self) -> int:
        return self.display.output.write_rows(list_categories())

    def blocks(self) -> int:
        return self.display.output.write_rows(
            (f"U+{start:04X}..U+{end:04X}", name) for start, end, name in list_blocks()
        )

    def scripts(self) -> int:
        return self.display.output.write_rows(list_scripts())

    def block(self, name: str) -> int:
        return self.display.output.write_rows(
            record_row(r) for r in block_characters(name, self.classifier)
        )

    def category(self, name: str) -> int:
        return self.display.output.write_rows(
            record_row(r) for r in category_characters(name, self.classifier)
        )
