"""Split Daedalus source into documentation comment / declaration pairs."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from .errors import MalformedBlockError
from .models import RawBlock

log = logging.getLogger(__name__)

COMMENT_MARKER = "///"
TERMINATOR = "{};"


class _Cursor:
    """Position in the input, with the 1-based line number kept in step."""

    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.line = 1

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def advance_to(self, pos: int) -> None:
        self.line += self.text.count("\n", self.pos, pos)
        self.pos = pos

    def skip_whitespace(self) -> None:
        pos = self.pos
        while pos < len(self.text) and self.text[pos].isspace():
            pos += 1
        self.advance_to(pos)

    def rest(self) -> str:
        return self.text[self.pos :]


def scan_blocks(text: str) -> Iterator[RawBlock]:
    """Yield one RawBlock per documented declaration, in source order.

    Whitespace between blocks is skipped. Anything else that is not a
    ``///`` comment run followed by a ``{};``-terminated declaration raises
    MalformedBlockError carrying the remaining input.
    """
    cursor = _Cursor(text.replace("\r\n", "\n"))

    while True:
        cursor.skip_whitespace()
        if cursor.at_end():
            return

        if not cursor.text.startswith(COMMENT_MARKER, cursor.pos):
            raise MalformedBlockError(
                "expected a /// documentation comment", cursor.rest(), cursor.line
            )

        start, start_line = cursor.pos, cursor.line
        lines: list[str] = []
        line_numbers: list[int] = []
        while not cursor.at_end() and cursor.text.startswith(
            COMMENT_MARKER, cursor.pos
        ):
            end = cursor.text.find("\n", cursor.pos)
            if end == -1:
                end = len(cursor.text)
            lines.append(cursor.text[cursor.pos : end])
            line_numbers.append(cursor.line)
            cursor.advance_to(end)
            cursor.skip_whitespace()

        terminator = cursor.text.find(TERMINATOR, cursor.pos)
        if cursor.at_end() or terminator == -1:
            raise MalformedBlockError(
                f"documentation comment is not followed by a "
                f"'{TERMINATOR}'-terminated declaration",
                cursor.text[start:],
                start_line,
            )

        block = RawBlock(
            comment_lines=tuple(lines),
            comment_line_numbers=tuple(line_numbers),
            declaration=cursor.text[cursor.pos : terminator],
            line_number=start_line,
            declaration_line=cursor.line,
        )
        log.debug(
            "Scanned block at line %d (%d comment lines)",
            block.line_number,
            len(lines),
        )
        yield block
        cursor.advance_to(terminator + len(TERMINATOR))
