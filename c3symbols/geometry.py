"""Positions and ranges inside text documents."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Position:
    """A zero-based line and character (UTF-16 code units) location."""

    line: int = 0
    character: int = 0

    def index_in(self, content: str) -> int:
        """Return the string index in ``content`` that this position points at.

        ``character`` counts UTF-16 code units, as the language server
        protocol requires. A character past the end of its line stops at the
        line end; a line or character past the end of the content raises
        ``ValueError``.
        """
        index = 0
        for _ in range(self.line):
            newline = content.find("\n", index)
            if newline == -1:
                raise ValueError("position line is past the end of the content")
            index = newline + 1

        offset = index
        units = 0
        while units < self.character:
            if offset >= len(content):
                raise ValueError("position character is past the end of the content")
            ch = content[offset]
            if ch == "\n":
                break
            units += 1
            if ord(ch) >= 0x10000:
                # Two UTF-16 code units; never stop halfway past one.
                units += 1
                if units > self.character:
                    break
            offset += 1

        return offset

    def rewind_character(self) -> Position:
        """Return the position one character back on the same line."""
        if self.character > 0:
            return Position(self.line, self.character - 1)
        return self


@dataclass(frozen=True)
class Range:
    """A span between two positions, both ends inclusive."""

    start: Position = field(default_factory=Position)
    end: Position = field(default_factory=Position)

    def has_position(self, position: Position) -> bool:
        """Tell whether ``position`` falls inside this range."""
        line, ch = position.line, position.character
        if not self.start.line <= line <= self.end.line:
            return False
        if line == self.start.line and line == self.end.line:
            return self.start.character <= ch <= self.end.character
        return True

    def is_before_position(self, position: Position) -> bool:
        """Tell whether this range starts after ``position``."""
        return self.start.line > position.line or (
            self.start.line == position.line
            and self.start.character > position.character
        )

    def is_after_position(self, position: Position) -> bool:
        """Tell whether this range ends before ``position``."""
        return self.end.line < position.line or (
            self.end.line == position.line
            and self.end.character < position.character
        )

    def is_after(self, other: Range) -> bool:
        """Tell whether this range ends later than ``other`` does."""
        if self.end.line > other.end.line:
            return True
        return (
            self.end.line == other.end.line
            and self.end.character > other.end.character
        )


def make_range(start_line: int, start_char: int, end_line: int, end_char: int) -> Range:
    """Build a range from its four coordinates."""
    return Range(Position(start_line, start_char), Position(end_line, end_char))