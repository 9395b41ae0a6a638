"""
Hack Assembly Language Lexer
============================

This module implements the line splitter for Hack assembly language. It
consumes the source text one character at a time, drops `//` comments,
and yields one logical line per physical line.

State Machine
-------------
| State                   | Input   | Action                              |
|-------------------------|---------|-------------------------------------|
| LOOKING_FOR_INSTRUCTION | `/`     | go to ONE_SLASH                     |
| LOOKING_FOR_INSTRUCTION | newline | emit buffered line                  |
| LOOKING_FOR_INSTRUCTION | other   | append to buffer                    |
| ONE_SLASH               | `/`     | go to COMMENT, both slashes dropped |
| ONE_SLASH               | other   | append `/` and the character,       |
|                         |         | back to LOOKING_FOR_INSTRUCTION     |
| COMMENT                 | newline | emit buffered line,                 |
|                         |         | back to LOOKING_FOR_INSTRUCTION     |
| COMMENT                 | other   | discard                             |

At end of input the buffer is emitted once more whatever the state, so a
last line without a trailing newline is not lost.

Whitespace is kept as-is; the encoder trims each line. Blank lines are
emitted too, which keeps line numbers honest for error messages.

Example
-------
>>> from hack_sdk.assembler.lexer import Lexer
>>> for line in Lexer("@2 // two\\nD=A\\n").lines():
...     print(repr(line.text))
'@2 '
'D=A'
''
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator

from hack_sdk.errors import SourceLocation


# =============================================================================
# Lexer State Enumeration
# =============================================================================

class LexerState(Enum):
    """States of the comment-stripping line splitter."""
    LOOKING_FOR_INSTRUCTION = auto()
    ONE_SLASH = auto()
    COMMENT = auto()


# =============================================================================
# Source Line Data Class
# =============================================================================

@dataclass(frozen=True)
class SourceLine:
    """
    One logical line of source with comments removed.

    Attributes:
        text: The buffered characters, untrimmed
        line: Physical line number in source (1-indexed)
        filename: Name of the source file
    """
    text: str
    line: int
    filename: str = "<input>"

    @property
    def stripped(self) -> str:
        """The line with surrounding whitespace removed."""
        return self.text.strip()

    def location(self, offset: int = 0) -> SourceLocation:
        """
        Return a SourceLocation pointing into the stripped text.

        Args:
            offset: Character offset within the stripped text
        """
        indent = len(self.text) - len(self.text.lstrip())
        return SourceLocation(self.filename, self.line, indent + offset + 1)


# =============================================================================
# Lexer Implementation
# =============================================================================

class Lexer:
    """
    Splits Hack assembly source into comment-free logical lines.

    Usage:
        lexer = Lexer(source_text, filename)
        lines = list(lexer.lines())

    Attributes:
        source: The source code being split
        filename: Name of the source file (for error reporting)
    """

    def __init__(self, source: str, filename: str = "<input>"):
        self.source = source
        self.filename = filename

        self._state = LexerState.LOOKING_FOR_INSTRUCTION
        self._buffer: list[str] = []
        self._line = 1

    @property
    def state(self) -> LexerState:
        """Current state of the state machine."""
        return self._state

    def lines(self) -> Iterator[SourceLine]:
        """
        Generate logical lines from the source code.

        Yields:
            SourceLine objects, one per physical line plus the final
            end-of-input flush
        """
        for char in self.source:
            line = self._feed(char)
            if line is not None:
                yield line

        yield self._flush()

    # =========================================================================
    # State Machine
    # =========================================================================

    def _feed(self, char: str) -> SourceLine | None:
        """
        Advance the state machine by one character.

        Returns:
            A completed SourceLine when a line boundary is reached,
            otherwise None
        """
        state = self._state

        if state is LexerState.LOOKING_FOR_INSTRUCTION:
            if char == "/":
                self._state = LexerState.ONE_SLASH
            elif char == "\n":
                return self._end_line()
            else:
                self._buffer.append(char)

        elif state is LexerState.ONE_SLASH:
            if char == "/":
                self._state = LexerState.COMMENT
            else:
                # Lone slash: keep it and the character that followed
                self._state = LexerState.LOOKING_FOR_INSTRUCTION
                self._buffer.append("/")
                self._buffer.append(char)
                if char == "\n":
                    self._line += 1

        elif state is LexerState.COMMENT:
            if char == "\n":
                self._state = LexerState.LOOKING_FOR_INSTRUCTION
                return self._end_line()

        return None

    def _end_line(self) -> SourceLine:
        """Flush the buffer at a newline and move to the next line."""
        line = self._flush()
        self._line += 1
        return line

    def _flush(self) -> SourceLine:
        """Emit the buffered text as a SourceLine and clear the buffer."""
        line = SourceLine("".join(self._buffer), self._line, self.filename)
        self._buffer.clear()
        return line


# =============================================================================
# Convenience Function
# =============================================================================

def split_lines(source: str, filename: str = "<input>") -> list[SourceLine]:
    """Split source into logical lines (see Lexer.lines)."""
    return list(Lexer(source, filename).lines())
