"""
Hack SDK Error Hierarchy
========================

Exceptions raised by the Hack assembler. Everything derives from
HackError, so one except clause covers the whole toolchain.

Exception Hierarchy
-------------------
HackError (base)
└── AssemblerError (assembler-related)
    ├── AssemblySyntaxError - malformed source line
    │   ├── InvalidJumpError - unknown jump mnemonic in a C-instruction
    │   └── InvalidOpcodeError - unknown computation in a C-instruction
    ├── AddressRangeError - A-instruction literal outside 0..32767
    └── DuplicateSymbolError - symbol rebound to a different address

Every assembler error is fatal. There is no warning severity and no
local recovery: the first malformed line stops the translation.

Error messages follow this format:
    filename:line:column: error: description
    source_line_text
        ^ (pointer to error location)
    hint: suggestion for fixing (when available)
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class HackError(Exception):
    """
    Base exception for all Hack SDK errors.

        try:
            assembler.assemble_file("Prog.asm")
        except HackError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    Position of an error in a source file; line and column count from 1.
    Strings assembled without a file use the name "<input>".
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"


# =============================================================================
# Assembler Exceptions
# =============================================================================

class AssemblerError(HackError):
    """
    A fatal error in one source line.

    The rendered message puts the location first, then the offending
    line with a caret under the column, then an optional hint.
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        self.source_line = source_line
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Example:
            Max.asm:7:1: error: 'D+X' is an invalid opcode
                D=D+X
                ^
        """
        parts = []

        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        if self.source_line is not None and self.location is not None:
            parts.append(f"    {self.source_line}")
            if self.location.column > 0:
                padding = " " * (4 + self.location.column - 1)
                parts.append(f"{padding}^")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


class AssemblySyntaxError(AssemblerError):
    """
    Syntax error in assembly source code.

    Examples:
        - Label without a closing parenthesis: (LOOP
        - Empty label: ()
        - A-instruction with no address: @
    """
    pass


class InvalidJumpError(AssemblySyntaxError):
    """
    Unrecognized jump mnemonic in a C-instruction.

    Example:
        0;JMPP  ; Error: JMPP is not a valid jump code
    """

    def __init__(
        self,
        mnemonic: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
        valid_mnemonics: Optional[list[str]] = None,
    ):
        self.mnemonic = mnemonic
        self.valid_mnemonics = valid_mnemonics or []

        hint = None
        if self.valid_mnemonics:
            hint = f"valid jump codes: {', '.join(self.valid_mnemonics)}"

        super().__init__(
            f"'{mnemonic}' is not a valid jump code",
            location=location,
            hint=hint,
            source_line=source_line,
        )


class InvalidOpcodeError(AssemblySyntaxError):
    """
    Unrecognized computation expression in a C-instruction.

    The computation must match one of the 28 fixed forms verbatim, so
    operand order and spacing matter: "A+D" and "D + A" are both rejected.
    """

    def __init__(
        self,
        computation: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
        hint: Optional[str] = None,
    ):
        self.computation = computation
        super().__init__(
            f"'{computation}' is an invalid opcode",
            location=location,
            hint=hint,
            source_line=source_line,
        )


class AddressRangeError(AssemblerError):
    """
    A-instruction literal does not fit in 15 bits.

    The A-instruction reserves the top bit to mark the instruction type,
    leaving 0..32767 for the literal value.

    value is the parsed int, or the literal's digits when the literal is
    too long to be worth converting.
    """

    def __init__(
        self,
        value: int | str,
        maximum: int,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.value = value
        self.maximum = maximum

        shown = str(value)
        if len(shown) > 20:
            shown = f"{shown[:10]}...({len(shown)} digits)"

        super().__init__(
            f"the value {shown} is too big to use in an A instruction",
            location=location,
            hint=f"A instruction literals must be in the range 0 to {maximum}",
            source_line=source_line,
        )


class DuplicateSymbolError(AssemblerError):
    """
    Symbol bound to a second, different address.

    Raised when a label is defined twice at different positions, or when a
    label tries to rebind a predefined symbol such as SP or R3.
    """

    def __init__(
        self,
        symbol: str,
        existing: int,
        requested: int,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.symbol = symbol
        self.existing = existing
        self.requested = requested
        super().__init__(
            f"duplicate symbol '{symbol}'",
            location=location,
            hint=f"'{symbol}' is already bound to address {existing}",
            source_line=source_line,
        )
