"""
Hack Instruction Encoder
========================

This module turns logical source lines into partially assembled
instructions. Each non-blank line is classified by its first character:

- `@value` / `@symbol`: A-instruction
- `(NAME)`: label, binds NAME to the index of the next instruction
- anything else: C-instruction `[dest=]comp[;jump]`

A-instructions that name a symbol cannot be finished yet, because the
symbol may be a label defined further down. They are emitted as
SymbolicAddress placeholders and finished by the resolver once the whole
source has been encoded.

C-instruction Layout
--------------------
    111a cccc ccdd djjj

Example:
    D=D+A;JGT -> 111 0 000010 010 001 -> 1110000010010001
"""

import logging
import re
from dataclasses import dataclass
from typing import Iterable, Union

from hack_sdk.assembler.lexer import SourceLine
from hack_sdk.assembler.symbols import SymbolTable
from hack_sdk.cpu import (
    COMP_TABLE,
    COMP_SHIFT,
    C_INSTRUCTION_PREFIX,
    DEST_SHIFT,
    JUMP_TABLE,
    MAX_ADDRESS,
    dest_bits,
)
from hack_sdk.errors import (
    AddressRangeError,
    AssemblySyntaxError,
    InvalidJumpError,
    InvalidOpcodeError,
)


logger = logging.getLogger(__name__)

_DECIMAL = re.compile(r"[0-9]+")
_MAX_ADDRESS_DIGITS = len(str(MAX_ADDRESS))


# =============================================================================
# Partially Assembled Instructions
# =============================================================================

@dataclass(frozen=True)
class Complete:
    """A finished 16-bit instruction word."""
    word: int
    source: SourceLine


@dataclass(frozen=True)
class SymbolicAddress:
    """An A-instruction whose address is a symbol awaiting resolution."""
    name: str
    source: SourceLine


PartialInstruction = Union[Complete, SymbolicAddress]


# =============================================================================
# Encoder
# =============================================================================

class Encoder:
    """
    Encodes logical lines into partially assembled instructions.

    The encoder owns the instruction list and adds labels to the shared
    symbol table. It never resolves symbolic addresses itself.

    Usage:
        encoder = Encoder(SymbolTable())
        encoder.encode_lines(Lexer(source).lines())
        partial = encoder.instructions
    """

    def __init__(self, symbols: SymbolTable):
        self.symbols = symbols
        self._instructions: list[PartialInstruction] = []

    @property
    def instructions(self) -> list[PartialInstruction]:
        """The instructions encoded so far, in program order."""
        return self._instructions

    def encode_lines(self, lines: Iterable[SourceLine]) -> list[PartialInstruction]:
        """Encode every line and return the full instruction list."""
        for line in lines:
            self.encode_line(line)

        logger.debug(f"Encoded {len(self._instructions)} instructions")
        return self._instructions

    def encode_line(self, line: SourceLine) -> None:
        """
        Encode one logical line.

        Blank lines are ignored. Labels bind a symbol and emit nothing.

        Raises:
            AssemblerError: If the line cannot be encoded
        """
        text = line.stripped
        if not text:
            return

        if text[0] == "@":
            self._instructions.append(self._encode_a_instruction(text, line))
        elif text[0] == "(":
            self._define_label(text, line)
        else:
            word = self._encode_c_instruction(text, line)
            self._instructions.append(Complete(word, line))

    # =========================================================================
    # A-Instructions
    # =========================================================================

    def _encode_a_instruction(self, text: str, line: SourceLine) -> PartialInstruction:
        operand = text[1:]
        if not operand:
            raise AssemblySyntaxError(
                "missing address after '@'",
                location=line.location(),
                source_line=line.stripped,
            )

        if _DECIMAL.fullmatch(operand):
            digits = operand.lstrip("0") or "0"
            # Too many digits to fit; never hand these to int()
            if len(digits) > _MAX_ADDRESS_DIGITS:
                raise AddressRangeError(
                    digits,
                    MAX_ADDRESS,
                    location=line.location(1),
                    source_line=line.stripped,
                )
            value = int(digits)
            if value > MAX_ADDRESS:
                raise AddressRangeError(
                    value,
                    MAX_ADDRESS,
                    location=line.location(1),
                    source_line=line.stripped,
                )
            return Complete(value, line)

        return SymbolicAddress(operand, line)

    # =========================================================================
    # Labels
    # =========================================================================

    def _define_label(self, text: str, line: SourceLine) -> None:
        if not text.endswith(")") or len(text) < 2:
            raise AssemblySyntaxError(
                "label is missing its closing ')'",
                location=line.location(),
                source_line=line.stripped,
            )

        name = text[1:-1]
        if not name:
            raise AssemblySyntaxError(
                "empty label name",
                location=line.location(),
                source_line=line.stripped,
            )

        self.symbols.define_label(
            name,
            len(self._instructions),
            location=line.location(1),
            source_line=line.stripped,
        )

    # =========================================================================
    # C-Instructions
    # =========================================================================

    def _encode_c_instruction(self, text: str, line: SourceLine) -> int:
        computation = text
        offset = 0

        dest = 0
        if "=" in computation:
            dest_name, computation = computation.split("=", 1)
            dest = dest_bits(dest_name)
            offset = len(dest_name) + 1

        jump = 0
        if ";" in computation:
            computation, jump_name = computation.split(";", 1)
            if jump_name not in JUMP_TABLE:
                raise InvalidJumpError(
                    jump_name,
                    location=line.location(offset + len(computation) + 1),
                    source_line=line.stripped,
                    valid_mnemonics=list(JUMP_TABLE),
                )
            jump = JUMP_TABLE[jump_name]

        comp = COMP_TABLE.get(computation)
        if comp is None:
            hint = None
            if computation.replace(" ", "") in COMP_TABLE:
                hint = "computations may not contain spaces"
            raise InvalidOpcodeError(
                computation,
                location=line.location(offset),
                source_line=line.stripped,
                hint=hint,
            )

        return C_INSTRUCTION_PREFIX | comp << COMP_SHIFT | dest << DEST_SHIFT | jump


# =============================================================================
# Convenience Function
# =============================================================================

def encode_instruction(text: str, symbols: SymbolTable | None = None) -> PartialInstruction | None:
    """
    Encode a single instruction line.

    Returns:
        The partial instruction, or None for blank lines and labels
    """
    encoder = Encoder(symbols if symbols is not None else SymbolTable())
    encoder.encode_line(SourceLine(text, 1))
    return encoder.instructions[0] if encoder.instructions else None
