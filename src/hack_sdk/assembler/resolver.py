"""
Hack Symbol Resolver
====================

Second pass of the assembler. Walks the encoder's output once, in order,
and replaces every SymbolicAddress with a real address:

1. a bound symbol (predefined or label) uses its address
2. an unbound symbol becomes a variable at the next free data address,
   starting at 16

The resolver must only run after the encoder has seen the whole source.
Otherwise a label referenced before its `(NAME)` line would be taken for
a variable.
"""

import logging
from typing import Iterable

from hack_sdk.assembler.codegen import Complete, PartialInstruction, SymbolicAddress
from hack_sdk.assembler.symbols import SymbolTable


logger = logging.getLogger(__name__)


class Resolver:
    """
    Finalizes partially assembled instructions into words.

    Usage:
        words = Resolver(symbols).resolve(encoder.instructions)
    """

    def __init__(self, symbols: SymbolTable):
        self.symbols = symbols

    def resolve(self, instructions: Iterable[PartialInstruction]) -> list[int]:
        """Return the final word for every instruction, in order."""
        words = [self.resolve_instruction(instruction) for instruction in instructions]
        logger.debug(
            f"Resolved {len(words)} words, "
            f"next variable address {self.symbols.next_variable_address}"
        )
        return words

    def resolve_instruction(self, instruction: PartialInstruction) -> int:
        """Return the final word for one instruction."""
        if isinstance(instruction, Complete):
            return instruction.word

        if isinstance(instruction, SymbolicAddress):
            address = self.symbols.get(instruction.name)
            if address is None:
                address = self.symbols.allocate_variable(instruction.name)
            return address

        raise TypeError(f"unexpected instruction {instruction!r}")
