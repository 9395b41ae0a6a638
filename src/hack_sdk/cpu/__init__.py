"""
Hack SDK CPU Package
====================

Architecture definitions for the Hack computer shared by the assembler
and its output writers.

Modules:
    hack: Encoding tables (computation, destination, jump), predefined
          symbols, and address-space limits.

Usage:
    from hack_sdk.cpu import COMP_TABLE, JUMP_TABLE, PREDEFINED_SYMBOLS
"""

from hack_sdk.cpu.hack import (
    # Instruction layout
    WORD_BITS,
    MAX_ADDRESS,
    C_INSTRUCTION_PREFIX,
    COMP_SHIFT,
    DEST_SHIFT,
    VARIABLE_BASE_ADDRESS,
    # Encoding tables
    COMP_TABLE,
    DEST_BITS,
    JUMP_TABLE,
    PREDEFINED_SYMBOLS,
    # Helpers
    dest_bits,
    format_word,
)

__all__ = [
    "WORD_BITS",
    "MAX_ADDRESS",
    "C_INSTRUCTION_PREFIX",
    "COMP_SHIFT",
    "DEST_SHIFT",
    "VARIABLE_BASE_ADDRESS",
    "COMP_TABLE",
    "DEST_BITS",
    "JUMP_TABLE",
    "PREDEFINED_SYMBOLS",
    "dest_bits",
    "format_word",
]
