"""
Hack Instruction Set Definition
===============================

This module defines the encoding tables of the Hack computer, a 16-bit
machine with two instruction forms.

A-Instruction
-------------
    0vvv vvvv vvvv vvvv

The top bit is zero and the remaining 15 bits are loaded into the A
register, so literals are limited to 0..32767.

C-Instruction
-------------
    111a cccc ccdd djjj

- **a**: selects A (0) or M (1) as the ALU's second operand
- **cccccc**: ALU control bits
- **ddd**: destination registers (A, D, M)
- **jjj**: jump condition on the ALU output

The `a` bit is stored together with the six control bits in
COMP_TABLE, so each entry there is a 7-bit value.

Memory Map
----------
| Range         | Use                                  |
|---------------|--------------------------------------|
| 0-15          | Virtual registers R0-R15             |
| 16-16383      | Variables (allocated from 16 upward) |
| 16384-24575   | Screen memory map (SCREEN)           |
| 24576         | Keyboard register (KBD)              |
"""

# =============================================================================
# Instruction Layout
# =============================================================================

WORD_BITS = 16

# Largest literal an A-instruction can carry (15 bits).
MAX_ADDRESS = 0x7FFF

# Fixed prefix of every C-instruction (bits 15-13 set).
C_INSTRUCTION_PREFIX = 0b111 << 13

COMP_SHIFT = 6
DEST_SHIFT = 3

# First data address handed out to variable symbols.
VARIABLE_BASE_ADDRESS = 16


# =============================================================================
# Computation Table
# =============================================================================
# Maps the computation mnemonic to its 7-bit a+cccccc encoding.
# Forms over M are the A forms with the a bit set.

COMP_TABLE: dict[str, int] = {
    # a = 0
    "0": 0b0_101010,
    "1": 0b0_111111,
    "-1": 0b0_111010,
    "D": 0b0_001100,
    "A": 0b0_110000,
    "!D": 0b0_001101,
    "!A": 0b0_110001,
    "-D": 0b0_001111,
    "-A": 0b0_110011,
    "D+1": 0b0_011111,
    "A+1": 0b0_110111,
    "D-1": 0b0_001110,
    "A-1": 0b0_110010,
    "D+A": 0b0_000010,
    "D-A": 0b0_010011,
    "A-D": 0b0_000111,
    "D&A": 0b0_000000,
    "D|A": 0b0_010101,

    # a = 1
    "M": 0b1_110000,
    "!M": 0b1_110001,
    "-M": 0b1_110011,
    "M+1": 0b1_110111,
    "M-1": 0b1_110010,
    "D+M": 0b1_000010,
    "D-M": 0b1_010011,
    "M-D": 0b1_000111,
    "D&M": 0b1_000000,
    "D|M": 0b1_010101,
}


# =============================================================================
# Destination Bits
# =============================================================================
# Each register letter found in the destination sets its own bit, so any
# combination (including none or all three) is valid.

DEST_BITS: dict[str, int] = {
    "M": 0b001,
    "D": 0b010,
    "A": 0b100,
}


# =============================================================================
# Jump Table
# =============================================================================

JUMP_TABLE: dict[str, int] = {
    "null": 0b000,
    "JGT": 0b001,
    "JEQ": 0b010,
    "JGE": 0b011,
    "JLT": 0b100,
    "JNE": 0b101,
    "JLE": 0b110,
    "JMP": 0b111,
}


# =============================================================================
# Predefined Symbols
# =============================================================================

PREDEFINED_SYMBOLS: dict[str, int] = {
    "SP": 0,
    "LCL": 1,
    "ARG": 2,
    "THIS": 3,
    "THAT": 4,
    "SCREEN": 0x4000,
    "KBD": 0x6000,
    **{f"R{n}": n for n in range(16)},
}


# =============================================================================
# Lookup Functions
# =============================================================================

def dest_bits(dest: str) -> int:
    """Return the OR-combined destination bits for the letters in dest."""
    bits = 0
    for register, bit in DEST_BITS.items():
        if register in dest:
            bits |= bit
    return bits


def format_word(word: int) -> str:
    """Render a word as 16 binary digits, most significant bit first."""
    return f"{word:0{WORD_BITS}b}"
