"""
Hack Assembler
==============

This package translates Hack assembly language into 16-bit machine words
for the Hack computer.

Main Components
---------------
- **Assembler**: Main assembler class that orchestrates the assembly process
- **Lexer**: Strips comments and splits source into logical lines
- **Encoder**: Encodes lines into words or symbolic placeholders
- **SymbolTable**: Predefined symbols, labels, and variables
- **Resolver**: Replaces placeholders with label or variable addresses

Assembly Process
----------------
1. **Lexing**: a character-level state machine drops `//` comments and
   yields one logical line per source line.
2. **Encoding**: each line becomes an A-instruction, a C-instruction, or
   a label binding. Symbolic A-instructions are left as placeholders.
3. **Resolution**: once every label is known, placeholders are replaced;
   unknown names become variables from address 16 upward.

Example Usage
-------------
>>> from hack_sdk.assembler import assemble
>>> [f"{w:016b}" for w in assemble("@5\\nD=D+A;JGT")]
['0000000000000101', '1110000010010001']
"""

from hack_sdk.assembler.assembler import (
    Assembler,
    assemble,
    assemble_file,
    default_output_path,
)
from hack_sdk.assembler.lexer import Lexer, LexerState, SourceLine, split_lines
from hack_sdk.assembler.codegen import (
    Encoder,
    Complete,
    SymbolicAddress,
    PartialInstruction,
    encode_instruction,
)
from hack_sdk.assembler.symbols import Symbol, SymbolKind, SymbolTable
from hack_sdk.assembler.resolver import Resolver

__all__ = [
    # Main class and functions
    "Assembler",
    "assemble",
    "assemble_file",
    "default_output_path",
    # Lexer
    "Lexer",
    "LexerState",
    "SourceLine",
    "split_lines",
    # Encoder
    "Encoder",
    "Complete",
    "SymbolicAddress",
    "PartialInstruction",
    "encode_instruction",
    # Symbols
    "Symbol",
    "SymbolKind",
    "SymbolTable",
    # Resolver
    "Resolver",
]
