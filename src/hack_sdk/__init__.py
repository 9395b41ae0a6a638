"""
Hack SDK - Assembler Back End for the Hack Computer
===================================================

This package translates assembly programs for the 16-bit Hack computer
into `.hack` files: one line of sixteen binary digits per instruction.

Main Components
---------------
- **assembler**: Hack assembler (hackasm)
    Converts assembly source files (.asm) to binary text (.hack)

- **cpu**: Hack instruction set definitions
    Computation, destination, and jump tables plus predefined symbols

Quick Start
-----------
Assemble a program:
    >>> from hack_sdk.assembler import Assembler
    >>> asm = Assembler()
    >>> words = asm.assemble_file("Max.asm")
    >>> asm.write_hack("Max.hack")

Or use the command-line tool:
    $ hackasm Max.asm
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from hack_sdk.assembler import Assembler, assemble, assemble_file
from hack_sdk.errors import (
    HackError,
    AssemblerError,
    AssemblySyntaxError,
    InvalidJumpError,
    InvalidOpcodeError,
    AddressRangeError,
    DuplicateSymbolError,
    SourceLocation,
)

__all__ = [
    # Version info
    "__version__",
    # Assembler
    "Assembler",
    "assemble",
    "assemble_file",
    # Exception hierarchy
    "HackError",
    "AssemblerError",
    "AssemblySyntaxError",
    "InvalidJumpError",
    "InvalidOpcodeError",
    "AddressRangeError",
    "DuplicateSymbolError",
    "SourceLocation",
]
