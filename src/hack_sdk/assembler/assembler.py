"""
Hack Assembler - Main Interface
===============================

This module provides the main Assembler class, the primary interface for
assembling Hack source code. It runs the lexer, encoder, and resolver in
order and writes the resulting `.hack` text.

Example Usage
-------------
>>> from hack_sdk.assembler import Assembler
>>>
>>> asm = Assembler()
>>> asm.assemble_string('''
... @2
... D=A
... @3
... D=D+A
... @0
... M=D
... ''')
>>> print(asm.to_hack_text())
>>> asm.write_hack("Add.hack")

Command-Line Usage
------------------
    $ hackasm Add.asm -s Add.sym -l Add.lst

Options:
    -o, --output FILE      Output .hack file
    -s, --symbols FILE     Generate symbol file
    -l, --listing FILE     Generate listing file
    -v, --verbose          Verbose output
"""

import logging
from pathlib import Path
from typing import Optional

from hack_sdk.assembler.codegen import Encoder, PartialInstruction
from hack_sdk.assembler.lexer import Lexer
from hack_sdk.assembler.resolver import Resolver
from hack_sdk.assembler.symbols import SymbolKind, SymbolTable
from hack_sdk.cpu import format_word


logger = logging.getLogger(__name__)


class Assembler:
    """
    Main Hack assembler class.

    Every call to assemble_string() starts from a fresh symbol table, so
    assembling the same text twice gives the same words.

    Attributes:
        verbose: If True, log progress at INFO level
    """

    def __init__(self, verbose: bool = False):
        self._verbose = verbose
        self._source_file: Optional[Path] = None
        self._symbols = SymbolTable()
        self._partial: list[PartialInstruction] = []
        self._words: list[int] = []

    # =========================================================================
    # Assembly Methods
    # =========================================================================

    def assemble(self, source: str, filename: str = "<input>") -> list[int]:
        """Assemble source code (alias for assemble_string)."""
        return self.assemble_string(source, filename)

    def assemble_string(self, source: str, filename: str = "<input>") -> list[int]:
        """
        Assemble source code from a string.

        The assembly pipeline is:
        1. Split source into comment-free lines (lexer)
        2. Encode every line, binding labels (encoder)
        3. Resolve symbolic addresses, allocating variables (resolver)

        Args:
            source: Assembly source code
            filename: Virtual filename for error messages

        Returns:
            The assembled 16-bit words

        Raises:
            AssemblerError: If assembly fails
        """
        self._symbols = SymbolTable()
        self._partial = []
        self._words = []

        encoder = Encoder(self._symbols)
        partial = encoder.encode_lines(Lexer(source, filename).lines())

        words = Resolver(self._symbols).resolve(partial)

        self._partial = partial
        self._words = words

        self._log(
            f"Assembled {len(words)} instructions from {filename} "
            f"({len(self._symbols.of_kind(SymbolKind.LABEL))} labels, "
            f"{len(self._symbols.of_kind(SymbolKind.VARIABLE))} variables)"
        )
        return list(words)

    def assemble_file(self, filepath: str | Path) -> list[int]:
        """
        Assemble source code from a UTF-8 file.

        Raises:
            AssemblerError: If assembly fails
            FileNotFoundError: If source file not found
        """
        filepath = Path(filepath)
        self._source_file = filepath

        self._log(f"Assembling {filepath}...")

        source = filepath.read_text(encoding="utf-8")
        return self.assemble_string(source, str(filepath))

    # =========================================================================
    # Output Methods
    # =========================================================================

    def get_words(self) -> list[int]:
        """Return the words from the last assembly."""
        return list(self._words)

    def get_symbols(self) -> dict[str, int]:
        """Return the symbol table as a name -> address mapping."""
        return self._symbols.as_dict()

    def get_symbol_table(self) -> SymbolTable:
        """Return the live symbol table from the last assembly."""
        return self._symbols

    def to_hack_text(self) -> str:
        """Render the words as .hack text, one 16-digit line per word."""
        return "".join(f"{format_word(word)}\n" for word in self._words)

    def get_listing(self) -> str:
        """
        Get the assembly listing as a string.

        Returns:
            Addresses, words, and source lines, followed by the labels
            and variables of the symbol table
        """
        lines = []
        lines.append("Hack Assembler Listing")
        lines.append("=" * 60)
        lines.append("")
        lines.append("Addr   Word              Line  Source")
        lines.append("-" * 60)
        for address, (word, instruction) in enumerate(zip(self._words, self._partial)):
            source = instruction.source
            lines.append(
                f"{address:5d}  {format_word(word)}  {source.line:4d}  {source.stripped}"
            )
        lines.append("")
        lines.append("Symbol Table")
        lines.append("-" * 30)
        for symbol in sorted(self._symbols, key=lambda s: s.name):
            if symbol.kind is not SymbolKind.PREDEFINED:
                lines.append(f"{symbol.name:20s} = {symbol.address:5d}  ({symbol.kind.value})")
        return "\n".join(lines) + "\n"

    def write_hack(self, filepath: str | Path) -> None:
        """Write the assembled words as a .hack file."""
        Path(filepath).write_text(self.to_hack_text(), encoding="utf-8")
        self._log(f"Wrote {filepath}")

    def write_listing(self, filepath: str | Path) -> None:
        """Write the assembly listing file."""
        Path(filepath).write_text(self.get_listing(), encoding="utf-8")
        self._log(f"Wrote listing to {filepath}")

    def write_symbols(self, filepath: str | Path) -> None:
        """
        Write symbol table file.

        Format: name address (one per line, decimal, sorted by name)
        """
        with open(filepath, "w", encoding="utf-8") as f:
            f.write("# Symbol table\n")
            f.write("# Generated by hackasm\n")
            for name, address in sorted(self._symbols.as_dict().items()):
                f.write(f"{name} {address}\n")

        self._log(f"Wrote symbols to {filepath}")

    def _log(self, message: str) -> None:
        if self._verbose:
            logger.info(message)
        else:
            logger.debug(message)


# =============================================================================
# Convenience Functions
# =============================================================================

def assemble(source: str, filename: str = "<input>") -> list[int]:
    """
    Convenience function to assemble source code.

    Raises:
        AssemblerError: If assembly fails
    """
    return Assembler().assemble_string(source, filename)


def assemble_file(filepath: str | Path) -> list[int]:
    """
    Convenience function to assemble a file.

    Raises:
        AssemblerError: If assembly fails
    """
    return Assembler().assemble_file(filepath)


def default_output_path(filepath: str | Path) -> Path:
    """
    Derive the .hack path for a source path.

    The first ".asm" in the path text becomes ".hack"; a path without
    ".asm" gets ".hack" appended.
    """
    text = str(filepath)
    if ".asm" in text:
        return Path(text.replace(".asm", ".hack", 1))
    return Path(text + ".hack")
