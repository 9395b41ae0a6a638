"""
Hack Symbol Table
=================

Maps case-sensitive symbol names to 16-bit addresses.

A fresh table already holds the predefined symbols (SP, LCL, ARG, THIS,
THAT, SCREEN, KBD and R0-R15). Labels are added by the encoder as it
meets `(name)` lines; variables are added by the resolver the first time
an unknown name is referenced. Once bound, a symbol keeps its address.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional

from hack_sdk.cpu import PREDEFINED_SYMBOLS, VARIABLE_BASE_ADDRESS
from hack_sdk.errors import DuplicateSymbolError, SourceLocation


logger = logging.getLogger(__name__)


class SymbolKind(Enum):
    """How a symbol came to be bound."""
    PREDEFINED = "predefined"
    LABEL = "label"
    VARIABLE = "variable"


@dataclass(frozen=True)
class Symbol:
    """A bound symbol."""
    name: str
    address: int
    kind: SymbolKind


class SymbolTable:
    """
    Symbol table for one assembly run.

    Usage:
        table = SymbolTable()
        table.define_label("LOOP", 4)
        table.allocate_variable("i")   # -> 16
        table["LOOP"]                  # -> 4
    """

    def __init__(self):
        self._symbols: dict[str, Symbol] = {
            name: Symbol(name, address, SymbolKind.PREDEFINED)
            for name, address in PREDEFINED_SYMBOLS.items()
        }
        self._next_variable = VARIABLE_BASE_ADDRESS

    def __contains__(self, name: str) -> bool:
        return name in self._symbols

    def __getitem__(self, name: str) -> int:
        return self._symbols[name].address

    def __len__(self) -> int:
        return len(self._symbols)

    def __iter__(self) -> Iterator[Symbol]:
        return iter(self._symbols.values())

    def get(self, name: str) -> Optional[int]:
        """Return the address bound to name, or None if unbound."""
        symbol = self._symbols.get(name)
        return symbol.address if symbol else None

    @property
    def next_variable_address(self) -> int:
        """Address the next new variable will receive."""
        return self._next_variable

    def define_label(
        self,
        name: str,
        address: int,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ) -> None:
        """
        Bind a label to an instruction address.

        Raises:
            DuplicateSymbolError: If name is already bound elsewhere
        """
        existing = self._symbols.get(name)
        if existing is not None:
            if existing.address != address:
                raise DuplicateSymbolError(
                    name,
                    existing=existing.address,
                    requested=address,
                    location=location,
                    source_line=source_line,
                )
            return

        self._symbols[name] = Symbol(name, address, SymbolKind.LABEL)
        logger.debug(f"Label '{name}' bound to {address}")

    def allocate_variable(self, name: str) -> int:
        """
        Bind name to the next free data address and return it.

        Addresses are handed out from 16 upward in call order.
        """
        if name in self._symbols:
            return self._symbols[name].address

        address = self._next_variable
        self._next_variable += 1
        self._symbols[name] = Symbol(name, address, SymbolKind.VARIABLE)
        logger.debug(f"Variable '{name}' allocated at {address}")
        return address

    def as_dict(self) -> dict[str, int]:
        """Return a plain name -> address mapping."""
        return {name: symbol.address for name, symbol in self._symbols.items()}

    def of_kind(self, kind: SymbolKind) -> list[Symbol]:
        """Return the symbols of the given kind, in binding order."""
        return [symbol for symbol in self._symbols.values() if symbol.kind is kind]
