import logging
from typing import Any, Dict, Iterator, List, Optional

from minisem.ast_nodes import Type, BOOL, NUMBER, ENUM_TYPE, ENUM_VAR, ENUM_VALUE, UNKNOWN
from minisem.semantic.errors import MultipleDeclarationError

log = logging.getLogger(__name__)

PRIMITIVE_TYPES: Dict[str, Type] = {
    "num": NUMBER,
    "bool": BOOL,
}


class Symbol:
    def __init__(self, name: str, sym_type: Optional[Type]):
        self.name = name
        self.type = sym_type

    def __repr__(self):
        return f"Symbol(name={self.name!r}, type={self.type!r})"


class SymbolTable:
    """
    Single flat namespace shared by variables, enum type names and enum values.
    Entries are only ever inserted; the table lives as long as one analysis run.
    """

    def __init__(self):
        self._symbols: Dict[str, Symbol] = {}

    def declare(self, name: str, sym_type: Optional[Type]) -> Symbol:
        """
        Insert 'name' with its type.
        A name already present is a multiple declaration, unless no type is given.
        """
        if name in self._symbols and sym_type is not None:
            raise MultipleDeclarationError(name)
        sym = Symbol(name, sym_type)
        self._symbols[name] = sym
        log.debug("declared %s as %s", name, sym_type)
        return sym

    def lookup(self, name: str) -> Optional[Symbol]:
        return self._symbols.get(name)

    def type_of(self, name: str) -> Optional[Type]:
        sym = self._symbols.get(name)
        return sym.type if sym is not None else None

    def is_valid_type_name(self, text: Optional[str]) -> bool:
        if text in PRIMITIVE_TYPES:
            return True
        return self.type_of(text) == ENUM_TYPE

    def resolve_declared_type(self, text: Optional[str]) -> Type:
        if text is None:
            return UNKNOWN
        if text in PRIMITIVE_TYPES:
            return PRIMITIVE_TYPES[text]
        if self.type_of(text) == ENUM_TYPE:
            return ENUM_VAR
        return UNKNOWN

    def count_variables(self) -> int:
        return sum(
            1 for sym in self._symbols.values()
            if sym.type != ENUM_TYPE and sym.type != ENUM_VALUE
        )

    def serialize(self) -> List[Dict[str, Any]]:
        return [
            {"name": sym.name, "type": str(sym.type) if sym.type is not None else None}
            for sym in self._symbols.values()
        ]

    def __contains__(self, name: str) -> bool:
        return name in self._symbols

    def __len__(self) -> int:
        return len(self._symbols)

    def __iter__(self) -> Iterator[Symbol]:
        return iter(self._symbols.values())
