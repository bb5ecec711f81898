from minisem.symbol_table.symbol_table import Symbol, SymbolTable, PRIMITIVE_TYPES

__all__ = ["Symbol", "SymbolTable", "PRIMITIVE_TYPES"]
