from typing import Iterable, Optional

from minisem.ast_nodes import Type, BOOL, NUMBER, ENUM_VAR, ENUM_VALUE, UNKNOWN

ORDERING_OPERATORS = {"<", ">", "<=", ">="}
EQUALITY_OPERATORS = {"==", "!="}


def is_ordering(op: Optional[str]) -> bool:
    """Anything that is not '==' or '!=' is checked as an ordering comparison."""
    return op not in EQUALITY_OPERATORS


def assignable(target: Optional[Type], actual: Type) -> bool:
    if actual == target:
        return True
    # enum members go into enum-typed variables
    return target == ENUM_VAR and actual == ENUM_VALUE


def valid_condition(ty: Optional[Type]) -> bool:
    return ty == BOOL


def valid_switch(ty: Optional[Type]) -> bool:
    return ty == NUMBER or ty == ENUM_VAR


def case_matches(switch_type: Optional[Type], label_type: Optional[Type]) -> bool:
    if switch_type == ENUM_VAR:
        return label_type == ENUM_VALUE
    return label_type == switch_type


def all_numbers(types: Iterable[Optional[Type]]) -> bool:
    return all(t == NUMBER for t in types)


def equality_operands_ok(types: Iterable[Optional[Type]]) -> bool:
    """
    Operands of '==' / '!=' share one type, and that type is Number or Bool.
    """
    first = UNKNOWN
    for t in types:
        if first == UNKNOWN:
            first = t
            if first != NUMBER and first != BOOL:
                return False
        elif t != first:
            return False
    return True
