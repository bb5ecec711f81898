# tests/test_metrics.py
from minisem.semantic.analyzer import SemanticAnalyzer
from minisem.semantic.metrics import Metrics
from minisem.tree_builder import (
    program, declare, enum, assign, if_, while_, switch, case,
    add, mul, comp, boolean, not_, neg,
)

def metrics_of(*statements) -> Metrics:
    result = SemanticAnalyzer().analyze(program(*statements))
    assert result.ok, result.errors
    return result.metrics


# ==============================================================
# 1. Formato
# ==============================================================

def test_format_line():
    m = Metrics(variables=3, whiles=1, ifs=2, enum_values=4, operators=5)
    assert m.format() == "{VAR:3, WHILE:1, IF:2, ENUM_VALUES:4, OP:5}"
    assert str(m) == m.format()

def test_as_dict():
    m = Metrics(variables=1, operators=2)
    assert m.as_dict() == {"VAR": 1, "WHILE": 0, "IF": 0, "ENUM_VALUES": 0, "OP": 2}


# ==============================================================
# 2. Conteos
# ==============================================================

def test_only_primitive_declarations():
    m = metrics_of(declare("num", "a"), declare("bool", "b"), declare("num", "c"))
    assert m.format() == "{VAR:3, WHILE:0, IF:0, ENUM_VALUES:0, OP:0}"

def test_empty_program():
    assert metrics_of().format() == "{VAR:0, WHILE:0, IF:0, ENUM_VALUES:0, OP:0}"

def test_if_counts_once():
    m = metrics_of(if_(True))
    assert m.ifs == 1
    assert m.whiles == 0

def test_nested_ifs_and_whiles():
    m = metrics_of(
        declare("bool", "f"),
        while_("f", if_("f", while_(False)), if_(True)),
    )
    assert (m.whiles, m.ifs) == (2, 2)

def test_enum_values_and_variables():
    m = metrics_of(
        enum("Color", "Red", "Green", "Blue"),
        enum("Size", "Small"),
        declare("Color", "c"),
    )
    assert m.enum_values == 4
    # los nombres de enum y sus valores no cuentan como variables
    assert m.variables == 1

def test_empty_enum_adds_nothing():
    m = metrics_of(enum("Nothing"))
    assert m.enum_values == 0
    assert m.variables == 0

def test_arithmetic_counts_once_per_node():
    # 1 + 2 + 3 is a single AddExpr with three operands: one operator counted
    m = metrics_of(declare("num", "a"), assign("a", add(1, 2, 3)))
    assert m.operators == 1

def test_nested_arithmetic():
    m = metrics_of(declare("num", "a"), assign("a", add("a", mul(2, 3))))
    assert m.operators == 2

def test_comparison_chain_counts_each_operator():
    m = metrics_of(declare("bool", "b"), assign("b", comp("<", 1, 2, 3)))
    assert m.operators == 2

def test_comparison_counts_nested_operators_once():
    # (1 + 2) < 3: the operands are evaluated twice but only counted once
    m = metrics_of(declare("bool", "b"), assign("b", comp("<", add(1, 2), 3)))
    assert m.operators == 2

def test_boolean_and_unary_operators():
    m = metrics_of(
        declare("bool", "b"),
        declare("num", "n"),
        assign("b", boolean("&&", not_("b"), comp("==", "n", 0))),
        assign("n", neg("n")),
    )
    # && + ! + == + unary -
    assert m.operators == 4

def test_boolean_chain_counts_once():
    m = metrics_of(declare("bool", "b"), assign("b", boolean("||", True, False, "b")))
    assert m.operators == 1

def test_operators_in_conditions_are_counted():
    m = metrics_of(
        declare("num", "i"),
        while_(comp("<", "i", 10), assign("i", add("i", 1))),
    )
    assert m.format() == "{VAR:1, WHILE:1, IF:0, ENUM_VALUES:0, OP:2}"

def test_switch_does_not_count_operators():
    m = metrics_of(
        enum("Color", "Red", "Green"),
        declare("Color", "c"),
        switch("c", case("Red"), case("Green")),
    )
    assert m.format() == "{VAR:1, WHILE:0, IF:0, ENUM_VALUES:2, OP:0}"

def test_failed_run_has_no_metrics():
    result = SemanticAnalyzer().analyze(program(declare("num", "a"), if_(1)))
    assert result.metrics is None
