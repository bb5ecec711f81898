# tests/test_tree_schema.py
import json
import pytest
from pydantic import ValidationError

from minisem.ast_nodes import NodeKind
from minisem.semantic.analyzer import analyze_program
from minisem.tree_schema import NodeModel, load_tree, dump_tree
from minisem.tree_builder import program, declare, assign, if_, comp, enum


SAMPLE = {
    "kind": "Program",
    "children": [
        {"kind": "Declaration", "value": "num", "children": [
            {"kind": "Identifier", "value": "a"}]},
        {"kind": "AssignStmt", "children": [
            {"kind": "Identifier", "value": "a"},
            {"kind": "Expr", "children": [
                {"kind": "AddExpr", "ops": ["+"], "children": [
                    {"kind": "GenValue", "children": [{"kind": "IntValue", "value": 1}]},
                    {"kind": "GenValue", "children": [{"kind": "Identifier", "value": "a"}]},
                ]},
            ]},
        ]},
    ],
}


def test_load_tree_from_json():
    tree = load_tree(json.dumps(SAMPLE))
    assert tree.kind is NodeKind.PROGRAM
    assign_node = tree.children[1]
    add_node = assign_node.children[1].children[0]
    assert add_node.ops == ["+"]
    assert add_node.children[0].children[0].value == 1
    # parent links are rebuilt
    assert add_node.children[1].children[0].parent.kind is NodeKind.GEN_VALUE

def test_loaded_tree_is_analysed():
    result = analyze_program(load_tree(json.dumps(SAMPLE)))
    assert result.ok, result.errors
    assert result.metrics.format() == "{VAR:1, WHILE:0, IF:0, ENUM_VALUES:0, OP:1}"

def test_unknown_kind_rejected():
    with pytest.raises(ValidationError):
        load_tree(json.dumps({"kind": "ForStmt"}))

def test_dump_and_load_keep_shape():
    tree = program(
        enum("Color", "Red"),
        declare("Color", "c"),
        declare("bool", "b"),
        assign("c", "Red"),
        if_(comp("==", True, "b")),
    )
    again = load_tree(dump_tree(tree))
    assert [n.kind for n in again.walk()] == [n.kind for n in tree.walk()]
    assert [n.value for n in again.walk()] == [n.value for n in tree.walk()]
    bool_leaf = next(n for n in again.walk() if n.kind is NodeKind.BOOL_VALUE)
    assert bool_leaf.value is True
    assert analyze_program(again).metrics == analyze_program(tree).metrics

def test_model_from_node_uses_kind_values():
    model = NodeModel.from_node(declare("num", "a"))
    assert model.kind == "Declaration"
    assert model.children[0].kind == "Identifier"
