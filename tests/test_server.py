# tests/test_server.py
import json
import pytest
from fastapi.testclient import TestClient

from minisem.CompilerServer import app
from minisem.tree_schema import dump_tree
from minisem.tree_builder import program, declare, enum, assign, if_, switch, case


@pytest.fixture
def client():
    return TestClient(app)

def payload(tree):
    return {"tree": json.loads(dump_tree(tree))}


def test_root(client):
    r = client.get("/")
    assert r.status_code == 200
    assert "minisem" in r.json()["message"]

def test_analyze_ok(client):
    tree = program(enum("Color", "Red"), declare("Color", "c"), assign("c", "Red"))
    r = client.post("/analyze", json=payload(tree))
    assert r.status_code == 200
    body = r.json()
    assert body["result"] == "{VAR:1, WHILE:0, IF:0, ENUM_VALUES:1, OP:0}"
    assert body["metrics"]["ENUM_VALUES"] == 1
    assert body["errors"] == []

def test_analyze_error(client):
    tree = program(declare("num", "n"), switch("n", case("ghost")))
    r = client.post("/analyze", json=payload(tree))
    body = r.json()
    assert body["metrics"] is None
    assert body["errors"] == ["Invalid type in case of Identifier ghost"]

def test_diagnostics(client):
    r = client.post("/diagnostics", json=payload(program(if_(1))))
    diags = r.json()["diagnostics"]
    assert diags == [{"code": "E004", "message": "Invalid type in condition", "severity": "error"}]

    r = client.post("/diagnostics", json=payload(program(if_(True))))
    assert r.json()["diagnostics"] == []

def test_symbols(client):
    r = client.post("/symbols", json=payload(program(enum("Color", "Red"), declare("num", "n"))))
    assert r.status_code == 200
    assert r.json()["symbols"] == [
        {"name": "Color", "type": "EnumType"},
        {"name": "Red", "type": "EnumValue"},
        {"name": "n", "type": "Number"},
    ]

def test_symbols_on_invalid_program(client):
    r = client.post("/symbols", json=payload(program(declare("num", "a"), declare("num", "a"))))
    assert r.status_code == 400
    assert r.json()["detail"] == "Identifier a has multiple declarations"

def test_unknown_kind_is_unprocessable(client):
    r = client.post("/analyze", json={"tree": {"kind": "Nope"}})
    assert r.status_code == 422
