"""
Helpers that build program trees with the shape the parser produces.

Expressions are nested Expr > BoolExpr > CompExpr > AddExpr > MulExpr >
UnaExpr > NotExpr > GenValue > leaf; every level is present even when it
only has one child. `lift` inserts the missing single-child levels, and a
raw Python value is turned into the matching leaf (int -> IntValue,
bool -> BoolValue, str -> Identifier).
"""
from typing import List, Optional, Sequence, Union

from minisem.ast_nodes import Node, NodeKind

Operand = Union[Node, int, bool, str]

EXPR_LEVELS = [
    NodeKind.EXPR,
    NodeKind.BOOL_EXPR,
    NodeKind.COMP_EXPR,
    NodeKind.ADD_EXPR,
    NodeKind.MUL_EXPR,
    NodeKind.UNA_EXPR,
    NodeKind.NOT_EXPR,
    NodeKind.GEN_VALUE,
]

STATEMENT_KINDS = {
    NodeKind.DECLARATION,
    NodeKind.IF_STMT,
    NodeKind.WHILE_STMT,
    NodeKind.ASSIGN_STMT,
    NodeKind.ENUM_STMT,
    NodeKind.SWITCH_STMT,
    NodeKind.EXPR,
}


def leaf(value: Union[int, bool, str]) -> Node:
    # bool first: True is also an int
    if isinstance(value, bool):
        return Node(NodeKind.BOOL_VALUE, value=value)
    if isinstance(value, int):
        return Node(NodeKind.INT_VALUE, value=value)
    if isinstance(value, str):
        return Node(NodeKind.IDENTIFIER, value=value)
    raise TypeError(f"cannot build a leaf from {value!r}")


def lift(x: Operand, target: NodeKind) -> Node:
    """Wrap `x` in single-child nodes until it sits at the `target` level."""
    goal = EXPR_LEVELS.index(target)
    if isinstance(x, Node):
        node = x
    else:
        node = Node(NodeKind.GEN_VALUE, [leaf(x)])

    if node.kind not in EXPR_LEVELS:
        # a bare leaf
        node = Node(NodeKind.GEN_VALUE, [node])
    level = EXPR_LEVELS.index(node.kind)
    if level < goal:
        # parenthesised expression below its own level
        node = Node(NodeKind.GEN_VALUE, [lift(node, NodeKind.EXPR)])
        level = EXPR_LEVELS.index(NodeKind.GEN_VALUE)
    for k in range(level - 1, goal - 1, -1):
        node = Node(EXPR_LEVELS[k], [node])
    return node


def _below(kind: NodeKind) -> NodeKind:
    return EXPR_LEVELS[EXPR_LEVELS.index(kind) + 1]


# --- expressions ---

def expr(x: Operand) -> Node:
    return lift(x, NodeKind.EXPR)

def value(x: Operand) -> Node:
    return lift(x, NodeKind.GEN_VALUE)

def boolean(op: str, *operands: Operand) -> Node:
    sub = _below(NodeKind.BOOL_EXPR)
    return Node(NodeKind.BOOL_EXPR, [lift(o, sub) for o in operands],
                ops=[op] * (len(operands) - 1))

def comp(op: str, *operands: Operand) -> Node:
    sub = _below(NodeKind.COMP_EXPR)
    return Node(NodeKind.COMP_EXPR, [lift(o, sub) for o in operands], value=op)

def add(*operands: Operand, op: str = "+") -> Node:
    sub = _below(NodeKind.ADD_EXPR)
    return Node(NodeKind.ADD_EXPR, [lift(o, sub) for o in operands],
                ops=[op] * (len(operands) - 1))

def mul(*operands: Operand, op: str = "*") -> Node:
    sub = _below(NodeKind.MUL_EXPR)
    return Node(NodeKind.MUL_EXPR, [lift(o, sub) for o in operands],
                ops=[op] * (len(operands) - 1))

def neg(x: Operand, op: str = "-") -> Node:
    return Node(NodeKind.UNA_EXPR, [lift(x, _below(NodeKind.UNA_EXPR))], ops=[op])

def not_(x: Operand) -> Node:
    return Node(NodeKind.NOT_EXPR, [lift(x, _below(NodeKind.NOT_EXPR))], ops=["!"])


# --- statements ---

def stmt(node: Node) -> Node:
    return Node(NodeKind.STMT, [node])

def block(*statements: Node) -> Node:
    return Node(NodeKind.BLOCK, [_as_stmt(s) for s in statements])

def _as_stmt(node: Node) -> Node:
    if node.kind in STATEMENT_KINDS:
        return stmt(node)
    return node

def declare(type_name: str, name: str) -> Node:
    """`num a;`, `bool b;`, or `Color c;` when type_name is not a primitive."""
    if type_name in ("num", "bool"):
        return Node(NodeKind.DECLARATION, [leaf(name)], value=type_name)
    return Node(NodeKind.DECLARATION, [leaf(type_name), leaf(name)])

def enum(name: str, *values: str) -> Node:
    return Node(NodeKind.ENUM_STMT, [leaf(name)] + [leaf(v) for v in values])

def assign(name: str, x: Operand) -> Node:
    return Node(NodeKind.ASSIGN_STMT, [leaf(name), expr(x)])

def if_(cond: Operand, *body: Node, orelse: Optional[Sequence[Node]] = None) -> Node:
    children = [expr(cond), block(*body)]
    if orelse is not None:
        children.append(block(*orelse))
    return Node(NodeKind.IF_STMT, children)

def while_(cond: Operand, *body: Node) -> Node:
    return Node(NodeKind.WHILE_STMT, [expr(cond), block(*body)])

def case(label: Union[int, str], *body: Node) -> Node:
    return Node(NodeKind.CASE_STMT, [leaf(label)] + [_as_stmt(s) for s in body])

def switch(name: str, *cases: Node) -> Node:
    return Node(NodeKind.SWITCH_STMT, [leaf(name)] + list(cases))

def program(*statements: Node) -> Node:
    children: List[Node] = [_as_stmt(s) for s in statements]
    return Node(NodeKind.PROGRAM, children)
