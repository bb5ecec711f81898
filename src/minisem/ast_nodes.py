from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Union, Iterable


@dataclass(frozen=True)
class Type:
    name: Optional[str] = None
    def __str__(self):
        return self.name or "undefined"


BOOL: Type = Type("Bool")
NUMBER: Type = Type("Number")
ENUM_TYPE: Type = Type("EnumType")
ENUM_VAR: Type = Type("EnumVar")
ENUM_VALUE: Type = Type("EnumValue")
UNKNOWN: Type = Type("Unknown")


class NodeKind(Enum):
    PROGRAM = "Program"
    DECLARATION = "Declaration"
    BLOCK = "Block"
    STMT = "Stmt"
    IF_STMT = "IfStmt"
    WHILE_STMT = "WhileStmt"
    ASSIGN_STMT = "AssignStmt"
    ENUM_STMT = "EnumStmt"
    SWITCH_STMT = "SwitchStmt"
    CASE_STMT = "CaseStmt"
    EXPR = "Expr"
    COMP_EXPR = "CompExpr"
    ADD_EXPR = "AddExpr"
    MUL_EXPR = "MulExpr"
    BOOL_EXPR = "BoolExpr"
    NOT_EXPR = "NotExpr"
    UNA_EXPR = "UnaExpr"
    GEN_VALUE = "GenValue"
    BOOL_VALUE = "BoolValue"
    IDENTIFIER = "Identifier"
    INT_VALUE = "IntValue"

    @classmethod
    def parse(cls, text: str) -> "NodeKind":
        for kind in cls:
            if kind.value == text or kind.name == text:
                return kind
        raise ValueError(f"Unknown node kind {text!r}")


@dataclass(eq=False)
class Node:
    kind: NodeKind
    children: List['Node'] = field(default_factory=list)
    value: Union[str, int, bool, None] = None
    ops: List[str] = field(default_factory=list)
    parent: Optional['Node'] = field(default=None, repr=False)

    def __post_init__(self):
        for child in self.children:
            child.parent = self

    def add(self, child: 'Node') -> 'Node':
        child.parent = self
        self.children.append(child)
        return child

    def child(self, index: int) -> 'Node':
        try:
            return self.children[index]
        except IndexError:
            raise ValueError(f"{self.kind.value} node has no child #{index}") from None

    @property
    def name(self) -> str:
        """Text of an Identifier node (or of any node carrying a string value)."""
        if not isinstance(self.value, str):
            raise ValueError(f"{self.kind.value} node carries no name")
        return self.value

    def walk(self) -> Iterable['Node']:
        yield self
        for ch in self.children:
            yield from ch.walk()


def _label(n: Node) -> str:
    k = n.kind
    if k is NodeKind.IDENTIFIER:  return f"Identifier {n.value}"
    if k is NodeKind.INT_VALUE:   return f"IntValue {n.value}"
    if k is NodeKind.BOOL_VALUE:  return f"BoolValue {str(n.value).lower()}"
    if k is NodeKind.DECLARATION: return f"Declaration {n.value}" if n.value else "Declaration"
    if k is NodeKind.COMP_EXPR and n.value: return f"CompExpr '{n.value}'"
    if n.ops:
        ops = " ".join(n.ops)
        return f"{k.value} ops=[{ops}]"
    return k.value

def render_ascii(root: Node) -> str:
    lines = []
    def dfs(node: Node, prefix: str="", is_last: bool=True):
        connector = "└─ " if is_last else "├─ "
        lines.append(prefix + connector + _label(node))
        for idx, ch in enumerate(node.children):
            last = (idx == len(node.children) - 1)
            dfs(ch, prefix + ("   " if is_last else "│  "), last)
    dfs(root)
    return "\n".join(lines)

def create_tree_image(root: Node, out_basename: str = "ast", fmt: str = "png") -> str:
    """
    Render the tree with graphviz. When the 'dot' binary is missing the
    render fails and a plain .dot file is written instead.
    Returns the path of the generated file.
    """
    from graphviz import Digraph
    from graphviz import ExecutableNotFound

    def safe_label(n: Node) -> str:
        return _label(n).replace('"', '\\"')

    g = Digraph("AST", format=fmt)
    g.attr("graph", rankdir="TB")
    g.attr("node", shape="box", fontname="Consolas")

    counter = 0
    def new_id():
        nonlocal counter
        counter += 1
        return f"n{counter}"

    def walk(n: Node) -> str:
        me = new_id()
        g.node(me, safe_label(n))
        for idx, ch in enumerate(n.children):
            child = walk(ch)
            g.edge(me, child, label=str(idx))
        return me

    walk(root)
    try:
        return g.render(filename=out_basename, cleanup=True)
    except ExecutableNotFound:
        dot_path = out_basename + ".dot"
        with open(dot_path, "w", encoding="utf-8") as f:
            f.write(g.source)
        return dot_path
