# JSON form of the program tree handed over by the parser
from typing import List, Optional, Union

from pydantic import BaseModel, Field, field_validator

from minisem.ast_nodes import Node, NodeKind


class NodeModel(BaseModel):
    kind: str
    value: Union[bool, int, str, None] = None
    ops: List[str] = Field(default_factory=list)
    children: List["NodeModel"] = Field(default_factory=list)

    @field_validator("kind")
    @classmethod
    def _known_kind(cls, v: str) -> str:
        return NodeKind.parse(v).value

    def to_node(self) -> Node:
        return Node(
            kind=NodeKind.parse(self.kind),
            children=[c.to_node() for c in self.children],
            value=self.value,
            ops=list(self.ops),
        )

    @classmethod
    def from_node(cls, node: Node) -> "NodeModel":
        return cls(
            kind=node.kind.value,
            value=node.value,
            ops=list(node.ops),
            children=[cls.from_node(c) for c in node.children],
        )


NodeModel.model_rebuild()


def load_tree(text: str) -> Node:
    """Parse a JSON document into a Node tree; raises pydantic.ValidationError."""
    return NodeModel.model_validate_json(text).to_node()


def dump_tree(node: Node, indent: Optional[int] = None) -> str:
    return NodeModel.from_node(node).model_dump_json(indent=indent)
