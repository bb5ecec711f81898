from minisem.ast_nodes import Node, NodeKind, Type
from minisem.semantic.analyzer import AnalysisResult, SemanticAnalyzer, analyze_program
from minisem.semantic.errors import SemanticError
from minisem.semantic.metrics import Metrics

__version__ = "0.1.0"

__all__ = [
    "Node",
    "NodeKind",
    "Type",
    "AnalysisResult",
    "SemanticAnalyzer",
    "analyze_program",
    "SemanticError",
    "Metrics",
]
