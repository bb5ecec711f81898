import logging
from dataclasses import dataclass
from typing import List, Optional

from minisem.ast_nodes import (
    Node, NodeKind, Type,
    BOOL, NUMBER, ENUM_TYPE, ENUM_VALUE, UNKNOWN,
)
from minisem.semantic.errors import (
    SemanticError,
    UndefinedIdentifierError,
    UnknownDeclaredTypeError,
    InvalidConditionTypeError,
    InvalidExpressionTypeError,
    InvalidAssignmentTypeError,
    InvalidSwitchTypeError,
    InvalidCaseTypeError,
)
from minisem.semantic.metrics import Metrics
from minisem.semantic import type_rules
from minisem.symbol_table.symbol_table import SymbolTable

log = logging.getLogger(__name__)


@dataclass
class AnalysisResult:
    metrics: Optional[Metrics] = None
    error: Optional[SemanticError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def errors(self) -> List[str]:
        return [] if self.error is None else [str(self.error)]


class SemanticAnalyzer:
    """
    Validates a program tree and counts its metrics in a single walk.

    Every visit method returns the type inferred for its node. `incoming` is
    the type produced by the previous sibling (or given by the parent); rules
    that infer nothing on their own hand it back unchanged.

    One instance analyzes one program: the symbol table and the counters are
    fresh per instance.
    """

    def __init__(self):
        self.table = SymbolTable()
        self.metrics = Metrics()
        self._used = False

    # ==============================================================
    # ||  Entry points
    # ==============================================================
    def analyze(self, program: Node) -> AnalysisResult:
        if self._used:
            raise RuntimeError("SemanticAnalyzer instances analyze a single program; create a new one")
        self._used = True
        try:
            metrics = self.visit_program_root(program)
        except SemanticError as e:
            log.debug("semantic analysis aborted: %s", e.pretty())
            return AnalysisResult(error=e)
        log.info("semantic analysis ok %s", metrics.format())
        return AnalysisResult(metrics=metrics)

    def check(self, program: Node) -> Metrics:
        """Like analyze(), but lets the SemanticError propagate."""
        result = self.analyze(program)
        if result.error is not None:
            raise result.error
        return result.metrics

    def visit_program_root(self, program: Node) -> Metrics:
        if program.kind is not NodeKind.PROGRAM:
            raise ValueError(f"expected a Program node, got {program.kind.value}")
        self.visit(program)
        return self.metrics

    # ==============================================================
    # ||  Dispatch
    # ==============================================================
    def visit(self, node: Node, incoming: Type = UNKNOWN) -> Type:
        method = getattr(self, "visit" + node.kind.value)
        return method(node, incoming)

    def visitChildren(self, node: Node, incoming: Type = UNKNOWN) -> Type:
        ty = incoming
        for child in node.children:
            ty = self.visit(child, ty)
        return ty

    def _evaluate_isolated(self, node: Node) -> Type:
        """
        Evaluate a subexpression on its own, discarding the operators it counts.
        """
        saved = self.metrics.operators
        ty = self.visit(node, UNKNOWN)
        self.metrics.operators = saved
        return ty

    # ==============================================================
    # ||  Program, declarations
    # ==============================================================
    def visitProgram(self, node: Node, incoming: Type) -> Type:
        self.visitChildren(node, incoming)
        self.metrics.variables = self.table.count_variables()
        return incoming

    def visitDeclaration(self, node: Node, incoming: Type) -> Type:
        if len(node.children) > 1:
            # enum-typed variable: <EnumName> <identifier>
            type_name = node.child(0).name
            var_name = node.child(1).name
            if not self.table.is_valid_type_name(type_name):
                raise UnknownDeclaredTypeError(var_name, type_name)
        else:
            type_name = node.value
            var_name = node.child(0).name

        self.table.declare(var_name, self.table.resolve_declared_type(type_name))
        return incoming

    def visitEnumStmt(self, node: Node, incoming: Type) -> Type:
        self.metrics.enum_values += len(node.children) - 1

        self.table.declare(node.child(0).name, ENUM_TYPE)
        for value_node in node.children[1:]:
            self.table.declare(value_node.name, ENUM_VALUE)
        return incoming

    # ==============================================================
    # ||  Pass-through nodes
    # ==============================================================
    def visitBlock(self, node: Node, incoming: Type) -> Type:
        return self.visitChildren(node, incoming)

    def visitStmt(self, node: Node, incoming: Type) -> Type:
        return self.visitChildren(node, incoming)

    def visitExpr(self, node: Node, incoming: Type) -> Type:
        return self.visitChildren(node, incoming)

    def visitGenValue(self, node: Node, incoming: Type) -> Type:
        return self.visitChildren(node, incoming)

    # ==============================================================
    # ||  Statements
    # ==============================================================
    def _visit_conditional(self, node: Node) -> None:
        cond_type = self.visit(node.child(0), UNKNOWN)
        for body in node.children[1:]:
            self.visit(body, UNKNOWN)
        if not type_rules.valid_condition(cond_type):
            raise InvalidConditionTypeError()

    def visitIfStmt(self, node: Node, incoming: Type) -> Type:
        self.metrics.ifs += 1
        self._visit_conditional(node)
        return incoming

    def visitWhileStmt(self, node: Node, incoming: Type) -> Type:
        self.metrics.whiles += 1
        self._visit_conditional(node)
        return incoming

    def visitAssignStmt(self, node: Node, incoming: Type) -> Type:
        var_name = node.child(0).name
        var_type = self.table.type_of(var_name)

        value_type = self.visit(node.child(1), UNKNOWN)

        if not type_rules.assignable(var_type, value_type):
            log.debug("assignment to %s: declared %s, got %s", var_name, var_type, value_type)
            raise InvalidAssignmentTypeError(var_name)
        return incoming

    def visitSwitchStmt(self, node: Node, incoming: Type) -> Type:
        switch_name = node.child(0).name
        switch_type = self.table.type_of(switch_name)

        if not type_rules.valid_switch(switch_type):
            raise InvalidSwitchTypeError(switch_name)

        self.visitChildren(node, switch_type)
        return incoming

    def visitCaseStmt(self, node: Node, incoming: Type) -> Type:
        label = node.child(0)

        if label.kind is NodeKind.IDENTIFIER:
            prefix, text = "Identifier", label.name
            label_type = self.table.type_of(text)
        else:
            prefix, text = "integer", str(label.value)
            label_type = self.visit(label, UNKNOWN)

        if not type_rules.case_matches(incoming, label_type):
            raise InvalidCaseTypeError(prefix, text)
        # the statements after the label are not analysed
        return incoming

    # ==============================================================
    # ||  Expressions
    # ==============================================================
    def visitCompExpr(self, node: Node, incoming: Type) -> Type:
        ty = self.visitChildren(node, incoming)
        if len(node.children) <= 1:
            return ty

        self.metrics.operators += len(node.children) - 1

        operand_types = [self._evaluate_isolated(child) for child in node.children]
        if type_rules.is_ordering(node.value):
            ok = type_rules.all_numbers(operand_types)
        else:
            ok = type_rules.equality_operands_ok(operand_types)
        if not ok:
            raise InvalidExpressionTypeError()
        return BOOL

    def _visit_arithmetic(self, node: Node, incoming: Type) -> Type:
        binary = len(node.children) > 1
        if binary:
            self.metrics.operators += 1

        ty = incoming
        for child in node.children:
            ty = self.visit(child, ty)
            if binary and ty != NUMBER:
                raise InvalidExpressionTypeError()
        return ty

    def visitAddExpr(self, node: Node, incoming: Type) -> Type:
        return self._visit_arithmetic(node, incoming)

    def visitMulExpr(self, node: Node, incoming: Type) -> Type:
        return self._visit_arithmetic(node, incoming)

    def visitBoolExpr(self, node: Node, incoming: Type) -> Type:
        first = UNKNOWN
        ty = incoming
        for child in node.children:
            ty = self.visit(child, ty)
            if first == UNKNOWN:
                first = ty
            elif ty != first:
                raise InvalidExpressionTypeError()

        if node.ops:
            self.metrics.operators += 1
            ty = BOOL
        return ty

    def visitNotExpr(self, node: Node, incoming: Type) -> Type:
        ty = incoming
        if node.ops:
            ty = BOOL
            self.metrics.operators += 1

        ty = self.visitChildren(node, ty)

        if node.ops and ty != BOOL:
            raise InvalidExpressionTypeError()
        return ty

    def visitUnaExpr(self, node: Node, incoming: Type) -> Type:
        if node.ops:
            self.metrics.operators += 1
        return self.visitChildren(node, incoming)

    # ==============================================================
    # ||  Leaves
    # ==============================================================
    def visitBoolValue(self, node: Node, incoming: Type) -> Type:
        return BOOL

    def visitIntValue(self, node: Node, incoming: Type) -> Type:
        return NUMBER

    def visitIdentifier(self, node: Node, incoming: Type) -> Type:
        # only identifiers used as values carry a type upward
        if node.parent is None or node.parent.kind is not NodeKind.GEN_VALUE:
            return incoming
        ty = self.table.type_of(node.name)
        if ty is None:
            raise UndefinedIdentifierError(node.name)
        return ty


def analyze_program(program: Node) -> AnalysisResult:
    return SemanticAnalyzer().analyze(program)
