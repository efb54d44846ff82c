"""AST node definitions for the BASIC dialect.

This module defines the closed set of AST node dataclasses built by the
parser. Each node records its kind (`NodeType`) and the source `line`/`column`
of the token it was built from (0 when synthesized, e.g. the `0` of a
rewritten unary minus).

Conventions:
- Nodes are frozen dataclasses with tuple children; the tree is built
    bottom-up and never modified afterwards. Children are owned by exactly one
    parent.
- Consumers (the printers, JSON export, visualizer) match exhaustively on the
    node classes rather than calling per-node methods. `str(node)` returns the
    canonical rendering produced by `PrettyPrinter.print_source`.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional, Tuple


class NodeType(Enum):
    VARIABLE = auto()
    STRING_LITERAL = auto()
    INT_LITERAL = auto()
    FLOAT_LITERAL = auto()
    MATH_OP = auto()
    ASSIGNMENT = auto()
    PRINT_STMT = auto()
    READ_STMT = auto()
    DATA_STMT = auto()
    INPUT_STMT = auto()
    STATEMENTS = auto()

    def __str__(self) -> str:
        return self.name


class MathOp(Enum):
    ADD = auto()
    SUBTRACT = auto()
    MULTIPLY = auto()
    DIVIDE = auto()

    def __str__(self) -> str:
        return self.name


# Base AST Node
@dataclass(frozen=True)
class ASTNode:
    type: NodeType
    line: int = 0
    column: int = 0

    def __str__(self) -> str:
        from pretty_printer import PrettyPrinter

        return PrettyPrinter.print_source(self)


# Expression Nodes
@dataclass(frozen=True)
class VariableNode(ASTNode):
    type: NodeType = NodeType.VARIABLE
    name: str = ""


@dataclass(frozen=True)
class StringLiteralNode(ASTNode):
    type: NodeType = NodeType.STRING_LITERAL
    value: str = ""


@dataclass(frozen=True)
class IntLiteralNode(ASTNode):
    type: NodeType = NodeType.INT_LITERAL
    value: int = 0


@dataclass(frozen=True)
class FloatLiteralNode(ASTNode):
    type: NodeType = NodeType.FLOAT_LITERAL
    value: float = 0.0


@dataclass(frozen=True)
class MathOpNode(ASTNode):
    type: NodeType = NodeType.MATH_OP
    operator: MathOp = MathOp.ADD
    left: ASTNode = field(default_factory=lambda: IntLiteralNode())
    right: ASTNode = field(default_factory=lambda: IntLiteralNode())


# Statement Nodes
@dataclass(frozen=True)
class AssignmentNode(ASTNode):
    type: NodeType = NodeType.ASSIGNMENT
    variable: VariableNode = field(default_factory=lambda: VariableNode())
    value: ASTNode = field(default_factory=lambda: IntLiteralNode())


@dataclass(frozen=True)
class PrintNode(ASTNode):
    type: NodeType = NodeType.PRINT_STMT
    items: Tuple[ASTNode, ...] = ()


@dataclass(frozen=True)
class ReadNode(ASTNode):
    type: NodeType = NodeType.READ_STMT
    variables: Tuple[VariableNode, ...] = ()


@dataclass(frozen=True)
class DataNode(ASTNode):
    type: NodeType = NodeType.DATA_STMT
    values: Tuple[ASTNode, ...] = ()


@dataclass(frozen=True)
class InputNode(ASTNode):
    type: NodeType = NodeType.INPUT_STMT
    # Only string prompts are accepted by the parser.
    prompt: Optional[StringLiteralNode] = None
    variables: Tuple[VariableNode, ...] = ()


# Program Node
@dataclass(frozen=True)
class StatementsNode(ASTNode):
    type: NodeType = NodeType.STATEMENTS
    statements: Tuple[ASTNode, ...] = ()


LITERAL_NODES = (StringLiteralNode, IntLiteralNode, FloatLiteralNode)
STATEMENT_NODES = (AssignmentNode, PrintNode, ReadNode, DataNode, InputNode)
