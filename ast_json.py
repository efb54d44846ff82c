"""Convert tokens and AST nodes into JSON-serializable structures.

This module provides `ast_to_json(node)` and `tokens_to_json(tokens)`, which
return nested dicts/lists/primitives describing the input. The node encoding
records the node kind, its source position and its key fields.
"""

from typing import Any, Dict, List, Optional
from ast_nodes import *
from tokens import Token


def tokens_to_json(tokens: List[Token]) -> List[Dict[str, Any]]:
    return [
        {
            "type": token.type.name,
            "value": token.value,
            "line": token.line,
            "column": token.column,
        }
        for token in tokens
    ]


def ast_to_json(node: Optional[ASTNode]) -> Any:
    if node is None:
        return None

    data: Dict[str, Any] = {"line": node.line, "column": node.column}

    # literals and names
    if isinstance(node, VariableNode):
        return {"node_type": "Variable", "name": node.name, **data}
    if isinstance(node, StringLiteralNode):
        return {"node_type": "StringLiteral", "value": node.value, **data}
    if isinstance(node, IntLiteralNode):
        return {"node_type": "IntLiteral", "value": node.value, **data}
    if isinstance(node, FloatLiteralNode):
        return {"node_type": "FloatLiteral", "value": node.value, **data}
    # expressions
    if isinstance(node, MathOpNode):
        return {
            "node_type": "MathOp",
            "operator": node.operator.name,
            "left": ast_to_json(node.left),
            "right": ast_to_json(node.right),
            **data,
        }
    # statements
    if isinstance(node, AssignmentNode):
        return {
            "node_type": "Assignment",
            "variable": ast_to_json(node.variable),
            "value": ast_to_json(node.value),
            **data,
        }
    if isinstance(node, PrintNode):
        return {
            "node_type": "Print",
            "items": [ast_to_json(i) for i in node.items],
            **data,
        }
    if isinstance(node, ReadNode):
        return {
            "node_type": "Read",
            "variables": [ast_to_json(v) for v in node.variables],
            **data,
        }
    if isinstance(node, DataNode):
        return {
            "node_type": "Data",
            "values": [ast_to_json(v) for v in node.values],
            **data,
        }
    if isinstance(node, InputNode):
        return {
            "node_type": "Input",
            "prompt": ast_to_json(node.prompt),
            "variables": [ast_to_json(v) for v in node.variables],
            **data,
        }
    if isinstance(node, StatementsNode):
        return {
            "node_type": "Statements",
            "statements": [ast_to_json(s) for s in node.statements],
            **data,
        }

    raise TypeError(f"Unknown node type: {type(node).__name__}")
