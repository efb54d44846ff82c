"""Printers for tokens and the AST.

Provides:
- `PrettyPrinter.print_source(node)`: the canonical one-line-per-statement
    rendering used by `str(node)` and by the tests, e.g.
    `z = (x ADD (y MULTIPLY 2))`.
- `PrettyPrinter.print_ast(node, indent, prefix)`: an indented multi-line
    tree intended for debugging.
- `PrettyPrinter.print_tokens(tokens)`: one token per line.

Examples:
    PrettyPrinter.print_source(program_node)
    PrettyPrinter.print_ast(program_node)
"""

from __future__ import annotations
from typing import List
from ast_nodes import *
from tokens import Token


class PrettyPrinter:
    @staticmethod
    def print_tokens(tokens: List[Token]) -> str:
        """Render a token list with one token per line."""
        return "\n".join(str(token) for token in tokens)

    @staticmethod
    def print_source(node: ASTNode) -> str:
        """Return the canonical text of an AST node."""

        def _join(nodes) -> str:
            return ", ".join(PrettyPrinter.print_source(n) for n in nodes)

        match node:
            case VariableNode(name=n):
                return n
            case StringLiteralNode(value=v):
                return f'"{v}"'
            case IntLiteralNode(value=v) | FloatLiteralNode(value=v):
                return str(v)
            case MathOpNode(operator=op, left=l, right=r):
                return f"({PrettyPrinter.print_source(l)} {op} {PrettyPrinter.print_source(r)})"
            case AssignmentNode(variable=var, value=val):
                return f"{PrettyPrinter.print_source(var)} = {PrettyPrinter.print_source(val)}"
            case PrintNode(items=items):
                return f"print {_join(items)}"
            case ReadNode(variables=variables):
                return f"read {_join(variables)}"
            case DataNode(values=values):
                return f"data {_join(values)}"
            case InputNode(prompt=prompt, variables=variables):
                prompt_str = f"{PrettyPrinter.print_source(prompt)}, " if prompt else ""
                return f"input {prompt_str}{_join(variables)}"
            case StatementsNode(statements=stmts):
                return "\n".join(PrettyPrinter.print_source(s) for s in stmts)
            case _:
                raise TypeError(f"Unknown node type: {type(node).__name__}")

    @staticmethod
    def print_ast(node: ASTNode, indent: int = 0, prefix: str = "") -> str:
        """Pretty print AST and return as string."""
        lines = []
        indent_str = " " * indent

        if not isinstance(node, ASTNode):
            lines.append(f"{indent_str}{prefix}{node}")
            return "\n".join(lines)

        match node:
            case VariableNode(name=n):
                lines.append(f"{indent_str}{prefix}Variable({n})")

            case StringLiteralNode(value=v):
                lines.append(f"{indent_str}{prefix}StringLiteral({v!r})")

            case IntLiteralNode(value=v):
                lines.append(f"{indent_str}{prefix}IntLiteral({v})")

            case FloatLiteralNode(value=v):
                lines.append(f"{indent_str}{prefix}FloatLiteral({v})")

            case MathOpNode(operator=op, left=left, right=right):
                lines.append(f"{indent_str}{prefix}MathOp({op})")
                lines.append(PrettyPrinter.print_ast(left, indent + 2, "left: "))
                lines.append(PrettyPrinter.print_ast(right, indent + 2, "right: "))

            case AssignmentNode(variable=var, value=val):
                lines.append(f"{indent_str}{prefix}Assignment")
                lines.append(PrettyPrinter.print_ast(var, indent + 2, "target: "))
                lines.append(PrettyPrinter.print_ast(val, indent + 2, "value: "))

            case PrintNode(items=items):
                lines.append(f"{indent_str}{prefix}PrintStatement")
                for i, item in enumerate(items):
                    lines.append(PrettyPrinter.print_ast(item, indent + 4, f"item[{i}]: "))

            case ReadNode(variables=variables):
                lines.append(f"{indent_str}{prefix}ReadStatement")
                for i, var in enumerate(variables):
                    lines.append(PrettyPrinter.print_ast(var, indent + 4, f"var[{i}]: "))

            case DataNode(values=values):
                lines.append(f"{indent_str}{prefix}DataStatement")
                for i, val in enumerate(values):
                    lines.append(PrettyPrinter.print_ast(val, indent + 4, f"value[{i}]: "))

            case InputNode(prompt=prompt, variables=variables):
                lines.append(f"{indent_str}{prefix}InputStatement")
                if prompt:
                    lines.append(PrettyPrinter.print_ast(prompt, indent + 4, "prompt: "))
                for i, var in enumerate(variables):
                    lines.append(PrettyPrinter.print_ast(var, indent + 4, f"var[{i}]: "))

            case StatementsNode(statements=stmts):
                lines.append(f"{indent_str}{prefix}Statements")
                for i, stmt in enumerate(stmts):
                    lines.append(PrettyPrinter.print_ast(stmt, indent + 4, f"stmt[{i}]: "))

            case _:
                lines.append(f"{indent_str}{prefix}Unknown node type: {type(node)}")

        return "\n".join(line for line in lines if line)
