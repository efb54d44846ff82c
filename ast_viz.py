"""Graphviz visualization helpers for the AST.

Provides `render_ast_dot(node)` which returns a `graphviz.Digraph` object (not
rendered). `write_and_render` writes the rendered file to disk.

Layout: every AST node becomes one box labelled with its kind and, for leaf
nodes, its value. Edges run from parent to child and are labelled with the
child's role (`left`, `value`, `item[0]`, ...).
"""

from typing import Iterator, Tuple
from ast_nodes import *
from graphviz import Digraph


def _children(node: ASTNode) -> Iterator[Tuple[str, ASTNode]]:
    match node:
        case MathOpNode(left=left, right=right):
            yield "left", left
            yield "right", right
        case AssignmentNode(variable=var, value=val):
            yield "target", var
            yield "value", val
        case PrintNode(items=items):
            for i, item in enumerate(items):
                yield f"item[{i}]", item
        case ReadNode(variables=variables):
            for i, var in enumerate(variables):
                yield f"var[{i}]", var
        case DataNode(values=values):
            for i, val in enumerate(values):
                yield f"value[{i}]", val
        case InputNode(prompt=prompt, variables=variables):
            if prompt is not None:
                yield "prompt", prompt
            for i, var in enumerate(variables):
                yield f"var[{i}]", var
        case StatementsNode(statements=stmts):
            for i, stmt in enumerate(stmts):
                yield f"stmt[{i}]", stmt


def _label(node: ASTNode) -> str:
    match node:
        case VariableNode(name=n):
            return f"Variable\\n{n}"
        case StringLiteralNode(value=v):
            return f'StringLiteral\\n"{v}"'
        case IntLiteralNode(value=v):
            return f"IntLiteral\\n{v}"
        case FloatLiteralNode(value=v):
            return f"FloatLiteral\\n{v}"
        case MathOpNode(operator=op):
            return f"MathOp\\n{op}"
        case _:
            return str(node.type)


def render_ast_dot(node: ASTNode) -> Digraph:
    """Return a graphviz.Digraph for the given AST.

    The caller may call `dot.source` to inspect the dot text, or call
    `dot.render(filename, format=...)` to write files (requires Graphviz installed).
    """
    dot = Digraph(format="svg")
    dot.attr("graph", rankdir="TB")
    dot.attr("node", shape="box", fontsize="10")

    counter = 0
    stack = [(None, "", node)]
    while stack:
        parent_id, role, current = stack.pop()
        node_id = f"n{counter}"
        counter += 1
        dot.node(node_id, label=_label(current))
        if parent_id is not None:
            dot.edge(parent_id, node_id, label=role)
        # reversed so children are emitted left to right
        for child_role, child in reversed(list(_children(current))):
            stack.append((node_id, child_role, child))

    return dot


def write_and_render(node: ASTNode, out_path: str, fmt: str = "svg") -> None:
    """Write and render the AST to the given path (without extension).

    Example: write_and_render(ast, 'out/ast', fmt='png') will create out/ast.png
    (requires Graphviz)."""
    dot = render_ast_dot(node)
    dot.format = fmt
    # Note: render will append extension automatically
    dot.render(out_path, cleanup=True)
