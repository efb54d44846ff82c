"""Tests for ast_viz: ensure a Digraph is produced and contains node labels."""

from tests.utils import parse_text
from ast_viz import render_ast_dot


def test_ast_viz_dot_source():
    dot = render_ast_dot(parse_text("z = x + 2\nprint z"))
    src = dot.source
    assert "Statements" in src or "STATEMENTS" in src
    assert "MathOp" in src
    assert "stmt[0]" in src
    assert "stmt[1]" in src
    assert "n0 -> n1" in src


def test_ast_viz_node_count():
    dot = render_ast_dot(parse_text("read a, b"))
    # statements, read, two variables
    assert sum(1 for line in dot.body if " -> " in line) == 3
