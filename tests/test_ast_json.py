import json

from tests.utils import lex, parse_text
from ast_json import ast_to_json, tokens_to_json


def test_ast_to_json_encodes_nested_nodes():
    data = ast_to_json(parse_text("x = 2 * y"))
    assert data["node_type"] == "Statements"
    stmt = data["statements"][0]
    assert stmt["node_type"] == "Assignment"
    assert stmt["variable"]["name"] == "x"
    assert stmt["value"]["operator"] == "MULTIPLY"
    assert stmt["value"]["left"] == {
        "node_type": "IntLiteral",
        "value": 2,
        "line": 1,
        "column": 5,
    }
    json.dumps(data)


def test_ast_to_json_input_without_prompt():
    data = ast_to_json(parse_text("input a"))
    stmt = data["statements"][0]
    assert stmt["prompt"] is None
    assert [v["name"] for v in stmt["variables"]] == ["a"]


def test_tokens_to_json():
    data = tokens_to_json(lex('print "hi"'))
    assert data == [
        {"type": "PRINT", "value": None, "line": 1, "column": 1},
        {"type": "STRINGLITERAL", "value": "hi", "line": 1, "column": 7},
    ]
