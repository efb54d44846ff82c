import pytest

from tests.utils import lex, parse_text, parse_tokens, render
from ast_nodes import *
from parser import ParseError
from tokens import Token, TokenType


def test_parser_parses_variable_assignment():
    assert render("x = 10") == "x = 10"


def test_parser_parses_math_operation():
    assert render("z = x + y") == "z = (x ADD y)"


def test_parser_parses_print_statement():
    assert render('print "Hello, World!"') == 'print "Hello, World!"'


def test_multiplication_binds_tighter_than_addition():
    assert render("z = x + y * 2") == "z = (x ADD (y MULTIPLY 2))"


def test_parentheses_override_precedence():
    assert render("z = (x + y) * 2") == "z = ((x ADD y) MULTIPLY 2)"


def test_operators_fold_left():
    assert render("z = a - b - c") == "z = ((a SUBTRACT b) SUBTRACT c)"
    assert render("z = a / b * c") == "z = ((a DIVIDE b) MULTIPLY c)"


def test_unary_minus_is_rewritten_as_subtraction_from_zero():
    assert render("y = -x") == "y = (0 SUBTRACT x)"
    assert render("y = --3") == "y = (0 SUBTRACT (0 SUBTRACT 3))"


def test_print_with_multiple_items():
    assert render('print "a", x + 1, 2') == 'print "a", (x ADD 1), 2'


def test_multiple_statements_on_separate_lines():
    src = "x = 10\nprint x\ny = x + 5\nprint y"
    assert render(src) == "x = 10\nprint x\ny = (x ADD 5)\nprint y"


def test_read_statement():
    assert render("READ x, y") == "read x, y"


def test_data_statement():
    src = 'DATA "Sample String", 123, 45.67'
    assert render(src) == 'data "Sample String", 123, 45.67'


def test_data_statement_accepts_negative_numbers():
    ast = parse_text("data -5, -2.5")
    values = ast.statements[0].values
    assert values[0] == IntLiteralNode(value=-5, line=1, column=7)
    assert isinstance(values[1], FloatLiteralNode)
    assert values[1].value == -2.5


def test_data_statement_rejects_variables():
    with pytest.raises(ParseError) as exc_info:
        parse_text("data x")
    assert exc_info.value.expected == "literal"


def test_input_statement_with_prompt():
    assert render('INPUT "Enter value: ", z') == 'input "Enter value: ", z'


def test_input_statement_without_prompt():
    ast = parse_text("input a, b")
    stmt = ast.statements[0]
    assert isinstance(stmt, InputNode)
    assert stmt.prompt is None
    assert [v.name for v in stmt.variables] == ["a", "b"]
    assert str(stmt) == "input a, b"


def test_input_prompt_requires_comma():
    with pytest.raises(ParseError, match="Expected COMMA"):
        parse_text('input "name" n')


def test_number_literals_pick_int_or_float():
    ast = parse_text("a = 3\nb = 2.5")
    first, second = ast.statements
    assert isinstance(first.value, IntLiteralNode)
    assert first.value.value == 3
    assert isinstance(second.value, FloatLiteralNode)
    assert second.value.value == 2.5
    assert str(second) == "b = 2.5"


def test_malformed_number_raises():
    with pytest.raises(ParseError, match="Malformed number '1.2.3'"):
        parse_text("x = 1.2.3")


def test_ast_shape_for_assignment():
    ast = parse_text("total = price * 2")
    assert isinstance(ast, StatementsNode)
    stmt = ast.statements[0]
    assert isinstance(stmt, AssignmentNode)
    assert stmt.variable.name == "total"
    assert isinstance(stmt.value, MathOpNode)
    assert stmt.value.operator == MathOp.MULTIPLY
    assert stmt.value.left == VariableNode(name="price", line=1, column=9)
    assert stmt.value.right.value == 2


def test_eat_reports_expected_and_actual():
    with pytest.raises(ParseError) as exc_info:
        parse_text("x 10")
    err = exc_info.value
    assert err.expected == "EQUALS"
    assert err.token.type == TokenType.NUMBER
    assert (err.line, err.column) == (1, 3)
    assert "Expected EQUALS, got NUMBER(10) at line 1, column 3" in str(err)


def test_missing_expression_at_end_of_input():
    with pytest.raises(ParseError) as exc_info:
        parse_text("x =")
    assert exc_info.value.token is None
    assert "end of input" in str(exc_info.value)


def test_factor_with_no_alternative_raises():
    with pytest.raises(ParseError, match="expected expression"):
        parse_text("x = * 2")


def test_unclosed_parenthesis_raises():
    with pytest.raises(ParseError, match="Expected RPAREN"):
        parse_text("x = (1 + 2")


def test_trailing_tokens_are_left_unparsed_by_default():
    assert str(parse_text("x = 10; print x")) == "x = 10"


def test_strict_mode_rejects_trailing_tokens():
    with pytest.raises(ParseError, match="after end of statements") as exc_info:
        parse_text("x = 10; print x", strict=True)
    assert (exc_info.value.line, exc_info.value.column) == (1, 7)


def test_unsupported_keyword_stops_statement_sequence():
    ast = parse_text("x = 1\ngosub")
    assert len(ast.statements) == 1


def test_deeply_nested_unary_minus_raises_parse_error():
    with pytest.raises(ParseError, match="nested too deeply"):
        parse_text("x = " + "-" * 3000 + "1")


def test_deeply_nested_parentheses_raise_parse_error():
    with pytest.raises(ParseError, match="nested too deeply"):
        parse_text("x = " + "(" * 3000 + "1" + ")" * 3000)


def test_empty_program():
    ast = parse_tokens([])
    assert isinstance(ast, StatementsNode)
    assert ast.statements == ()
    assert str(ast) == ""


def test_parse_from_hand_built_tokens():
    tokens = [
        Token(TokenType.PRINT),
        Token(TokenType.NUMBER, "1"),
        Token(TokenType.PLUS),
        Token(TokenType.NUMBER, "2"),
    ]
    assert str(parse_tokens(tokens)) == "print (1 ADD 2)"


def test_parser_does_not_mutate_token_list():
    tokens = lex("x = 1")
    parse_tokens(tokens)
    assert len(tokens) == 3
