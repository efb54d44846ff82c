"""
Parser for the BASIC dialect.

Overview and approach:
- This parser is a hand-written recursive-descent parser. Each grammar rule
    is one method and precedence is encoded by which method calls which:
    statements call `parse_expression()`, which calls `parse_term()`, which
    calls `parse_factor()`.

Grammar:
    statements  := statement*
    statement   := print | read | data | input | assignment
    print       := PRINT expression (',' expression)*
    read        := READ WORD (',' WORD)*
    data        := DATA literal (',' literal)*
    input       := INPUT [STRINGLITERAL ','] WORD (',' WORD)*
    assignment  := WORD '=' expression
    expression  := term (('+' | '-') term)*
    term        := factor (('*' | '/') factor)*
    factor      := '-' factor | NUMBER | STRINGLITERAL | '(' expression ')' | WORD
    literal     := STRINGLITERAL | ['-'] NUMBER

Key points:
- Binary operators fold to the left, so `a - b - c` is `((a - b) - c)`.
- Unary minus is rewritten as `0 - x`.
- NUMBER tokens containing a `.` become `FloatLiteralNode`, others become
    `IntLiteralNode`. Text that is not a valid number raises `ParseError`.
- The statement loop stops at the first token that cannot start a statement.
    Tokens left at that point stay unparsed; with `strict=True` they are an
    error.

Examples:
    - `z = x + y * 2` parses to `z = (x ADD (y MULTIPLY 2))`
    - `INPUT "Age: ", age` parses to `input "Age: ", age`
"""

from __future__ import annotations
from typing import List, Optional, Tuple
from tokens import Token, TokenType
from ast_nodes import *


class ParseError(SyntaxError):
    """Raised when the token stream does not match the grammar."""

    def __init__(
        self, message: str, expected: Optional[str] = None, token: Optional[Token] = None
    ):
        if token is None:
            where = "at end of input"
        else:
            where = f"at line {token.line}, column {token.column}"
        super().__init__(f"{message} {where}")
        self.expected = expected
        self.token = token
        self.line = token.line if token is not None else None
        self.column = token.column if token is not None else None


ADDITIVE_OPS = {
    TokenType.PLUS: MathOp.ADD,
    TokenType.MINUS: MathOp.SUBTRACT,
}

MULTIPLICATIVE_OPS = {
    TokenType.STAR: MathOp.MULTIPLY,
    TokenType.SLASH: MathOp.DIVIDE,
}


def _describe(token: Optional[Token]) -> str:
    if token is None:
        return "end of input"
    if token.value is not None:
        return f"{token.type}({token.value})"
    return str(token.type)


class Parser:
    def __init__(self, tokens: List[Token], strict: bool = False):
        self.tokens = list(tokens)
        self.pos = 0
        self.current: Optional[Token] = self.tokens[0] if self.tokens else None
        self.strict = strict

    def advance(self) -> Optional[Token]:
        """Move to next token."""
        self.pos += 1
        if self.pos < len(self.tokens):
            self.current = self.tokens[self.pos]
        else:
            self.current = None
        return self.current

    def check(self, *token_types: TokenType) -> bool:
        return self.current is not None and self.current.type in token_types

    def eat(self, expected_type: TokenType) -> Token:
        """Consume the current token if it has the expected type."""
        if self.check(expected_type):
            token = self.current
            self.advance()
            return token

        raise ParseError(
            f"Expected {expected_type}, got {_describe(self.current)}",
            expected=str(expected_type),
            token=self.current,
        )

    def parse_number(self, negate: bool = False) -> ASTNode:
        """Parse a NUMBER token into an integer or float literal."""
        token = self.eat(TokenType.NUMBER)
        text = token.value
        try:
            if "." in text:
                value = float(text)
                return FloatLiteralNode(
                    value=-value if negate else value,
                    line=token.line,
                    column=token.column,
                )
            value = int(text)
        except ValueError:
            raise ParseError(
                f"Malformed number '{text}'", expected="number", token=token
            ) from None

        return IntLiteralNode(
            value=-value if negate else value, line=token.line, column=token.column
        )

    def parse_variable(self) -> VariableNode:
        token = self.eat(TokenType.WORD)
        return VariableNode(name=token.value, line=token.line, column=token.column)

    def parse_variable_list(self) -> Tuple[VariableNode, ...]:
        """Parse WORD (',' WORD)*"""
        variables = [self.parse_variable()]
        while self.check(TokenType.COMMA):
            self.eat(TokenType.COMMA)
            variables.append(self.parse_variable())
        return tuple(variables)

    def parse_factor(self) -> ASTNode:
        """Parse unary minus, literals, variables and parenthesized expressions."""
        token = self.current

        match token.type if token is not None else None:
            case TokenType.MINUS:
                self.eat(TokenType.MINUS)
                operand = self.parse_factor()
                return MathOpNode(
                    operator=MathOp.SUBTRACT,
                    left=IntLiteralNode(value=0),
                    right=operand,
                    line=token.line,
                    column=token.column,
                )

            case TokenType.NUMBER:
                return self.parse_number()

            case TokenType.STRINGLITERAL:
                self.eat(TokenType.STRINGLITERAL)
                return StringLiteralNode(
                    value=token.value, line=token.line, column=token.column
                )

            case TokenType.LPAREN:
                self.eat(TokenType.LPAREN)
                expr = self.parse_expression()
                self.eat(TokenType.RPAREN)
                return expr

            case TokenType.WORD:
                return self.parse_variable()

            case _:
                raise ParseError(
                    f"Unexpected {_describe(token)}, expected expression",
                    expected="expression",
                    token=token,
                )

    def parse_term(self) -> ASTNode:
        """Parse factor (('*' | '/') factor)*"""
        node = self.parse_factor()

        while self.check(*MULTIPLICATIVE_OPS):
            token = self.eat(self.current.type)
            node = MathOpNode(
                operator=MULTIPLICATIVE_OPS[token.type],
                left=node,
                right=self.parse_factor(),
                line=token.line,
                column=token.column,
            )

        return node

    def parse_expression(self) -> ASTNode:
        """Parse term (('+' | '-') term)*"""
        node = self.parse_term()

        while self.check(*ADDITIVE_OPS):
            token = self.eat(self.current.type)
            node = MathOpNode(
                operator=ADDITIVE_OPS[token.type],
                left=node,
                right=self.parse_term(),
                line=token.line,
                column=token.column,
            )

        return node

    def parse_print_statement(self) -> PrintNode:
        """Parse print statement: PRINT expr (',' expr)*"""
        start = self.eat(TokenType.PRINT)
        items = [self.parse_expression()]

        while self.check(TokenType.COMMA):
            self.eat(TokenType.COMMA)
            items.append(self.parse_expression())

        return PrintNode(items=tuple(items), line=start.line, column=start.column)

    def parse_read_statement(self) -> ReadNode:
        """Parse read statement: READ WORD (',' WORD)*"""
        start = self.eat(TokenType.READ)
        variables = self.parse_variable_list()
        return ReadNode(variables=variables, line=start.line, column=start.column)

    def parse_data_literal(self) -> ASTNode:
        """Parse a single DATA item: a string or an optionally negated number."""
        token = self.current
        if self.check(TokenType.STRINGLITERAL):
            self.eat(TokenType.STRINGLITERAL)
            return StringLiteralNode(
                value=token.value, line=token.line, column=token.column
            )
        if self.check(TokenType.MINUS):
            self.eat(TokenType.MINUS)
            return self.parse_number(negate=True)
        if self.check(TokenType.NUMBER):
            return self.parse_number()

        raise ParseError(
            f"Unexpected {_describe(token)}, expected literal",
            expected="literal",
            token=token,
        )

    def parse_data_statement(self) -> DataNode:
        """Parse data statement: DATA literal (',' literal)*"""
        start = self.eat(TokenType.DATA)
        values = [self.parse_data_literal()]

        while self.check(TokenType.COMMA):
            self.eat(TokenType.COMMA)
            values.append(self.parse_data_literal())

        return DataNode(values=tuple(values), line=start.line, column=start.column)

    def parse_input_statement(self) -> InputNode:
        """Parse input statement: INPUT [STRINGLITERAL ','] WORD (',' WORD)*"""
        start = self.eat(TokenType.INPUT)
        prompt = None

        if self.check(TokenType.STRINGLITERAL):
            token = self.eat(TokenType.STRINGLITERAL)
            prompt = StringLiteralNode(
                value=token.value, line=token.line, column=token.column
            )
            self.eat(TokenType.COMMA)

        variables = self.parse_variable_list()
        return InputNode(
            prompt=prompt, variables=variables, line=start.line, column=start.column
        )

    def parse_assignment(self) -> AssignmentNode:
        """Parse assignment: WORD '=' expr"""
        variable = self.parse_variable()
        self.eat(TokenType.EQUALS)
        value = self.parse_expression()
        return AssignmentNode(
            variable=variable, value=value, line=variable.line, column=variable.column
        )

    def parse_statement(self) -> Optional[ASTNode]:
        """Parse a statement, or return None if none can start here."""
        match self.current.type if self.current is not None else None:
            case TokenType.PRINT:
                return self.parse_print_statement()
            case TokenType.READ:
                return self.parse_read_statement()
            case TokenType.DATA:
                return self.parse_data_statement()
            case TokenType.INPUT:
                return self.parse_input_statement()
            case TokenType.WORD:
                return self.parse_assignment()
            case _:
                return None

    def parse_statements(self) -> StatementsNode:
        """Parse statements until one cannot start."""
        statements: List[ASTNode] = []

        while True:
            statement = self.parse_statement()
            if statement is None:
                break
            statements.append(statement)

        return StatementsNode(statements=tuple(statements))

    def parse(self) -> StatementsNode:
        """Parse a complete program."""
        try:
            program = self.parse_statements()
        except RecursionError:
            raise ParseError(
                "Expression nested too deeply", expected="expression", token=self.current
            ) from None

        if self.strict and self.current is not None:
            raise ParseError(
                f"Unexpected {_describe(self.current)} after end of statements",
                expected="statement",
                token=self.current,
            )

        return program
