"""
Lexer for the small BASIC dialect.

Overview:
- This module implements a hand-written lexical analyzer that walks a
    `SourceCursor` over the program text and produces a list of `Token`
    objects defined in `tokens.py`.
- Characters are classified by their first character: whitespace is
    skipped, digits start numbers, letters/underscores start words, a double
    quote starts a string literal and anything registered in the symbol
    tables starts an operator. Everything else is a lexical error.

Examples:
    Input:  "x = 10"
    Tokens: [WORD('x'), EQUALS, NUMBER('10')]

    Input:  "PRINT a <= 3"
    Tokens: [PRINT, WORD('a'), LEQ, NUMBER('3')]

Implementation notes:
- Keywords are matched case-insensitively; words are lowercased before the
    keyword lookup and WORD tokens carry the lowercased text.
- Two-character symbols are preferred over one-character ones (`<=` is never
    split into `<` `=`).
- Number text is not validated here: `1.2.3` lexes as one NUMBER token.
- Inside string literals only `\\"` is an escape. Any other backslash is kept
    as-is.
- `;` and `%` lex as RPAREN. Existing programs depend on this mapping.
"""

from __future__ import annotations
from typing import Dict, List, Optional
from source_cursor import SourceCursor
from tokens import Token, TokenType


KEYWORDS: Dict[str, TokenType] = {
    "print": TokenType.PRINT,
    "read": TokenType.READ,
    "input": TokenType.INPUT,
    "data": TokenType.DATA,
    "gosub": TokenType.GOSUB,
    "for": TokenType.FOR,
    "to": TokenType.TO,
    "step": TokenType.STEP,
    "next": TokenType.NEXT,
    "return": TokenType.RETURN,
    "if": TokenType.IF,
    "then": TokenType.THEN,
    "function": TokenType.FUNCTION,
    "while": TokenType.WHILE,
    "end": TokenType.END,
}

TWO_CHAR_SYMBOLS: Dict[str, TokenType] = {
    "<=": TokenType.LEQ,
    ">=": TokenType.GEQ,
    "<>": TokenType.NOTEQUALS,
}

ONE_CHAR_SYMBOLS: Dict[str, TokenType] = {
    "=": TokenType.EQUALS,
    "<": TokenType.LESSTHAN,
    ">": TokenType.GREATERTHAN,
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.STAR,
    "/": TokenType.SLASH,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    ";": TokenType.RPAREN,
    "%": TokenType.RPAREN,
    ",": TokenType.COMMA,
}


class LexError(SyntaxError):
    """Raised when the source text cannot be tokenized."""

    def __init__(self, message: str, line: int, column: int):
        super().__init__(f"Lexical error at line {line}, column {column}: {message}")
        self.line = line
        self.column = column


class Lexer:
    def __init__(self, text: str):
        self.cursor = SourceCursor(text)
        self.line = 1
        self.column = 1

        # Shared module tables; never mutated.
        self.keywords = KEYWORDS
        self.two_char_symbols = TWO_CHAR_SYMBOLS
        self.one_char_symbols = ONE_CHAR_SYMBOLS

    def error(
        self,
        message: str,
        line: Optional[int] = None,
        column: Optional[int] = None,
    ) -> LexError:
        return LexError(
            message,
            self.line if line is None else line,
            self.column if column is None else column,
        )

    def advance(self) -> Optional[str]:
        """Consume one character inside a token run."""
        ch = self.cursor.get_char()
        if ch is not None:
            self.column += 1
        return ch

    def skip_whitespace(self) -> None:
        """Consume a single whitespace character and update the position."""
        ch = self.cursor.get_char()
        if ch == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1

    def number(self) -> Token:
        """Scan a run of digits and decimal points."""
        line, column = self.line, self.column
        result = []

        while True:
            ch = self.cursor.peek()
            if ch is None or not (ch.isdecimal() or ch == "."):
                break
            result.append(self.advance())

        return Token(TokenType.NUMBER, "".join(result), line, column)

    def word(self) -> Token:
        """Scan an identifier and map it to a keyword when it is one."""
        line, column = self.line, self.column
        result = []

        while True:
            ch = self.cursor.peek()
            if ch is None or not (ch.isalpha() or ch.isdecimal() or ch == "_"):
                break
            result.append(self.advance())

        text = "".join(result).lower()
        keyword = self.keywords.get(text)
        if keyword is not None:
            return Token(keyword, None, line, column)
        return Token(TokenType.WORD, text, line, column)

    def string_literal(self) -> Token:
        """Scan a double-quoted string; the quotes are not part of the value."""
        line, column = self.line, self.column
        self.advance()  # opening quote
        result = []

        while not self.cursor.is_done() and self.cursor.peek() != '"':
            if self.cursor.peek() == "\\" and self.cursor.peek(1) == '"':
                self.advance()
            result.append(self.advance())

        if self.cursor.is_done():
            raise self.error("Unmatched quote in string literal", line, column)

        self.advance()  # closing quote
        return Token(TokenType.STRINGLITERAL, "".join(result), line, column)

    def _pair(self) -> str:
        return (self.cursor.peek() or "") + (self.cursor.peek(1) or "")

    def is_symbol(self, ch: str) -> bool:
        return ch in self.one_char_symbols or self._pair() in self.two_char_symbols

    def symbol(self) -> Token:
        """Scan an operator, preferring the two-character form."""
        line, column = self.line, self.column
        pair = self._pair()

        if pair in self.two_char_symbols:
            self.advance()
            self.advance()
            return Token(self.two_char_symbols[pair], None, line, column)

        ch = self.advance()
        token_type = self.one_char_symbols.get(ch, TokenType.SPECIAL_CHAR)
        value = ch if token_type == TokenType.SPECIAL_CHAR else None
        return Token(token_type, value, line, column)

    def tokenize(self) -> List[Token]:
        """Return all tokens from the input text."""
        tokens: List[Token] = []

        while not self.cursor.is_done():
            ch = self.cursor.peek()

            if ch.isspace():
                self.skip_whitespace()
            elif ch.isdecimal():
                tokens.append(self.number())
            elif ch.isalpha() or ch == "_":
                tokens.append(self.word())
            elif ch == '"':
                tokens.append(self.string_literal())
            elif self.is_symbol(ch):
                tokens.append(self.symbol())
            else:
                raise self.error(f"Unrecognized character '{ch}'")

        return tokens
