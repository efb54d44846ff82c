"""Token definitions for the BASIC lexer.

This module defines the `TokenType` enum for all token kinds recognized by
the lexer and a small frozen `Token` dataclass holding the kind, an optional
lexeme and the 1-based source position of the token's first character.
Tokens are the atomic units produced by the lexer and consumed by the parser.
"""

from __future__ import annotations
from enum import Enum, auto
from dataclasses import dataclass
from typing import Optional


class TokenType(Enum):
    # Literals and names
    WORD = auto()
    NUMBER = auto()
    ENDOFLINE = auto()
    STRINGLITERAL = auto()
    LABEL = auto()

    # Keywords
    PRINT = auto()
    READ = auto()
    INPUT = auto()
    DATA = auto()
    GOSUB = auto()
    FOR = auto()
    TO = auto()
    STEP = auto()
    NEXT = auto()
    RETURN = auto()
    IF = auto()
    THEN = auto()
    FUNCTION = auto()
    WHILE = auto()
    END = auto()

    # Comparison and assignment
    EQUALS = auto()
    NOTEQUALS = auto()
    LESSTHAN = auto()
    GREATERTHAN = auto()
    LEQ = auto()
    GEQ = auto()

    # Grouping and punctuation
    LPAREN = auto()
    RPAREN = auto()
    COMMA = auto()

    # Arithmetic operators
    PLUS = auto()
    MINUS = auto()
    STAR = auto()
    SLASH = auto()

    # Special
    SPECIAL_CHAR = auto()

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Token:
    type: TokenType
    value: Optional[str] = None
    line: int = 1
    column: int = 1

    def __str__(self) -> str:
        text = f"({self.value})" if self.value is not None else ""
        return f"{self.type}{text} at line {self.line}, position {self.column}"

    def __repr__(self) -> str:
        return f"Token({self.type}, {repr(self.value)}, {self.line}:{self.column})"

    @property
    def lexeme(self) -> str:
        if self.value is None:
            return str(self.type)
        return self.value
