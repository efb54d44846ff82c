from lexer import Lexer
from parser import Parser


def lex(text: str):
    """Return a list of tokens for the given source text."""
    return Lexer(text).tokenize()


def parse_tokens(tokens, strict: bool = False):
    """Parse a list of tokens into an AST node."""
    return Parser(tokens, strict=strict).parse()


def parse_text(text: str, strict: bool = False):
    """Convenience: lex+parse a source text into an AST."""
    return Parser(Lexer(text).tokenize(), strict=strict).parse()


def render(text: str) -> str:
    """Lex, parse and return the canonical rendering."""
    return str(parse_text(text))
