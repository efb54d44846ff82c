from __future__ import annotations
import json
import sys
from typing import List, Optional
from lexer import Lexer
from tokens import Token
from ast_nodes import StatementsNode
from parser import Parser

from pretty_printer import PrettyPrinter
from ast_json import ast_to_json, tokens_to_json
from ast_viz import write_and_render


def lex(text: str) -> List[Token]:
    """Tokenize input string."""
    lexer = Lexer(text)
    return lexer.tokenize()


def lex_file(path: str) -> List[Token]:
    """Read a source file and tokenize its contents."""
    with open(path, "r", encoding="utf-8") as fh:
        return lex(fh.read())


def parse_tokens(tokens: List[Token], strict: bool = False) -> StatementsNode:
    """Parse tokens into AST."""
    parser = Parser(tokens, strict=strict)
    return parser.parse()


def parse_text(text: str, strict: bool = False) -> StatementsNode:
    """Convenience: lex+parse a source text into an AST."""
    return parse_tokens(lex(text), strict=strict)


def process_program(text: str, **options) -> bool:
    """Lex a program held in memory and hand it to `process_tokens`."""
    try:
        tokens = lex(text)
    except SyntaxError as e:
        print(f"Syntax Error: {e}", file=sys.stderr)
        return False
    return process_tokens(tokens, **options)


def process_tokens(
    tokens: List[Token],
    *,
    print_tokens: bool = False,
    print_ast: bool = True,
    print_tree: bool = False,
    dump_json_path: Optional[str] = None,
    viz_path: Optional[str] = None,
    viz_format: str = "svg",
    strict: bool = False,
) -> bool:
    """Parse a lexed program and optionally print each stage.

    Returns False if the program failed to parse.
    """
    try:
        if print_tokens:
            print(f"Tokens ({len(tokens)}):")
            for token in tokens:
                print(f"  {token}")

        ast = parse_tokens(tokens, strict=strict)
    except SyntaxError as e:
        print(f"Syntax Error: {e}", file=sys.stderr)
        return False

    if print_ast:
        print("\nAST:")
        print(PrettyPrinter.print_source(ast))

    if print_tree:
        print("\nAST tree:")
        print(PrettyPrinter.print_ast(ast))

    if dump_json_path:
        export = {"tokens": tokens_to_json(tokens), "ast": ast_to_json(ast)}
        try:
            with open(dump_json_path, "w", encoding="utf-8") as fh:
                json.dump(export, fh, indent=2)
            print(f"Wrote tokens+AST JSON to {dump_json_path}")
        except OSError as e:
            print(f"Failed to write JSON to {dump_json_path}: {e}", file=sys.stderr)

    # Optionally render visualization via Graphviz
    if viz_path:
        try:
            write_and_render(ast, viz_path, fmt=viz_format)
            print(f"Wrote AST visualization to {viz_path}.{viz_format}")
        except Exception as e:
            print(f"Failed to render AST visualization to {viz_path}: {e}", file=sys.stderr)

    return True


def main(argv: Optional[List[str]] = None) -> int:
    import argparse

    parser = argparse.ArgumentParser(
        description="Lex and parse a BASIC source file"
    )
    parser.add_argument("file", help="Path to source file to process")
    parser.add_argument(
        "--print-tokens",
        dest="print_tokens",
        action="store_true",
        help="Print tokens",
    )
    parser.add_argument(
        "--no-ast", dest="print_ast", action="store_false", help="Do not print the AST"
    )
    parser.add_argument(
        "--tree",
        dest="print_tree",
        action="store_true",
        help="Print the AST as an indented tree",
    )
    parser.add_argument(
        "--dump-json", dest="dump_json", help="Path to write tokens+AST JSON"
    )
    parser.add_argument(
        "--viz-ast",
        dest="viz_ast",
        help="Path (without extension) to write Graphviz visualization of the AST",
    )
    parser.add_argument(
        "--viz-format",
        dest="viz_format",
        default="svg",
        help="Format for Graphviz output (svg, png, pdf, etc)",
    )
    parser.add_argument(
        "--strict",
        dest="strict",
        action="store_true",
        help="Reject tokens left over after the last statement",
    )

    args = parser.parse_args(argv)

    try:
        tokens = lex_file(args.file)
    except OSError as e:
        print(f"Failed to read file {args.file}: {e}", file=sys.stderr)
        return 1
    except SyntaxError as e:
        print(f"Syntax Error: {e}", file=sys.stderr)
        return 1

    ok = process_tokens(
        tokens,
        print_tokens=args.print_tokens,
        print_ast=args.print_ast,
        print_tree=args.print_tree,
        dump_json_path=args.dump_json,
        viz_path=args.viz_ast,
        viz_format=args.viz_format,
        strict=args.strict,
    )
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
