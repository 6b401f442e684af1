"""
  Theta Parser

Recursive descent over a TokenStream:

    program := expr*
    expr    := integer | string | symbol | "(" expr* ")" | defun
    defun   := "(" "defun" symbol "(" symbol* ")" expr* ")"      top level only

A defun head is only recognised for statements read directly by `parse`;
nested anywhere else it is an ordinary call and the evaluator rejects it.
"""

from __future__ import annotations

from theta.errors import ThetaSyntaxError
from theta.reader.lexer import Token, TokenStream, lex
from theta.types.ast import ASTNode, Defun, Identifier, Program, SExpr, Terminal

DEFINITION_KEYWORD = "defun"


def parse(tokens: TokenStream) -> Program:
    statements: list[ASTNode] = []
    while tokens.peek() is not None:
        statements.append(parse_expr(tokens, allow_definition=True))
    return Program(tuple(statements))


def parse_source(source: str) -> Program:
    return parse(TokenStream(lex(source)))


def read_token_or_fail(tokens: TokenStream) -> Token:
    tok = tokens.advance()
    if tok is None:
        raise ThetaSyntaxError("Attempted to read next token, but there are none left.")
    return tok


def _is_definition(tok: Token | None) -> bool:
    return tok is not None and tok.kind == "symbol" and tok.value == DEFINITION_KEYWORD


def parse_expr(tokens: TokenStream, allow_definition: bool = False) -> ASTNode:
    tok_type, tok_val = read_token_or_fail(tokens)

    if tok_type == "symbol":
        return Identifier(tok_val)

    if tok_type in ("integer", "string"):
        return Terminal(Token(tok_type, tok_val))

    if tok_type == "rparen":
        raise ThetaSyntaxError("Unexpected ')'")

    # lparen
    if allow_definition and _is_definition(tokens.peek()):
        return parse_defun(tokens)

    children: list[ASTNode] = []
    while True:
        nxt = tokens.peek()
        if nxt is None:
            raise ThetaSyntaxError("Unmatched '('")
        if nxt.kind == "rparen":
            tokens.advance()
            return SExpr(tuple(children))
        children.append(parse_expr(tokens))


def parse_defun(tokens: TokenStream) -> Defun:
    """Parse the remainder of `(defun name (params...) body...)` after its '('."""
    tokens.advance()  # throw away "defun"

    name_tok = read_token_or_fail(tokens)
    if name_tok.kind != "symbol":
        raise ThetaSyntaxError(
            f"Expected identifier as first argument to 'defun', found {name_tok.value!r}"
        )

    open_tok = read_token_or_fail(tokens)
    if open_tok.kind != "lparen":
        raise ThetaSyntaxError(
            f"Expected parameter list after 'defun {name_tok.value}', found {open_tok.value!r}"
        )
    params: list[str] = []
    while True:
        tok = read_token_or_fail(tokens)
        if tok.kind == "rparen":
            break
        if tok.kind != "symbol":
            raise ThetaSyntaxError(
                f"Found {tok.value!r} in parameter list of '{name_tok.value}' that isn't an identifier"
            )
        params.append(tok.value)

    body: list[ASTNode] = []
    while True:
        nxt = tokens.peek()
        if nxt is None:
            raise ThetaSyntaxError(f"Unmatched '(' in definition of '{name_tok.value}'")
        if nxt.kind == "rparen":
            tokens.advance()
            break
        body.append(parse_expr(tokens))

    return Defun(name_tok.value, tuple(params), tuple(body))
