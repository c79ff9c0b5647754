"""Parser for the display syntax produced by ``dtcore.kernel.pretty``."""

from __future__ import annotations

from typing import cast

import ply.lex as lex  # type: ignore[import-untyped]
import ply.yacc as yacc  # type: ignore[import-untyped]

from dtcore.errors import ParseError, Span
from dtcore.kernel.ast import (
    Add,
    Command,
    Expr,
    F64,
    F64Lit,
    Let,
    Sole,
    Trivial,
    U,
    Var,
)

_SOURCE: str = ""

reserved = {
    "Command": "COMMAND",
    "F64": "F64",
    "Trivial": "TRIVIAL",
    "sole": "SOLE",
    "U": "UNIV",
    "let": "LET",
    "inf": "INF",
    "NaN": "NAN",
}

tokens = (
    "IDENT",
    "NUMBER",
    "PLUS",
    "LPAREN",
    "RPAREN",
    "COMMA",
    *tuple(reserved.values()),
)

t_PLUS = r"\+"
t_LPAREN = r"\("
t_RPAREN = r"\)"
t_COMMA = r","

t_ignore = " \t\n"


def t_NUMBER(t: lex.LexToken) -> lex.LexToken:
    r"-inf|-?\d+(?:\.\d+)?"
    t.end = t.lexpos + len(t.value)
    return t


def t_IDENT(t: lex.LexToken) -> lex.LexToken:
    r"[A-Za-z_][A-Za-z0-9_']*"
    t.type = reserved.get(t.value, "IDENT")
    t.end = t.lexpos + len(t.value)
    return t


def t_error(t: lex.LexToken) -> None:
    span = Span(t.lexpos, t.lexpos + 1)
    raise ParseError(f"Unexpected character {t.value[0]!r}", span, _SOURCE)


precedence = (("left", "PLUS"),)


def _tok_span(tok: lex.LexToken) -> Span:
    end = getattr(tok, "end", tok.lexpos + len(str(tok.value)))
    return Span(tok.lexpos, end)


def p_expr_add(p: yacc.YaccProduction) -> None:
    "expr : expr PLUS expr"
    p[0] = Add(p[1], p[3])


def p_expr_atom(p: yacc.YaccProduction) -> None:
    "expr : atom"
    p[0] = p[1]


def p_atom_number(p: yacc.YaccProduction) -> None:
    "atom : NUMBER"
    p[0] = F64Lit(float(p[1]))


def p_atom_inf(p: yacc.YaccProduction) -> None:
    "atom : INF"
    p[0] = F64Lit(float("inf"))


def p_atom_nan(p: yacc.YaccProduction) -> None:
    "atom : NAN"
    p[0] = F64Lit(float("nan"))


def p_atom_var(p: yacc.YaccProduction) -> None:
    "atom : IDENT"
    p[0] = Var(p[1])


def p_atom_f64(p: yacc.YaccProduction) -> None:
    "atom : F64"
    p[0] = F64()


def p_atom_trivial(p: yacc.YaccProduction) -> None:
    "atom : TRIVIAL"
    p[0] = Trivial()


def p_atom_sole(p: yacc.YaccProduction) -> None:
    "atom : SOLE"
    p[0] = Sole()


def p_atom_univ(p: yacc.YaccProduction) -> None:
    "atom : UNIV LPAREN NUMBER RPAREN"
    text = p[3]
    span = _tok_span(cast(lex.LexToken, p.slice[3]))
    if not text.isdigit():
        raise ParseError("Universe level must be a natural number", span, _SOURCE)
    try:
        p[0] = U(int(text))
    except ValueError as exc:
        raise ParseError(str(exc), span, _SOURCE) from exc


def p_atom_command(p: yacc.YaccProduction) -> None:
    "atom : COMMAND LPAREN expr RPAREN"
    p[0] = Command(p[3])


def p_atom_let(p: yacc.YaccProduction) -> None:
    "atom : LET LPAREN IDENT COMMA expr COMMA expr RPAREN"
    p[0] = Let(p[3], p[5], p[7])


def p_atom_paren(p: yacc.YaccProduction) -> None:
    "atom : LPAREN expr RPAREN"
    p[0] = p[2]


def p_error(p: lex.LexToken | None) -> None:
    if p is None:
        span = Span.at(len(_SOURCE))
        raise ParseError("Unexpected end of input", span, _SOURCE)
    span = _tok_span(cast(lex.LexToken, p))
    raise ParseError("Unexpected token", span, _SOURCE)


_PARSER = None


def parse_expr(source: str) -> Expr:
    """Parse ``source``, written in the syntax ``pretty`` emits, into an ``Expr``."""

    global _SOURCE, _PARSER
    _SOURCE = source
    lexer = lex.lex()
    if _PARSER is None:
        _PARSER = yacc.yacc(start="expr", debug=False, write_tables=False)
    expr = cast(Expr, _PARSER.parse(source, lexer=lexer))
    if expr is None:
        raise ParseError("Unexpected end of input", Span.at(len(source)), source)
    return expr


__all__ = ["parse_expr"]
