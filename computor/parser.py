"""Term parser: consumes tokens into signed ``(coefficient, exponent)`` terms.

Grammar::

    equation    := side '=' side
    side        := signed_term (explicit_sign term)*
    signed_term := ['+'|'-'] term
    term        := number ['*' 'X' ['^' integer]] | 'X' ['^' integer]

Every two terms must be separated by an explicit ``+`` or ``-`` and the
``*`` token is only legal between a number and ``X``.
"""

import logging
from dataclasses import dataclass

from sympy import Integer, Rational

from computor.errors import ParseError
from computor.lexer import Token, TokenKind, tokenize

logger = logging.getLogger(__name__)

_SIGNS = (TokenKind.PLUS, TokenKind.MINUS)


@dataclass(frozen=True)
class Term:
    """One monomial ``coefficient * X^exponent`` before reduction."""

    coefficient: Rational
    exponent: int

    def negated(self) -> "Term":
        return Term(-self.coefficient, self.exponent)


def _end_position(tokens: list[Token]) -> int:
    if not tokens:
        return 0
    last = tokens[-1]
    return last.position + len(last.text)


def _parse_power(tokens: list[Token], i: int) -> tuple[int, int]:
    """Parse an optional ``^ integer`` after ``X``; return (exponent, next index)."""
    if i >= len(tokens) or tokens[i].kind is not TokenKind.CARET:
        return 1, i
    caret = tokens[i]
    i += 1
    if i >= len(tokens) or not tokens[i].is_integer_literal:
        raise ParseError(
            "'^' must be followed by a non-negative integer exponent",
            caret.position,
        )
    return int(tokens[i].value), i + 1


def _parse_term(tokens: list[Token], i: int, sign: int, end: int) -> tuple[Term, int]:
    if i >= len(tokens):
        raise ParseError("Missing term after operator", end)

    tok = tokens[i]
    if tok.kind is TokenKind.NUMBER:
        coefficient = tok.value
        i += 1
        if i < len(tokens) and tokens[i].kind is TokenKind.STAR:
            star = tokens[i]
            i += 1
            if i >= len(tokens) or tokens[i].kind is not TokenKind.VARIABLE:
                raise ParseError("'*' must be followed by X", star.position)
            exponent, i = _parse_power(tokens, i + 1)
        else:
            exponent = 0
        return Term(sign * coefficient, exponent), i

    if tok.kind is TokenKind.VARIABLE:
        exponent, i = _parse_power(tokens, i + 1)
        return Term(Integer(sign), exponent), i

    if tok.kind in _SIGNS:
        raise ParseError("Consecutive operators without an operand", tok.position)
    if tok.kind is TokenKind.STAR:
        raise ParseError("'*' is only allowed between a number and X", tok.position)
    if tok.kind is TokenKind.CARET:
        raise ParseError("'^' must follow X", tok.position)
    raise ParseError(f"Unexpected {tok.text!r}", tok.position)


def _parse_side(tokens: list[Token], end: int) -> list[Term]:
    """Parse the tokens of one side of ``=`` into terms."""
    terms: list[Term] = []
    i = 0
    sign = 1
    if tokens[0].kind in _SIGNS:
        sign = -1 if tokens[0].kind is TokenKind.MINUS else 1
        i = 1
    term, i = _parse_term(tokens, i, sign, end)
    terms.append(term)

    while i < len(tokens):
        tok = tokens[i]
        if tok.kind not in _SIGNS:
            raise ParseError(
                f"Expected '+' or '-' before {tok.text!r}", tok.position
            )
        sign = -1 if tok.kind is TokenKind.MINUS else 1
        term, i = _parse_term(tokens, i + 1, sign, end)
        terms.append(term)
    return terms


def parse(tokens: list[Token]) -> tuple[list[Term], list[Term]]:
    """Split *tokens* on the single ``=`` and parse both sides.

    Returns ``(lhs_terms, rhs_terms)``; duplicate exponents are kept.
    """
    equals = [k for k, tok in enumerate(tokens) if tok.kind is TokenKind.EQUALS]
    if not equals:
        raise ParseError("Equation must contain '='. Example: 5 * X^0 + 4 * X^1 = 1")
    if len(equals) > 1:
        raise ParseError("Equation must contain exactly one '=' sign.", tokens[equals[1]].position)

    split = equals[0]
    lhs_tokens, rhs_tokens = tokens[:split], tokens[split + 1:]
    if not lhs_tokens or not rhs_tokens:
        raise ParseError(
            "Both sides of the equation must have expressions.",
            tokens[split].position,
        )

    lhs = _parse_side(lhs_tokens, tokens[split].position)
    rhs = _parse_side(rhs_tokens, _end_position(tokens))
    logger.debug("parsed %d left-hand and %d right-hand terms", len(lhs), len(rhs))
    return lhs, rhs


def parse_equation(text: str) -> tuple[list[Term], list[Term]]:
    """Lex and parse *text* in one call."""
    return parse(tokenize(text))
