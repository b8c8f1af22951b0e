"""Lexer: turns raw equation text into typed tokens.

Only the characters of the equation grammar are accepted:
digits, ``.``, ``X`` / ``x``, ``^``, ``+``, ``-``, ``*``, ``=`` and
whitespace. Numeric literals are converted straight to exact
``sympy.Rational`` values so no float ever enters the pipeline.
"""

import logging
from dataclasses import dataclass
from enum import Enum

from sympy import Rational

from computor.errors import LexError

logger = logging.getLogger(__name__)


class TokenKind(Enum):
    NUMBER = "number"
    VARIABLE = "X"
    CARET = "^"
    PLUS = "+"
    MINUS = "-"
    STAR = "*"
    EQUALS = "="


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str
    position: int
    value: Rational | None = None

    @property
    def is_integer_literal(self) -> bool:
        """True for a NUMBER written without a decimal point."""
        return self.kind is TokenKind.NUMBER and "." not in self.text


# Single-character tokens.
_SYMBOLS = {
    "^": TokenKind.CARET,
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.STAR,
    "=": TokenKind.EQUALS,
    "x": TokenKind.VARIABLE,
    "X": TokenKind.VARIABLE,
}

_NUMBER_CHARS = set("0123456789.")

# Longer literals would overflow the int <-> str conversion limit once
# squared in the discriminant.
MAX_LITERAL_DIGITS = 1000


def _scan_number(text: str, start: int) -> Token:
    """Scan the maximal run of digits / points starting at *start*."""
    end = start
    while end < len(text) and text[end] in _NUMBER_CHARS:
        end += 1
    literal = text[start:end]

    # digit+ ['.' digit+]
    whole, dot, frac = literal.partition(".")
    if "." in frac:
        raise LexError(start, literal, f"Malformed number {literal!r}: more than one decimal point")
    if not whole or (dot and not frac):
        raise LexError(start, literal, f"Malformed number {literal!r}")
    if len(whole) + len(frac) > MAX_LITERAL_DIGITS:
        raise LexError(start, literal[:20] + "...", "Numeric literal too long")
    value = Rational(int(whole + frac), 10 ** len(frac))
    return Token(TokenKind.NUMBER, literal, start, value)


def tokenize(text: str) -> list[Token]:
    """Return the ordered token sequence of *text*.

    Raises ``LexError`` on the first illegal character or malformed
    number literal.
    """
    tokens: list[Token] = []
    i = 0
    while i < len(text):
        ch = text[i]
        if ch.isspace():
            i += 1
            continue
        if ch in _NUMBER_CHARS:
            token = _scan_number(text, i)
            tokens.append(token)
            i += len(token.text)
            continue
        kind = _SYMBOLS.get(ch)
        if kind is None:
            raise LexError(i, ch)
        tokens.append(Token(kind, ch, i))
        i += 1

    logger.debug("tokenized %d characters into %d tokens", len(text), len(tokens))
    return tokens
