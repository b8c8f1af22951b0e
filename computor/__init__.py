"""computor — reduce and solve polynomial equations of degree 2 or less."""

from computor.engine import compute, run, solve_polynomial_equation
from computor.errors import (
    ComputorError,
    LexError,
    ParseError,
    UnsupportedDegreeError,
)
from computor.formatter import format_result
from computor.lexer import Token, TokenKind, tokenize
from computor.parser import Term, parse, parse_equation
from computor.reducer import Polynomial, reduce
from computor.solver import (
    EquationKind,
    Solution,
    SolutionKind,
    SolutionSet,
    classify,
    solve,
)

__all__ = [
    "ComputorError",
    "EquationKind",
    "LexError",
    "ParseError",
    "Polynomial",
    "Solution",
    "SolutionKind",
    "SolutionSet",
    "Term",
    "Token",
    "TokenKind",
    "UnsupportedDegreeError",
    "classify",
    "compute",
    "format_result",
    "parse",
    "parse_equation",
    "reduce",
    "run",
    "solve",
    "solve_polynomial_equation",
    "tokenize",
]
