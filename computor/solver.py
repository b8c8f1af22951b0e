"""Solver: closed-form solutions for polynomials of degree 0, 1 and 2.

The polynomial is classified once into an ``EquationKind`` and each kind
has its own branch. Degree 3 and above is rejected rather than
approximated.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum

from sympy import Abs, Rational, S, sqrt

from computor.errors import UnsupportedDegreeError
from computor.reducer import Polynomial

logger = logging.getLogger(__name__)


class EquationKind(Enum):
    IDENTITY = "identity"            # 0 = 0
    CONTRADICTION = "contradiction"  # c = 0, c != 0
    LINEAR = "linear"
    QUADRATIC = "quadratic"
    UNSUPPORTED = "unsupported"


class SolutionKind(Enum):
    EMPTY = "empty"
    ALL_REALS = "all_reals"
    DISCRETE = "discrete"


@dataclass(frozen=True)
class Solution:
    """A single root; ``imag`` is zero for real roots."""

    real: object
    imag: object = S.Zero

    @property
    def is_complex(self) -> bool:
        return self.imag != 0

    @property
    def is_exact(self) -> bool:
        return bool(self.real.is_rational and self.imag.is_rational)

    @property
    def value(self):
        """The root as a single SymPy number."""
        return self.real + self.imag * S.ImaginaryUnit


@dataclass(frozen=True)
class SolutionSet:
    kind: SolutionKind
    solutions: tuple = field(default_factory=tuple)
    discriminant: Rational | None = None

    def __len__(self) -> int:
        return len(self.solutions)

    def __iter__(self):
        return iter(self.solutions)


def classify(polynomial: Polynomial) -> EquationKind:
    degree = polynomial.degree
    if degree is None:
        return EquationKind.IDENTITY
    if degree == 0:
        return EquationKind.CONTRADICTION
    if degree == 1:
        return EquationKind.LINEAR
    if degree == 2:
        return EquationKind.QUADRATIC
    return EquationKind.UNSUPPORTED


def discriminant(polynomial: Polynomial) -> Rational:
    """``b² - 4ac`` of ``aX² + bX + c``."""
    a = polynomial.coefficient(2)
    b = polynomial.coefficient(1)
    c = polynomial.coefficient(0)
    return b ** 2 - 4 * a * c


def _solve_linear(polynomial: Polynomial) -> SolutionSet:
    a = polynomial.coefficient(1)
    b = polynomial.coefficient(0)
    return SolutionSet(SolutionKind.DISCRETE, (Solution(-b / a),))


def _solve_quadratic(polynomial: Polynomial) -> SolutionSet:
    a = polynomial.coefficient(2)
    b = polynomial.coefficient(1)
    delta = discriminant(polynomial)
    logger.debug("discriminant of %r is %s", polynomial, delta)

    if delta > 0:
        root = sqrt(delta)
        solutions = (
            Solution((-b - root) / (2 * a)),
            Solution((-b + root) / (2 * a)),
        )
    elif delta == 0:
        solutions = (Solution(-b / (2 * a)),)
    else:
        # Conjugate pair, negative imaginary part first.
        real = -b / (2 * a)
        imag = sqrt(-delta) / (2 * Abs(a))
        solutions = (Solution(real, -imag), Solution(real, imag))
    return SolutionSet(SolutionKind.DISCRETE, solutions, discriminant=delta)


def solve(polynomial: Polynomial) -> SolutionSet:
    """Return the solution set of ``polynomial = 0``.

    Raises ``UnsupportedDegreeError`` for degree 3 and above.
    """
    kind = classify(polynomial)
    logger.debug("classified %r as %s", polynomial, kind.value)

    if kind is EquationKind.IDENTITY:
        return SolutionSet(SolutionKind.ALL_REALS)
    if kind is EquationKind.CONTRADICTION:
        return SolutionSet(SolutionKind.EMPTY)
    if kind is EquationKind.LINEAR:
        return _solve_linear(polynomial)
    if kind is EquationKind.QUADRATIC:
        return _solve_quadratic(polynomial)
    if kind is EquationKind.UNSUPPORTED:
        raise UnsupportedDegreeError(polynomial.degree, polynomial)
    raise AssertionError(f"unhandled equation kind {kind!r}")
