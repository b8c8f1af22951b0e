"""Reducer: merges both sides of an equation into one canonical polynomial."""

import logging
from collections.abc import Iterable, Mapping
from types import MappingProxyType

from sympy import Rational, S

from computor.parser import Term

logger = logging.getLogger(__name__)


class Polynomial(Mapping):
    """Canonical ``exponent -> coefficient`` mapping meaning ``P(X) = 0``.

    Zero coefficients are never stored, so the empty polynomial is the
    identity ``0 = 0`` and has no degree.
    """

    __slots__ = ("_coefficients",)

    def __init__(self, coefficients: Mapping[int, Rational] | None = None):
        cleaned = {}
        for exponent, coefficient in (coefficients or {}).items():
            if exponent < 0:
                raise ValueError(f"Exponent must be non-negative, got {exponent}")
            coefficient = Rational(coefficient)
            if coefficient != 0:
                cleaned[int(exponent)] = coefficient
        self._coefficients = MappingProxyType(cleaned)

    @classmethod
    def from_terms(cls, terms: Iterable[Term]) -> "Polynomial":
        accumulated: dict[int, Rational] = {}
        for term in terms:
            accumulated[term.exponent] = accumulated.get(term.exponent, S.Zero) + term.coefficient
        return cls(accumulated)

    # ── Mapping protocol ────────────────────────────────────────────────

    def __getitem__(self, exponent: int) -> Rational:
        return self._coefficients[exponent]

    def __iter__(self):
        return iter(sorted(self._coefficients, reverse=True))

    def __len__(self) -> int:
        return len(self._coefficients)

    def __eq__(self, other) -> bool:
        if isinstance(other, Polynomial):
            return dict(self._coefficients) == dict(other._coefficients)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(frozenset(self._coefficients.items()))

    def __repr__(self) -> str:
        inner = ", ".join(f"{e}: {c}" for e, c in self.terms())
        return f"Polynomial({{{inner}}})"

    # ── Queries ─────────────────────────────────────────────────────────

    @property
    def degree(self) -> int | None:
        """Highest exponent present, ``None`` for the identity ``0 = 0``."""
        if not self._coefficients:
            return None
        return max(self._coefficients)

    def coefficient(self, exponent: int) -> Rational:
        return self._coefficients.get(exponent, S.Zero)

    def terms(self) -> list[tuple[int, Rational]]:
        """``(exponent, coefficient)`` pairs by descending exponent."""
        return [(e, self._coefficients[e]) for e in self]

    def evaluate(self, value):
        """Evaluate ``P(value)`` with SymPy arithmetic."""
        total = S.Zero
        for exponent, coefficient in self._coefficients.items():
            total += coefficient * value ** exponent
        return total


def reduce(lhs_terms: Iterable[Term], rhs_terms: Iterable[Term]) -> Polynomial:
    """Move every right-hand term to the left and combine like powers."""
    combined = list(lhs_terms) + [term.negated() for term in rhs_terms]
    polynomial = Polynomial.from_terms(combined)
    logger.debug("reduced %d terms to %r (degree %s)", len(combined), polynomial, polynomial.degree)
    return polynomial
