"""Formatter: renders the reduced equation and its solution set as text.

Output follows the layout of the original ``computor`` program::

    Reduced form: -9.3 * X^2 + 4 * X^1 + 4 * X^0 = 0
    Polynomial degree: 2
    Discriminant is strictly positive, the two solutions are:
    ≈ 0.905239
    ≈ -0.475131

Exact values are written as integers, finite decimals or fractions.
Irrational values are shown as decimals prefixed with ``≈``.
"""

from sympy import N, Rational

from computor.errors import UnsupportedDegreeError
from computor.reducer import Polynomial
from computor.solver import Solution, SolutionKind, SolutionSet

APPROX = "≈"


# ── Numbers ─────────────────────────────────────────────────────────────

def _terminating_digits(q: int) -> int | None:
    """Number of decimals needed to write ``1/q`` exactly, ``None`` if infinite."""
    rest = q
    twos = fives = 0
    while rest % 2 == 0:
        rest //= 2
        twos += 1
    while rest % 5 == 0:
        rest //= 5
        fives += 1
    if rest != 1:
        return None
    return max(twos, fives)


def format_rational(value: Rational) -> str:
    """Write an exact rational as ``3``, ``-0.25`` or ``1/3``."""
    value = Rational(value)
    if value.q == 1:
        return str(value.p)
    digits = _terminating_digits(value.q)
    if digits is None:
        return f"{value.p}/{value.q}"
    scaled = abs(value.p) * 10 ** digits // value.q
    text = str(scaled).rjust(digits + 1, "0")
    sign = "-" if value < 0 else ""
    return f"{sign}{text[:-digits]}.{text[-digits:]}"


def format_decimal(value, max_decimals: int = 6) -> str:
    """Decimal approximation of a real SymPy number, trailing zeros stripped."""
    approx = float(N(value, max_decimals + 10))
    text = f"{approx:.{max_decimals}f}".rstrip("0").rstrip(".")
    if text in ("-0", ""):
        text = "0"
    return text


def _format_part(value, exact: bool, max_decimals: int) -> str:
    if exact:
        return format_rational(value)
    return format_decimal(value, max_decimals)


def format_solution(solution: Solution, max_decimals: int = 6) -> str:
    """Render one root, flagging approximations with ``≈``."""
    exact = solution.is_exact
    if not solution.is_complex:
        text = _format_part(solution.real, exact, max_decimals)
    else:
        magnitude = abs(solution.imag)
        if magnitude == 1:
            imaginary = "i"
        else:
            coefficient = _format_part(magnitude, exact, max_decimals)
            if "/" in coefficient:
                coefficient = f"({coefficient})"
            imaginary = f"{coefficient}i"
        negative = solution.imag < 0
        if solution.real == 0:
            text = f"-{imaginary}" if negative else imaginary
        else:
            real = _format_part(solution.real, exact, max_decimals)
            text = f"{real} {'-' if negative else '+'} {imaginary}"
    return text if exact else f"{APPROX} {text}"


# ── Equation ────────────────────────────────────────────────────────────

def format_reduced(polynomial: Polynomial) -> str:
    """Canonical reduced form, highest power first: ``<terms> = 0``."""
    parts = []
    for exponent, coefficient in polynomial.terms():
        if not parts:
            parts.append(f"{format_rational(coefficient)} * X^{exponent}")
        else:
            sign = "-" if coefficient < 0 else "+"
            parts.append(f"{sign} {format_rational(abs(coefficient))} * X^{exponent}")
    left = " ".join(parts) if parts else "0"
    return f"{left} = 0"


def format_degree(polynomial: Polynomial) -> int:
    """Degree as displayed; the identity ``0 = 0`` is shown as degree 0."""
    return polynomial.degree if polynomial.degree is not None else 0


def case_sentence(solution_set: SolutionSet) -> str:
    if solution_set.kind is SolutionKind.ALL_REALS:
        return "Each real number is a solution."
    if solution_set.kind is SolutionKind.EMPTY:
        return "There is no solution."
    delta = solution_set.discriminant
    if delta is None:
        return "The solution is:"
    if delta > 0:
        return "Discriminant is strictly positive, the two solutions are:"
    if delta == 0:
        return "Discriminant is strictly zero, the solution is:"
    return "Discriminant is strictly negative, the two complex solutions are:"


def format_result(polynomial: Polynomial, solution_set: SolutionSet,
                  max_decimals: int = 6) -> str:
    """Render the whole answer block for a solved equation."""
    lines = [
        f"Reduced form: {format_reduced(polynomial)}",
        f"Polynomial degree: {format_degree(polynomial)}",
        case_sentence(solution_set),
    ]
    lines.extend(format_solution(s, max_decimals) for s in solution_set)
    return "\n".join(lines)


def format_unsupported(error: UnsupportedDegreeError) -> str:
    """Answer block for a polynomial whose degree is above 2."""
    lines = []
    if error.polynomial is not None:
        lines.append(f"Reduced form: {format_reduced(error.polynomial)}")
    lines.append(f"Polynomial degree: {error.degree}")
    lines.append("The polynomial degree is strictly greater than 2, I can't solve.")
    return "\n".join(lines)
