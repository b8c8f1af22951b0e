"""Numerical (approximate) polynomial equation solver using NumPy."""

"""
Parses the equation with the same lexer, parser and reducer as the exact
solver, then evaluates the closed-form roots in float64 with NumPy and
returns decimal approximations.
"""

import logging
import time
from datetime import datetime

import numpy as np

from computor.errors import UnsupportedDegreeError
from computor.formatter import (
    APPROX,
    case_sentence,
    format_degree,
    format_reduced,
    format_solution,
)
from computor.lexer import tokenize
from computor.parser import parse
from computor.reducer import Polynomial, reduce
from computor.solver import (
    EquationKind,
    Solution,
    classify,
    discriminant,
    solve,
)

logger = logging.getLogger(__name__)


# ── Numeric formatting helpers ──────────────────────────────────────────

def _fmt_num(value: float, max_decimals: int = 10) -> str:
    """Format a float into a clean decimal string.

    - Removes trailing zeros after the decimal point.
    - Uses up to *max_decimals* digits of precision.
    - Returns integers without a decimal point (e.g. ``7`` not ``7.0``).
    """
    if abs(value - round(value)) < 1e-12:
        return str(int(round(value)))
    formatted = f"{value:.{max_decimals}f}".rstrip("0").rstrip(".")
    if formatted == "-0":
        return "0"
    return formatted


def _format_numeric(value: complex, max_decimals: int = 10) -> str:
    """Render a real or complex root as ``1.5``, ``-1 + 2i`` or ``-i``."""
    value = complex(value)
    if value.imag == 0:
        return _fmt_num(value.real, max_decimals)
    imag = _fmt_num(abs(value.imag), max_decimals)
    imaginary = "i" if imag == "1" else f"{imag}i"
    sign = "-" if value.imag < 0 else "+"
    if _fmt_num(value.real, max_decimals) == "0":
        return f"-{imaginary}" if sign == "-" else imaginary
    return f"{_fmt_num(value.real, max_decimals)} {sign} {imaginary}"


def _root_text(root: complex, exact: Solution, max_decimals: int) -> str:
    """Decimal text of *root*, prefixed with ``≈`` unless it spells *exact* out."""
    text = _format_numeric(root, max_decimals)
    if exact.is_exact and format_solution(exact, max_decimals) == text:
        return text
    return f"{APPROX} {text}"


def _coefficient_vector(polynomial: Polynomial) -> np.ndarray:
    """Coefficients highest power first, the ``np.polyval`` convention."""
    degree = polynomial.degree or 0
    return np.array(
        [float(polynomial.coefficient(n)) for n in range(degree, -1, -1)],
        dtype=float,
    )


def numeric_roots(polynomial: Polynomial) -> list[complex]:
    """Closed-form roots of a degree 0-2 polynomial in float64."""
    kind = classify(polynomial)
    if kind is EquationKind.UNSUPPORTED:
        raise UnsupportedDegreeError(polynomial.degree, polynomial)
    if kind in (EquationKind.IDENTITY, EquationKind.CONTRADICTION):
        return []

    if kind is EquationKind.LINEAR:
        a, b = _coefficient_vector(polynomial)
        return [complex(-b / a)]

    # Branch on the exact sign: a tiny positive delta can underflow to 0.0.
    a, b, c = _coefficient_vector(polynomial)
    exact_delta = discriminant(polynomial)
    delta = float(exact_delta)
    if exact_delta > 0:
        root = np.sqrt(delta)
        return [complex((-b - root) / (2 * a)), complex((-b + root) / (2 * a))]
    if exact_delta == 0:
        return [complex(-b / (2 * a))]
    real = -b / (2 * a)
    imag = np.emath.sqrt(delta).imag / (2 * abs(a))
    return [complex(real, -imag), complex(real, imag)]


# ── Main public entry point ─────────────────────────────────────────────

def solve_numeric(equation_str: str, max_decimals: int = 10) -> dict:
    """
    Solve a polynomial equation numerically (decimal approximation).

    Accepts the same input as the exact solver and returns a result dict
    identical in structure, with every root rendered as a decimal computed
    in float64 by NumPy.
    """
    t_start = time.perf_counter()

    lhs_terms, rhs_terms = parse(tokenize(equation_str))
    polynomial = reduce(lhs_terms, rhs_terms)
    roots = numeric_roots(polynomial)

    # The exact solution set drives the case sentence and the ≈ flags.
    exact_set = solve(polynomial)
    solution_kind = exact_set.kind
    delta = exact_set.discriminant
    sentence = case_sentence(exact_set)
    texts = [_root_text(r, s, max_decimals) for r, s in zip(roots, exact_set)]

    coefficients = _coefficient_vector(polynomial)
    steps = [
        {
            "description": "Reduce the equation",
            "expression": format_reduced(polynomial),
            "explanation": "All terms are moved to the left-hand side and like powers combined.",
        },
        {
            "description": "Build the coefficient vector",
            "expression": "[" + ", ".join(_fmt_num(c, max_decimals) for c in coefficients) + "]",
            "explanation": "Coefficients listed from the highest power of X down to X^0.",
        },
    ]
    if delta is not None:
        steps.append({
            "description": "Compute the discriminant",
            "expression": f"Δ = {_fmt_num(float(delta), max_decimals)}",
            "explanation": "Δ = b² - 4ac decides between two real, one real or two complex roots.",
        })
    if roots:
        steps.append({
            "description": "Evaluate the closed form in floating point",
            "expression": ", ".join(f"X = {text}" for text in texts),
            "explanation": "The roots are decimal approximations computed with NumPy.",
        })
    for i, s in enumerate(steps, 1):
        s["step_number"] = i

    verification = []
    for r in roots:
        residual = np.polyval(coefficients, r)
        ok = bool(abs(residual) < 1e-9 * max(1.0, float(np.max(np.abs(coefficients)))))
        verification.append({
            "description": f"Substitute X = {_format_numeric(r, max_decimals)}",
            "expression": f"P(X) = {_format_numeric(residual, max_decimals)}",
            "explanation": "The residual is zero up to floating-point round-off." if ok
            else "The residual is not negligible.",
            "passed": ok,
        })

    lines = [
        f"Reduced form: {format_reduced(polynomial)}",
        f"Polynomial degree: {format_degree(polynomial)}",
        sentence,
    ]
    lines.extend(texts)

    t_end = time.perf_counter()
    runtime_ms = round((t_end - t_start) * 1000, 2)
    logger.debug("numerically solved %r in %s ms", equation_str, runtime_ms)

    return {
        "equation": equation_str,
        "given": {
            "problem": f"Approximate the roots of {format_reduced(polynomial)}",
            "inputs": {"equation": equation_str, "variable": "X"},
        },
        "method": {
            "name": "Floating-point closed form",
            "description": "Reduce to P(X) = 0, then evaluate the closed-form roots with NumPy.",
            "parameters": {
                "degree": format_degree(polynomial),
                "discriminant": None if delta is None else _fmt_num(float(delta), max_decimals),
            },
        },
        "reduced_form": format_reduced(polynomial),
        "degree": format_degree(polynomial),
        "solution_kind": solution_kind.value,
        "solutions": [
            {
                "real": _fmt_num(r.real, max_decimals),
                "imag": _fmt_num(r.imag, max_decimals),
                "exact": not text.startswith(APPROX),
                "text": text,
            }
            for r, text in zip(roots, texts)
        ],
        "steps": steps,
        "final_answer": "\n".join(lines),
        "verification_steps": verification,
        "summary": {
            "runtime_ms": runtime_ms,
            "total_steps": len(steps),
            "verification_steps": len(verification),
            "timestamp": datetime.now().strftime("%Y-%m-%d %H:%M:%S"),
            "library": f"NumPy {np.__version__}",
            "validation_status": "pass" if all(v["passed"] for v in verification) else "fail",
        },
    }
