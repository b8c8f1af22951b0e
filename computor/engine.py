""" Step-by-step polynomial equation solver using exact SymPy arithmetic."""

"""
Runs the lexer -> parser -> reducer -> solver -> formatter pipeline on
equations such as ``5 * X^0 + 4 * X^1 - 9.3 * X^2 = 1 * X^0`` and produces
human-readable step-by-step explanations alongside the plain answer block.
"""

import logging
import time
from datetime import datetime

import sympy

from computor.formatter import (
    format_degree,
    format_rational,
    format_reduced,
    format_result,
    format_solution,
)
from computor.lexer import tokenize
from computor.parser import Term, parse
from computor.reducer import Polynomial, reduce
from computor.solver import EquationKind, SolutionSet, classify, solve

logger = logging.getLogger(__name__)

MODES = ("exact", "numerical")

# Residual tolerance for roots that are only known approximately.
_TOLERANCE = 1e-9


def compute(equation_str: str) -> tuple[Polynomial, SolutionSet]:
    """Run the bare pipeline and return ``(polynomial, solution_set)``."""
    lhs_terms, rhs_terms = parse(tokenize(equation_str))
    polynomial = reduce(lhs_terms, rhs_terms)
    return polynomial, solve(polynomial)


def run(equation_str: str, max_decimals: int = 6) -> str:
    """Solve *equation_str* and return the formatted answer block."""
    polynomial, solution_set = compute(equation_str)
    return format_result(polynomial, solution_set, max_decimals)


# ── Trail helpers ───────────────────────────────────────────────────────

def _format_terms(terms: list[Term]) -> str:
    """Write a side's terms as typed, before any combining."""
    parts = []
    for term in terms:
        body = f"{format_rational(abs(term.coefficient))} * X^{term.exponent}"
        if not parts:
            parts.append(f"-{body}" if term.coefficient < 0 else body)
        else:
            parts.append(f"{'-' if term.coefficient < 0 else '+'} {body}")
    return " ".join(parts) if parts else "0"


def _degree_name(degree: int | None) -> str:
    return {
        None: "identity",
        0: "constant",
        1: "linear",
        2: "quadratic",
        3: "cubic",
    }.get(degree, f"degree-{degree} polynomial")


def _solution_payload(solution_set: SolutionSet, max_decimals: int) -> list[dict]:
    return [
        {
            "real": str(s.real),
            "imag": str(s.imag),
            "exact": s.is_exact,
            "text": format_solution(s, max_decimals),
        }
        for s in solution_set
    ]


def _verify(polynomial: Polynomial, solution_set: SolutionSet,
            max_decimals: int) -> list[dict]:
    """Substitute every root back into ``P(X)`` and check the residual."""
    steps = []
    for solution in solution_set:
        residual = sympy.expand(polynomial.evaluate(solution.value))
        if solution.is_exact:
            ok = residual == 0
        else:
            ok = abs(complex(sympy.N(residual))) < _TOLERANCE
        shown = format_solution(solution, max_decimals)
        steps.append({
            "description": f"Substitute X = {shown}",
            "expression": f"P({shown}) = {0 if ok else sympy.N(residual, max_decimals)}",
            "explanation": (
                "The left-hand side vanishes, so the value is a root."
                if ok else
                "The residual is not zero; the value does not satisfy the equation."
            ),
            "passed": ok,
        })
    return steps


def _solving_steps(polynomial: Polynomial, solution_set: SolutionSet,
                   max_decimals: int) -> list[dict]:
    kind = classify(polynomial)
    steps = []
    if kind is EquationKind.IDENTITY:
        steps.append({
            "description": "Every term cancels",
            "expression": "0 = 0",
            "explanation": "The equation is always true, whatever the value of X.",
        })
    elif kind is EquationKind.CONTRADICTION:
        c = format_rational(polynomial.coefficient(0))
        steps.append({
            "description": "Only a constant is left",
            "expression": f"{c} = 0",
            "explanation": f"{c} is never equal to 0, so no value of X works.",
        })
    elif kind is EquationKind.LINEAR:
        a = format_rational(polynomial.coefficient(1))
        b = format_rational(polynomial.coefficient(0))
        steps.append({
            "description": "Isolate X",
            "expression": f"X = -({b}) / {a}",
            "explanation": "For a * X + b = 0 with a ≠ 0 the only root is X = -b / a.",
        })
    else:
        a = format_rational(polynomial.coefficient(2))
        b = format_rational(polynomial.coefficient(1))
        c = format_rational(polynomial.coefficient(0))
        delta = format_rational(solution_set.discriminant)
        steps.append({
            "description": "Compute the discriminant",
            "expression": f"Δ = ({b})² - 4 · ({a}) · ({c}) = {delta}",
            "explanation": "The sign of Δ = b² - 4ac tells how many roots there are and whether they are real.",
        })
        if solution_set.discriminant > 0:
            formula = "X = (-b ± √Δ) / (2a)"
        elif solution_set.discriminant == 0:
            formula = "X = -b / (2a)"
        else:
            formula = "X = (-b ± i√(-Δ)) / (2a)"
        steps.append({
            "description": "Apply the quadratic formula",
            "expression": formula,
            "explanation": ", ".join(format_solution(s, max_decimals) for s in solution_set),
        })
    return steps


# ── Main public entry point ─────────────────────────────────────────────

def solve_polynomial_equation(equation_str: str, mode: str = "exact",
                              max_decimals: int = 6) -> dict:
    """
    Solve a polynomial equation of degree at most 2 step by step.

    *mode* is ``"exact"`` (SymPy rationals, the default) or ``"numerical"``
    (NumPy floating point).

    Returns a dict with trail-format sections:
      - given, method, steps, final_answer, verification_steps, summary
    Raises ``LexError``, ``ParseError`` or ``UnsupportedDegreeError``.
    """
    if mode == "numerical":
        from computor.numerical import solve_numeric
        return solve_numeric(equation_str, max_decimals=max_decimals)
    if mode != "exact":
        raise ValueError(f"Unknown mode {mode!r}. Choose one of: {', '.join(MODES)}.")

    t_start = time.perf_counter()

    lhs_terms, rhs_terms = parse(tokenize(equation_str))
    polynomial = reduce(lhs_terms, rhs_terms)
    solution_set = solve(polynomial)

    lhs_text = _format_terms(lhs_terms)
    rhs_text = _format_terms(rhs_terms)
    moved = lhs_terms + [t.negated() for t in rhs_terms]

    steps = [
        {
            "description": "Starting with the original equation",
            "expression": f"{lhs_text} = {rhs_text}",
            "explanation": "Each term is read as coefficient * X^exponent.",
        },
        {
            "description": "Move every term to the left-hand side",
            "expression": f"{_format_terms(moved)} = 0",
            "explanation": "Subtracting the right-hand side from both sides changes the sign of its terms.",
        },
        {
            "description": "Combine like terms",
            "expression": format_reduced(polynomial),
            "explanation": (
                "Coefficients sharing an exponent are added; "
                "terms whose coefficient becomes 0 disappear."
            ),
        },
        {
            "description": "Identify the degree",
            "expression": f"degree = {format_degree(polynomial)}",
            "explanation": f"This is a {_degree_name(polynomial.degree)} equation.",
        },
    ]
    steps.extend(_solving_steps(polynomial, solution_set, max_decimals))
    for i, s in enumerate(steps, 1):
        s["step_number"] = i

    verification = _verify(polynomial, solution_set, max_decimals)
    passed = all(v["passed"] for v in verification)

    t_end = time.perf_counter()
    runtime_ms = round((t_end - t_start) * 1000, 2)
    logger.debug("solved %r in %s ms", equation_str, runtime_ms)

    return {
        "equation": equation_str,
        "given": {
            "problem": f"Solve for X: {lhs_text} = {rhs_text}",
            "inputs": {
                "equation": f"{lhs_text} = {rhs_text}",
                "left_side": lhs_text,
                "right_side": rhs_text,
                "variable": "X",
            },
        },
        "method": {
            "name": {
                EquationKind.IDENTITY: "Identity",
                EquationKind.CONTRADICTION: "Contradiction",
                EquationKind.LINEAR: "Linear isolation",
                EquationKind.QUADRATIC: "Quadratic formula",
            }[classify(polynomial)],
            "description": "Reduce to P(X) = 0, then solve by degree.",
            "parameters": {
                "degree": format_degree(polynomial),
                "discriminant": (
                    None if solution_set.discriminant is None
                    else format_rational(solution_set.discriminant)
                ),
            },
        },
        "reduced_form": format_reduced(polynomial),
        "degree": format_degree(polynomial),
        "solution_kind": solution_set.kind.value,
        "solutions": _solution_payload(solution_set, max_decimals),
        "steps": steps,
        "final_answer": format_result(polynomial, solution_set, max_decimals),
        "verification_steps": verification,
        "summary": {
            "runtime_ms": runtime_ms,
            "total_steps": len(steps),
            "verification_steps": len(verification),
            "timestamp": datetime.now().strftime("%Y-%m-%d %H:%M:%S"),
            "library": f"SymPy {sympy.__version__}",
            "validation_status": "pass" if passed else "fail",
        },
    }
