import pytest
from sympy import Rational, S, sqrt

from computor.engine import compute
from computor.errors import UnsupportedDegreeError
from computor.formatter import (
    format_decimal,
    format_degree,
    format_rational,
    format_reduced,
    format_result,
    format_solution,
    format_unsupported,
)
from computor.parser import parse_equation
from computor.reducer import Polynomial, reduce
from computor.solver import Solution


@pytest.mark.parametrize(
    "value,expected",
    [
        (Rational(3), "3"),
        (Rational(-12), "-12"),
        (Rational(-1, 4), "-0.25"),
        (Rational(93, 10), "9.3"),
        (Rational(1, 8), "0.125"),
        (Rational(1, 3), "1/3"),
        (Rational(-7, 3), "-7/3"),
    ],
)
def test_format_rational(value, expected: str) -> None:
    assert format_rational(value) == expected


def test_format_decimal_strips_zeros() -> None:
    assert format_decimal(sqrt(2)) == "1.414214"
    assert format_decimal(sqrt(2), max_decimals=2) == "1.41"
    assert format_decimal(S.Half) == "0.5"


def test_format_solution_variants() -> None:
    assert format_solution(Solution(Rational(2))) == "2"
    assert format_solution(Solution(-sqrt(2))) == "≈ -1.414214"
    assert format_solution(Solution(S.Zero, S.One)) == "i"
    assert format_solution(Solution(S.Zero, -S.One)) == "-i"
    assert format_solution(Solution(Rational(-1, 2), Rational(3, 2))) == "-0.5 + 1.5i"
    assert format_solution(Solution(S.Zero, Rational(-1, 3))) == "-(1/3)i"


def test_reduced_form_is_descending_and_sign_normalised() -> None:
    p, _ = compute("5 * X^0 + 4 * X^1 - 9.3 * X^2 = 1 * X^0")
    assert format_reduced(p) == "-9.3 * X^2 + 4 * X^1 + 4 * X^0 = 0"
    assert format_reduced(Polynomial()) == "0 = 0"
    assert format_reduced(Polynomial({1: -1, 0: -2})) == "-1 * X^1 - 2 * X^0 = 0"


def test_degree_of_identity_is_shown_as_zero() -> None:
    assert format_degree(Polynomial()) == 0
    assert format_degree(Polynomial({2: 1})) == 2


@pytest.mark.parametrize(
    "text,expected",
    [
        (
            "X + 1 = X + 1",
            "Reduced form: 0 = 0\n"
            "Polynomial degree: 0\n"
            "Each real number is a solution.",
        ),
        (
            "3 = 4",
            "Reduced form: -1 * X^0 = 0\n"
            "Polynomial degree: 0\n"
            "There is no solution.",
        ),
        (
            "3 * X = 1",
            "Reduced form: 3 * X^1 - 1 * X^0 = 0\n"
            "Polynomial degree: 1\n"
            "The solution is:\n"
            "1/3",
        ),
        (
            "2 * X^2 - 2 = 0",
            "Reduced form: 2 * X^2 - 2 * X^0 = 0\n"
            "Polynomial degree: 2\n"
            "Discriminant is strictly positive, the two solutions are:\n"
            "-1\n"
            "1",
        ),
        (
            "X^2 - 2 = 0",
            "Reduced form: 1 * X^2 - 2 * X^0 = 0\n"
            "Polynomial degree: 2\n"
            "Discriminant is strictly positive, the two solutions are:\n"
            "≈ -1.414214\n"
            "≈ 1.414214",
        ),
        (
            "X^2 - 2 * X + 1 = 0",
            "Reduced form: 1 * X^2 - 2 * X^1 + 1 * X^0 = 0\n"
            "Polynomial degree: 2\n"
            "Discriminant is strictly zero, the solution is:\n"
            "1",
        ),
        (
            "X^2 + 1 = 0",
            "Reduced form: 1 * X^2 + 1 * X^0 = 0\n"
            "Polynomial degree: 2\n"
            "Discriminant is strictly negative, the two complex solutions are:\n"
            "-i\n"
            "i",
        ),
        (
            "2 * X^2 + 2 * X + 5 = 0",
            "Reduced form: 2 * X^2 + 2 * X^1 + 5 * X^0 = 0\n"
            "Polynomial degree: 2\n"
            "Discriminant is strictly negative, the two complex solutions are:\n"
            "-0.5 - 1.5i\n"
            "-0.5 + 1.5i",
        ),
    ],
)
def test_format_result(text: str, expected: str) -> None:
    assert format_result(*compute(text)) == expected


def test_format_unsupported() -> None:
    with pytest.raises(UnsupportedDegreeError) as info:
        compute("5 + 3 * X^3 = X^3 + X^3")
    assert format_unsupported(info.value) == (
        "Reduced form: 1 * X^3 + 5 * X^0 = 0\n"
        "Polynomial degree: 3\n"
        "The polynomial degree is strictly greater than 2, I can't solve."
    )


@pytest.mark.parametrize(
    "text",
    [
        "5 * X^0 + 4 * X^1 - 9.3 * X^2 = 1 * X^0",
        "8 * X^0 - 6 * X^1 + 0 * X^2 - 5.6 * X^3 = 3 * X^0",
        "-X^2 - 0.125 * X = 7.75",
        "X + 1 = X + 1",
        "3 = 4",
    ],
)
def test_reduced_form_round_trips(text: str) -> None:
    original = reduce(*parse_equation(text))
    again = reduce(*parse_equation(format_reduced(original)))
    assert again == original
