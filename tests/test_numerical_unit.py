"""Tests for the numerical (NumPy) solver."""

import pytest

from computor.errors import UnsupportedDegreeError
from computor.numerical import _fmt_num, _format_numeric, numeric_roots, solve_numeric
from computor.parser import parse_equation
from computor.reducer import reduce


# ── _fmt_num helper ──────────────────────────────────────────────────────

class TestFmtNum:
    def test_integer(self):
        assert _fmt_num(7.0) == "7"

    def test_clean_decimal(self):
        assert _fmt_num(2.5) == "2.5"

    def test_trailing_zeros_stripped(self):
        assert _fmt_num(1.50000) == "1.5"

    def test_very_small_rounds_to_int(self):
        assert _fmt_num(3.0000000000001) == "3"


class TestFormatNumeric:
    def test_real(self):
        assert _format_numeric(complex(-0.25, 0)) == "-0.25"

    def test_pure_imaginary(self):
        assert _format_numeric(complex(0, -1)) == "-i"
        assert _format_numeric(complex(0, 2)) == "2i"

    def test_complex(self):
        assert _format_numeric(complex(-1, 2)) == "-1 + 2i"


# ── Roots ────────────────────────────────────────────────────────────────

def _roots(text):
    return numeric_roots(reduce(*parse_equation(text)))


class TestNumericRoots:
    def test_original_quadratic(self):
        first, second = _roots("5 * X^0 + 4 * X^1 - 9.3 * X^2 = 1 * X^0")
        assert first.real == pytest.approx(0.905239, abs=1e-6)
        assert second.real == pytest.approx(-0.475131, abs=1e-6)

    def test_linear(self):
        assert _roots("5 * X^0 + 4 * X^1 = 4 * X^0") == [complex(-0.25)]

    def test_complex_pair(self):
        assert _roots("X^2 + 1 = 0") == [complex(0, -1), complex(0, 1)]

    def test_degenerate(self):
        assert _roots("3 = 4") == []
        assert _roots("X = X") == []

    def test_tiny_positive_discriminant(self):
        tiny = "0." + "0" * 199 + "1"
        assert len(_roots(f"X^2 + {tiny} * X = 0")) == 2

    def test_degree_three(self):
        with pytest.raises(UnsupportedDegreeError):
            _roots("X^3 = 1")


# ── Full result ──────────────────────────────────────────────────────────

class TestSolveNumeric:
    def test_has_required_fields(self):
        result = solve_numeric("2 * X + 2 = 5")
        required = {"equation", "given", "method", "steps",
                    "final_answer", "verification_steps", "summary"}
        assert required.issubset(set(result.keys()))

    def test_final_answer(self):
        result = solve_numeric("2 * X^2 - 2 = 0")
        assert result["final_answer"].splitlines()[-3:] == [
            "Discriminant is strictly positive, the two solutions are:",
            "-1",
            "1",
        ]

    def test_fractional_result_is_flagged(self):
        last = solve_numeric("3 * X + 1 = 2")["final_answer"].splitlines()[-1]
        assert last.startswith("≈ ")
        assert abs(float(last[2:]) - 1 / 3) < 1e-9

    def test_irrational_roots_are_flagged(self):
        result = solve_numeric("X^2 - 2 = 0")
        assert result["final_answer"].splitlines()[-2:] == [
            "≈ -1.4142135624",
            "≈ 1.4142135624",
        ]
        assert [s["exact"] for s in result["solutions"]] == [False, False]
        assert result["solutions"][0]["text"] == "≈ -1.4142135624"

    def test_exact_roots_are_not_flagged(self):
        result = solve_numeric("2 * X^2 - 2 = 0")
        assert [s["exact"] for s in result["solutions"]] == [True, True]

    def test_tiny_discriminant_keeps_two_roots(self):
        tiny = "0." + "0" * 199 + "1"
        result = solve_numeric(f"X^2 + {tiny} * X = 0")
        lines = result["final_answer"].splitlines()
        assert lines[2] == "Discriminant is strictly positive, the two solutions are:"
        assert len(lines) == 5
        assert len(result["solutions"]) == 2

    def test_summary_fields(self):
        s = solve_numeric("X = 5")["summary"]
        assert s["runtime_ms"] >= 0
        assert "NumPy" in s["library"]
        assert s["validation_status"] == "pass"

    def test_complex_verification_passes(self):
        result = solve_numeric("X^2 + 2 * X + 5 = 0")
        assert len(result["verification_steps"]) == 2
        assert result["summary"]["validation_status"] == "pass"
        assert [s["text"] for s in result["solutions"]] == ["-1 - 2i", "-1 + 2i"]

    def test_identity(self):
        result = solve_numeric("X + 1 = X + 1")
        assert result["solution_kind"] == "all_reals"
        assert result["final_answer"].endswith("Each real number is a solution.")
