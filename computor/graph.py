"""
Graph builder for computor.

Produces a themed matplotlib Figure of the reduced polynomial ``P(X)``
with its real roots marked. Handles every solvable case:
  - identity      : ``0 = 0``, the whole X axis is a solution
  - contradiction : a horizontal line that never meets the axis
  - linear        : a line crossing the axis once
  - quadratic     : a parabola with 0, 1 or 2 axis crossings
"""

import numpy as np
from sympy import lambdify, symbols

from computor.reducer import Polynomial
from computor.solver import SolutionKind, SolutionSet

_X = symbols("X")

# ── palette ────────────────────────────────────────────────────────────────
_DARK_GRAPH = dict(
    C_BG    = "#0f0f0f",
    C_AX    = "#181818",
    C_GRID  = "#252525",
    C_TICK  = "#666666",
    C_SPINE = "#333333",
    C_LINE1 = "#1a8cff",   # the polynomial
    C_DOT   = "#4caf50",   # real roots
    C_TEXT  = "#cccccc",
)

_LIGHT_GRAPH = dict(
    C_BG    = "#ffffff",
    C_AX    = "#f7f9fc",
    C_GRID  = "#dde2ea",
    C_TICK  = "#555555",
    C_SPINE = "#999999",
    C_LINE1 = "#0F4C75",
    C_DOT   = "#2e7d32",
    C_TEXT  = "#222222",
)

C_BG = C_AX = C_GRID = C_TICK = C_SPINE = C_LINE1 = C_DOT = C_TEXT = None


def set_theme(name: str) -> None:
    """Switch the module-level colours to the ``"dark"`` or ``"light"`` palette."""
    if name not in ("dark", "light"):
        raise ValueError(f"Unknown theme {name!r}")
    palette = _LIGHT_GRAPH if name == "light" else _DARK_GRAPH
    globals().update(palette)


set_theme("dark")


def _style_axes(ax, fig):
    fig.patch.set_facecolor(C_BG)
    ax.set_facecolor(C_AX)
    ax.tick_params(colors=C_TICK, labelsize=9)
    ax.xaxis.label.set_color(C_TEXT)
    ax.yaxis.label.set_color(C_TEXT)
    ax.title.set_color(C_TEXT)
    for spine in ax.spines.values():
        spine.set_edgecolor(C_SPINE)
    ax.grid(True, color=C_GRID, linewidth=0.8, linestyle="--", alpha=0.7)
    ax.axhline(0, color=C_SPINE, linewidth=0.8)
    ax.axvline(0, color=C_SPINE, linewidth=0.8)


def _text_figure(title: str, message: str):
    """A figure holding only a title and a centred message."""
    from matplotlib.figure import Figure

    fig = Figure(figsize=(7, 3.4), dpi=100)
    ax = fig.add_subplot(111)
    fig.patch.set_facecolor(C_BG)
    ax.set_facecolor(C_AX)
    ax.set_axis_off()
    ax.set_title(title, color=C_TEXT, fontsize=10)
    ax.text(0.5, 0.5, message, color=C_TEXT, ha="center", va="center",
            fontsize=10, transform=ax.transAxes)
    return fig


def _real_roots(solution_set: SolutionSet) -> list[float]:
    return [float(s.real) for s in solution_set if not s.is_complex]


def _x_window(polynomial: Polynomial, roots: list[float]) -> tuple[float, float]:
    """Plot range centred on the roots, or on the vertex when there are none."""
    if roots:
        lo, hi = min(roots), max(roots)
    elif polynomial.degree == 2:
        lo = hi = float(-polynomial.coefficient(1) / (2 * polynomial.coefficient(2)))
    else:
        lo = hi = 0.0
    margin = max(2.0, (hi - lo) * 0.5)
    return lo - margin, hi + margin


def _title(polynomial: Polynomial, solution_set: SolutionSet, roots: list[float]) -> str:
    if solution_set.kind is SolutionKind.ALL_REALS:
        return "Identity — every X is a solution"
    if solution_set.kind is SolutionKind.EMPTY:
        return "Contradiction — P(X) never reaches 0"
    if not roots:
        return "No real root — the roots are complex"
    shown = ", ".join(f"{r:g}" for r in roots)
    return f"Real root{'s' if len(roots) > 1 else ''}: X = {shown}"


def build_figure(polynomial: Polynomial, solution_set: SolutionSet):
    """
    Build and return a matplotlib Figure of ``P(X)`` for *polynomial*.
    Real roots are drawn as dots on the X axis.
    """
    from matplotlib.figure import Figure

    if polynomial.degree is not None and polynomial.degree > 2:
        return _text_figure("Not plotted", "Only degrees 0 to 2 are supported.")

    roots = _real_roots(solution_set)
    lo, hi = _x_window(polynomial, roots)
    x_range = np.linspace(lo, hi, 400)

    expr = polynomial.evaluate(_X)
    f = lambdify(_X, expr, modules="numpy")
    y_raw = f(x_range)
    if np.ndim(y_raw) == 0:          # constant polynomial
        y = np.full_like(x_range, float(y_raw), dtype=float)
    else:
        y = np.array(y_raw, dtype=float)

    fig = Figure(figsize=(7, 3.4), dpi=100)
    ax = fig.add_subplot(111)
    _style_axes(ax, fig)

    ax.plot(x_range, y, color=C_LINE1, linewidth=2, label="P(X)")
    if roots:
        ax.scatter(roots, [0.0] * len(roots), color=C_DOT, s=80, zorder=5,
                   label="real roots")
        for r in roots:
            ax.axvline(r, color=C_DOT, linewidth=1, linestyle=":", alpha=0.6)

    ax.set_title(_title(polynomial, solution_set, roots), color=C_TEXT, fontsize=10)
    ax.set_xlabel("X", color=C_TEXT)
    ax.set_ylabel("P(X)", color=C_TEXT)
    ax.legend(fontsize=8, facecolor=C_AX, edgecolor=C_SPINE, labelcolor=C_TEXT)
    fig.tight_layout(pad=1.2)
    return fig


def save_figure(fig, path: str) -> str:
    """Write *fig* to *path* (format from the extension, PNG by default)."""
    fig.savefig(path, facecolor=fig.get_facecolor())
    return path
