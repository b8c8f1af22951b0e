"""Error taxonomy for the computor pipeline.

Every failure is a ``ValueError`` so callers that only care about "bad
input" can keep catching that, while callers that need the failure kind
can match on the concrete class or on ``kind``.
"""


class ComputorError(ValueError):
    """Base class for every error raised while solving an equation."""

    kind = "error"


class LexError(ComputorError):
    """Invalid character or malformed numeric literal."""

    kind = "lex"

    def __init__(self, position: int, character: str, message: str = ""):
        self.position = position
        self.character = character
        if not message:
            message = f"Unexpected character {character!r}"
        super().__init__(f"{message} at position {position}.")


class ParseError(ComputorError):
    """Grammar violation in an otherwise well-lexed equation."""

    kind = "parse"

    def __init__(self, reason: str, position: int | None = None):
        self.reason = reason
        self.position = position
        if position is None:
            super().__init__(reason)
        else:
            super().__init__(f"{reason} (at position {position})")


class UnsupportedDegreeError(ComputorError):
    """The reduced polynomial has degree 3 or more."""

    kind = "unsupported_degree"

    def __init__(self, degree: int, polynomial=None):
        self.degree = degree
        self.polynomial = polynomial
        super().__init__(
            f"The polynomial degree is strictly greater than 2 "
            f"(degree {degree}), I can't solve."
        )
