from typing import Literal, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from computor.engine import solve_polynomial_equation
from computor.errors import ComputorError, UnsupportedDegreeError
from computor.logging_config import get_logger

logger = get_logger("api")

app = FastAPI(title="computor API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class EquationRequest(BaseModel):
    equation: str
    mode: Literal["exact", "numerical"] = "exact"


class StepInfo(BaseModel):
    description: str
    expression: str
    explanation: str


class SolutionInfo(BaseModel):
    real: str
    imag: str
    exact: bool
    text: str


class SolveResponse(BaseModel):
    equation: str
    reduced_form: str
    degree: int
    solution_kind: str
    solutions: list[SolutionInfo]
    steps: list[StepInfo]
    final_answer: str
    verification_steps: list[StepInfo]


class ErrorDetail(BaseModel):
    kind: str
    message: str
    degree: Optional[int] = None


@app.post("/api/solve", response_model=SolveResponse)
def solve(req: EquationRequest):
    equation = req.equation.strip()
    if not equation:
        raise HTTPException(status_code=400, detail={"kind": "empty", "message": "Equation cannot be empty."})

    try:
        result = solve_polynomial_equation(equation, mode=req.mode)
    except UnsupportedDegreeError as e:
        detail = ErrorDetail(kind=e.kind, message=str(e), degree=e.degree)
        raise HTTPException(status_code=422, detail=detail.model_dump())
    except ComputorError as e:
        raise HTTPException(status_code=400, detail={"kind": e.kind, "message": str(e)})
    except Exception as e:
        logger.exception("solver failed on %r", equation)
        raise HTTPException(status_code=500, detail={"kind": "internal", "message": f"Solver error: {str(e)}"})

    return result
