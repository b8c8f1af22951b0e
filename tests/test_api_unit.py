from fastapi.testclient import TestClient

from backend.app.main import app

client = TestClient(app)


def test_solve_exact() -> None:
    response = client.post("/api/solve", json={"equation": "X^2 + 1 = 0"})
    assert response.status_code == 200
    body = response.json()
    assert body["reduced_form"] == "1 * X^2 + 1 * X^0 = 0"
    assert body["degree"] == 2
    assert [s["text"] for s in body["solutions"]] == ["-i", "i"]
    assert body["final_answer"].endswith("-i\ni")


def test_solve_numerical() -> None:
    response = client.post("/api/solve", json={"equation": "2 * X = 1", "mode": "numerical"})
    assert response.status_code == 200
    assert response.json()["final_answer"].splitlines()[-1] == "0.5"


def test_empty_equation() -> None:
    response = client.post("/api/solve", json={"equation": "   "})
    assert response.status_code == 400
    assert response.json()["detail"]["kind"] == "empty"


def test_parse_and_lex_errors_are_distinguishable() -> None:
    parse = client.post("/api/solve", json={"equation": "X^ = 1"})
    lex = client.post("/api/solve", json={"equation": "X = 1$"})
    assert parse.status_code == lex.status_code == 400
    assert parse.json()["detail"]["kind"] == "parse"
    assert lex.json()["detail"]["kind"] == "lex"


def test_overlong_literal_is_a_lex_error() -> None:
    response = client.post("/api/solve", json={"equation": "1" * 5000 + " = 0"})
    assert response.status_code == 400
    assert response.json()["detail"]["kind"] == "lex"


def test_unsupported_degree() -> None:
    response = client.post("/api/solve", json={"equation": "X^3 = 1"})
    assert response.status_code == 422
    detail = response.json()["detail"]
    assert detail["kind"] == "unsupported_degree"
    assert detail["degree"] == 3


def test_invalid_mode_is_rejected_by_validation() -> None:
    response = client.post("/api/solve", json={"equation": "X = 1", "mode": "magic"})
    assert response.status_code == 422
