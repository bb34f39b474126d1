import pytest
from fastapi.testclient import TestClient

from interview_coach.databases.postgres.database import get_db
from interview_coach.main import app
from interview_coach.models.evaluation import CompletionOutcome
from interview_coach.services.evaluation_pipeline_service import EvaluationPipeline, get_evaluation_pipeline
from tests.helper import CIRCLES_TRANSCRIPT, FakeCompletion


@pytest.fixture
def client(db_session):
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


def _use_pipeline(*outcomes: CompletionOutcome) -> FakeCompletion:
    completion = FakeCompletion(*outcomes)
    app.dependency_overrides[get_evaluation_pipeline] = lambda: EvaluationPipeline(completion)
    return completion


def test_health(client):
    result = client.get("/health")
    assert result.status_code == 200
    expected = {"status": "healthy", "services": {"api": "up", "completion": "heuristic-only"}}
    assert result.json() == expected


def test_evaluate_blank_question(client):
    completion = _use_pipeline()
    for question in ["", "   "]:
        result = client.post("/api/v1/evaluate", json={"question_text": question, "transcript": "x"})
        assert result.status_code == 400, f"---> {question!r}"

        body = result.json()
        assert body["success"] is False
        assert body["message"] == "Request invalid"
        assert "data" not in body
        error = body["error"]["detail"][0]
        assert error["loc"] == ["body", "question_text"]
        assert "Question text cannot be empty" in error["msg"]
    assert completion.calls == []


def test_evaluate_missing_question(client):
    _use_pipeline()
    result = client.post("/api/v1/evaluate", json={"transcript": "x"})
    assert result.status_code == 400
    assert result.json()["error"]["detail"][0]["loc"] == ["body", "question_text"]


def test_feedback_not_found(client):
    result = client.get("/api/v1/feedback/999")
    assert result.status_code == 404
    expected = {"success": False, "message": "Feedback not found for response: 999"}
    assert result.json() == expected


def test_evaluate_then_read_back(client):
    _use_pipeline(
        CompletionOutcome(text="Overall Score: 8.0/10\n\nSolid answer.", attempts=1),
        CompletionOutcome(attempts=3, exhausted=True, last_error="down"),
    )
    payload = {
        "question_text": "How would you improve retention for a messaging app?",
        "transcript": CIRCLES_TRANSCRIPT,
        "framework": "circles",
        "user_id": "theUser",
    }

    first = client.post("/api/v1/evaluate", json=payload)
    assert first.status_code == 200
    assert first.json()["overall_score"] == 8.0
    assert first.json()["source"] == "completion"

    second = client.post("/api/v1/evaluate", json=payload)
    assert second.status_code == 200
    assert second.json()["overall_score"] == 0.7
    assert second.json()["source"] == "heuristic"

    result = client.get(f"/api/v1/feedback/{first.json()['response_id']}")
    assert result.status_code == 200
    assert result.json()["feedback_text"] == "Overall Score: 8.0/10\n\nSolid answer."
    assert result.json()["breakdown"]["overall_score"] == 8.0

    result = client.get("/api/v1/responses", params={"user_id": "theUser"})
    assert result.status_code == 200
    history = result.json()
    assert [r["response_id"] for r in history] == [second.json()["response_id"], first.json()["response_id"]]
    assert [r["overall_score"] for r in history] == [0.7, 8.0]
    assert [r["source"] for r in history] == ["heuristic", "completion"]
    assert all(r["framework"] == "circles" for r in history)

    result = client.get("/api/v1/responses", params={"user_id": "theUser", "limit": 1})
    assert [r["response_id"] for r in result.json()] == [second.json()["response_id"]]

    result = client.get("/api/v1/responses", params={"user_id": "nobody"})
    assert result.json() == []


def test_responses_requires_user(client):
    result = client.get("/api/v1/responses")
    assert result.status_code == 400
    assert result.json()["error"]["detail"][0]["loc"] == ["query", "user_id"]


def test_ideal_response_unavailable(client):
    _use_pipeline(CompletionOutcome(attempts=3, exhausted=True))
    result = client.post("/api/v1/ideal-response", json={"question_text": "Design a parking app", "framework": "jtbd"})
    assert result.status_code == 503
    expected = {"success": False, "message": "Completion service unavailable, try again later"}
    assert result.json() == expected


def test_frameworks(client):
    result = client.get("/api/v1/frameworks")
    assert result.status_code == 200
    assert [f["framework"] for f in result.json()] == [
        "star", "circles", "design_thinking", "jtbd", "user_centric", "generic",
    ]

    result = client.post("/api/v1/frameworks/detect", json={"transcript": "Empathize, Define, Ideate"})
    assert result.json() == {"framework": "design_thinking", "display_name": "Design Thinking"}
