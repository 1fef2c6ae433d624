import pytest
from fastapi.testclient import TestClient

from conftest import FailingLLM, RecordingLLMFactory
from edugen.main import app, get_generation_service
from edugen.services.generation_service import GENERATION_FAILED_MESSAGE, GenerationService


@pytest.fixture
def client_with():
    def make(llm_factory):
        app.dependency_overrides[get_generation_service] = lambda: GenerationService(llm_factory=llm_factory)
        return TestClient(app)

    yield make
    app.dependency_overrides.clear()


def test_health(client_with):
    response = client_with(RecordingLLMFactory([])).get("/health")
    assert response.json() == {"ok": True}


def test_generate_returns_raw_content(client_with, quiz_options, quiz_json):
    client = client_with(RecordingLLMFactory([quiz_json]))
    response = client.post("/generate/", json=quiz_options.model_dump(mode="json"))

    assert response.status_code == 200
    assert response.json() == {"content": quiz_json, "content_type": "quiz"}


def test_generate_defaults_to_study_guide(client_with):
    factory = RecordingLLMFactory(["# Guide"])
    response = client_with(factory).post("/generate/", json={"topic": "Cells"})

    assert response.json()["content_type"] == "study_guide"
    assert factory.calls == [{"temperature": 0.6}]


def test_generate_failure_is_generic(client_with, guide_options):
    client = client_with(lambda **config: FailingLLM())
    response = client.post("/generate/", json=guide_options.model_dump(mode="json"))

    assert response.status_code == 500
    assert response.json()["detail"] == GENERATION_FAILED_MESSAGE


def test_blank_topic_is_rejected(client_with):
    factory = RecordingLLMFactory(["unused"])
    response = client_with(factory).post("/generate/", json={"topic": "  "})
    assert response.status_code == 400
    assert factory.calls == []


def test_unknown_option_value_is_rejected(client_with):
    response = client_with(RecordingLLMFactory([])).post(
        "/generate/", json={"topic": "Cells", "length": "Epic"}
    )
    assert response.status_code == 422


def test_api_key_check(client_with):
    response = client_with(RecordingLLMFactory(["Hello World"])).get("/test-api-key/")
    assert response.json() == {"ok": True, "message": "Hello World"}
