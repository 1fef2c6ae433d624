import json

import pytest
from langchain_core.language_models.fake_chat_models import FakeListChatModel

from edugen.schemas import ContentType, Difficulty, GenerateOptions, Grade, Length, Tone


class RecordingLLMFactory:
    """Hands out fake chat models and remembers the config each was built with"""

    def __init__(self, responses):
        self.responses = responses
        self.calls = []

    def __call__(self, **config):
        self.calls.append(config)
        return FakeListChatModel(responses=self.responses)


class FailingLLM:
    async def ainvoke(self, prompt):
        raise RuntimeError("429 quota exceeded")


def make_quiz_payload(mc_count=5, sa_count=3, title="Photosynthesis Quiz"):
    return {
        "title": title,
        "multipleChoice": [
            {
                "question": f"MC question {i + 1}?",
                "options": ["Chlorophyll", "Glucose", "Oxygen", "Water"],
                "answer": "Chlorophyll",
            }
            for i in range(mc_count)
        ],
        "shortAnswer": [
            {"question": f"SA question {i + 1}?", "answer": f"Answer {i + 1}"}
            for i in range(sa_count)
        ],
    }


@pytest.fixture
def quiz_options():
    return GenerateOptions(
        topic="Photosynthesis",
        content_type=ContentType.QUIZ,
        difficulty=Difficulty.BEGINNER,
        length=Length.STANDARD,
        grade=Grade.GRADE_10,
        tone=Tone.ACADEMIC,
        instructions="",
    )


@pytest.fixture
def guide_options():
    return GenerateOptions(
        topic="The Cold War",
        content_type=ContentType.STUDY_GUIDE,
        difficulty=Difficulty.ADVANCED,
        length=Length.DETAILED,
        grade=Grade.GRADE_12,
        tone=Tone.CONVERSATIONAL,
    )


@pytest.fixture
def quiz_json():
    return json.dumps(make_quiz_payload())
