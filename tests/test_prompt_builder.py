import pytest

from edugen.schemas import ContentType, GenerateOptions, Length
from edugen.services.prompt_builder import (
    QUIZ_SCHEMA,
    build_prompt,
    build_quiz_prompt,
    build_study_guide_prompt,
    generation_config,
)


@pytest.mark.parametrize("length, expected", [
    (Length.BRIEF, "3 multiple-choice questions and 2 short-answer questions"),
    (Length.STANDARD, "5 multiple-choice questions and 3 short-answer questions"),
    (Length.DETAILED, "8 multiple-choice questions and 5 short-answer questions"),
    ("Epic", "5 multiple-choice questions and 3 short-answer questions"),
])
def test_quiz_question_counts(quiz_options, length, expected):
    options = GenerateOptions.model_construct(**{**quiz_options.model_dump(), "length": length})
    prompt = build_quiz_prompt(options)
    assert f"The quiz should include {expected}." in prompt


def test_quiz_prompt_embeds_options(quiz_options):
    prompt = build_quiz_prompt(quiz_options)
    assert prompt.startswith(
        'Generate a quiz about "Photosynthesis" for a Grade 10 student at a Beginner difficulty level.'
    )
    assert "The tone of the quiz should be Academic." in prompt
    assert "provide 4 options with only one correct answer" in prompt
    assert "Additional Instructions" not in prompt


def test_study_guide_prompt_embeds_options(guide_options):
    prompt = build_study_guide_prompt(guide_options)
    assert prompt.startswith(
        'Generate a study guide about "The Cold War" for a Grade 12 student at a Advanced difficulty level.'
    )
    assert "The tone of the guide should be Conversational." in prompt
    assert "Provide a comprehensive and in-depth guide." in prompt
    assert "Format the entire response in Markdown." in prompt


@pytest.mark.parametrize("length, expected", [
    (Length.BRIEF, "Provide a concise summary"),
    (Length.STANDARD, "Provide a balanced overview that covers main topics"),
    ("Epic", "Provide a balanced overview.\n"),
])
def test_study_guide_detail_levels(guide_options, length, expected):
    options = GenerateOptions.model_construct(**{**guide_options.model_dump(), "length": length})
    assert expected in build_study_guide_prompt(options)


def test_instructions_are_appended(guide_options):
    options = guide_options.model_copy(update={"instructions": "Focus on key figures"})
    prompt = build_study_guide_prompt(options)
    assert prompt.endswith("\n\nAdditional Instructions: Focus on key figures")


def test_blank_instructions_are_ignored(quiz_options):
    options = quiz_options.model_copy(update={"instructions": "   \n "})
    assert "Additional Instructions" not in build_quiz_prompt(options)


def test_topic_with_braces_is_kept_verbatim(quiz_options):
    options = quiz_options.model_copy(update={"topic": "Sets {a, b}"})
    assert 'a quiz about "Sets {a, b}"' in build_quiz_prompt(options)


def test_build_prompt_dispatches_on_content_type(quiz_options, guide_options):
    assert build_prompt(quiz_options).startswith("Generate a quiz")
    assert build_prompt(guide_options).startswith("Generate a study guide")


def test_generation_config():
    quiz = generation_config(ContentType.QUIZ)
    assert quiz["temperature"] == 0.7
    assert quiz["response_mime_type"] == "application/json"
    assert quiz["response_schema"] is QUIZ_SCHEMA
    assert generation_config(ContentType.STUDY_GUIDE) == {"temperature": 0.6}


def test_quiz_schema_required_fields():
    assert QUIZ_SCHEMA["required"] == ["title", "multipleChoice", "shortAnswer"]
    mc_items = QUIZ_SCHEMA["properties"]["multipleChoice"]["items"]
    assert mc_items["required"] == ["question", "options", "answer"]
    assert QUIZ_SCHEMA["properties"]["shortAnswer"]["items"]["required"] == ["question", "answer"]
