"""Prompt templates for study guides and quizzes.

Every option value is embedded verbatim, so the prompt for a given set of
options is always the same string.
"""
from langchain_core.prompts import PromptTemplate

from edugen.schemas import ContentType, GenerateOptions, Length
from edugen.utils.config import settings


QUESTION_COUNTS = {
    Length.BRIEF.value: "3 multiple-choice questions and 2 short-answer questions",
    Length.STANDARD.value: "5 multiple-choice questions and 3 short-answer questions",
    Length.DETAILED.value: "8 multiple-choice questions and 5 short-answer questions",
}
DEFAULT_QUESTION_COUNT = QUESTION_COUNTS[Length.STANDARD.value]

DETAIL_LEVELS = {
    Length.BRIEF.value: "a concise summary focusing on the most critical key points, definitions, and concepts. Keep it high-level.",
    Length.STANDARD.value: "a balanced overview that covers main topics, explains key terms with examples, and summarizes important processes or events.",
    Length.DETAILED.value: "a comprehensive and in-depth guide. It should include detailed explanations, multiple examples for each concept, historical context if applicable, and potential areas of confusion or common mistakes.",
}
DEFAULT_DETAIL_LEVEL = "a balanced overview."

quiz_template = PromptTemplate.from_template(
    'Generate a quiz about "{topic}" for a {grade} student at a {difficulty} difficulty level.\n'
    "The tone of the quiz should be {tone}.\n"
    "The quiz should include {question_count}.\n"
    "For multiple-choice questions, provide 4 options with only one correct answer.\n"
    "For short-answer questions, provide a concise, correct answer.\n"
    "Return the output as a single JSON object that strictly adheres to the provided schema. "
    "Do not include any markdown formatting like ```json."
)

study_guide_template = PromptTemplate.from_template(
    'Generate a study guide about "{topic}" for a {grade} student at a {difficulty} difficulty level.\n'
    "The tone of the guide should be {tone}.\n"
    "The guide should be structured with clear headings and bullet points.\n"
    "Provide {detail_level}\n"
    "Format the entire response in Markdown. Use headings (#, ##), bold text, italics, and lists "
    "as appropriate to create a well-organized and readable document."
)

QUIZ_SCHEMA = {
    "type": "object",
    "properties": {
        "title": {"type": "string", "description": "The title of the quiz."},
        "multipleChoice": {
            "type": "array",
            "description": "An array of multiple-choice questions.",
            "items": {
                "type": "object",
                "properties": {
                    "question": {"type": "string"},
                    "options": {"type": "array", "items": {"type": "string"}},
                    "answer": {"type": "string"},
                },
                "required": ["question", "options", "answer"],
            },
        },
        "shortAnswer": {
            "type": "array",
            "description": "An array of short-answer questions.",
            "items": {
                "type": "object",
                "properties": {
                    "question": {"type": "string"},
                    "answer": {"type": "string"},
                },
                "required": ["question", "answer"],
            },
        },
    },
    "required": ["title", "multipleChoice", "shortAnswer"],
}


def _value(option) -> str:
    # Accepts enum members as well as raw strings
    return getattr(option, "value", option)


def _with_instructions(prompt: str, instructions: str) -> str:
    if instructions and instructions.strip():
        prompt += f"\n\nAdditional Instructions: {instructions}"
    return prompt


def build_quiz_prompt(options: GenerateOptions) -> str:
    question_count = QUESTION_COUNTS.get(_value(options.length), DEFAULT_QUESTION_COUNT)
    prompt = quiz_template.format(
        topic=options.topic,
        grade=_value(options.grade),
        difficulty=_value(options.difficulty),
        tone=_value(options.tone),
        question_count=question_count,
    )
    return _with_instructions(prompt, options.instructions)


def build_study_guide_prompt(options: GenerateOptions) -> str:
    detail_level = DETAIL_LEVELS.get(_value(options.length), DEFAULT_DETAIL_LEVEL)
    prompt = study_guide_template.format(
        topic=options.topic,
        grade=_value(options.grade),
        difficulty=_value(options.difficulty),
        tone=_value(options.tone),
        detail_level=detail_level,
    )
    return _with_instructions(prompt, options.instructions)


def build_prompt(options: GenerateOptions) -> str:
    if options.content_type == ContentType.QUIZ:
        return build_quiz_prompt(options)
    return build_study_guide_prompt(options)


def generation_config(content_type: ContentType) -> dict:
    """Model parameters for one generation call.

    Quizzes are constrained to JSON matching QUIZ_SCHEMA; study guides are
    free-form markdown.
    """
    if content_type == ContentType.QUIZ:
        return {
            "temperature": settings.quiz_temperature,
            "response_mime_type": "application/json",
            "response_schema": QUIZ_SCHEMA,
        }
    return {"temperature": settings.study_guide_temperature}
