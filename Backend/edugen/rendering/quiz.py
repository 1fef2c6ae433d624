import json
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional

from pydantic import ValidationError

from edugen.schemas import QuizData

logger = logging.getLogger(__name__)

FORMAT_MISMATCH_MESSAGE = (
    "Could not render quiz. The AI returned an invalid format. Showing raw output instead."
)

MULTIPLE_CHOICE = "mc"
SHORT_ANSWER = "sa"


@dataclass(frozen=True)
class QuizParseResult:
    quiz: Optional[QuizData] = None
    error: Optional[str] = None


def extract_json(text: str):
    """Parse the response as JSON, returning None when it is not valid JSON"""
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return None


def has_quiz_shape(data) -> bool:
    return (
        isinstance(data, dict)
        and isinstance(data.get("title"), str)
        and bool(data["title"])
        and isinstance(data.get("multipleChoice"), list)
        and isinstance(data.get("shortAnswer"), list)
    )


def parse_quiz(text: str) -> QuizParseResult:
    """Parse a quiz response, falling back to a warning instead of raising.

    Only the top-level shape is checked; question fields that are missing
    are filled with empty defaults.
    """
    data = extract_json(text)
    if not has_quiz_shape(data):
        logger.error(f"Failed to parse quiz JSON: {text[:200]}")
        return QuizParseResult(error=FORMAT_MISMATCH_MESSAGE)
    try:
        return QuizParseResult(quiz=QuizData.model_validate(data))
    except ValidationError as e:
        logger.error(f"Quiz validation failed: {e}")
        return QuizParseResult(error=FORMAT_MISMATCH_MESSAGE)


def answer_key(kind: str, index: int) -> str:
    return f"{kind}-{index}"


def toggle_answer(revealed: Mapping[str, bool], key: str) -> Dict[str, bool]:
    updated = dict(revealed)
    updated[key] = not updated.get(key, False)
    return updated


def option_label(index: int, option: str) -> str:
    return f"{chr(ord('a') + index)}) {option}"


@dataclass(frozen=True)
class QuestionBlock:
    key: str
    number: int
    question: str
    answer: str
    answer_visible: bool
    options: List[str] = field(default_factory=list)

    @property
    def toggle_label(self) -> str:
        return f"{'Hide' if self.answer_visible else 'Show'} Answer"


@dataclass(frozen=True)
class QuizView:
    title: str
    multiple_choice: List[QuestionBlock]
    short_answer: List[QuestionBlock]

    @property
    def has_multiple_choice(self) -> bool:
        return bool(self.multiple_choice)

    @property
    def has_short_answer(self) -> bool:
        return bool(self.short_answer)


def render_quiz(quiz: QuizData, revealed: Optional[Mapping[str, bool]] = None) -> QuizView:
    """Lay out a quiz; answers stay hidden until their own key is toggled on"""
    revealed = revealed or {}

    multiple_choice = []
    for index, q in enumerate(quiz.multiple_choice):
        key = answer_key(MULTIPLE_CHOICE, index)
        multiple_choice.append(QuestionBlock(
            key=key,
            number=index + 1,
            question=q.question,
            answer=q.answer,
            answer_visible=bool(revealed.get(key, False)),
            options=[option_label(i, opt) for i, opt in enumerate(q.options)],
        ))

    short_answer = []
    for index, q in enumerate(quiz.short_answer):
        key = answer_key(SHORT_ANSWER, index)
        short_answer.append(QuestionBlock(
            key=key,
            number=index + 1,
            question=q.question,
            answer=q.answer,
            answer_visible=bool(revealed.get(key, False)),
        ))

    return QuizView(title=quiz.title, multiple_choice=multiple_choice, short_answer=short_answer)
