from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ContentType(str, Enum):
    STUDY_GUIDE = "study_guide"
    QUIZ = "quiz"

class Difficulty(str, Enum):
    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"

class Grade(str, Enum):
    GRADE_10 = "Grade 10"
    GRADE_11 = "Grade 11"
    GRADE_12 = "Grade 12"

class Tone(str, Enum):
    ACADEMIC = "Academic"
    SIMPLE = "Simple"
    CONVERSATIONAL = "Conversational"

class Length(str, Enum):
    BRIEF = "Brief"
    STANDARD = "Standard"
    DETAILED = "Detailed"


class GenerateOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    topic: str = Field(..., description="Topic or subject to generate content about")
    content_type: ContentType = ContentType.STUDY_GUIDE
    difficulty: Difficulty = Difficulty.BEGINNER
    length: Length = Length.STANDARD
    grade: Grade = Grade.GRADE_10
    tone: Tone = Tone.ACADEMIC
    instructions: str = ""


# Quiz payload as returned by the model (camelCase on the wire).
# Question fields are loose: the model output is only shape-checked at the top level.
def _loose_text(value) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


class MultipleChoiceQuestion(BaseModel):
    question: str = ""
    options: List[str] = []
    answer: str = ""

    @field_validator("question", "answer", mode="before")
    @classmethod
    def coerce_text(cls, value):
        return _loose_text(value)

    @field_validator("options", mode="before")
    @classmethod
    def coerce_options(cls, value):
        if not isinstance(value, list):
            return []
        return [_loose_text(option) for option in value]


class ShortAnswerQuestion(BaseModel):
    question: str = ""
    answer: str = ""

    @field_validator("question", "answer", mode="before")
    @classmethod
    def coerce_text(cls, value):
        return _loose_text(value)

class QuizData(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: str
    multiple_choice: List[MultipleChoiceQuestion] = Field(default_factory=list, alias="multipleChoice")
    short_answer: List[ShortAnswerQuestion] = Field(default_factory=list, alias="shortAnswer")


class PerformanceMetrics(BaseModel):
    generation_time: float  # seconds

    @property
    def display(self) -> str:
        return f"{self.generation_time:.2f}"


class GenerateResponse(BaseModel):
    content: str
    content_type: ContentType

class ApiKeyCheckResponse(BaseModel):
    ok: bool
    message: str
