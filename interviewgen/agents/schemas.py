## Pydantic Schemas for Structured Output
import unicodedata
from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field, RootModel, conint, field_validator

MAX_ROLE_LENGTH = 200
QUESTION_COUNT = 6

Difficulty = Literal["easy", "medium", "hard"]


class Question(BaseModel):
    # strict: "1" or 20.0 from the model is a shape error, not coerced
    model_config = ConfigDict(frozen=True, strict=True)

    id: conint(ge=1, le=QUESTION_COUNT)
    text: str
    difficulty: Difficulty
    timer: Literal[20, 60, 120]

    @field_validator("text")
    @classmethod
    def _text_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("question text is empty")
        return v


class QuestionSet(RootModel[List[Question]]):
    root: List[Question] = Field(min_length=QUESTION_COUNT, max_length=QUESTION_COUNT)

    def __iter__(self):
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)


class GenerateQuestionsIn(BaseModel):
    role: str

    @field_validator("role")
    @classmethod
    def _clean_role(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("role is required")
        if len(v) > MAX_ROLE_LENGTH:
            raise ValueError(f"role must be at most {MAX_ROLE_LENGTH} characters")
        # Cc covers \n, \t, \x00 and friends
        if any(unicodedata.category(ch) == "Cc" for ch in v):
            raise ValueError("role must not contain control characters")
        return v


class GenerateQuestionsOut(BaseModel):
    questions: List[Question]
