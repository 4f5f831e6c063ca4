# interviewgen/agents/generator.py
import asyncio
from collections import Counter
from typing import Iterable

from interviewgen.agents.llm.base import LLMClient
from interviewgen.agents.prompts import build_request
from interviewgen.agents.schemas import QUESTION_COUNT, Question, QuestionSet
from interviewgen.errors import UpstreamShape, UpstreamTimeout

TIMER_BY_DIFFICULTY = {"easy": 20, "medium": 60, "hard": 120}
PER_DIFFICULTY = 2


def validate_question_set(questions: Iterable[Question]) -> None:
    """
    Re-check the contract the response schema only hints at: six questions,
    ids 1..6, two of each difficulty, and a timer matching its difficulty.
    """
    questions = list(questions)
    if len(questions) != QUESTION_COUNT:
        raise ValueError(f"Expected {QUESTION_COUNT} questions, got {len(questions)}")

    ids = sorted(q.id for q in questions)
    if ids != list(range(1, QUESTION_COUNT + 1)):
        raise ValueError(f"Question ids must be exactly 1..{QUESTION_COUNT}, got {ids}")

    for q in questions:
        if not q.text.strip():
            raise ValueError(f"Question {q.id} text is empty")
        expected = TIMER_BY_DIFFICULTY[q.difficulty]
        if q.timer != expected:
            raise ValueError(
                f"Question {q.id} is {q.difficulty} and needs timer {expected}, got {q.timer}"
            )

    counts = Counter(q.difficulty for q in questions)
    for difficulty in TIMER_BY_DIFFICULTY:
        if counts[difficulty] != PER_DIFFICULTY:
            raise ValueError(
                f"Expected {PER_DIFFICULTY} {difficulty} questions, got {counts[difficulty]}"
            )


async def generate_questions(llm: LLMClient, role: str, *, timeout: float | None = 30.0) -> QuestionSet:
    request = build_request(role)

    try:
        question_set = await asyncio.wait_for(
            llm.generate_structured(QuestionSet, request), timeout=timeout
        )
    except asyncio.TimeoutError as e:
        raise UpstreamTimeout(f"upstream did not answer within {timeout}s") from e

    try:
        validate_question_set(question_set)
    except ValueError as e:
        raise UpstreamShape(str(e)) from e

    return question_set
