# interviewgen/generation/routes.py
import logging

from fastapi import APIRouter, Request

from interviewgen.agents.generator import generate_questions
from interviewgen.agents.schemas import GenerateQuestionsIn, GenerateQuestionsOut
from interviewgen.errors import GenerationError, InternalError

log = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health")
def health():
    return {"status": "ok"}


@router.post("/api/generateQuestions", response_model=GenerateQuestionsOut)
async def generate_questions_route(payload: GenerateQuestionsIn, request: Request):
    llm = request.app.state.llm
    timeout = request.app.state.settings.llm_timeout_seconds

    try:
        question_set = await generate_questions(llm, payload.role, timeout=timeout)
    except GenerationError:
        raise
    except Exception as e:
        raise InternalError(f"{type(e).__name__}: {e}") from e

    log.info("generated %d questions (role_len=%d)", len(question_set), len(payload.role))
    return GenerateQuestionsOut(questions=question_set.root)
