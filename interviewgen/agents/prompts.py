# interviewgen/agents/prompts.py
from dataclasses import dataclass, field
from typing import Any, Dict

from interviewgen.agents.schemas import QUESTION_COUNT

JSON_MIME_TYPE = "application/json"

SYSTEM_INSTRUCTION = (
    "You are an expert interview question generator. "
    f"Generate {QUESTION_COUNT} interview questions for the role specified by the user. "
    "The questions must be divided exactly into 2 easy (20s), 2 medium (60s), and 2 hard (120s). "
    "Ensure the output strictly follows the provided JSON schema."
)

# Gemini's OpenAPI-subset dialect: upper-case type names, enum only on strings.
RESPONSE_SCHEMA: Dict[str, Any] = {
    "type": "ARRAY",
    "description": f"An array of exactly {QUESTION_COUNT} interview questions.",
    "minItems": QUESTION_COUNT,
    "maxItems": QUESTION_COUNT,
    "items": {
        "type": "OBJECT",
        "properties": {
            "id": {
                "type": "INTEGER",
                "description": f"A unique identifier for the question (1-{QUESTION_COUNT}).",
            },
            "text": {
                "type": "STRING",
                "description": "The actual interview question text.",
            },
            "difficulty": {
                "type": "STRING",
                "enum": ["easy", "medium", "hard"],
                "description": "The difficulty level, must be 'easy', 'medium', or 'hard'.",
            },
            "timer": {
                "type": "INTEGER",
                "description": "The allocated time in seconds (must be 20, 60, or 120).",
            },
        },
        "required": ["id", "text", "difficulty", "timer"],
        "propertyOrdering": ["id", "text", "difficulty", "timer"],
    },
}


@dataclass(frozen=True)
class GenerationRequest:
    system_instruction: str
    user_content: str
    response_schema: Dict[str, Any] = field(default_factory=lambda: RESPONSE_SCHEMA)
    response_mime_type: str = JSON_MIME_TYPE


def build_request(role: str) -> GenerationRequest:
    # The role goes in as user content, never into the system instruction.
    return GenerationRequest(
        system_instruction=SYSTEM_INSTRUCTION,
        user_content=f"Role: {role}",
    )


def to_json_schema(schema: Dict[str, Any]) -> Dict[str, Any]:
    """
    Convert the Gemini schema dialect into plain JSON Schema
    (lower-case types, no propertyOrdering) for OpenAI-style clients.
    """
    out: Dict[str, Any] = {}
    for key, value in schema.items():
        if key == "propertyOrdering":
            continue
        if key == "type" and isinstance(value, str):
            out[key] = value.lower()
        elif key == "properties":
            out[key] = {name: to_json_schema(sub) for name, sub in value.items()}
        elif key == "items":
            out[key] = to_json_schema(value)
        else:
            out[key] = value
    if out.get("type") == "object":
        out.setdefault("additionalProperties", False)
    return out
