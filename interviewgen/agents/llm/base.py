## Base LLM Client Interface
from abc import ABC, abstractmethod
from typing import Type, TypeVar

from pydantic import BaseModel, ValidationError

from interviewgen.agents.prompts import GenerationRequest
from interviewgen.errors import UpstreamShape

M = TypeVar("M", bound=BaseModel)


class LLMClient(ABC):
    """
    One instance is created at startup and shared by every request, so
    implementations must be safe to await concurrently.
    """

    @abstractmethod
    async def generate_text(self, request: GenerationRequest) -> str:
        raise NotImplementedError

    async def generate_structured(self, schema: Type[M], request: GenerationRequest) -> M:
        """
        Default strategy: ask the model for JSON under the request's schema,
        then validate with Pydantic.
        """
        text = await self.generate_text(request)
        try:
            return schema.model_validate_json(text)
        except ValidationError as e:
            raise UpstreamShape(f"response failed validation: {e}") from e

    async def aclose(self) -> None:
        return None
