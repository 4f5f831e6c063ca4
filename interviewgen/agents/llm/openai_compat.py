import httpx
import openai
from openai import AsyncOpenAI

from interviewgen.agents.llm.base import LLMClient
from interviewgen.agents.prompts import GenerationRequest, to_json_schema
from interviewgen.errors import UpstreamShape, UpstreamTimeout, UpstreamTransport


class OpenAICompatClient(LLMClient):
    """Talks to Gemini through its OpenAI-compatible chat completions endpoint."""

    def __init__(
        self,
        *,
        api_key: str,
        base_url: str,
        model: str,
        timeout: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        # max_retries=0: a failed call surfaces immediately
        self.client = AsyncOpenAI(
            api_key=api_key,
            base_url=base_url,
            timeout=timeout,
            max_retries=0,
            http_client=http_client,
        )
        self.model = model

    async def generate_text(self, request: GenerationRequest) -> str:
        try:
            resp = await self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": request.system_instruction},
                    {"role": "user", "content": request.user_content},
                ],
                response_format={
                    "type": "json_schema",
                    "json_schema": {
                        "name": "question_set",
                        "schema": to_json_schema(request.response_schema),
                    },
                },
            )
        except openai.APITimeoutError as e:
            raise UpstreamTimeout(f"{type(e).__name__}: {e}") from e
        except openai.APIError as e:
            raise UpstreamTransport(f"{type(e).__name__}: {e}") from e

        if not resp.choices:
            raise UpstreamShape("upstream returned no choices")
        content = resp.choices[0].message.content or ""
        if not content.strip():
            raise UpstreamShape("upstream returned empty content")
        return content.strip()

    async def aclose(self) -> None:
        await self.client.close()
