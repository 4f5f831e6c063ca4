import logging

import httpx

from interviewgen.agents.llm.base import LLMClient
from interviewgen.agents.prompts import GenerationRequest
from interviewgen.errors import UpstreamShape, UpstreamTimeout, UpstreamTransport

log = logging.getLogger(__name__)


class GeminiRestClient(LLMClient):
    def __init__(
        self,
        *,
        api_key: str,
        base_url: str,
        model: str,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.model = model
        # httpx.AsyncClient pools connections and is safe to share across tasks
        self.client = httpx.AsyncClient(
            timeout=timeout,
            transport=transport,
            headers={
                "Content-Type": "application/json",
                "x-goog-api-key": api_key,
            },
        )

    def build_payload(self, request: GenerationRequest) -> dict:
        return {
            "systemInstruction": {"parts": [{"text": request.system_instruction}]},
            "contents": [{"role": "user", "parts": [{"text": request.user_content}]}],
            "generationConfig": {
                "responseMimeType": request.response_mime_type,
                "responseSchema": request.response_schema,
            },
        }

    async def generate_text(self, request: GenerationRequest) -> str:
        url = f"{self.base_url}/models/{self.model}:generateContent"

        try:
            r = await self.client.post(url, json=self.build_payload(request))
            r.raise_for_status()
        except httpx.TimeoutException as e:
            raise UpstreamTimeout(f"{type(e).__name__}: {e}") from e
        except httpx.HTTPStatusError as e:
            raise UpstreamTransport(
                f"upstream returned HTTP {e.response.status_code}: {e.response.text[:500]}"
            ) from e
        except httpx.HTTPError as e:
            raise UpstreamTransport(f"{type(e).__name__}: {e}") from e

        try:
            data = r.json()
        except ValueError as e:
            raise UpstreamShape("upstream envelope is not JSON") from e

        return self._extract_text(data)

    @staticmethod
    def _extract_text(data: dict) -> str:
        if not isinstance(data, dict):
            raise UpstreamShape("upstream envelope is not an object")

        candidates = data.get("candidates") or []
        if not isinstance(candidates, list):
            raise UpstreamShape("malformed upstream envelope: candidates is not a list")
        if not candidates:
            feedback = data.get("promptFeedback")
            reason = feedback.get("blockReason", "no candidates") if isinstance(feedback, dict) else "no candidates"
            raise UpstreamShape(f"upstream returned no candidates ({reason})")

        first = candidates[0]
        if not isinstance(first, dict):
            raise UpstreamShape("malformed upstream envelope: candidate is not an object")
        content = first.get("content") or {}
        parts = content.get("parts") if isinstance(content, dict) else None
        if not isinstance(parts, list):
            parts = []
        text = "".join(
            p["text"] for p in parts if isinstance(p, dict) and isinstance(p.get("text"), str)
        )
        if not text.strip():
            reason = first.get("finishReason", "unknown")
            raise UpstreamShape(f"upstream candidate has no text (finishReason={reason})")

        log.debug("upstream returned %d characters", len(text))
        return text

    async def aclose(self) -> None:
        await self.client.aclose()
