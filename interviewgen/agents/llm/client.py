from interviewgen.agents.llm.base import LLMClient
from interviewgen.agents.llm.gemini import GeminiRestClient
from interviewgen.agents.llm.openai_compat import OpenAICompatClient
from interviewgen.settings import Settings


def get_llm_client(settings: Settings) -> LLMClient:
    provider = settings.LLM_PROVIDER.lower().strip()

    if provider == "gemini":
        return GeminiRestClient(
            api_key=settings.gemini_api_key,
            base_url=settings.gemini_base_url,
            model=settings.gemini_model,
            timeout=settings.llm_timeout_seconds,
        )

    if provider == "openai":
        return OpenAICompatClient(
            api_key=settings.gemini_api_key,
            base_url=settings.gemini_openai_base_url,
            model=settings.gemini_model,
            timeout=settings.llm_timeout_seconds,
        )

    raise ValueError(f"Unknown LLM provider: {settings.LLM_PROVIDER}")
