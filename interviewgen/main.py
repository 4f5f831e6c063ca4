## Main application entry point
import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from interviewgen.agents.llm.base import LLMClient
from interviewgen.agents.llm.client import get_llm_client
from interviewgen.errors import BadRequest, GenerationError, InternalError
from interviewgen.generation.routes import router as generation_router
from interviewgen.logging_config import configure_logging, redact
from interviewgen.settings import Settings, get_settings

log = logging.getLogger("interviewgen")

# The only place error kinds become status codes
STATUS_BY_KIND = {
    "BadRequest": 400,
    "UpstreamTransport": 502,
    "UpstreamTimeout": 502,
    "UpstreamShape": 502,
    "Internal": 500,
}


def _bad_request_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return BadRequest.public_message

    err = errors[0]
    loc = tuple(err.get("loc", ()))
    kind = err.get("type", "")

    if kind == "json_invalid":
        return "Malformed JSON body"
    if kind == "missing":
        return "role is required"
    if kind == "string_type" and loc[-1:] == ("role",):
        return "role must be a string"
    if kind == "value_error":
        # pydantic prefixes custom messages with "Value error, "
        return str(err.get("msg", "")).removeprefix("Value error, ")
    return BadRequest.public_message


def _error_response(
    request: Request,
    exc: GenerationError,
    *,
    status: int | None = None,
    headers: dict | None = None,
) -> JSONResponse:
    if status is None:
        status = STATUS_BY_KIND.get(exc.kind, 500)
    settings: Settings = request.app.state.settings
    cause = redact(str(exc), [settings.gemini_api_key])
    if exc.__cause__ is not None:
        cause = f"{cause} <- {redact(repr(exc.__cause__), [settings.gemini_api_key])}"

    log.warning(
        "generation failed kind=%s status=%d path=%s cause=%s",
        exc.kind,
        status,
        request.url.path,
        cause,
    )
    return JSONResponse({"error": exc.public_message}, status_code=status, headers=headers)


def create_app(settings: Settings | None = None, llm_client: LLMClient | None = None) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owned = getattr(app.state, "llm", None) is None
        if owned:
            app.state.llm = get_llm_client(settings)
        log.info("Backend running on port %d", settings.port)
        try:
            yield
        finally:
            if owned:
                await app.state.llm.aclose()

    app = FastAPI(title="Interview Question Generator", lifespan=lifespan)
    app.state.settings = settings
    if llm_client is not None:
        app.state.llm = llm_client

    # Permissive CORS for a development backend; no cookies expected
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        detail = "; ".join(
            f"{err.get('type')}@{'.'.join(map(str, err.get('loc', ())))}" for err in exc.errors()
        )
        return _error_response(request, BadRequest(detail, public_message=_bad_request_message(exc)))

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        # routing errors (404, 405) and anything raised as HTTPException
        err_cls = BadRequest if exc.status_code < 500 else InternalError
        wrapped = err_cls(f"HTTP {exc.status_code}: {exc.detail}", public_message=str(exc.detail))
        return _error_response(request, wrapped, status=exc.status_code, headers=getattr(exc, "headers", None))

    @app.exception_handler(GenerationError)
    async def generation_error_handler(request: Request, exc: GenerationError):
        return _error_response(request, exc)

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        wrapped = InternalError(f"{type(exc).__name__}: {exc}")
        wrapped.__cause__ = exc
        return _error_response(request, wrapped)

    app.include_router(generation_router)
    return app


def run() -> None:
    import uvicorn

    try:
        settings = get_settings()
    except ValidationError as e:
        missing = ", ".join(str(err["loc"][0]).upper() for err in e.errors())
        print(f"Configuration error: missing or invalid {missing}. Set it in the environment or .env.", file=sys.stderr)
        sys.exit(1)

    configure_logging(settings.log_level)
    app = create_app(settings)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
