## Error taxonomy shared by the generator and the HTTP front

GENERIC_FAILURE = "Failed to generate questions. Check server logs."


class GenerationError(RuntimeError):
    """Base for every failure the HTTP front knows how to report.

    `kind` names the failure class in logs; `public_message` is the only
    text a client ever sees.
    """

    kind = "Internal"
    public_message = GENERIC_FAILURE

    def __init__(self, detail: str = "", *, public_message: str | None = None):
        super().__init__(detail or self.kind)
        if public_message is not None:
            self.public_message = public_message


class BadRequest(GenerationError):
    kind = "BadRequest"
    public_message = "Invalid request body"


class UpstreamTransport(GenerationError):
    kind = "UpstreamTransport"


class UpstreamTimeout(GenerationError):
    kind = "UpstreamTimeout"


class UpstreamShape(GenerationError):
    """Upstream replied, but not with a valid question set."""

    kind = "UpstreamShape"


class InternalError(GenerationError):
    kind = "Internal"
