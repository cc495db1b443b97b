"""Error taxonomy for resume generation.

Caller-input faults (``ValidationError``, ``NotFoundError``) are raised before
any model work begins. Everything that can go wrong after that derives from
``PipelineError``, so callers can catch the whole category at once while still
branching on ``kind`` when they need to.
"""

from __future__ import annotations


class ResumeGenerationError(Exception):
    """Base class for all errors raised by this package."""

    kind = "error"


class ValidationError(ResumeGenerationError):
    """A mandatory request field is missing or blank."""

    kind = "validation"

    def __init__(self, field: str, message: str | None = None):
        self.field = field
        super().__init__(message or f"{field} is required")


class NotFoundError(ResumeGenerationError):
    """A referenced profile or template does not exist."""

    kind = "not_found"

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f'{resource.capitalize()} "{identifier}" not found')


class PipelineError(ResumeGenerationError):
    """Generation failed after the request was accepted."""

    kind = "generation_failed"
    category = "generation_failed"


class RefusalError(PipelineError):
    kind = "refusal"

    def __init__(self, excerpt: str):
        self.excerpt = excerpt
        super().__init__(
            "Model refused to generate resume content. The prompt may be too complex; "
            "try again with a shorter job description."
        )


class FormatError(PipelineError):
    """The model reply could not be turned into a JSON object."""

    kind = "format"

    def __init__(
        self,
        message: str,
        *,
        diagnostic: str | None = None,
        excerpt: str = "",
        attempted_passes: tuple[str, ...] = (),
    ):
        self.diagnostic = diagnostic
        self.excerpt = excerpt
        self.attempted_passes = attempted_passes
        super().__init__(message)


class SchemaError(PipelineError):
    kind = "schema"

    def __init__(self, missing: list[str]):
        self.missing = list(missing)
        super().__init__(
            f"Model response missing required fields: {', '.join(self.missing)}"
        )


class GenerationTimeoutError(PipelineError, TimeoutError):
    kind = "timeout"


class ProviderError(PipelineError):
    kind = "provider"


class RenderError(PipelineError):
    kind = "render"
