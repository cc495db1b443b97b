"""Main pipeline orchestrator - one generation request from profile to PDF."""

from __future__ import annotations

import logging
import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from pathlib import Path

from resume_generator.clients.llm_client import LLMClient, ModelResult
from resume_generator.config import AppConfig, RenderConfig
from resume_generator.errors import PipelineError, ValidationError
from resume_generator.export.pdf_renderer import render_pdf
from resume_generator.logging.cost_calculator import usage_summary
from resume_generator.models.content import GeneratedContent, RenderRecord
from resume_generator.models.profile import Profile
from resume_generator.models.request import GenerationRequest
from resume_generator.pipeline.content_assembler import assemble_record
from resume_generator.pipeline.prompt_builder import (
    DEFAULT_SCOPE,
    REDUCED_SCOPE,
    build_prompt,
    years_of_experience,
)
from resume_generator.pipeline.response_normalizer import ResponseNormalizer
from resume_generator.pipeline.schema_validator import validate_content
from resume_generator.profiles.store import ProfileStore
from resume_generator.templates.loader import resolve_template
from resume_generator.templates.renderer import render_to_html
from resume_generator.utils.filenames import build_filename

logger = logging.getLogger(__name__)

PdfExporter = Callable[[str, RenderConfig], Awaitable[bytes]]


@dataclass
class DraftResult:
    """Pipeline output up to the render-ready record."""

    profile: Profile
    template_path: Path
    record: RenderRecord
    results: list[ModelResult] = field(default_factory=list)


@dataclass
class GenerationResult:
    """Complete result of one generation request."""

    pdf: bytes
    filename: str
    html: str
    record: RenderRecord
    elapsed_seconds: float = 0.0
    usage: dict = field(default_factory=dict)


class ResumeGenerator:
    """Runs the generation pipeline for one request at a time.

    Instances hold only read-only configuration and collaborators, so one
    generator can serve concurrent requests.
    """

    def __init__(
        self,
        config: AppConfig,
        llm: LLMClient,
        profiles: ProfileStore | None = None,
        *,
        pdf_exporter: PdfExporter = render_pdf,
    ):
        self.config = config
        self.llm = llm
        self.profiles = profiles or ProfileStore(config.storage.resolved_profiles_dir)
        self.templates_dir = config.storage.resolved_templates_dir
        self.normalizer = ResponseNormalizer(llm)
        self.export_pdf = pdf_exporter

    def prepare(self, request: GenerationRequest) -> tuple[Profile, Path]:
        """Check the request and resolve its profile and template.

        Raises ValidationError or NotFoundError; never calls the model.
        """
        missing = request.missing_fields()
        if missing:
            raise ValidationError(missing[0])
        profile = self.profiles.load(request.profile)
        template_path = resolve_template(
            request.template or self.config.pipeline.default_template,
            self.templates_dir,
        )
        return profile, template_path

    async def build_record(self, request: GenerationRequest) -> DraftResult:
        """Run everything up to the render-ready record."""
        profile, template_path = self.prepare(request)

        years = years_of_experience(profile.experience)
        prompt = build_prompt(profile, request.jd, years, DEFAULT_SCOPE)
        reduced_prompt = build_prompt(profile, request.jd, years, REDUCED_SCOPE)

        try:
            first = await self.llm.invoke(prompt)
            normalized = await self.normalizer.normalize(first, reduced_prompt)
            data = validate_content(normalized.data)
        except PipelineError as exc:
            logger.error("Generation failed for profile %s (%s): %s", request.profile, exc.kind, exc)
            raise

        content = GeneratedContent.from_payload(data)
        logger.info(
            "AI content generated: %d skill categories, %d experience entries",
            len(content.skills),
            len(content.experience),
        )
        record = assemble_record(profile, content, self.config.pipeline.generic_title)
        return DraftResult(
            profile=profile,
            template_path=template_path,
            record=record,
            results=normalized.results,
        )

    async def generate(self, request: GenerationRequest) -> GenerationResult:
        """Generate the tailored resume PDF and its download filename."""
        start = time.monotonic()
        draft = await self.build_record(request)

        logger.info("Using template: %s", draft.template_path.name)
        html = render_to_html(draft.record, draft.template_path)
        pdf = await self.export_pdf(html, self.config.render)

        filename = build_filename(draft.profile.name, request.company_name, request.role_name)
        elapsed = time.monotonic() - start
        logger.info("Generated %s in %.1fs", filename, elapsed)
        return GenerationResult(
            pdf=pdf,
            filename=filename,
            html=html,
            record=draft.record,
            elapsed_seconds=elapsed,
            usage=usage_summary(draft.results),
        )
