"""Application configuration loaded from config.yaml."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

DEFAULT_MODEL = "claude-3-5-sonnet-20241022"
BUNDLED_TEMPLATES_DIR = Path(__file__).parent / "templates" / "html"


@dataclass(frozen=True)
class LLMConfig:
    model: str = DEFAULT_MODEL
    api_key: str | None = None
    max_tokens: int = 8000
    temperature: float = 0.7
    max_retries: int = 2
    timeout: float = 120

    def __post_init__(self) -> None:
        if not 1 <= self.max_retries <= 10:
            raise ValueError(f"max_retries must be between 1 and 10, got {self.max_retries}")
        if self.timeout < 1:
            raise ValueError(f"timeout must be at least 1 second, got {self.timeout}")
        if self.max_tokens < 1:
            raise ValueError(f"max_tokens must be positive, got {self.max_tokens}")
        if not 0.0 <= self.temperature <= 1.0:
            raise ValueError(f"temperature must be between 0 and 1, got {self.temperature}")


@dataclass(frozen=True)
class PipelineConfig:
    default_template: str = "Resume"
    generic_title: str = "Engineer"

    def __post_init__(self) -> None:
        if not self.default_template.strip():
            raise ValueError("default_template must not be empty")


@dataclass(frozen=True)
class StorageConfig:
    profiles_dir: str = "./resumes"
    templates_dir: str | None = None

    @property
    def resolved_profiles_dir(self) -> Path:
        return Path(self.profiles_dir).expanduser()

    @property
    def resolved_templates_dir(self) -> Path:
        if self.templates_dir is None:
            return BUNDLED_TEMPLATES_DIR
        return Path(self.templates_dir).expanduser()


@dataclass(frozen=True)
class RenderConfig:
    page_format: str = "A4"
    print_background: bool = True
    margin_top: str = "15mm"
    margin_bottom: str = "15mm"
    margin_left: str = "0mm"
    margin_right: str = "0mm"

    @property
    def margins(self) -> dict[str, str]:
        return {
            "top": self.margin_top,
            "bottom": self.margin_bottom,
            "left": self.margin_left,
            "right": self.margin_right,
        }


@dataclass(frozen=True)
class AppConfig:
    llm: LLMConfig = field(default_factory=LLMConfig)
    pipeline: PipelineConfig = field(default_factory=PipelineConfig)
    storage: StorageConfig = field(default_factory=StorageConfig)
    render: RenderConfig = field(default_factory=RenderConfig)


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load config from YAML file, falling back to defaults."""
    if path is None:
        # Look for config.yaml relative to the project root
        candidates = [
            Path.cwd() / "config.yaml",
            Path(__file__).resolve().parent.parent.parent / "config.yaml",
        ]
        for c in candidates:
            if c.exists():
                path = c
                break

    raw: dict = {}
    if path is not None:
        p = Path(path)
        if p.exists():
            raw = yaml.safe_load(p.read_text()) or {}

    llm_raw = dict(raw.get("llm") or {})
    env_model = os.environ.get("ANTHROPIC_MODEL")
    if env_model:
        llm_raw["model"] = env_model

    return AppConfig(
        llm=LLMConfig(**llm_raw),
        pipeline=PipelineConfig(**(raw.get("pipeline") or {})),
        storage=StorageConfig(**(raw.get("storage") or {})),
        render=RenderConfig(**(raw.get("render") or {})),
    )
