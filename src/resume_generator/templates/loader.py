from pathlib import Path

from pydantic import BaseModel

from resume_generator.config import BUNDLED_TEMPLATES_DIR
from resume_generator.errors import NotFoundError

DEFAULT_TEMPLATE = "Resume"
TEMPLATE_SUFFIX = ".html"


class TemplateInfo(BaseModel):
    id: str
    name: str
    file: str


def display_name(template_id: str) -> str:
    """Human-readable template name, e.g. Resume-Tech-Teal -> Tech Teal."""
    if template_id == DEFAULT_TEMPLATE:
        return "Classic (Default)"
    return template_id.replace("Resume-", "", 1).replace("-", " ")


def list_templates(templates_dir: Path = BUNDLED_TEMPLATES_DIR) -> list[TemplateInfo]:
    """List available templates, default first, the rest by display name."""
    templates = [
        TemplateInfo(id=p.stem, name=display_name(p.stem), file=p.name)
        for p in Path(templates_dir).glob(f"*{TEMPLATE_SUFFIX}")
    ]
    return sorted(templates, key=lambda t: (t.id != DEFAULT_TEMPLATE, t.name.lower()))


def resolve_template(name: str | None, templates_dir: Path = BUNDLED_TEMPLATES_DIR) -> Path:
    """Return the path of a template by name, defaulting to the classic template."""
    name = name or DEFAULT_TEMPLATE
    if Path(name).name != name or name.startswith("."):
        raise NotFoundError("template", name)
    path = Path(templates_dir) / f"{name}{TEMPLATE_SUFFIX}"
    if not path.is_file():
        raise NotFoundError("template", name)
    return path
