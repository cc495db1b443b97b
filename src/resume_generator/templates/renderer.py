from pathlib import Path

from jinja2 import Environment, FileSystemLoader, TemplateError

from resume_generator.errors import RenderError
from resume_generator.models.content import RenderRecord


def render_to_html(record: RenderRecord, template_path: Path) -> str:
    """Bind a render record into an HTML template."""
    template_path = Path(template_path)
    env = Environment(
        loader=FileSystemLoader(str(template_path.parent)),
        autoescape=True,
    )
    try:
        template = env.get_template(template_path.name)
        return template.render(**record.model_dump())
    except TemplateError as exc:
        raise RenderError(f"Template rendering failed: {exc}") from exc


def save_html(html_content: str, output_path: str) -> Path:
    """Save HTML content to file."""
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(html_content, encoding="utf-8")
    return path
