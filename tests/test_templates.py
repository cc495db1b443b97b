"""Tests for template listing and HTML rendering."""

import pytest

from resume_generator.errors import NotFoundError, RenderError
from resume_generator.models.content import RenderExperience, RenderRecord
from resume_generator.models.profile import Education
from resume_generator.templates.loader import (
    display_name,
    list_templates,
    resolve_template,
)
from resume_generator.templates.renderer import render_to_html, save_html


@pytest.fixture
def record() -> RenderRecord:
    return RenderRecord(
        name="Jane Doe",
        title="Backend Engineer",
        email="jane@example.com",
        summary="Builds <strong>payment</strong> systems",
        skills={"Backend": ["Python", "Go"]},
        experience=[
            RenderExperience(
                title="Senior Engineer",
                company="Northwind & Co",
                start_date="2021-03",
                end_date="present",
                details=["Cut latency by ~40%"],
            )
        ],
        education=[Education(degree="BSc", school="UT", start_year="2013", end_year="2017")],
    )


class TestLoader:
    def test_display_names(self):
        assert display_name("Resume") == "Classic (Default)"
        assert display_name("Resume-Tech-Teal") == "Tech Teal"

    def test_bundled_templates_default_first(self):
        templates = list_templates()
        assert templates[0].id == "Resume"
        assert {t.id for t in templates} >= {"Resume", "Resume-Tech-Teal"}

    def test_sorted_by_display_name(self, tmp_path):
        for name in ("Resume-Zeta", "Resume", "Resume-Alpha-Blue"):
            (tmp_path / f"{name}.html").write_text("<p>{{ name }}</p>")
        (tmp_path / "notes.txt").write_text("ignored")
        assert [t.name for t in list_templates(tmp_path)] == [
            "Classic (Default)",
            "Alpha Blue",
            "Zeta",
        ]

    def test_resolve_default(self):
        assert resolve_template(None).name == "Resume.html"

    def test_resolve_unknown_raises(self):
        with pytest.raises(NotFoundError) as excinfo:
            resolve_template("Nope")
        assert excinfo.value.resource == "template"

    def test_resolve_rejects_path_traversal(self, tmp_path):
        with pytest.raises(NotFoundError):
            resolve_template("../Resume", tmp_path)


class TestRenderer:
    @pytest.mark.parametrize("template_id", ["Resume", "Resume-Tech-Teal"])
    def test_bundled_templates_render(self, record, template_id):
        html = render_to_html(record, resolve_template(template_id))
        assert "Jane Doe" in html
        assert "Python, Go" in html
        assert "Cut latency by ~40%" in html
        assert "<strong>payment</strong>" in html
        # structural fields are escaped
        assert "Northwind &amp; Co" in html

    def test_broken_template_raises_render_error(self, tmp_path, record):
        path = tmp_path / "Broken.html"
        path.write_text("{% for x in %}")
        with pytest.raises(RenderError):
            render_to_html(record, path)

    def test_save_html(self, tmp_path):
        path = save_html("<p>hi</p>", str(tmp_path / "out" / "r.html"))
        assert path.read_text() == "<p>hi</p>"
