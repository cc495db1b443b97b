"""PDF export module for resume-generator."""
from resume_generator.export.pdf_renderer import render_pdf

__all__ = ["render_pdf"]
