"""Tailored resume generation."""
