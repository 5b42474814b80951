"""envloader — geração de templates `.env` documentados."""

from .generator import render_template, write_template  # noqa: F401
