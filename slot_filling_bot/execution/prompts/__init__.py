from .loader import render, render_string, summary_value
from .templates import Template

__all__ = ["render", "render_string", "summary_value", "Template"]
