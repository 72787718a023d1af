"""
Simple Jinja2 template loader.

Loads .jinja2 templates from the templates directory (LLM system prompts,
default summary lines) and renders them, or inline template strings declared
next to a slot schema, with provided context variables.
"""

from functools import lru_cache
from pathlib import Path
from typing import Any, Mapping

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from .templates import Template

TEMPLATES_DIR = Path(__file__).parent / "templates"


def _validate_templates():
    """Validate all template constants have corresponding files. Fails fast at import."""
    for name in dir(Template):
        if not name.startswith("_"):
            template_name = getattr(Template, name)
            path = TEMPLATES_DIR / f"{template_name}.jinja2"
            if not path.exists():
                raise FileNotFoundError(f"Template missing: {path}")


_validate_templates()


def summary_value(value: Any) -> str:
    """
    Formats a collected value for display: 10.0 -> "10",
    nested trees -> "first John, last Smith".
    """
    if isinstance(value, Mapping):
        return ", ".join(f"{key} {summary_value(item)}" for key, item in value.items())
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


@lru_cache(maxsize=1)
def _get_environment() -> Environment:
    """Create and cache the Jinja2 environment."""
    env = Environment(
        loader=FileSystemLoader(TEMPLATES_DIR),
        autoescape=select_autoescape(default_for_string=False, default=False),
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["summary_value"] = summary_value
    return env


def render(template_name: str, **context) -> str:
    """
    Load and render a Jinja2 template.

    Args:
        template_name: Name of the template file (without .jinja2 extension)
        **context: Variables to pass to the template

    Returns:
        Rendered template string
    """
    env = _get_environment()
    template = env.get_template(f"{template_name}.jinja2")
    return template.render(**context)


def render_string(source: str, **context) -> str:
    """Render an inline template string with the shared environment and filters."""
    return _get_environment().from_string(source).render(**context)
