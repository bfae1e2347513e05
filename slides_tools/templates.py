"""Loader for the HTML pages served by the presentation picker."""
from pathlib import Path
from typing import Any, List

from jinja2 import Environment, FileSystemLoader, StrictUndefined, meta, select_autoescape

TEMPLATE_DIR = Path(__file__).parent / "templates"

_env = Environment(
    loader=FileSystemLoader(str(TEMPLATE_DIR)),
    autoescape=select_autoescape(["html"]),
    undefined=StrictUndefined,
)


def get_template(name: str = "picker"):
    """
    Load an HTML template by name.

    Args:
        name: Template name without the ``.html`` suffix

    Returns:
        A compiled ``jinja2.Template``

    Raises:
        FileNotFoundError: If the template doesn't exist
        ValueError: If the name is invalid
    """
    # Validate name (prevents path traversal)
    if not name.replace("_", "").replace("-", "").isalnum():
        raise ValueError(f"Invalid template name: {name}")

    if not (TEMPLATE_DIR / f"{name}.html").is_file():
        raise FileNotFoundError(
            f"Template '{name}' not found. Available templates: {list_available_templates()}"
        )
    return _env.get_template(f"{name}.html")


def render_template(name: str, **context: Any) -> str:
    """
    Render template *name* with *context*.

    Raises:
        ValueError: If a variable the template uses is missing from *context*
    """
    template = get_template(name)
    source, _, _ = _env.loader.get_source(_env, f"{name}.html")
    missing = meta.find_undeclared_variables(_env.parse(source)) - set(context)
    if missing:
        raise ValueError(f"Missing values for template '{name}': {sorted(missing)}")
    return template.render(**context)


def list_available_templates() -> List[str]:
    """List the names of all packaged templates."""
    if not TEMPLATE_DIR.exists():
        return []
    return sorted(f.stem for f in TEMPLATE_DIR.glob("*.html") if f.is_file())


def validate_template(name: str) -> bool:
    """Check whether a template exists."""
    try:
        get_template(name)
        return True
    except (FileNotFoundError, ValueError):
        return False
