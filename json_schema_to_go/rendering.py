"""
Jinja2 environment and template loading for generated Go code.
"""

from pathlib import Path

import jinja2

from .utils import camel_case

CURRENT_DIR = Path(__file__).parent.resolve().absolute()
TEMPLATES_DIR = CURRENT_DIR / "templates" / "go"


def create_environment() -> jinja2.Environment:
    env = jinja2.Environment(lstrip_blocks=True, trim_blocks=True, keep_trailing_newline=True)
    env.filters["camel_case"] = camel_case
    return env


def load_template(env: jinja2.Environment, name: str) -> jinja2.Template:
    """Load `templates/go/<name>.go.jinja2`."""
    with open(TEMPLATES_DIR / f"{name}.go.jinja2", encoding="utf-8") as f:
        return env.from_string(f.read())
