"""
Rendering Registries

Loads and caches the Jinja2 templates that produce each section's markup.
"""

import os
from pathlib import Path
from typing import Any, Dict

from dotenv import load_dotenv
from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template, TemplateNotFound

load_dotenv()
DEFAULT_TEMPLATES_PATH = Path(__file__).parent / "template"
TEMPLATES_PATH = Path(os.getenv("FOLIO_TEMPLATES_PATH", str(DEFAULT_TEMPLATES_PATH)))


class TemplateRegistry:
    """
    Registry for loading and caching Jinja2 templates for section markup.

    Templates are stored in folio/contexts/rendering/template/{name}.html.jinja.
    Autoescaping is always on: every value from the profile document is treated
    as untrusted text.
    """

    def __init__(self, templates_path: Path = None):
        """
        Initialize the template registry.

        Args:
            templates_path: Directory holding the templates. Defaults to
                           FOLIO_TEMPLATES_PATH from environment
        """
        if templates_path is None:
            templates_path = TEMPLATES_PATH

        self.templates_path = templates_path
        self._cache: Dict[str, Template] = {}

        self.env = Environment(
            loader=FileSystemLoader(str(templates_path)),
            autoescape=True,
            # Catches silent failures
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def get_template(self, name: str) -> Template:
        """
        Get a template by name, loading and caching it if necessary.

        Args:
            name: Template name (e.g., 'skills')

        Returns:
            Jinja2 Template object

        Raises:
            TemplateNotFound: If template file doesn't exist
            TemplateSyntaxError: If template has Jinja2 syntax errors
        """
        if name in self._cache:
            return self._cache[name]

        template_file = f"{name}.html.jinja"

        try:
            template = self.env.get_template(template_file)
        except TemplateNotFound as e:
            raise TemplateNotFound(
                f"Template not found for '{name}' at {self.templates_path / template_file}"
            ) from e

        self._cache[name] = template
        return template

    def render(self, name: str, **values: Any) -> str:
        """Render a template by name."""
        return self.get_template(name).render(**values)

    def get_template_path(self, name: str) -> Path:
        return self.templates_path / f"{name}.html.jinja"

    def clear_cache(self):
        """Clear the template cache."""
        self._cache.clear()

    def is_cached(self, name: str) -> bool:
        return name in self._cache
