from pathlib import Path
from typing import Dict, Optional

from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template, TemplateNotFound
from markupsafe import Markup

RENDERING_CONTEXT_PATH = Path(__file__).parent
TEMPLATES_PATH = RENDERING_CONTEXT_PATH / "templates"
STYLESHEET_PATH = RENDERING_CONTEXT_PATH / "static" / "style.css"


class TemplateRegistry:
    """
    Registry for loading and caching Jinja2 templates for HTML generation.

    Section templates live in rsb/contexts/rendering/templates/sections/{name}.html.jinja,
    the page skeleton in templates/resume.html.jinja. Autoescaping is always on;
    the bundled stylesheet is the only value passed through as trusted markup.
    """

    def __init__(self, templates_path: Optional[Path] = None):
        """
        Initialize the template registry.

        Args:
            templates_path: Base path for templates. Defaults to the bundled templates.
        """
        if templates_path is None:
            templates_path = TEMPLATES_PATH

        self.templates_path = templates_path
        self._cache: Dict[str, Template] = {}

        self.env = Environment(
            loader=FileSystemLoader(str(templates_path)),
            # Catches silent failures
            undefined=StrictUndefined,
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def get_template(self, name: str) -> Template:
        """
        Get a section template by name, loading and caching it if necessary.

        Args:
            name: Section name (e.g., 'education')

        Returns:
            Jinja2 Template object

        Raises:
            TemplateNotFound: If template file doesn't exist
            TemplateSyntaxError: If template has Jinja2 syntax errors
        """
        if name in self._cache:
            return self._cache[name]

        template_path = f"sections/{name}.html.jinja"

        try:
            template = self.env.get_template(template_path)
        except TemplateNotFound as e:
            raise TemplateNotFound(
                f"Template not found for section '{name}' at {self.templates_path / template_path}"
            ) from e

        self._cache[name] = template
        return template

    def get_page_template(self) -> Template:
        """Get the page skeleton template."""
        return self.env.get_template("resume.html.jinja")

    def get_template_path(self, name: str) -> Path:
        """
        Get the file path for a section template.

        Args:
            name: Section name (e.g., 'education')

        Returns:
            Path to template file
        """
        return self.templates_path / "sections" / f"{name}.html.jinja"

    def clear_cache(self):
        """Clear the template cache."""
        self._cache.clear()

    def is_cached(self, name: str) -> bool:
        return name in self._cache


def load_stylesheet(path: Path = STYLESHEET_PATH) -> Markup:
    """
    Load the bundled stylesheet as trusted markup.

    This is static package data, never user input, so it is exempt from escaping.
    """
    return Markup(path.read_text(encoding="utf-8"))
