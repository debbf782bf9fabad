"""
Template Resolver

Resolves logical template names to HTML templates below a fixed root and
renders them with a bound context. Uses a dedicated Django template Engine so
report templates are independent from the project's TEMPLATES setting.
"""

import logging
import re
from pathlib import Path
from typing import Optional, Union

from django.template import (
    Context,
    Engine,
    TemplateDoesNotExist,
    TemplateSyntaxError,
    VariableDoesNotExist,
)

from .exceptions import ContextBindingError, RenderError, TemplateNotFoundError


logger = logging.getLogger(__name__)

# Logical names: path segments of letters, digits, '_' and '-' separated by '/'
TEMPLATE_NAME_PATTERN = re.compile(r'^[A-Za-z0-9_-]+(?:/[A-Za-z0-9_-]+)*$')

TEMPLATE_LIBRARIES = {
    'reportes': 'core.templatetags.reportes',
}


class _StrictUndefined(str):
    """
    Value for Engine.string_if_invalid that fails on missing variables.

    Django formats string_if_invalid with the name of the missing variable
    when it contains '%s'; the formatting step raises instead. Tag arguments
    such as {% if %} and {% for %} ignore failures and never reach it.
    """

    def __mod__(self, variable):
        raise ContextBindingError(
            f"Template variable '{variable}' is not defined in the context"
        )


STRICT_UNDEFINED = _StrictUndefined('%s')


class TemplateResolver:
    """
    Resolves and renders report templates.

    Usage:
        resolver = TemplateResolver('/srv/templates/pdf')
        html = resolver.render('reporte-ventas', {'periodo': 'Enero 2024', ...})
    """

    def __init__(
        self,
        template_dir: Union[str, Path],
        *,
        suffix: str = '.html',
        strict: bool = True
    ):
        """
        Initialize the resolver.

        Args:
            template_dir: Root directory holding the templates
            suffix: File suffix appended to logical names
            strict: If True, output expressions referencing missing
                variables raise ContextBindingError
        """
        self.template_dir = Path(template_dir)
        self.suffix = suffix
        self.strict = strict
        self.engine = Engine(
            dirs=[str(self.template_dir)],
            app_dirs=False,
            string_if_invalid=STRICT_UNDEFINED if strict else '',
            file_charset='utf-8',
            libraries=TEMPLATE_LIBRARIES,
        )

    def get_template_path(self, template_name: str) -> Path:
        """
        Map a logical name to its file below the template root.

        Raises:
            TemplateNotFoundError: If the name is invalid, escapes the root
                or no file exists for it
        """
        if not isinstance(template_name, str) or not TEMPLATE_NAME_PATTERN.match(template_name):
            raise TemplateNotFoundError(f"Invalid template name: {template_name!r}")

        root = self.template_dir.resolve()
        path = (root / f"{template_name}{self.suffix}").resolve()

        # Symlinks must not lead outside the template root either
        try:
            path.relative_to(root)
        except ValueError:
            raise TemplateNotFoundError(f"Template outside of template root: {template_name!r}")

        if not path.is_file():
            raise TemplateNotFoundError(f"Template not found: {template_name!r}")

        return path

    def exists(self, template_name: str) -> bool:
        """Check if a logical template name can be resolved"""
        try:
            self.get_template_path(template_name)
        except TemplateNotFoundError:
            return False
        return True

    def resolve(self, template_name: str):
        """
        Load and compile a template by logical name.

        Raises:
            TemplateNotFoundError: If the template cannot be found
            RenderError: If the template does not compile
        """
        self.get_template_path(template_name)
        try:
            return self.engine.get_template(f"{template_name}{self.suffix}")
        except TemplateDoesNotExist as e:
            raise TemplateNotFoundError(f"Template not found: {template_name!r}") from e
        except TemplateSyntaxError as e:
            raise RenderError(f"Template {template_name!r} could not be compiled: {e}") from e

    def render(self, template_name: str, context: Optional[dict] = None) -> str:
        """
        Render a template to an HTML string.

        Args:
            template_name: Logical template name (e.g. 'reporte-ventas')
            context: Template context

        Returns:
            Complete HTML document

        Raises:
            TemplateNotFoundError: If the template cannot be found
            ContextBindingError: If a referenced variable is missing
            RenderError: If the template does not compile
        """
        template = self.resolve(template_name)
        try:
            html = template.render(Context(dict(context or {})))
        except VariableDoesNotExist as e:
            raise ContextBindingError(
                f"Missing variable while rendering {template_name!r}: {e}"
            ) from e

        logger.debug(f"Rendered template {template_name!r} ({len(html)} characters)")
        return html
