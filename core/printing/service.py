"""
Core PDF Render Service

Central service for rendering report templates to PDF.
"""

from pathlib import Path
from typing import BinaryIO, Optional, Union
import logging

from .config import PrintingConfig, get_printing_config
from .dto import PdfResult
from .interfaces import IPdfRenderer
from .resolver import TemplateResolver
from .weasyprint_renderer import WeasyPrintRenderer


logger = logging.getLogger(__name__)

DEFAULT_FILENAME = 'document.pdf'


class PdfRenderService:
    """
    Core service for PDF rendering pipeline.

    Responsibilities:
    1. Resolve a logical template name and render it to HTML
    2. Delegate PDF rendering to IPdfRenderer implementation
    3. Return structured PdfResult, optionally writing it to a file or stream

    A service holds no per-call state; construct it once and share it.

    Usage:
        service = PdfRenderService()
        result = service.render(
            'reporte-ventas',
            {'periodo': 'Enero 2024', ...},
            filename='reporte-ventas.pdf'
        )
    """

    def __init__(
        self,
        resolver: Optional[TemplateResolver] = None,
        renderer: Optional[IPdfRenderer] = None,
        *,
        base_url: Optional[str] = None,
        config: Optional[PrintingConfig] = None
    ):
        """
        Initialize the service.

        Args:
            resolver: Template resolver. If None, one is built from settings.
            renderer: PDF renderer implementation. If None, uses default WeasyPrint renderer.
            base_url: Default base location for relative assets. If None, uses
                the configured ASSET_BASE_URL.
            config: Printing configuration. If None, read from settings.
        """
        self.config = config or get_printing_config()
        self.resolver = resolver or self._get_default_resolver()
        self.renderer = renderer or self._get_default_renderer()
        self.base_url = base_url if base_url is not None else self.config.asset_base_url

    def render_html(self, template_name: str, context: dict) -> str:
        """
        Render a template to HTML without converting it to PDF.

        The configured `estilo` (font and page margins) is available to every
        template; a value supplied in `context` takes precedence.

        Raises:
            TemplateNotFoundError: If the template cannot be resolved
            ContextBindingError: If a referenced variable is missing
        """
        logger.debug(f"Rendering template: {template_name}")
        context = {'estilo': self.config.estilo(), **(context or {})}
        return self.resolver.render(template_name, context)

    def render(
        self,
        template_name: str,
        context: dict,
        *,
        base_url: Optional[str] = None,
        filename: Optional[str] = None
    ) -> PdfResult:
        """
        Render a template to PDF in memory.

        Args:
            template_name: Logical template name (e.g., 'reporte-ventas')
            context: Template context dictionary
            base_url: Base location for resolving assets (defaults to service base_url)
            filename: Optional filename for the PDF (defaults to 'document.pdf')

        Returns:
            PdfResult with PDF bytes and metadata

        Raises:
            PrintingError: If template rendering or PDF generation fails
        """
        return self._render(template_name, context, base_url, filename, target=None)

    def render_to_file(
        self,
        template_name: str,
        context: dict,
        path: Union[str, Path],
        *,
        base_url: Optional[str] = None
    ) -> PdfResult:
        """
        Render a template to PDF and write it to `path`.

        The file is only created once the PDF has been produced.

        Returns:
            PdfResult whose `path` is the written file
        """
        path = Path(path)
        return self._render(template_name, context, base_url, path.name, target=path)

    def render_to_stream(
        self,
        template_name: str,
        context: dict,
        stream: BinaryIO,
        *,
        base_url: Optional[str] = None,
        filename: Optional[str] = None
    ) -> PdfResult:
        """
        Render a template to PDF and write it to a writable binary stream.

        The stream is left open; it belongs to the caller.
        """
        return self._render(template_name, context, base_url, filename, target=stream)

    def _render(self, template_name, context, base_url, filename, target) -> PdfResult:
        base_url = base_url if base_url is not None else self.base_url
        try:
            # Step 1: Render HTML from template
            html = self.render_html(template_name, context)

            # Step 2: Convert HTML to PDF
            logger.debug(f"Converting HTML to PDF with base_url: {base_url}")
            if target is None:
                pdf_bytes = self.renderer.render_html_to_pdf(html, base_url)
            else:
                pdf_bytes = self.renderer.write_pdf(html, base_url, target)

            # Step 3: Create result
            result = PdfResult(
                pdf_bytes=pdf_bytes,
                filename=filename or DEFAULT_FILENAME,
                path=str(target) if isinstance(target, Path) else None,
            )

            logger.info(
                f"Successfully generated PDF: {result.filename} "
                f"({len(result.pdf_bytes)} bytes)"
            )

            return result

        except Exception as e:
            logger.error(
                f"Failed to render PDF for template {template_name}: {e}",
                exc_info=True
            )
            raise

    def _get_default_resolver(self) -> TemplateResolver:
        return TemplateResolver(
            self.config.template_dir,
            suffix=self.config.template_suffix,
            strict=self.config.strict_variables,
        )

    def _get_default_renderer(self) -> IPdfRenderer:
        """
        Get the default PDF renderer.

        Returns:
            Default IPdfRenderer implementation (WeasyPrint)
        """
        return WeasyPrintRenderer(
            stylesheets=list(self.config.stylesheets),
            strict_assets=self.config.strict_assets,
        )
