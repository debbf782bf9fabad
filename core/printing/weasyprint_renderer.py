"""
WeasyPrint Renderer Implementation

Adapter for rendering HTML to PDF using WeasyPrint engine.
"""

from typing import Optional
import logging

try:
    from weasyprint import HTML, CSS
    from weasyprint.urls import default_url_fetcher
    WEASYPRINT_AVAILABLE = True
except (ImportError, OSError):
    WEASYPRINT_AVAILABLE = False

from .exceptions import RenderError
from .interfaces import IPdfRenderer


logger = logging.getLogger(__name__)


class WeasyPrintRenderer(IPdfRenderer):
    """
    PDF renderer using WeasyPrint engine.

    Supports:
    - Static assets via base_url
    - Print CSS with paged media (@page size/orientation from the template)
    - Additional stylesheets applied to every document
    - Strict asset mode: unreadable images/stylesheets fail the render
    """

    def __init__(self, stylesheets: Optional[list] = None, *, strict_assets: bool = True):
        """
        Initialize the renderer.

        Args:
            stylesheets: Optional list of CSS file paths to include
            strict_assets: If True, any referenced asset that cannot be
                fetched raises RenderError instead of being left out
        """
        if not WEASYPRINT_AVAILABLE:
            raise ImportError(
                "WeasyPrint is not installed. "
                "Install it with: pip install weasyprint"
            )

        self.stylesheets = list(stylesheets or [])
        self.strict_assets = strict_assets

    def render_html_to_pdf(self, html: str, base_url: str) -> bytes:
        """
        Render HTML to PDF using WeasyPrint.

        Args:
            html: HTML string to render
            base_url: Base location for resolving relative URLs (e.g., for images, CSS)

        Returns:
            PDF content as bytes

        Raises:
            RenderError: If rendering fails or an asset cannot be fetched
        """
        # Per-call state: the renderer itself stays shareable between threads
        failed_urls = []

        def url_fetcher(url, *args, **kwargs):
            try:
                return default_url_fetcher(url, *args, **kwargs)
            except Exception as e:
                failed_urls.append(url)
                logger.warning(f"Failed to fetch asset {url}: {e}")
                raise

        try:
            # Create HTML document
            html_doc = HTML(string=html, base_url=base_url or None, url_fetcher=url_fetcher)

            # Prepare stylesheets
            css_list = [CSS(filename=css, url_fetcher=url_fetcher) for css in self.stylesheets]

            # Render to PDF
            pdf_bytes = html_doc.write_pdf(stylesheets=css_list)

        except Exception as e:
            logger.error(f"Failed to render PDF: {e}", exc_info=True)
            raise RenderError(f"Failed to render PDF: {e}") from e

        if failed_urls and self.strict_assets:
            raise RenderError(
                f"Referenced assets could not be loaded: {', '.join(failed_urls)}"
            )

        logger.info(f"Successfully rendered PDF: {len(pdf_bytes)} bytes")
        return pdf_bytes
