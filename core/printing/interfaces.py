"""
Interfaces for the Printing Framework

Defines core interfaces that can be implemented by different rendering engines
and context builders.
"""

import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, BinaryIO, Union


class IPdfRenderer(ABC):
    """
    Interface for PDF rendering engines.

    Implementations convert HTML to PDF bytes using their specific engine.
    """

    @abstractmethod
    def render_html_to_pdf(self, html: str, base_url: str) -> bytes:
        """
        Render HTML to PDF.

        Args:
            html: HTML string to render
            base_url: Base location for resolving relative URLs (images, CSS)

        Returns:
            PDF content as bytes

        Raises:
            RenderError: If rendering fails
        """
        pass

    def write_pdf(
        self,
        html: str,
        base_url: str,
        target: Union[str, Path, BinaryIO]
    ) -> bytes:
        """
        Render HTML to PDF and write it to a file path or binary stream.

        The PDF is fully rendered before the target is touched, so a failed
        render never leaves a partial document behind. A path target is
        written to a temporary file in the same directory that replaces the
        target only once every byte was written.

        Args:
            html: HTML string to render
            base_url: Base location for resolving relative URLs
            target: Filesystem path or writable binary stream

        Returns:
            The PDF bytes that were written

        Raises:
            RenderError: If rendering fails
        """
        pdf_bytes = self.render_html_to_pdf(html, base_url)

        if hasattr(target, 'write'):
            target.write(pdf_bytes)
            return pdf_bytes

        target = Path(target)
        fd, tmp_name = tempfile.mkstemp(
            dir=target.parent, prefix=f".{target.name}.", suffix='.tmp'
        )
        try:
            with os.fdopen(fd, 'wb') as f:
                f.write(pdf_bytes)
            os.replace(tmp_name, target)
        except Exception:
            Path(tmp_name).unlink(missing_ok=True)
            raise

        return pdf_bytes


class IContextBuilder(ABC):
    """
    Interface for building template contexts from objects.

    Each document type implements one builder that knows which template it
    renders and which variables that template expects.
    """

    @abstractmethod
    def build_context(self, obj: Any, *, company: Any = None) -> dict:
        """
        Build template context from an object.

        Args:
            obj: The object to build context from
            company: Optional company/organization context

        Returns:
            Dictionary with template context
        """
        pass

    def get_template_name(self, obj: Any) -> str:
        """
        Get template name for an object (optional).

        Args:
            obj: The object to get template for

        Returns:
            Logical template name
        """
        raise NotImplementedError("Subclass must implement get_template_name if needed")

    def get_filename(self, obj: Any) -> str:
        """
        Get the download filename for the rendered document.

        Args:
            obj: The object the document is rendered for

        Returns:
            Filename ending in .pdf
        """
        return f"{self.get_template_name(obj)}.pdf"
