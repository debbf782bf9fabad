"""
Core Printing Framework

Binds report data to named HTML templates and renders them to PDF using
WeasyPrint. Page size and orientation come from each template's @page CSS.
"""

from .service import PdfRenderService
from .dto import PdfResult
from .interfaces import IPdfRenderer, IContextBuilder
from .context import TemplateContextBuilder, build_context
from .flattener import context_field, flatten, flatten_excluding, flatten_with_ancestors
from .resolver import TemplateResolver
from .exceptions import (
    PrintingError,
    TemplateNotFoundError,
    ContextBindingError,
    RenderError,
    ReflectionAccessError,
)

__all__ = [
    'PdfRenderService',
    'PdfResult',
    'IPdfRenderer',
    'IContextBuilder',
    'TemplateContextBuilder',
    'build_context',
    'TemplateResolver',
    'context_field',
    'flatten',
    'flatten_excluding',
    'flatten_with_ancestors',
    'PrintingError',
    'TemplateNotFoundError',
    'ContextBindingError',
    'RenderError',
    'ReflectionAccessError',
]
