"""
Report Orchestrators

One entry point per document type. Each builds the template context through
the registered context builder and renders it with a PdfRenderService.

The result is always returned as a PdfResult. When `destino` is given the PDF
is also written there: a path is created only after rendering succeeded, a
writable binary stream receives the bytes and stays open.
"""

import logging
from pathlib import Path
from typing import Any, BinaryIO, Optional, Union

from core.printing import PdfRenderService, PdfResult
from core.printing.interfaces import IContextBuilder
from core.services.reporting.registry import get_builder

from .documents import VentasReportBuilder


logger = logging.getLogger(__name__)

Destino = Union[str, Path, BinaryIO, None]


def generar_documento(
    report_key: str,
    datos: Any,
    destino: Destino = None,
    *,
    service: Optional[PdfRenderService] = None,
    builder: Optional[IContextBuilder] = None,
    company: Any = None
) -> PdfResult:
    """
    Render a registered document type.

    Args:
        report_key: Registered document type (e.g. 'ventas', 'posiciones')
        datos: Report value object or mapping in template shape
        destino: Optional file path or writable binary stream
        service: Render service to use (a new one from settings if None)
        builder: Context builder overriding the registered one
        company: Optional company context passed to the builder

    Returns:
        PdfResult with the PDF bytes

    Raises:
        KeyError: If report_key is not registered
        PrintingError: If the template cannot be rendered
    """
    builder = builder or get_builder(report_key)
    service = service or PdfRenderService()

    template_name = builder.get_template_name(datos)
    filename = builder.get_filename(datos)
    context = builder.build_context(datos, company=company)

    logger.info(f"Generating '{report_key}' document with template {template_name}")

    if destino is None:
        return service.render(template_name, context, filename=filename)
    if hasattr(destino, 'write'):
        return service.render_to_stream(template_name, context, destino, filename=filename)
    return service.render_to_file(template_name, context, destino)


def generar_reporte_ventas(
    datos: Any,
    destino: Destino = None,
    *,
    service: Optional[PdfRenderService] = None,
    empresa: Any = None,
    incluir_grafico: bool = True
) -> PdfResult:
    """
    Generate the monthly sales report.

    Args:
        datos: DatosReporte or mapping with 'periodo' and 'ventas'
        destino: Optional file path or writable binary stream
        service: Render service to use
        empresa: Issuer shown in the header (configured EMPRESA if None)
        incluir_grafico: Include the sales-per-month chart
    """
    return generar_documento(
        'ventas',
        datos,
        destino,
        service=service,
        builder=VentasReportBuilder(incluir_grafico=incluir_grafico),
        company=empresa,
    )


def generar_reporte_posiciones(
    reporte: Any,
    destino: Destino = None,
    *,
    service: Optional[PdfRenderService] = None
) -> PdfResult:
    """Generate the position report (landscape)."""
    return generar_documento('posiciones', reporte, destino, service=service)


def generar_confirmacion_envio(
    confirmacion: Any,
    destino: Destino = None,
    *,
    service: Optional[PdfRenderService] = None
) -> PdfResult:
    """Generate the dispatch confirmation."""
    return generar_documento('confirmacion_envio', confirmacion, destino, service=service)


def generar_aviso_extemporaneidad(
    aviso: Any,
    destino: Destino = None,
    *,
    service: Optional[PdfRenderService] = None
) -> PdfResult:
    """Generate the lateness notice."""
    return generar_documento('aviso_extemporaneidad', aviso, destino, service=service)


def generar_pdf_simple(
    destino: Destino = None,
    *,
    service: Optional[PdfRenderService] = None
) -> PdfResult:
    """Generate the one-page test document."""
    return generar_documento('prueba', None, destino, service=service)
