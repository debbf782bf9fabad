"""
Reports package

Contains the context builders and orchestrators of the PDF documents.
"""

from core.services.reporting.registry import is_registered, register_report
from .documents import (
    AvisoExtemporaneidadBuilder,
    ConfirmacionEnvioBuilder,
    PosicionesReportBuilder,
    PruebaSimpleBuilder,
    VentasReportBuilder,
)
from .generador import (
    generar_aviso_extemporaneidad,
    generar_confirmacion_envio,
    generar_documento,
    generar_pdf_simple,
    generar_reporte_posiciones,
    generar_reporte_ventas,
)


REPORT_BUILDERS = {
    'ventas': VentasReportBuilder,
    'posiciones': PosicionesReportBuilder,
    'confirmacion_envio': ConfirmacionEnvioBuilder,
    'aviso_extemporaneidad': AvisoExtemporaneidadBuilder,
    'prueba': PruebaSimpleBuilder,
}


def register_all_reports():
    """Register all available report context builders"""
    for report_key, builder_class in REPORT_BUILDERS.items():
        if not is_registered(report_key):
            register_report(report_key, builder_class)


# Auto-register builders when module is imported
register_all_reports()

__all__ = [
    'generar_aviso_extemporaneidad',
    'generar_confirmacion_envio',
    'generar_documento',
    'generar_pdf_simple',
    'generar_reporte_posiciones',
    'generar_reporte_ventas',
    'register_all_reports',
]
