"""
Context builders for the shipped report templates, one per document type.
"""

from .aviso_extemporaneidad import AvisoExtemporaneidadBuilder
from .confirmacion_envio import ConfirmacionEnvioBuilder
from .posiciones import PosicionesReportBuilder
from .prueba import PruebaSimpleBuilder
from .ventas import VentasReportBuilder

__all__ = [
    'AvisoExtemporaneidadBuilder',
    'ConfirmacionEnvioBuilder',
    'PosicionesReportBuilder',
    'PruebaSimpleBuilder',
    'VentasReportBuilder',
]
