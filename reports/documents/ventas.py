"""
Sales Report (reporte-ventas)

Monthly sales report with an executive summary, the sale lines and an
optional bar chart of sales per month. A4 portrait.
"""

import logging
from collections.abc import Mapping
from typing import Any, Optional

from core.printing.flattener import flatten

from ..models import DatosReporte, Empresa, Venta
from .base import ReportContextBuilder


logger = logging.getLogger(__name__)

TITULO = 'Reporte de Ventas Mensual'

MESES = [
    'Enero', 'Febrero', 'Marzo', 'Abril', 'Mayo', 'Junio',
    'Julio', 'Agosto', 'Septiembre', 'Octubre', 'Noviembre', 'Diciembre',
]


def calcular_resumen(ventas: list[Venta]) -> dict:
    """
    Executive summary of a list of sales.

    The average is $0.00 when there are no sales.
    """
    total = sum(venta.total for venta in ventas)
    transacciones = len(ventas)
    promedio = total / transacciones if transacciones > 0 else 0

    return {
        'totalVentas': f"${total:.2f}",
        'numeroTransacciones': transacciones,
        'ventaPromedio': f"${promedio:.2f}",
    }


def calcular_ventas_por_mes(ventas: list[Venta]) -> list[dict]:
    """
    Sales totals per calendar month, in chronological order.

    `porcentaje` is each month's total relative to the best month (0-100).
    Sales without a date are left out of the chart.
    """
    totales: dict[tuple[int, int], float] = {}
    for venta in ventas:
        if venta.fecha is None:
            continue
        mes = (venta.fecha.year, venta.fecha.month)
        totales[mes] = totales.get(mes, 0.0) + venta.total

    max_venta = max(totales.values(), default=1)
    if max_venta <= 0:
        max_venta = 1

    return [
        {
            'nombre': f"{MESES[month - 1]} {year}",
            'total': total,
            'porcentaje': (total / max_venta) * 100,
        }
        for (year, month), total in sorted(totales.items())
    ]


class VentasReportBuilder(ReportContextBuilder):
    """Context builder for the sales report"""

    template_name = 'reporte-ventas'

    def __init__(self, *, incluir_grafico: bool = True, **kwargs):
        super().__init__(**kwargs)
        self.incluir_grafico = incluir_grafico

    def build_context(self, obj: Any, *, company: Any = None) -> dict:
        """
        Build the sales report context.

        Args:
            obj: DatosReporte or a mapping with 'periodo' and 'ventas'
            company: Empresa or mapping for the header (configured EMPRESA if None)
        """
        datos = obj if isinstance(obj, DatosReporte) else DatosReporte.from_dict(obj or {})
        logger.info(f"Building sales report context for period: {datos.periodo}")

        return (
            self.new_context()
            .add_object(datos, exclude={'ventas'})
            .set('titulo', TITULO)
            .set('fechaGeneracion', self.get_fecha_generacion())
            .set('empresa', self._empresa(company))
            .set('resumen', calcular_resumen(datos.ventas))
            .set('ventas', [flatten(venta) for venta in datos.ventas])
            .set('incluirGrafico', self.incluir_grafico)
            .set('ventasPorMes', calcular_ventas_por_mes(datos.ventas))
            .build()
        )

    def _empresa(self, company: Optional[Any]) -> dict:
        if company is None:
            return dict(self.config.empresa)
        if isinstance(company, Mapping):
            return flatten(Empresa.from_dict(company))
        return flatten(company)
