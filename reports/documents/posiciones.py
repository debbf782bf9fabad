"""
Position Report (reporte-posiciones)

Positions of a brokerage house per issue: previous balance, operated,
cancelled and modified amounts and resulting position, each split into
Vcp/Vct/Cto. The grid is wide, so the template is A4 landscape.
"""

import logging
from typing import Any

from core.printing.flattener import flatten

from ..models import ReportePosiciones
from .base import ReportContextBuilder


logger = logging.getLogger(__name__)


class PosicionesReportBuilder(ReportContextBuilder):
    """Context builder for the position report"""

    template_name = 'reporte-posiciones'

    def build_context(self, obj: Any, *, company: Any = None) -> dict:
        """
        Build the position report context.

        Line totals are taken as supplied; they are not recomputed.

        Args:
            obj: ReportePosiciones or a mapping in template shape
            company: Unused
        """
        reporte = obj if isinstance(obj, ReportePosiciones) else ReportePosiciones.from_dict(obj or {})
        logger.info(
            f"Building position report context for {reporte.casa_bolsa} "
            f"({len(reporte.posiciones)} positions)"
        )

        return (
            self.new_context()
            .add_object(reporte, exclude={'posiciones'})
            .set('posiciones', [flatten(posicion) for posicion in reporte.posiciones])
            .build()
        )
