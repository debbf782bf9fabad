"""
Lateness Notice (aviso-extemporaneidad)

Notice that an issuer filed required information after the deadline,
with the stated causes and observations.
"""

import logging
from typing import Any

from ..models import AvisoExtemporaneidad
from .base import ReportContextBuilder


logger = logging.getLogger(__name__)


class AvisoExtemporaneidadBuilder(ReportContextBuilder):
    """Context builder for the lateness notice"""

    template_name = 'aviso-extemporaneidad'

    def build_context(self, obj: Any, *, company: Any = None) -> dict:
        aviso = obj if isinstance(obj, AvisoExtemporaneidad) else AvisoExtemporaneidad.from_dict(obj or {})
        logger.info(f"Building lateness notice context for {aviso.clave_cotizacion}")

        context = self.new_context().add_object(aviso)
        if not aviso.fecha_generacion:
            context.set('fechaGeneracion', self.get_fecha_generacion().strftime('%d/%m/%Y'))
        return context.build()
