"""
Dispatch Confirmation (confirmacion-envio)

Acknowledges the files an issuer sent, with the reception folio.
"""

import logging
from typing import Any

from ..models import ConfirmacionEnvio
from .base import ReportContextBuilder


logger = logging.getLogger(__name__)


class ConfirmacionEnvioBuilder(ReportContextBuilder):
    """Context builder for the dispatch confirmation"""

    template_name = 'confirmacion-envio'

    def build_context(self, obj: Any, *, company: Any = None) -> dict:
        """
        Build the dispatch confirmation context.

        The received files are passed through as objects; the template reads
        their `nombre` and `descripcion`.
        """
        confirmacion = obj if isinstance(obj, ConfirmacionEnvio) else ConfirmacionEnvio.from_dict(obj or {})
        logger.info(f"Building dispatch confirmation context for folio {confirmacion.folio_recepcion}")

        return self.new_context().add_object(confirmacion).build()
