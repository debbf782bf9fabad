"""
Shared base for report context builders.
"""

from datetime import date
from typing import Any, Optional

from django.utils import timezone

from core.printing.config import PrintingConfig, get_printing_config
from core.printing.context import TemplateContextBuilder
from core.printing.interfaces import IContextBuilder


class ReportContextBuilder(IContextBuilder):
    """
    Base class for the context builders of the shipped report templates.

    Subclasses set `template_name` and implement build_context().
    """

    template_name: str = ''

    def __init__(
        self,
        *,
        config: Optional[PrintingConfig] = None,
        fecha_generacion: Optional[date] = None
    ):
        """
        Args:
            config: Printing configuration (read from settings if None)
            fecha_generacion: Generation date shown on the document and used
                in the filename (today in the configured time zone if None)
        """
        self.config = config or get_printing_config()
        self.fecha_generacion = fecha_generacion

    def get_fecha_generacion(self) -> date:
        return self.fecha_generacion or timezone.localdate()

    def get_template_name(self, obj: Any = None) -> str:
        return self.template_name

    def get_filename(self, obj: Any = None) -> str:
        return f"{self.template_name}-{self.get_fecha_generacion().isoformat()}.pdf"

    def new_context(self) -> TemplateContextBuilder:
        """Context builder pre-filled with the variables every template uses."""
        return TemplateContextBuilder().set('estilo', self.config.estilo())
