"""
Simple test document (prueba-simple)

One-page document used to check that the rendering stack works.
"""

from typing import Any

from .base import ReportContextBuilder


class PruebaSimpleBuilder(ReportContextBuilder):
    """Context builder for the test document"""

    template_name = 'prueba-simple'

    def build_context(self, obj: Any = None, *, company: Any = None) -> dict:
        return (
            self.new_context()
            .set('titulo', 'Test PDF')
            .set('mensaje', 'Este es un test simple.')
            .update(obj)
            .build()
        )
