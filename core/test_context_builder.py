"""
Tests for the Template Context Builder
"""

from dataclasses import dataclass, field

from django.test import SimpleTestCase

from core.printing.context import TemplateContextBuilder, build_context
from core.printing.flattener import context_field


@dataclass
class Reporte:
    periodo: str
    casa_bolsa: str = context_field('casaBolsa', default='')
    renglones: list = field(default_factory=list)


class TemplateContextBuilderTestCase(SimpleTestCase):
    """Test cases for TemplateContextBuilder"""

    def test_set_and_build(self):
        context = TemplateContextBuilder().set('titulo', 'Test PDF').build()

        self.assertEqual(context, {'titulo': 'Test PDF'})

    def test_last_write_wins(self):
        context = (
            TemplateContextBuilder()
            .set('periodo', 'Enero 2024')
            .update({'periodo': 'Febrero 2024'})
            .update(periodo='Marzo 2024')
            .build()
        )

        self.assertEqual(context['periodo'], 'Marzo 2024')

    def test_set_overrides_flattened_member(self):
        context = (
            TemplateContextBuilder()
            .add_object(Reporte(periodo='Enero 2024'))
            .set('periodo', 'Periodo especial')
            .build()
        )

        self.assertEqual(context['periodo'], 'Periodo especial')

    def test_flattened_member_overrides_earlier_set(self):
        context = (
            TemplateContextBuilder()
            .set('periodo', 'Anterior')
            .add_object(Reporte(periodo='Enero 2024'))
            .build()
        )

        self.assertEqual(context['periodo'], 'Enero 2024')

    def test_only_one_object_can_be_added(self):
        builder = TemplateContextBuilder().add_object(Reporte(periodo='Enero 2024'))

        with self.assertRaises(ValueError):
            builder.add_object(Reporte(periodo='Febrero 2024'))

    def test_add_object_with_exclusion(self):
        context = (
            TemplateContextBuilder()
            .add_object(Reporte(periodo='Enero 2024', casa_bolsa='ACTINVER'), exclude={'renglones'})
            .build()
        )

        self.assertEqual(context, {'periodo': 'Enero 2024', 'casaBolsa': 'ACTINVER'})

    def test_add_object_including_ancestors(self):
        @dataclass
        class ReporteDetallado(Reporte):
            detalle: str = 'completo'

        context = (
            TemplateContextBuilder()
            .add_object(
                ReporteDetallado(periodo='Enero 2024'),
                include_ancestors=True,
                exclude='renglones'
            )
            .build()
        )

        self.assertEqual(
            context,
            {'detalle': 'completo', 'periodo': 'Enero 2024', 'casaBolsa': ''}
        )

    def test_nested_values_are_passed_through(self):
        renglones = [{'emisor': 'WALMEX'}]

        context = TemplateContextBuilder().set('posiciones', renglones).build()

        self.assertIs(context['posiciones'], renglones)

    def test_build_returns_new_dict(self):
        builder = TemplateContextBuilder().set('titulo', 'Test PDF')

        first = builder.build()
        first['titulo'] = 'Cambiado'

        self.assertEqual(builder.build()['titulo'], 'Test PDF')
        self.assertIsNot(builder.build(), builder.build())


class BuildContextTestCase(SimpleTestCase):
    """Test cases for build_context()"""

    def test_without_arguments(self):
        self.assertEqual(build_context(), {})

    def test_object_then_mappings_then_keywords(self):
        context = build_context(
            Reporte(periodo='Enero 2024', casa_bolsa='ACTINVER'),
            {'periodo': 'Febrero 2024', 'titulo': 'Uno'},
            {'titulo': 'Dos'},
            casaBolsa='GBM',
        )

        self.assertEqual(context['periodo'], 'Febrero 2024')
        self.assertEqual(context['titulo'], 'Dos')
        self.assertEqual(context['casaBolsa'], 'GBM')
