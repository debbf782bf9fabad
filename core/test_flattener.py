"""
Tests for the Object Flattener

Covers the three flattening variants, renamed dataclass fields, objects that
provide their own context and members that cannot be read.
"""

from dataclasses import asdict, dataclass
from datetime import date

from django.test import SimpleTestCase

from core.printing.flattener import (
    context_field,
    flatten,
    flatten_excluding,
    flatten_with_ancestors,
)


@dataclass
class Emision:
    emisor: str
    serie: str = '1'


@dataclass
class EmisionConPosicion(Emision):
    serie: str = '1B'
    posicion_total: float = context_field('posicionTotal', default=0.0)


class Cuenta:
    """Plain class with instance attributes"""

    tipo = 'general'

    def __init__(self):
        self.numero = '001'
        self.titular = 'ACTINVER'
        self._interno = 'oculto'


class CuentaAnotada:
    emisor: str
    serie: str = '1'


class Renglon:
    __slots__ = ('emisor', 'serie')

    def __init__(self):
        self.emisor = 'WALMEX'


class ConContexto:
    def __init__(self, valor):
        self.valor = valor

    def to_context(self):
        return {'valorFormateado': f"${self.valor:.2f}"}


class FlattenTestCase(SimpleTestCase):
    """Test cases for flatten()"""

    def test_none_yields_empty_dict(self):
        self.assertEqual(flatten(None), {})
        self.assertEqual(flatten_with_ancestors(None), {})
        self.assertEqual(flatten_excluding(None, {'x'}), {})

    def test_dataclass_own_fields_only(self):
        """Fields declared on a base class are not part of flatten()"""
        valor = EmisionConPosicion(emisor='WALMEX', serie='1', posicion_total=9966.0)

        result = flatten(valor)

        self.assertEqual(result, {'serie': '1', 'posicionTotal': 9966.0})
        self.assertNotIn('emisor', result)

    def test_context_field_renames_key(self):
        result = flatten(EmisionConPosicion(emisor='WALMEX', posicion_total=5.0))

        self.assertIn('posicionTotal', result)
        self.assertNotIn('posicion_total', result)

    def test_plain_object_instance_attributes(self):
        result = flatten(Cuenta())

        self.assertEqual(result, {'numero': '001', 'titular': 'ACTINVER'})

    def test_private_members_are_not_exposed(self):
        self.assertNotIn('_interno', flatten(Cuenta()))

    def test_mapping_is_copied(self):
        data = {'periodo': 'Enero 2024'}

        result = flatten(data)

        self.assertEqual(result, data)
        self.assertIsNot(result, data)

    def test_to_context_is_used(self):
        self.assertEqual(flatten(ConContexto(10)), {'valorFormateado': '$10.00'})

    def test_unreadable_member_is_skipped_and_logged(self):
        """An unset slot is omitted; the rest of the object is still flattened"""
        with self.assertLogs('core.printing.flattener', level='WARNING') as cm:
            result = flatten(Renglon())

        self.assertEqual(result, {'emisor': 'WALMEX'})
        self.assertIn('serie', cm.output[0])

    def test_annotation_without_value_is_skipped(self):
        with self.assertLogs('core.printing.flattener', level='WARNING'):
            result = flatten(CuentaAnotada())

        self.assertEqual(result, {'serie': '1'})

    def test_flatten_is_repeatable(self):
        valor = EmisionConPosicion(emisor='WC', posicion_total=33388.0)

        self.assertEqual(flatten(valor), flatten(valor))

    def test_flatten_does_not_modify_value(self):
        valor = EmisionConPosicion(emisor='WC', posicion_total=33388.0)
        before = asdict(valor)

        flatten(valor)
        flatten_with_ancestors(valor)
        flatten_excluding(valor, ['serie'])

        self.assertEqual(asdict(valor), before)

    def test_nested_values_are_not_flattened(self):
        @dataclass
        class Reporte:
            periodo: str
            fechas: list

        fechas = [date(2024, 1, 15)]
        result = flatten(Reporte(periodo='Enero 2024', fechas=fechas))

        self.assertIs(result['fechas'], fechas)


class FlattenWithAncestorsTestCase(SimpleTestCase):
    """Test cases for flatten_with_ancestors()"""

    def test_includes_ancestor_fields(self):
        valor = EmisionConPosicion(emisor='WALMEX', serie='1', posicion_total=9966.0)

        result = flatten_with_ancestors(valor)

        self.assertEqual(
            result,
            {'emisor': 'WALMEX', 'serie': '1', 'posicionTotal': 9966.0}
        )

    def test_derived_member_wins(self):
        valor = EmisionConPosicion(emisor='WALMEX', serie='2')

        self.assertEqual(flatten_with_ancestors(valor)['serie'], flatten(valor)['serie'])

    def test_ancestor_does_not_overwrite_renamed_key(self):
        @dataclass
        class Base:
            total: float = 1.0

        @dataclass
        class Derivada(Base):
            importe: float = context_field('total', default=2.0)

        self.assertEqual(flatten_with_ancestors(Derivada())['total'], 2.0)

    def test_plain_class_hierarchy(self):
        class Base:
            origen: str = 'base'

        class Derivada(Base):
            def __init__(self):
                self.nombre = 'derivada'

        result = flatten_with_ancestors(Derivada())

        self.assertEqual(result, {'nombre': 'derivada', 'origen': 'base'})


class FlattenExcludingTestCase(SimpleTestCase):
    """Test cases for flatten_excluding()"""

    def test_excluded_keys_are_removed(self):
        valor = EmisionConPosicion(emisor='WALMEX', posicion_total=1.0)

        result = flatten_excluding(valor, {'posicionTotal'})

        self.assertEqual(result, {'serie': '1B'})

    def test_absent_names_are_ignored(self):
        result = flatten_excluding(Cuenta(), {'x', 'no_existe'})

        self.assertNotIn('x', result)
        self.assertEqual(result, flatten(Cuenta()))

    def test_single_name_string(self):
        self.assertNotIn('numero', flatten_excluding(Cuenta(), 'numero'))
