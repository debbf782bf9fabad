"""
Report value objects

Plain data carriers for the report types. Field names follow Python
conventions; `context_field` names the key each field gets in a template
context. The `from_dict` constructors accept that same template-side
(camelCase) shape.
"""

from dataclasses import dataclass, field, fields
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Optional, Union

from core.printing.flattener import CONTEXT_NAME, context_field


def _parse_date(value: Union[date, str, None]) -> Optional[date]:
    """Accept a date, datetime or ISO 'YYYY-MM-DD' string."""
    if value is None or value == '':
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


def _pick(data: dict, context_name: str, attribute: str, default: Any = None) -> Any:
    """Read a value stored under its template name or its attribute name."""
    if context_name in data:
        return data[context_name]
    return data.get(attribute, default)


def _parse_cantidad(value: Any) -> int:
    """Whole quantity; fractional values are rejected instead of truncated."""
    if value is None or value == '':
        return 0
    if isinstance(value, bool):
        raise ValueError(f"Invalid quantity: {value!r}")
    if isinstance(value, int):
        return value
    try:
        number = Decimal(str(value))
    except InvalidOperation:
        raise ValueError(f"Invalid quantity: {value!r}")
    if not number.is_finite() or number != number.to_integral_value():
        raise ValueError(f"Quantity must be a whole number: {value!r}")
    return int(number)


@dataclass
class Empresa:
    """Issuer shown in report headers"""

    nombre: str
    direccion: str = ''
    telefono: str = ''

    @classmethod
    def from_dict(cls, data: dict) -> 'Empresa':
        return cls(
            nombre=data.get('nombre', ''),
            direccion=data.get('direccion', ''),
            telefono=data.get('telefono', ''),
        )


@dataclass
class Venta:
    """Single sale line of the sales report"""

    fecha: date
    cliente: str
    producto: str
    cantidad: int
    precio_unitario: float = context_field('precioUnitario')
    total: float = 0.0

    @classmethod
    def from_dict(cls, data: dict) -> 'Venta':
        return cls(
            fecha=_parse_date(data.get('fecha')),
            cliente=data.get('cliente', ''),
            producto=data.get('producto', ''),
            cantidad=_parse_cantidad(data.get('cantidad')),
            precio_unitario=float(_pick(data, 'precioUnitario', 'precio_unitario', 0.0) or 0.0),
            total=float(data.get('total') or 0.0),
        )


@dataclass
class DatosReporte:
    """Everything needed to build a sales report"""

    periodo: str
    ventas: list[Venta] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> 'DatosReporte':
        return cls(
            periodo=data.get('periodo', ''),
            ventas=[
                venta if isinstance(venta, Venta) else Venta.from_dict(venta)
                for venta in (data.get('ventas') or [])
            ],
        )


@dataclass
class Posicion:
    """
    One issue line of the position report.

    Totals are supplied by the caller and rendered as given; nothing in the
    report pipeline recomputes them.
    """

    emisor: str
    serie: str
    tv: str = ''

    # Saldo anterior
    saldo_inicial: float = context_field('saldoInicial', default=0.0)
    saldo_anterior_vcp: float = context_field('saldoAnteriorVcp', default=0.0)
    saldo_anterior_vct: float = context_field('saldoAnteriorVct', default=0.0)
    saldo_anterior_cto: float = context_field('saldoAnteriorCto', default=0.0)

    # Monto operado
    monto_operado_vcp: float = context_field('montoOperadoVcp', default=0.0)
    monto_operado_vct: float = context_field('montoOperadoVct', default=0.0)
    monto_operado_cto: float = context_field('montoOperadoCto', default=0.0)
    monto_operado_total: float = context_field('montoOperadoTotal', default=0.0)

    # Monto cancelado
    monto_cancelado_vcp: float = context_field('montoCanceladoVcp', default=0.0)
    monto_cancelado_vct: float = context_field('montoCanceladoVct', default=0.0)
    monto_cancelado_cto: float = context_field('montoCanceladoCto', default=0.0)
    monto_cancelado_total: float = context_field('montoCanceladoTotal', default=0.0)

    # Monto modificado
    monto_modificado_vcp: float = context_field('montoModificadoVcp', default=0.0)
    monto_modificado_vct: float = context_field('montoModificadoVct', default=0.0)
    monto_modificado_cto: float = context_field('montoModificadoCto', default=0.0)
    monto_modificado_total: float = context_field('montoModificadoTotal', default=0.0)

    # Posición
    posicion_vcp: float = context_field('posicionVcp', default=0.0)
    posicion_vct: float = context_field('posicionVct', default=0.0)
    posicion_cto: float = context_field('posicionCto', default=0.0)
    posicion_total: float = context_field('posicionTotal', default=0.0)

    @classmethod
    def from_dict(cls, data: dict) -> 'Posicion':
        values = {}
        for campo in fields(cls):
            context_name = campo.metadata.get(CONTEXT_NAME, campo.name)
            if context_name in data or campo.name in data:
                values[campo.name] = _pick(data, context_name, campo.name)
        return cls(**values)


@dataclass
class ReportePosiciones:
    """Position report of a brokerage house for one operation date"""

    casa_bolsa: str = context_field('casaBolsa')
    razon_social: str = context_field('razonSocial')
    fecha_consulta: str = context_field('fechaConsulta')
    fecha_operacion: str = context_field('fechaOperacion')
    posiciones: list[Posicion] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> 'ReportePosiciones':
        return cls(
            casa_bolsa=_pick(data, 'casaBolsa', 'casa_bolsa', ''),
            razon_social=_pick(data, 'razonSocial', 'razon_social', ''),
            fecha_consulta=_pick(data, 'fechaConsulta', 'fecha_consulta', ''),
            fecha_operacion=_pick(data, 'fechaOperacion', 'fecha_operacion', ''),
            posiciones=[
                posicion if isinstance(posicion, Posicion) else Posicion.from_dict(posicion)
                for posicion in (data.get('posiciones') or [])
            ],
        )


@dataclass
class ArchivoRecibido:
    """File received with a dispatch"""

    nombre: str
    descripcion: str = ''


@dataclass
class ConfirmacionEnvio:
    """Acknowledgement of a dispatch received from an issuer"""

    fecha_hora: str = context_field('fechaHora')
    clave: str = ''
    razon_social: str = context_field('razonSocial', default='')
    folio_recepcion: str = context_field('folioRecepcion', default='')
    responsable: str = ''
    fecha_hora_envio: str = context_field('fechaHoraEnvio', default='')
    periodo: str = ''
    archivos: list[ArchivoRecibido] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> 'ConfirmacionEnvio':
        return cls(
            fecha_hora=_pick(data, 'fechaHora', 'fecha_hora', ''),
            clave=data.get('clave', ''),
            razon_social=_pick(data, 'razonSocial', 'razon_social', ''),
            folio_recepcion=str(_pick(data, 'folioRecepcion', 'folio_recepcion', '')),
            responsable=data.get('responsable', ''),
            fecha_hora_envio=_pick(data, 'fechaHoraEnvio', 'fecha_hora_envio', ''),
            periodo=data.get('periodo', ''),
            archivos=[
                archivo if isinstance(archivo, ArchivoRecibido) else ArchivoRecibido(
                    nombre=archivo.get('nombre', ''),
                    descripcion=archivo.get('descripcion', ''),
                )
                for archivo in (data.get('archivos') or [])
            ],
        )


@dataclass
class AvisoExtemporaneidad:
    """Notice that required information was filed late"""

    fecha_generacion: str = context_field('fechaGeneracion')
    clave_cotizacion: str = context_field('claveCotizacion', default='')
    razon_social: str = context_field('razonSocial', default='')
    tipo_informacion: str = context_field('tipoInformacion', default='')
    causas_incumplimiento: str = context_field('causasIncumplimiento', default='')
    observaciones: str = ''

    @classmethod
    def from_dict(cls, data: dict) -> 'AvisoExtemporaneidad':
        return cls(
            fecha_generacion=_pick(data, 'fechaGeneracion', 'fecha_generacion', ''),
            clave_cotizacion=_pick(data, 'claveCotizacion', 'clave_cotizacion', ''),
            razon_social=_pick(data, 'razonSocial', 'razon_social', ''),
            tipo_informacion=_pick(data, 'tipoInformacion', 'tipo_informacion', ''),
            causas_incumplimiento=_pick(data, 'causasIncumplimiento', 'causas_incumplimiento', ''),
            observaciones=data.get('observaciones', ''),
        )
