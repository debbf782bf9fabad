"""
Configuration for the Printing Framework

Reads the PDF_GENERATOR settings dict and fills in defaults for every key
that is not configured.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from django.conf import settings


DEFAULT_TEMPLATE_SUFFIX = '.html'
DEFAULT_FONT = 'Arial'
DEFAULT_FONT_SIZE = 12
DEFAULT_MARGIN_MM = 20

DEFAULT_EMPRESA = {
    'nombre': 'BMV - Bolsa Mexicana de Valores',
    'direccion': 'Paseo de la Reforma 255, Ciudad de México',
    'telefono': '+52-55-5342-9000',
}


@dataclass(frozen=True)
class PrintingConfig:
    """Resolved PDF generation options"""

    template_dir: Path
    asset_base_url: str
    template_suffix: str = DEFAULT_TEMPLATE_SUFFIX
    strict_variables: bool = True
    strict_assets: bool = True
    stylesheets: tuple = ()
    default_font: str = DEFAULT_FONT
    default_font_size: int = DEFAULT_FONT_SIZE
    margins_mm: dict = field(default_factory=lambda: {
        'top': DEFAULT_MARGIN_MM,
        'bottom': DEFAULT_MARGIN_MM,
        'left': DEFAULT_MARGIN_MM,
        'right': DEFAULT_MARGIN_MM,
    })
    empresa: dict = field(default_factory=lambda: dict(DEFAULT_EMPRESA))

    def estilo(self) -> dict:
        """Typography/margin values exposed to templates as `estilo`."""
        return {
            'fuente': self.default_font,
            'tamanoFuente': self.default_font_size,
            'margenes': dict(self.margins_mm),
        }


def _as_base_url(location) -> str:
    """
    Turn a directory path into a file:// URL ending in a slash so relative
    asset references resolve inside it. URLs are returned unchanged.
    """
    location = str(location)
    if '://' in location:
        return location
    return Path(location).resolve().as_uri().rstrip('/') + '/'


def get_printing_config(overrides: Optional[dict] = None) -> PrintingConfig:
    """
    Build the printing configuration from Django settings.

    Args:
        overrides: Optional dict with PDF_GENERATOR keys that take precedence
            over the configured values (useful in tests)

    Returns:
        PrintingConfig instance
    """
    options = dict(getattr(settings, 'PDF_GENERATOR', {}) or {})
    if overrides:
        options.update(overrides)

    base_dir = Path(getattr(settings, 'BASE_DIR', Path.cwd()))
    template_dir = Path(options.get('TEMPLATE_DIR') or base_dir / 'core' / 'templates' / 'pdf')
    asset_base_url = _as_base_url(options.get('ASSET_BASE_URL') or base_dir / 'core' / 'static' / 'pdf')

    margins = {
        'top': DEFAULT_MARGIN_MM,
        'bottom': DEFAULT_MARGIN_MM,
        'left': DEFAULT_MARGIN_MM,
        'right': DEFAULT_MARGIN_MM,
    }
    margins.update(options.get('MARGINS_MM') or {})

    return PrintingConfig(
        template_dir=template_dir,
        asset_base_url=asset_base_url,
        template_suffix=options.get('TEMPLATE_SUFFIX', DEFAULT_TEMPLATE_SUFFIX),
        strict_variables=bool(options.get('STRICT_VARIABLES', True)),
        strict_assets=bool(options.get('STRICT_ASSETS', True)),
        stylesheets=tuple(options.get('STYLESHEETS') or ()),
        default_font=options.get('DEFAULT_FONT', DEFAULT_FONT),
        default_font_size=int(options.get('DEFAULT_FONT_SIZE', DEFAULT_FONT_SIZE)),
        margins_mm=margins,
        empresa=dict(options.get('EMPRESA') or DEFAULT_EMPRESA),
    )
