"""Template filters for PDF report templates."""
from decimal import Decimal, InvalidOperation

from django import template
from django.utils.safestring import mark_safe
import markdown

from core.printing.sanitizer import sanitize_html

register = template.Library()


def _to_decimal(value):
    if isinstance(value, bool):
        return None
    try:
        return Decimal(str(value))
    except (InvalidOperation, ValueError, TypeError):
        return None


@register.filter
def numero(value, decimals=None):
    """
    Format a number with thousands separators.

    Without `decimals` the value keeps the fractional digits it has; only a
    zero fraction is dropped ("9966.0" -> "9,966", "9966.5" -> "9,966.5").

    Args:
        value: Number (int, float, Decimal or numeric string)
        decimals: Digits after the decimal point (rounds to that precision)

    Returns:
        Formatted string (e.g., "9,966" or "25.50"); non-numeric values
        are returned unchanged
    """
    amount = _to_decimal(value)
    if amount is None or not amount.is_finite():
        return value
    if decimals is not None:
        try:
            return f"{amount:,.{int(decimals)}f}"
        except (ValueError, TypeError):
            pass
    if amount == amount.to_integral_value():
        return f"{amount:,.0f}"
    return f"{amount.normalize():,f}"


@register.filter
def moneda(value):
    """
    Format an amount as currency, e.g. "$2,550.00".

    Strings that are already formatted (e.g. "$10.00") are returned unchanged.
    """
    amount = _to_decimal(value)
    if amount is None or not amount.is_finite():
        return value
    sign = '-' if amount < 0 else ''
    return f"{sign}${abs(amount):,.2f}"


@register.filter
def fecha(value, fmt='%d/%m/%Y'):
    """Format a date/datetime; strings are shown as given."""
    if value is None:
        return ''
    if hasattr(value, 'strftime'):
        return value.strftime(fmt)
    return value


@register.filter
def texto_enriquecido(text):
    """
    Render free text written in Markdown as sanitized HTML.

    Args:
        text: Markdown-formatted text

    Returns:
        Safe HTML string
    """
    if not text:
        return ""

    # Create a new markdown parser instance for thread safety
    md_parser = markdown.Markdown(extensions=['extra'])

    html = md_parser.convert(str(text))

    return mark_safe(sanitize_html(html, strict=True))
