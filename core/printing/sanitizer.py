"""
HTML Sanitizer for Printing Framework

Cleans free-text HTML (notes, causes, observations supplied by issuers)
before it is embedded unescaped into a report template.
"""

import logging

import bleach
from bleach.css_sanitizer import CSSSanitizer


logger = logging.getLogger(__name__)


# Formatting tags that make sense inside a printed paragraph
ALLOWED_TAGS = [
    'p', 'br', 'strong', 'b', 'em', 'i', 'u', 's',
    'ol', 'ul', 'li', 'blockquote',
    'span', 'table', 'thead', 'tbody', 'tr', 'th', 'td', 'hr',
]

ALLOWED_ATTRIBUTES = {
    '*': ['class', 'style'],
    'td': ['colspan', 'rowspan'],
    'th': ['colspan', 'rowspan'],
}

ALLOWED_CSS_PROPERTIES = [
    'color', 'background-color', 'font-size', 'font-weight', 'font-style',
    'text-align', 'text-decoration', 'margin', 'padding',
]


def sanitize_html(html: str, *, strict: bool = False) -> str:
    """
    Sanitize HTML content before rendering to PDF.

    Links and images are always stripped: a report must not make the renderer
    fetch resources chosen by whoever typed the text.

    Args:
        html: HTML string to sanitize
        strict: If True, uses stricter rules (no inline styles)

    Returns:
        Sanitized HTML string
    """
    if not html:
        return ""

    attrs = {tag: list(names) for tag, names in ALLOWED_ATTRIBUTES.items()}

    css_sanitizer = None
    if not strict:
        css_sanitizer = CSSSanitizer(allowed_css_properties=ALLOWED_CSS_PROPERTIES)
    else:
        # Remove style attribute in strict mode
        attrs['*'] = [a for a in attrs['*'] if a != 'style']

    clean_html = bleach.clean(
        html,
        tags=ALLOWED_TAGS,
        attributes=attrs,
        css_sanitizer=css_sanitizer,
        strip=True
    )

    if clean_html != html:
        logger.debug("Sanitizer removed disallowed markup from report text")

    return clean_html
