"""
Django settings for the EMISNET PDF generator.

Only the pieces the rendering pipeline needs are configured: installed apps,
localisation, logging and the PDF_GENERATOR options. Values can be overridden
through environment variables.
"""

import os
from pathlib import Path


BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.environ.get('DJANGO_SECRET_KEY', 'emisnet-pdf-insecure-dev-key')

DEBUG = os.environ.get('DJANGO_DEBUG', 'False').lower() in ('1', 'true', 'yes')

ALLOWED_HOSTS = []

INSTALLED_APPS = [
    'core',
]

# The generator is a library; no database is used
DATABASES = {}

LANGUAGE_CODE = 'es-mx'
TIME_ZONE = os.environ.get('DJANGO_TIME_ZONE', 'America/Mexico_City')
USE_I18N = True
USE_TZ = True

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'


# PDF generation
PDF_GENERATOR = {
    'TEMPLATE_DIR': os.environ.get(
        'PDF_TEMPLATE_DIR', str(BASE_DIR / 'core' / 'templates' / 'pdf')
    ),
    'TEMPLATE_SUFFIX': '.html',
    'ASSET_BASE_URL': os.environ.get(
        'PDF_ASSET_BASE_URL', str(BASE_DIR / 'core' / 'static' / 'pdf')
    ),
    'STRICT_VARIABLES': os.environ.get('PDF_STRICT_VARIABLES', 'True').lower() in ('1', 'true', 'yes'),
    'STRICT_ASSETS': os.environ.get('PDF_STRICT_ASSETS', 'True').lower() in ('1', 'true', 'yes'),
    'STYLESHEETS': [],
    'DEFAULT_FONT': os.environ.get('PDF_DEFAULT_FONT', 'Arial'),
    'DEFAULT_FONT_SIZE': int(os.environ.get('PDF_DEFAULT_FONT_SIZE', '12')),
    'MARGINS_MM': {
        'top': 20,
        'bottom': 20,
        'left': 20,
        'right': 20,
    },
    'EMPRESA': {
        'nombre': 'BMV - Bolsa Mexicana de Valores',
        'direccion': 'Paseo de la Reforma 255, Ciudad de México',
        'telefono': '+52-55-5342-9000',
    },
}


# Logging
PDF_LOG_LEVEL = os.environ.get('PDF_LOG_LEVEL', 'INFO')

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '{asctime} {levelname} {name} {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'verbose',
        },
    },
    'loggers': {
        'core': {
            'handlers': ['console'],
            'level': PDF_LOG_LEVEL,
            'propagate': False,
        },
        'reports': {
            'handlers': ['console'],
            'level': PDF_LOG_LEVEL,
            'propagate': False,
        },
        # WeasyPrint reports unreadable assets and CSS problems here
        'weasyprint': {
            'handlers': ['console'],
            'level': 'WARNING',
            'propagate': False,
        },
    },
}
