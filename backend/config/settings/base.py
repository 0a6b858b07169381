"""
Base settings for the ACME procurement project.

Values that differ between environments are read with python-decouple,
from the process environment or a .env file next to manage.py.
"""

from decouple import config, Csv

# =============================================================================
# CORE
# =============================================================================
SECRET_KEY = config('SECRET_KEY', default='insecure-acme-procurement-key')

DEBUG = config('DEBUG', default=False, cast=bool)

ALLOWED_HOSTS = config('ALLOWED_HOSTS', default='', cast=Csv())

# =============================================================================
# INSTALLED APPS
# =============================================================================
# The domain package is framework free; Django only hosts the management
# commands living in infrastructure/management/commands.
INSTALLED_APPS = [
    'infrastructure',
]

# =============================================================================
# DATABASE
# =============================================================================
# No persistence layer: aggregates live in memory only.
DATABASES = {}

# =============================================================================
# INTERNATIONALIZATION
# =============================================================================
LANGUAGE_CODE = 'en-us'
TIME_ZONE = config('TIME_ZONE', default='UTC')
USE_I18N = False
USE_TZ = True

# =============================================================================
# PROCUREMENT
# =============================================================================
PROCUREMENT = {
    'DEFAULT_CURRENCY': config('PROCUREMENT_DEFAULT_CURRENCY', default='USD'),
}

# =============================================================================
# LOGGING
# =============================================================================
LOG_LEVEL = config('LOG_LEVEL', default='INFO')

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '{levelname} {asctime} {name} {message}',
            'style': '{',
        },
        'simple': {
            'format': '{levelname} {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'simple',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': 'WARNING',
    },
    'loggers': {
        'infrastructure': {
            'handlers': ['console'],
            'level': LOG_LEVEL,
            'propagate': False,
        },
    },
}
