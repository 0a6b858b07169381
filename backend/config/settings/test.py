"""
Test settings for the ACME procurement project.
"""

from .base import *

DEBUG = False

PROCUREMENT['DEFAULT_CURRENCY'] = 'USD'

# Keep test output quiet unless something is wrong
LOGGING['loggers']['infrastructure']['level'] = 'WARNING'
LOGGING['loggers']['infrastructure']['propagate'] = True
