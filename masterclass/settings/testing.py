from decimal import Decimal

from .common import *

ALLOWED_HOSTS = ['testserver']

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    },
}

EMAIL_BACKEND = 'django.core.mail.backends.locmem.EmailBackend'
BCC_EMAIL_TO = ['registrations@dentalmasters.com']

# Testcases should never talk to a live service, tests that need one patch the client instead.
BACKEND_API_URL = None
BACKEND_API_KEY = None

PAYMENTS_DEMO_FALLBACK = True

PROMO_CODES = {
    'SMILE20': {'type': 'percentage', 'value': Decimal('20')},
    'FLAT100': {'type': 'fixed', 'value': Decimal('100.00')},
    'FREEPASS': {'type': 'percentage', 'value': Decimal('100')},
}
