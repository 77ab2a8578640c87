# Python imports
from decimal import Decimal
from os.path import join

from .common import *

# ##### DEBUG CONFIGURATION ###############################
DEBUG = True

# allow all hosts during development
ALLOWED_HOSTS = ['*']

# ##### EMAIL CONFIGURATION ###############################
DEFAULT_FROM_EMAIL = "masterclass-test@dentalmasters.com"
BCC_EMAIL_TO = []
CONTACT_EMAIL_TO = ["masterclass-test@dentalmasters.com"]

# Print e-mails to the runserver console instead of sending them
EMAIL_BACKEND = 'django.core.mail.backends.console.EmailBackend'

# ##### DATABASE CONFIGURATION ############################
# Only used for sessions
DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': join(PROJECT_ROOT, 'run', 'dev.sqlite3'),
    },
}

# ##### EXTERNAL EVENT SERVICE ############################
# Point this to a locally running service to test against it, otherwise mock data is used
BACKEND_API_URL = None
BACKEND_API_KEY = None

# ##### PRICING ###########################################
PROMO_CODES = {
    'DEVTEN': {'type': 'percentage', 'value': Decimal('10')},
    'DEVFIFTY': {'type': 'fixed', 'value': Decimal('50.00')},
}
