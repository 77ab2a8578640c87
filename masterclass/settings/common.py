# Python imports
import re
from decimal import Decimal
from os.path import abspath, basename, dirname, join, normpath

from django.utils.translation import gettext_lazy as _

# Import local_settings, if they exist
try:
    from .local_settings import *
except ImportError:
    pass

# ##### PATH CONFIGURATION ################################

# fetch Django's project directory
DJANGO_ROOT = dirname(dirname(abspath(__file__)))

# fetch the project_root
PROJECT_ROOT = dirname(DJANGO_ROOT)

# the name of the whole site
SITE_NAME = basename(DJANGO_ROOT)

# collect static files here
STATIC_ROOT = join(PROJECT_ROOT, 'run', 'static')

# collect media files here
MEDIA_ROOT = join(PROJECT_ROOT, 'run', 'media')

# look for static assets here
STATICFILES_DIRS = [
    join(PROJECT_ROOT, 'static'),
]

# look for templates here
# This is an internal setting, used in the TEMPLATES directive
PROJECT_TEMPLATES = [
    join(PROJECT_ROOT, 'templates'),
]

# ##### Internationalization ##############################
LANGUAGE_CODE = 'en'
TIME_ZONE = 'America/New_York'

# Internationalization
USE_I18N = False

# enable timezone awareness by default
USE_TZ = True

# This list of languages will be provided
LANGUAGES = (
    ('en', _('English')),
)

MONETARY_CURRENCY = '$'
MONETARY_DECIMAL_PLACES = 2
MONETARY_MAX_DIGITS = 12

FORMAT_MODULE_PATH = [
    'masterclass.locales',
]

# ##### APPLICATION CONFIGURATION #########################

# these are the apps
INSTALLED_APPS = [
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',
    'apps.core.apps.CoreConfig',
    'apps.events.apps.EventsConfig',
    'apps.registrations.apps.RegistrationsConfig',
    'apps.payments.apps.PaymentsConfig',
]

# Middlewares
MIDDLEWARE = [
    'django.middleware.common.BrokenLinkEmailsMiddleware',
    'django.middleware.security.SecurityMiddleware',
    'masterclass.common.middleware.HideSensitiveMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

# template stuff
TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': PROJECT_TEMPLATES,
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.debug',
                'django.template.context_processors.media',
                'django.template.context_processors.static',
                'django.template.context_processors.tz',
                'django.template.context_processors.request',
                'django.contrib.messages.context_processors.messages',
                'apps.core.context_processors.site',
            ],
        },
    },
]

DEFAULT_AUTO_FIELD = 'django.db.models.AutoField'

# ##### SESSION CONFIGURATION #############################

# Registration drafts live in the session, so let it outlive the browser session for a while to allow picking up
# an abandoned registration later on.
SESSION_COOKIE_AGE = 14 * 24 * 60 * 60
SESSION_EXPIRE_AT_BROWSER_CLOSE = False

# ##### SECURITY CONFIGURATION ############################

# We store the secret key here
# The required SECRET_KEY is fetched at the end of this file
SECRET_FILE = normpath(join(PROJECT_ROOT, 'run', 'SECRET.key'))

# ##### EMAIL CONFIGURATION ################################
DEFAULT_FROM_EMAIL = 'registrations@dentalmasters.com'
BCC_EMAIL_TO = ['registrations@dentalmasters.com']
SERVER_EMAIL = 'registrations@dentalmasters.com'
EMAIL_SUBJECT_PREFIX = "Dental Masters: "

# Messages sent through the contact form end up here
CONTACT_EMAIL_TO = ['info@dentalmasters.com']

# ##### SITE INFORMATION ##################################
SITE_TITLE = 'Dental Masters'
CONTACT_DETAILS = {
    'email': 'info@dentalmasters.com',
    'phone': '+1-800-DENTIST',
    'address': '100 Medical Center Drive, Boston, MA 02115',
    'office_hours': 'Monday - Friday, 9:00 AM - 6:00 PM EST',
}
PRIVACY_POLICY_URL = 'https://www.dentalmasters.com/privacy'
TERMS_OF_SERVICE_URL = 'https://www.dentalmasters.com/terms'

# ##### EXTERNAL EVENT SERVICE ############################

# Base url of the external service that owns events, registrations and payments, e.g.
# 'https://api.dentalmasters.com/api'. When None, the site runs on built-in mock data and payments run in demo mode.
BACKEND_API_URL = None
# BACKEND_API_KEY is a secret, so it should come from local_settings (it is left unset here, since that would
# override the value imported above).

# Seconds, for both connecting and reading
BACKEND_API_TIMEOUT = 10

# When the payment service fails, still complete the order (marked as demo) instead of showing the error.
PAYMENTS_DEMO_FALLBACK = True

# ##### PRICING ###########################################

# Used when the event (e.g. from the external service) does not specify a base price
DEFAULT_BASE_PRICE = Decimal('499.00')

# Promotional codes, matched case-insensitively. Type is either 'percentage' (of the subtotal) or 'fixed', e.g.
# {'SMILE20': {'type': 'percentage', 'value': Decimal('20')}}. Configure these in local_settings.py (imported at the
# top), they are kept from there.
PROMO_CODES = globals().get('PROMO_CODES', {})

# ##### DJANGO RUNNING CONFIGURATION ######################

# the default WSGI application
WSGI_APPLICATION = '%s.wsgi.application' % SITE_NAME

# the root URL configuration
ROOT_URLCONF = '%s.urls' % SITE_NAME

# the URL for static files
STATIC_URL = '/static/'

# the URL for media files
MEDIA_URL = '/media/'


# ##### DEBUG CONFIGURATION ###############################
DEBUG = False

# 404 REPORTING ####################################

# These are not reported by the BrokenLinkEmailsMiddleware
IGNORABLE_404_URLS = [
    re.compile(r'.php$'),
]


# finally grab the SECRET KEY
try:
    SECRET_KEY = open(SECRET_FILE).read().strip()
except IOError:
    try:
        from django.utils.crypto import get_random_string
        chars = 'abcdefghijklmnopqrstuvwxyz0123456789!$%&()=+-_'
        SECRET_KEY = get_random_string(50, chars)
        with open(SECRET_FILE, 'w') as f:
            f.write(SECRET_KEY)
    except IOError:
        raise Exception('Could not open %s for writing!' % SECRET_FILE)
