# Start from the shared settings, override below
from .common import *

# these persons receive error notification
ADMINS = (
    ('Webmasters', 'webmaster@dentalmasters.com'),
)
MANAGERS = ADMINS

# turn off all debugging
DEBUG = False

# This replaces the "django" logger with one that is pretty much identical to the default, except:
#  - Normally stderr-logging only happens when DEBUG is True, but we want to always log to the UWSGI log (which helps
#    diagnosing startup errors and keeps logs).
#  - The log format is changed to match UWSGI.
#  - The mail_admins handler also sends out WARNING messages.
# The "apps" logger gets the same treatment, so fallbacks to mock data or demo payments get noticed.
LOGGING = {
    'version': 1,
    # Recommended, otherwise default loggers are disabled but not removed, which can be problematic for non-propagating
    # loggers (which then stop producing output but still prevent propagation).
    'disable_existing_loggers': False,
    'filters': {
        'ignore_404': {
            '()': 'masterclass.common.log.Ignore404',
        },
    },
    'formatters': {
        'verbose': {
            'format': '{asctime} - {levelname} - {name} - {message}',
            'style': '{',
            # This mimics the (rather interesting) uwsgi data format to
            # get a unified log output
            'datefmt': '%a %b %d %H:%M:%S %Y',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'verbose',
        },
        'mail_admins': {
            'level': 'WARNING',
            # These are already handled by BrokenLinksEmailMiddleware
            'filters': ['ignore_404'],
            'class': 'django.utils.log.AdminEmailHandler',
        },
    },
    'loggers': {
        'django': {
            'handlers': ['console', 'mail_admins'],
            'level': 'INFO',
        },
        'apps': {
            'handlers': ['console', 'mail_admins'],
            'level': 'INFO',
        },
    },
}

# ##### SERVER CONFIGURATION ##############################
ALLOWED_HOSTS = ['dentalmasters.com', 'www.dentalmasters.com', 'register.dentalmasters.com']

# ##### DATABASE CONFIGURATION ############################
# Only used for sessions
DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': join(PROJECT_ROOT, 'run', 'sessions.sqlite3'),
    },
}

# ##### EMAIL CONFIGURATION ################################
EMAIL_BACKEND = 'django.core.mail.backends.smtp.EmailBackend'
EMAIL_HOST = 'localhost'

# ##### EXTERNAL EVENT SERVICE ############################
BACKEND_API_URL = 'https://api.dentalmasters.com/api'
# From local_settings
BACKEND_API_KEY = BACKEND_API_KEY

# ##### SECURITY CONFIGURATION ############################

# Note: Webserver guarantees only secure requests are processed and the
# (u)wsgi-protocol seems to pass on secure status automatically. The
# webserver also sets HSTS headers.
# Even so, let Django redirect to HTTPS as well, just in case the
# webserver config gets messed up.
SECURE_SSL_REDIRECT = True
# Session cookies will be marked as secure, so the browser will only
# send them over HTTPS
SESSION_COOKIE_SECURE = True
CSRF_COOKIE_SECURE = True
