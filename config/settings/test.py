"""
Test settings.
"""
from .base import *  # noqa: F401,F403

DEBUG = False
SECRET_KEY = 'test-secret-key'

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

PASSWORD_HASHERS = ['django.contrib.auth.hashers.MD5PasswordHasher']

CART_STORE_BACKEND = 'django'
CATALOG_LOOKUP_BACKEND = 'django'

LOGGING['loggers']['apps']['level'] = 'WARNING'  # noqa: F405
