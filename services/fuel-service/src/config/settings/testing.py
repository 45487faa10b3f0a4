"""
Test settings for Fuel Service: in-memory SQLite, no migrations, quiet logs.
"""

from .base import *  # noqa: F401,F403

DEBUG = True
TESTING = True

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
        'ATOMIC_REQUESTS': False,
    }
}

PASSWORD_HASHERS = ['django.contrib.auth.hashers.MD5PasswordHasher']


class DisableMigrations:
    """Build test tables straight from the models."""

    def __contains__(self, app_label):
        return True

    def __getitem__(self, app_label):
        return None


MIGRATION_MODULES = DisableMigrations()

# Cost rates pinned for tests
FUEL_DEFAULT_CURRENCY = 'USD'
FUEL_TAX_RATE = '0.05'
FUEL_FEE_RATE = '0.02'

LOGGING = {
    'version': 1,
    'disable_existing_loggers': True,
    'handlers': {'null': {'class': 'logging.NullHandler'}},
    'root': {'handlers': ['null'], 'level': 'CRITICAL'},
}
