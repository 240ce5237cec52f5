"""
Development settings for geo_rewards project.
"""

from decouple import config
from .base import *

DEBUG = config('DEBUG', default=True, cast=bool)

# SQLite unless a MySQL database is configured
if config('USE_MYSQL', default=False, cast=bool):
    DATABASES['default']['NAME'] = config('MYSQL_DATABASE', default='geo_rewards_dev')
else:
    DATABASES = {
        'default': {
            'ENGINE': 'django.db.backends.sqlite3',
            'NAME': BASE_DIR / 'db.sqlite3',
            # Take the write lock at BEGIN so concurrent redemptions queue instead of failing
            'OPTIONS': {
                'transaction_mode': 'IMMEDIATE',
                'timeout': 20,
            },
        }
    }

# Logging for development
LOGGING['handlers']['console']['level'] = config('LOG_LEVEL', default='DEBUG')
LOGGING['root']['level'] = config('LOG_LEVEL', default='DEBUG')
