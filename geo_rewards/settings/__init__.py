"""
Settings package for geo_rewards.

The active environment is picked from the ENVIRONMENT variable
(development, production or test).
"""
from decouple import config

ENVIRONMENT = config('ENVIRONMENT', default='development')

if ENVIRONMENT == 'production':
    from .production import *
elif ENVIRONMENT == 'test':
    from .test import *
else:
    from .development import *
