"""
WSGI config for geo_rewards project.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'geo_rewards.settings')

application = get_wsgi_application()
