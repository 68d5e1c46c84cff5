"""
WSGI config for LicenseStorefront.
"""
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "LicenseStorefront.settings.dev")

application = get_wsgi_application()
