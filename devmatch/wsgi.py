"""
WSGI config for the devmatch project.
"""
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "devmatch.settings")

application = get_wsgi_application()
