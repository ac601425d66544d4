"""
ASGI config for the clinic project.

Only HTTP is served; the dashboard has no WebSocket surface.
"""
import os

from django.core.asgi import get_asgi_application  # type: ignore

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "clinic.settings")

application = get_asgi_application()
