"""
ASGI config for the hospital dashboard project.

The dashboard only serves plain HTTP, so the stock Django ASGI handler
is enough.  Settings must be configured before the application is built.
"""
import os

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "hospital_dashboard.settings")

from django.core.asgi import get_asgi_application  # noqa: E402

application = get_asgi_application()
