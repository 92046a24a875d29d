#!/usr/bin/env python
"""
Entry point for the hospital dashboard.  Sets the default settings module
to ``hospital_dashboard.settings`` and delegates to Django's management
command line utility (``runserver``, ``sync_remote_store``,
``seed_remote_store``).
"""
import os
import sys


def main() -> None:
    """Run administrative tasks for the dashboard."""
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'hospital_dashboard.settings')
    try:
        from django.core.management import execute_from_command_line  # type: ignore
    except ImportError as exc:
        raise ImportError(
            "Couldn't import Django. Are you sure it's installed and "
            "available on your PYTHONPATH environment variable? Did you "
            "forget to activate a virtual environment?"
        ) from exc
    execute_from_command_line(sys.argv)


if __name__ == '__main__':
    main()
