#!/usr/bin/env python
"""Django management entrypoint for the django-confreg example project."""

import os
import sys


def main() -> None:
    """Run administrative tasks against ``examples/settings.py``."""
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "settings")
    from django.core.management import execute_from_command_line

    execute_from_command_line(sys.argv)


if __name__ == "__main__":
    main()
