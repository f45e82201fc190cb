#!/usr/bin/env python
"""Django's command-line utility for administrative tasks."""
import os
import sys


def main():
    # Point Django at the project settings unless the caller already did
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "fb_project.settings")
    from django.core.management import execute_from_command_line

    execute_from_command_line(sys.argv)


if __name__ == "__main__":
    main()
