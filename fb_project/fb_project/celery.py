from __future__ import annotations
import os
from celery import Celery

# Workers started with "celery -A fb_project worker" need the Django settings
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "fb_project.settings")

celery_app = Celery("fb_project")

# Every CELERY_* setting in settings.py configures this app
# (broker, eager mode for local runs, timezone)
celery_app.config_from_object("django.conf:settings", namespace="CELERY")

# picks up ledger_core.tasks (audit_arap_integrity)
celery_app.autodiscover_tasks()
