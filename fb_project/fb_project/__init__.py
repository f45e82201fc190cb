# Load the Celery app whenever Django starts, so @shared_task
# functions in ledger_core bind to it
from .celery import celery_app

__all__ = ("celery_app",)
