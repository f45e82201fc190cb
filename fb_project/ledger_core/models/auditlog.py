from django.conf import settings  # To access global project settings
from django.db import models

from ..managers import TenantManager
from .company import Company


# ---------- Audit / Event log ----------
class AuditLog(
    models.Model
):  # Traceability for every AR/AP mutation
    # Associate log entry with a tenant
    company = models.ForeignKey(
        Company,
        null=True,
        blank=True,
        on_delete=models.SET_NULL,
    )
    # Which user performed the action
    # (Nullable when the action was automated, e.g. a Celery task)
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        null=True, blank=True, on_delete=models.SET_NULL
    )
    # Type of event being logged
    action = models.CharField(
        max_length=50
    )  # e.g. arap_payment_add, arap_payment_subtract, arap_writeoff
    # What kind of object was affected
    object_type = models.CharField(
        max_length=100
    )  # (e.g., "LedgerEntry", "Payment")
    # The primary key (or identifier) of the object
    object_id = models.CharField(max_length=100)
    # New values written by the action, in JSON format
    changes = models.JSONField(null=True, blank=True)
    # Timestamp when the event was logged
    created_at = models.DateTimeField(auto_now_add=True)

    # Enforce tenant scoping
    objects = TenantManager()

    class Meta:
        # Filter logs quickly
        indexes = [
            models.Index(fields=["company", "user"],
                         name="auditlog_company_user_idx"),
            models.Index(fields=["company", "created_at"],
                         name="auditlog_company_created_idx"),
        ]

    def __str__(self):
        time = self.created_at
        return (f"[{time:%Y-%m-%d %H:%M}] {self.user} {self.action} "
                f"{self.object_type}({self.object_id})")
