from django.core.exceptions import ValidationError
from django.db import models

from ..constants import ChequeStatus, ChequeType
from ..managers import TenantManager
from .company import Company


class Cheque(models.Model):  # A deferred payment instrument

    company = models.ForeignKey(Company, on_delete=models.CASCADE)
    client_name = models.CharField(max_length=200)

    cheque_number = models.CharField(max_length=64)
    bank_name = models.CharField(max_length=120, blank=True, default="")
    amount = models.DecimalField(max_digits=18, decimal_places=2)
    issue_date = models.DateField()
    due_date = models.DateField(null=True, blank=True)

    # incoming = we receive it, outgoing = we write it
    type = models.CharField(max_length=10, choices=ChequeType.choices)
    status = models.CharField(
        max_length=10, choices=ChequeStatus.choices,
        default=ChequeStatus.PENDING,
    )

    # Endorsed cheques already show up as an endorsement Payment,
    # so they are left out of the pending projection
    is_endorsed_cheque = models.BooleanField(default=False)
    endorsed_to = models.CharField(max_length=200, blank=True, default="")

    linked_transaction_id = models.CharField(
        max_length=40, null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)

    # Enforce tenant scoping
    objects = TenantManager()

    class Meta:
        indexes = [
            models.Index(fields=["company", "client_name"],
                         name="cheque_company_client_idx"),
            models.Index(fields=["company", "status"],
                         name="cheque_company_status_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(amount__gt=0),
                name="cheque_amount_positive",
            ),
        ]

    def __str__(self):
        return f"Cheque {self.cheque_number} ({self.amount})"

    def clean(self):
        if self.amount is not None and self.amount <= 0:
            raise ValidationError("Cheque amount must be positive")
        if self.due_date and self.issue_date and self.due_date < self.issue_date:
            raise ValidationError("Due date cannot be before issue date")
        if self.is_endorsed_cheque and not self.endorsed_to:
            raise ValidationError("Endorsed cheques must name the endorsee")

    def save(self, *args, **kwargs):
        self.full_clean()
        return super().save(*args, **kwargs)
