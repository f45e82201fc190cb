from decimal import Decimal

from django.core.exceptions import ValidationError
from django.db import models

from ..constants import PaymentType
from ..managers import TenantManager
from .company import Company


class Payment(models.Model):  # A cash or cheque movement to/from a client

    company = models.ForeignKey(Company, on_delete=models.CASCADE)
    client_name = models.CharField(max_length=200)

    type = models.CharField(max_length=16, choices=PaymentType.choices)
    # Zero is allowed for discount-only records; statements skip them
    amount = models.DecimalField(max_digits=18, decimal_places=2)
    date = models.DateField()
    notes = models.TextField(blank=True, default="")
    description = models.TextField(blank=True, default="")

    # transaction_id of the ledger entry this payment settles
    linked_transaction_id = models.CharField(
        max_length=40, null=True, blank=True)

    # True when a received cheque was passed on to a third party
    # instead of cash actually moving
    is_endorsement = models.BooleanField(default=False)

    # Settlement discount granted together with this payment
    discount_amount = models.DecimalField(
        max_digits=18, decimal_places=2, default=Decimal("0.00")
    )

    created_at = models.DateTimeField(auto_now_add=True)

    # Enforce tenant scoping
    objects = TenantManager()

    class Meta:
        indexes = [
            models.Index(fields=["company", "client_name"],
                         name="payment_company_client_idx"),
            models.Index(fields=["company", "linked_transaction_id"],
                         name="payment_company_link_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(amount__gte=0)
                & models.Q(discount_amount__gte=0),
                name="payment_non_negative_amounts",
            ),
        ]

    def __str__(self):
        return f"{self.get_type_display()} {self.amount} ({self.client_name})"

    def clean(self):
        if self.amount is not None and self.amount < 0:
            raise ValidationError("Payment amount must be >= 0")
        if self.discount_amount is not None and self.discount_amount < 0:
            raise ValidationError("Discount amount must be >= 0")
        if self.amount == 0 and not self.discount_amount:
            raise ValidationError("Payment must carry an amount or a discount")

    # Payments are immutable once created; delete and re-record instead
    def save(self, *args, **kwargs):
        if not self._state.adding:
            raise ValidationError(
                "Payments cannot be edited; delete and record again")
        self.full_clean()
        return super().save(*args, **kwargs)
