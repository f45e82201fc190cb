from decimal import Decimal

from django.core.exceptions import ValidationError
from django.db import models

from ..constants import EntryType, PaymentStatus
from ..managers import TenantManager
from ..settlement import calculate_payment_status, calculate_remaining_balance
from .company import Company
from .payment import Payment


class LedgerEntry(models.Model):  # One bookkeeping record (sale, purchase, loan, advance...)

    # Client-facing queries match on associated_party
    PARTY_FIELD = "associated_party"

    # Entry belongs to one company (multi-tenant)
    company = models.ForeignKey(Company, on_delete=models.CASCADE)

    # External correlation key (e.g. "TXN-20250115-093012-042")
    # Payments point back at an entry through it
    transaction_id = models.CharField(max_length=40, null=True, blank=True)

    description = models.TextField(blank=True, default="")
    type = models.CharField(max_length=16, choices=EntryType.choices)
    # Always positive; the direction comes from type/category
    amount = models.DecimalField(max_digits=18, decimal_places=2)
    date = models.DateField()

    # category / sub_category drive classification (loan, advance, ...)
    category = models.CharField(max_length=100, blank=True, default="")
    sub_category = models.CharField(max_length=100, blank=True, default="")

    # Client name this entry is booked against
    associated_party = models.CharField(max_length=200, blank=True, default="")
    reference = models.CharField(max_length=64, blank=True, default="")
    notes = models.TextField(blank=True, default="")

    # Settlements that are not cash
    total_discount = models.DecimalField(
        max_digits=18, decimal_places=2, default=Decimal("0.00")
    )
    writeoff_amount = models.DecimalField(
        max_digits=18, decimal_places=2, default=Decimal("0.00")
    )
    writeoff_reason = models.CharField(max_length=255, blank=True, default="")

    # Part of this invoice covered by an earlier advance (informational)
    total_paid_from_advances = models.DecimalField(
        max_digits=18, decimal_places=2, default=Decimal("0.00")
    )

    # Set when a multi-allocation payment created this entry;
    # the payment already carries the cash movement
    linked_payment_id = models.CharField(max_length=64, null=True, blank=True)

    # ---------- AR/AP tracking (opt-in per entry) ----------
    is_arap_entry = models.BooleanField(default=False)
    total_paid = models.DecimalField(
        max_digits=18, decimal_places=2, default=Decimal("0.00")
    )
    remaining_balance = models.DecimalField(
        max_digits=18, decimal_places=2, default=Decimal("0.00")
    )
    payment_status = models.CharField(
        max_length=10, choices=PaymentStatus.choices,
        default=PaymentStatus.UNPAID,
    )
    """ Workflow:
        unpaid  = nothing settled yet.
        partial = something settled, something left.
        paid    = fully settled (or over-settled).
        Only ledger_core.services.arap moves an entry between them. """

    # Optimistic-concurrency token, bumped on every AR/AP write
    version = models.PositiveIntegerField(default=1)

    created_at = models.DateTimeField(auto_now_add=True)

    # Enforce tenant scoping
    objects = TenantManager()

    class Meta:
        verbose_name_plural = "ledger entries"
        indexes = [
            models.Index(fields=["company", "associated_party"],
                         name="ledger_company_party_idx"),
            models.Index(fields=["company", "transaction_id"],
                         name="ledger_company_txn_idx"),
        ]

        constraints = [
            # A transaction id identifies at most one entry per company
            models.UniqueConstraint(
                fields=["company", "transaction_id"],
                condition=models.Q(transaction_id__isnull=False),
                name="uq_ledger_company_txn",
            ),
            models.CheckConstraint(
                condition=models.Q(amount__gt=0),
                name="ledger_amount_positive",
            ),
            # Settlement totals can never go below zero
            models.CheckConstraint(
                condition=models.Q(total_paid__gte=0)
                & models.Q(total_discount__gte=0)
                & models.Q(writeoff_amount__gte=0),
                name="ledger_settlements_non_negative",
            ),
        ]

    def __str__(self):
        return f"{self.transaction_id or self.pk} {self.type} {self.amount}"

    def clean(self):
        if self.amount is not None and self.amount <= 0:
            raise ValidationError("Amount must be positive")

        for field in ("total_discount", "writeoff_amount",
                      "total_paid_from_advances", "total_paid"):
            value = getattr(self, field)
            if value is not None and value < 0:
                raise ValidationError(f"{field} must be >= 0")

        if self.transaction_id is not None and not self.transaction_id.strip():
            # blank ids would all collide with each other
            self.transaction_id = None

    """ Keep derived AR/AP fields consistent with the settlement totals """

    def refresh_arap_fields(self):
        if not self.is_arap_entry:
            return
        self.remaining_balance = calculate_remaining_balance(
            self.amount, self.total_paid, self.total_discount,
            self.writeoff_amount,
        )
        self.payment_status = calculate_payment_status(
            self.total_paid, self.amount, self.total_discount,
            self.writeoff_amount,
        )

    def has_linked_payments(self):
        if not self.transaction_id:
            return False
        return Payment.objects.filter(
            company_id=self.company_id,
            linked_transaction_id=self.transaction_id,
        ).exists()

    def save(self, *args, **kwargs):
        # New entries start with derived fields computed from their amount;
        # after that only the AR/AP updater touches them
        if self._state.adding:
            self.refresh_arap_fields()
        self.full_clean()  # will trigger clean()
        return super().save(*args, **kwargs)

    # Checked here, before Django opens its delete transaction, so a refused
    # delete leaves the caller's transaction usable
    def delete(self, *args, **kwargs):
        if self.has_linked_payments():
            raise ValidationError(
                "Cannot delete a ledger entry with linked payments.")
        return super().delete(*args, **kwargs)
