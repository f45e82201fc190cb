from decimal import Decimal

from django.core.exceptions import ValidationError
from django.db import models

from ..managers import TenantManager
from .company import Company


# ---------- Client ----------
# A customer, supplier or lender the factory keeps a running account with
class Client(models.Model):
    # Multi-tenant: every client belongs to a single company.
    company = models.ForeignKey(Company, on_delete=models.CASCADE)

    # Ledger entries, payments and cheques point at the client by this name
    name = models.CharField(max_length=200)

    phone = models.CharField(max_length=32, blank=True, default="")
    email = models.EmailField(null=True, blank=True)

    # Opening balance carried in from before the books started
    """ Positive = the client owes us,
        negative = we owe the client. """
    balance = models.DecimalField(
        max_digits=18, decimal_places=2, default=Decimal("0.00")
    )

    created_at = models.DateTimeField(auto_now_add=True)

    # Enforce tenant scoping
    objects = TenantManager()

    class Meta:
        indexes = [
            models.Index(fields=["company", "name"],
                         name="client_company_name_idx"),
        ]
        # Enforce uniqueness per tenant
        constraints = [
            models.UniqueConstraint(
                fields=["company", "name"], name="uq_client_company_name"
            ),
        ]

    # Display client name in admin/UI
    def __str__(self):
        return self.name

    def clean(self):
        # Names are the join key for statements, so no stray whitespace
        if self.name and self.name != self.name.strip():
            raise ValidationError("Client name must not start or end with spaces")
        return super().clean()

    def save(self, *args, **kwargs):
        self.full_clean()  # run validations before saving
        return super().save(*args, **kwargs)
