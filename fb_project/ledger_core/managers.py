from django.db import models


# -----------------------------------------
# Enforce tenant scoping across all models
# that belong to a company (factory)
# -----------------------------------------
class TenantQuerySet(models.QuerySet):
    def for_company(self, company):  # accepts a Company or its pk
        return self.filter(company=company)

    def for_party(self, company, party_name):
        # Ledger rows, payments and cheques reference a client by name,
        # so "the client's records" is a name match inside one company
        field = getattr(self.model, "PARTY_FIELD", "client_name")
        return self.filter(company=company, **{field: party_name})

    def arap_open(self, company):
        # AR/AP entries that still carry an unsettled remainder
        return self.filter(
            company=company, is_arap_entry=True
        ).exclude(payment_status="paid")


# Attach TenantQuerySet to .objects
class TenantManager(models.Manager.from_queryset(TenantQuerySet)):
    # every model using TenantManager can call:
    # LedgerEntry.objects.for_company(company)
    # Payment.objects.for_party(company, "Client name")
    pass
