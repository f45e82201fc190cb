from django.db import models


# ---------- Tenant / Company ----------
class Company(models.Model):

    """The factory whose books are being kept (tenant)"""
    # Store company's full display name
    name = models.CharField(max_length=200)

    slug = models.SlugField(  # A URL-friendly identifier
        max_length=80, unique=True  # no two companies can have the same slug
    )

    # Every amount in this company's books is in this currency
    currency_code = models.CharField(max_length=10, default="JOD")

    # Store timestamp when the record is first created
    created_at = models.DateTimeField(auto_now_add=True)

    # Meta options
    class Meta:
        verbose_name_plural = "companies"

    # String Representation
    def __str__(self):
        return self.name
