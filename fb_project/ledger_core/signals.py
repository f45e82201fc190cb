from django.core.exceptions import ValidationError
from django.db.models.signals import pre_delete
from django.dispatch import receiver

from .models import LedgerEntry

"""Block ledger entry deletion while payments still point at it."""


# pre_delete signal auto-fires just before Django deletes a model instance
# it's connected to the LedgerEntry model.
# LedgerEntry.delete() already refuses; this catches queryset deletes
# (LedgerEntry.objects.filter(...).delete()), which skip the model method
@receiver(pre_delete, sender=LedgerEntry)
def prevent_delete_entry_with_payments(sender, instance, **kwargs):
    # Deleting it would leave those payments' AR/AP reversal nowhere to go
    if instance.has_linked_payments():
        raise ValidationError(
            "Cannot delete a ledger entry with linked payments.")
