import logging

from django.db import transaction

from ..exceptions import EntryNotFound
from ..models import LedgerEntry, Payment
from .arap import ADD, SUBTRACT, apply_payment

logger = logging.getLogger(__name__)


# ----------------------------
# Payment-related workflows
# ----------------------------
def linked_arap_entry(payment):
    """
    The AR/AP entry a payment settles, or None when the payment is not
    linked to one (free-standing payment, or linked to an advance / other
    untracked entry).
    """
    if not payment.linked_transaction_id:
        return None

    entry = (
        LedgerEntry.objects.for_company(payment.company_id)
        .filter(transaction_id=payment.linked_transaction_id)
        .only("pk", "is_arap_entry")
        .first()
    )
    if entry is None:
        raise EntryNotFound(payment.linked_transaction_id)
    if not entry.is_arap_entry:
        logger.debug(
            "payment %s links to untracked entry %s; AR/AP left as is",
            payment.pk, entry.pk,
        )
        return None
    return entry


def record_payment(*, company, user=None, **fields):
    """
    Create a payment and, when it settles an AR/AP entry, post it there.
    Both happen or neither does.
    Returns (payment, ARAPUpdateResult or None).
    """
    # Everything inside either succeeds
    # as one unit or rolls back if something fails
    with transaction.atomic():
        payment = Payment(company=company, **fields)
        payment.save()

        entry = linked_arap_entry(payment)
        result = None
        if entry is not None:
            result = apply_payment(
                entry.pk, payment.amount, ADD,
                discount_amount=payment.discount_amount, user=user,
            )
        return payment, result


def delete_payment(payment, user=None):
    """Reverse a payment's AR/AP effect and delete it, atomically."""
    with transaction.atomic():
        entry = linked_arap_entry(payment)
        result = None
        if entry is not None:
            result = apply_payment(
                entry.pk, payment.amount, SUBTRACT,
                discount_amount=payment.discount_amount, user=user,
            )
        payment.delete()
        return result
