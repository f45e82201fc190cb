import logging

from celery import shared_task

from .settlement import calculate_payment_status, calculate_remaining_balance

logger = logging.getLogger(__name__)


@shared_task  # register this function as a Celery task
def audit_arap_integrity(company_id):
    """
    Re-derive remaining_balance / payment_status of every AR/AP entry from
    its settlement totals and report the entries whose stored values drifted.
    Read-only: drift is a bug to investigate, not something to overwrite.
    """
    # import models lazily to avoid circular imports at module import time
    from .models import LedgerEntry

    inconsistent = []
    entries = LedgerEntry.objects.for_company(company_id).filter(
        is_arap_entry=True
    )
    for entry in entries.iterator():
        expected_remaining = calculate_remaining_balance(
            entry.amount, entry.total_paid, entry.total_discount,
            entry.writeoff_amount,
        )
        expected_status = calculate_payment_status(
            entry.total_paid, entry.amount, entry.total_discount,
            entry.writeoff_amount,
        )
        if (entry.remaining_balance != expected_remaining
                or entry.payment_status != expected_status):
            logger.error(
                "AR/AP drift on ledger entry %s: stored %s/%s, expected %s/%s",
                entry.pk, entry.remaining_balance, entry.payment_status,
                expected_remaining, expected_status,
            )
            inconsistent.append(entry.pk)

    logger.info(
        "AR/AP integrity check for company %s: %d inconsistent entries",
        company_id, len(inconsistent),
    )
    return inconsistent
