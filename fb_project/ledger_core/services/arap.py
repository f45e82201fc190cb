import logging
import time
from dataclasses import dataclass
from decimal import Decimal

from django.core.exceptions import ValidationError
from django.db import OperationalError, transaction
from django.db.models import F

from ..conf import get_setting
from ..exceptions import (ARAPNotEnabled, ConcurrentUpdateError,
                          EntryNotFound, assert_non_negative)
from ..models import LedgerEntry
from ..money import ZERO, add, round_currency, subtract
from ..settlement import calculate_payment_status, calculate_remaining_balance
from .audit_helper import log_action

logger = logging.getLogger(__name__)

ADD = "add"
SUBTRACT = "subtract"
DIRECTIONS = (ADD, SUBTRACT)

# Columns the updater reads; everything it needs to recompute status
_SNAPSHOT_FIELDS = (
    "pk", "company_id", "is_arap_entry", "amount", "total_paid",
    "total_discount", "writeoff_amount", "version",
)


@dataclass(frozen=True)
class ARAPUpdateResult:
    entry_id: int
    total_paid: Decimal
    total_discount: Decimal
    writeoff_amount: Decimal
    remaining_balance: Decimal
    payment_status: str
    version: int


# ----------------------------
# Optimistic read-modify-write
# ----------------------------
def _read_entry(entry_id) -> dict:
    try:
        return LedgerEntry.objects.values(*_SNAPSHOT_FIELDS).get(pk=entry_id)
    except LedgerEntry.DoesNotExist:
        raise EntryNotFound(entry_id) from None


def _derived_fields(snapshot, total_paid, total_discount, writeoff_amount):
    return {
        "total_paid": total_paid,
        "total_discount": total_discount,
        "writeoff_amount": writeoff_amount,
        "remaining_balance": calculate_remaining_balance(
            snapshot["amount"], total_paid, total_discount, writeoff_amount),
        "payment_status": calculate_payment_status(
            total_paid, snapshot["amount"], total_discount, writeoff_amount),
    }


def _optimistic_update(entry_id, compute, *, action, user=None, audit=None):
    """
    Read the entry, let `compute(snapshot)` return the new column values,
    then write them only if nobody else wrote the entry in between
    (UPDATE ... WHERE version = <version read>). A lost race, or the
    database refusing the write lock (OperationalError), re-reads and
    tries again with backoff; after LEDGER_ARAP_MAX_RETRIES attempts the
    payment is reported as failed, never applied blindly.
    """
    max_attempts = max(1, int(get_setting("LEDGER_ARAP_MAX_RETRIES")))
    backoff = float(get_setting("LEDGER_ARAP_RETRY_BACKOFF"))

    for attempt in range(1, max_attempts + 1):
        try:
            with transaction.atomic():
                snapshot = _read_entry(entry_id)
                if not snapshot["is_arap_entry"]:
                    raise ARAPNotEnabled(entry_id)

                changes = compute(snapshot)

                # Conditional write: 0 rows means the version moved under us
                updated = LedgerEntry.objects.filter(
                    pk=entry_id, version=snapshot["version"]
                ).update(version=F("version") + 1, **changes)

                if updated:
                    result = ARAPUpdateResult(
                        entry_id=snapshot["pk"],
                        total_paid=changes["total_paid"],
                        total_discount=changes["total_discount"],
                        writeoff_amount=changes["writeoff_amount"],
                        remaining_balance=changes["remaining_balance"],
                        payment_status=str(changes["payment_status"]),
                        version=snapshot["version"] + 1,
                    )
                    # AUDIT LOG
                    log_action(
                        action=action,
                        object_type="LedgerEntry",
                        object_id=snapshot["pk"],
                        company=snapshot["company_id"],
                        user=user,
                        changes={
                            **(audit or {}),
                            "total_paid": str(result.total_paid),
                            "total_discount": str(result.total_discount),
                            "writeoff_amount": str(result.writeoff_amount),
                            "remaining_balance": str(result.remaining_balance),
                            "payment_status": result.payment_status,
                        },
                    )
                    logger.info(
                        "%s on ledger entry %s: paid=%s remaining=%s status=%s",
                        action, entry_id, result.total_paid,
                        result.remaining_balance, result.payment_status,
                    )
                    return result
            reason = f"version {snapshot['version']} moved"
        except OperationalError as exc:
            # Lock timeout or serialization failure: another writer holds
            # the row, same as losing the version check
            reason = str(exc)

        logger.warning(
            "%s on ledger entry %s lost a concurrent update "
            "(attempt %d/%d: %s)",
            action, entry_id, attempt, max_attempts, reason,
        )
        if attempt < max_attempts and backoff > 0:
            time.sleep(backoff * (2 ** (attempt - 1)))

    logger.error(
        "%s on ledger entry %s gave up after %d conflicting attempts",
        action, entry_id, max_attempts,
    )
    raise ConcurrentUpdateError(entry_id, max_attempts)


# ----------------------------
# Payment postings
# ----------------------------
def apply_payment(entry_id, amount, direction, *, discount_amount=ZERO,
                  user=None) -> ARAPUpdateResult:
    """
    Add (new payment) or subtract (deleted payment) `amount` on an AR/AP
    ledger entry and recompute remaining_balance / payment_status.

    `subtract` is the exact inverse of `add`. A subtract that would take
    total_paid (or total_discount) below zero means the payment was already
    reversed, and raises DataIntegrityViolation instead of clamping.
    """
    if direction not in DIRECTIONS:
        raise ValueError(
            f"direction must be one of {DIRECTIONS}, got {direction!r}")

    amount = round_currency(amount)
    discount_amount = round_currency(discount_amount)
    combine = add if direction == ADD else subtract

    def compute(snapshot):
        total_paid = assert_non_negative(
            combine(snapshot["total_paid"], amount),
            operation="arap_payment",
            entity_id=snapshot["pk"],
            entity_type="ledger_entry",
        )
        total_discount = assert_non_negative(
            combine(snapshot["total_discount"], discount_amount),
            operation="arap_discount",
            entity_id=snapshot["pk"],
            entity_type="ledger_entry",
        )
        return _derived_fields(
            snapshot, total_paid, total_discount,
            round_currency(snapshot["writeoff_amount"]),
        )

    return _optimistic_update(
        entry_id,
        compute,
        action=f"arap_payment_{direction}",
        user=user,
        audit={"amount": str(amount), "discount": str(discount_amount)},
    )


def find_entry_by_transaction_id(company, transaction_id):
    transaction_id = (transaction_id or "").strip()
    entry = None
    if transaction_id:
        entry = (
            LedgerEntry.objects.for_company(company)
            .filter(transaction_id=transaction_id)
            .only("pk")
            .first()
        )
    if entry is None:
        raise EntryNotFound(transaction_id)
    return entry


def apply_payment_by_transaction_id(company, transaction_id, amount,
                                    direction, **kwargs) -> ARAPUpdateResult:
    """Same as apply_payment, addressing the entry by its transaction id."""
    entry = find_entry_by_transaction_id(company, transaction_id)
    return apply_payment(entry.pk, amount, direction, **kwargs)


# ----------------------------
# Bad debt
# ----------------------------
def write_off_bad_debt(entry_id, amount, reason="", *, user=None):
    """Write off part or all of what is still outstanding on an entry."""
    amount = round_currency(amount)
    if amount <= ZERO:
        raise ValidationError("Write-off amount must be positive")

    def compute(snapshot):
        remaining = calculate_remaining_balance(
            snapshot["amount"], snapshot["total_paid"],
            snapshot["total_discount"], snapshot["writeoff_amount"],
        )
        if amount > remaining:
            raise ValidationError(
                f"Write-off ({amount}) exceeds the remaining balance "
                f"({remaining})")
        changes = _derived_fields(
            snapshot,
            round_currency(snapshot["total_paid"]),
            round_currency(snapshot["total_discount"]),
            add(snapshot["writeoff_amount"], amount),
        )
        if reason:
            changes["writeoff_reason"] = reason
        return changes

    return _optimistic_update(
        entry_id,
        compute,
        action="arap_writeoff",
        user=user,
        audit={"amount": str(amount), "reason": reason},
    )
