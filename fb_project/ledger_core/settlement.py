"""
Pure AR/AP settlement math shared by the models and the AR/AP updater.

An entry is settled by cash/cheque payments (total_paid), settlement
discounts (total_discount) and bad-debt write-offs (writeoff_amount).
"""
from .constants import PaymentStatus
from .money import ZERO, add, subtract


def settled_amount(total_paid, total_discount=ZERO, writeoff_amount=ZERO):
    return add(add(total_paid, total_discount), writeoff_amount)


def calculate_payment_status(total_paid, amount, total_discount=ZERO,
                             writeoff_amount=ZERO):
    """
    unpaid -> partial -> paid, driven only by what is left to settle.
    Over-settlement is still just "paid".
    """
    settled = settled_amount(total_paid, total_discount, writeoff_amount)
    remaining = subtract(amount, settled)

    if remaining <= ZERO:
        return PaymentStatus.PAID
    if settled > ZERO:
        return PaymentStatus.PARTIAL
    return PaymentStatus.UNPAID


def calculate_remaining_balance(amount, total_paid, total_discount=ZERO,
                                writeoff_amount=ZERO):
    # over-payment leaves nothing outstanding, it never reads as negative
    settled = settled_amount(total_paid, total_discount, writeoff_amount)
    remaining = subtract(amount, settled)
    return remaining if remaining > ZERO else ZERO
