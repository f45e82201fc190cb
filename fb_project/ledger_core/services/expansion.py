"""
Turn ledger entries and payments into signed statement rows.

Sign convention, from the client's point of view
(positive balance = the client owes us):

    income / sale                     debit  amount
    expense / purchase                credit amount
    loan given (origination)          debit  amount
    loan received (origination)       credit amount
    loan collected (settlement)       credit amount
    loan repaid (settlement)          debit  amount
    customer advance received         credit amount
    supplier advance paid             debit  amount
    discount / write-off on income    credit
    discount / write-off on expense   debit
    paid-from-advance note            no balance impact
    receipt payment                   credit amount
    disbursement payment              debit  amount
"""
from dataclasses import dataclass
from decimal import Decimal

from ..constants import LoanType, PaymentType
from ..money import ZERO, round_currency
from .classification import EntryKind, classify, get_loan_type, is_advance

# Row labels (StatementItem.entry_type) for rows that are not the entry itself
ADVANCE_LABEL = "advance"
LOAN_LABEL = "loan"
DISCOUNT_LABEL = "discount"
WRITEOFF_LABEL = "writeoff"
SUPPLIER_DISCOUNT_LABEL = "supplier_discount"
SUPPLIER_WRITEOFF_LABEL = "supplier_writeoff"
INFO_LABEL = "info"


@dataclass(frozen=True)
class StatementItem:
    id: str
    source: str  # "ledger" or "payment"
    date: object  # date or datetime
    is_payment: bool
    entry_type: str
    description: str
    debit: Decimal
    credit: Decimal
    balance: Decimal | None = None  # filled in by the statement assembler
    transaction_id: str | None = None
    category: str | None = None
    sub_category: str | None = None
    notes: str | None = None
    is_endorsement: bool = False

    @property
    def net(self) -> Decimal:
        return self.debit - self.credit


def _main_debit_credit(kind, entry):
    amount = round_currency(entry.amount)

    if kind.is_loan:
        loan_type = get_loan_type(entry.category)
        lent = loan_type == LoanType.RECEIVABLE
        if kind is EntryKind.LOAN_ORIGINATION:
            # we lent -> they owe us; we borrowed -> we owe them
            return (amount, ZERO) if lent else (ZERO, amount)
        # they paid us back -> credit; we paid them back -> debit
        return (ZERO, amount) if lent else (amount, ZERO)

    # Advances are inverted against their cash direction:
    # cash in from a customer means we now owe them goods
    if kind is EntryKind.CUSTOMER_ADVANCE:
        return ZERO, amount
    if kind is EntryKind.SUPPLIER_ADVANCE:
        return amount, ZERO

    if kind is EntryKind.INCOME:
        return amount, ZERO
    if kind is EntryKind.EXPENSE:
        return ZERO, amount
    return ZERO, ZERO


def _entry_label(kind, entry):
    if kind.is_advance:
        return ADVANCE_LABEL
    if kind.is_loan:
        return LOAN_LABEL
    return str(entry.type)


def is_linked_advance(entry) -> bool:
    # Advance created by a multi-allocation payment: the payment row
    # already carries the cash, so the entry contributes nothing
    return is_advance(entry) and bool(entry.linked_payment_id)


def expand_entry(entry, kind=None) -> list[StatementItem]:
    """
    Return the statement rows for one ledger entry, in display order:
    the entry itself, its discount, its write-off, then the informational
    "paid from advance" note. The entry is not modified.
    """
    if is_linked_advance(entry):
        return []

    kind = kind or classify(entry)
    debit, credit = _main_debit_credit(kind, entry)
    common = {
        "source": "ledger",
        "date": entry.date,
        "transaction_id": entry.transaction_id,
        "category": entry.category,
    }

    rows = [
        StatementItem(
            id=str(entry.pk),
            is_payment=False,
            entry_type=_entry_label(kind, entry),
            description=entry.description,
            sub_category=entry.sub_category,
            debit=debit,
            credit=credit,
            **common,
        )
    ]

    discount = round_currency(entry.total_discount)
    writeoff = round_currency(entry.writeoff_amount)

    # Only invoices/purchases carry settlement rows
    if kind is EntryKind.INCOME:
        # reduces what the client owes us
        if discount > ZERO:
            rows.append(StatementItem(
                id=f"{entry.pk}-discount", is_payment=True,
                entry_type=DISCOUNT_LABEL, description="Settlement discount",
                debit=ZERO, credit=discount, **common,
            ))
        if writeoff > ZERO:
            rows.append(StatementItem(
                id=f"{entry.pk}-writeoff", is_payment=True,
                entry_type=WRITEOFF_LABEL, description="Bad debt write-off",
                debit=ZERO, credit=writeoff, **common,
            ))
    elif kind is EntryKind.EXPENSE:
        # reduces what we owe the supplier
        if discount > ZERO:
            rows.append(StatementItem(
                id=f"{entry.pk}-discount", is_payment=True,
                entry_type=SUPPLIER_DISCOUNT_LABEL,
                description="Discount from supplier",
                debit=discount, credit=ZERO, **common,
            ))
        if writeoff > ZERO:
            rows.append(StatementItem(
                id=f"{entry.pk}-writeoff", is_payment=True,
                entry_type=SUPPLIER_WRITEOFF_LABEL,
                description="Waived by supplier",
                debit=writeoff, credit=ZERO, **common,
            ))

    from_advances = round_currency(entry.total_paid_from_advances)
    if from_advances > ZERO:
        # The advance entry already shows the full amount
        if kind is EntryKind.INCOME:
            note = f"Paid from customer advance ({from_advances})"
        else:
            note = f"Deducted from supplier advance ({from_advances})"
        rows.append(StatementItem(
            id=f"{entry.pk}-advance-payment", is_payment=True,
            entry_type=INFO_LABEL, description=note,
            debit=ZERO, credit=ZERO, **common,
        ))

    return rows


def entry_debit_credit(entry) -> tuple[Decimal, Decimal]:
    """Total (debit, credit) an entry contributes, sub-rows included."""
    debit = credit = ZERO
    for row in expand_entry(entry):
        debit += row.debit
        credit += row.credit
    return debit, credit


def index_by_transaction_id(entries) -> dict:
    # first entry wins when data holds duplicate ids
    index = {}
    for entry in entries:
        if entry.transaction_id:
            index.setdefault(entry.transaction_id, entry)
    return index


def is_suppressed_payment(payment, entries_by_txn) -> bool:
    if payment.amount is None or payment.amount <= 0:
        # discount-only records; the discount lives on the ledger entry
        return True
    if payment.linked_transaction_id:
        linked = entries_by_txn.get(payment.linked_transaction_id)
        # the advance entry already shows this cash movement
        if linked is not None and is_advance(linked):
            return True
    return False


def payment_row(payment, entries_by_txn) -> StatementItem | None:
    """The payment's statement row, or None when it must not be counted."""
    if is_suppressed_payment(payment, entries_by_txn):
        return None

    amount = round_currency(payment.amount)
    debit = amount if payment.type == PaymentType.DISBURSEMENT else ZERO
    credit = amount if payment.type == PaymentType.RECEIPT else ZERO

    return StatementItem(
        id=str(payment.pk),
        source="payment",
        date=payment.date,
        is_payment=True,
        entry_type=str(payment.type),
        description=payment.notes or payment.description or "Payment",
        notes=payment.notes,
        is_endorsement=bool(payment.is_endorsement),
        debit=debit,
        credit=credit,
    )
