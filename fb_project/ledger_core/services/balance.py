from dataclasses import dataclass
from decimal import Decimal

from ..constants import LoanType
from ..money import ZERO, add, round_currency, subtract
from .classification import EntryKind, classify, get_loan_type
from .expansion import (entry_debit_credit, index_by_transaction_id,
                        payment_row)


@dataclass(frozen=True)
class LedgerMetrics:
    total_sales: Decimal
    total_purchases: Decimal
    loans_receivable: Decimal
    loans_payable: Decimal


def calculate_client_balance(opening_balance, entries, payments) -> Decimal:
    """
    Full-history balance of a client: opening + sum(debit - credit).
    Positive = the client owes us, negative = we owe the client.
    Same rows and signs as the statement, without sorting or filtering.
    """
    entries = list(entries)
    entries_by_txn = index_by_transaction_id(entries)

    total_debit = total_credit = ZERO
    for entry in entries:
        debit, credit = entry_debit_credit(entry)
        total_debit = add(total_debit, debit)
        total_credit = add(total_credit, credit)

    for payment in payments:
        row = payment_row(payment, entries_by_txn)
        if row is not None:
            total_debit = add(total_debit, row.debit)
            total_credit = add(total_credit, row.credit)

    return subtract(add(round_currency(opening_balance), total_debit),
                    total_credit)


def ledger_metrics(entries) -> LedgerMetrics:
    """
    Headline figures for a client's ledger.
    Sales/purchases cover regular income and expense only (no loans, no
    advances). Loan figures are what is still outstanding on loans opened
    with the client.
    """
    sales = purchases = receivable = payable = ZERO

    for entry in entries:
        kind = classify(entry)
        if kind is EntryKind.LOAN_ORIGINATION:
            outstanding = entry.amount
            if entry.is_arap_entry and entry.remaining_balance is not None:
                outstanding = entry.remaining_balance
            if get_loan_type(entry.category) == LoanType.RECEIVABLE:
                receivable = add(receivable, outstanding)
            else:
                payable = add(payable, outstanding)
        elif kind is EntryKind.INCOME:
            sales = add(sales, entry.amount)
        elif kind is EntryKind.EXPENSE:
            purchases = add(purchases, entry.amount)

    return LedgerMetrics(
        total_sales=sales,
        total_purchases=purchases,
        loans_receivable=receivable,
        loans_payable=payable,
    )
