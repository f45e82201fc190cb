"""
Classification rules for ledger entries.

Every entry is tagged with exactly one EntryKind, checked in this fixed
priority order:

    1. loan      (category is a loan category)
    2. advance   (category is a customer/supplier advance)
    3. income / expense (by entry type)

so an entry that matches both the loan and the advance rule is still
classified one way only (as a loan). Both rules read the single
`category` field today, so only a widened predicate can make them
overlap. Unknown categories fall through to income/expense by type; an
entry whose type is neither (equity movements, bad data) is UNCLASSIFIED
and has no balance impact.
"""
import enum

from ..constants import (ADVANCE_CATEGORIES, CUSTOMER_ADVANCE,
                         EXCLUDED_CATEGORIES, INCOME_TYPES,
                         INITIAL_LOAN_SUBCATEGORIES, LOAN_CATEGORIES,
                         EntryType, LoanType)


class EntryKind(enum.Enum):
    INCOME = "income"
    EXPENSE = "expense"
    LOAN_ORIGINATION = "loan_origination"
    LOAN_SETTLEMENT = "loan_settlement"
    CUSTOMER_ADVANCE = "customer_advance"
    SUPPLIER_ADVANCE = "supplier_advance"
    UNCLASSIFIED = "unclassified"

    @property
    def is_loan(self):
        return self in (EntryKind.LOAN_ORIGINATION, EntryKind.LOAN_SETTLEMENT)

    @property
    def is_advance(self):
        return self in (EntryKind.CUSTOMER_ADVANCE, EntryKind.SUPPLIER_ADVANCE)


def is_income_type(entry_type) -> bool:
    return entry_type in INCOME_TYPES


def is_expense_type(entry_type) -> bool:
    return entry_type == EntryType.EXPENSE


def is_advance(entry) -> bool:
    return entry.category in ADVANCE_CATEGORIES


def is_loan_transaction(entry_type, category) -> bool:
    # The loan category decides; the entry type is accepted for
    # call-site symmetry but loans are booked under income/expense types too
    return category in LOAN_CATEGORIES


def is_initial_loan(sub_category) -> bool:
    """True for loan origination, False for collections/repayments."""
    return sub_category in INITIAL_LOAN_SUBCATEGORIES


def get_loan_type(category) -> LoanType | None:
    return LOAN_CATEGORIES.get(category)


def is_excluded_from_pnl(entry) -> bool:
    return (
        entry.type == EntryType.EQUITY
        or entry.category in EXCLUDED_CATEGORIES
    )


def classify(entry) -> EntryKind:
    if is_loan_transaction(entry.type, entry.category):
        if is_initial_loan(entry.sub_category):
            return EntryKind.LOAN_ORIGINATION
        return EntryKind.LOAN_SETTLEMENT

    if is_advance(entry):
        if entry.category == CUSTOMER_ADVANCE:
            return EntryKind.CUSTOMER_ADVANCE
        return EntryKind.SUPPLIER_ADVANCE

    if is_income_type(entry.type):
        return EntryKind.INCOME
    if is_expense_type(entry.type):
        return EntryKind.EXPENSE
    return EntryKind.UNCLASSIFIED
