from decimal import Decimal

import pytest

from ..constants import (CUSTOMER_ADVANCE, LOAN_COLLECTION, LOAN_GRANTED,
                         LOAN_OBTAINED, LOAN_REPAYMENT, LOANS_GIVEN,
                         LOANS_RECEIVED, SUPPLIER_ADVANCE, EntryType,
                         PaymentType)
from ..services.expansion import (entry_debit_credit, expand_entry,
                                  index_by_transaction_id, payment_row)
from .helpers import make_entry, make_payment

D = Decimal


# (entry kwargs, expected debit, expected credit) for a 100.00 entry
SIGN_TABLE = [
    ({"type": EntryType.INCOME}, "100.00", "0.00"),
    ({"type": EntryType.EXPENSE}, "0.00", "100.00"),
    ({"type": EntryType.EXPENSE, "category": LOANS_GIVEN,
      "sub_category": LOAN_GRANTED}, "100.00", "0.00"),
    ({"type": EntryType.INCOME, "category": LOANS_RECEIVED,
      "sub_category": LOAN_OBTAINED}, "0.00", "100.00"),
    ({"type": EntryType.INCOME, "category": LOANS_GIVEN,
      "sub_category": LOAN_COLLECTION}, "0.00", "100.00"),
    ({"type": EntryType.EXPENSE, "category": LOANS_RECEIVED,
      "sub_category": LOAN_REPAYMENT}, "100.00", "0.00"),
    ({"type": EntryType.INCOME, "category": CUSTOMER_ADVANCE},
     "0.00", "100.00"),
    ({"type": EntryType.EXPENSE, "category": SUPPLIER_ADVANCE},
     "100.00", "0.00"),
    ({"type": EntryType.EQUITY}, "0.00", "0.00"),
]


@pytest.mark.parametrize("fields,debit,credit", SIGN_TABLE)
def test_entry_sign_table(fields, debit, credit):
    rows = expand_entry(make_entry(amount="100.00", **fields))
    assert len(rows) == 1
    assert rows[0].debit == D(debit)
    assert rows[0].credit == D(credit)


def test_row_labels():
    sale = make_entry(type=EntryType.INCOME)
    loan = make_entry(type=EntryType.EXPENSE, category=LOANS_GIVEN,
                      sub_category=LOAN_GRANTED)
    advance = make_entry(type=EntryType.INCOME, category=CUSTOMER_ADVANCE)

    assert expand_entry(sale)[0].entry_type == "income"
    assert expand_entry(loan)[0].entry_type == "loan"
    assert expand_entry(advance)[0].entry_type == "advance"


def test_income_discount_and_writeoff_rows_are_credits():
    entry = make_entry(type=EntryType.INCOME, amount="1000.00",
                       total_discount=D("50.00"), writeoff_amount=D("150.00"))
    rows = expand_entry(entry)

    assert [r.entry_type for r in rows] == ["income", "discount", "writeoff"]
    assert rows[1].id == f"{entry.pk}-discount"
    assert (rows[1].debit, rows[1].credit) == (D("0.00"), D("50.00"))
    assert (rows[2].debit, rows[2].credit) == (D("0.00"), D("150.00"))
    assert entry_debit_credit(entry) == (D("1000.00"), D("200.00"))


def test_expense_discount_and_writeoff_rows_are_debits():
    entry = make_entry(type=EntryType.EXPENSE, amount="800.00",
                       total_discount=D("30.00"), writeoff_amount=D("20.00"))
    rows = expand_entry(entry)

    assert [r.entry_type for r in rows] == [
        "expense", "supplier_discount", "supplier_writeoff"]
    assert (rows[1].debit, rows[1].credit) == (D("30.00"), D("0.00"))
    assert (rows[2].debit, rows[2].credit) == (D("20.00"), D("0.00"))


def test_loans_never_get_discount_rows():
    entry = make_entry(type=EntryType.EXPENSE, category=LOANS_GIVEN,
                       sub_category=LOAN_GRANTED, total_discount=D("10.00"))
    assert len(expand_entry(entry)) == 1


def test_paid_from_advance_row_is_informational():
    entry = make_entry(type=EntryType.INCOME, amount="500.00",
                       total_paid_from_advances=D("200.00"))
    rows = expand_entry(entry)

    assert len(rows) == 2
    info = rows[1]
    assert info.entry_type == "info"
    assert info.id == f"{entry.pk}-advance-payment"
    assert (info.debit, info.credit) == (D("0.00"), D("0.00"))
    assert "200.00" in info.description


def test_linked_advance_contributes_nothing():
    advance = make_entry(type=EntryType.INCOME, category=CUSTOMER_ADVANCE,
                         linked_payment_id="77")
    assert expand_entry(advance) == []


def test_expansion_does_not_modify_the_entry():
    entry = make_entry(type=EntryType.INCOME, total_discount=D("5.00"))
    expand_entry(entry)
    assert entry.total_discount == D("5.00")
    assert entry.amount == D("100.00")


def test_payment_rows():
    receipt = make_payment(type=PaymentType.RECEIPT, amount="250.00",
                           notes="Cash")
    disbursement = make_payment(type=PaymentType.DISBURSEMENT,
                                amount="75.00")

    row = payment_row(receipt, {})
    assert (row.debit, row.credit) == (D("0.00"), D("250.00"))
    assert row.description == "Cash"
    assert row.is_payment
    assert row.entry_type == "receipt"

    row = payment_row(disbursement, {})
    assert (row.debit, row.credit) == (D("75.00"), D("0.00"))
    assert row.description == "Payment"


def test_zero_amount_payment_is_skipped():
    payment = make_payment(amount="0.00", discount_amount=D("25.00"))
    assert payment_row(payment, {}) is None


def test_payment_linked_to_advance_is_skipped():
    advance = make_entry(type=EntryType.INCOME, category=CUSTOMER_ADVANCE,
                         transaction_id="TXN-ADV-1")
    payment = make_payment(amount="300.00",
                           linked_transaction_id="TXN-ADV-1")
    index = index_by_transaction_id([advance])
    assert payment_row(payment, index) is None


def test_payment_linked_to_invoice_is_kept():
    invoice = make_entry(type=EntryType.INCOME, transaction_id="TXN-INV-1")
    payment = make_payment(amount="40.00", linked_transaction_id="TXN-INV-1")
    index = index_by_transaction_id([invoice])
    assert payment_row(payment, index).credit == D("40.00")


def test_index_keeps_first_duplicate():
    first = make_entry(transaction_id="DUP")
    second = make_entry(transaction_id="DUP")
    assert index_by_transaction_id([first, second])["DUP"] is first
