from decimal import Decimal

from ..constants import (CUSTOMER_ADVANCE, LOAN_COLLECTION, LOAN_GRANTED,
                         LOAN_OBTAINED, LOANS_GIVEN, LOANS_RECEIVED,
                         EntryType, PaymentType)
from ..services import calculate_client_balance, ledger_metrics
from .helpers import make_entry, make_payment

D = Decimal


def test_client_balance_signs():
    entries = [
        make_entry(type=EntryType.INCOME, amount="1000.00"),
        make_entry(type=EntryType.EXPENSE, amount="250.00"),
        make_entry(type=EntryType.INCOME, category=CUSTOMER_ADVANCE,
                   amount="100.00"),
    ]
    payments = [
        make_payment(type=PaymentType.RECEIPT, amount="300.00"),
        make_payment(type=PaymentType.DISBURSEMENT, amount="50.00"),
    ]
    # 20 + 1000 - 250 - 100 - 300 + 50
    assert calculate_client_balance(D("20.00"), entries, payments) == D(
        "420.00")


def test_client_balance_negative_means_we_owe():
    entries = [make_entry(type=EntryType.EXPENSE, amount="80.00")]
    assert calculate_client_balance(0, entries, []) == D("-80.00")


def test_ledger_metrics():
    entries = [
        make_entry(type=EntryType.INCOME, amount="1000.00"),
        make_entry(type=EntryType.REVENUE, amount="50.00"),
        make_entry(type=EntryType.EXPENSE, amount="400.00"),
        # advances and loan settlements are not sales or purchases
        make_entry(type=EntryType.INCOME, category=CUSTOMER_ADVANCE,
                   amount="999.00"),
        make_entry(type=EntryType.INCOME, category=LOANS_GIVEN,
                   sub_category=LOAN_COLLECTION, amount="100.00"),
        # tracked loan: only what is still outstanding counts
        make_entry(type=EntryType.EXPENSE, category=LOANS_GIVEN,
                   sub_category=LOAN_GRANTED, amount="500.00",
                   is_arap_entry=True, remaining_balance=D("300.00")),
        make_entry(type=EntryType.INCOME, category=LOANS_RECEIVED,
                   sub_category=LOAN_OBTAINED, amount="700.00"),
    ]
    metrics = ledger_metrics(entries)

    assert metrics.total_sales == D("1050.00")
    assert metrics.total_purchases == D("400.00")
    assert metrics.loans_receivable == D("300.00")
    assert metrics.loans_payable == D("700.00")
