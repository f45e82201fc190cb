import datetime
import itertools
from decimal import Decimal

from ledger_core.constants import (ChequeStatus, ChequeType, EntryType,
                                   PaymentType)
from ledger_core.models import Cheque, Company, LedgerEntry, Payment

_ids = itertools.count(1)

DAY = datetime.date(2025, 3, 10)


def make_entry(**kwargs):
    """Unsaved LedgerEntry for the pure (no-DB) tests."""
    kwargs.setdefault("id", next(_ids))
    kwargs.setdefault("type", EntryType.INCOME)
    kwargs.setdefault("amount", Decimal("100.00"))
    kwargs.setdefault("date", DAY)
    kwargs.setdefault("associated_party", "Client A")
    kwargs["amount"] = Decimal(kwargs["amount"])
    return LedgerEntry(**kwargs)


def make_payment(**kwargs):
    """Unsaved Payment for the pure (no-DB) tests."""
    kwargs.setdefault("id", next(_ids))
    kwargs.setdefault("type", PaymentType.RECEIPT)
    kwargs.setdefault("amount", Decimal("50.00"))
    kwargs.setdefault("date", DAY)
    kwargs.setdefault("client_name", "Client A")
    kwargs["amount"] = Decimal(kwargs["amount"])
    return Payment(**kwargs)


def make_cheque(**kwargs):
    kwargs.setdefault("id", next(_ids))
    kwargs.setdefault("type", ChequeType.INCOMING)
    kwargs.setdefault("status", ChequeStatus.PENDING)
    kwargs.setdefault("amount", Decimal("100.00"))
    kwargs.setdefault("issue_date", DAY)
    kwargs.setdefault("client_name", "Client A")
    kwargs["amount"] = Decimal(kwargs["amount"])
    return Cheque(**kwargs)


def create_company(name="Test Factory", slug="test-factory"):
    return Company.objects.create(name=name, slug=slug)
