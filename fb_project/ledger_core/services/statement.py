import datetime
import logging
from dataclasses import dataclass, replace
from decimal import Decimal

from ..models import LedgerEntry, Payment
from ..money import ZERO, add, round_currency, subtract
from .expansion import (StatementItem, expand_entry, index_by_transaction_id,
                        payment_row)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DateRange:
    oldest: datetime.date
    newest: datetime.date


@dataclass(frozen=True)
class Statement:
    opening_balance: Decimal
    rows: tuple  # filtered rows, each with its running balance
    total_debit: Decimal
    total_credit: Decimal
    final_balance: Decimal
    all_rows: tuple = ()  # every row, unfiltered, no balances
    date_range: DateRange | None = None


def _day(value) -> datetime.date:
    # Window bounds compare by calendar day; a datetime counts as its date
    if isinstance(value, datetime.datetime):
        return value.date()
    return value


def _moment(value):
    # Sort key: full timestamp; a bare date sorts at the start of its day
    if isinstance(value, datetime.datetime):
        return value.date(), value.time()
    return value, datetime.time.min


def collect_rows(entries, payments) -> list[StatementItem]:
    """
    Expand every entry, add every payment that is not a double count,
    and sort chronologically (date, then time of day for datetimes). The
    sort is stable: rows with the same timestamp keep their input order,
    entry rows before payment rows.
    """
    entries = list(entries)
    entries_by_txn = index_by_transaction_id(entries)

    rows = []
    for entry in entries:
        rows.extend(expand_entry(entry))
    for payment in payments:
        row = payment_row(payment, entries_by_txn)
        if row is not None:
            rows.append(row)

    rows.sort(key=lambda r: _moment(r.date))
    return rows


def get_date_range(rows) -> DateRange | None:
    days = [_day(r.date) for r in rows]
    if not days:
        return None
    return DateRange(oldest=min(days), newest=max(days))


def build_statement(entries, payments, opening_seed=ZERO,
                    date_from=None, date_to=None) -> Statement:
    """
    Assemble a client statement.

    opening_balance = opening_seed + sum(debit - credit) of every row dated
    before `date_from` (or just opening_seed without a `date_from`).
    The window [date_from, date_to] is inclusive on both days; a missing
    bound leaves that side open. Always:

        final_balance == opening_balance + total_debit - total_credit
    """
    all_rows = collect_rows(entries, payments)
    day_from = _day(date_from) if date_from is not None else None
    day_to = _day(date_to) if date_to is not None else None

    opening_balance = round_currency(opening_seed)
    if day_from is not None:
        for row in all_rows:
            if _day(row.date) < day_from:
                opening_balance = add(opening_balance, row.net)

    def in_window(row):
        day = _day(row.date)
        if day_from is not None and day < day_from:
            return False
        if day_to is not None and day > day_to:
            return False
        return True

    # Running balance starts from the opening balance
    total_debit = total_credit = ZERO
    running = opening_balance
    rows = []
    for row in filter(in_window, all_rows):
        total_debit = add(total_debit, row.debit)
        total_credit = add(total_credit, row.credit)
        running = add(running, subtract(row.debit, row.credit))
        rows.append(replace(row, balance=running))

    logger.debug(
        "statement: %d of %d rows in window %s..%s, opening=%s final=%s",
        len(rows), len(all_rows), day_from, day_to, opening_balance, running,
    )

    return Statement(
        opening_balance=opening_balance,
        rows=tuple(rows),
        total_debit=total_debit,
        total_credit=total_credit,
        final_balance=running,
        all_rows=tuple(all_rows),
        date_range=get_date_range(all_rows),
    )


def client_records(client):
    """(entries, payments) booked against a client, oldest first."""
    entries = (
        LedgerEntry.objects.for_party(client.company_id, client.name)
        .order_by("date", "created_at", "pk")
    )
    payments = (
        Payment.objects.for_party(client.company_id, client.name)
        .order_by("date", "created_at", "pk")
    )
    return list(entries), list(payments)


def build_client_statement(client, date_from=None, date_to=None) -> Statement:
    """Load a client's entries and payments and build their statement."""
    entries, payments = client_records(client)
    return build_statement(
        entries, payments, client.balance,
        date_from=date_from, date_to=date_to,
    )
