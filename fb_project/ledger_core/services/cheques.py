from dataclasses import dataclass
from decimal import Decimal

from ..constants import ChequeStatus, ChequeType
from ..money import ZERO, add, round_currency, subtract


@dataclass(frozen=True)
class ChequeProjection:
    balance_after_cheques: Decimal
    incoming_total: Decimal
    outgoing_total: Decimal
    pending: tuple = ()


def filter_pending_cheques(cheques):
    """
    Pending cheques, excluding endorsed ones: an endorsed cheque already
    appears on the statement as an endorsement payment.
    """
    return [
        c for c in cheques
        if c.status == ChequeStatus.PENDING and not c.is_endorsed_cheque
    ]


def has_pending_cheques(cheques) -> bool:
    return bool(filter_pending_cheques(cheques))


def project_after_cheques(final_balance, cheques) -> ChequeProjection:
    """
    Balance expected once every pending cheque clears.
    Incoming cheques reduce what the client owes us,
    outgoing cheques reduce what we owe the client.
    """
    pending = filter_pending_cheques(cheques)

    incoming_total = outgoing_total = ZERO
    for cheque in pending:
        if cheque.type == ChequeType.INCOMING:
            incoming_total = add(incoming_total, cheque.amount)
        elif cheque.type == ChequeType.OUTGOING:
            outgoing_total = add(outgoing_total, cheque.amount)

    balance = add(subtract(round_currency(final_balance), incoming_total),
                  outgoing_total)
    return ChequeProjection(
        balance_after_cheques=balance,
        incoming_total=incoming_total,
        outgoing_total=outgoing_total,
        pending=tuple(pending),
    )
