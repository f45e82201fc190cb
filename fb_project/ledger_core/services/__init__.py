from .arap import (ARAPUpdateResult, apply_payment,
                   apply_payment_by_transaction_id, write_off_bad_debt)
from .balance import LedgerMetrics, calculate_client_balance, ledger_metrics
from .cheques import (ChequeProjection, filter_pending_cheques,
                      has_pending_cheques, project_after_cheques)
from .classification import (EntryKind, classify, get_loan_type, is_advance,
                             is_excluded_from_pnl, is_initial_loan,
                             is_loan_transaction)
from .expansion import StatementItem, expand_entry
from .payment import delete_payment, record_payment
from .statement import Statement, build_client_statement, build_statement

__all__ = [
    "ARAPUpdateResult", "apply_payment", "apply_payment_by_transaction_id",
    "write_off_bad_debt",
    "LedgerMetrics", "calculate_client_balance", "ledger_metrics",
    "ChequeProjection", "filter_pending_cheques", "has_pending_cheques",
    "project_after_cheques",
    "EntryKind", "classify", "get_loan_type", "is_advance",
    "is_excluded_from_pnl", "is_initial_loan", "is_loan_transaction",
    "StatementItem", "expand_entry",
    "delete_payment", "record_payment",
    "Statement", "build_client_statement", "build_statement",
]
