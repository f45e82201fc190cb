from django.db import models


# ---------- Ledger entry types ----------
class EntryType(models.TextChoices):
    INCOME = "income", "Income"
    # Older records were saved with "revenue"; treated exactly like income
    REVENUE = "revenue", "Revenue (legacy)"
    EXPENSE = "expense", "Expense"
    # Owner capital in / drawings out: moves cash, never profit
    EQUITY = "equity", "Equity movement"
    LOAN = "loan", "Loan"


INCOME_TYPES = frozenset({EntryType.INCOME, EntryType.REVENUE})


# ---------- AR/AP ----------
class PaymentStatus(models.TextChoices):
    UNPAID = "unpaid", "Unpaid"
    PARTIAL = "partial", "Partially paid"
    PAID = "paid", "Paid"


class LoanType(models.TextChoices):
    RECEIVABLE = "receivable", "Receivable (we lent)"
    PAYABLE = "payable", "Payable (we borrowed)"


# ---------- Payments & cheques ----------
class PaymentType(models.TextChoices):
    RECEIPT = "receipt", "Receipt"  # cash in from the client
    DISBURSEMENT = "disbursement", "Disbursement"  # cash out to the client


class ChequeType(models.TextChoices):
    INCOMING = "incoming", "Incoming"
    OUTGOING = "outgoing", "Outgoing"


class ChequeStatus(models.TextChoices):
    PENDING = "pending", "Pending"
    CLEARED = "cleared", "Cleared"
    BOUNCED = "bounced", "Bounced"
    ENDORSED = "endorsed", "Endorsed"
    RETURNED = "returned", "Returned"


# ---------- Categories ----------
# Categories are free text on the entry; only these carry special meaning
CUSTOMER_ADVANCE = "customer_advance"
SUPPLIER_ADVANCE = "supplier_advance"
LOANS_GIVEN = "loans_given"
LOANS_RECEIVED = "loans_received"
CAPITAL = "capital"
OWNER_EQUITY = "owner_equity"

ADVANCE_CATEGORIES = frozenset({CUSTOMER_ADVANCE, SUPPLIER_ADVANCE})

# loan category -> which side of the books the loan sits on
LOAN_CATEGORIES = {
    LOANS_GIVEN: LoanType.RECEIVABLE,
    LOANS_RECEIVED: LoanType.PAYABLE,
}

# Sub-categories that open a loan; every other loan sub-category
# (loan_collection, loan_repayment) settles one
LOAN_GRANTED = "loan_granted"
LOAN_OBTAINED = "loan_obtained"
LOAN_COLLECTION = "loan_collection"
LOAN_REPAYMENT = "loan_repayment"
INITIAL_LOAN_SUBCATEGORIES = frozenset({LOAN_GRANTED, LOAN_OBTAINED})

# Kept out of profit & loss. Advances and loans are listed here too so
# entries saved before they had their own types stay excluded.
EXCLUDED_CATEGORIES = (
    CAPITAL,
    OWNER_EQUITY,
    SUPPLIER_ADVANCE,
    CUSTOMER_ADVANCE,
    LOANS_RECEIVED,
    LOANS_GIVEN,
)
